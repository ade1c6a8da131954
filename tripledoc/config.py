"""Settings for the tripledoc command line.

Values come from TRIPLEDOC_* environment variables, overridden by CLI flags.
"""

from __future__ import annotations

import codecs
import os
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError

# Settings field -> environment variable
ENV_VARS = {
    "log_level": "TRIPLEDOC_LOG_LEVEL",
    "encoding": "TRIPLEDOC_ENCODING",
    "strict": "TRIPLEDOC_STRICT",
    "index": "TRIPLEDOC_INDEX",
    "title": "TRIPLEDOC_TITLE",
}


class Settings(BaseModel):
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    encoding: str = Field(default="utf-8", min_length=1)
    strict: bool = False
    index: bool = False
    title: str | None = None

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any
    ) -> Settings:
        """Build settings from the environment, with non-None overrides on top.

        Raises:
            ConfigError: If any value fails validation.
        """
        env = os.environ if environ is None else environ

        values: dict[str, Any] = {}
        for field_name, var in ENV_VARS.items():
            if env.get(var):
                values[field_name] = env[var]
        values.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings: {e}") from e
