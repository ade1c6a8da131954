"""Data models for doc comment extraction."""

from __future__ import annotations

from dataclasses import dataclass, field

# Content of one doc block, marker and one following space removed per line
RawBlock = list[str]


@dataclass
class LocatedBlock:
    """A raw block and the source line it starts on."""

    line_number: int  # 1-based line of the first marker line
    lines: RawBlock


@dataclass
class Parameter:
    """One @param entry."""

    name: str
    types: list[str] = field(default_factory=list)  # ["int"] or ["int", "array"]
    default: str | None = None  # Verbatim token after "="
    description: str = ""

    @property
    def is_union(self) -> bool:
        return len(self.types) > 1

    @property
    def type_text(self) -> str:
        return " | ".join(self.types)


@dataclass
class ReturnSpec:
    """The @return entry."""

    types: list[str] = field(default_factory=list)
    description: str = ""

    @property
    def is_union(self) -> bool:
        return len(self.types) > 1

    @property
    def type_text(self) -> str:
        return " | ".join(self.types)


@dataclass
class FunctionDoc:
    """Parsed documentation for one function."""

    name: str  # Text before the header colon, "" when absent
    description: list[str] = field(default_factory=list)
    parameters: list[Parameter] = field(default_factory=list)
    returns: ReturnSpec | None = None
    line_number: int = 0
    ignored: list[str] = field(default_factory=list)  # Unrecognized tag-section lines


@dataclass
class ValidationResult:
    """Results from documentation validation."""

    errors: list[str] = field(default_factory=list)  # Strict mode fails if non-empty
    warnings: list[str] = field(default_factory=list)  # Logged but allowed


@dataclass
class ExtractionResult:
    """Results from extracting one source."""

    source: str  # File path or "<stdin>"
    functions: list[FunctionDoc] = field(default_factory=list)
