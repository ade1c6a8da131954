"""Exceptions raised at the I/O and configuration boundary.

Parsing and rendering never raise: malformed doc blocks degrade to
records with empty fields instead.
"""

from __future__ import annotations


class TripledocError(Exception):
    """Base exception for tripledoc."""

    pass


class ConfigError(TripledocError):
    """Raised when settings from the environment or CLI are invalid."""

    pass


class SourceReadError(TripledocError):
    """Raised when an input source cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
