"""Error hierarchy for the breeze compiler."""

from __future__ import annotations


class BreezeError(Exception):
    """Base error for all breeze errors."""


class ConfigError(BreezeError):
    """Raised when a configuration value cannot be understood."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        self.key = key
        super().__init__(message)


class ParseError(BreezeError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)
