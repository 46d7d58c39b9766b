"""Exception hierarchy for errorvalue.

Result values carry operational failures as data. These exceptions cover
library misuse only (bad configuration, invalid type tags), never the
outcome of an operation being reported through a result.
"""

from __future__ import annotations


class ErrorValueError(Exception):
    """Base exception for all errorvalue errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(ErrorValueError):
    """Configuration validation or resolution failed."""


class ResultTypeError(ErrorValueError, TypeError):
    """A typed result was constructed with an unusable value type tag."""
