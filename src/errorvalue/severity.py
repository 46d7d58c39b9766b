"""Message severity levels and their display descriptions."""

from __future__ import annotations

from enum import IntEnum


class Severity(IntEnum):
    """Classification of a result message.

    Members compare by increasing severity: ``INFO < WARNING < ERROR``.
    """

    INFO = 0
    WARNING = 1
    ERROR = 2

    @property
    def description(self) -> str:
        """Human-readable label used in payloads and console output."""
        return _DESCRIPTIONS[self]

    @classmethod
    def from_description(cls, description: str) -> Severity:
        """Return the member whose description is exactly ``description``."""
        for member, text in _DESCRIPTIONS.items():
            if text == description:
                return member
        raise ValueError(f"Unknown severity description: {description!r}")


_DESCRIPTIONS: dict[Severity, str] = {
    Severity.INFO: "Information",
    Severity.WARNING: "Warning",
    Severity.ERROR: "Error",
}
