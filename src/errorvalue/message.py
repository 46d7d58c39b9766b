"""Message: the atomic unit of feedback carried by a result."""

from __future__ import annotations

from typing import Any, NamedTuple

from errorvalue.severity import Severity


class Message(NamedTuple):
    """Immutable ``(text, severity)`` pair with structural equality."""

    text: str
    severity: Severity = Severity.INFO

    def to_dict(self) -> dict[str, str]:
        """Serialize to the wire shape ``{"message", "severity"}``."""
        return {"message": self.text, "severity": self.severity.description}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Message:
        """Parse the wire shape produced by ``to_dict``."""
        return cls(str(data["message"]), Severity.from_description(data["severity"]))


def as_message(item: Message | tuple[str, Severity]) -> Message:
    """Coerce a Message or a plain ``(text, severity)`` tuple into a Message."""
    if isinstance(item, Message):
        return item
    text, severity = item
    return Message(text, Severity(severity))
