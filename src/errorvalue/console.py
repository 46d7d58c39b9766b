"""Debug utility: dump a result as indented JSON to a logging sink."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

if TYPE_CHECKING:
    from errorvalue.result import Result

_log = logging.getLogger(__name__)

_JSONABLE: TypeAdapter[Any] = TypeAdapter(Any)

__all__ = ["format_for_console", "log_to_console"]


def format_for_console(result: Result) -> str:
    """Render ``IsOk``, ``Code``, ``Messages`` and, when present, ``Value``.

    ``Value`` is omitted for untyped results and when the payload is None.
    """
    pretty: dict[str, Any] = {
        "IsOk": result.is_ok,
        "Code": int(result.code),
        "Messages": [
            {"Message": m.text, "Severity": m.severity.description}
            for m in result.messages
        ],
    }
    value = getattr(result, "value", None)
    if value is not None:
        pretty["Value"] = value
    return json.dumps(_JSONABLE.dump_python(pretty, mode="json"), indent=2)


def log_to_console(result: Result, logger: logging.Logger | None = None) -> str:
    """Write ``format_for_console(result)`` at INFO and return the text."""
    text = format_for_console(result)
    (logger or _log).info("%s", text)
    return text
