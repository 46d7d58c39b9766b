"""Outbound adapters: turn a result into an API response.

Body shape, shared by every adapter:

    {"value": <payload, omitted when absent>,
     "messages": [{"message": str, "severity": <description>}]}

The HTTP status is always ``result.code``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.responses import JSONResponse as StarletteJSONResponse

if TYPE_CHECKING:
    from errorvalue.result import Result

__all__ = ["to_api_response", "to_minimal_api_response", "to_payload"]


def to_payload(result: Result, value: Any = None) -> dict[str, Any]:
    """Build the response body for ``result``.

    Args:
        result: Source of the messages.
        value: Explicit payload. For a TypedResult it defaults to
            ``result.value``; an untyped result has no payload otherwise.

    Returns:
        Dict with a ``messages`` list and, only when a payload is present,
        a ``value`` key.
    """
    if value is None:
        value = getattr(result, "value", None)
    messages = [m.to_dict() for m in result.messages]
    if value is None:
        return {"messages": messages}
    return {"value": value, "messages": messages}


def to_api_response(result: Result, value: Any = None) -> JSONResponse:
    """Return a FastAPI ``JSONResponse`` with status ``result.code``."""
    body = jsonable_encoder(to_payload(result, value))
    return JSONResponse(content=body, status_code=int(result.code))


def to_minimal_api_response(
    result: Result, value: Any = None
) -> StarletteJSONResponse:
    """Return a Starlette ``JSONResponse`` with status ``result.code``.

    For plain Starlette routes and other ASGI handlers that do not depend on
    FastAPI's response classes.
    """
    body = jsonable_encoder(to_payload(result, value))
    return StarletteJSONResponse(content=body, status_code=int(result.code))
