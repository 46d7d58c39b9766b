"""Inbound HTTP adapter: fold an outbound call's response into a result.

Transport failures, JSON decoding errors and payload validation errors are
not handled here; they propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter

from errorvalue.severity import Severity

if TYPE_CHECKING:
    import httpx

    from errorvalue.result import Result, TypedResult

logger = logging.getLogger(__name__)

__all__ = [
    "from_http_response",
    "from_http_response_typed",
    "from_http_response_typed_sync",
]


def from_http_response[R: Result](
    result: R, response: httpx.Response, service_name: str
) -> R:
    """Copy the status code and record a failure message if the call failed.

    Sets ``result.code`` to the response status. A non-2xx response appends
    the error ``"Error from {service_name}: {reason phrase}"``.
    """
    result.code = response.status_code
    if not response.is_success:
        result.add_message(
            f"Error from {service_name}: {response.reason_phrase}",
            Severity.ERROR,
        )
    logger.debug("Ingested %s response from %s", response.status_code, service_name)
    return result


async def from_http_response_typed[T](
    result: TypedResult[T], response: httpx.Response, service_name: str
) -> TypedResult[T]:
    """Apply ``from_http_response`` then read the JSON body into ``value``.

    The body is awaited and validated against ``result.value_type``. An empty
    body leaves ``value`` untouched.
    """
    from_http_response(result, response, service_name)
    body = await response.aread()
    _assign_body(result, body)
    return result


def from_http_response_typed_sync[T](
    result: TypedResult[T], response: httpx.Response, service_name: str
) -> TypedResult[T]:
    """Blocking counterpart of ``from_http_response_typed``."""
    from_http_response(result, response, service_name)
    body = response.read()
    _assign_body(result, body)
    return result


def _assign_body(result: TypedResult[Any], body: bytes) -> None:
    if not body:
        return
    adapter: TypeAdapter[Any] = TypeAdapter(result.value_type)
    result.value = adapter.validate_json(body)
