"""errorvalue: a result value carrying status code, messages and payload.

Public API:
    - Result: untyped result (code + ordered messages)
    - TypedResult: result with an optional payload of a tagged type
    - Message, Severity: message model
    - Config: development-mode configuration
    - from_http_response / from_http_response_typed: inbound httpx adapter
    - to_api_response / to_minimal_api_response / to_payload: outbound adapters
    - log_to_console: debug dump as indented JSON
"""

from __future__ import annotations

import logging

from errorvalue.config import Config
from errorvalue.console import format_for_console, log_to_console
from errorvalue.errors import ConfigurationError, ErrorValueError, ResultTypeError
from errorvalue.http import (
    from_http_response,
    from_http_response_typed,
    from_http_response_typed_sync,
)
from errorvalue.merge import (
    merge_typed,
    merge_typed_into_untyped,
    merge_untyped,
    merge_untyped_into_typed,
)
from errorvalue.message import Message
from errorvalue.responses import to_api_response, to_minimal_api_response, to_payload
from errorvalue.result import Result, TypedResult
from errorvalue.severity import Severity

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("errorvalue")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("errorvalue").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "ErrorValueError",
    "Message",
    "Result",
    "ResultTypeError",
    "Severity",
    "TypedResult",
    "format_for_console",
    "from_http_response",
    "from_http_response_typed",
    "from_http_response_typed_sync",
    "log_to_console",
    "merge_typed",
    "merge_typed_into_untyped",
    "merge_untyped",
    "merge_untyped_into_typed",
    "to_api_response",
    "to_minimal_api_response",
    "to_payload",
]
