"""Internal helpers for the development-mode flag.

Centralizes how the environment is consulted so that every caller applies
the same exact-match semantics.
"""

from __future__ import annotations

import os

__all__ = [
    "DEFAULT_DEVELOPMENT_VALUE",
    "DEFAULT_ENVIRONMENT_VARIABLE",
    "development_mode_enabled",
]

DEFAULT_ENVIRONMENT_VARIABLE = "ERRORVALUE_ENVIRONMENT"
DEFAULT_DEVELOPMENT_VALUE = "Development"


def development_mode_enabled(
    *,
    override: bool | None = None,
    variable: str = DEFAULT_ENVIRONMENT_VARIABLE,
    expected: str = DEFAULT_DEVELOPMENT_VALUE,
) -> bool:
    """Return True when exception details may be exposed in messages.

    - If ``override`` is provided, it takes precedence.
    - Otherwise, returns True when the environment variable ``variable`` is
      exactly ``expected`` (case-sensitive, no trimming).

    The environment is read on every call, never cached at import time.
    """
    if override is not None:
        return bool(override)
    return os.getenv(variable) == expected
