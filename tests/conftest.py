"""Pytest configuration and fixtures.

Provides environment isolation for the development-mode flag. Fixtures here
are autouse unless noted.
"""

from __future__ import annotations

import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_errorvalue_env(monkeypatch):
    """Clear ERRORVALUE_* variables so development mode starts disabled.

    Runs per test, after any ``.env`` file was loaded at import time.
    """
    for key in list(os.environ.keys()):
        if key.startswith("ERRORVALUE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Fixtures (opt-in)
# =============================================================================


@pytest.fixture
def development_env(monkeypatch):
    """Mark the process as a development deployment."""
    monkeypatch.setenv("ERRORVALUE_ENVIRONMENT", "Development")
