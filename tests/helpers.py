"""Shared test helpers."""

from __future__ import annotations


def raise_wrapped(outer: str, inner: str | None) -> BaseException:
    """Return a raised RuntimeError chained to an inner ValueError.

    With ``inner=None`` the chain is cut with ``raise ... from None``.
    """
    try:
        try:
            raise ValueError(inner)
        except ValueError as cause:
            if inner is None:
                raise RuntimeError(outer) from None
            raise RuntimeError(outer) from cause
    except RuntimeError as exc:
        return exc
