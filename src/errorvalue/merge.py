"""Merge algebra: folding one result into another.

Every shape follows the same base rule: the target's ``code`` is overwritten
with the source's, and the source's messages are appended after the
target's. Only ``merge_typed`` can move a payload, and only between results
tagged with the same ``value_type``.

``Result.merge_with`` and ``TypedResult.merge_with`` choose among these from
the operand classes; call them directly when the shapes are known.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from errorvalue.result import Result, TypedResult

logger = logging.getLogger(__name__)

__all__ = [
    "merge_typed",
    "merge_typed_into_untyped",
    "merge_untyped",
    "merge_untyped_into_typed",
]


def merge_untyped[R: Result](target: R, source: Result) -> R:
    """Overwrite ``target.code`` and append ``source``'s messages."""
    target.code = source.code
    target.messages.extend(source.messages)
    logger.debug(
        "Merged result: code=%s, +%d messages (%d total)",
        int(target.code),
        len(source.messages),
        len(target.messages),
    )
    return target


def merge_typed[T, S](target: TypedResult[T], source: TypedResult[S]) -> TypedResult[T]:
    """Merge code and messages; copy the value when the type tags match.

    The value moves only if ``source.value_type == target.value_type`` and
    ``source.value`` is not None. Otherwise ``target.value`` is untouched.
    """
    merge_untyped(target, source)
    if source.value_type == target.value_type and source.value is not None:
        target.value = source.value  # type: ignore[assignment]
    return target


def merge_typed_into_untyped[R: Result, S](target: R, source: TypedResult[S]) -> R:
    """Merge code and messages; the source's value has nowhere to go."""
    return merge_untyped(target, source)


def merge_untyped_into_typed[T](target: TypedResult[T], source: Result) -> TypedResult[T]:
    """Merge code and messages; ``target.value`` is untouched."""
    return merge_untyped(target, source)
