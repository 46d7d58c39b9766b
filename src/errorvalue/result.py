"""Result values: status code, ordered messages and an optional payload.

A result is created fresh at the start of an operation, threaded through the
call chain by reference, mutated in place by each step and finally consumed
by one boundary adapter (HTTP response, log sink or caller inspection).

Success is derived from messages only. ``is_ok`` is True iff no message has
``Severity.ERROR``; ``code`` is an independent signal and is never consulted.
"""

from __future__ import annotations

from http import HTTPStatus
import logging
from typing import TYPE_CHECKING, Any, Self, get_origin

from errorvalue import merge
from errorvalue._dev_flags import development_mode_enabled
from errorvalue.errors import ResultTypeError
from errorvalue.message import Message, as_message
from errorvalue.severity import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from errorvalue.config import Config

logger = logging.getLogger(__name__)


class Result:
    """Untyped result: a status code and an ordered list of messages.

    Every mutator returns the instance itself so calls can be chained:

        result = Result().add_message("cache cold", Severity.WARNING).set(code=202)
    """

    __slots__ = ("code", "config", "messages")

    def __init__(
        self,
        *,
        code: int = HTTPStatus.OK,
        messages: Iterable[Message | tuple[str, Severity]] = (),
        config: Config | None = None,
    ) -> None:
        self.code: int = code
        self.messages: list[Message] = [as_message(m) for m in messages]
        self.config = config

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(code={int(self.code)}, is_ok={self.is_ok}, "
            f"messages={self.messages!r})"
        )

    @property
    def is_ok(self) -> bool:
        """True when no message has error severity, regardless of ``code``."""
        return all(m.severity != Severity.ERROR for m in self.messages)

    def errors(self) -> list[str]:
        """Return the text of every error message, in insertion order."""
        return [m.text for m in self.messages if m.severity == Severity.ERROR]

    def warnings(self) -> list[str]:
        """Return the text of every warning message, in insertion order."""
        return [m.text for m in self.messages if m.severity == Severity.WARNING]

    def add_message(self, text: str, severity: Severity = Severity.INFO) -> Self:
        """Append one message. Empty or whitespace text is kept as-is."""
        self.messages.append(Message(text, Severity(severity)))
        return self

    def add_messages(self, messages: Iterable[Message | tuple[str, Severity]]) -> Self:
        """Append each message in order.

        The input is fully consumed before anything is appended.
        """
        self.messages.extend([as_message(m) for m in messages])
        return self

    def set(
        self,
        message: str | None = None,
        severity: Severity = Severity.INFO,
        code: int | None = None,
        exception: BaseException | None = None,
        *,
        development_mode: bool | None = None,
    ) -> Self:
        """Apply several updates at once.

        Args:
            message: Appended with ``severity`` unless None or whitespace-only.
            severity: Severity for ``message``.
            code: Overwrites ``code`` when not None.
            exception: Recorded as an error message only in development mode.
                The direct inner cause's text is used when there is one.
            development_mode: Per-call override. Falls back to ``config`` and
                then to the process environment, read at call time.
        """
        if message is not None and message.strip():
            self.add_message(message, severity)

        if code is not None:
            self.code = code

        if exception is not None:
            if self._development_mode(development_mode):
                text = _exception_text(exception)
                if text.strip():
                    self.add_message(text, Severity.ERROR)
            else:
                logger.debug(
                    "Suppressed %s details outside development mode",
                    type(exception).__name__,
                )

        return self

    def merge_with(self, other: Result) -> Self:
        """Fold ``other``'s code and messages into this result.

        ``code`` is overwritten with ``other.code``; ``other``'s messages are
        appended after this result's. Any payload on ``other`` is dropped.
        """
        if isinstance(other, TypedResult):
            return merge.merge_typed_into_untyped(self, other)
        return merge.merge_untyped(self, other)

    def to_payload(self, value: Any = None) -> dict[str, Any]:
        """Return the API body ``{"value"?, "messages"}`` for this result.

        For a TypedResult ``value`` defaults to the carried payload.
        """
        from errorvalue.responses import to_payload

        return to_payload(self, value)

    def _development_mode(self, override: bool | None) -> bool:
        if override is not None:
            return override
        if self.config is not None:
            return self.config.is_development()
        return development_mode_enabled()


class TypedResult[T](Result):
    """Result that also carries an optional payload of type ``T``.

    ``value_type`` is an explicit tag, compared on merge to decide whether a
    source's value may replace this one. It is also the target type when a
    JSON body is read into the result.

        users = TypedResult(User)
        users.set(value=load_user(), message="loaded")
    """

    __slots__ = ("value", "value_type")

    def __init__(
        self,
        value_type: type[T] | Any,
        *,
        value: T | None = None,
        code: int = HTTPStatus.OK,
        messages: Iterable[Message | tuple[str, Severity]] = (),
        config: Config | None = None,
    ) -> None:
        if not callable(value_type) and get_origin(value_type) is None:
            raise ResultTypeError(
                f"value_type must be a type, got {value_type!r}",
                hint="Pass the payload class, e.g. TypedResult(int).",
            )
        super().__init__(code=code, messages=messages, config=config)
        self.value_type = value_type
        self.value: T | None = value

    def __repr__(self) -> str:
        type_name = getattr(self.value_type, "__name__", repr(self.value_type))
        return (
            f"TypedResult[{type_name}](code={int(self.code)}, is_ok={self.is_ok}, "
            f"value={self.value!r}, messages={self.messages!r})"
        )

    def set(  # type: ignore[override]
        self,
        value: T | None = None,
        message: str | None = None,
        severity: Severity = Severity.INFO,
        code: int | None = None,
        exception: BaseException | None = None,
        *,
        development_mode: bool | None = None,
    ) -> Self:
        """Apply the untyped updates, then overwrite ``value`` if not None.

        Falsy payloads such as ``0`` or ``""`` are real values and are kept.
        """
        super().set(
            message,
            severity,
            code,
            exception,
            development_mode=development_mode,
        )
        if value is not None:
            self.value = value
        return self

    def merge_with(self, other: Result) -> Self:
        """Fold ``other`` into this result, keeping this result's payload type.

        ``code`` and messages merge as for untyped results. The value is
        replaced only when ``other`` is a TypedResult with the same
        ``value_type`` tag and a non-None value.
        """
        if isinstance(other, TypedResult):
            return merge.merge_typed(self, other)
        return merge.merge_untyped_into_typed(self, other)


def _exception_text(exc: BaseException) -> str:
    """Return the message of ``exc``'s direct inner cause, else of ``exc``."""
    inner = exc.__cause__
    if inner is None and not exc.__suppress_context__:
        inner = exc.__context__
    source = inner if inner is not None else exc
    return str(source)
