"""Safe-invocation adapter: turns a raising consumer into a non-raising one."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeVar

from consumer_kit.models.errors import ErrorInfo
from consumer_kit.protocols.sink import ErrorSink
from consumer_kit.sinks import logging_sink

from .base import BaseConsumer, ConsumerLike, as_consumer

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class SafeConsumer(BaseConsumer[T]):
    """A consumer that never raises.

    Invokes ``wrapped`` and, if it raises an ``Exception``, converts the
    error into an ``ErrorInfo`` and delivers it to ``on_error`` exactly
    once.  A failing sink is logged and ignored.  ``KeyboardInterrupt``
    and other non-``Exception`` signals are not contained.

    Composing a ``SafeConsumer`` first means the second consumer always
    runs, even when the wrapped operation failed.
    """

    wrapped: BaseConsumer[T]
    on_error: ErrorSink = logging_sink

    def __post_init__(self) -> None:
        object.__setattr__(self, "wrapped", as_consumer(self.wrapped))
        if not callable(self.on_error):
            msg = f"on_error must be callable, got {type(self.on_error).__name__}"
            raise TypeError(msg)

    @property
    def name(self) -> str:
        return f"safe({self.wrapped.name})"

    @property
    def input_type(self) -> type | None:
        return getattr(self.wrapped, "input_type", None)

    def accept(self, value: T) -> None:
        try:
            self.wrapped.accept(value)
        except Exception as exc:
            info = ErrorInfo.from_exception(exc, value, consumer=self.wrapped.name)
            logger.debug("Contained %s from %s", info.kind, info.consumer)
            self._report(info)

    def _report(self, info: ErrorInfo) -> None:
        try:
            self.on_error(info)
        except Exception:
            logger.warning(
                "Error sink %r failed while reporting %s",
                self.on_error,
                info.description,
                exc_info=True,
            )


def make_safe(callback: ConsumerLike[T], on_error: ErrorSink | None = None) -> SafeConsumer[T]:
    """Wrap ``callback`` so that it never raises.

    Parameters:
        callback: A consumer or plain callable that may raise.
        on_error: Sink receiving one ``ErrorInfo`` per failing call.
            Defaults to ``logging_sink``.

    Returns:
        A ``SafeConsumer`` around ``callback``.

    Raises:
        TypeError: If ``callback`` or ``on_error`` is not callable.
    """
    return SafeConsumer(as_consumer(callback), on_error if on_error is not None else logging_sink)
