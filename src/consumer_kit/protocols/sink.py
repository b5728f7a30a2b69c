"""Error sink protocol definition."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from consumer_kit.models.errors import ErrorInfo


@runtime_checkable
class ErrorSink(Protocol):
    """Protocol for targets that receive contained errors.

    Plain functions taking a single ``ErrorInfo`` satisfy it.
    """

    def __call__(self, info: ErrorInfo) -> None: ...
