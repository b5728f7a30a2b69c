"""Error report model delivered to error sinks."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return f"<unrepresentable {type(value).__name__}>"


class ErrorInfo(BaseModel):
    """A description of an error raised by a consumer.

    Built by the safe adapter and by drivers running with
    ``on_error="skip"``.  The original exception is kept on ``error``
    for inspection but is excluded from serialization.
    """

    kind: str
    message: str
    value_repr: str
    consumer: str = ""
    error: Exception | None = Field(default=None, exclude=True, repr=False)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def description(self) -> str:
        """``"<kind>: <message>"``, or just the kind for empty messages."""
        if not self.message:
            return self.kind
        return f"{self.kind}: {self.message}"

    @classmethod
    def from_exception(cls, exc: Exception, value: Any, consumer: str = "") -> ErrorInfo:
        """Describe ``exc`` raised while consuming ``value``.

        Never raises, even when ``value`` or ``exc`` cannot be rendered
        as text.

        Parameters:
            exc: The exception that was caught.
            value: The input the consumer was invoked with.
            consumer: Optional name of the failing consumer.

        Returns:
            A frozen ``ErrorInfo``.
        """
        try:
            message = str(exc)
        except Exception:
            message = ""
        return cls(
            kind=type(exc).__name__,
            message=message,
            value_repr=_safe_repr(value),
            consumer=consumer,
            error=exc,
        )
