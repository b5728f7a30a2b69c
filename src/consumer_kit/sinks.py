"""Ready-made error sinks for ``make_safe``."""

from __future__ import annotations

import logging
import sys

from consumer_kit.models.errors import ErrorInfo

logger = logging.getLogger(__name__)


def logging_sink(info: ErrorInfo) -> None:
    """Log a contained error at ERROR level on the ``consumer_kit.sinks`` logger."""
    logger.error(
        "Consumer %s failed on %s: %s",
        info.consumer or "<anonymous>",
        info.value_repr,
        info.description,
    )


def stderr_sink(info: ErrorInfo) -> None:
    """Print a contained error to standard error."""
    print(f"Error processing {info.value_repr}: {info.description}", file=sys.stderr)


class CollectingSink:
    """An error sink that keeps every ``ErrorInfo`` it receives.

    Usage::

        sink = CollectingSink()
        for_each(["1", "x"], make_safe(parse_int, sink))
        assert len(sink) == 1
    """

    __slots__ = ("_errors",)

    def __init__(self) -> None:
        self._errors: list[ErrorInfo] = []

    def __call__(self, info: ErrorInfo) -> None:
        self._errors.append(info)

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"CollectingSink(errors={len(self._errors)})"

    @property
    def errors(self) -> list[ErrorInfo]:
        """A copy of the collected error reports, oldest first."""
        return list(self._errors)

    def clear(self) -> None:
        self._errors.clear()
