"""Drivers that supply sequences of values to consumers.

Each driver hands elements to a consumer one at a time, in order, and
applies an ``on_error`` policy to errors that escape the consumer:

- ``"raise"`` re-raises the first error unchanged; later elements are
  not processed.
- ``"skip"`` records an ``ErrorInfo``, logs a warning and continues.

Wrap the consumer with ``make_safe`` to contain errors inside the
consumer itself instead.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path
from typing import IO, Literal, TypeVar

from consumer_kit._callbacks import notify_observers
from consumer_kit.consumers.base import ConsumerLike, as_consumer
from consumer_kit.exceptions import SourceReadError
from consumer_kit.models.errors import ErrorInfo
from consumer_kit.models.result import DriveResult
from consumer_kit.protocols.driver import DriverCallback

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

OnError = Literal["raise", "skip"]
_ON_ERROR_CHOICES = ("raise", "skip")


def for_each(
    values: Iterable[T],
    consumer: ConsumerLike[T],
    *,
    on_error: OnError = "raise",
    callbacks: Sequence[DriverCallback] | None = None,
) -> DriveResult:
    """Supply each element of ``values`` to ``consumer`` in iteration order.

    Parameters:
        values: Any iterable; it is consumed lazily, once.
        consumer: A consumer or plain one-argument callable.
        on_error: ``"raise"`` (default) or ``"skip"``.
        callbacks: Optional ``DriverCallback`` observers.

    Returns:
        A ``DriveResult`` summarizing the run.

    Raises:
        ValueError: If ``on_error`` is not a known policy.
        Exception: Whatever the consumer raises, when ``on_error="raise"``.
    """
    if on_error not in _ON_ERROR_CHOICES:
        msg = f"on_error must be one of {_ON_ERROR_CHOICES}, got {on_error!r}"
        raise ValueError(msg)
    target = as_consumer(consumer)
    observers: list[DriverCallback] = list(callbacks or [])

    processed = 0
    errors: list[ErrorInfo] = []
    for index, value in enumerate(values):
        notify_observers(observers, "on_item_start", index, value, logger=logger)
        processed += 1
        try:
            target.accept(value)
        except Exception as exc:
            notify_observers(observers, "on_item_error", index, value, exc, logger=logger)
            if on_error == "raise":
                raise
            info = ErrorInfo.from_exception(exc, value, consumer=target.name)
            errors.append(info)
            logger.warning(
                "Consumer %s failed on item %d; skipping (on_error='skip'): %s",
                target.name,
                index,
                info.description,
            )
            continue
        notify_observers(observers, "on_item_end", index, value, logger=logger)

    result = DriveResult(processed=processed, failed=len(errors), errors=errors)
    logger.debug("Drove %d items through %s (%d failed)", processed, target.name, len(errors))
    notify_observers(observers, "on_drive_end", result, logger=logger)
    return result


def for_each_entry(
    mapping: Mapping[K, V],
    consumer: ConsumerLike[tuple[K, V]],
    *,
    on_error: OnError = "raise",
    callbacks: Sequence[DriverCallback] | None = None,
) -> DriveResult:
    """Supply each ``(key, value)`` pair of ``mapping`` in mapping order."""
    return for_each(mapping.items(), consumer, on_error=on_error, callbacks=callbacks)


def _iter_lines(stream: IO[str], keep_newlines: bool, label: str) -> Iterator[str]:
    lines = iter(stream)
    while True:
        try:
            line = next(lines)
        except StopIteration:
            return
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Cannot read lines from {label}"
            raise SourceReadError(msg) from e
        yield line if keep_newlines else line.rstrip("\r\n")


def for_each_line(
    source: str | os.PathLike[str] | IO[str],
    consumer: ConsumerLike[str],
    *,
    keep_newlines: bool = False,
    encoding: str = "utf-8",
    on_error: OnError = "raise",
    callbacks: Sequence[DriverCallback] | None = None,
) -> DriveResult:
    """Supply each line of a text file or stream to ``consumer``.

    Files opened from a path are closed when the run ends; streams
    passed in are left open.

    Parameters:
        source: A filesystem path or an open text stream.
        consumer: A consumer or plain callable receiving each line.
        keep_newlines: Keep trailing line terminators (default strips them).
        encoding: Encoding used when ``source`` is a path.
        on_error: ``"raise"`` (default) or ``"skip"``.
        callbacks: Optional ``DriverCallback`` observers.

    Returns:
        A ``DriveResult`` summarizing the run.

    Raises:
        SourceReadError: If ``source`` cannot be opened, read or decoded.
            Raised regardless of ``on_error``; lines already supplied
            stay consumed.
    """
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        try:
            stream = path.open(encoding=encoding)
        except OSError as e:
            msg = f"Cannot read lines from {path}"
            raise SourceReadError(msg) from e
        with stream:
            return for_each(
                _iter_lines(stream, keep_newlines, str(path)),
                consumer,
                on_error=on_error,
                callbacks=callbacks,
            )
    return for_each(
        _iter_lines(source, keep_newlines, str(getattr(source, "name", "<stream>"))),
        consumer,
        on_error=on_error,
        callbacks=callbacks,
    )
