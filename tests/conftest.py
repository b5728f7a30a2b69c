"""Shared fixtures for consumer-kit tests."""

from __future__ import annotations

from typing import Any

import pytest

from consumer_kit.consumers import FunctionConsumer
from consumer_kit.models.result import DriveResult


class Recorder:
    """A shared event log for asserting the order of consumer side effects.

    Every consumer created by a recorder appends ``(label, value)`` to
    the same ``events`` list when invoked.
    """

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    @property
    def labels(self) -> list[str]:
        return [label for label, _ in self.events]

    def consumer(self, label: str) -> FunctionConsumer[Any]:
        """A consumer that records its invocation."""

        def _record(value: Any) -> None:
            self.events.append((label, value))

        return FunctionConsumer(_record, label=label)

    def failing(self, label: str, error: Exception | None = None) -> FunctionConsumer[Any]:
        """A consumer that records its invocation and then raises."""

        def _fail(value: Any) -> None:
            self.events.append((label, value))
            raise error if error is not None else RuntimeError(f"{label} failed on {value!r}")

        return FunctionConsumer(_fail, label=label)


class RecordingObserver:
    """A driver observer that records which hooks were called."""

    def __init__(self) -> None:
        self.calls: list[str] = []
        self.args: dict[str, list[tuple[Any, ...]]] = {}

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append(method)
        self.args.setdefault(method, []).append(args)

    def on_item_start(self, index: int, value: Any) -> None:
        self._record("on_item_start", index, value)

    def on_item_end(self, index: int, value: Any) -> None:
        self._record("on_item_end", index, value)

    def on_item_error(self, index: int, value: Any, error: Exception) -> None:
        self._record("on_item_error", index, value, error)

    def on_drive_end(self, result: DriveResult) -> None:
        self._record("on_drive_end", result)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()
