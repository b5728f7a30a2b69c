"""Driver observer protocol for progress and error hooks."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from consumer_kit.models.result import DriveResult


@runtime_checkable
class DriverCallback(Protocol):
    """Protocol for driver event observers.

    Implement the methods you care about; missing methods are skipped
    and observer failures are logged, never propagated.
    """

    def on_item_start(self, index: int, value: Any) -> None: ...
    def on_item_end(self, index: int, value: Any) -> None: ...
    def on_item_error(self, index: int, value: Any, error: Exception) -> None: ...
    def on_drive_end(self, result: DriveResult) -> None: ...
