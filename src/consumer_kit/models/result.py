"""Summary model returned by the drivers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorInfo


class DriveResult(BaseModel):
    """Outcome of supplying a sequence of values to a consumer.

    ``processed`` counts every value handed to the consumer, including
    the ones that failed.  ``errors`` is only populated when the driver
    runs with ``on_error="skip"``.
    """

    processed: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    errors: list[ErrorInfo] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def succeeded(self) -> int:
        """Number of values consumed without error."""
        return self.processed - self.failed

    @property
    def ok(self) -> bool:
        return self.failed == 0
