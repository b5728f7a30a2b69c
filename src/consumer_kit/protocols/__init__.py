"""Protocol definitions (extension points) for consumer-kit."""

from .consumer import Consumer
from .driver import DriverCallback
from .sink import ErrorSink

__all__ = [
    "Consumer",
    "DriverCallback",
    "ErrorSink",
]
