"""Data models for consumer-kit."""

from .errors import ErrorInfo
from .result import DriveResult

__all__ = [
    "DriveResult",
    "ErrorInfo",
]
