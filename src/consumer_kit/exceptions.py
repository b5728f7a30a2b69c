"""Custom exceptions for consumer-kit."""

from __future__ import annotations

__all__ = [
    "CompositionError",
    "ConsumerKitError",
    "SourceReadError",
]


class ConsumerKitError(Exception):
    """Base exception for all consumer-kit errors."""


class CompositionError(ConsumerKitError, TypeError):
    """Raised when two consumers with incompatible input types are composed."""


class SourceReadError(ConsumerKitError):
    """Raised when a driver cannot open its line source."""
