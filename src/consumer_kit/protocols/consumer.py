"""Consumer protocol definition.

A consumer is a unary operation invoked for its side effects.  Any
object with an ``accept`` method satisfies it; plain callables are
adapted by ``consumer_kit.consumers.as_consumer``.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Consumer(Protocol[T_contra]):
    """Protocol for single-argument, no-result callbacks."""

    def accept(self, value: T_contra) -> None:
        """Perform this operation on ``value``.

        Parameters:
            value: The input value.  Implementations must not assume
                ownership of it.

        Raises:
            Exception: Any error raised by the operation propagates to
                the caller unless the consumer is wrapped with
                ``make_safe``.
        """
        ...
