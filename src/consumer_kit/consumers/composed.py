"""Sequential composition of consumers."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Any, TypeVar

from consumer_kit.exceptions import CompositionError

from .base import BaseConsumer, ConsumerLike, as_consumer

T = TypeVar("T")


def _narrower_type(first: BaseConsumer[Any], second: BaseConsumer[Any]) -> type | None:
    """Return the more specific of two declared input types.

    Undeclared types (``None``) are compatible with anything.
    """
    first_type = getattr(first, "input_type", None)
    second_type = getattr(second, "input_type", None)
    if first_type is None:
        return second_type
    if second_type is None:
        return first_type
    if issubclass(first_type, second_type):
        return first_type
    if issubclass(second_type, first_type):
        return second_type
    msg = (
        f"Cannot compose {first.name!r} accepting {first_type.__name__} "
        f"with {second.name!r} accepting {second_type.__name__}"
    )
    raise CompositionError(msg)


@dataclass(frozen=True, slots=True)
class ComposedConsumer(BaseConsumer[T]):
    """A consumer running ``first`` and then ``second`` on the same value.

    ``first`` always completes before ``second`` starts.  If ``first``
    raises, the error propagates and ``second`` is not invoked for that
    value.  Errors from ``second`` propagate as well; nothing is caught
    here.

    Nested compositions are flattened into ``parts`` and run in a loop,
    so chain length is not bounded by the interpreter's recursion limit.
    Two composed consumers with the same ``parts`` compare equal however
    they were grouped.

    Raises:
        CompositionError: On construction, if both constituents declare
            input types and neither is a subclass of the other.
    """

    first: BaseConsumer[T] = field(repr=False, compare=False)
    second: BaseConsumer[T] = field(repr=False, compare=False)
    parts: tuple[BaseConsumer[T], ...] = field(init=False, default=())
    input_type: type | None = field(init=False, default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "first", as_consumer(self.first))
        object.__setattr__(self, "second", as_consumer(self.second))
        object.__setattr__(self, "input_type", _narrower_type(self.first, self.second))
        object.__setattr__(self, "parts", _parts_of(self.first) + _parts_of(self.second))

    @property
    def name(self) -> str:
        head, *rest = self.parts
        return head.name + "".join(f".and_then({part.name})" for part in rest)

    def accept(self, value: T) -> None:
        for part in self.parts:
            part.accept(value)


def _parts_of(consumer: BaseConsumer[T]) -> tuple[BaseConsumer[T], ...]:
    if isinstance(consumer, ComposedConsumer):
        return consumer.parts
    return (consumer,)


def compose(first: ConsumerLike[T], second: ConsumerLike[T]) -> ComposedConsumer[T]:
    """Compose two consumers into one that runs them in order.

    Parameters:
        first: Consumer invoked first.
        second: Consumer invoked after ``first`` completes normally.

    Returns:
        A ``ComposedConsumer`` over both.

    Raises:
        TypeError: If either argument is not callable.
        CompositionError: If their declared input types are incompatible.
    """
    return ComposedConsumer(as_consumer(first), as_consumer(second))


def compose_all(*consumers: ConsumerLike[T]) -> BaseConsumer[T]:
    """Compose one or more consumers left to right.

    ``compose_all(a, b, c)`` is ``compose(compose(a, b), c)``.  A single
    argument is returned as a consumer without wrapping.

    Raises:
        ValueError: If no consumers are given.
    """
    if not consumers:
        msg = "compose_all() requires at least one consumer"
        raise ValueError(msg)
    return reduce(compose, consumers[1:], as_consumer(consumers[0]))
