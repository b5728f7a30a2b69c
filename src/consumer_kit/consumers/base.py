"""Base consumer type and adaptation of plain callables."""

from __future__ import annotations

import types
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, Union, overload

from consumer_kit.protocols.consumer import Consumer

if TYPE_CHECKING:
    from consumer_kit.protocols.sink import ErrorSink

    from .composed import ComposedConsumer
    from .safe import SafeConsumer

T = TypeVar("T")

ConsumerFn = Callable[[T], Any]
ConsumerLike = Union["BaseConsumer[T]", Consumer[T], ConsumerFn[T]]


class BaseConsumer(ABC, Generic[T]):
    """Abstract base for consumers.

    Subclasses implement ``accept``.  Instances are callable, so a
    consumer can be passed anywhere a plain one-argument function is
    expected, and they compose with ``and_then`` and ``safe``.
    """

    __slots__ = ()

    @abstractmethod
    def accept(self, value: T) -> None:
        """Perform this operation on ``value``."""

    def __call__(self, value: T) -> None:
        self.accept(value)

    @property
    def name(self) -> str:
        """Human-readable name used in error reports."""
        return type(self).__name__

    def and_then(self, after: ConsumerLike[T]) -> ComposedConsumer[T]:
        """Return a consumer that runs ``self`` and then ``after`` on the same value."""
        from .composed import compose

        return compose(self, after)

    def safe(self, on_error: ErrorSink | None = None) -> SafeConsumer[T]:
        """Return a never-raising version of this consumer reporting to ``on_error``."""
        from .safe import make_safe

        return make_safe(self, on_error)


def _callable_name(fn: Any) -> str:
    name = getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None)
    if isinstance(name, str):
        return name
    return repr(fn)


def _check_input_type(input_type: Any) -> None:
    if input_type is None:
        return
    if not isinstance(input_type, type) or isinstance(input_type, types.GenericAlias):
        msg = f"input_type must be a plain class, got {input_type!r}"
        raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class FunctionConsumer(BaseConsumer[T]):
    """A consumer backed by a plain Python callable.

    The callable's return value, if any, is discarded.

    Parameters:
        fn: The one-argument callable to invoke.
        label: Optional display name.  Defaults to the callable's
            qualified name.
        input_type: Optional class of accepted values, checked when
            composing (not on every call).
    """

    fn: ConsumerFn[T]
    label: str | None = None
    input_type: type | None = None

    def __post_init__(self) -> None:
        if not callable(self.fn):
            msg = f"FunctionConsumer requires a callable, got {type(self.fn).__name__}"
            raise TypeError(msg)
        _check_input_type(self.input_type)

    @property
    def name(self) -> str:
        return self.label or _callable_name(self.fn)

    def accept(self, value: T) -> None:
        self.fn(value)


def as_consumer(obj: ConsumerLike[T]) -> BaseConsumer[T]:
    """Coerce ``obj`` into a ``BaseConsumer``.

    ``BaseConsumer`` instances are returned unchanged.  Objects with an
    ``accept`` method and plain callables are wrapped in a
    ``FunctionConsumer``.

    Raises:
        TypeError: If ``obj`` is neither a consumer nor callable.
    """
    if isinstance(obj, BaseConsumer):
        return obj
    if isinstance(obj, Consumer):
        return FunctionConsumer(obj.accept, label=type(obj).__name__)
    if callable(obj):
        return FunctionConsumer(obj)
    msg = f"Expected a consumer or callable, got {type(obj).__name__}"
    raise TypeError(msg)


def invoke(callback: ConsumerLike[T], value: T) -> None:
    """Invoke ``callback`` on ``value``.

    Errors raised by the callback propagate unchanged.
    """
    as_consumer(callback).accept(value)


@overload
def consumer(fn: ConsumerFn[T], /) -> FunctionConsumer[T]: ...


@overload
def consumer(
    fn: None = None,
    /,
    *,
    name: str | None = ...,
    input_type: type | None = ...,
) -> Callable[[ConsumerFn[T]], FunctionConsumer[T]]: ...


def consumer(
    fn: ConsumerFn[T] | None = None,
    /,
    *,
    name: str | None = None,
    input_type: type | None = None,
) -> FunctionConsumer[T] | Callable[[ConsumerFn[T]], FunctionConsumer[T]]:
    """Decorator turning a function into a ``FunctionConsumer``.

    Can be used with or without arguments::

        @consumer
        def shout(text):
            print(text.upper())

        @consumer(name="length", input_type=str)
        def print_length(text):
            print(f"Length: {len(text)}")

        shout.and_then(print_length)("hello")
    """

    def _wrap(func: ConsumerFn[T]) -> FunctionConsumer[T]:
        return FunctionConsumer(func, label=name, input_type=input_type)

    if fn is not None:
        return _wrap(fn)
    return _wrap
