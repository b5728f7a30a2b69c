"""Tests for FunctionConsumer, as_consumer, invoke and the @consumer decorator."""

from __future__ import annotations

import dataclasses
from functools import partial

import pytest

from consumer_kit.consumers import (
    BaseConsumer,
    ComposedConsumer,
    FunctionConsumer,
    SafeConsumer,
    as_consumer,
    consumer,
    invoke,
)
from consumer_kit.protocols.consumer import Consumer
from tests.conftest import Recorder


class Appender:
    """A user-defined class satisfying the Consumer protocol."""

    def __init__(self) -> None:
        self.seen: list[object] = []

    def accept(self, value: object) -> None:
        self.seen.append(value)


class TestInvoke:
    """invoke() calls the callback on the value and propagates errors."""

    def test_invokes_consumer(self, recorder: Recorder) -> None:
        invoke(recorder.consumer("a"), 42)
        assert recorder.events == [("a", 42)]

    def test_invokes_plain_callable(self) -> None:
        seen: list[int] = []
        invoke(seen.append, 7)
        assert seen == [7]

    def test_returns_none(self) -> None:
        assert invoke(lambda v: v * 2, 3) is None

    def test_error_propagates_unchanged(self) -> None:
        error = ValueError("bad input")

        def _boom(value: object) -> None:
            raise error

        with pytest.raises(ValueError) as exc_info:
            invoke(_boom, "x")
        assert exc_info.value is error

    def test_non_callable_rejected(self) -> None:
        with pytest.raises(TypeError, match="consumer or callable"):
            invoke(42, "x")  # type: ignore[arg-type]

    def test_same_value_object_is_passed(self) -> None:
        payload = {"k": 1}
        received: list[object] = []
        invoke(received.append, payload)
        assert received[0] is payload


class TestFunctionConsumer:
    """FunctionConsumer adapts plain callables."""

    def test_accept_and_call_are_equivalent(self) -> None:
        seen: list[str] = []
        c = FunctionConsumer(seen.append)
        c.accept("a")
        c("b")
        assert seen == ["a", "b"]

    def test_return_value_discarded(self) -> None:
        c = FunctionConsumer(lambda v: v + 1)
        assert c(1) is None

    def test_name_defaults_to_qualname(self) -> None:
        def shout(text: str) -> None:
            pass

        assert FunctionConsumer(shout).name.endswith("shout")

    def test_name_of_builtin(self) -> None:
        assert FunctionConsumer(print).name == "print"

    def test_name_falls_back_to_repr(self) -> None:
        fn = partial(print, end="")
        assert FunctionConsumer(fn).name == repr(fn)

    def test_label_overrides_name(self) -> None:
        assert FunctionConsumer(print, label="printer").name == "printer"

    def test_immutable(self) -> None:
        c = FunctionConsumer(print)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.label = "other"  # type: ignore[misc]

    def test_rejects_non_callable(self) -> None:
        with pytest.raises(TypeError, match="requires a callable"):
            FunctionConsumer("not callable")  # type: ignore[arg-type]

    def test_rejects_parameterized_input_type(self) -> None:
        with pytest.raises(TypeError, match="input_type"):
            FunctionConsumer(print, input_type=list[int])  # type: ignore[arg-type]

    def test_rejects_non_class_input_type(self) -> None:
        with pytest.raises(TypeError, match="input_type"):
            FunctionConsumer(print, input_type="str")  # type: ignore[arg-type]

    def test_satisfies_protocol(self) -> None:
        assert isinstance(FunctionConsumer(print), Consumer)

    def test_reusable(self, recorder: Recorder) -> None:
        c = recorder.consumer("a")
        for i in range(3):
            c(i)
        assert recorder.events == [("a", 0), ("a", 1), ("a", 2)]


class TestAsConsumer:
    """as_consumer coerces consumers, protocol objects and callables."""

    def test_base_consumer_returned_unchanged(self) -> None:
        c = FunctionConsumer(print)
        assert as_consumer(c) is c

    def test_protocol_object_wrapped(self) -> None:
        appender = Appender()
        c = as_consumer(appender)
        c("x")
        assert appender.seen == ["x"]
        assert c.name == "Appender"

    def test_callable_wrapped(self) -> None:
        c = as_consumer(print)
        assert isinstance(c, FunctionConsumer)
        assert c.fn is print

    def test_rejects_none(self) -> None:
        with pytest.raises(TypeError):
            as_consumer(None)  # type: ignore[arg-type]


class TestConsumerDecorator:
    """@consumer with and without arguments."""

    def test_bare_decorator(self) -> None:
        seen: list[str] = []

        @consumer
        def collect(value: str) -> None:
            seen.append(value)

        assert isinstance(collect, FunctionConsumer)
        collect("a")
        assert seen == ["a"]
        assert collect.input_type is None

    def test_decorator_with_arguments(self) -> None:
        @consumer(name="shout", input_type=str)
        def _shout(value: str) -> None:
            pass

        assert _shout.name == "shout"
        assert _shout.input_type is str


class TestFluentMethods:
    """and_then() and safe() on BaseConsumer."""

    def test_and_then_returns_composed(self, recorder: Recorder) -> None:
        composed = recorder.consumer("a").and_then(recorder.consumer("b"))
        assert isinstance(composed, ComposedConsumer)
        composed(1)
        assert recorder.labels == ["a", "b"]

    def test_and_then_accepts_plain_callable(self, recorder: Recorder) -> None:
        seen: list[int] = []
        recorder.consumer("a").and_then(seen.append)(5)
        assert recorder.events == [("a", 5)]
        assert seen == [5]

    def test_safe_returns_safe_consumer(self, recorder: Recorder) -> None:
        errors: list[object] = []
        safe = recorder.failing("a").safe(errors.append)
        assert isinstance(safe, SafeConsumer)
        safe(1)
        assert len(errors) == 1

    def test_all_consumers_are_base_consumers(self, recorder: Recorder) -> None:
        c = recorder.consumer("a")
        assert isinstance(c.and_then(c), BaseConsumer)
        assert isinstance(c.safe(), BaseConsumer)
