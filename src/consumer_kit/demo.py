"""Demonstration consumers used by the CLI and the examples."""

from __future__ import annotations

from consumer_kit.consumers.base import consumer


@consumer(input_type=str)
def uppercase_print(text: str) -> None:
    print(text.upper())


@consumer(input_type=str)
def print_length(text: str) -> None:
    print(f"Length: {len(text)}")


@consumer(input_type=str)
def parse_int(text: str) -> None:
    """Parse ``text`` as an integer, raising ``ValueError`` if it is not one."""
    int(text)


@consumer(input_type=int)
def square(number: int) -> None:
    print(number * number)
