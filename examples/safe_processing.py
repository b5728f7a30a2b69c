"""Example: Containing Errors. Run with: python examples/safe_processing.py

Wraps a consumer that may raise with ``make_safe`` so that every input
is processed, and compares it with the driver's ``on_error`` policies.
"""

from __future__ import annotations

import logging

from consumer_kit import CollectingSink, for_each, for_each_entry, make_safe, stderr_sink
from consumer_kit.demo import parse_int

INPUTS = ["12", "abc", "7", "4.5", "-3"]
PRICES = {"apple": 1.25, "pear": -0.5, "plum": 0.8}


def check_price(entry: tuple[str, float]) -> None:
    name, price = entry
    if price < 0:
        msg = f"{name} has a negative price"
        raise ValueError(msg)
    print(f"{name}: {price:.2f}")


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    # 1. Report to stderr and keep going
    print("=== make_safe + stderr_sink ===")
    for_each(INPUTS, make_safe(parse_int, stderr_sink))
    print()

    # 2. Collect errors for later inspection
    print("=== make_safe + CollectingSink ===")
    sink = CollectingSink()
    for_each(INPUTS, make_safe(parse_int, sink))
    for info in sink.errors:
        print(f"{info.value_repr:>8} -> {info.description}")
    print()

    # 3. Let the driver skip failures instead
    print("=== for_each_entry(on_error='skip') ===")
    result = for_each_entry(PRICES, check_price, on_error="skip")
    print(f"{result.succeeded}/{result.processed} entries ok")


if __name__ == "__main__":
    main()
