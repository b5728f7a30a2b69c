"""Example: Composing Consumers. Run with: python examples/composition.py

Shows how plain functions become consumers, how ``and_then`` chains
them, and how a failure in the first half stops the chain.
"""

from __future__ import annotations

from consumer_kit import compose_all, consumer, invoke
from consumer_kit.demo import print_length, uppercase_print

# ---------------------------------------------------------------------------
# A consumer that closes over shared state
# ---------------------------------------------------------------------------

seen_words: list[str] = []


@consumer(input_type=str)
def remember(text: str) -> None:
    seen_words.append(text)


@consumer(input_type=str)
def reject_empty(text: str) -> None:
    if not text:
        msg = "empty input"
        raise ValueError(msg)


def main() -> None:
    # 1. Two consumers in sequence
    print("=== and_then ===")
    uppercase_print.and_then(print_length)("hello")
    print()

    # 2. Longer chains, folded left to right
    print("=== compose_all ===")
    chain = compose_all(reject_empty, remember, uppercase_print)
    for word in ["alpha", "beta"]:
        invoke(chain, word)
    print(f"Remembered: {seen_words}")
    print()

    # 3. A failing first consumer stops the chain
    print("=== short-circuit ===")
    try:
        chain("")
    except ValueError as e:
        print(f"Chain aborted: {e}")
    print(f"Remembered: {seen_words}")


if __name__ == "__main__":
    main()
