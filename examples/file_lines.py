"""Example: Consuming Lines of a File. Run with: python examples/file_lines.py [PATH]

Feeds each line of a text file (this script, by default) to a composed
consumer that echoes non-blank lines and counts all of them.
"""

from __future__ import annotations

import sys
from pathlib import Path

from consumer_kit import FunctionConsumer, for_each_line


class LineStats:
    """Counts lines; satisfies the Consumer protocol through ``accept``."""

    def __init__(self) -> None:
        self.total = 0
        self.blank = 0

    def accept(self, line: str) -> None:
        self.total += 1
        if not line.strip():
            self.blank += 1


def main() -> None:
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__)
    stats = LineStats()

    def _echo(line: str) -> None:
        if line.strip():
            print(f"  | {line}")

    echo = FunctionConsumer(_echo, label="echo", input_type=str)
    result = for_each_line(path, echo.and_then(stats))

    print()
    print(f"{path.name}: {stats.total} lines, {stats.blank} blank ({result.processed} consumed)")


if __name__ == "__main__":
    main()
