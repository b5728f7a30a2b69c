"""CLI interface for consumer-kit.

Requires the 'cli' extra: pip install consumer-kit[cli]
"""

from __future__ import annotations

import sys
from pathlib import Path

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
except ImportError:
    print(
        "CLI dependencies not installed. Install with: pip install consumer-kit[cli]",
        file=sys.stderr,
    )
    sys.exit(1)

from consumer_kit import __version__
from consumer_kit.consumers import as_consumer, make_safe
from consumer_kit.demo import parse_int, print_length, square, uppercase_print
from consumer_kit.drivers import for_each, for_each_line
from consumer_kit.exceptions import SourceReadError
from consumer_kit.models.errors import ErrorInfo
from consumer_kit.sinks import CollectingSink

app = typer.Typer(
    name="consumer-kit",
    help="Composable single-argument callbacks with error containment.",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    if version:
        console.print(f"consumer-kit {__version__}")
        raise typer.Exit()


@app.command()
def info() -> None:
    """Show information about the consumer-kit installation."""
    table = Table(title="consumer-kit info")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Python", sys.version.split()[0])

    for dep_name in ["pydantic", "typer", "rich"]:
        try:
            mod = __import__(dep_name)
            ver = getattr(mod, "__version__", "installed")
            table.add_row(dep_name, str(ver))
        except ImportError:
            table.add_row(dep_name, "[red]not installed[/red]")

    console.print(table)


@app.command()
def compose(
    text: str = typer.Argument(..., help="Text to run through the composed consumer"),
) -> None:
    """Print TEXT uppercased, then its length."""
    uppercase_print.and_then(print_length)(text)


@app.command("safe-parse")
def safe_parse(
    values: list[str] = typer.Argument(..., help="Values to parse as integers"),  # noqa: B008
) -> None:
    """Parse each value as an integer, reporting failures instead of aborting."""
    sink = CollectingSink()

    def _report(error: ErrorInfo) -> None:
        sink(error)
        console.print(
            f"[red]Error processing {escape(error.value_repr)}: "
            f"{escape(error.description)}[/red]"
        )

    result = for_each(values, make_safe(parse_int, _report))
    console.print(f"{result.processed - len(sink)} parsed, {len(sink)} failed")


@app.command("square")
def square_cmd(
    numbers: list[int] = typer.Argument(..., help="Integers to square"),  # noqa: B008
) -> None:
    """Print the square of each number, in order."""
    for_each(numbers, square)


@app.command()
def lines(
    path: Path = typer.Argument(..., help="Text file to read"),  # noqa: B008
    upper: bool = typer.Option(False, "--upper", "-u", help="Uppercase each line"),
) -> None:
    """Print each line of a text file."""
    target = uppercase_print if upper else as_consumer(print)
    try:
        result = for_each_line(path, target)
    except SourceReadError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e
    console.print(f"[dim]{result.processed} lines[/dim]")


if __name__ == "__main__":
    app()
