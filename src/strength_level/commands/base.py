"""Shared CLI utilities."""

import click

from ..data.threshold_loader import ThresholdLoadError, load_threshold_table
from ..models.strength import ThresholdTable

thresholds_option = click.option(
    "--thresholds",
    "thresholds_source",
    default=None,
    help="Path or URL of the strength thresholds JSON (default: packaged table)",
)


def load_table_or_exit(ctx: click.Context, source: str | None) -> ThresholdTable:
    """Load the threshold table, exiting with an error if it cannot be loaded."""
    try:
        return load_threshold_table(source)
    except ThresholdLoadError as e:
        echo_error(str(e))
        ctx.exit(1)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)))

    return "\n".join(line.rstrip() for line in lines)
