"""Shared CLI utilities."""

import json
import logging
from datetime import date
from pathlib import Path

import click

from ..errors import MotusError
from ..models.io import read_json
from ..utils.dates import parse_date


def setup_logging(verbose: bool) -> None:
    """Show engine logs on stderr when --verbose is set."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


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


def echo_json(data: dict | list) -> None:
    """Print data as indented JSON."""
    click.echo(json.dumps(data, indent=2))


def fail(ctx: click.Context, error: MotusError) -> None:
    """Report an engine error and exit with status 1."""
    echo_error(error.message)
    for issue in error.issues:
        if issue.reason != error.message:
            click.echo(f"  - {issue.field}: {issue.reason}")
    ctx.exit(1)


def load_json_file(ctx: click.Context, path: Path) -> dict | list:
    """Read a JSON input file, exiting with an error if it is malformed."""
    try:
        return read_json(path)
    except MotusError as e:
        fail(ctx, e)


def resolve_start_date(ctx: click.Context, value: str | None) -> date:
    """Parse --start-date, defaulting to today."""
    try:
        return parse_date(value) or date.today()
    except ValueError:
        echo_error(f"Invalid start date: {value} (expected YYYY-MM-DD)")
        ctx.exit(1)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    # Calculate column widths
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers)).rstrip()]
    lines.append("".join("-" * w + " " * padding for w in widths).rstrip())
    for row in rows:
        lines.append("".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row)).rstrip())

    return "\n".join(lines)
