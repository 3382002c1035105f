"""CLI entry point for evman.

Invoked as::

    evman [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m evman.cli.main

Commands
--------
parse       Parse a command line and dump the resulting command
duration    Validate an event duration and show its bounds
version     Show version information
"""
from __future__ import annotations

import json
import logging
import sys
from typing import NoReturn

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def _fail(title: str, message: str) -> NoReturn:
    """Print an error block to stderr and exit with status 1."""
    err_console.print(f"[red]{title}:[/red] {escape(message)}", soft_wrap=True)
    sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="evman")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Command parsing and validation for a contact/event manager."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from evman import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]evman[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# parse command
# ---------------------------------------------------------------------------


@cli.command(name="parse")
@click.argument("command_text")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Output format for the parsed command",
)
def parse_command(command_text: str, output_format: str) -> None:
    """Parse a command line and print the validated command.

    COMMAND_TEXT is a full command, quoted, e.g. "attend p/1 2 e/3".
    """
    from evman.errors import ParseError
    from evman.parser import parse_command as _parse

    try:
        command = _parse(command_text)
    except ParseError as exc:
        _fail("Parse error", str(exc))

    data = command.to_dict()
    if output_format.lower() == "json":
        text = json.dumps(data, indent=2)
        lang = "json"
    else:
        text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        lang = "yaml"
    console.print(Syntax(text, lang))


# ---------------------------------------------------------------------------
# duration command
# ---------------------------------------------------------------------------


@cli.command(name="duration")
@click.argument("text")
def duration_command(text: str) -> None:
    """Validate an event duration.

    TEXT is a date (d/M/yyyy) or a range (d/M/yyyy-d/M/yyyy).
    """
    from evman.errors import ParseError
    from evman.parser import parse_duration

    try:
        duration = parse_duration(text)
    except ParseError as exc:
        _fail("Invalid duration", str(exc))

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Duration[/bold]", str(duration))
    table.add_row("Start", duration.start_date.isoformat())
    table.add_row("End", duration.end_date.isoformat())
    table.add_row("Days", str((duration.end_date - duration.start_date).days + 1))
    console.print(table)


if __name__ == "__main__":
    cli()
