"""fixed-size-buffer CLI entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError

from fixed_size_buffer import __version__
from fixed_size_buffer.cli import profile_commands
from fixed_size_buffer.cli.profile_commands import profile_app
from fixed_size_buffer.config_manager.config import ConfigManager
from fixed_size_buffer.config_manager.helpers import parse_capacity
from fixed_size_buffer.config_manager.profiles import (
    InvalidProfileName,
    ProfileNotFound,
)
from fixed_size_buffer.ring_buffer import FixedSizeBuffer

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="Fixed-size ring buffer utilities.")
app.add_typer(profile_app, name="profile")


def _version_callback(value: bool) -> bool:
    if value:
        typer.echo(__version__)
        raise typer.Exit()
    return value


@app.callback()
def callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the fixed-size-buffer version and exit.",
        callback=_version_callback,
        is_eager=True,
        is_flag=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging."),
) -> None:
    """Handle global CLI options."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command("tail")
def tail(
    path: Path | None = typer.Argument(
        None,
        help="File to read. Reads stdin when omitted.",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    capacity: str | None = typer.Option(
        None, "--capacity", "-n", help="Number of lines to keep, e.g. 20 or 1k."
    ),
    profile: str | None = typer.Option(
        None, "--profile", "-p", help="Profile supplying the default capacity."
    ),
) -> None:
    """Print the last lines of a file, keeping at most CAPACITY in memory."""
    try:
        parsed_capacity = parse_capacity(capacity) if capacity is not None else None
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--capacity") from exc

    config_manager = ConfigManager(profile_commands.profile_manager, profile)
    try:
        config = config_manager.resolve_effective_config(
            {"capacity": parsed_capacity}
        )
    except (ProfileNotFound, InvalidProfileName, ValidationError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)

    lines: FixedSizeBuffer[str] = FixedSizeBuffer.from_config(config)
    if path is None:
        lines.extend(line.rstrip("\n") for line in sys.stdin)
    else:
        with path.open("r", encoding="utf-8", errors="replace") as source:
            lines.extend(line.rstrip("\n") for line in source)

    logger.debug(
        "Read %d lines, dropped %d, keeping %d",
        lines.write_count,
        lines.dropped_count,
        len(lines),
    )
    for line in lines.drain():
        typer.echo(line)


def main() -> None:
    """Console script entry point."""
    app()
