"""Profile management commands."""

from __future__ import annotations

import typer
import yaml
from pydantic import ValidationError

from fixed_size_buffer.config_manager.helpers import parse_capacity
from fixed_size_buffer.config_manager.profiles import (
    InvalidProfileName,
    ProfileAlreadyExist,
    ProfileManager,
    ProfileNotFound,
)

profile_app = typer.Typer(help="Manage buffer configuration profiles.")

profile_manager = ProfileManager()


@profile_app.command("create")
def create_profile(name: str = typer.Argument(..., help="Profile name.")) -> None:
    """Create a profile populated with default values."""
    try:
        profile_manager.create_profile(name)
    except (ProfileAlreadyExist, InvalidProfileName) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Created profile {name!r}.")


@profile_app.command("list")
def list_profiles() -> None:
    """List saved profiles."""
    names = profile_manager.list_profiles()
    if not names:
        typer.echo("No profiles found.")
        return
    for name in names:
        typer.echo(name)


@profile_app.command("show")
def show_profile(name: str = typer.Argument(..., help="Profile name.")) -> None:
    """Print a profile as YAML."""
    try:
        config = profile_manager.get_profile(name)
    except (ProfileNotFound, InvalidProfileName, ValidationError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(yaml.safe_dump(config.model_dump(), sort_keys=True).rstrip())


@profile_app.command("update")
def update_profile(
    name: str = typer.Argument(..., help="Profile name."),
    capacity: str | None = typer.Option(
        None, "--capacity", "-c", help="Buffer capacity, e.g. 500 or 10k."
    ),
    clear_vacated: bool | None = typer.Option(
        None,
        "--clear-vacated/--keep-vacated",
        help="Reset consumed slots to None.",
    ),
    drop_log_interval: int | None = typer.Option(
        None, "--drop-log-interval", help="Log every Nth overwrite drop."
    ),
) -> None:
    """Update fields of an existing profile."""
    try:
        parsed_capacity = parse_capacity(capacity) if capacity is not None else None
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--capacity") from exc

    updates = {
        "capacity": parsed_capacity,
        "clear_vacated": clear_vacated,
        "drop_log_interval": drop_log_interval,
    }
    try:
        config = profile_manager.update_profile(name, updates)
    except (ProfileNotFound, InvalidProfileName, ValidationError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Updated profile {name!r}: {config.model_dump()}")
