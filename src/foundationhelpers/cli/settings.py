"""Configuration CLI commands."""

from __future__ import annotations

import dataclasses
from typing import Annotated

import typer

from foundationhelpers.cli.context import CLIContext
from foundationhelpers.cli.formatters import print_config, print_error, print_success
from foundationhelpers.infrastructure.config import ConfigError, save_global_config

app = typer.Typer(
    name="config",
    help="Show and change global configuration.",
    no_args_is_help=True,
)


@app.command("show")
def show() -> None:
    """Show the effective configuration."""
    ctx = CLIContext.get()
    config = ctx.get_config()
    print_config(
        max_distance=config.max_distance,
        case_sensitive=config.case_sensitive,
        path=str(ctx.get_resolver().global_config()),
    )


def _update(**changes: object) -> None:
    """Save the current config with changes applied."""
    ctx = CLIContext.get()
    config = dataclasses.replace(ctx.get_config(), **changes)
    try:
        save_global_config(config, ctx.get_resolver())
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(1) from e
    ctx.config = config


@app.command("set-max-distance")
def set_max_distance(
    value: Annotated[int, typer.Argument(min=0, help="Largest accepted distance")],
) -> None:
    """Set the default tolerance used by 'match closest'."""
    _update(max_distance=value)
    print_success(f"Max distance set to {value}")


@app.command("set-case-sensitive")
def set_case_sensitive(
    enabled: Annotated[bool, typer.Argument(help="true or false")],
) -> None:
    """Choose whether 'match closest' compares case-sensitively."""
    _update(case_sensitive=enabled)
    print_success(f"Case-sensitive matching {'on' if enabled else 'off'}")
