"""Main CLI application."""

from __future__ import annotations

import typer

from foundationhelpers import __version__
from foundationhelpers.cli import match, prefs, settings, validate
from foundationhelpers.cli.context import CLIContext
from foundationhelpers.infrastructure.logging import configure_logging

# Main application
app = typer.Typer(
    name="foundationhelpers",
    help="Small helpers over standard value types, with fuzzy matching.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

# Register subcommand groups
app.add_typer(match.app, name="match")
app.add_typer(prefs.app, name="prefs")
app.add_typer(settings.app, name="config")
app.add_typer(validate.app, name="validate")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"foundationhelpers {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress informational output.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Emit logs as JSON lines.",
    ),
) -> None:
    """foundationhelpers: helpers over standard value types.

    Fuzzy matching, validation and persisted preferences.
    """
    ctx = CLIContext.get()
    ctx.verbose = verbose
    ctx.quiet = quiet

    configure_logging(debug=verbose, json_logs=json_logs)
