"""Persisted preferences CLI commands."""

from __future__ import annotations

import json
from typing import Annotated, Any

import typer
from rich.table import Table

from foundationhelpers.cli.context import CLIContext
from foundationhelpers.cli.formatters import (
    console,
    format_value,
    print_did_you_mean,
    print_error,
    print_preferences_table,
    print_success,
)
from foundationhelpers.extensions.preferences import (
    PreferenceKey,
    PreferencesError,
    PreferencesStore,
)
from foundationhelpers.infrastructure.similarity import find_similar_names

app = typer.Typer(
    name="prefs",
    help="Read and write persisted preferences.",
    no_args_is_help=True,
)


def _store() -> PreferencesStore:
    """Preferences store at the configured location."""
    return PreferencesStore(CLIContext.get().get_resolver().preferences())


def _parse_value(raw: str) -> Any:
    """Decode raw as JSON, falling back to the plain string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _suggestions(key: str, store: PreferencesStore) -> list[str]:
    """Stored keys and well-known keys that look like key."""
    suggestions = find_similar_names(key, store.keys())
    well_known = PreferencesStore.suggest_key(
        key, max_distance=CLIContext.get().get_config().max_distance
    )
    if well_known is not None and well_known.value not in suggestions:
        suggestions.append(well_known.value)
    return suggestions


@app.command("get")
def get(key: Annotated[str, typer.Argument(help="Preference key")]) -> None:
    """Print the value stored under KEY as JSON."""
    store = _store()
    if not store.contains(key):
        print_error(f"No preference stored under '{key}'")
        print_did_you_mean(_suggestions(key, store))
        raise typer.Exit(1)

    console.print(format_value(store.get(key)), markup=False, highlight=False)


@app.command("set")
def set_(
    key: Annotated[str, typer.Argument(help="Preference key")],
    value: Annotated[str, typer.Argument(help="Value (parsed as JSON when valid)")],
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Store VALUE as a plain string"),
    ] = False,
) -> None:
    """Store VALUE under KEY.

    \b
    Examples:
        fh prefs set launchCount 3              # stored as a number
        fh prefs set enableDebugMode true       # stored as a boolean
        fh prefs set lastAppVersion 1.0 --raw   # stored as "1.0"
    """
    store = _store()
    try:
        store.set(key, value if raw else _parse_value(value))
    except PreferencesError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    print_success(f"Set '{key}'")


@app.command("unset")
def unset(key: Annotated[str, typer.Argument(help="Preference key")]) -> None:
    """Remove the value stored under KEY."""
    store = _store()
    try:
        removed = store.remove(key)
    except PreferencesError as e:
        print_error(str(e))
        raise typer.Exit(1) from e

    if not removed:
        print_error(f"No preference stored under '{key}'")
        print_did_you_mean(_suggestions(key, store))
        raise typer.Exit(1)

    print_success(f"Removed '{key}'")


@app.command("list")
def list_preferences() -> None:
    """List all stored preferences."""
    print_preferences_table(_store().as_dict())


@app.command("keys")
def keys() -> None:
    """List the well-known preference keys."""
    table = Table(title="Well-known keys")
    table.add_column("Key", style="cyan")
    table.add_column("Constant", style="dim")

    for member in PreferenceKey:
        table.add_row(member.value, member.name)

    console.print(table)
