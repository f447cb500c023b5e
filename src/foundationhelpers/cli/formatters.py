"""Rich console output formatting utilities."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from foundationhelpers.cli.context import CLIContext

__all__ = [
    "console",
    "error_console",
    "format_value",
    "print_config",
    "print_did_you_mean",
    "print_error",
    "print_info",
    "print_preferences_table",
    "print_success",
]

# Shared console instance
console = Console()
error_console = Console(stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]✗[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message.

    Suppressed when --quiet flag is set.
    """
    if not CLIContext.get().quiet:
        console.print(f"[blue]i[/blue] {message}")


def print_did_you_mean(suggestions: list[str]) -> None:
    """Print 'Did you mean?' suggestions.

    Args:
        suggestions: List of similar names to suggest.
    """
    if not suggestions:
        return

    console.print()
    console.print("[dim]Did you mean?[/dim]")
    for name in suggestions:
        console.print(f"  [cyan]{name}[/cyan]")


def format_value(value: Any) -> str:
    """Render a stored value as compact JSON."""
    return json.dumps(value, ensure_ascii=False)


def _truncate(text: str, max_length: int) -> str:
    """Truncate text with ellipsis if too long."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"


def print_preferences_table(values: dict[str, Any]) -> None:
    """Print a table of stored preferences.

    Args:
        values: Stored preferences by key.
    """
    if not values:
        print_info("No preferences stored")
        return

    table = Table(title="Preferences")
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key in sorted(values):
        table.add_row(key, _truncate(format_value(values[key]), 60))

    console.print(table)


def print_config(max_distance: int, case_sensitive: bool, path: str) -> None:
    """Print the effective configuration panel."""
    lines = [
        f"[bold]Max distance:[/bold]   {max_distance}",
        f"[bold]Case sensitive:[/bold] {'yes' if case_sensitive else 'no'}",
        f"[bold]File:[/bold]           {path}",
    ]
    panel = Panel(
        "\n".join(lines),
        title="[blue]Configuration[/blue]",
        border_style="blue",
    )
    console.print(panel)
