"""Fuzzy matching CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer

from foundationhelpers.cli.context import CLIContext
from foundationhelpers.cli.formatters import console, print_error, print_info
from foundationhelpers.infrastructure.similarity import (
    closest_labelled,
    levenshtein_distance,
)

app = typer.Typer(
    name="match",
    help="Edit distance and closest-match lookups.",
    no_args_is_help=True,
)


@app.command("distance")
def distance(
    first: Annotated[str, typer.Argument(help="First string")],
    second: Annotated[str, typer.Argument(help="Second string")],
) -> None:
    """Print the Levenshtein distance between two strings.

    \b
    Examples:
        fh match distance kitten sitting    # 3
        fh match distance "" test           # 4
    """
    console.print(str(levenshtein_distance(first, second)), highlight=False)


@app.command("closest")
def closest(
    target: Annotated[str, typer.Argument(help="String to look up")],
    candidates: Annotated[
        list[str], typer.Argument(help="Candidates, in priority order")
    ],
    max_distance: Annotated[
        int | None,
        typer.Option(
            "--max-distance",
            "-d",
            min=0,
            help="Largest accepted edit distance (default from config)",
        ),
    ] = None,
) -> None:
    """Print the candidate closest to TARGET.

    Ties go to the candidate listed first. Exits with status 1 when no
    candidate is within the maximum distance.

    \b
    Examples:
        fh match closest appl apple banana cherry    # apple
        fh match closest tabel table cable -d 1      # table
    """
    config = CLIContext.get().get_config()
    if max_distance is None:
        max_distance = config.max_distance

    if config.case_sensitive:
        pairs = [(name, name) for name in candidates]
        lookup = target
    else:
        pairs = [(name.lower(), name) for name in candidates]
        lookup = target.lower()

    result = closest_labelled(lookup, pairs, max_distance=max_distance)
    if result is None:
        print_error(f"No match for '{target}' within distance {max_distance}")
        raise typer.Exit(1)

    label, name = result
    print_info(f"Distance: {levenshtein_distance(lookup, label)}")
    console.print(name, markup=False, highlight=False)
