"""String validation CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

import typer

from foundationhelpers.cli.formatters import print_error, print_success
from foundationhelpers.extensions.strings import (
    is_valid_email,
    is_valid_password,
    is_valid_phone,
)

if TYPE_CHECKING:
    from collections.abc import Callable

app = typer.Typer(
    name="validate",
    help="Validate emails, passwords and phone numbers.",
    no_args_is_help=True,
)


def _report(kind: str, value: str, check: Callable[[str], bool]) -> None:
    """Print the outcome of a check and exit 1 when it fails."""
    if check(value):
        print_success(f"Valid {kind}")
        return
    print_error(f"Invalid {kind}: {value!r}")
    raise typer.Exit(1)


@app.command("email")
def email(value: Annotated[str, typer.Argument(help="Email address")]) -> None:
    """Check that VALUE is a properly formatted email address."""
    _report("email", value, is_valid_email)


@app.command("password")
def password(value: Annotated[str, typer.Argument(help="Password")]) -> None:
    """Check that VALUE is a strong password.

    At least 8 characters with an uppercase letter, a lowercase letter,
    a digit and one of #?!@$ %^&*-
    """
    _report("password", value, is_valid_password)


@app.command("phone")
def phone(value: Annotated[str, typer.Argument(help="Phone number")]) -> None:
    """Check that VALUE is a phone number (leading 0, digits only)."""
    _report("phone number", value, is_valid_phone)
