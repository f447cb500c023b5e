"""Helpers for working with booleans."""

from __future__ import annotations

__all__ = ["toggled"]


def toggled(value: bool) -> bool:
    """Return the negated value."""
    return not value
