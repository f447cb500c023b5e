"""Helpers for working with integers."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["int_range", "times"]


def int_range(n: int) -> range:
    """Range from 0 up to n (exclusive). Empty when n <= 0."""
    return range(n)


def times(n: int, action: Callable[[], object]) -> None:
    """Call action n times.

    Example:
        >>> calls = []
        >>> times(3, lambda: calls.append(1))
        >>> len(calls)
        3
    """
    for _ in int_range(n):
        action()
