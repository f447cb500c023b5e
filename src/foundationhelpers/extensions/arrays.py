"""Helpers for working with sequences."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = ["removing_duplicates"]

T = TypeVar("T")


def removing_duplicates(items: Iterable[T]) -> list[T]:
    """Remove duplicate elements while preserving the original order.

    Only equality is used, so unhashable elements (lists, dicts) work too.

    Args:
        items: Elements to deduplicate.

    Returns:
        A new list with each element in the order it first appears.
    """
    result: list[T] = []
    for item in items:
        if item not in result:
            result.append(item)
    return result
