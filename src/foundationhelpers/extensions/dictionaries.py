"""Helpers for working with dictionaries."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Mapping, MutableMapping

__all__ = ["merge", "merging"]

K = TypeVar("K")
V = TypeVar("V")


def merging(base: Mapping[K, V], other: Mapping[K, V]) -> dict[K, V]:
    """Return a new dict with the pairs of both mappings.

    Values from other win on key collisions. Neither input is modified.
    """
    return {**base, **other}


def merge(base: MutableMapping[K, V], other: Mapping[K, V]) -> None:
    """Update base in place with the pairs of other."""
    for key, value in other.items():
        base[key] = value
