"""Tests for sequence helpers."""

from __future__ import annotations

from foundationhelpers.extensions.arrays import removing_duplicates


class TestRemovingDuplicates:
    """Tests for removing_duplicates function."""

    def test_preserves_first_seen_order(self) -> None:
        assert removing_duplicates([3, 1, 3, 2, 1]) == [3, 1, 2]

    def test_empty(self) -> None:
        assert removing_duplicates([]) == []

    def test_strings(self) -> None:
        assert removing_duplicates(["b", "a", "b"]) == ["b", "a"]

    def test_unhashable_elements(self) -> None:
        """Only equality is required."""
        assert removing_duplicates([[1], [2], [1]]) == [[1], [2]]

    def test_input_unchanged(self) -> None:
        items = [1, 1, 2]
        removing_duplicates(items)
        assert items == [1, 1, 2]

    def test_accepts_iterables(self) -> None:
        assert removing_duplicates(iter("banana")) == ["b", "a", "n"]
