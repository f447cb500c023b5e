"""String similarity utilities for fuzzy matching.

Strings are compared as sequences of Unicode code points: each element of a
``str`` is one unit, so combining characters count separately
(``len("e\u0301") == 2``). Comparisons are case-sensitive unless noted.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

import structlog

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "closest_labelled",
    "closest_match",
    "closest_match_in_enum",
    "closest_match_in_mapping",
    "enum_label",
    "find_similar_names",
    "levenshtein_distance",
]

logger = structlog.get_logger()

# Largest edit distance still accepted as a match
DEFAULT_MAX_DISTANCE = 2

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein (edit) distance between two strings.

    The Levenshtein distance is the minimum number of single-character
    edits (insertions, deletions, substitutions) to transform s1 into s2.

    Args:
        s1: First string.
        s2: Second string.

    Returns:
        The edit distance between the strings.
    """
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    # Two rows of len(s2) + 1 instead of the full (m+1) x (n+1) table
    previous_row = list(range(len(s2) + 1))

    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            if c1 == c2:
                current_row.append(previous_row[j])
            else:
                current_row.append(
                    1 + min(previous_row[j + 1], current_row[j], previous_row[j])
                )
        previous_row = current_row

    return previous_row[-1]


def closest_labelled(
    target: str,
    pairs: Iterable[tuple[str, T]],
    *,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> tuple[str, T] | None:
    """Find the (label, payload) pair whose label is closest to target.

    Pairs are scanned in order. A later pair only replaces the current best
    when its distance is strictly smaller, so the first of several equally
    close labels wins.

    Args:
        target: The string to match against.
        pairs: Candidate labels with their payloads.
        max_distance: Maximum edit distance to consider a match.

    Returns:
        The winning (label, payload) pair, or None if no label is within
        max_distance.

    Raises:
        ValueError: If max_distance is negative.
    """
    if max_distance < 0:
        raise ValueError(f"max_distance must be non-negative, got {max_distance}")

    best: tuple[str, T] | None = None
    best_distance = max_distance + 1

    for label, payload in pairs:
        distance = levenshtein_distance(target, label)
        if distance < best_distance:
            best = (label, payload)
            best_distance = distance
            if distance == 0:
                break

    if best is None:
        logger.debug("no_match", target=target, max_distance=max_distance)
        return None

    logger.debug("match_found", target=target, label=best[0], distance=best_distance)
    return best


def closest_match(
    target: str,
    candidates: Iterable[str],
    *,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> str | None:
    """Find the candidate string closest to target.

    Args:
        target: The string to match against.
        candidates: Possible matches, in priority order.
        max_distance: Maximum edit distance to consider a match.

    Returns:
        The closest candidate, or None if none is within max_distance.
    """
    result = closest_labelled(
        target,
        ((name, name) for name in candidates),
        max_distance=max_distance,
    )
    return None if result is None else result[1]


def closest_match_in_mapping(
    target: str,
    mapping: Mapping[str, T],
    *,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> T | None:
    """Find the value whose key is closest to target.

    Only the keys are compared; values are returned untouched.

    Args:
        target: The string to match against.
        mapping: Candidate keys and their values.
        max_distance: Maximum edit distance to consider a match.

    Returns:
        The value stored under the closest key, or None.
    """
    result = closest_labelled(target, mapping.items(), max_distance=max_distance)
    return None if result is None else result[1]


def enum_label(member: Enum) -> str:
    """Label used to match an enum member.

    String-valued members match on their value, all others on their name.
    """
    if isinstance(member.value, str):
        return member.value
    return member.name


def closest_match_in_enum(
    target: str,
    enum_cls: type[E],
    *,
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> E | None:
    """Find the enum member whose label is closest to target.

    Args:
        target: The string to match against.
        enum_cls: Enum class; members are scanned in definition order.
        max_distance: Maximum edit distance to consider a match.

    Returns:
        The closest member, or None.
    """
    result = closest_labelled(
        target,
        ((enum_label(member), member) for member in enum_cls),
        max_distance=max_distance,
    )
    return None if result is None else result[1]


def find_similar_names(
    target: str,
    candidates: list[str],
    *,
    max_distance: int = 3,
    max_suggestions: int = 3,
) -> list[str]:
    """Find similar names from a list of candidates.

    Uses case-insensitive Levenshtein distance, for "did you mean" hints.

    Args:
        target: The string to match against.
        candidates: List of possible matches.
        max_distance: Maximum edit distance to consider a match.
        max_suggestions: Maximum number of suggestions to return.

    Returns:
        List of similar names, ordered by distance (closest first).
    """
    if not candidates:
        return []

    scored = [
        (name, levenshtein_distance(target.lower(), name.lower()))
        for name in candidates
    ]
    within_threshold = [(name, dist) for name, dist in scored if dist <= max_distance]

    # Sort by distance, then alphabetically for ties
    within_threshold.sort(key=lambda x: (x[1], x[0].lower()))

    return [name for name, _ in within_threshold[:max_suggestions]]
