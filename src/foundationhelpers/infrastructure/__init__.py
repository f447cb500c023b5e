"""Infrastructure: matching, persistence, configuration and logging."""

from foundationhelpers.infrastructure.similarity import (
    DEFAULT_MAX_DISTANCE,
    closest_labelled,
    closest_match,
    closest_match_in_enum,
    closest_match_in_mapping,
    levenshtein_distance,
)

__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "closest_labelled",
    "closest_match",
    "closest_match_in_enum",
    "closest_match_in_mapping",
    "levenshtein_distance",
]
