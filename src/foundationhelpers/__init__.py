"""foundationhelpers: small helpers over standard Python value types.

Includes Levenshtein-based fuzzy matching over lists, mappings and enums.
"""

__version__ = "0.1.0"
