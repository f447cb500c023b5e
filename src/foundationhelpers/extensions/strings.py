"""Helpers for working with strings.

Checks, whitespace transformations and regex-based validation. Fuzzy
matching lives in infrastructure.similarity and is re-exported here as
closest_match for convenience.
"""

from __future__ import annotations

import re

from foundationhelpers.infrastructure.similarity import closest_match

__all__ = [
    "DASH",
    "EMPTY",
    "NEWLINE",
    "SPACE",
    "closest_match",
    "contains",
    "is_blank",
    "is_numeric",
    "is_valid_email",
    "is_valid_password",
    "is_valid_phone",
    "matches",
    "removed_whitespace",
    "reversed_words",
    "trimmed",
]

DASH = "-"
EMPTY = ""
NEWLINE = "\n"
SPACE = " "

# Validation patterns must match the whole string
EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,64}")
PASSWORD_PATTERN = re.compile(
    r"(?=.*?[A-Z])(?=.*?[a-z])(?=.*?[0-9])(?=.*?[#?!@$ %^&*-]).{8,}"
)
PHONE_PATTERN = re.compile(r"0[0-9]*")

_WHITESPACE_RUN = re.compile(r"\s+")


# Checks


def is_blank(s: str) -> bool:
    """True if the string is empty or contains only whitespace."""
    return not trimmed(s)


def is_numeric(s: str) -> bool:
    """True if the string is non-empty and made only of decimal digits.

    Example:
        >>> is_numeric("12345"), is_numeric("123a45"), is_numeric("")
        (True, False, False)
    """
    return s != "" and all(c.isdecimal() for c in s)


def contains(s: str, substring: str) -> bool:
    """Case-sensitive substring test."""
    return substring in s


def matches(s: str, pattern: str) -> bool:
    """True if the regular expression matches anywhere in the string.

    Args:
        s: String to search.
        pattern: Regular expression pattern.

    Returns:
        Whether any part of s matches pattern.
    """
    return re.search(pattern, s) is not None


# Transformation


def removed_whitespace(s: str) -> str:
    """Remove all whitespace and newlines.

    Example:
        >>> removed_whitespace(" Hello \\n World ")
        'HelloWorld'
    """
    return _WHITESPACE_RUN.sub("", s)


def reversed_words(s: str) -> str:
    """Reverse the order of space-separated words.

    Runs of spaces collapse to a single space in the result.

    Example:
        >>> reversed_words("Python helpers are great")
        'great are helpers Python'
    """
    words = [word for word in s.split(SPACE) if word]
    return SPACE.join(reversed(words))


def trimmed(s: str) -> str:
    """Strip leading and trailing whitespace and newlines."""
    return s.strip()


# Validation


def is_valid_email(s: str) -> bool:
    """Validate a properly formatted email address.

    Requires a local part, an "@", a domain and a 2-64 letter top-level
    domain.
    """
    return EMAIL_PATTERN.fullmatch(s) is not None


def is_valid_password(s: str) -> bool:
    """Validate a strong password.

    A valid password has at least 8 characters, including an uppercase
    letter, a lowercase letter, a digit and one of ``#?!@$ %^&*-``.
    """
    return PASSWORD_PATTERN.fullmatch(s) is not None


def is_valid_phone(s: str) -> bool:
    """Validate a phone number: a leading 0 followed only by digits."""
    return PHONE_PATTERN.fullmatch(s) is not None
