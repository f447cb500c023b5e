"""Helpers for working with URL query strings."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["adding_query_parameters", "query_parameter"]


def adding_query_parameters(url: str, parameters: Mapping[str, str]) -> str:
    """Append query parameters to a URL.

    Existing query items are kept as-is; the new ones follow them in the
    mapping's order.

    Args:
        url: Base URL.
        parameters: Query parameters to add.

    Returns:
        The URL with the added parameters.

    Example:
        >>> adding_query_parameters("https://example.com?a=1", {"b": "2"})
        'https://example.com?a=1&b=2'
    """
    parts = urlsplit(url)
    query_items = parse_qsl(parts.query, keep_blank_values=True)
    query_items.extend(parameters.items())
    return urlunsplit(parts._replace(query=urlencode(query_items)))


def query_parameter(url: str, key: str) -> str | None:
    """Value of the first query parameter named key, or None."""
    for name, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        if name == key:
            return value
    return None
