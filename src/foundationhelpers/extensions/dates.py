"""Helpers for working with dates and times."""

from __future__ import annotations

import calendar
from datetime import UTC, datetime, timedelta, tzinfo

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "adding_days",
    "adding_months",
    "adding_seconds",
    "day_of_week",
    "formatted",
    "is_in_future",
    "is_same_day",
]

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# Arithmetic


def adding_days(d: datetime, days: int) -> datetime:
    """Return a new datetime with days added (negative values subtract)."""
    return d + timedelta(days=days)


def adding_months(d: datetime, months: int) -> datetime:
    """Return a new datetime with calendar months added.

    The day is clamped to the end of the target month, so Jan 31 plus one
    month is Feb 28 (or 29 in a leap year).

    Args:
        d: Starting datetime.
        months: Months to add (negative values subtract).

    Returns:
        The shifted datetime; time of day and tzinfo are preserved.
    """
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return d.replace(year=year, month=month, day=day)


def adding_seconds(d: datetime, seconds: int) -> datetime:
    """Return a new datetime with seconds added."""
    return d + timedelta(seconds=seconds)


# Checks


def is_in_future(d: datetime, now: datetime | None = None) -> bool:
    """True if d is strictly after now.

    Args:
        d: Datetime to check.
        now: Reference time. Defaults to the current time, in d's timezone
            (naive datetimes compare against naive local time).
    """
    if now is None:
        now = datetime.now(d.tzinfo)
    return d > now


def is_same_day(d: datetime, other: datetime) -> bool:
    """True if both datetimes fall on the same calendar date."""
    return d.date() == other.date()


# Conversions


def day_of_week(d: datetime) -> int:
    """Day of the week, 1 = Sunday through 7 = Saturday."""
    # isoweekday(): Monday = 1 ... Sunday = 7
    return d.isoweekday() % 7 + 1


def formatted(
    d: datetime, fmt: str = DEFAULT_DATE_FORMAT, tz: tzinfo | None = None
) -> str:
    """Format a datetime with a strftime pattern.

    Args:
        d: Datetime to format.
        fmt: strftime format string.
        tz: Optional timezone to convert to first. Naive datetimes are
            treated as UTC when converting.

    Returns:
        The formatted string.
    """
    if tz is not None:
        if d.tzinfo is None:
            d = d.replace(tzinfo=UTC)
        d = d.astimezone(tz)
    return d.strftime(fmt)
