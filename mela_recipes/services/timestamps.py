# mela_recipes/services/timestamps.py
"""
Mela is written in Swift and encodes dates with `JSONEncoder`'s default
strategy: seconds since 2001-01-01T00:00:00Z. These helpers convert between
that offset and an aware `datetime`.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

# Unix epoch milliseconds 978307200000
REFERENCE_INSTANT = datetime(2001, 1, 1, tzinfo=timezone.utc)


def offset_to_date(seconds: float) -> datetime:
    """Converts seconds since the reference instant to a UTC datetime.

    Raises OverflowError when the result falls outside datetime's range.
    """
    return REFERENCE_INSTANT + timedelta(seconds=seconds)


def date_to_offset(date: datetime) -> float:
    """Inverse of `offset_to_date`. Naive datetimes are taken as UTC."""
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)
    return (date - REFERENCE_INSTANT).total_seconds()
