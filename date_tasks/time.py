"""
Instant helpers (pure).

Naive datetimes are wall-clock times in the configured local timezone;
aware datetimes are absolute instants. Every computation that needs an
instant goes through these helpers so both kinds are treated the same way.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from .config import get_settings

EPOCH_UTC = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None


def localize(value: datetime, zone: Optional[tzinfo] = None) -> datetime:
    """
    Attach a timezone to a naive datetime.

    Aware datetimes are returned unchanged. `zone` defaults to the configured
    local timezone.
    """

    if not isinstance(value, datetime):
        raise TypeError(f"expected datetime, got {type(value).__name__}")
    if is_aware(value):
        return value
    return value.replace(tzinfo=zone or get_settings().zone)


def to_utc(value: datetime, zone: Optional[tzinfo] = None) -> datetime:
    """Convert a datetime to an aware UTC datetime."""

    return localize(value, zone).astimezone(timezone.utc)


def to_epoch_millis(value: datetime, zone: Optional[tzinfo] = None) -> int:
    """
    Milliseconds since 1970-01-01T00:00:00Z.

    Sub-millisecond precision is floored.
    """

    return (localize(value, zone) - EPOCH_UTC) // _ONE_MILLISECOND


__all__ = [
    "EPOCH_UTC",
    "is_aware",
    "localize",
    "to_epoch_millis",
    "to_utc",
]
