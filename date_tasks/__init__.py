"""
Date/time utility functions.

- parse_rfc2822 / parse_iso8601: date strings -> aware datetime (or None)
- is_leap_year: Gregorian leap-year rule
- format_time_span: interval between two datetimes as "HH:mm:ss.sss"
- clock_angle: angle in radians between analog clock hands (UTC)
"""

from .calendar_rules import is_leap_year
from .clock import clock_angle, clock_angle_degrees
from .config import Settings, get_settings, load_settings
from .parsing import (
    DateParseError,
    format_iso8601,
    format_rfc2822,
    from_iso8601,
    from_rfc2822,
    parse_iso8601,
    parse_rfc2822,
)
from .time_span import TimeSpan, format_time_span

__all__ = [
    "DateParseError",
    "Settings",
    "TimeSpan",
    "clock_angle",
    "clock_angle_degrees",
    "format_iso8601",
    "format_rfc2822",
    "format_time_span",
    "from_iso8601",
    "from_rfc2822",
    "get_settings",
    "is_leap_year",
    "load_settings",
    "parse_iso8601",
    "parse_rfc2822",
]
