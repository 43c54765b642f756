"""
Date string parsers: RFC 2822 and ISO 8601.

Both parsers are explicit grammars (regular expressions plus `datetime`
construction); no heuristic "parse anything" fallback is used.

Failure contract:
- parse_rfc2822 / parse_iso8601 return None for text they cannot parse.
  They never raise for unparsable input.
- from_rfc2822 / from_iso8601 raise DateParseError instead.

Successful results are always timezone-aware. Text without a zone is read in
the configured local timezone (see date_tasks.config), except ISO 8601
date-only text, which is UTC midnight.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from email.utils import format_datetime
from typing import Any, Optional

from .config import get_settings
from .time import localize

logger = logging.getLogger(__name__)


class DateParseError(ValueError):
    """Raised by the strict parsers when text is not a valid date."""

    def __init__(self, message: str, text: Any = None) -> None:
        super().__init__(message)
        self.text = text


# ============================================================================
# RFC 2822
# ============================================================================

_MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

# Offsets in minutes. RFC 2822 section 4.3 obsolete zone names.
_NAMED_ZONES = {
    "UT": 0, "UTC": 0, "GMT": 0, "Z": 0,
    "AST": -4 * 60, "ADT": -3 * 60,
    "EST": -5 * 60, "EDT": -4 * 60,
    "CST": -6 * 60, "CDT": -5 * 60,
    "MST": -7 * 60, "MDT": -6 * 60,
    "PST": -8 * 60, "PDT": -7 * 60,
}

_RFC2822_PATTERN = re.compile(
    r"^\s*"
    # Optional day of week: "Tue," / "Tuesday" / "Tue"
    r"(?:(?:mon|tue|wed|thu|fri|sat|sun)[a-z]*\.?(?:\s*,\s*|\s+))?"
    r"(?:"
    # 26 Jan 2016
    r"(?P<day>\d{1,2})[\s-]+(?P<month>[a-z]{3,9})\.?[\s-]+(?P<year>\d{2,4})"
    r"|"
    # December 17, 1995
    r"(?P<month_first>[a-z]{3,9})\.?\s+(?P<day_second>\d{1,2})(?:\s*,\s*|\s+)(?P<year_second>\d{4})"
    r")"
    r"(?:\s+(?P<hour>\d{1,2}):(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?"
    r"(?:\s*(?:"
    # +0100
    r"(?P<zone_numeric>[+-]\d{4})"
    # GMT, UTC, GMT+01, UTC-05:30
    r"|(?P<zone_base>utc|ut|gmt|z)"
    r"(?:(?P<zone_sign>[+-])(?P<zone_hours>\d{1,2})(?::?(?P<zone_minutes>\d{2}))?)?"
    # EST, PDT, ...
    r"|(?P<zone_name>[aecmp][sd]t)"
    r"))?"
    r"\s*$",
    re.IGNORECASE | re.ASCII,
)


def _month_number(name: str) -> int:
    lowered = name.lower()
    for index, full_name in enumerate(_MONTH_NAMES, start=1):
        if full_name.startswith(lowered) and len(lowered) >= 3:
            return index
    raise DateParseError(f"Unknown month name: {name!r}", name)


def _offset(sign: str, hours: int, minutes: int) -> timezone:
    if hours > 23 or minutes > 59:
        raise DateParseError(f"UTC offset out of range: {sign}{hours:02d}{minutes:02d}")
    delta = timedelta(hours=hours, minutes=minutes)
    return timezone(-delta if sign == "-" else delta)


def _rfc2822_zone(match: re.Match) -> Optional[timezone]:
    """Zone written in the text, or None when the text carries no zone."""

    numeric = match.group("zone_numeric")
    if numeric:
        return _offset(numeric[0], int(numeric[1:3]), int(numeric[3:5]))

    if match.group("zone_name"):
        return timezone(timedelta(minutes=_NAMED_ZONES[match.group("zone_name").upper()]))

    if match.group("zone_base") is None:
        return None
    if match.group("zone_sign") is None:
        return timezone.utc
    return _offset(
        match.group("zone_sign"),
        int(match.group("zone_hours")),
        int(match.group("zone_minutes") or 0),
    )


def _rfc2822_year(digits: str) -> int:
    year = int(digits)
    if len(digits) == 2:
        return year + (2000 if year < 50 else 1900)
    if len(digits) == 3:
        return year + 1900
    return year


def _parse_rfc2822(text: Any, zone: Optional[tzinfo]) -> datetime:
    if not isinstance(text, str):
        raise DateParseError(f"expected str, got {type(text).__name__}", text)

    match = _RFC2822_PATTERN.match(text)
    if match is None:
        raise DateParseError(f"Invalid RFC 2822 date: {text!r}", text)

    if match.group("day") is not None:
        day, month, year = match.group("day", "month", "year")
    else:
        month, day, year = match.group("month_first", "day_second", "year_second")

    tz = _rfc2822_zone(match) or zone or get_settings().zone

    try:
        return datetime(
            _rfc2822_year(year),
            _month_number(month),
            int(day),
            int(match.group("hour") or 0),
            int(match.group("minute") or 0),
            int(match.group("second") or 0),
            tzinfo=tz,
        )
    except DateParseError:
        raise
    except ValueError as exc:
        raise DateParseError(f"Invalid RFC 2822 date: {text!r} ({exc})", text) from exc


# ============================================================================
# ISO 8601
# ============================================================================

_ISO8601_PATTERN = re.compile(
    r"^\s*"
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[Tt ]"
    r"(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:[.,](?P<fraction>\d{1,9}))?)?"
    r"(?P<zone>[Zz]|[+-]\d{2}(?::?\d{2})?)?"
    r")?"
    r"\s*$",
    re.ASCII,
)


def _iso8601_zone(token: str) -> timezone:
    if token in ("Z", "z"):
        return timezone.utc
    digits = token[1:].replace(":", "")
    return _offset(token[0], int(digits[:2]), int(digits[2:4] or 0))


def _parse_iso8601(text: Any, zone: Optional[tzinfo]) -> datetime:
    if not isinstance(text, str):
        raise DateParseError(f"expected str, got {type(text).__name__}", text)

    match = _ISO8601_PATTERN.match(text)
    if match is None:
        raise DateParseError(f"Invalid ISO 8601 date: {text!r}", text)

    year, month, day = (int(part) for part in match.group("year", "month", "day"))

    if match.group("hour") is None:
        # Date-only forms are UTC.
        tz: tzinfo = timezone.utc
    elif match.group("zone"):
        tz = _iso8601_zone(match.group("zone"))
    else:
        tz = zone or get_settings().zone

    try:
        if match.group("hour") is None:
            return datetime(year, month, day, tzinfo=tz)

        hour = int(match.group("hour"))
        minute = int(match.group("minute"))
        second = int(match.group("second") or 0)
        fraction = match.group("fraction") or ""
        microsecond = int(fraction.ljust(6, "0")[:6])

        if hour == 24:
            # 24:00 is the end of the day, i.e. midnight of the next one.
            if minute or second or int(fraction or 0):
                raise DateParseError(f"Invalid ISO 8601 date: {text!r} (hour 24)", text)
            return datetime(year, month, day, tzinfo=tz) + timedelta(days=1)

        return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)
    except DateParseError:
        raise
    except (ValueError, OverflowError) as exc:
        raise DateParseError(f"Invalid ISO 8601 date: {text!r} ({exc})", text) from exc


# ============================================================================
# Public API
# ============================================================================

def _log_rejected(text: Any, date_format: str, error: DateParseError) -> None:
    logger.debug(
        "Rejected %s date string: %s",
        date_format,
        error,
        extra={
            "input_text": str(text)[:100],
            "date_format": date_format,
        },
    )


def parse_rfc2822(text: str, zone: Optional[tzinfo] = None) -> Optional[datetime]:
    """
    Parse an RFC 2822 date string.

    Accepted shapes include:
        "Tue, 26 Jan 2016 13:48:02 GMT"
        "Sun, 17 May 1998 03:00:00 GMT+01"
        "December 17, 1995 03:24:00"

    Args:
        text: The date string.
        zone: Timezone for text without a zone (default: configured local).

    Returns:
        An aware datetime, or None if the text is not a valid date.
    """

    try:
        return _parse_rfc2822(text, zone)
    except DateParseError as exc:
        _log_rejected(text, "RFC 2822", exc)
        return None


def from_rfc2822(text: str, zone: Optional[tzinfo] = None) -> datetime:
    """Strict variant of parse_rfc2822. Raises DateParseError on failure."""

    return _parse_rfc2822(text, zone)


def parse_iso8601(text: str, zone: Optional[tzinfo] = None) -> Optional[datetime]:
    """
    Parse an ISO 8601 extended-format date string.

    Examples:
        "2016-01-19T16:07:37+00:00"
        "2016-01-19T08:07:37Z"
        "2016-01-19"                 (UTC midnight)

    Returns:
        An aware datetime, or None if the text is not a valid date.
    """

    try:
        return _parse_iso8601(text, zone)
    except DateParseError as exc:
        _log_rejected(text, "ISO 8601", exc)
        return None


def from_iso8601(text: str, zone: Optional[tzinfo] = None) -> datetime:
    """Strict variant of parse_iso8601. Raises DateParseError on failure."""

    return _parse_iso8601(text, zone)


def format_rfc2822(value: datetime, zone: Optional[tzinfo] = None) -> str:
    """
    Format a datetime as RFC 2822 text, e.g. "Tue, 26 Jan 2016 13:48:02 +0000".

    Sub-second precision is dropped.
    """

    return format_datetime(localize(value, zone))


def format_iso8601(value: datetime, zone: Optional[tzinfo] = None) -> str:
    """Format a datetime as ISO 8601 text with millisecond precision."""

    return localize(value, zone).isoformat(timespec="milliseconds")


__all__ = [
    "DateParseError",
    "format_iso8601",
    "format_rfc2822",
    "from_iso8601",
    "from_rfc2822",
    "parse_iso8601",
    "parse_rfc2822",
]
