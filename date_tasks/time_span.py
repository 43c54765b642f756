"""
Time span between two datetimes, formatted as "HH:mm:ss.sss".

Contract:
- diff_ms = instant(end) - instant(start), in whole milliseconds.
- Fields are peeled off with successive divmod by 1000, 60, 60.
- Hours are taken modulo 24; there is no day field, so a 30-hour span
  formats as "06:00:00.000".
- end < start is rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .time import to_epoch_millis


@dataclass(frozen=True, slots=True)
class TimeSpan:
    """Clock-style decomposition of a non-negative interval."""

    hours: int
    minutes: int
    seconds: int
    milliseconds: int

    @staticmethod
    def from_millis(total_ms: int) -> "TimeSpan":
        if total_ms < 0:
            raise ValueError("total_ms must be >= 0")

        rest, milliseconds = divmod(total_ms, 1000)
        rest, seconds = divmod(rest, 60)
        rest, minutes = divmod(rest, 60)
        return TimeSpan(
            hours=rest % 24,
            minutes=minutes,
            seconds=seconds,
            milliseconds=milliseconds,
        )

    @staticmethod
    def between(start: datetime, end: datetime) -> "TimeSpan":
        """
        Build the span from start to end.

        Naive values are interpreted in the configured local timezone, so
        naive and aware arguments may be mixed.
        """

        diff_ms = to_epoch_millis(end) - to_epoch_millis(start)
        if diff_ms < 0:
            raise ValueError("end must be >= start")
        return TimeSpan.from_millis(diff_ms)

    def format(self) -> str:
        return (
            f"{self.hours:02d}:{self.minutes:02d}:"
            f"{self.seconds:02d}.{self.milliseconds:03d}"
        )


def format_time_span(start: datetime, end: datetime) -> str:
    """Return the span from start to end as "HH:mm:ss.sss"."""

    return TimeSpan.between(start, end).format()


__all__ = ["TimeSpan", "format_time_span"]
