"""
Calendar rules: Gregorian leap years.

A year is a leap year iff:
  (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

Examples:
  1900 -> False (century, not divisible by 400)
  2000 -> True
  2001 -> False
  2012 -> True
  2015 -> False
"""

from __future__ import annotations

from datetime import date


def is_leap_year(value: date) -> bool:
    """
    Return True if the calendar year of `value` is a leap year.

    Only the year is consulted; `value` may be a date or a datetime.
    """

    if not isinstance(value, date):
        raise TypeError(f"expected date or datetime, got {type(value).__name__}")

    year = value.year
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


__all__ = ["is_leap_year"]
