"""
Angle between the hands of a 12-hour analog clock.

The hour hand moves 0.5 degrees per minute and the minute hand 6 degrees per
minute, both measured from 12 o'clock. The reported angle is the smaller of
the two arcs between the hands, so it always lies in [0, 180] degrees, or
[0, pi] radians.
"""

from __future__ import annotations

import math
from datetime import datetime

from .time import to_utc


def clock_angle_degrees(hour: int, minute: int) -> float:
    """
    Smaller angle between the hands, in degrees.

    `hour` is 0-23 (only hour mod 12 matters). `minute` is 0-60; a minute of
    60 carries into the next hour.
    """

    if not 0 <= hour <= 23:
        raise ValueError("hour must be between 0 and 23")
    if not 0 <= minute <= 60:
        raise ValueError("minute must be between 0 and 60")

    h = hour % 12
    m = minute
    if m == 60:
        m = 0
        h = (h + 1) % 12

    hour_angle = 0.5 * (h * 60 + m)
    minute_angle = 6 * m

    angle = abs(hour_angle - minute_angle) % 360
    return min(360 - angle, angle)


def clock_angle(value: datetime) -> float:
    """
    Angle in radians between the clock hands at the UTC time of `value`.

    Seconds and sub-seconds are ignored. Radians are computed once, from the
    final degree value.
    """

    utc = to_utc(value)
    degrees = clock_angle_degrees(utc.hour, utc.minute)
    return abs(degrees * (math.pi / 180))


__all__ = ["clock_angle", "clock_angle_degrees"]
