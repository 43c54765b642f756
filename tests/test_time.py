"""
Tests for `date_tasks/time.py`.

Covers rules:
- Naive datetimes are localized with the configured (or explicit) zone.
- Aware datetimes are left as they are.
- Epoch milliseconds are floored, including before 1970.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from date_tasks.time import (
    localize,
    to_epoch_millis,
    to_utc,
)


def test_localize_naive_uses_configured_zone() -> None:
    result = localize(datetime(2016, 1, 1, 12, 0))

    assert result.utcoffset() == timedelta(0)


def test_localize_naive_uses_explicit_zone() -> None:
    zone = timezone(timedelta(hours=-3))

    result = localize(datetime(2016, 1, 1, 12, 0), zone)

    assert result.tzinfo is zone
    assert (result.hour, result.minute) == (12, 0)


def test_localize_aware_is_unchanged() -> None:
    value = datetime(2016, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=4)))

    assert localize(value, timezone.utc) is value


def test_localize_rejects_non_datetimes() -> None:
    with pytest.raises(TypeError):
        localize("2016-01-01")  # type: ignore[arg-type]


def test_to_utc_converts_offsets() -> None:
    value = datetime(2016, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=4)))

    assert to_utc(value) == datetime(2016, 1, 1, 8, 0, tzinfo=timezone.utc)
    assert to_utc(value).utcoffset() == timedelta(0)


@pytest.mark.parametrize(
    "value, expected",
    [
        (datetime(1970, 1, 1, tzinfo=timezone.utc), 0),
        (datetime(1970, 1, 1, 0, 0, 1, 500_000, tzinfo=timezone.utc), 1500),
        (datetime(1970, 1, 1, 0, 0, 0, 999, tzinfo=timezone.utc), 0),
        (datetime(1969, 12, 31, 23, 59, 59, 999_500, tzinfo=timezone.utc), -1),
        (datetime(2016, 1, 19, 8, 7, 37, tzinfo=timezone.utc), 1_453_190_857_000),
        (datetime(1970, 1, 1, 1, 0), 3_600_000),
    ],
)
def test_to_epoch_millis(value: datetime, expected: int) -> None:
    assert to_epoch_millis(value) == expected
