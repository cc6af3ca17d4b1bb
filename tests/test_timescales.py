from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from pathlib import Path

import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import erfa
import pytest

from astrotime.timescales import (
    J2000,
    from_utc_minutes,
    julian_century,
    julian_date,
    julian_date_from_century,
)


def test_j2000_epoch():
    assert julian_date(datetime(2000, 1, 1, 12, tzinfo=timezone.utc)) == J2000
    assert julian_century(J2000) == 0.0


@pytest.mark.parametrize(
    "day",
    [
        date(2000, 1, 1),
        date(2000, 2, 29),
        date(2017, 7, 10),
        date(1900, 3, 1),
        date(2100, 12, 31),
        date(1582, 10, 15),
    ],
)
def test_midnight_matches_erfa(day):
    djm0, djm = erfa.cal2jd(day.year, day.month, day.day)
    midnight = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    assert julian_date(midnight) == pytest.approx(djm0 + djm, abs=1e-9)


def test_time_of_day_fraction():
    dt = datetime(2017, 10, 15, 15, 4, 5, 123456, tzinfo=timezone.utc)
    djm0, djm = erfa.cal2jd(2017, 10, 15)
    expected = djm0 + djm + (15 * 3600 + 4 * 60 + 5.123) / 86400.0
    assert julian_date(dt) == pytest.approx(expected, abs=1e-9)


def test_offset_is_added_in_days():
    base = julian_date(datetime(2017, 10, 15, 6, tzinfo=timezone.utc))
    plus_ten = julian_date(datetime(2017, 10, 15, 6, tzinfo=timezone(timedelta(hours=10))))
    minus_five = julian_date(datetime(2017, 10, 15, 6, tzinfo=timezone(timedelta(hours=-5))))
    assert plus_ten - base == pytest.approx(10 / 24, abs=1e-9)
    assert minus_five - base == pytest.approx(-5 / 24, abs=1e-9)


def test_naive_datetime_rejected():
    with pytest.raises(ValueError):
        julian_date(datetime(2017, 10, 15))


def test_century_round_trip():
    jd = 2458041.1279
    assert julian_date_from_century(julian_century(jd)) == pytest.approx(jd, abs=1e-8)
    assert julian_century(J2000 + 36525.0) == 1.0


@pytest.mark.parametrize(
    "minutes, expected",
    [
        (0.0, datetime(2017, 7, 10, 0, 0, 0, tzinfo=timezone.utc)),
        (1.99999, datetime(2017, 7, 10, 0, 1, 59, tzinfo=timezone.utc)),
        (771.5, datetime(2017, 7, 10, 12, 51, 30, tzinfo=timezone.utc)),
        (-145.5, datetime(2017, 7, 9, 21, 34, 30, tzinfo=timezone.utc)),
        (-0.01, datetime(2017, 7, 9, 23, 59, 59, tzinfo=timezone.utc)),
        (1500.0, datetime(2017, 7, 11, 1, 0, 0, tzinfo=timezone.utc)),
    ],
)
def test_from_utc_minutes(minutes, expected):
    result = from_utc_minutes(date(2017, 7, 10), minutes)
    assert result == expected
    assert result.microsecond == 0
    assert result.utcoffset() == timedelta(0)


def test_from_utc_minutes_uses_local_anchor_date():
    tz = timezone(timedelta(hours=10))
    anchor = datetime(2017, 7, 10, 2, 0, tzinfo=tz)  # 2017-07-09 16:00 UTC
    result = from_utc_minutes(anchor, 60.0)
    assert result == datetime(2017, 7, 10, 1, 0, tzinfo=timezone.utc)
    assert result.utcoffset() == timedelta(hours=10)
    assert result.hour == 11


def test_from_utc_minutes_explicit_timezone():
    tz = timezone(timedelta(hours=-3))
    result = from_utc_minutes(date(2017, 7, 10), 60.0, tz)
    assert result.utcoffset() == timedelta(hours=-3)
    assert (result.day, result.hour) == (9, 22)


def test_from_utc_minutes_rejects_nan():
    with pytest.raises(ValueError):
        from_utc_minutes(date(2017, 7, 10), float("nan"))
