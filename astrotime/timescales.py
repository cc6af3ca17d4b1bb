"""Conversions between civil datetimes, Julian dates and UTC minutes-of-day."""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, timedelta, tzinfo
from typing import Optional, Union

__all__ = [
    "J2000",
    "DAYS_PER_CENTURY",
    "julian_date",
    "julian_century",
    "julian_date_from_century",
    "from_utc_minutes",
]

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0


def _require_aware(dt: datetime) -> timedelta:
    offset = dt.utcoffset()
    if offset is None:
        raise ValueError("datetime must be timezone-aware")
    return offset


def julian_date(dt: datetime) -> float:
    """Return the Julian date of the wall-clock fields of *dt*.

    The day number comes from the integer Gregorian formula; the time of day
    is added as a fraction counted from noon, then the UTC offset of *dt*
    (seconds east of UTC) is added in days. Precision below one millisecond
    is dropped.
    """

    offset = _require_aware(dt)

    year, month, day = dt.year, dt.month, dt.day
    # (month - 14) / 12 with truncating division: -1 for Jan/Feb, else 0.
    adjust = -1 if month <= 2 else 0
    jday = (
        (1461 * (year + 4800 + adjust)) // 4
        + (367 * (month - 2 - 12 * adjust)) // 12
        - (3 * ((year + 4900 + adjust) // 100)) // 4
        + day
        - 32075
    )

    millis = dt.microsecond // 1000
    jd = (
        float(jday)
        + (float(dt.hour) - 12.0) / 24.0
        + float(dt.minute) / 1440.0
        + float(dt.second) / 86400.0
        + float(millis) / 86400000.0
    )
    return jd + float(int(offset.total_seconds())) / 86400


def julian_century(jd: float) -> float:
    """Centuries since J2000.0."""

    return (jd - J2000) / DAYS_PER_CENTURY


def julian_date_from_century(t: float) -> float:
    return t * DAYS_PER_CENTURY + J2000


def from_utc_minutes(
    anchor: Union[date, datetime],
    minutes_utc: float,
    tz: Optional[tzinfo] = None,
) -> datetime:
    """Build a datetime from minutes after UTC midnight of *anchor*'s date.

    Parameters
    ----------
    anchor:
        Supplies the calendar date. For a datetime, the date is read from its
        own wall-clock fields, not from its UTC equivalent.
    minutes_utc:
        Minutes after UTC midnight; values below zero or above 1440 land on
        the neighbouring UTC day.
    tz:
        Target timezone. Defaults to the anchor's tzinfo, or UTC.

    Returns
    -------
    datetime
        Timezone-aware datetime truncated to whole seconds.
    """

    if not math.isfinite(minutes_utc):
        raise ValueError(f"minutes_utc must be finite, got {minutes_utc!r}")
    if tz is None and isinstance(anchor, datetime):
        tz = anchor.tzinfo
    midnight = datetime(anchor.year, anchor.month, anchor.day, tzinfo=UTC)
    result = midnight + timedelta(seconds=math.floor(minutes_utc * 60))
    return result.astimezone(tz or UTC)
