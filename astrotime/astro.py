"""Sunrise, sunset and solar noon from the NOAA solar calculator."""

from __future__ import annotations

import json
import logging
import math
from datetime import datetime, timedelta
from typing import Callable, Optional, Union

from pydantic import ValidationError

from .ephemeris import solar_parameters
from .models import TWILIGHT_ZENITHS, GeoCoordinate, SunTimes, Twilight
from .timescales import (
    from_utc_minutes,
    julian_century,
    julian_date,
    julian_date_from_century,
)

__all__ = [
    "SunTimesError",
    "InvalidCoordinateError",
    "NoSunriseSunsetError",
    "hour_angle",
    "solar_noon_utc",
    "sunrise_utc",
    "sunset_utc",
    "sunrise",
    "sunset",
    "next_sunrise",
    "next_sunset",
    "solar_noon",
    "sun_times",
]

LOGGER = logging.getLogger(__name__)

OFFICIAL_ZENITH = TWILIGHT_ZENITHS[Twilight.official]


class SunTimesError(Exception):
    """Base class for sunrise/sunset computation errors."""


class InvalidCoordinateError(SunTimesError, ValueError):
    """Raised when a latitude or longitude is out of range."""


class NoSunriseSunsetError(SunTimesError):
    """Raised when the sun does not cross the event altitude on the date.

    ``status`` is ``"polar_day"`` when the sun stays above the altitude and
    ``"polar_night"`` when it stays below.
    """

    def __init__(self, status: str, latitude: float, declination: float) -> None:
        self.status = status
        self.latitude = latitude
        self.declination = declination
        super().__init__(
            f"No sunrise or sunset ({status}) at latitude {latitude:.4f} "
            f"with solar declination {declination:.4f}"
        )


def _coordinate(latitude: float, longitude: float) -> GeoCoordinate:
    try:
        return GeoCoordinate(latitude=latitude, longitude=longitude)
    except ValidationError as exc:
        messages = ", ".join(error["msg"] for error in exc.errors())
        raise InvalidCoordinateError(
            f"Invalid coordinate ({latitude!r}, {longitude!r}): {messages}"
        ) from exc


def _zenith(twilight: Union[Twilight, str]) -> float:
    try:
        return TWILIGHT_ZENITHS[Twilight(twilight)]
    except ValueError as exc:
        raise ValueError(f"Unsupported twilight selector: {twilight}") from exc


def hour_angle(
    latitude: float,
    declination: float,
    for_sunset: bool = False,
    zenith: float = OFFICIAL_ZENITH,
) -> float:
    """Hour angle of the sun, in radians, when its centre reaches *zenith*.

    Parameters
    ----------
    latitude, declination:
        Degrees.
    for_sunset:
        Sunrise and sunset both come back negative, the sunset formula
        negates it once more when forming the time offset from noon.
    zenith:
        Zenith distance of the sun's centre at the event, in degrees.

    Raises
    ------
    NoSunriseSunsetError
        If the sun never reaches *zenith* at this latitude and declination.
    """

    lat_rad = math.radians(latitude)
    dec_rad = math.radians(declination)
    cos_ha = math.cos(math.radians(zenith)) / (
        math.cos(lat_rad) * math.cos(dec_rad)
    ) - math.tan(lat_rad) * math.tan(dec_rad)

    if not -1.0 <= cos_ha <= 1.0:
        status = "polar_day" if cos_ha < -1.0 else "polar_night"
        LOGGER.debug(
            json.dumps(
                {
                    "event": "no_sunrise_sunset",
                    "status": status,
                    "latitude": latitude,
                    "declination": declination,
                    "for_sunset": for_sunset,
                }
            )
        )
        raise NoSunriseSunsetError(status, latitude, declination)

    return -math.acos(cos_ha)


def solar_noon_utc(t: float, longitude: float) -> float:
    """Minutes after UTC midnight of solar noon at *longitude*.

    *t* is the Julian century of the day being solved.
    """

    jd = julian_date_from_century(t)

    # First pass samples the equation of time at the approximate noon.
    approx = solar_parameters(julian_century(jd - longitude / 360.0))
    noon = 720 - (longitude * 4) - approx.equation_of_time

    refined = solar_parameters(julian_century(jd - 0.5 + noon / 1440.0))
    return 720 - (longitude * 4) - refined.equation_of_time


def _event_minutes(
    hour_angle_rad: float,
    longitude: float,
    equation_of_time: float,
    for_sunset: bool,
) -> float:
    if for_sunset:
        delta = -longitude - math.degrees(hour_angle_rad)
    else:
        delta = math.degrees(hour_angle_rad) - longitude
    return 720 + 4 * delta - equation_of_time


def _event_utc(
    jd: float,
    latitude: float,
    longitude: float,
    zenith: float,
    for_sunset: bool,
) -> float:
    t = julian_century(jd)

    # Sample declination at local solar noon rather than the start of the day.
    noon = solar_noon_utc(t, longitude)
    at_noon = solar_parameters(julian_century(jd + noon / 1440.0))
    ha = hour_angle(latitude, at_noon.declination, for_sunset, zenith)
    approx = _event_minutes(ha, longitude, at_noon.equation_of_time, for_sunset)

    # Second pass resamples at the approximate event time.
    at_event = solar_parameters(
        julian_century(julian_date_from_century(t) + approx / 1440.0)
    )
    ha = hour_angle(latitude, at_event.declination, for_sunset, zenith)
    return _event_minutes(ha, longitude, at_event.equation_of_time, for_sunset)


def sunrise_utc(
    jd: float,
    latitude: float,
    longitude: float,
    zenith: float = OFFICIAL_ZENITH,
) -> float:
    """Minutes after UTC midnight of sunrise; may fall outside [0, 1440)."""

    return _event_utc(jd, latitude, longitude, zenith, for_sunset=False)


def sunset_utc(
    jd: float,
    latitude: float,
    longitude: float,
    zenith: float = OFFICIAL_ZENITH,
) -> float:
    """Minutes after UTC midnight of sunset; may fall outside [0, 1440)."""

    return _event_utc(jd, latitude, longitude, zenith, for_sunset=True)


def _local_event(
    solver: Callable[[float, float, float, float], float],
    instant: datetime,
    latitude: float,
    longitude: float,
    twilight: Union[Twilight, str],
) -> datetime:
    coordinate = _coordinate(latitude, longitude)
    zenith = _zenith(twilight)
    jd = julian_date(instant)
    minutes = solver(jd, coordinate.latitude, coordinate.longitude, zenith)
    return from_utc_minutes(instant, minutes)


def sunrise(
    instant: datetime,
    latitude: float,
    longitude: float,
    twilight: Union[Twilight, str] = Twilight.official,
) -> datetime:
    """Sunrise on the calendar date of *instant*, in *instant*'s timezone.

    Parameters
    ----------
    instant:
        Timezone-aware datetime. Its calendar date and UTC offset select the
        day; the time of day only shifts the ephemeris sample point.
    latitude, longitude:
        Degrees, longitude positive east.
    twilight:
        Which solar altitude counts as the event.

    Raises
    ------
    InvalidCoordinateError
        If the coordinate is out of range.
    NoSunriseSunsetError
        During polar day or polar night.
    """

    return _local_event(sunrise_utc, instant, latitude, longitude, twilight)


def sunset(
    instant: datetime,
    latitude: float,
    longitude: float,
    twilight: Union[Twilight, str] = Twilight.official,
) -> datetime:
    """Sunset on the calendar date of *instant*, in *instant*'s timezone.

    See :func:`sunrise` for parameters and errors.
    """

    return _local_event(sunset_utc, instant, latitude, longitude, twilight)


def _next_event(
    event: Callable[..., datetime],
    after: datetime,
    latitude: float,
    longitude: float,
    twilight: Union[Twilight, str],
) -> datetime:
    result = event(after, latitude, longitude, twilight)
    days = 1
    # Aware datetime arithmetic keeps the wall-clock time, so each step moves
    # exactly one civil day even across a UTC offset change.
    while not after < result:
        result = event(after + timedelta(days=days), latitude, longitude, twilight)
        days += 1
    return result


def next_sunrise(
    after: datetime,
    latitude: float,
    longitude: float,
    twilight: Union[Twilight, str] = Twilight.official,
) -> datetime:
    """First sunrise strictly after *after*."""

    return _next_event(sunrise, after, latitude, longitude, twilight)


def next_sunset(
    after: datetime,
    latitude: float,
    longitude: float,
    twilight: Union[Twilight, str] = Twilight.official,
) -> datetime:
    """First sunset strictly after *after*."""

    return _next_event(sunset, after, latitude, longitude, twilight)


def solar_noon(instant: datetime, longitude: float) -> datetime:
    """Local solar noon on the calendar date of *instant*."""

    coordinate = _coordinate(0.0, longitude)
    t = julian_century(julian_date(instant))
    return from_utc_minutes(instant, solar_noon_utc(t, coordinate.longitude))


def sun_times(
    instant: datetime,
    latitude: float,
    longitude: float,
    twilight: Union[Twilight, str] = Twilight.official,
) -> SunTimes:
    """Summarise the day of *instant* without raising on polar conditions.

    Returns
    -------
    SunTimes
        ``status`` is ``"ok"`` when both events exist. Otherwise it carries
        the polar condition and ``sunrise``, ``sunset`` and ``day_length`` are
        ``None``.
    """

    twilight = Twilight(twilight)
    rise: Optional[datetime] = None
    set_: Optional[datetime] = None
    day_length: Optional[timedelta] = None
    try:
        rise = sunrise(instant, latitude, longitude, twilight)
        set_ = sunset(instant, latitude, longitude, twilight)
    except NoSunriseSunsetError as exc:
        status = exc.status
        rise = set_ = None
    else:
        status = "ok"
        day_length = set_ - rise

    result = SunTimes(
        status=status,
        day=instant.date(),
        latitude=latitude,
        longitude=longitude,
        twilight=twilight,
        solar_noon=solar_noon(instant, longitude),
        sunrise=rise,
        sunset=set_,
        day_length=day_length,
    )
    LOGGER.debug(
        json.dumps(
            {
                "event": "sun_times",
                "lat": latitude,
                "lon": longitude,
                "date": result.day.isoformat(),
                "twilight": twilight.value,
                "status": status,
            }
        )
    )
    return result
