"""Sunrise and sunset times from the NOAA solar position approximation."""

from .astro import (
    InvalidCoordinateError,
    NoSunriseSunsetError,
    SunTimesError,
    next_sunrise,
    next_sunset,
    solar_noon,
    sun_times,
    sunrise,
    sunset,
)
from .models import GeoCoordinate, SunTimes, Twilight

__all__ = [
    "sunrise",
    "sunset",
    "next_sunrise",
    "next_sunset",
    "solar_noon",
    "sun_times",
    "GeoCoordinate",
    "SunTimes",
    "Twilight",
    "SunTimesError",
    "InvalidCoordinateError",
    "NoSunriseSunsetError",
]
