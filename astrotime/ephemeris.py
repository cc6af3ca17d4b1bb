"""Low-precision solar ephemeris after the NOAA solar calculator.

Every function takes the Julian century ``t`` (see
:func:`astrotime.timescales.julian_century`) and returns degrees unless
stated otherwise.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "SolarParameters",
    "mean_longitude",
    "mean_anomaly",
    "eccentricity",
    "equation_of_center",
    "true_longitude",
    "true_anomaly",
    "apparent_longitude",
    "radius_vector",
    "mean_obliquity",
    "obliquity_correction",
    "declination",
    "equation_of_time",
    "solar_parameters",
]


def _omega(t: float) -> float:
    """Longitude of the Moon's ascending node, for the nutation terms."""

    return 125.04 - 1934.136 * t


def mean_longitude(t: float) -> float:
    """Geometric mean longitude of the sun, in [0, 360)."""

    lon = math.fmod(280.46646 + t * (36000.76983 + 0.0003032 * t), 360)
    if lon < 0.0:
        lon += 360
    return lon


def mean_anomaly(t: float) -> float:
    return 357.52911 + t * (35999.05029 - 0.0001537 * t)


def eccentricity(t: float) -> float:
    """Eccentricity of the earth's orbit (unitless)."""

    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def equation_of_center(t: float) -> float:
    mrad = math.radians(mean_anomaly(t))
    sinm = math.sin(mrad)
    sin2m = math.sin(mrad + mrad)
    sin3m = math.sin(mrad + mrad + mrad)
    return (
        sinm * (1.914602 - t * (0.004817 + 0.000014 * t))
        + sin2m * (0.019993 - 0.000101 * t)
        + sin3m * 0.000289
    )


def true_longitude(t: float) -> float:
    return mean_longitude(t) + equation_of_center(t)


def true_anomaly(t: float) -> float:
    return mean_anomaly(t) + equation_of_center(t)


def apparent_longitude(t: float) -> float:
    """True longitude corrected for nutation and aberration."""

    return true_longitude(t) - 0.00569 - 0.00478 * math.sin(math.radians(_omega(t)))


def radius_vector(t: float) -> float:
    """Sun-earth distance in astronomical units."""

    e = eccentricity(t)
    v = true_anomaly(t)
    return (1.000001018 * (1 - e * e)) / (1 + e * math.cos(math.radians(v)))


def mean_obliquity(t: float) -> float:
    """Mean obliquity of the ecliptic; the polynomial is in arcseconds."""

    seconds = 21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))
    return 23.0 + (26.0 + (seconds / 60.0)) / 60.0


def obliquity_correction(t: float) -> float:
    return mean_obliquity(t) + 0.00256 * math.cos(math.radians(_omega(t)))


def declination(t: float) -> float:
    epsilon = obliquity_correction(t)
    lam = apparent_longitude(t)
    sint = math.sin(math.radians(epsilon)) * math.sin(math.radians(lam))
    return math.degrees(math.asin(sint))


def equation_of_time(t: float) -> float:
    """Apparent minus mean solar time, in minutes of time."""

    epsilon = obliquity_correction(t)
    l0 = mean_longitude(t)
    e = eccentricity(t)
    m = mean_anomaly(t)

    y = math.tan(math.radians(epsilon) / 2.0)
    y *= y

    sin2l0 = math.sin(2.0 * math.radians(l0))
    sinm = math.sin(math.radians(m))
    cos2l0 = math.cos(2.0 * math.radians(l0))
    sin4l0 = math.sin(4.0 * math.radians(l0))
    sin2m = math.sin(2.0 * math.radians(m))

    etime = (
        y * sin2l0
        - 2.0 * e * sinm
        + 4.0 * e * y * sinm * cos2l0
        - 0.5 * y * y * sin4l0
        - 1.25 * e * e * sin2m
    )
    return math.degrees(etime) * 4.0


@dataclass(frozen=True)
class SolarParameters:
    """Solar ephemeris values sampled at one Julian century."""

    century: float
    mean_longitude: float
    mean_anomaly: float
    eccentricity: float
    equation_of_center: float
    true_longitude: float
    apparent_longitude: float
    obliquity_correction: float
    declination: float
    equation_of_time: float


def solar_parameters(t: float) -> SolarParameters:
    return SolarParameters(
        century=t,
        mean_longitude=mean_longitude(t),
        mean_anomaly=mean_anomaly(t),
        eccentricity=eccentricity(t),
        equation_of_center=equation_of_center(t),
        true_longitude=true_longitude(t),
        apparent_longitude=apparent_longitude(t),
        obliquity_correction=obliquity_correction(t),
        declination=declination(t),
        equation_of_time=equation_of_time(t),
    )
