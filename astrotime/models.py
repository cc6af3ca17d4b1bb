"""Pydantic models for coordinates and sunrise/sunset summaries."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from enum import Enum
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Twilight(str, Enum):
    """Enumeration of supported twilight definitions."""

    official = "official"
    civil = "civil"
    nautical = "nautical"
    astronomical = "astronomical"


# Zenith distance of the sun's centre at the event, in degrees. ``official``
# folds in standard refraction (34') and the solar semi-diameter (16').
TWILIGHT_ZENITHS: Dict[Twilight, float] = {
    Twilight.official: 90.833,
    Twilight.civil: 96.0,
    Twilight.nautical: 102.0,
    Twilight.astronomical: 108.0,
}


class GeoCoordinate(BaseModel):
    """Validated observer position."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    latitude: float = Field(..., ge=-90.0, le=90.0, description="Latitude in degrees")
    longitude: float = Field(
        ...,
        ge=-180.0,
        le=180.0,
        description="Longitude in degrees, positive east",
    )


class SunTimes(BaseModel):
    """Sunrise/sunset summary for one calendar day."""

    model_config = ConfigDict(frozen=True)

    status: Literal["ok", "polar_day", "polar_night"] = Field(
        ..., description="Computation status"
    )
    day: date = Field(..., description="Calendar date of the query, local to its offset")
    latitude: float = Field(..., description="Latitude in degrees")
    longitude: float = Field(..., description="Longitude in degrees")
    twilight: Twilight = Field(..., description="Applied twilight definition")
    solar_noon: datetime = Field(..., description="Local solar noon")
    sunrise: Optional[datetime] = Field(None, description="Sunrise, in the query's timezone")
    sunset: Optional[datetime] = Field(None, description="Sunset, in the query's timezone")
    day_length: Optional[timedelta] = Field(
        None, description="Time between sunrise and sunset"
    )
