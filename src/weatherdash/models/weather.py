"""
Weather models — base tier plus an extended tier only richer providers populate.

Every extended field is independently optional: seeing one of them says nothing
about the others. `extended` hands back the tier as its own model so callers can
check fields one by one without touching the base shape.
"""

import datetime as dt
from typing import Any, Optional

from pydantic import model_validator

from weatherdash.models.base import WireModel


def _extended_present(model: WireModel, tier: type[WireModel]) -> bool:
    return any(getattr(model, name) is not None for name in tier.model_fields)


def _split_tier(model: WireModel, tier: type[WireModel]) -> WireModel:
    return tier(**{name: getattr(model, name) for name in tier.model_fields})


# -- current ------------------------------------------------------------------

class CurrentWeatherBase(WireModel):
    city: str
    lat: float
    lon: float
    temp: float
    feels_like: float
    description: str
    icon: str
    wind_speed: float
    wind_deg: Optional[int] = None
    humidity: int
    pressure: Optional[float] = None
    visibility: Optional[float] = None
    timestamp: Optional[int] = None
    country: Optional[str] = None
    aqi: Optional[int] = None


class CurrentWeatherExtended(WireModel):
    wind_dir: Optional[str] = None
    wind_scale: Optional[str] = None
    precip: Optional[float] = None
    cloud: Optional[int] = None
    dew: Optional[float] = None


class CurrentWeatherDTO(CurrentWeatherBase, CurrentWeatherExtended):
    @property
    def has_extended(self) -> bool:
        return _extended_present(self, CurrentWeatherExtended)

    @property
    def extended(self) -> CurrentWeatherExtended:
        return _split_tier(self, CurrentWeatherExtended)


# -- hourly -------------------------------------------------------------------

class HourlyForecastBase(WireModel):
    city: str
    lat: float
    lon: float
    time: dt.datetime
    temp: float
    feels_like: float
    description: str
    icon: str
    wind_speed: float
    humidity: int
    pop: Optional[float] = None


class HourlyForecastExtended(WireModel):
    wind_deg: Optional[int] = None
    wind_dir: Optional[str] = None
    wind_scale: Optional[str] = None
    pressure: Optional[float] = None
    visibility: Optional[float] = None
    precip: Optional[float] = None
    cloud: Optional[int] = None
    dew: Optional[float] = None


class HourlyForecastDTO(HourlyForecastBase, HourlyForecastExtended):
    @property
    def has_extended(self) -> bool:
        return _extended_present(self, HourlyForecastExtended)

    @property
    def extended(self) -> HourlyForecastExtended:
        return _split_tier(self, HourlyForecastExtended)


# -- daily --------------------------------------------------------------------

class DailyForecastBase(WireModel):
    city: str
    lat: float
    lon: float
    date: dt.date
    temp_min: float
    temp_max: float
    description: str
    icon: str
    wind_speed: float
    humidity: int
    pop: Optional[float] = None


class DailyForecastExtended(WireModel):
    icon_day: Optional[str] = None
    text_day: Optional[str] = None
    icon_night: Optional[str] = None
    text_night: Optional[str] = None
    wind360_day: Optional[int] = None
    wind_dir_day: Optional[str] = None
    wind_scale_day: Optional[str] = None
    wind_speed_day: Optional[float] = None
    wind360_night: Optional[int] = None
    wind_dir_night: Optional[str] = None
    wind_scale_night: Optional[str] = None
    wind_speed_night: Optional[float] = None
    pressure: Optional[float] = None
    visibility: Optional[float] = None
    precip: Optional[float] = None
    cloud: Optional[int] = None
    uv_index: Optional[int] = None
    sunrise: Optional[str] = None
    sunset: Optional[str] = None
    moonrise: Optional[str] = None
    moonset: Optional[str] = None
    moon_phase: Optional[str] = None
    moon_phase_icon: Optional[str] = None


# Rich providers report day/night halves instead of the flat base fields.
_DAILY_FALLBACKS = (
    # (wire name, python name, day-half wire name)
    ("description", "description", "textDay"),
    ("icon", "icon", "iconDay"),
    ("windSpeed", "wind_speed", "windSpeedDay"),
)


class DailyForecastDTO(DailyForecastBase, DailyForecastExtended):
    @model_validator(mode="before")
    @classmethod
    def fill_base_from_day(cls, raw: Any) -> Any:
        if not isinstance(raw, dict):
            return raw
        filled = dict(raw)
        for alias, name, day_alias in _DAILY_FALLBACKS:
            if filled.get(alias) is None and filled.get(name) is None and filled.get(day_alias) is not None:
                filled[alias] = filled[day_alias]
        return filled

    @property
    def has_extended(self) -> bool:
        return _extended_present(self, DailyForecastExtended)

    @property
    def extended(self) -> DailyForecastExtended:
        return _split_tier(self, DailyForecastExtended)


# -- alerts -------------------------------------------------------------------

class AlertDTO(WireModel):
    """Point-in-time alert record. Identity and de-duplication belong to the backend."""
    city: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None
    event: str
    description: str = ""
    start: Optional[dt.datetime] = None
    end: Optional[dt.datetime] = None
    level: Optional[str] = None
    tags: Optional[str] = None
