"""Pydantic schemas for the OpenWeatherMap current weather payload."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from weather_cli.entities import Condition, WeatherReading

__all__ = ["CurrentWeatherPayload"]


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True, allow_inf_nan=False)


class MainBlock(_Payload):
    temp: float = Field(...)
    feels_like: float = Field(...)
    temp_max: float = Field(...)
    temp_min: float = Field(...)
    humidity: int = Field(...)


class ConditionBlock(_Payload):
    description: str = Field(...)
    main: str = Field(...)


class WindBlock(_Payload):
    speed: float = Field(...)
    deg: Optional[float] = Field(default=None)


class SunBlock(_Payload):
    sunrise: int = Field(...)
    sunset: int = Field(...)


class CurrentWeatherPayload(_Payload):
    name: str = Field(...)
    main: MainBlock = Field(...)
    weather: List[ConditionBlock] = Field(...)
    wind: WindBlock = Field(...)
    sys: SunBlock = Field(...)

    def to_reading(self) -> WeatherReading:
        return WeatherReading(
            location_name=self.name,
            temperature_k=self.main.temp,
            feels_like_k=self.main.feels_like,
            temp_max_k=self.main.temp_max,
            temp_min_k=self.main.temp_min,
            humidity_percent=self.main.humidity,
            conditions=tuple(
                Condition(description=item.description, category=item.main) for item in self.weather
            ),
            wind_speed_ms=self.wind.speed,
            wind_bearing_deg=self.wind.deg,
            sunrise_ts=self.sys.sunrise,
            sunset_ts=self.sys.sunset,
        )
