from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Condition:
    """One provider weather condition, e.g. ("light rain", "Rain")."""

    description: str = ""
    category: str = ""


@dataclass(frozen=True)
class WeatherReading:
    """Current weather for one location as reported by the provider.

    Values are kept in the provider's units:
    - temperatures in Kelvin
    - wind speed in metres per second (m/s)
    - wind bearing in compass degrees, ``None`` without a directional reading
    - sunrise and sunset as UNIX seconds (UTC)
    """

    location_name: str
    temperature_k: float
    feels_like_k: float
    temp_max_k: float
    temp_min_k: float
    humidity_percent: int
    conditions: Tuple[Condition, ...]
    wind_speed_ms: float
    wind_bearing_deg: Optional[float]
    sunrise_ts: int
    sunset_ts: int

    @property
    def primary_condition(self) -> Condition:
        if not self.conditions:
            return Condition()
        return self.conditions[0]


__all__ = ["Condition", "WeatherReading"]
