from __future__ import annotations

from .base import RequestConfig, WeatherProvider
from .openweather import OpenWeatherProvider

__all__ = ["OpenWeatherProvider", "RequestConfig", "WeatherProvider"]
