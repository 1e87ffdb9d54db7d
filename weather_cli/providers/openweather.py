"""OpenWeatherMap current weather provider."""
from __future__ import annotations

from typing import Optional

from pydantic import ValidationError

from weather_cli.entities import WeatherReading
from weather_cli.exceptions import ParseError
from weather_cli.schemas import CurrentWeatherPayload
from weather_cli.settings import OPENWEATHER_URL

from .base import WeatherProvider


class OpenWeatherProvider(WeatherProvider):
    """Integration with the OpenWeatherMap current weather endpoint."""

    name = "openweather"

    def __init__(self, *, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = base_url or OPENWEATHER_URL

    def current(self, city: str) -> WeatherReading:
        """Return the current weather reported for ``city``."""
        params = {"q": city, "appid": self.api_key}
        self._log.debug("Requesting current weather for %r from %s", city, self.base_url)
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        try:
            payload = CurrentWeatherPayload.model_validate(data)
        except ValidationError as exc:
            self._log.error("Unexpected payload shape", exc_info=exc)
            raise ParseError(f"Failed to parse weather data: {exc}") from exc
        reading = payload.to_reading()
        self._log.debug("Received weather for %s", reading.location_name)
        return reading


__all__ = ["OpenWeatherProvider"]
