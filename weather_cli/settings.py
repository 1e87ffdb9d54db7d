"""Runtime settings read from the environment."""
from __future__ import annotations

import os

from weather_cli.exceptions import ConfigurationError

API_KEY_VARIABLE = "WEATHER_API_KEY"
OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


def get_api_key() -> str:
    """Return the provider API key, failing before any network activity."""

    value = os.environ.get(API_KEY_VARIABLE, "")
    if not value.strip():
        raise ConfigurationError(f"Please set the {API_KEY_VARIABLE} environment variable")
    return value


__all__ = ["API_KEY_VARIABLE", "OPENWEATHER_URL", "get_api_key"]
