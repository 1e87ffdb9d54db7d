"""Unit conversion and display helpers for provider readings.

Everything here is pure: the report module feeds raw provider values in and
gets display-ready numbers or strings back.
"""
from __future__ import annotations

import math
from datetime import datetime, timezone, tzinfo
from typing import Dict, Optional

from weather_cli.exceptions import InvalidTimestamp

KELVIN_OFFSET = 273.15
MS_TO_KMH = 3.6

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)
SECTOR_WIDTH = 360.0 / len(COMPASS_POINTS)
NO_DIRECTION = "-"

DEFAULT_EMOJI = "🌡️"
WEATHER_EMOJI: Dict[str, str] = {
    "clear": "☀️",
    "clouds": "☁️",
    "rain": "🌧️",
    "snow": "❄️",
    "thunderstorm": "⛈️",
    "drizzle": "🌦️",
    "mist": "🌫️",
    "fog": "🌫️",
}


# temperature ----------------------------------------------------------------
def kelvin_to_celsius(kelvin: float) -> float:
    return kelvin - KELVIN_OFFSET


def kelvin_to_fahrenheit(kelvin: float) -> float:
    return (kelvin - KELVIN_OFFSET) * 9 / 5 + 32


def convert_temperature(kelvin: float, fahrenheit: bool) -> float:
    if fahrenheit:
        return kelvin_to_fahrenheit(kelvin)
    return kelvin_to_celsius(kelvin)


def temperature_unit(fahrenheit: bool) -> str:
    return "°F" if fahrenheit else "°C"


def format_temperature(value: float, unit: str = "") -> str:
    """Render ``value`` with one decimal and an explicit leading minus.

    The sign comes from the unrounded value, so ``-0.04`` renders as
    ``"-0.0"`` while ``-0.0`` renders as ``"0.0"``.
    """

    sign = "-" if value < 0 else ""
    return f"{sign}{abs(value):.1f}{unit}"


# wind -----------------------------------------------------------------------
def meters_per_second_to_kmh(mps: float) -> float:
    return mps * MS_TO_KMH


def wind_direction(degrees: float) -> str:
    """Map a bearing to one of the 16 compass points, N centred on 0°."""

    shifted = (degrees + SECTOR_WIDTH / 2) % 360.0
    # a tiny negative shift can come back as exactly 360.0
    index = math.floor(shifted / SECTOR_WIDTH) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]


def describe_wind_direction(degrees: Optional[float]) -> str:
    if degrees is None:
        return NO_DIRECTION
    return wind_direction(degrees)


# conditions -----------------------------------------------------------------
def weather_emoji(category: str) -> str:
    return WEATHER_EMOJI.get(category.lower(), DEFAULT_EMOJI)


# time -----------------------------------------------------------------------
def format_timestamp(timestamp: int, tz: Optional[tzinfo] = None) -> str:
    """Format a UNIX timestamp as ``HH:MM`` in ``tz`` or the local zone."""

    try:
        moment = datetime.fromtimestamp(timestamp, tz=timezone.utc).astimezone(tz)
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidTimestamp(f"Invalid timestamp: {timestamp}") from exc
    return moment.strftime("%H:%M")


__all__ = [
    "COMPASS_POINTS",
    "NO_DIRECTION",
    "DEFAULT_EMOJI",
    "WEATHER_EMOJI",
    "kelvin_to_celsius",
    "kelvin_to_fahrenheit",
    "convert_temperature",
    "temperature_unit",
    "format_temperature",
    "meters_per_second_to_kmh",
    "wind_direction",
    "describe_wind_direction",
    "weather_emoji",
    "format_timestamp",
]
