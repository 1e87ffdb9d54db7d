"""Human readable rendering of a weather reading."""
from __future__ import annotations

from datetime import tzinfo
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from weather_cli import conversions
from weather_cli.entities import WeatherReading

TITLE = "Current Weather"


def _styled(value: str, style: str) -> str:
    return f"[{style}]{escape(value)}[/]"


def build_report(reading: WeatherReading, fahrenheit: bool = False, tz: Optional[tzinfo] = None) -> List[str]:
    """Return the report as rich markup lines.

    All values are converted up front, so a failure (e.g. an invalid sunrise
    timestamp) raises before anything is printed.
    """

    unit = conversions.temperature_unit(fahrenheit)

    def temperature(kelvin: float) -> str:
        value = conversions.convert_temperature(kelvin, fahrenheit)
        return _styled(conversions.format_temperature(value), "bright_green") + unit

    condition = reading.primary_condition
    wind_kmh = conversions.meters_per_second_to_kmh(reading.wind_speed_ms)
    wind_from = conversions.describe_wind_direction(reading.wind_bearing_deg)
    sunrise = conversions.format_timestamp(reading.sunrise_ts, tz)
    sunset = conversions.format_timestamp(reading.sunset_ts, tz)

    return [
        "",
        _styled(TITLE, "bold underline"),
        f"🌍 Location: {_styled(reading.location_name, 'bright_blue')}",
        f"{conversions.weather_emoji(condition.category)}  Weather: {_styled(condition.description, 'bright_yellow')}",
        f"🌡️  Temperature: {temperature(reading.temperature_k)}",
        f"🤔 Feels like: {temperature(reading.feels_like_k)}",
        f"🌡️  Today's High/Low: {temperature(reading.temp_max_k)}/{temperature(reading.temp_min_k)}",
        f"💧 Humidity: {_styled(str(reading.humidity_percent), 'bright_cyan')}%",
        f"🌪️  Wind: {_styled(f'{wind_kmh:.1f}', 'bright_magenta')} km/h from {_styled(wind_from, 'bright_magenta')}",
        f"🌅 Sunrise: {_styled(sunrise, 'bright_yellow')}",
        f"🌇 Sunset: {_styled(sunset, 'bright_yellow')}",
        "",
    ]


def print_report(
    reading: WeatherReading,
    fahrenheit: bool = False,
    *,
    console: Optional[Console] = None,
    tz: Optional[tzinfo] = None,
) -> None:
    lines = build_report(reading, fahrenheit=fahrenheit, tz=tz)
    console = console or Console(emoji=False, highlight=False)
    for line in lines:
        console.print(line, soft_wrap=True)


__all__ = ["build_report", "print_report"]
