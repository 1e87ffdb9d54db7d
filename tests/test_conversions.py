from __future__ import annotations

from datetime import timedelta, timezone

import pytest

from weather_cli import conversions
from weather_cli.exceptions import InvalidTimestamp, WeatherError


@pytest.mark.parametrize("kelvin", [0.0, 255.37, 273.15, 288.15, 310.5, -5.0, 1e6])
def test_kelvin_conversions(kelvin):
    celsius = conversions.kelvin_to_celsius(kelvin)

    assert celsius == kelvin - 273.15
    assert conversions.kelvin_to_fahrenheit(kelvin) == celsius * 9 / 5 + 32


def test_known_temperatures():
    assert conversions.kelvin_to_celsius(273.15) == 0.0
    assert conversions.kelvin_to_fahrenheit(273.15) == 32.0
    assert conversions.kelvin_to_fahrenheit(373.15) == pytest.approx(212.0)


def test_convert_temperature_follows_display_mode():
    assert conversions.convert_temperature(288.15, fahrenheit=False) == pytest.approx(15.0)
    assert conversions.convert_temperature(288.15, fahrenheit=True) == pytest.approx(59.0)
    assert conversions.temperature_unit(False) == "°C"
    assert conversions.temperature_unit(True) == "°F"


@pytest.mark.parametrize(
    "value, expected",
    [
        (15.0, "15.0"),
        (-10.0, "-10.0"),
        (0.0, "0.0"),
        (-0.0, "0.0"),
        (0.04, "0.0"),
        (-0.04, "-0.0"),
        (-0.06, "-0.1"),
        (0.06, "0.1"),
        (-12.345, "-12.3"),
    ],
)
def test_format_temperature_sign(value, expected):
    assert conversions.format_temperature(value) == expected


def test_format_temperature_negative_from_kelvin():
    value = conversions.kelvin_to_celsius(263.15)

    assert conversions.format_temperature(value, "°C") == "-10.0°C"


def test_wind_speed_conversion():
    assert conversions.meters_per_second_to_kmh(0) == 0
    assert conversions.meters_per_second_to_kmh(10) == 36.0
    assert conversions.meters_per_second_to_kmh(5) == pytest.approx(18.0)


@pytest.mark.parametrize(
    "degrees, expected",
    [
        (0, "N"),
        (360, "N"),
        (11.24, "N"),
        (11.26, "NNE"),
        (45, "NE"),
        (90, "E"),
        (180, "S"),
        (270, "W"),
        (337.5, "NNW"),
        (348.74, "NNW"),
        (348.75, "N"),
        (359.99, "N"),
        (720, "N"),
        (-90, "W"),
        (-11.24, "N"),
        (-1e-15, "N"),
    ],
)
def test_wind_direction(degrees, expected):
    assert conversions.wind_direction(degrees) == expected


def test_every_compass_point_is_reachable():
    resolved = [conversions.wind_direction(i * 22.5) for i in range(16)]

    assert resolved == list(conversions.COMPASS_POINTS)


def test_missing_bearing_uses_placeholder():
    assert conversions.describe_wind_direction(None) == "-"
    assert conversions.describe_wind_direction(0.0) == "N"


@pytest.mark.parametrize(
    "category, expected",
    [
        ("Clear", "☀️"),
        ("CLEAR", "☀️"),
        ("Clouds", "☁️"),
        ("Rain", "🌧️"),
        ("Snow", "❄️"),
        ("Thunderstorm", "⛈️"),
        ("Drizzle", "🌦️"),
        ("Mist", "🌫️"),
        ("Fog", "🌫️"),
        ("tornado", "🌡️"),
        ("", "🌡️"),
    ],
)
def test_weather_emoji(category, expected):
    assert conversions.weather_emoji(category) == expected


def test_format_timestamp_with_explicit_zone():
    assert conversions.format_timestamp(1700000000, timezone.utc) == "22:13"
    assert conversions.format_timestamp(1700040000, timezone.utc) == "09:20"
    assert conversions.format_timestamp(1700000000, timezone(timedelta(hours=2))) == "00:13"
    assert conversions.format_timestamp(0, timezone.utc) == "00:00"


def test_format_timestamp_uses_local_zone(utc_local_time):
    assert conversions.format_timestamp(1700000000) == "22:13"


def test_format_timestamp_rejects_unrepresentable_values():
    with pytest.raises(InvalidTimestamp) as excinfo:
        conversions.format_timestamp(10**20, timezone.utc)

    assert isinstance(excinfo.value, WeatherError)
    assert "10" in str(excinfo.value)
