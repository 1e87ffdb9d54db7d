from __future__ import annotations

import copy
import time

import pytest


LONDON_PAYLOAD = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}],
    "main": {
        "temp": 288.15,
        "feels_like": 287.65,
        "temp_min": 286.15,
        "temp_max": 289.15,
        "pressure": 1012,
        "humidity": 72,
    },
    "wind": {"speed": 5, "deg": 90},
    "sys": {"country": "GB", "sunrise": 1700000000, "sunset": 1700040000},
    "name": "London",
    "cod": 200,
}


@pytest.fixture()
def london_payload():
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture()
def utc_local_time(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
