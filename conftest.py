from __future__ import annotations

import pytest
import requests_mock as requests_mock_lib


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker


@pytest.fixture()
def api_key(monkeypatch):
    monkeypatch.setenv("WEATHER_API_KEY", "test-key")
    return "test-key"
