"""Shared pytest fixtures: provider payloads and pre-built settings."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import SecretStr

from weatherdash.config import ProviderSettings, SearchSettings
from weatherdash.domain.models import WeatherSnapshot


def provider_payload(name: str = "London", temp_c: float = 14.2) -> dict[str, Any]:
    return {
        "location": {
            "name": name,
            "region": "City of London, Greater London",
            "country": "United Kingdom",
            "lat": 51.52,
            "lon": -0.11,
            "localtime": "2024-05-01 12:07",
        },
        "current": {
            "last_updated": "2024-05-01 12:00",
            "temp_c": temp_c,
            "temp_f": 57.6,
            "is_day": 1,
            "condition": {
                "text": "Partly cloudy",
                "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png",
                "code": 1003,
            },
            "wind_kph": 15.1,
            "wind_dir": "WSW",
            "pressure_mb": 1012.0,
            "humidity": 72,
            "cloud": 50,
            "feelslike_c": 13.1,
            "vis_km": 10.0,
            "uv": 4.0,
        },
    }


@pytest.fixture
def make_payload():
    return provider_payload


@pytest.fixture
def payload() -> dict[str, Any]:
    return provider_payload()


@pytest.fixture
def snapshot(payload) -> WeatherSnapshot:
    return WeatherSnapshot.model_validate(payload)


@pytest.fixture
def provider_settings() -> ProviderSettings:
    return ProviderSettings(api_key=SecretStr("test-key"))


@pytest.fixture
def search_settings() -> SearchSettings:
    return SearchSettings(api_base_url="http://dashboard.test", debounce_ms=10)
