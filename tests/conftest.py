"""Pytest fixtures for weather rules tests.

This module provides test fixtures that ensure:
1. No external API calls are made (api.weather.gov is replaced by
   an httpx.MockTransport)
2. Isolated test environment with controlled configuration
"""

import os
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from weather_rules.models.forecast import Forecast, ForecastProperties, Period
from weather_rules.providers.nws import NWSProvider


# =============================================================================
# Test Isolation Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate settings from the developer environment.

    Removes WEATHER_RULES_* variables, runs each test from an empty
    directory so no .env file is picked up, and resets the settings cache.
    """
    from weather_rules.config import get_settings

    for key in list(os.environ):
        if key.startswith("WEATHER_RULES_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Forecast Data
# =============================================================================


def make_period(number: int, name: str, temperature: int, is_daytime: bool) -> dict:
    """Build one NWS period payload."""
    return {
        "number": number,
        "name": name,
        "startTime": f"2024-06-{14 + number:02d}T06:00:00-05:00",
        "endTime": f"2024-06-{14 + number:02d}T18:00:00-05:00",
        "isDaytime": is_daytime,
        "temperature": temperature,
        "temperatureUnit": "F",
        "temperatureTrend": None,
        "probabilityOfPrecipitation": {"unitCode": "wmoUnit:percent", "value": 20},
        "windSpeed": "5 to 10 mph",
        "windDirection": "SW",
        "icon": "https://api.weather.gov/icons/land/day/few?size=medium",
        "shortForecast": "Sunny",
        "detailedForecast": f"Sunny, with a high near {temperature}.",
    }


@pytest.fixture
def forecast_payload() -> dict:
    """NWS gridpoint forecast payload with four periods (62, 48, 71, 55)."""
    return {
        "@context": ["https://geojson.org/geojson-ld/geojson-context.jsonld"],
        "type": "Feature",
        "geometry": {"type": "Polygon", "coordinates": [[[-88.5, 43.0]]]},
        "properties": {
            "units": "us",
            "forecastGenerator": "BaselineForecastGenerator",
            "generatedAt": "2024-06-15T10:00:00+00:00",
            "updateTime": "2024-06-15T09:30:00+00:00",
            "elevation": {"unitCode": "wmoUnit:m", "value": 292.3},
            "periods": [
                make_period(1, "Today", 62, True),
                make_period(2, "Tonight", 48, False),
                make_period(3, "Sunday", 71, True),
                make_period(4, "Sunday Night", 55, False),
            ],
        },
    }


def forecast_from_temperatures(*temperatures: float) -> Forecast:
    """Build a minimal forecast from a sequence of period temperatures."""
    return Forecast(
        properties=ForecastProperties(
            periods=tuple(
                Period(number=i + 1, temperature=t)
                for i, t in enumerate(temperatures)
            )
        )
    )


@pytest.fixture
def make_forecast() -> Callable[..., Forecast]:
    """Factory building a forecast from period temperatures."""
    return forecast_from_temperatures


@pytest.fixture
def sample_forecast(forecast_payload: dict) -> Forecast:
    """Parsed four-period forecast."""
    return Forecast.model_validate(forecast_payload)


@pytest.fixture
def hot_forecast() -> Forecast:
    return forecast_from_temperatures(80, 70)


@pytest.fixture
def cold_forecast() -> Forecast:
    return forecast_from_temperatures(40, 45)


@pytest.fixture
def moderate_forecast() -> Forecast:
    return forecast_from_temperatures(60, 55)


# =============================================================================
# HTTP Mocking
# =============================================================================


@pytest.fixture
def make_provider() -> Callable[..., NWSProvider]:
    """Factory for an NWSProvider backed by a mock transport.

    The handler receives the httpx.Request and returns an httpx.Response
    (or raises an httpx exception). Requests are recorded on
    `provider.requests`.
    """

    def factory(handler: Callable[[httpx.Request], Any]) -> NWSProvider:
        requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        provider = NWSProvider(user_agent="weather-rules-tests/1.0", client=client)
        provider.requests = requests
        return provider

    return factory
