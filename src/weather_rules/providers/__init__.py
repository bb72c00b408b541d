"""Forecast data providers."""

from weather_rules.providers.base import (
    ForecastProvider,
    ForecastUnavailableError,
    ProviderError,
)
from weather_rules.providers.nws import NWSProvider

__all__ = [
    "ForecastProvider",
    "ForecastUnavailableError",
    "ProviderError",
    "NWSProvider",
]
