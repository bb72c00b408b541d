"""Domain models for weather rules."""

from weather_rules.models.forecast import (
    Forecast,
    ForecastProperties,
    Period,
    QuantitativeValue,
)
from weather_rules.models.location import DEFAULT_GRID_POINT, GridPoint

__all__ = [
    "Forecast",
    "ForecastProperties",
    "Period",
    "QuantitativeValue",
    "GridPoint",
    "DEFAULT_GRID_POINT",
]
