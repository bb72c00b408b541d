"""Forecast models for the NWS gridpoint forecast endpoint.

## Response Format (GeoJSON)
```json
{
  "@context": [...],
  "type": "Feature",
  "geometry": {"type": "Polygon", "coordinates": [...]},
  "properties": {
    "units": "us",
    "generatedAt": "2024-01-01T12:00:00+00:00",
    "updateTime": "2024-01-01T11:30:00+00:00",
    "periods": [
      {
        "number": 1,
        "name": "Today",
        "startTime": "2024-01-01T06:00:00-06:00",
        "endTime": "2024-01-01T18:00:00-06:00",
        "isDaytime": true,
        "temperature": 41,
        "temperatureUnit": "F",
        "probabilityOfPrecipitation": {"unitCode": "wmoUnit:percent", "value": 20},
        "windSpeed": "10 mph",
        "windDirection": "SW",
        "shortForecast": "Partly Sunny",
        "detailedForecast": "Partly sunny, with a high near 41."
      }
    ]
  }
}
```

Periods are ordered in time. The first one is always the period that is
current when the forecast was generated ("Today" or "Tonight").

Fields not modelled here are kept as pydantic extras so that a reduced
forecast still carries everything the API sent.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class QuantitativeValue(BaseModel):
    """A measured value with a WMO unit code."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    unit_code: str | None = Field(default=None, alias="unitCode")
    value: float | None = None


class Period(BaseModel):
    """One forecast time slot (e.g. "Tonight", "Wednesday")."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    number: int | None = Field(default=None, description="1-based position in the forecast")
    name: str | None = Field(default=None, description="Display name, e.g. 'Tonight'")
    start_time: datetime | None = Field(default=None, alias="startTime")
    end_time: datetime | None = Field(default=None, alias="endTime")
    is_daytime: bool | None = Field(default=None, alias="isDaytime")
    temperature: float = Field(..., description="Forecast temperature in temperature_unit")
    temperature_unit: str = Field(default="F", alias="temperatureUnit")
    probability_of_precipitation: QuantitativeValue | None = Field(
        default=None, alias="probabilityOfPrecipitation"
    )
    wind_speed: str | None = Field(default=None, alias="windSpeed")
    wind_direction: str | None = Field(default=None, alias="windDirection")
    short_forecast: str | None = Field(default=None, alias="shortForecast")
    detailed_forecast: str | None = Field(default=None, alias="detailedForecast")


class ForecastProperties(BaseModel):
    """The `properties` member of a forecast document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    units: str | None = None
    generated_at: datetime | None = Field(default=None, alias="generatedAt")
    update_time: datetime | None = Field(default=None, alias="updateTime")
    periods: tuple[Period, ...] = Field(default_factory=tuple)


class Forecast(BaseModel):
    """A gridpoint forecast document.

    Instances are immutable once fetched. Use `model_copy(update=...)` to
    derive a modified forecast.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    properties: ForecastProperties

    @property
    def periods(self) -> tuple[Period, ...]:
        """Shortcut for `properties.periods`."""
        return self.properties.periods

    @property
    def today(self) -> Period:
        """The current period (period 0).

        Raises:
            IndexError: If the forecast has no periods
        """
        return self.properties.periods[0]

