"""National Weather Service (api.weather.gov) forecast provider.

## Endpoint
- Base URL: https://api.weather.gov
- Gridpoint forecast: /gridpoints/{office}/{gridX},{gridY}/forecast
- Full URL example: https://api.weather.gov/gridpoints/MKX/88,63/forecast

## Authentication
- No API key required
- MUST include a User-Agent identifying the application (and ideally a
  contact address); requests without one may be rejected with 403

## Response
GeoJSON `Feature` whose `properties.periods` is a time-ordered list of
12-hour periods (Today, Tonight, Wednesday, ...). Each period carries a
numeric `temperature` in `temperatureUnit` (F by default). See
`weather_rules.models.forecast` for the full shape.

## Known failure modes
- 500/503 with a problem+json body while the grid is being regenerated
- 404 for grid points outside the office's domain
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from weather_rules.models.forecast import Forecast
from weather_rules.models.location import GridPoint
from weather_rules.providers.base import (
    ForecastProvider,
    ForecastUnavailableError,
)

logger = logging.getLogger(__name__)


class NWSProvider(ForecastProvider):
    """api.weather.gov gridpoint forecast provider.

    Example:
        ```python
        async with NWSProvider(user_agent="my-app/1.0 contact@example.com") as provider:
            forecast = await provider.get_forecast(GridPoint.from_string("MKX/88,63"))
        ```
    """

    name = "nws"
    base_url = "https://api.weather.gov"

    def _get_default_headers(self) -> dict[str, str]:
        headers = super()._get_default_headers()
        headers["Accept"] = "application/geo+json"
        return headers

    async def get_forecast(self, grid_point: GridPoint) -> Forecast:
        """Get the forecast for a grid point."""
        return await self.fetch(grid_point.forecast_url(self.base_url))

    async def fetch(self, url: str) -> Forecast:
        """Fetch a gridpoint forecast from a full endpoint URL.

        Args:
            url: Forecast endpoint URL

        Returns:
            Parsed forecast

        Raises:
            ForecastUnavailableError: If the request, JSON decoding or
                validation fails
        """
        logger.info(f"Fetching forecast from {url}")
        response = await self._fetch(url)

        try:
            data = response.json()
        except ValueError as e:
            raise ForecastUnavailableError(
                f"Failed to parse response: {e}",
                provider=self.name,
                status_code=response.status_code,
                response_body=response.text,
            ) from e

        try:
            forecast = self._translate_response(data)
        except ValidationError as e:
            raise ForecastUnavailableError(
                f"Unexpected forecast format: {e.error_count()} validation error(s)",
                provider=self.name,
                status_code=response.status_code,
                response_body=response.text,
            ) from e

        logger.info(f"Fetched forecast with {len(forecast.periods)} periods")
        return forecast

    def _translate_response(self, response_data: Any) -> Forecast:
        """Validate a decoded NWS response into a Forecast.

        Raises:
            ValidationError: If the document does not match the Forecast model
        """
        return Forecast.model_validate(response_data)
