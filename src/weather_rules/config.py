"""Application configuration.

Configuration is loaded from environment variables using pydantic-settings.
Every setting has a default, so the pipeline runs with no environment at all.

## Optional Environment Variables

- WEATHER_RULES_FORECAST_URL: Full forecast endpoint (overrides the grid point)
- WEATHER_RULES_GRID_OFFICE / _GRID_X / _GRID_Y: NWS grid point (default MKX/88,63)
- WEATHER_RULES_USER_AGENT: User-Agent sent to api.weather.gov
- WEATHER_RULES_REQUEST_TIMEOUT: Request timeout in seconds (default 30)
- WEATHER_RULES_PERIODS_TO_KEEP: Periods kept by the reducer (default 2)
- WEATHER_RULES_HOT_THRESHOLD_F / _COLD_THRESHOLD_F: Rule thresholds (75 / 50)
- WEATHER_RULES_LOG_LEVEL: Logging level (default WARNING)

## Example .env file

```
WEATHER_RULES_USER_AGENT=weather-rules/0.1.0 ops@example.com
WEATHER_RULES_GRID_OFFICE=OKX
WEATHER_RULES_GRID_X=33
WEATHER_RULES_GRID_Y=35
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_rules.models.location import GridPoint, normalize_office


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_RULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Forecast source
    api_base_url: str = "https://api.weather.gov"
    grid_office: str = "MKX"
    grid_x: int = Field(default=88, ge=0)
    grid_y: int = Field(default=63, ge=0)
    forecast_url: str | None = Field(
        default=None,
        description="Full forecast URL; derived from the grid point when unset",
    )
    user_agent: str = Field(
        default="weather-rules/0.1.0",
        description="User-Agent for api.weather.gov (required)",
    )
    request_timeout: float = Field(default=30.0, gt=0)

    # Reducer
    periods_to_keep: int = Field(default=2, ge=1)

    # Rules
    hot_threshold_f: float = 75.0
    cold_threshold_f: float = 50.0

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("grid_office")
    @classmethod
    def validate_grid_office(cls, v: str) -> str:
        """Reject invalid forecast offices when settings are loaded."""
        return normalize_office(v)

    @model_validator(mode="after")
    def validate_thresholds(self) -> Settings:
        """Ensure the cold threshold is not above the hot threshold."""
        if self.cold_threshold_f > self.hot_threshold_f:
            raise ValueError("cold_threshold_f must not exceed hot_threshold_f")
        return self

    @property
    def grid_point(self) -> GridPoint:
        """Configured NWS grid point."""
        return GridPoint(office=self.grid_office, grid_x=self.grid_x, grid_y=self.grid_y)

    @property
    def resolved_forecast_url(self) -> str:
        """Forecast URL, built from the grid point if not set explicitly."""
        if self.forecast_url:
            return self.forecast_url
        return self.grid_point.forecast_url(self.api_base_url)


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()
