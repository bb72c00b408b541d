"""Location models for National Weather Service grid points."""

from __future__ import annotations

import re
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Regex for parsing grid points: "OFFICE/x,y" (e.g. "MKX/88,63")
GRID_POINT_PATTERN = re.compile(
    r"^(?P<office>[A-Za-z]{3})\s*/\s*(?P<x>\d+)\s*,\s*(?P<y>\d+)$"
)


def normalize_office(value: str) -> str:
    """Validate a forecast office identifier and upper-case it for API paths."""
    if len(value) != 3 or not value.isalpha():
        raise ValueError(f"Invalid forecast office: '{value}'")
    return value.upper()


class GridPoint(BaseModel):
    """A forecast grid point on the NWS 2.5 km grid.

    The NWS API does not forecast for arbitrary coordinates. Each forecast
    belongs to a Weather Forecast Office (WFO) and a cell on that office's
    grid, e.g. ``MKX/88,63`` for Milwaukee/Sullivan.
    """

    model_config = ConfigDict(frozen=True)

    office: str = Field(..., description="Three-letter forecast office identifier")
    grid_x: int = Field(..., ge=0, description="Grid column")
    grid_y: int = Field(..., ge=0, description="Grid row")

    @field_validator("office")
    @classmethod
    def validate_office(cls, v: str) -> str:
        return normalize_office(v)

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse a grid point from the 'OFFICE/x,y' format.

        Examples:
            'MKX/88,63' -> Milwaukee/Sullivan
            'OKX/33,35' -> New York City
        """
        match = GRID_POINT_PATTERN.match(value.strip())
        if not match:
            raise ValueError(
                f"Invalid grid point format: '{value}'. "
                "Expected format: 'OFFICE/x,y' (e.g., 'MKX/88,63')"
            )
        return cls(
            office=match.group("office"),
            grid_x=int(match.group("x")),
            grid_y=int(match.group("y")),
        )

    def __str__(self) -> str:
        return f"{self.office}/{self.grid_x},{self.grid_y}"

    def forecast_url(self, base_url: str) -> str:
        """Build the gridpoint forecast endpoint URL."""
        return f"{base_url.rstrip('/')}/gridpoints/{self}/forecast"


DEFAULT_GRID_POINT = GridPoint(office="MKX", grid_x=88, grid_y=63)
