"""Pydantic schema describing a reading and its derived values."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ReadingSummary(BaseModel):
    """Rounded measurements and derived values for one reading."""

    description: str = Field(..., description="String form of the reading.")
    temperature: int
    dew_point: int
    wind_speed: int
    total_rain: int = Field(..., ge=0)
    relative_humidity: Optional[int] = Field(
        default=None,
        ge=0,
        le=100,
        description="Relative humidity in percent, absent when it is out of bounds.",
    )
    heat_index: int
    wind_chill: int
