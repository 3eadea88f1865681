"""Builds summaries of derived values for readings."""

from __future__ import annotations

import logging

from models.errors import HumidityRangeError
from models.reading import Reading
from models.summary import ReadingSummary

logger = logging.getLogger(__name__)


def summarize(reading: Reading) -> ReadingSummary:
    """Collect the rounded measurements and derived values of ``reading``."""
    try:
        humidity: int | None = reading.relative_humidity()
    except HumidityRangeError as exc:
        logger.warning(
            "Relative humidity unavailable: %s",
            exc,
            extra={
                "air_temperature": reading.air_temperature,
                "dew_point": reading.dew_point,
            },
        )
        humidity = None

    return ReadingSummary(
        description=str(reading),
        temperature=reading.temperature(),
        dew_point=reading.dew_point_rounded(),
        wind_speed=reading.wind_speed_rounded(),
        total_rain=reading.total_rain_rounded(),
        relative_humidity=humidity,
        heat_index=reading.heat_index(),
        wind_chill=reading.wind_chill(),
    )
