"""Immutable weather reading taken from a Stevenson screen."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from models.errors import HumidityRangeError, ReadingValidationError, ValidationReason
from services import meteo


@dataclass(frozen=True, slots=True)
class Reading:
    """A single set of measurements from a standard instrument shelter.

    ``air_temperature`` and ``dew_point`` are in degrees Celsius, ``wind_speed``
    in miles per hour and ``total_rain`` in millimeters over the last 24 hours.
    The raw values are stored as given; the query methods round their results
    to whole numbers. Equality and hashing use the raw values.
    """

    air_temperature: float
    dew_point: float
    wind_speed: float
    total_rain: float

    def __post_init__(self) -> None:
        if self.dew_point > self.air_temperature:
            raise ReadingValidationError(
                ValidationReason.invalid_dew_point,
                "Dew point cannot be greater than air temperature.",
            )
        if self.wind_speed < 0:
            raise ReadingValidationError(
                ValidationReason.invalid_wind_speed,
                "Wind speed cannot be negative.",
            )
        if self.total_rain < 0:
            raise ReadingValidationError(
                ValidationReason.invalid_rain,
                "Rain amount cannot be negative.",
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Reading:
        """Build a reading from a mapping keyed by the field names."""
        return cls(
            air_temperature=float(data["air_temperature"]),
            dew_point=float(data["dew_point"]),
            wind_speed=float(data["wind_speed"]),
            total_rain=float(data["total_rain"]),
        )

    def temperature(self) -> int:
        return meteo.round_half_up(self.air_temperature)

    def dew_point_rounded(self) -> int:
        return meteo.round_half_up(self.dew_point)

    def wind_speed_rounded(self) -> int:
        return meteo.round_half_up(self.wind_speed)

    def total_rain_rounded(self) -> int:
        return meteo.round_half_up(self.total_rain)

    def relative_humidity(self) -> int:
        """Relative humidity as a whole percentage.

        Raises ``HumidityRangeError`` when the rounded value is outside 0-100%.
        """
        humidity = meteo.humidity_ratio(self.air_temperature, self.dew_point)
        if not math.isfinite(humidity):
            raise HumidityRangeError(humidity)
        rounded = meteo.round_half_up(humidity)
        if rounded < 0 or rounded > 100:
            raise HumidityRangeError(humidity)
        return rounded

    def heat_index(self) -> int:
        """Heat index from the air temperature and the unrounded humidity.

        The humidity is neither rounded nor range checked here, so the result
        does not drift with rounding and never raises ``HumidityRangeError``.
        """
        humidity = meteo.humidity_ratio(self.air_temperature, self.dew_point)
        return meteo.round_half_up(meteo.heat_index(self.air_temperature, humidity))

    def wind_chill(self) -> int:
        """Wind chill apparent temperature, in degrees Fahrenheit."""
        return meteo.round_half_up(meteo.wind_chill_fahrenheit(self.air_temperature, self.wind_speed))

    def wind_chill_celsius(self) -> int:
        """Wind chill apparent temperature converted back to degrees Celsius."""
        chill = meteo.wind_chill_fahrenheit(self.air_temperature, self.wind_speed)
        return meteo.round_half_up(meteo.fahrenheit_to_celsius(chill))

    def __str__(self) -> str:
        return (
            f"Reading: T = {self.temperature()}, D = {self.dew_point_rounded()}, "
            f"v = {self.wind_speed_rounded()}, rain = {self.total_rain_rounded()}"
        )
