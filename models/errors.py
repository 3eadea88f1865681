"""Error types raised by weather readings."""

from __future__ import annotations

from enum import Enum


class ValidationReason(str, Enum):
    """Construction rules a reading can violate."""

    invalid_dew_point = "invalid_dew_point"
    invalid_wind_speed = "invalid_wind_speed"
    invalid_rain = "invalid_rain"


class ReadingError(ValueError):
    """Base class for reading failures."""


class ReadingValidationError(ReadingError):
    """Raised when a reading cannot be constructed from its measurements."""

    def __init__(self, reason: ValidationReason, message: str) -> None:
        super().__init__(message)
        self.reason = reason
        self.message = message


class HumidityRangeError(ReadingError):
    """Raised when the computed relative humidity falls outside 0-100%."""

    def __init__(self, humidity: float) -> None:
        super().__init__(f"Relative humidity out of bounds: {humidity!r}% is not within 0-100%.")
        self.humidity = humidity
