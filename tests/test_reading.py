"""Unit tests for the immutable reading model."""

from __future__ import annotations

import dataclasses
import math

import pytest

from models.errors import HumidityRangeError, ReadingError, ReadingValidationError, ValidationReason
from models.reading import Reading
from services import meteo


def test_constructor_valid_values() -> None:
    reading = Reading(20.0, 10.0, 5.0, 2.0)

    assert reading.temperature() == 20
    assert reading.dew_point_rounded() == 10
    assert reading.wind_speed_rounded() == 5
    assert reading.total_rain_rounded() == 2


def test_constructor_keeps_raw_values() -> None:
    reading = Reading(20.4, 10.5, 4.5, 2.49)

    assert reading.air_temperature == 20.4
    assert reading.dew_point == 10.5
    assert reading.wind_speed == 4.5
    assert reading.total_rain == 2.49
    assert reading.temperature() == 20
    assert reading.dew_point_rounded() == 11
    assert reading.wind_speed_rounded() == 5
    assert reading.total_rain_rounded() == 2


def test_negative_halves_round_towards_positive_infinity() -> None:
    reading = Reading(0.0, -2.5, 0.0, 0.0)

    assert reading.dew_point_rounded() == -2


def test_constructor_invalid_dew_point() -> None:
    with pytest.raises(ReadingValidationError) as excinfo:
        Reading(10.0, 15.0, 5.0, 2.0)

    assert excinfo.value.reason is ValidationReason.invalid_dew_point
    assert "Dew point cannot be greater than air temperature" in str(excinfo.value)


def test_constructor_negative_wind_speed() -> None:
    with pytest.raises(ReadingValidationError) as excinfo:
        Reading(10.0, 5.0, -1.0, 2.0)

    assert excinfo.value.reason is ValidationReason.invalid_wind_speed


def test_constructor_negative_rain() -> None:
    with pytest.raises(ReadingValidationError) as excinfo:
        Reading(10.0, 5.0, 3.0, -0.1)

    assert excinfo.value.reason is ValidationReason.invalid_rain
    assert "Rain amount cannot be negative" in excinfo.value.message


@pytest.mark.parametrize(
    ("values", "reason"),
    [
        ((10.0, 15.0, -1.0, -1.0), ValidationReason.invalid_dew_point),
        ((10.0, 5.0, -1.0, -1.0), ValidationReason.invalid_wind_speed),
        ((10.0, 5.0, 0.0, -1.0), ValidationReason.invalid_rain),
    ],
)
def test_validation_reports_first_failing_rule(values, reason) -> None:
    with pytest.raises(ReadingValidationError) as excinfo:
        Reading(*values)

    assert excinfo.value.reason is reason


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Reading(10.0, 15.0, 5.0, 2.0)


def test_dew_point_equal_to_temperature_is_valid() -> None:
    reading = Reading(12.0, 12.0, 0.0, 0.0)

    assert reading.relative_humidity() == 100


def test_reading_is_immutable() -> None:
    reading = Reading(20.0, 10.0, 5.0, 2.0)

    with pytest.raises(dataclasses.FrozenInstanceError):
        reading.wind_speed = -1.0  # type: ignore[misc]


def test_from_mapping() -> None:
    reading = Reading.from_mapping(
        {"air_temperature": "20", "dew_point": 10, "wind_speed": 5.0, "total_rain": 2.0}
    )

    assert reading == Reading(20.0, 10.0, 5.0, 2.0)


def test_from_mapping_validates() -> None:
    with pytest.raises(ReadingValidationError):
        Reading.from_mapping(
            {"air_temperature": 10.0, "dew_point": 15.0, "wind_speed": 5.0, "total_rain": 2.0}
        )


def test_relative_humidity() -> None:
    reading = Reading(30.0, 25.0, 10.0, 0.0)

    humidity = reading.relative_humidity()

    assert 0 <= humidity <= 100
    assert humidity == 75


def test_relative_humidity_out_of_bounds_raises() -> None:
    # Below -237.3 degrees the vapor pressure exponent changes sign.
    reading = Reading(0.0, -260.0, 5.0, 0.0)

    with pytest.raises(HumidityRangeError) as excinfo:
        reading.relative_humidity()

    assert isinstance(excinfo.value, ReadingError)
    assert excinfo.value.humidity > 100


def test_relative_humidity_at_vapor_pressure_pole() -> None:
    reading = Reading(0.0, -237.3, 1.0, 0.0)

    assert reading.relative_humidity() == 0


def test_heat_index() -> None:
    reading = Reading(95.590494, 86.909615, 14.734458, 24)

    assert reading.heat_index() == 755


def test_heat_index_uses_unrounded_humidity() -> None:
    reading = Reading(30.0, 25.0, 10.0, 0.0)
    humidity = meteo.humidity_ratio(30.0, 25.0)

    assert reading.heat_index() == meteo.round_half_up(meteo.heat_index(30.0, humidity))


def test_heat_index_ignores_humidity_bounds() -> None:
    reading = Reading(0.0, -260.0, 5.0, 0.0)

    with pytest.raises(HumidityRangeError):
        reading.relative_humidity()
    # The squared humidity term dominates and saturates the rounded result.
    assert reading.heat_index() == meteo.ROUND_MIN


@pytest.mark.parametrize(
    "values",
    [
        (20.0, -237.4, 5.0, 0.0),
        (1e308, 0.0, 0.0, 0.0),
    ],
)
def test_heat_index_never_fails_on_extreme_readings(values) -> None:
    # Both polynomials evaluate to NaN, which rounds to 0.
    assert Reading(*values).heat_index() == 0


def test_relative_humidity_with_infinite_ratio_raises() -> None:
    with pytest.raises(HumidityRangeError):
        Reading(20.0, -237.4, 5.0, 0.0).relative_humidity()


def test_to_string_with_infinite_temperature() -> None:
    reading = Reading(math.inf, 0.0, 0.0, 0.0)

    assert str(reading) == f"Reading: T = {meteo.ROUND_MAX}, D = 0, v = 0, rain = 0"
    assert reading.temperature() == meteo.ROUND_MAX


def test_wind_chill() -> None:
    reading = Reading(0.0, -5.0, 10.0, 2.0)

    assert reading.wind_chill() == 24


def test_wind_chill_conversion_and_formula() -> None:
    # 10 degrees Celsius is 50 degrees Fahrenheit, wind speed 20 mph.
    reading = Reading(10.0, 5.0, 20.0, 2.0)

    assert reading.wind_chill() == 44


def test_wind_chill_celsius() -> None:
    assert Reading(0.0, -5.0, 10.0, 2.0).wind_chill_celsius() == -5
    assert Reading(10.0, 5.0, 20.0, 2.0).wind_chill_celsius() == 6


def test_wind_chill_calm_air() -> None:
    reading = Reading(0.0, -5.0, 0.0, 0.0)

    assert reading.wind_chill() == 56


def test_to_string() -> None:
    reading = Reading(15.0, 10.0, 5.0, 1.0)

    assert str(reading) == "Reading: T = 15, D = 10, v = 5, rain = 1"


def test_equals_and_hash() -> None:
    reading1 = Reading(20.0, 15.0, 10.0, 2.0)
    reading2 = Reading(20.0, 15.0, 10.0, 2.0)
    reading3 = Reading(20.0, 15.0, 5.0, 2.0)

    assert reading1 == reading2
    assert hash(reading1) == hash(reading2)
    assert reading1 != reading3
    assert len({reading1, reading2, reading3}) == 2


def test_equality_uses_raw_values() -> None:
    assert Reading(20.1, 15.0, 10.0, 2.0) != Reading(20.2, 15.0, 10.0, 2.0)
    assert str(Reading(20.1, 15.0, 10.0, 2.0)) == str(Reading(20.2, 15.0, 10.0, 2.0))
