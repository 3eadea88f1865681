"""Meteorological formulas used to derive values from raw screen measurements.

Every function here is pure and operates on plain floats. Temperatures are in
degrees Celsius unless the name says otherwise and wind speed is in miles per
hour.
"""

from __future__ import annotations

import math

# Rothfusz/Steadman regression coefficients for a Celsius heat index.
HEAT_INDEX_COEFFICIENTS = (
    -8.78469475556,
    1.61139411,
    2.33854883889,
    -0.14611605,
    -0.012308094,
    -0.0164248277778,
    0.002211732,
    0.00072546,
    -0.000003582,
)

_MAGNUS_A = 7.5
_MAGNUS_B = 237.3
_BASE_PRESSURE_HPA = 6.11

# Rounded results saturate to the signed 64-bit range.
ROUND_MAX = 2**63 - 1
ROUND_MIN = -(2**63)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity.

    Total over every float: NaN rounds to 0 and infinities or values beyond
    the 64-bit range saturate to ``ROUND_MAX`` or ``ROUND_MIN``.
    """
    if math.isnan(value):
        return 0
    if value >= ROUND_MAX:
        return ROUND_MAX
    if value <= ROUND_MIN:
        return ROUND_MIN
    floor = math.floor(value)
    # value - floor is exact, unlike value + 0.5.
    return floor + 1 if value - floor >= 0.5 else floor


def vapor_pressure(temperature: float) -> float:
    """Vapor pressure in hPa at ``temperature``.

    Fed with the dew point this is the actual vapor pressure, fed with the air
    temperature it is the saturated one. Overflow saturates to ``inf`` and the
    pole at -237.3 degrees gives a zero pressure, as IEEE arithmetic would.
    """
    numerator = _MAGNUS_A * temperature
    denominator = _MAGNUS_B + temperature
    if denominator == 0:
        exponent = math.copysign(math.inf, numerator) if numerator else math.nan
    else:
        exponent = numerator / denominator
    try:
        return _BASE_PRESSURE_HPA * math.pow(10.0, exponent)
    except OverflowError:
        return math.inf


def humidity_ratio(air_temperature: float, dew_point: float) -> float:
    """Unrounded relative humidity as a percentage."""
    actual = vapor_pressure(dew_point)
    saturated = vapor_pressure(air_temperature)
    if saturated == 0:
        return math.nan if actual == 0 else math.inf
    return actual / saturated * 100


def heat_index(air_temperature: float, humidity: float) -> float:
    """Apparent temperature for ``air_temperature`` at ``humidity`` percent."""
    c1, c2, c3, c4, c5, c6, c7, c8, c9 = HEAT_INDEX_COEFFICIENTS
    t = air_temperature
    r = humidity
    t2 = t * t
    r2 = r * r
    return (
        c1
        + c2 * t
        + c3 * r
        + c4 * t * r
        + c5 * t2
        + c6 * r2
        + c7 * t2 * r
        + c8 * t * r2
        + c9 * t2 * r2
    )


def celsius_to_fahrenheit(value: float) -> float:
    return 9.0 / 5.0 * value + 32.0


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32.0) * 5.0 / 9.0


def wind_chill_fahrenheit(air_temperature: float, wind_speed: float) -> float:
    """NWS wind chill in degrees Fahrenheit for a Celsius air temperature."""
    fahrenheit = celsius_to_fahrenheit(air_temperature)
    # 0 ** 0.16 is 0.0, calm air needs no special case.
    wind_factor = math.pow(wind_speed, 0.16)
    return 35.74 + 0.6215 * fahrenheit - 35.75 * wind_factor + 0.4275 * fahrenheit * wind_factor
