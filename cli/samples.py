"""Sample screen measurements shown by the ``demo`` command."""

from __future__ import annotations

from typing import NamedTuple


class SampleReading(NamedTuple):
    air_temperature: float
    dew_point: float
    wind_speed: float
    total_rain: float
    expected_heat_index: int


SAMPLE_READINGS: tuple[SampleReading, ...] = (
    SampleReading(67.468448, 66.326441, 49.811793, 6, 433),
    SampleReading(8.136959, -2.053103, 19.060520, 81, 41),
    SampleReading(72.500384, 53.767550, 46.958175, 18, 219),
    SampleReading(95.912468, 84.870745, 11.962080, 49, 688),
    SampleReading(94.997928, 85.746917, 35.210145, 71, 724),
    SampleReading(88.425323, 72.907685, 27.497372, 95, 451),
    SampleReading(75.696371, 72.185936, 5.817415, 82, 517),
    SampleReading(95.590494, 86.909615, 14.734458, 24, 755),
    SampleReading(68.257267, 54.912307, 12.821509, 34, 237),
)

# Dew point above the air temperature, rejected at construction.
INVALID_SAMPLE = (15.0, 20.0, -5.0, 3.0)
