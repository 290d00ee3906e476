"""Physical plausibility checks for individual readings."""

from __future__ import annotations

from models.records import SensorReading

VIBRATION_BOUNDS = (0.0, 1000.0)
TEMPERATURE_BOUNDS = (-50.0, 100.0)
MOISTURE_BOUNDS = (0.0, 100.0)
PRESSURE_BOUNDS = (0.0, 200.0)


def _within(value: float, bounds: tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


def is_valid_reading(reading: SensorReading) -> bool:
    """Return True when every channel lies within its plausible range.

    Out-of-range values are not errors; callers fold them into the
    data-quality score instead.
    """
    return (
        _within(reading.vibration, VIBRATION_BOUNDS)
        and _within(reading.temperature, TEMPERATURE_BOUNDS)
        and _within(reading.moisture, MOISTURE_BOUNDS)
        and _within(reading.pressure, PRESSURE_BOUNDS)
    )
