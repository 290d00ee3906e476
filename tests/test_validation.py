"""Unit tests for reading plausibility checks."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from models.records import SensorReading
from services.validation import is_valid_reading


def _reading(**overrides: float) -> SensorReading:
    base = SensorReading(
        sensor_id="SENSOR_001",
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        vibration=20.0,
        temperature=25.0,
        moisture=50.0,
        pressure=100.0,
        location_x=0.0,
        location_y=0.0,
    )
    return replace(base, **overrides)


def test_reading_within_bounds_is_valid() -> None:
    assert is_valid_reading(_reading()) is True


def test_bounds_are_inclusive() -> None:
    assert is_valid_reading(_reading(vibration=0.0, temperature=-50.0, moisture=0.0, pressure=0.0))
    assert is_valid_reading(
        _reading(vibration=1000.0, temperature=100.0, moisture=100.0, pressure=200.0)
    )


@pytest.mark.parametrize(
    "overrides",
    [
        {"vibration": -0.1},
        {"vibration": 1000.5},
        {"temperature": -50.5},
        {"temperature": 100.1},
        {"moisture": -1.0},
        {"moisture": 101.0},
        {"pressure": -0.01},
        {"pressure": 250.0},
    ],
)
def test_out_of_range_channel_is_invalid(overrides: dict) -> None:
    assert is_valid_reading(_reading(**overrides)) is False


def test_nan_channel_is_invalid() -> None:
    assert is_valid_reading(_reading(moisture=float("nan"))) is False
