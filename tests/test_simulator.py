"""Tests for the synthetic telemetry generator."""

from __future__ import annotations

import random
from datetime import datetime, timezone

from services.simulator import SensorDataSimulator, sensor_location
from services.validation import is_valid_reading

STAMP = datetime(2024, 6, 1, tzinfo=timezone.utc)


def test_sensor_locations_follow_grid() -> None:
    assert sensor_location("SENSOR_001") == (100.0, 0.0)
    assert sensor_location("SENSOR_005") == (0.0, 100.0)
    assert sensor_location("SENSOR_012") == (200.0, 200.0)


def test_round_contains_one_reading_per_sensor() -> None:
    simulator = SensorDataSimulator(sensor_count=10, high_risk_rate=0.0, rng=random.Random(7))

    readings = simulator.generate_round(STAMP)

    assert [reading.sensor_id for reading in readings] == [
        f"SENSOR_{index:03d}" for index in range(1, 11)
    ]
    assert all(reading.timestamp == STAMP for reading in readings)


def test_normal_readings_are_clamped_and_valid() -> None:
    simulator = SensorDataSimulator(sensor_count=5, high_risk_rate=0.0, rng=random.Random(42))

    for _ in range(50):
        for reading in simulator.generate_round(STAMP):
            assert 0.0 <= reading.vibration <= 100.0
            assert -10.0 <= reading.temperature <= 60.0
            assert 0.0 <= reading.moisture <= 100.0
            assert 80.0 <= reading.pressure <= 120.0
            assert is_valid_reading(reading)


def test_high_risk_readings_when_rate_is_one() -> None:
    simulator = SensorDataSimulator(sensor_count=3, high_risk_rate=1.0, rng=random.Random(1))

    readings = simulator.generate_round(STAMP)

    assert all(60.0 <= reading.vibration <= 100.0 for reading in readings)
    assert all(80.0 <= reading.moisture <= 95.0 for reading in readings)
    assert all(110.0 <= reading.pressure <= 130.0 for reading in readings)


def test_seeded_simulators_are_reproducible() -> None:
    first = SensorDataSimulator(rng=random.Random(99)).generate_round(STAMP)
    second = SensorDataSimulator(rng=random.Random(99)).generate_round(STAMP)

    assert first == second
