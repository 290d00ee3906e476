"""Confidence, location and contributing-factor helpers for assessments."""

from __future__ import annotations

from typing import Sequence, Tuple

from models.records import AggregatedFeatures, SensorReading

UNKNOWN_LOCATION = "Unknown"

# These thresholds are looser than the classifier tiers and are kept separate.
HIGH_VIBRATION_FACTOR = "High vibration levels detected"
TEMPERATURE_FLUCTUATION_FACTOR = "Significant temperature fluctuations"
HIGH_MOISTURE_FACTOR = "High moisture content"
PRESSURE_VARIATION_FACTOR = "Pressure variations observed"

VIBRATION_FACTOR_THRESHOLD = 50.0
TEMPERATURE_FACTOR_THRESHOLD = 10.0
MOISTURE_FACTOR_THRESHOLD = 80.0
PRESSURE_FACTOR_THRESHOLD = 5.0


def estimate_confidence(features: AggregatedFeatures) -> float:
    """Average of vibration consistency, temperature stability and data quality."""
    return (
        features.vibration_consistency
        + features.temperature_stability
        + features.data_quality_score
    ) / 3.0


def attribute_location(readings: Sequence[SensorReading]) -> str:
    """Label the sector at the centroid of the readings."""
    if not readings:
        return UNKNOWN_LOCATION
    count = len(readings)
    mean_x = sum(reading.location_x for reading in readings) / count
    mean_y = sum(reading.location_y for reading in readings) / count
    return f"Sector {mean_x:.1f},{mean_y:.1f}"


def identify_contributing_factors(features: AggregatedFeatures) -> Tuple[str, ...]:
    factors: list[str] = []
    if features.vibration_mean > VIBRATION_FACTOR_THRESHOLD:
        factors.append(HIGH_VIBRATION_FACTOR)
    if features.temperature_variation > TEMPERATURE_FACTOR_THRESHOLD:
        factors.append(TEMPERATURE_FLUCTUATION_FACTOR)
    if features.moisture_mean > MOISTURE_FACTOR_THRESHOLD:
        factors.append(HIGH_MOISTURE_FACTOR)
    if features.pressure_changes > PRESSURE_FACTOR_THRESHOLD:
        factors.append(PRESSURE_VARIATION_FACTOR)
    return tuple(factors)
