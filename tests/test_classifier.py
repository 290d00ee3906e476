"""Unit tests for the weighted rule-based classifier."""

from __future__ import annotations

import pytest

from models.records import AggregatedFeatures, RiskLevel
from services.classifier import (
    VIBRATION_TIERS,
    classify,
    level_for_score,
    risk_score,
    tier_score,
)


def _features(
    vibration: float = 0.0,
    temperature_variation: float = 0.0,
    moisture: float = 0.0,
    pressure_change: float = 0.0,
    quality: float = 1.0,
) -> AggregatedFeatures:
    return AggregatedFeatures(
        vibration_mean=vibration,
        temperature_range=temperature_variation,
        moisture_mean=moisture,
        pressure_range=pressure_change,
        data_quality_score=quality,
    )


def test_tier_thresholds_are_strict() -> None:
    assert tier_score(70.0, VIBRATION_TIERS) == 0.20
    assert tier_score(70.01, VIBRATION_TIERS) == 0.30
    assert tier_score(30.0, VIBRATION_TIERS) == 0.0
    assert tier_score(31.0, VIBRATION_TIERS) == 0.10


def test_quiet_window_scores_zero() -> None:
    features = _features(vibration=20.0, moisture=50.0)

    assert risk_score(features) == 0.0
    assert classify(features) is RiskLevel.LOW


def test_all_channels_at_top_tier_is_critical() -> None:
    features = _features(vibration=80.0, temperature_variation=16.0, moisture=90.0, pressure_change=11.0)

    assert risk_score(features) == 1.0
    assert classify(features) is RiskLevel.CRITICAL


def test_only_highest_tier_applies_per_channel() -> None:
    features = _features(vibration=75.0)

    assert risk_score(features) == 0.30


def test_score_is_discounted_by_data_quality() -> None:
    features = _features(
        vibration=80.0, temperature_variation=16.0, moisture=90.0, pressure_change=11.0, quality=0.5
    )

    assert risk_score(features) == 0.5
    assert classify(features) is RiskLevel.MEDIUM


def test_mixed_channels_reach_high() -> None:
    features = _features(vibration=72.0, temperature_variation=6.0, moisture=86.0)

    assert risk_score(features) == pytest.approx(0.65)
    assert classify(features) is RiskLevel.HIGH


def test_zero_quality_forces_low() -> None:
    features = _features(
        vibration=80.0, temperature_variation=16.0, moisture=90.0, pressure_change=11.0, quality=0.0
    )

    assert classify(features) is RiskLevel.LOW


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (1.0, RiskLevel.CRITICAL),
        (0.8, RiskLevel.CRITICAL),
        (0.79, RiskLevel.HIGH),
        (0.6, RiskLevel.HIGH),
        (0.59, RiskLevel.MEDIUM),
        (0.4, RiskLevel.MEDIUM),
        (0.39, RiskLevel.LOW),
        (0.0, RiskLevel.LOW),
    ],
)
def test_level_cutoffs(score: float, expected: RiskLevel) -> None:
    assert level_for_score(score) is expected


def test_score_never_exceeds_one() -> None:
    features = _features(
        vibration=1000.0, temperature_variation=500.0, moisture=100.0, pressure_change=200.0, quality=1.0
    )

    assert risk_score(features) <= 1.0


@pytest.mark.parametrize("channel", ["vibration", "temperature_variation", "moisture", "pressure_change"])
def test_raising_one_channel_never_lowers_score(channel: str) -> None:
    baseline = {"vibration": 35.0, "temperature_variation": 6.0, "moisture": 55.0, "pressure_change": 5.0}
    previous = -1.0
    for value in range(0, 120, 3):
        values = dict(baseline)
        values[channel] = float(value)
        score = risk_score(_features(**values))
        assert score >= previous
        previous = score


def test_lower_quality_never_raises_level() -> None:
    previous = RiskLevel.CRITICAL
    for step in range(10, -1, -1):
        features = _features(
            vibration=80.0,
            temperature_variation=16.0,
            moisture=90.0,
            pressure_change=11.0,
            quality=step / 10,
        )
        level = classify(features)
        assert level <= previous
        previous = level


def test_risk_levels_are_ordered() -> None:
    assert RiskLevel.LOW < RiskLevel.MEDIUM < RiskLevel.HIGH < RiskLevel.CRITICAL
    assert RiskLevel.CRITICAL.description == "Immediate evacuation required"
