"""Weighted rule-based risk classification over aggregated features."""

from __future__ import annotations

import logging
from typing import Callable, Sequence, Tuple

from models.records import AggregatedFeatures, RiskLevel

logger = logging.getLogger(__name__)

# (threshold, score) pairs ordered strictest first; a channel contributes the
# score of the first threshold its value strictly exceeds.
Tier = Tuple[float, float]

VIBRATION_TIERS: Sequence[Tier] = ((70.0, 0.30), (50.0, 0.20), (30.0, 0.10))
TEMPERATURE_VARIATION_TIERS: Sequence[Tier] = ((15.0, 0.20), (10.0, 0.15), (5.0, 0.10))
MOISTURE_TIERS: Sequence[Tier] = ((85.0, 0.25), (70.0, 0.20), (50.0, 0.10))
PRESSURE_CHANGE_TIERS: Sequence[Tier] = ((10.0, 0.25), (7.0, 0.20), (4.0, 0.10))

CHANNEL_RULES: Sequence[Tuple[str, Callable[[AggregatedFeatures], float], Sequence[Tier]]] = (
    ("vibration", lambda f: f.vibration_mean, VIBRATION_TIERS),
    ("temperature", lambda f: f.temperature_variation, TEMPERATURE_VARIATION_TIERS),
    ("moisture", lambda f: f.moisture_mean, MOISTURE_TIERS),
    ("pressure", lambda f: f.pressure_changes, PRESSURE_CHANGE_TIERS),
)

LEVEL_CUTOFFS: Sequence[Tuple[float, RiskLevel]] = (
    (0.8, RiskLevel.CRITICAL),
    (0.6, RiskLevel.HIGH),
    (0.4, RiskLevel.MEDIUM),
)

MAX_SCORE = 1.0


def tier_score(value: float, tiers: Sequence[Tier]) -> float:
    for threshold, score in tiers:
        if value > threshold:
            return score
    return 0.0


def risk_score(features: AggregatedFeatures) -> float:
    """Sum per-channel tier scores, discount by data quality and cap at 1.0."""
    raw = 0.0
    for _name, extract, tiers in CHANNEL_RULES:
        raw += tier_score(extract(features), tiers)
    return min(MAX_SCORE, raw * features.data_quality_score)


def level_for_score(score: float) -> RiskLevel:
    for cutoff, level in LEVEL_CUTOFFS:
        if score >= cutoff:
            return level
    return RiskLevel.LOW


def classify(features: AggregatedFeatures) -> RiskLevel:
    score = risk_score(features)
    level = level_for_score(score)
    logger.debug(
        "Classified window",
        extra={"risk_score": score, "risk_level": level.name},
    )
    return level
