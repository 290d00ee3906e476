"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Tuple


@dataclass(frozen=True, slots=True)
class SensorReading:
    """A single multi-channel sample from a slope sensor."""

    sensor_id: str
    timestamp: datetime
    vibration: float
    temperature: float
    moisture: float
    pressure: float
    location_x: float
    location_y: float


@dataclass(frozen=True, slots=True)
class AggregatedFeatures:
    """Window statistics per channel plus derived quality scores."""

    vibration_mean: float = 0.0
    vibration_min: float = 0.0
    vibration_max: float = 0.0
    vibration_range: float = 0.0
    temperature_mean: float = 0.0
    temperature_min: float = 0.0
    temperature_max: float = 0.0
    temperature_range: float = 0.0
    moisture_mean: float = 0.0
    moisture_min: float = 0.0
    moisture_max: float = 0.0
    moisture_range: float = 0.0
    pressure_mean: float = 0.0
    pressure_min: float = 0.0
    pressure_max: float = 0.0
    pressure_range: float = 0.0
    vibration_consistency: float = 0.0
    temperature_stability: float = 0.0
    data_quality_score: float = 0.0

    @property
    def temperature_variation(self) -> float:
        return self.temperature_range

    @property
    def pressure_changes(self) -> float:
        return self.pressure_range


class RiskLevel(Enum):
    """Ordered risk classification."""

    LOW = (0, "Safe conditions")
    MEDIUM = (1, "Monitor closely")
    HIGH = (2, "Evacuation recommended")
    CRITICAL = (3, "Immediate evacuation required")

    def __init__(self, rank: int, description: str) -> None:
        self.rank = rank
        self.description = description

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RiskLevel):
            return NotImplemented
        return self.rank >= other.rank


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class RiskAssessment:
    """Outcome of one prediction over a reading window."""

    risk_level: RiskLevel
    confidence: float
    location: str
    assessed_at: datetime = field(default_factory=_utcnow)
    contributing_factors: Tuple[str, ...] = ()


class AlertSeverity(str, Enum):
    """Notification severities the dispatcher can emit."""

    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True, slots=True)
class AlertEvent:
    """Notification handed to the delivery collaborator."""

    severity: AlertSeverity
    message: str
    assessment: RiskAssessment
