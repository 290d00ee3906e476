"""Prediction orchestration over reading windows."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Iterable, Optional

from datastore.reading_store import InMemoryReadingStore, build_default_store
from models.records import RiskAssessment, RiskLevel, SensorReading
from services.aggregator import Aggregator
from services.alerts import AlertDispatcher
from services.classifier import classify
from services.context import (
    UNKNOWN_LOCATION,
    attribute_location,
    estimate_confidence,
    identify_contributing_factors,
)
from services.diagnostics import DiagnosticsSink, FaultRecord, LoggingDiagnosticsSink

logger = logging.getLogger(__name__)

AUTO_ALERT_LEVELS = frozenset({RiskLevel.HIGH, RiskLevel.CRITICAL})


def degraded_assessment() -> RiskAssessment:
    return RiskAssessment(
        risk_level=RiskLevel.LOW,
        confidence=0.0,
        location=UNKNOWN_LOCATION,
        contributing_factors=(),
    )


@dataclass(frozen=True)
class StatusSnapshot:
    """Assessment of a recent window along with its sensor coverage."""

    assessment: RiskAssessment
    total_readings: int
    active_sensors: int
    window_minutes: int


class PredictionService:
    """Composes aggregation, classification and alerting into one call."""

    def __init__(
        self,
        aggregator: Aggregator,
        dispatcher: AlertDispatcher,
        diagnostics: Optional[DiagnosticsSink] = None,
        store: Optional[InMemoryReadingStore] = None,
    ) -> None:
        self.aggregator = aggregator
        self.dispatcher = dispatcher
        self.diagnostics = diagnostics or LoggingDiagnosticsSink()
        self.store = store

    def predict(self, readings: Iterable[SensorReading]) -> RiskAssessment:
        """Assess a reading batch; never raises."""
        stage = "snapshot"
        batch: tuple[SensorReading, ...] = ()
        try:
            batch = tuple(readings)
            logger.info(
                "Starting rockfall prediction",
                extra={"reading_count": len(batch)},
            )
            stage = "aggregation"
            features = self.aggregator.aggregate(batch)
            stage = "classification"
            level = classify(features)
            stage = "confidence"
            confidence = estimate_confidence(features)
            stage = "location"
            location = attribute_location(batch)
            stage = "factors"
            factors = identify_contributing_factors(features)
            assessment = RiskAssessment(
                risk_level=level,
                confidence=confidence,
                location=location,
                contributing_factors=factors,
            )
        except Exception as exc:
            self._report_fault(FaultRecord.from_exception(stage, exc, len(batch)))
            return degraded_assessment()

        if level in AUTO_ALERT_LEVELS:
            try:
                self.dispatcher.dispatch(assessment)
            except Exception as exc:
                self._report_fault(FaultRecord.from_exception("dispatch", exc, len(batch)))

        logger.info(
            "Prediction completed",
            extra={
                "risk_level": level.name,
                "confidence": confidence,
                "location": location,
            },
        )
        return assessment

    def _report_fault(self, fault: FaultRecord) -> None:
        try:
            self.diagnostics.record_fault(fault)
        except Exception:
            logger.exception(
                "Diagnostics sink rejected fault from %s: %s",
                fault.stage,
                fault.message,
                extra={"stage": fault.stage, "error_type": fault.error_type},
            )

    def assess_recent(self, minutes: int, now: Optional[datetime] = None) -> RiskAssessment:
        return self.current_status(minutes, now=now).assessment

    def current_status(self, minutes: int, now: Optional[datetime] = None) -> StatusSnapshot:
        """Predict over readings newer than ``minutes`` ago in the attached store."""
        if self.store is None:
            raise RuntimeError("PredictionService has no reading store attached.")
        reference = now or datetime.now(timezone.utc)
        readings = self.store.find_since(reference - timedelta(minutes=minutes))
        assessment = self.predict(readings)
        return StatusSnapshot(
            assessment=assessment,
            total_readings=len(readings),
            active_sensors=len({reading.sensor_id for reading in readings}),
            window_minutes=minutes,
        )


@lru_cache
def build_default_predictor() -> PredictionService:
    """Factory that wires the predictor with the default store and sinks."""
    return PredictionService(
        aggregator=Aggregator(),
        dispatcher=AlertDispatcher(),
        diagnostics=LoggingDiagnosticsSink(),
        store=build_default_store(),
    )
