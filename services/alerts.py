"""Alert dispatching for elevated risk assessments."""

from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, Optional, Protocol, Tuple

from models.records import AlertEvent, AlertSeverity, RiskAssessment, RiskLevel

logger = logging.getLogger(__name__)

ALERT_RULES: Dict[RiskLevel, Tuple[AlertSeverity, str]] = {
    RiskLevel.CRITICAL: (AlertSeverity.CRITICAL, "Immediate evacuation required"),
    RiskLevel.HIGH: (AlertSeverity.HIGH, "Evacuation recommended"),
    RiskLevel.MEDIUM: (AlertSeverity.MEDIUM, "Enhanced monitoring required"),
}

_SEVERITY_LOG_LEVELS = {
    AlertSeverity.CRITICAL: logging.CRITICAL,
    AlertSeverity.HIGH: logging.WARNING,
    AlertSeverity.MEDIUM: logging.INFO,
}


class NotificationSink(Protocol):
    def send(self, event: AlertEvent) -> None:
        ...


class LoggingNotificationSink:
    """Delivers alerts to the application log."""

    def send(self, event: AlertEvent) -> None:
        logger.log(
            _SEVERITY_LOG_LEVELS[event.severity],
            "Sending %s alert: %s",
            event.severity.value,
            event.message,
            extra={
                "severity": event.severity.value,
                "location": event.assessment.location,
                "confidence": event.assessment.confidence,
            },
        )


class RecordingNotificationSink:
    """Keeps every delivered alert in memory."""

    def __init__(self) -> None:
        self._events: list[AlertEvent] = []
        self._lock = Lock()

    def send(self, event: AlertEvent) -> None:
        with self._lock:
            self._events.append(event)

    @property
    def events(self) -> list[AlertEvent]:
        with self._lock:
            return list(self._events)


def build_alert(assessment: RiskAssessment) -> Optional[AlertEvent]:
    """Map an assessment to its alert, or None for LOW risk."""
    rule = ALERT_RULES.get(assessment.risk_level)
    if rule is None:
        return None
    severity, message = rule
    return AlertEvent(severity=severity, message=message, assessment=assessment)


class AlertDispatcher:
    """Stateless dispatcher; every call is an independent notification attempt."""

    def __init__(self, sink: Optional[NotificationSink] = None) -> None:
        self.sink = sink or LoggingNotificationSink()

    def dispatch(self, assessment: RiskAssessment) -> Optional[AlertEvent]:
        event = build_alert(assessment)
        if event is None:
            logger.info(
                "Low risk - no alert needed",
                extra={"risk_level": assessment.risk_level.name},
            )
            return None
        logger.warning(
            "Rockfall alert triggered",
            extra={
                "risk_level": assessment.risk_level.name,
                "location": assessment.location,
            },
        )
        self.sink.send(event)
        return event
