"""Fault reporting for the prediction pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FaultRecord:
    """Structured description of a fault recovered by the predictor."""

    stage: str
    error_type: str
    message: str
    reading_count: int
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    exception: Optional[BaseException] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_exception(cls, stage: str, exc: BaseException, reading_count: int) -> "FaultRecord":
        return cls(
            stage=stage,
            error_type=type(exc).__name__,
            message=str(exc),
            reading_count=reading_count,
            exception=exc,
        )


class DiagnosticsSink(Protocol):
    def record_fault(self, fault: FaultRecord) -> None:
        ...


class LoggingDiagnosticsSink:
    """Reports faults as ERROR log records with the exception traceback."""

    def record_fault(self, fault: FaultRecord) -> None:
        exc_info = None
        if fault.exception is not None:
            exc_info = (type(fault.exception), fault.exception, fault.exception.__traceback__)
        logger.error(
            "Prediction fault during %s: %s",
            fault.stage,
            fault.message,
            exc_info=exc_info,
            extra={
                "stage": fault.stage,
                "error_type": fault.error_type,
                "reading_count": fault.reading_count,
            },
        )


class RecordingDiagnosticsSink:
    """Keeps fault records in memory for inspection."""

    def __init__(self) -> None:
        self._faults: list[FaultRecord] = []
        self._lock = Lock()

    def record_fault(self, fault: FaultRecord) -> None:
        with self._lock:
            self._faults.append(fault)

    @property
    def faults(self) -> list[FaultRecord]:
        with self._lock:
            return list(self._faults)
