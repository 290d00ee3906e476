from __future__ import annotations

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from threading import Lock
from typing import Callable, Iterable, Optional

from models.records import SensorReading
from settings import get_settings


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryReadingStore:
    """Thread-safe, process-local source of sensor readings.

    With a ``retention`` window, every write drops readings stamped at or
    before ``clock() - retention``.
    """

    def __init__(
        self,
        name: str = "sensor_readings",
        retention: Optional[timedelta] = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.name = name
        self.retention = retention
        self._clock = clock
        self._readings: list[SensorReading] = []
        self._lock = Lock()

    def add(self, reading: SensorReading) -> None:
        with self._lock:
            self._readings.append(reading)
            self._expire()

    def add_many(self, readings: Iterable[SensorReading]) -> int:
        items = list(readings)
        with self._lock:
            self._readings.extend(items)
            self._expire()
        return len(items)

    def prune_before(self, cutoff: datetime) -> int:
        """Drop readings stamped at or before ``cutoff``; return how many went."""

        with self._lock:
            return self._prune(cutoff)

    def find_since(self, since: datetime) -> list[SensorReading]:
        """Return readings stamped strictly after ``since``."""

        with self._lock:
            return [reading for reading in self._readings if reading.timestamp > since]

    def find_by_sensor_since(self, sensor_id: str, since: datetime) -> list[SensorReading]:
        with self._lock:
            return [
                reading
                for reading in self._readings
                if reading.sensor_id == sensor_id and reading.timestamp > since
            ]

    def sensor_ids(self) -> list[str]:
        with self._lock:
            return sorted({reading.sensor_id for reading in self._readings})

    def __len__(self) -> int:
        with self._lock:
            return len(self._readings)

    def _expire(self) -> None:
        if self.retention is not None:
            self._prune(self._clock() - self.retention)

    def _prune(self, cutoff: datetime) -> int:
        kept = [reading for reading in self._readings if reading.timestamp > cutoff]
        dropped = len(self._readings) - len(kept)
        self._readings = kept
        return dropped


@lru_cache
def build_default_store(name: Optional[str] = None) -> InMemoryReadingStore:
    settings = get_settings()
    retention = max(
        timedelta(hours=settings.sensor_history_hours),
        timedelta(minutes=settings.assessment_window_minutes),
        timedelta(minutes=settings.status_window_minutes),
    )
    return InMemoryReadingStore(name=name or "sensor_readings", retention=retention)
