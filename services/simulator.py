"""Synthetic telemetry for exercising the pipeline without field sensors."""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from typing import Optional

from models.records import SensorReading

logger = logging.getLogger(__name__)

GRID_COLUMNS = 5
GRID_SPACING = 100.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def sensor_location(sensor_id: str) -> tuple[float, float]:
    """Fixed grid position derived from the numeric suffix of the sensor id."""
    index = int(sensor_id[-3:])
    return (index % GRID_COLUMNS) * GRID_SPACING, (index // GRID_COLUMNS) * GRID_SPACING


class SensorDataSimulator:
    """Produces rounds of plausible readings with occasional high-risk spikes."""

    def __init__(
        self,
        sensor_count: int = 10,
        high_risk_rate: float = 0.05,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.sensor_ids = [f"SENSOR_{index:03d}" for index in range(1, sensor_count + 1)]
        self.high_risk_rate = high_risk_rate
        self._rng = rng or random.Random()

    def generate_round(self, timestamp: Optional[datetime] = None) -> list[SensorReading]:
        stamp = timestamp or datetime.now(timezone.utc)
        readings = [self.generate_reading(sensor_id, stamp) for sensor_id in self.sensor_ids]
        logger.info("Generated simulated readings", extra={"reading_count": len(readings)})
        return readings

    def generate_reading(self, sensor_id: str, timestamp: datetime) -> SensorReading:
        x, y = sensor_location(sensor_id)
        if self._rng.random() < self.high_risk_rate:
            logger.warning("Generated high-risk reading", extra={"sensor_id": sensor_id})
            return self._high_risk_reading(sensor_id, timestamp, x, y)

        rng = self._rng
        return SensorReading(
            sensor_id=sensor_id,
            timestamp=timestamp,
            vibration=_clamp(rng.gauss(10.0, 8.0), 0.0, 100.0),
            temperature=_clamp(rng.gauss(25.0, 5.0), -10.0, 60.0),
            moisture=_clamp(rng.gauss(50.0, 15.0), 0.0, 100.0),
            pressure=_clamp(rng.gauss(100.0, 3.0), 80.0, 120.0),
            location_x=x,
            location_y=y,
        )

    def _high_risk_reading(
        self, sensor_id: str, timestamp: datetime, x: float, y: float
    ) -> SensorReading:
        rng = self._rng
        return SensorReading(
            sensor_id=sensor_id,
            timestamp=timestamp,
            vibration=rng.uniform(60.0, 100.0),
            temperature=rng.uniform(30.0, 50.0),
            moisture=rng.uniform(80.0, 95.0),
            pressure=rng.uniform(110.0, 130.0),
            location_x=x,
            location_y=y,
        )
