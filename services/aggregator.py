"""Window aggregation logic for sensor readings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from models.records import AggregatedFeatures, SensorReading
from services.validation import is_valid_reading

logger = logging.getLogger(__name__)

TEMPERATURE_STABILITY_SCALE = 100.0


@dataclass
class _ChannelStats:
    total: float = 0.0
    minimum: float | None = None
    maximum: float | None = None

    def add(self, value: float) -> None:
        self.total += value
        if self.minimum is None or value < self.minimum:
            self.minimum = value
        if self.maximum is None or value > self.maximum:
            self.maximum = value


class Aggregator:
    """Pure aggregation component that can be unit tested in isolation."""

    def aggregate(self, readings: Iterable[SensorReading]) -> AggregatedFeatures:
        vibration = _ChannelStats()
        temperature = _ChannelStats()
        moisture = _ChannelStats()
        pressure = _ChannelStats()
        count = 0
        valid = 0

        for reading in readings:
            count += 1
            vibration.add(reading.vibration)
            temperature.add(reading.temperature)
            moisture.add(reading.moisture)
            pressure.add(reading.pressure)
            if is_valid_reading(reading):
                valid += 1

        if not count:
            return AggregatedFeatures()

        vibration_mean = vibration.total / count
        vibration_range = vibration.maximum - vibration.minimum
        temperature_range = temperature.maximum - temperature.minimum
        moisture_range = moisture.maximum - moisture.minimum
        pressure_range = pressure.maximum - pressure.minimum

        features = AggregatedFeatures(
            vibration_mean=vibration_mean,
            vibration_min=vibration.minimum,
            vibration_max=vibration.maximum,
            vibration_range=vibration_range,
            temperature_mean=temperature.total / count,
            temperature_min=temperature.minimum,
            temperature_max=temperature.maximum,
            temperature_range=temperature_range,
            moisture_mean=moisture.total / count,
            moisture_min=moisture.minimum,
            moisture_max=moisture.maximum,
            moisture_range=moisture_range,
            pressure_mean=pressure.total / count,
            pressure_min=pressure.minimum,
            pressure_max=pressure.maximum,
            pressure_range=pressure_range,
            vibration_consistency=self._consistency(vibration_range, vibration_mean),
            temperature_stability=self._stability(temperature_range),
            data_quality_score=valid / count,
        )
        logger.debug(
            "Aggregated %d readings (%d valid)",
            count,
            valid,
            extra={"reading_count": count},
        )
        return features

    @staticmethod
    def _consistency(value_range: float, mean: float) -> float:
        # A constant zero signal counts as fully consistent.
        if mean == 0:
            return 1.0
        return _clamp_unit(1.0 - value_range / mean)

    @staticmethod
    def _stability(value_range: float) -> float:
        return _clamp_unit(1.0 - value_range / TEMPERATURE_STABILITY_SCALE)


def _clamp_unit(value: float) -> float:
    # NaN collapses to 0.0 because max() keeps the first operand.
    return min(1.0, max(0.0, value))
