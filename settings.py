from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_LOG_LEVEL_ENV = "LOG_LEVEL"
_STATUS_WINDOW_ENV = "STATUS_WINDOW_MINUTES"
_ASSESSMENT_WINDOW_ENV = "ASSESSMENT_WINDOW_MINUTES"
_SENSOR_HISTORY_ENV = "SENSOR_HISTORY_HOURS"
_SIMULATOR_SENSORS_ENV = "SIMULATOR_SENSOR_COUNT"
_SIMULATOR_HIGH_RISK_ENV = "SIMULATOR_HIGH_RISK_RATE"


@dataclass(frozen=True)
class Settings:
    log_level: str
    status_window_minutes: int
    assessment_window_minutes: int
    sensor_history_hours: int
    simulator_sensor_count: int
    simulator_high_risk_rate: float


def _read_positive_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_rate(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if 0.0 <= parsed <= 1.0 else default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        log_level=_read_log_level("INFO"),
        status_window_minutes=_read_positive_int(_STATUS_WINDOW_ENV, 10),
        assessment_window_minutes=_read_positive_int(_ASSESSMENT_WINDOW_ENV, 60),
        sensor_history_hours=_read_positive_int(_SENSOR_HISTORY_ENV, 24),
        simulator_sensor_count=_read_positive_int(_SIMULATOR_SENSORS_ENV, 10),
        simulator_high_risk_rate=_read_rate(_SIMULATOR_HIGH_RISK_ENV, 0.05),
    )
