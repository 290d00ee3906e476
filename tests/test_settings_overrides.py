from __future__ import annotations

from settings import get_settings


def test_defaults_apply_without_environment(monkeypatch) -> None:
    for name in (
        "LOG_LEVEL",
        "STATUS_WINDOW_MINUTES",
        "ASSESSMENT_WINDOW_MINUTES",
        "SENSOR_HISTORY_HOURS",
        "SIMULATOR_SENSOR_COUNT",
        "SIMULATOR_HIGH_RISK_RATE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert settings.log_level == "INFO"
        assert settings.status_window_minutes == 10
        assert settings.assessment_window_minutes == 60
        assert settings.sensor_history_hours == 24
        assert settings.simulator_sensor_count == 10
        assert settings.simulator_high_risk_rate == 0.05
    finally:
        get_settings.cache_clear()


def test_environment_overrides_apply(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")
    monkeypatch.setenv("STATUS_WINDOW_MINUTES", "5")
    monkeypatch.setenv("ASSESSMENT_WINDOW_MINUTES", "120")
    monkeypatch.setenv("SENSOR_HISTORY_HOURS", "48")
    monkeypatch.setenv("SIMULATOR_SENSOR_COUNT", "3")
    monkeypatch.setenv("SIMULATOR_HIGH_RISK_RATE", "0.5")
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.status_window_minutes == 5
        assert settings.assessment_window_minutes == 120
        assert settings.sensor_history_hours == 48
        assert settings.simulator_sensor_count == 3
        assert settings.simulator_high_risk_rate == 0.5
    finally:
        get_settings.cache_clear()


def test_malformed_values_fall_back_to_defaults(monkeypatch) -> None:
    monkeypatch.setenv("STATUS_WINDOW_MINUTES", "soon")
    monkeypatch.setenv("ASSESSMENT_WINDOW_MINUTES", "-5")
    monkeypatch.setenv("SENSOR_HISTORY_HOURS", "   ")
    monkeypatch.setenv("SIMULATOR_HIGH_RISK_RATE", "1.5")
    get_settings.cache_clear()

    try:
        settings = get_settings()
        assert settings.status_window_minutes == 10
        assert settings.assessment_window_minutes == 60
        assert settings.sensor_history_hours == 24
        assert settings.simulator_high_risk_rate == 0.05
    finally:
        get_settings.cache_clear()
