from __future__ import annotations

from typing import Any, Dict, Iterable, List

import typer

_LEVEL_COLORS = {
    "LOW": typer.colors.GREEN,
    "MEDIUM": typer.colors.YELLOW,
    "HIGH": typer.colors.MAGENTA,
    "CRITICAL": typer.colors.RED,
}


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def echo_risk_level(level: Any) -> None:
    typer.secho(f"risk_level: {level}", fg=_LEVEL_COLORS.get(str(level)))


def render_status(payload: Dict[str, Any]) -> None:
    echo_heading("Current Status")
    echo_risk_level(payload.get("risk_level"))
    echo_key_values(
        [
            ("timestamp", payload.get("timestamp")),
            ("confidence", payload.get("confidence")),
            ("location", payload.get("location")),
            ("window_minutes", payload.get("window_minutes")),
            ("total_readings", payload.get("total_readings")),
            ("active_sensors", payload.get("active_sensors")),
        ]
    )


def render_assessment(payload: Dict[str, Any]) -> None:
    echo_heading("Risk Assessment")
    echo_risk_level(payload.get("risk_level"))
    echo_key_values(
        [
            ("description", payload.get("risk_description")),
            ("confidence", payload.get("confidence")),
            ("location", payload.get("location")),
            ("assessed_at", payload.get("assessed_at")),
        ]
    )

    factors = payload.get("contributing_factors") or []
    typer.echo()
    echo_heading("Contributing Factors")
    if factors:
        for factor in factors:
            typer.echo(f"  - {factor}")
    else:
        typer.echo("No contributing factors identified.")


def render_readings(sensor_id: str, readings: List[Dict[str, Any]]) -> None:
    echo_heading(f"Readings for {sensor_id}")
    if not readings:
        typer.echo("No readings recorded.")
        return
    for reading in readings:
        typer.echo(
            f"  - {reading.get('timestamp')}: "
            f"vibration={reading.get('vibration')} "
            f"temperature={reading.get('temperature')} "
            f"moisture={reading.get('moisture')} "
            f"pressure={reading.get('pressure')}"
        )
