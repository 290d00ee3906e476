from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_assessment, render_readings, render_status


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for interacting with the rockfall risk monitoring service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Monitoring API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="HTTP request timeout in seconds.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("status")
def status_command(ctx: typer.Context) -> None:
    """Show the risk level for the most recent short window."""
    state = _get_state(ctx)
    render_status(state.client.current_status())


@app.command("assess")
def assess_command(ctx: typer.Context) -> None:
    """Show the full risk assessment for the lookback window."""
    state = _get_state(ctx)
    render_assessment(state.client.risk_assessment())


@app.command("readings")
def readings_command(
    ctx: typer.Context,
    sensor_id: str = typer.Argument(..., help="Sensor identifier, e.g. SENSOR_001."),
    hours: Optional[int] = typer.Option(None, "--hours", min=1, help="Lookback in hours."),
) -> None:
    """List recent readings for one sensor."""
    state = _get_state(ctx)
    render_readings(sensor_id, state.client.sensor_readings(sensor_id, hours=hours))


@app.command("send")
def send_command(
    ctx: typer.Context,
    sensor_id: str = typer.Argument(..., help="Sensor identifier."),
    vibration: float = typer.Option(..., "--vibration", help="Vibration level in Hz."),
    temperature: float = typer.Option(..., "--temperature", help="Temperature in Celsius."),
    moisture: float = typer.Option(..., "--moisture", help="Moisture in percent."),
    pressure: float = typer.Option(..., "--pressure", help="Pressure in kPa."),
    x: float = typer.Option(0.0, "--x", help="Sensor x coordinate."),
    y: float = typer.Option(0.0, "--y", help="Sensor y coordinate."),
) -> None:
    """Submit a single reading."""
    state = _get_state(ctx)
    detail = state.client.send_reading(
        {
            "sensor_id": sensor_id,
            "vibration": vibration,
            "temperature": temperature,
            "moisture": moisture,
            "pressure": pressure,
            "location_x": x,
            "location_y": y,
        }
    )
    typer.secho(detail, fg=typer.colors.GREEN)


@app.command("simulate")
def simulate_command(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", min=1, max=100, help="Rounds to generate."),
) -> None:
    """Generate simulated readings on the server."""
    state = _get_state(ctx)
    stored = state.client.simulate(count)
    typer.secho(f"Stored {stored} simulated readings.", fg=typer.colors.GREEN)
