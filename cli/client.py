from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
import typer

from cli.config import CLIConfig


class ApiClient:
    """Minimal HTTP client for the monitoring service."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        self._client = httpx.Client(base_url=config.base_url, timeout=config.timeout)

    def close(self) -> None:
        self._client.close()

    def current_status(self) -> Dict[str, Any]:
        return self._request("GET", "/monitoring/current-status")

    def risk_assessment(self) -> Dict[str, Any]:
        return self._request("GET", "/monitoring/risk-assessment")

    def sensor_readings(self, sensor_id: str, hours: Optional[int] = None) -> List[Dict[str, Any]]:
        params = {"hours": hours} if hours is not None else None
        return self._request("GET", f"/monitoring/sensor-readings/{sensor_id}", params=params)

    def send_reading(self, reading: Dict[str, Any]) -> str:
        payload = self._request("POST", "/monitoring/sensor-data", json=reading)
        detail = payload.get("detail")
        if not isinstance(detail, str):
            raise typer.BadParameter("Unexpected response payload when sending reading.")
        return detail

    def simulate(self, count: int) -> int:
        payload = self._request("POST", "/monitoring/simulate", params={"count": count})
        stored = payload.get("stored")
        if not isinstance(stored, int):
            raise typer.BadParameter("Unexpected response payload when simulating readings.")
        return stored

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.TransportError as exc:
            typer.secho(
                f"Could not reach {self._config.base_url}: {exc}",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1) from exc
        return response.json()

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> None:
        detail: str | None = None
        try:
            data = exc.response.json()
            detail = data.get("detail")
        except ValueError:
            detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
