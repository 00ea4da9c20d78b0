from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

import httpx
import typer

from cli.config import CLIConfig


class ApiClient:
    """Minimal HTTP client for the analytics service."""

    def __init__(self, config: CLIConfig, transport: httpx.BaseTransport | None = None) -> None:
        self._config = config
        self._client = httpx.Client(
            base_url=config.base_url, timeout=config.timeout, transport=transport
        )

    def close(self) -> None:
        self._client.close()

    def register_panel(
        self, serial: str, brand: str, latitude: float, longitude: float
    ) -> Dict[str, Any]:
        payload = {
            "serial": serial,
            "brand": brand,
            "latitude": latitude,
            "longitude": longitude,
        }
        try:
            response = self._client.post("/panel", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        return response.json()

    def get_readings(self, panel_id: str) -> List[Dict[str, Any]]:
        response = self._get_panel_resource(panel_id, f"/panel/{panel_id}/analytics")
        return response.json().get("readings") or []

    def get_daily_summaries(self, panel_id: str) -> List[Dict[str, Any]]:
        response = self._get_panel_resource(panel_id, f"/panel/{panel_id}/analytics/day")
        return response.json()

    def record_reading(
        self, panel_id: str, reading_id: int, kilo_watt: float, date_time: datetime
    ) -> Dict[str, Any]:
        payload = {
            "id": reading_id,
            "kilo_watt": kilo_watt,
            "date_time": date_time.isoformat(),
        }
        try:
            response = self._client.post(f"/panel/{panel_id}/analytics", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        return response.json()

    def _get_panel_resource(self, panel_id: str, path: str) -> httpx.Response:
        try:
            response = self._client.get(path)
            if response.status_code == 404:
                raise typer.BadParameter(f"Panel {panel_id} was not found.")
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        return response

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> None:
        detail: str | None = None
        try:
            data = exc.response.json()
            detail = data.get("detail")
        except Exception:  # noqa: BLE001 - best effort parsing
            detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
