from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_daily_summaries, render_panel, render_reading, render_readings


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for interacting with the solar panel analytics service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


def _parse_timestamp(value: Optional[str]) -> datetime:
    if value is None:
        return datetime.now()
    candidate = value.strip()
    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(candidate)
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid ISO timestamp: {value!r}") from exc


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Analytics API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="HTTP timeout in seconds.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("register")
def register_command(
    ctx: typer.Context,
    serial: str = typer.Argument(..., help="16 character panel serial."),
    brand: str = typer.Option(..., "--brand", help="Panel manufacturer."),
    latitude: float = typer.Option(..., "--latitude", help="Latitude in degrees."),
    longitude: float = typer.Option(..., "--longitude", help="Longitude in degrees."),
) -> None:
    """Register a new solar panel."""
    state = _get_state(ctx)
    panel = state.client.register_panel(serial, brand, latitude, longitude)
    typer.secho(f"Panel registered. serial={panel.get('serial')}", fg=typer.colors.GREEN)
    render_panel(panel)


@app.command("readings")
def readings_command(
    ctx: typer.Context,
    panel_id: str = typer.Argument(..., help="Panel serial."),
) -> None:
    """List the hourly readings recorded for a panel."""
    state = _get_state(ctx)
    readings = state.client.get_readings(panel_id)
    render_readings(panel_id, readings)


@app.command("daily")
def daily_command(
    ctx: typer.Context,
    panel_id: str = typer.Argument(..., help="Panel serial."),
) -> None:
    """Show per-day minimum, maximum, sum and average for a panel."""
    state = _get_state(ctx)
    summaries = state.client.get_daily_summaries(panel_id)
    render_daily_summaries(panel_id, summaries)


@app.command("record")
def record_command(
    ctx: typer.Context,
    panel_id: str = typer.Argument(..., help="Panel serial."),
    reading_id: int = typer.Option(..., "--id", help="Reading identifier."),
    kilo_watt: float = typer.Option(..., "--kilowatt", help="Power generated during the hour."),
    at: Optional[str] = typer.Option(
        None,
        "--at",
        help="ISO timestamp of the reading (defaults to now).",
    ),
) -> None:
    """Record one hour of generated power for a panel."""
    state = _get_state(ctx)
    date_time = _parse_timestamp(at)
    reading = state.client.record_reading(panel_id, reading_id, kilo_watt, date_time)
    typer.secho(
        f"Reading accepted. location=panel/{panel_id}/analytics/{reading.get('id')}",
        fg=typer.colors.GREEN,
    )
    render_reading(reading)
