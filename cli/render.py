from __future__ import annotations

from typing import Any, Dict, Iterable, List

import typer


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_panel(payload: Dict[str, Any]) -> None:
    echo_heading("Panel")
    echo_key_values(
        [
            ("serial", payload.get("serial")),
            ("brand", payload.get("brand")),
            ("latitude", payload.get("latitude")),
            ("longitude", payload.get("longitude")),
        ]
    )


def render_reading(payload: Dict[str, Any]) -> None:
    echo_heading("Reading recorded")
    echo_key_values(
        [
            ("id", payload.get("id")),
            ("panel_id", payload.get("panel_id")),
            ("kilo_watt", payload.get("kilo_watt")),
            ("date_time", payload.get("date_time")),
        ]
    )


def render_readings(panel_id: str, readings: List[Dict[str, Any]]) -> None:
    echo_heading(f"Hourly readings for {panel_id}")
    if not readings:
        typer.echo("No readings recorded.")
        return
    for reading in readings:
        typer.echo(
            f"  - #{reading.get('id')} {reading.get('date_time')}: {reading.get('kilo_watt')} kW"
        )
    typer.echo(f"total: {len(readings)}")


def render_daily_summaries(panel_id: str, summaries: List[Dict[str, Any]]) -> None:
    echo_heading(f"Daily summaries for {panel_id}")
    if not summaries:
        typer.echo("No readings recorded.")
        return
    for summary in summaries:
        typer.echo()
        echo_key_values(
            [
                ("date", summary.get("date")),
                ("minimum", summary.get("minimum")),
                ("maximum", summary.get("maximum")),
                ("sum", summary.get("sum")),
                ("average", summary.get("average")),
            ]
        )
