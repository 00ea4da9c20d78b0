from __future__ import annotations

import json
from datetime import datetime
from typing import Iterator, List

import httpx
import pytest
import typer
from typer.testing import CliRunner

from cli.app import app
from cli.client import ApiClient
from cli.config import CLIConfig

KNOWN_PANEL = "SSSS22225555TTTT"


def _handler(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == f"/panel/{KNOWN_PANEL}/analytics" and request.method == "GET":
        return httpx.Response(
            200,
            json={
                "readings": [
                    {
                        "id": 1,
                        "panel_id": KNOWN_PANEL,
                        "kilo_watt": 240.0,
                        "date_time": "2024-01-01T10:00:00",
                    }
                ]
            },
        )
    if path == f"/panel/{KNOWN_PANEL}/analytics/day":
        return httpx.Response(
            200,
            json=[
                {"date": "2024-01-01", "minimum": 240.0, "maximum": 240.0, "sum": 240.0, "average": 10.0}
            ],
        )
    if path.startswith("/panel/") and path.endswith("/analytics") and request.method == "POST":
        payload = json.loads(request.content)
        panel_id = path.split("/")[2]
        return httpx.Response(201, json={**payload, "panel_id": panel_id})
    if path == "/panel" and request.method == "POST":
        serial = json.loads(request.content)["serial"]
        return httpx.Response(409, json={"detail": f"Panel {serial!r} is already registered."})
    if path == "/panel/BROKEN0000000000/analytics":
        return httpx.Response(500, text="upstream exploded")
    return httpx.Response(404, json={"detail": "Not Found"})


@pytest.fixture()
def client() -> Iterator[ApiClient]:
    api_client = ApiClient(
        CLIConfig(base_url="http://analytics.test"), transport=httpx.MockTransport(_handler)
    )
    yield api_client
    api_client.close()


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def mocked_transport(monkeypatch) -> List[ApiClient]:
    created: List[ApiClient] = []

    def factory(config):
        api_client = ApiClient(config, transport=httpx.MockTransport(_handler))
        created.append(api_client)
        return api_client

    monkeypatch.setattr("cli.app.ApiClient", factory)
    return created


def test_get_readings_returns_reading_payloads(client: ApiClient) -> None:
    readings = client.get_readings(KNOWN_PANEL)

    assert [reading["id"] for reading in readings] == [1]
    assert readings[0]["kilo_watt"] == 240.0


def test_get_daily_summaries_returns_summary_payloads(client: ApiClient) -> None:
    summaries = client.get_daily_summaries(KNOWN_PANEL)

    assert summaries == [
        {"date": "2024-01-01", "minimum": 240.0, "maximum": 240.0, "sum": 240.0, "average": 10.0}
    ]


def test_unknown_panel_is_reported_as_bad_parameter(client: ApiClient) -> None:
    with pytest.raises(typer.BadParameter) as excinfo:
        client.get_daily_summaries("ASAS3434DFDF1234")

    assert "Panel ASAS3434DFDF1234 was not found." in str(excinfo.value)


def test_server_error_prints_detail_and_exits(client: ApiClient, capsys) -> None:
    with pytest.raises(typer.Exit) as excinfo:
        client.get_readings("BROKEN0000000000")

    assert excinfo.value.exit_code == 1
    assert "Request failed with status 500: upstream exploded" in capsys.readouterr().err


def test_record_reading_sends_iso_timestamp(client: ApiClient) -> None:
    reading = client.record_reading("SSSS22225555TTYY", 1, 1240.0, datetime(2024, 3, 1, 12, 0))

    assert reading == {
        "id": 1,
        "kilo_watt": 1240.0,
        "date_time": "2024-03-01T12:00:00",
        "panel_id": "SSSS22225555TTYY",
    }


def test_readings_command_for_unknown_panel(runner: CliRunner, mocked_transport) -> None:
    result = runner.invoke(app, ["readings", "ASAS3434DFDF1234"])

    assert result.exit_code == 2
    assert "Panel ASAS3434DFDF1234 was not found." in result.output


def test_daily_command_renders_server_summaries(runner: CliRunner, mocked_transport) -> None:
    result = runner.invoke(app, ["daily", KNOWN_PANEL])

    assert result.exit_code == 0
    assert "average: 10.0" in result.output
    assert "sum: 240.0" in result.output


def test_register_conflict_prints_detail_and_exits(runner: CliRunner, mocked_transport) -> None:
    result = runner.invoke(
        app,
        [
            "register",
            "ABCD12345678EFGH",
            "--brand",
            "Sunny",
            "--latitude",
            "51.5",
            "--longitude",
            "0.12",
        ],
    )

    assert result.exit_code == 1
    assert (
        "Request failed with status 409: Panel 'ABCD12345678EFGH' is already registered."
        in result.output
    )
