from datetime import date, datetime
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.schemas import HourlyReading, Panel
from datastore.panels import MockPanelTable
from datastore.readings import MockReadingTable
from services.aggregator import DailyAggregator
from services.analytics import AnalyticsService


@pytest.fixture
def ui_client(monkeypatch) -> Iterator[TestClient]:
    panels = MockPanelTable(name="test")
    panels.put_item(
        Panel(serial="SSSS22225555TTTT", brand="TikTak", latitude=22.345678, longitude=58.7655432)
    )
    readings = MockReadingTable(name="test")
    readings.append(
        "SSSS22225555TTTT",
        HourlyReading(
            id=1,
            panel_id="SSSS22225555TTTT",
            kilo_watt=240,
            date_time=datetime(2024, 6, 1, 12, 0),
        ),
    )
    service = AnalyticsService(panels=panels, readings=readings, aggregator=DailyAggregator())

    def build_test_service() -> AnalyticsService:
        return service

    build_test_service.cache_clear = lambda: None  # type: ignore[attr-defined]

    monkeypatch.setattr("app.main.build_default_service", build_test_service)
    monkeypatch.setattr("app.api.build_default_service", build_test_service)

    with TestClient(create_app()) as client:
        yield client


def test_ui_index_lists_panels(ui_client: TestClient) -> None:
    response = ui_client.get("/ui")

    assert response.status_code == 200
    assert "SSSS22225555TTTT" in response.text
    assert "TikTak" in response.text


def test_ui_panel_detail_shows_daily_summaries(ui_client: TestClient) -> None:
    response = ui_client.get("/ui/panels/SSSS22225555TTTT")

    assert response.status_code == 200
    assert date(2024, 6, 1).isoformat() in response.text
    assert "240.00" in response.text
    assert "10.00" in response.text


def test_ui_panel_detail_unknown_panel(ui_client: TestClient) -> None:
    response = ui_client.get("/ui/panels/ASAS3434DFDF1234")

    assert response.status_code == 404
