"""Panel analytics orchestration over the panel and reading tables."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List

from app.schemas import (
    DailySummary,
    HourlyReading,
    HourlyReadingCreate,
    Panel,
)
from datastore.panels import MockPanelTable, build_default_panel_table
from datastore.readings import MockReadingTable, build_default_reading_table
from models.records import PowerReading
from services.aggregator import DailyAggregator

logger = logging.getLogger(__name__)


class PanelNotFoundError(KeyError):
    """Raised when a read targets a panel serial that is not registered."""

    def __init__(self, panel_id: str) -> None:
        super().__init__(f"Panel {panel_id!r} not found.")
        self.panel_id = panel_id

    def __str__(self) -> str:
        return str(self.args[0])


class PanelAlreadyExistsError(ValueError):
    """Raised when registering a serial that is already taken."""


class AnalyticsService:
    """Coordinates panel lookup, reading storage and daily aggregation."""

    def __init__(
        self,
        panels: MockPanelTable,
        readings: MockReadingTable,
        aggregator: DailyAggregator,
    ) -> None:
        self.panels = panels
        self.readings = readings
        self.aggregator = aggregator

    def panel_exists(self, panel_id: str) -> bool:
        return self.panels.find_by_serial(panel_id) is not None

    def register_panel(self, panel: Panel) -> Panel:
        if self.panel_exists(panel.serial):
            raise PanelAlreadyExistsError(f"Panel {panel.serial!r} is already registered.")
        self.panels.put_item(panel)
        logger.info("Registered panel", extra={"panel_id": panel.serial})
        return panel

    def get_panel(self, panel_id: str) -> Panel:
        panel = self.panels.find_by_serial(panel_id)
        if panel is None:
            raise PanelNotFoundError(panel_id)
        return panel

    def list_panels(self) -> List[Panel]:
        return sorted(self.panels.scan(), key=lambda panel: panel.serial)

    def list_readings(self, panel_id: str) -> List[HourlyReading]:
        """Return every reading stored for a registered panel."""
        self._ensure_panel(panel_id)
        readings = self.readings.list_for_panel(panel_id)
        logger.debug(
            "Listed readings",
            extra={"panel_id": panel_id, "reading_count": len(readings)},
        )
        return readings

    def daily_summaries(self, panel_id: str) -> List[DailySummary]:
        """Aggregate a registered panel's readings into per-day statistics."""
        self._ensure_panel(panel_id)
        records = [
            PowerReading(
                panel_id=reading.panel_id,
                timestamp=reading.date_time,
                kilo_watt=reading.kilo_watt,
            )
            for reading in self.readings.list_for_panel(panel_id)
        ]
        summaries = self.aggregator.aggregate_by_day(records)
        logger.debug(
            "Computed daily summaries",
            extra={"panel_id": panel_id, "day_count": len(summaries)},
        )
        return [
            DailySummary(
                date=summary.day,
                minimum=summary.minimum,
                maximum=summary.maximum,
                sum=summary.total,
                average=summary.average,
            )
            for summary in summaries
        ]

    def record_reading(self, panel_id: str, payload: HourlyReadingCreate) -> HourlyReading:
        """Store a reading without checking that the panel is registered."""
        reading = HourlyReading(
            id=payload.id,
            panel_id=panel_id,
            kilo_watt=payload.kilo_watt,
            date_time=payload.date_time,
        )
        self.readings.append(panel_id, reading)
        logger.info(
            "Recorded hourly reading",
            extra={
                "panel_id": panel_id,
                "reading_id": reading.id,
                "status": "registered" if self.panel_exists(panel_id) else "unregistered",
            },
        )
        return reading

    def _ensure_panel(self, panel_id: str) -> None:
        if not self.panel_exists(panel_id):
            logger.info("Panel not found", extra={"panel_id": panel_id})
            raise PanelNotFoundError(panel_id)


def reading_location(panel_id: str, reading_id: int) -> str:
    return f"panel/{panel_id}/analytics/{reading_id}"


@lru_cache
def build_default_service() -> AnalyticsService:
    """Factory that wires the service with the default tables."""
    panels = build_default_panel_table()
    readings = build_default_reading_table()
    return AnalyticsService(panels=panels, readings=readings, aggregator=DailyAggregator())
