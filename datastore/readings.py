from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional

from app.schemas import HourlyReading
from datastore.base import MockTable
from settings import get_settings


class MockReadingTable(MockTable):
    """Hourly readings partitioned by panel serial, in insertion order."""

    def __init__(self, name: str, persistence_path: Optional[Path] = None) -> None:
        self._by_panel: Dict[str, List[HourlyReading]] = {}
        super().__init__(name, persistence_path)

    def append(self, panel_id: str, reading: HourlyReading) -> None:
        with self._writing():
            self._by_panel.setdefault(panel_id, []).append(reading.model_copy(deep=True))

    def list_for_panel(self, panel_id: str) -> list[HourlyReading]:
        with self._reading():
            return [reading.model_copy(deep=True) for reading in self._by_panel.get(panel_id, [])]

    def scan(self) -> list[HourlyReading]:
        with self._reading():
            return [
                reading.model_copy(deep=True)
                for readings in self._by_panel.values()
                for reading in readings
            ]

    def _snapshot(self) -> Dict[str, Any]:
        return {
            panel_id: [reading.model_dump(mode="json") for reading in readings]
            for panel_id, readings in self._by_panel.items()
        }

    def _restore(self, data: Dict[str, Any]) -> None:
        for panel_id, payloads in data.items():
            self._by_panel[panel_id] = [HourlyReading.model_validate(item) for item in payloads]


@lru_cache
def build_default_reading_table(
    name: Optional[str] = None,
    path: Optional[str] = None,
) -> MockReadingTable:
    settings = get_settings()
    table_name = settings.reading_table_name if name is None else name
    table_path = settings.reading_persistence_path if path is None else path
    persistence = Path(table_path) if table_path else None
    return MockReadingTable(name=table_name, persistence_path=persistence)
