from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

from app.schemas import Panel
from datastore.base import MockTable
from settings import get_settings


class MockPanelTable(MockTable):
    """Registered panels indexed by their unique serial."""

    def __init__(self, name: str, persistence_path: Optional[Path] = None) -> None:
        self._panels: Dict[str, Panel] = {}
        super().__init__(name, persistence_path)

    def put_item(self, panel: Panel) -> None:
        with self._writing():
            self._panels[panel.serial] = panel.model_copy(deep=True)

    def find_by_serial(self, serial: str) -> Optional[Panel]:
        with self._reading():
            panel = self._panels.get(serial)
            return panel.model_copy(deep=True) if panel is not None else None

    def scan(self) -> list[Panel]:
        """Return deep copies of all registered panels."""
        with self._reading():
            return [panel.model_copy(deep=True) for panel in self._panels.values()]

    def _snapshot(self) -> Dict[str, Any]:
        return {serial: panel.model_dump(mode="json") for serial, panel in self._panels.items()}

    def _restore(self, data: Dict[str, Any]) -> None:
        for payload in data.values():
            panel = Panel.model_validate(payload)
            self._panels[panel.serial] = panel


@lru_cache
def build_default_panel_table(
    name: Optional[str] = None,
    path: Optional[str] = None,
) -> MockPanelTable:
    settings = get_settings()
    table_name = settings.panel_table_name if name is None else name
    table_path = settings.panel_persistence_path if path is None else path
    persistence = Path(table_path) if table_path else None
    return MockPanelTable(name=table_name, persistence_path=persistence)
