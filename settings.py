from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


_PANEL_TABLE_NAME_ENV = "PANEL_TABLE_NAME"
_PANEL_TABLE_PATH_ENV = "PANEL_PERSISTENCE_PATH"
_READING_TABLE_NAME_ENV = "READING_TABLE_NAME"
_READING_TABLE_PATH_ENV = "READING_PERSISTENCE_PATH"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    panel_table_name: str
    panel_persistence_path: Optional[str]
    reading_table_name: str
    reading_persistence_path: Optional[str]
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_optional_env(name: str, default: Optional[str]) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or None


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        panel_table_name=_read_str_env(_PANEL_TABLE_NAME_ENV, "panels"),
        panel_persistence_path=_read_optional_env(_PANEL_TABLE_PATH_ENV, "./tmp/panels.json"),
        reading_table_name=_read_str_env(_READING_TABLE_NAME_ENV, "hourly_readings"),
        reading_persistence_path=_read_optional_env(
            _READING_TABLE_PATH_ENV, "./tmp/readings.json"
        ),
        log_level=_read_log_level("INFO"),
    )
