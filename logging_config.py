from __future__ import annotations

import logging
import time
from logging.config import dictConfig
from typing import Iterable, Sequence

from settings import get_settings

_CONTEXT_KEYS = (
    "panel_id",
    "reading_id",
    "reading_count",
    "day_count",
    "status",
)

# Application loggers that follow LOG_LEVEL; everything else stays at WARNING.
_APP_LOGGERS = ("app", "services", "datastore")

_configured = False


class ContextualFormatter(logging.Formatter):
    """Append ``key=value`` pairs for known ``extra`` fields to each line."""

    converter = time.gmtime

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: str = "%",
        extra_keys: Iterable[str] | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt, style=style)
        self._extra_keys: Sequence[str] = tuple(extra_keys or _CONTEXT_KEYS)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = " ".join(
            f"{key}={self._render(value)}"
            for key in self._extra_keys
            if (value := getattr(record, key, None)) is not None
        )
        return f"{message} | {context}" if context else message

    @staticmethod
    def _render(value: object) -> str:
        text = str(value)
        return repr(text) if " " in text else text


def configure_logging(level: str | int | None = None) -> None:
    """Configure application-wide logging with contextual formatting."""
    global _configured
    if _configured:
        return

    log_level = level if level is not None else get_settings().log_level

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "contextual": {
                    "()": "logging_config.ContextualFormatter",
                    "fmt": "%(asctime)sZ | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%dT%H:%M:%S",
                    "style": "%",
                    "extra_keys": list(_CONTEXT_KEYS),
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "contextual",
                }
            },
            "loggers": {name: {"level": log_level} for name in _APP_LOGGERS},
            "root": {"handlers": ["default"], "level": "WARNING"},
        }
    )

    _configured = True
