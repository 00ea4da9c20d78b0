from __future__ import annotations
import json
from contextlib import contextmanager
from pathlib import Path
from threading import Lock
from typing import Any, Dict, Iterator, Optional


class MockTable:
    """Lock-guarded in-memory table with optional JSON file persistence.

    Subclasses own their index and translate it to and from a JSON-ready
    mapping through ``_snapshot`` and ``_restore``. Every mutation goes
    through ``_writing()`` so the file always mirrors memory.
    """

    def __init__(self, name: str, persistence_path: Optional[Path] = None) -> None:
        self.name = name
        self.persistence_path = persistence_path
        self._lock = Lock()
        if persistence_path:
            persistence_path.parent.mkdir(parents=True, exist_ok=True)
            self._load_from_disk()

    @contextmanager
    def _reading(self) -> Iterator[None]:
        with self._lock:
            yield

    @contextmanager
    def _writing(self) -> Iterator[None]:
        with self._lock:
            yield
            self._persist()

    def _snapshot(self) -> Dict[str, Any]:
        raise NotImplementedError

    def _restore(self, data: Dict[str, Any]) -> None:
        raise NotImplementedError

    def _persist(self) -> None:
        if not self.persistence_path:
            return
        self.persistence_path.write_text(json.dumps(self._snapshot(), indent=2, sort_keys=True))

    def _load_from_disk(self) -> None:
        if not self.persistence_path or not self.persistence_path.exists():
            return

        try:
            raw = self.persistence_path.read_text() or "{}"
            data = json.loads(raw)
        except (OSError, json.JSONDecodeError):
            data = {}

        self._restore(data)
