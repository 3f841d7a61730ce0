from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

WORKERS_KEY = "workers"
ATTENDANCE_KEY = "attendance"


class MemoryStore:
    """Key/value fallback store used when no database is configured.

    Rows are kept as plain JSON-friendly dicts. When `path` is given the whole
    store is written back to that file after every mutation.
    """

    def __init__(self, path: Optional[str | Path] = None):
        self._path = Path(path) if path else None
        self.workers: dict[str, dict[str, Any]] = {}
        self.attendance: dict[tuple[str, str], dict[str, Any]] = {}
        if self._path and self._path.exists():
            self._load()

    def _load(self) -> None:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read memory store %s (%s); starting empty", self._path, e)
            return
        for row in data.get(WORKERS_KEY, []):
            if not isinstance(row, dict) or not row.get("worker_id"):
                logger.warning("Skipping worker row without worker_id in %s", self._path)
                continue
            self.workers[str(row["worker_id"])] = row
        for row in data.get(ATTENDANCE_KEY, []):
            if not isinstance(row, dict) or not row.get("worker_id") or not row.get("work_date"):
                logger.warning("Skipping attendance row without worker_id/work_date in %s", self._path)
                continue
            self.attendance[(str(row["worker_id"]), str(row["work_date"]))] = row

    def flush(self) -> None:
        if not self._path:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            WORKERS_KEY: list(self.workers.values()),
            ATTENDANCE_KEY: list(self.attendance.values()),
        }
        self._path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
