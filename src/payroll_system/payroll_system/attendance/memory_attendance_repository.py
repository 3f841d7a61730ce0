from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.memory_store import MemoryStore
from .mapper import record_from_row, record_to_row
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def list_attendance(
        self,
        *,
        worker_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        out = []
        for (wid, iso), row in self._store.attendance.items():
            if worker_id is not None and wid != str(worker_id):
                continue
            if start_date and iso < start_date.isoformat():
                continue
            if end_date and iso > end_date.isoformat():
                continue
            out.append(record_from_row(row))
        out.sort(key=lambda r: (r.work_date, r.worker_id))
        return out

    def get_for_worker_and_date(self, worker_id: str, work_date: date) -> Optional[AttendanceRecord]:
        row = self._store.attendance.get((str(worker_id), work_date.isoformat()))
        return record_from_row(row) if row else None

    def upsert(self, record: AttendanceRecord) -> None:
        self._store.attendance[(record.worker_id, record.work_date.isoformat())] = record_to_row(record)
        self._store.flush()

    def delete_for_worker(self, worker_id: str) -> int:
        keys = [k for k in self._store.attendance if k[0] == str(worker_id)]
        for key in keys:
            del self._store.attendance[key]
        if keys:
            self._store.flush()
        return len(keys)
