from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_attendance(
        self,
        *,
        worker_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_worker_and_date(self, worker_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: AttendanceRecord) -> None:
        """Insert or replace the record for (worker_id, work_date)."""

        raise NotImplementedError

    def delete_for_worker(self, worker_id: str) -> int:
        raise NotImplementedError
