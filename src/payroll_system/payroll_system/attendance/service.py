from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import iter_days
from ..common.parsers import parse_late_minutes, parse_overtime_flag, parse_status
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError
from ..payroll.calculator.salary_calculator import processing_window
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from .mapper import record_id_for
from .model import AttendanceRecord, MonthlyAttendanceSummary
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, workers: WorkerRepository):
        self._attendance = attendance
        self._workers = workers

    def _require_worker(self, worker_id: str) -> Worker:
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError(f"Worker {worker_id} not found")
        return worker

    def mark(
        self,
        worker_id: str,
        work_date: date,
        *,
        status,
        overtime=False,
        late_minutes=0,
        notes: Optional[str] = None,
        check_in_time: Optional[str] = None,
        check_out_time: Optional[str] = None,
    ) -> AttendanceRecord:
        """Create or replace the mark for (worker, date)."""
        worker = self._require_worker(worker_id)
        record = AttendanceRecord(
            worker_id=worker.worker_id,
            work_date=work_date,
            status=parse_status(status),
            overtime=parse_overtime_flag(overtime),
            late_minutes=parse_late_minutes(late_minutes, strict=True),
            notes=notes or None,
            check_in_time=check_in_time or None,
            check_out_time=check_out_time or None,
            record_id=record_id_for(worker.worker_id, work_date),
        )
        self._attendance.upsert(record)
        logger.info("Marked %s %s as %s", worker.worker_id, work_date.isoformat(), record.status.value)
        return record

    def toggle_overtime(self, worker_id: str, work_date: date) -> AttendanceRecord:
        existing = self._attendance.get_for_worker_and_date(worker_id, work_date)
        if existing:
            record = replace(existing, overtime=not existing.overtime)
        else:
            worker = self._require_worker(worker_id)
            record = AttendanceRecord(
                worker_id=worker.worker_id,
                work_date=work_date,
                status=AttendanceStatus.PRESENT,
                overtime=True,
                record_id=record_id_for(worker.worker_id, work_date),
            )
        self._attendance.upsert(record)
        logger.info("Overtime for %s on %s is now %s", worker_id, work_date.isoformat(), record.overtime)
        return record

    def has_overtime(self, worker_id: str, work_date: date) -> bool:
        record = self._attendance.get_for_worker_and_date(worker_id, work_date)
        return bool(record and record.overtime)

    def attendance_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return self._attendance.list_attendance(start_date=work_date, end_date=work_date)

    def present_packers(self, work_date: date) -> list[Worker]:
        """Active packers that are present on `work_date` (no mark counts as present)."""
        marks = {r.worker_id: r for r in self.attendance_for_date(work_date)}
        out = []
        for worker in self._workers.list_workers(active_only=True):
            if not worker.is_packer:
                continue
            record = marks.get(worker.worker_id)
            if record is None or record.status == AttendanceStatus.PRESENT:
                out.append(worker)
        return out

    def monthly_summary(self, worker_id: str, *, month: int, year: int, as_of: date) -> MonthlyAttendanceSummary:
        worker = self._require_worker(worker_id)
        window = processing_window(year, month, as_of=as_of, inactive_date=worker.inactive_date)
        present = half = absent = unrecorded = overtime = late = 0
        if window:
            start, end = window
            marks = {
                r.work_date: r
                for r in self._attendance.list_attendance(worker_id=worker.worker_id, start_date=start, end_date=end)
            }
            for day in iter_days(start, end):
                record = marks.get(day)
                if record is None:
                    unrecorded += 1
                    continue
                if record.status == AttendanceStatus.PRESENT:
                    present += 1
                elif record.status == AttendanceStatus.HALF_DAY:
                    half += 1
                else:
                    absent += 1
                if record.overtime and record.status != AttendanceStatus.ABSENT:
                    overtime += 1
                    late += record.late_minutes

        return MonthlyAttendanceSummary(
            worker_id=worker.worker_id,
            present_days=present,
            half_days=half,
            absent_days=absent,
            unrecorded_days=unrecorded,
            overtime_days=overtime,
            late_minutes=late,
        )
