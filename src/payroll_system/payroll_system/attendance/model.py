from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance mark per (worker, date)."""

    worker_id: str
    work_date: date
    status: AttendanceStatus
    overtime: bool = False
    late_minutes: int = 0
    notes: Optional[str] = None
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    record_id: Optional[str] = None


@dataclass(frozen=True)
class MonthlyAttendanceSummary:
    """Read-model for the attendance screen (counts inside the processed window)."""

    worker_id: str
    present_days: int
    half_days: int
    absent_days: int
    unrecorded_days: int
    overtime_days: int
    late_minutes: int
