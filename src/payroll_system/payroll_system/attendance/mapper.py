from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import coerce_date
from ..common.parsers import format_overtime_flag, parse_late_minutes, parse_overtime_flag, parse_status
from .model import AttendanceRecord


def record_id_for(worker_id: str, work_date) -> str:
    return f"attendance-{worker_id}-{coerce_date(work_date).isoformat()}"


def record_from_row(r: Mapping[str, Any]) -> AttendanceRecord:
    work_date = coerce_date(r["work_date"])
    return AttendanceRecord(
        worker_id=str(r["worker_id"]),
        work_date=work_date,
        status=parse_status(r["status"]),
        overtime=parse_overtime_flag(r.get("overtime")),
        late_minutes=parse_late_minutes(r.get("late_minutes")),
        notes=r.get("notes"),
        check_in_time=r.get("check_in_time"),
        check_out_time=r.get("check_out_time"),
        record_id=str(r.get("record_id") or record_id_for(r["worker_id"], work_date)),
    )


def record_to_row(rec: AttendanceRecord) -> dict[str, Any]:
    return {
        "record_id": rec.record_id or record_id_for(rec.worker_id, rec.work_date),
        "worker_id": rec.worker_id,
        "work_date": rec.work_date.isoformat(),
        "status": rec.status.value,
        "overtime": format_overtime_flag(rec.overtime),
        "late_minutes": rec.late_minutes,
        "notes": rec.notes,
        "check_in_time": rec.check_in_time,
        "check_out_time": rec.check_out_time,
    }
