from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.parsers import format_overtime_flag
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .mapper import record_from_row, record_id_for
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = "record_id, worker_id, work_date, status, overtime, late_minutes, notes, check_in_time, check_out_time"


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_attendance(
        self,
        *,
        worker_id: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        where = []
        params: list = []
        if worker_id is not None:
            where.append("worker_id=%s")
            params.append(str(worker_id))
        if start_date:
            where.append("work_date>=%s")
            params.append(start_date)
        if end_date:
            where.append("work_date<=%s")
            params.append(end_date)

        sql = f"SELECT {_COLUMNS} FROM attendance_records"
        if where:
            sql += " WHERE " + " AND ".join(where)
        sql += " ORDER BY work_date, worker_id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [record_from_row(r) for r in fetchall(cur)]

    def get_for_worker_and_date(self, worker_id: str, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE worker_id=%s AND work_date=%s",
                (str(worker_id), work_date),
            )
            r = fetchone(cur)
            return record_from_row(r) if r else None

    def upsert(self, record: AttendanceRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    record_id, worker_id, work_date, status, overtime, late_minutes, notes, check_in_time, check_out_time
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    status=VALUES(status), overtime=VALUES(overtime), late_minutes=VALUES(late_minutes),
                    notes=VALUES(notes), check_in_time=VALUES(check_in_time), check_out_time=VALUES(check_out_time)
                """,
                (
                    record.record_id or record_id_for(record.worker_id, record.work_date),
                    record.worker_id,
                    record.work_date,
                    record.status.value,
                    format_overtime_flag(record.overtime),
                    int(record.late_minutes),
                    record.notes,
                    record.check_in_time,
                    record.check_out_time,
                ),
            )

    def delete_for_worker(self, worker_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_records WHERE worker_id=%s", (str(worker_id),))
            return int(cur.rowcount)
