from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .mapper import worker_from_row
from .model import Worker
from .repository import WorkerRepository

_COLUMNS = """
    worker_id, name, employee_id, gender, base_salary, default_overtime, department, position,
    is_packer, is_cleaner, is_active, inactive_date,
    advance_current_month, advance_last_month, advance_deduction
"""


class MySQLWorkerRepository(WorkerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers WHERE worker_id=%s", (str(worker_id),))
            r = fetchone(cur)
            return worker_from_row(r) if r else None

    def list_workers(self, *, active_only: bool = False) -> Sequence[Worker]:
        sql = f"SELECT {_COLUMNS} FROM workers"
        if active_only:
            sql += " WHERE is_active=1"
        sql += " ORDER BY name"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql)
            return [worker_from_row(r) for r in fetchall(cur)]

    def save(self, worker: Worker) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO workers(
                    worker_id, name, employee_id, gender, base_salary, default_overtime, department, position,
                    is_packer, is_cleaner, is_active, inactive_date,
                    advance_current_month, advance_last_month, advance_deduction
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    name=VALUES(name), employee_id=VALUES(employee_id), gender=VALUES(gender),
                    base_salary=VALUES(base_salary), default_overtime=VALUES(default_overtime),
                    department=VALUES(department), position=VALUES(position),
                    is_packer=VALUES(is_packer), is_cleaner=VALUES(is_cleaner),
                    is_active=VALUES(is_active), inactive_date=VALUES(inactive_date),
                    advance_current_month=VALUES(advance_current_month),
                    advance_last_month=VALUES(advance_last_month),
                    advance_deduction=VALUES(advance_deduction)
                """,
                (
                    worker.worker_id,
                    worker.name,
                    worker.employee_id,
                    worker.gender.value,
                    worker.base_salary,
                    None if worker.default_overtime is None else int(worker.default_overtime),
                    worker.department,
                    worker.position,
                    int(worker.is_packer),
                    int(worker.is_cleaner),
                    int(worker.is_active),
                    worker.inactive_date,
                    worker.advance_current_month,
                    worker.advance_last_month,
                    worker.advance_deduction,
                ),
            )

    def delete_by_id(self, worker_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM workers WHERE worker_id=%s", (str(worker_id),))
            return cur.rowcount > 0
