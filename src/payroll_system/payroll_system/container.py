from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.exceptions import ConfigurationError
from .database.connection import DatabaseConnection, DBConfig
from .database.memory_store import MemoryStore
from .payroll.calculator.salary_calculator import CalculatorOptions, MonthlySalaryCalculator
from .payroll.service import PayrollService
from .workers.memory_worker_repository import InMemoryWorkerRepository
from .workers.mysql_worker_repository import MySQLWorkerRepository
from .workers.repository import WorkerRepository
from .workers.service import WorkerService

logger = logging.getLogger(__name__)

STORAGE_MYSQL = "mysql"
STORAGE_MEMORY = "memory"


@dataclass(frozen=True)
class Container:
    storage_backend: str

    workers_repo: WorkerRepository
    attendance_repo: AttendanceRepository

    worker_service: WorkerService
    attendance_service: AttendanceService
    payroll_service: PayrollService


def build_container(
    *,
    storage_backend: str = STORAGE_MYSQL,
    db_config: Optional[dict] = None,
    memory_store_path: Optional[str] = None,
    calculator_options: Optional[CalculatorOptions] = None,
    default_overtime: bool = False,
) -> Container:
    backend = (storage_backend or STORAGE_MYSQL).lower()

    if backend == STORAGE_MYSQL and not db_config:
        logger.warning("No DB_CONFIG given; falling back to the in-memory store")
        backend = STORAGE_MEMORY

    if backend == STORAGE_MYSQL:
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        workers_repo = MySQLWorkerRepository(conn)
        attendance_repo = MySQLAttendanceRepository(conn)
    elif backend == STORAGE_MEMORY:
        store = MemoryStore(memory_store_path)
        workers_repo = InMemoryWorkerRepository(store)
        attendance_repo = InMemoryAttendanceRepository(store)
    else:
        raise ConfigurationError(f"Unknown STORAGE_BACKEND: {storage_backend!r}")

    calculator = MonthlySalaryCalculator(options=calculator_options)

    return Container(
        storage_backend=backend,
        workers_repo=workers_repo,
        attendance_repo=attendance_repo,
        worker_service=WorkerService(workers_repo),
        attendance_service=AttendanceService(attendance_repo, workers_repo),
        payroll_service=PayrollService(
            workers_repo,
            attendance_repo,
            calculator=calculator,
            default_overtime=default_overtime,
        ),
    )
