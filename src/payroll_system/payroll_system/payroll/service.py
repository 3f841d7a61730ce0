from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, today_local
from ..common.money import ZERO, round_money
from ..common.validators import require_month_index, require_year
from ..core.exceptions import NotFoundError
from ..workers.model import Worker
from ..workers.repository import WorkerRepository
from .calculator.salary_calculator import MonthlySalaryCalculator
from .model import PayrollLine, PayrollSheet, SalaryCalculationResult

logger = logging.getLogger(__name__)


class PayrollService:
    """Loads workers and attendance, then runs the salary calculator per worker."""

    def __init__(
        self,
        workers: WorkerRepository,
        attendance: AttendanceRepository,
        *,
        calculator: Optional[MonthlySalaryCalculator] = None,
        default_overtime: bool = False,
    ):
        self._workers = workers
        self._attendance = attendance
        self._calculator = calculator or MonthlySalaryCalculator()
        self._default_overtime = bool(default_overtime)

    def _default_overtime_for(self, worker: Worker) -> bool:
        if worker.default_overtime is None:
            return self._default_overtime
        return worker.default_overtime

    def salary_for_worker(
        self,
        worker_id: str,
        *,
        month: int,
        year: int,
        as_of: Optional[date] = None,
    ) -> SalaryCalculationResult:
        month = require_month_index(month)
        year = require_year(year)
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError(f"Worker {worker_id} not found")

        first, last = month_bounds(year, month)
        records = self._attendance.list_attendance(worker_id=worker.worker_id, start_date=first, end_date=last)
        return self._calculator.calculate(
            worker,
            records,
            month,
            year,
            self._default_overtime_for(worker),
            as_of=as_of or today_local(),
        )

    def build_monthly_payroll(
        self,
        *,
        month: int,
        year: int,
        as_of: Optional[date] = None,
        include_inactive: bool = False,
    ) -> PayrollSheet:
        month = require_month_index(month)
        year = require_year(year)
        as_of = as_of or today_local()
        first, last = month_bounds(year, month)

        workers = self._workers.list_workers(active_only=False)
        if not include_inactive:
            # inactive workers still get paid for the days before they left
            workers = [w for w in workers if w.is_active or (w.inactive_date and w.inactive_date > first)]

        records = self._attendance.list_attendance(start_date=first, end_date=last)

        lines = []
        for worker in workers:
            salary = self._calculator.calculate(
                worker,
                records,
                month,
                year,
                self._default_overtime_for(worker),
                as_of=as_of,
            )
            deduction = round_money(worker.advance_deduction)
            net = max(ZERO, round_money(salary.total_salary - deduction))
            lines.append(
                PayrollLine(
                    worker_id=worker.worker_id,
                    name=worker.name,
                    employee_id=worker.employee_id,
                    gender=worker.gender.value,
                    is_active=worker.is_active,
                    salary=salary,
                    advance_deduction=deduction,
                    net_payable=net,
                )
            )

        sheet = PayrollSheet(month=month, year=year, lines=lines)
        logger.info(
            "Built payroll for %d-%02d: %d workers, total %s",
            year,
            month + 1,
            len(lines),
            sheet.total_salary,
        )
        return sheet
