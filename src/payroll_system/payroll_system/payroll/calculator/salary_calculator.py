from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, Optional

from ...attendance.model import AttendanceRecord
from ...common.datetime_utils import iter_days, month_bounds, today_local
from ...common.money import ZERO, round_money
from ...core.constants import OVERTIME_HOURS_PER_DAY, OVERTIME_MULTIPLIER
from ...core.enums import AttendanceStatus
from ...workers.model import Worker
from ..model import SalaryCalculationResult
from .bonus import effective_absences
from .factory import PayPolicyFactory

logger = logging.getLogger(__name__)

MINUTES_PER_HOUR = Decimal(60)


@dataclass(frozen=True)
class CalculatorOptions:
    include_bonus: bool = True
    include_overtime: bool = True
    include_late_deduction: bool = True


def processing_window(
    year: int,
    month: int,
    *,
    as_of: date,
    inactive_date: Optional[date] = None,
) -> Optional[tuple[date, date]]:
    """Days of the month that have accrued salary as of `as_of`.

    The current month runs up to `as_of` inclusive, a past month runs to its
    last day, a future month has no window. Accrual stops the day before the
    worker's inactive date.
    """

    first, last = month_bounds(year, month)
    if first > as_of:
        return None

    end = min(last, as_of)
    if inactive_date is not None:
        end = min(end, inactive_date - timedelta(days=1))
    if end < first:
        return None
    return first, end


class MonthlySalaryCalculator:
    """Computes one worker's salary for a month from attendance marks.

    Pure: reads its inputs, never touches storage or the clock (unless
    `as_of` is omitted, in which case today is used).
    """

    def __init__(
        self,
        *,
        options: Optional[CalculatorOptions] = None,
        policy_factory: Optional[PayPolicyFactory] = None,
    ):
        self._options = options or CalculatorOptions()
        self._policies = policy_factory or PayPolicyFactory()

    def calculate(
        self,
        worker: Worker,
        attendance_records: Iterable[AttendanceRecord],
        month: int,
        year: int,
        default_overtime: Optional[bool] = None,
        *,
        as_of: Optional[date] = None,
    ) -> SalaryCalculationResult:
        base_salary = worker.base_salary
        if base_salary is None or base_salary <= 0:
            return SalaryCalculationResult.zero()

        if not 0 <= int(month) <= 11 or not 1 <= int(year) <= 9999:
            logger.warning("Ignoring salary request for invalid month/year %r/%r", month, year)
            return SalaryCalculationResult.zero()

        policy = self._policies.for_worker(worker)

        window = processing_window(year, month, as_of=as_of or today_local(), inactive_date=worker.inactive_date)
        if window is None:
            logger.debug("No accrual window for worker %s in %d-%02d", worker.worker_id, year, month + 1)
            return SalaryCalculationResult.zero()
        start, end = window

        if default_overtime is None:
            default_overtime = worker.default_overtime
        default_overtime = default_overtime is True

        first, last = month_bounds(year, month)
        by_date: dict[date, AttendanceRecord] = {}
        for record in attendance_records:
            if record.worker_id == worker.worker_id and first <= record.work_date <= last:
                by_date[record.work_date] = record

        rates = policy.rates(Decimal(base_salary), year, month)
        logger.debug(
            "Salary for worker %s: policy=%s window=%s..%s daily_rate=%s",
            worker.worker_id,
            policy.kind.value,
            start,
            end,
            rates.daily_rate,
        )

        attendance_pay = ZERO
        overtime_hours = 0
        late_minutes = 0
        absent_days = 0
        half_days = 0

        for day in iter_days(start, end):
            accrual = policy.compute_daily_accrual(
                day,
                by_date.get(day),
                rates=rates,
                default_overtime=default_overtime,
            )
            if accrual.status is None:
                continue

            attendance_pay += accrual.pay
            if accrual.status == AttendanceStatus.ABSENT:
                absent_days += 1
            elif accrual.status == AttendanceStatus.HALF_DAY:
                half_days += 1

            if accrual.overtime_eligible:
                overtime_hours += OVERTIME_HOURS_PER_DAY
                late_minutes += accrual.late_minutes

        overtime_pay = ZERO
        if self._options.include_overtime:
            deduction = Decimal(late_minutes) / MINUTES_PER_HOUR if self._options.include_late_deduction else ZERO
            effective_hours = max(ZERO, Decimal(overtime_hours) - deduction)
            overtime_pay = effective_hours * rates.hourly_rate * OVERTIME_MULTIPLIER

        bonus = ZERO
        if self._options.include_bonus:
            bonus = policy.bonus_tiers.for_absences(effective_absences(absent_days, half_days))

        base_result = round_money(attendance_pay + overtime_pay)
        bonus = round_money(bonus)
        return SalaryCalculationResult(
            base_salary=base_result,
            bonus=bonus,
            overtime_compensation=round_money(overtime_pay),
            total_salary=round_money(base_result + bonus),
            has_bonus=bonus > 0,
        )


def calculate_monthly_salary(
    worker: Worker,
    attendance_records: Iterable[AttendanceRecord],
    month: int,
    year: int,
    default_overtime: Optional[bool] = None,
    *,
    as_of: Optional[date] = None,
    options: Optional[CalculatorOptions] = None,
) -> SalaryCalculationResult:
    """Function form of `MonthlySalaryCalculator.calculate` (month is zero-based)."""
    return MonthlySalaryCalculator(options=options).calculate(
        worker,
        attendance_records,
        month,
        year,
        default_overtime,
        as_of=as_of,
    )
