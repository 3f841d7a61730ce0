from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ...common.money import ZERO
from ...core.constants import HALF_DAY_FACTOR, WEEKLY_OFF_WEEKDAY
from ...core.enums import AttendanceStatus, PayPolicyKind
from ...attendance.model import AttendanceRecord
from .bonus import BonusTiers


@dataclass(frozen=True)
class PayRates:
    daily_rate: Decimal
    hourly_rate: Decimal


@dataclass(frozen=True)
class DailyAccrual:
    """What one calendar day contributes to the month.

    `status` is None for days the policy does not count at all.
    """

    pay: Decimal
    overtime_eligible: bool
    late_minutes: int = 0
    status: Optional[AttendanceStatus] = None
    recorded: bool = False

    @classmethod
    def skipped(cls) -> "DailyAccrual":
        return cls(pay=ZERO, overtime_eligible=False)


def is_weekly_off(day: date) -> bool:
    return day.weekday() == WEEKLY_OFF_WEEKDAY


class PayPolicy(ABC):
    """Pay policy (Strategy Pattern): how a base salary becomes daily pay."""

    kind: PayPolicyKind
    bonus_tiers: BonusTiers

    @abstractmethod
    def rates(self, base_salary: Decimal, year: int, month: int) -> PayRates:
        raise NotImplementedError

    @abstractmethod
    def counts_day(self, day: date) -> bool:
        raise NotImplementedError

    @abstractmethod
    def allows_overtime(self, day: date) -> bool:
        raise NotImplementedError

    def compute_daily_accrual(
        self,
        day: date,
        record: Optional[AttendanceRecord],
        *,
        rates: PayRates,
        default_overtime: bool = False,
    ) -> DailyAccrual:
        if not self.counts_day(day):
            return DailyAccrual.skipped()

        overtime_ok = self.allows_overtime(day)

        # No mark for the day means the worker was present.
        if record is None:
            return DailyAccrual(
                pay=rates.daily_rate,
                overtime_eligible=bool(default_overtime) and overtime_ok,
                status=AttendanceStatus.PRESENT,
            )

        if record.status == AttendanceStatus.ABSENT:
            return DailyAccrual(pay=ZERO, overtime_eligible=False, status=record.status, recorded=True)

        pay = rates.daily_rate
        if record.status == AttendanceStatus.HALF_DAY:
            pay = rates.daily_rate * HALF_DAY_FACTOR

        eligible = bool(record.overtime) and overtime_ok
        return DailyAccrual(
            pay=pay,
            overtime_eligible=eligible,
            late_minutes=int(record.late_minutes or 0) if eligible else 0,
            status=record.status,
            recorded=True,
        )
