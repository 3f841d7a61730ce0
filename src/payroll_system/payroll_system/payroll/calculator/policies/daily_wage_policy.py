from __future__ import annotations

from datetime import date
from decimal import Decimal

from ....core.constants import DAILY_WAGE_SHIFT_HOURS
from ....core.enums import PayPolicyKind
from ..base import PayPolicy, PayRates, is_weekly_off
from ..bonus import FEMALE_TIERS


class DailyWageNoPaidOffPolicy(PayPolicy):
    """Base salary is a daily wage; the weekly off day earns nothing."""

    kind = PayPolicyKind.DAILY_WAGE_NO_PAID_OFF
    bonus_tiers = FEMALE_TIERS

    def __init__(self, shift_hours: int = DAILY_WAGE_SHIFT_HOURS):
        self._shift_hours = Decimal(shift_hours)

    def rates(self, base_salary: Decimal, year: int, month: int) -> PayRates:
        return PayRates(daily_rate=base_salary, hourly_rate=base_salary / self._shift_hours)

    def counts_day(self, day: date) -> bool:
        return not is_weekly_off(day)

    def allows_overtime(self, day: date) -> bool:
        return True
