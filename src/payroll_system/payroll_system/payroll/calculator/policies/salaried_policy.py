from __future__ import annotations

import calendar
from datetime import date
from decimal import Decimal

from ....core.constants import SALARIED_SHIFT_HOURS, WEEKLY_OFF_WEEKDAY
from ....core.enums import PayPolicyKind
from ..base import PayPolicy, PayRates, is_weekly_off
from ..bonus import MALE_TIERS


class SalariedWithPaidOffPolicy(PayPolicy):
    """Monthly salary spread over every calendar day, weekly off day included.

    Overtime is not credited on the weekly off day.
    """

    kind = PayPolicyKind.SALARIED_WITH_PAID_OFF
    bonus_tiers = MALE_TIERS

    def __init__(self, shift_hours: int = SALARIED_SHIFT_HOURS):
        self._shift_hours = Decimal(shift_hours)

    def rates(self, base_salary: Decimal, year: int, month: int) -> PayRates:
        working_days = 0
        off_days = 0
        for week in calendar.Calendar().monthdays2calendar(year, month + 1):
            for day, weekday in week:
                if not day:
                    continue
                if weekday == WEEKLY_OFF_WEEKDAY:
                    off_days += 1
                else:
                    working_days += 1

        daily_rate = base_salary / Decimal(working_days + off_days)
        return PayRates(daily_rate=daily_rate, hourly_rate=daily_rate / self._shift_hours)

    def counts_day(self, day: date) -> bool:
        return True

    def allows_overtime(self, day: date) -> bool:
        return not is_weekly_off(day)
