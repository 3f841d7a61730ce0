from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """Worker gender as stored in the worker registry."""

    MALE = "male"
    FEMALE = "female"


class AttendanceStatus(str, Enum):
    """Daily attendance status stored per (worker, date)."""

    PRESENT = "present"
    ABSENT = "absent"
    HALF_DAY = "half_day"


class PayPolicyKind(str, Enum):
    """How a worker's base salary turns into daily pay."""

    SALARIED_WITH_PAID_OFF = "salaried_with_paid_off"
    DAILY_WAGE_NO_PAID_OFF = "daily_wage_no_paid_off"
