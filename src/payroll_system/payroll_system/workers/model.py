from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import Gender


@dataclass(frozen=True)
class Worker:
    """Domain entity: a worker on the payroll.

    `base_salary` is a monthly salary for salaried workers and a daily wage
    for daily-wage workers; which one applies is decided by the pay policy.
    """

    worker_id: str
    name: str
    employee_id: str
    gender: Gender
    base_salary: Optional[Decimal]
    default_overtime: Optional[bool] = None
    department: Optional[str] = None
    position: Optional[str] = None
    is_packer: bool = False
    is_cleaner: bool = False
    is_active: bool = True
    inactive_date: Optional[date] = None
    advance_current_month: Decimal = Decimal("0")
    advance_last_month: Decimal = Decimal("0")
    advance_deduction: Decimal = Decimal("0")
