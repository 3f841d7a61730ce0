from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from ..common.money import ZERO


@dataclass(frozen=True)
class SalaryCalculationResult:
    """Salary breakdown for one worker and one month.

    `base_salary` already contains `overtime_compensation`; the overtime part is
    repeated on its own for display.
    """

    base_salary: Decimal
    bonus: Decimal
    overtime_compensation: Decimal
    total_salary: Decimal
    has_bonus: bool

    @classmethod
    def zero(cls) -> "SalaryCalculationResult":
        return cls(base_salary=ZERO, bonus=ZERO, overtime_compensation=ZERO, total_salary=ZERO, has_bonus=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "base_salary": float(self.base_salary),
            "bonus": float(self.bonus),
            "overtime_compensation": float(self.overtime_compensation),
            "total_salary": float(self.total_salary),
            "has_bonus": self.has_bonus,
        }


@dataclass(frozen=True)
class PayrollLine:
    worker_id: str
    name: str
    employee_id: str
    gender: str
    is_active: bool
    salary: SalaryCalculationResult
    advance_deduction: Decimal
    net_payable: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {
            "worker_id": self.worker_id,
            "name": self.name,
            "employee_id": self.employee_id,
            "gender": self.gender,
            "is_active": self.is_active,
            **self.salary.to_dict(),
            "advance_deduction": float(self.advance_deduction),
            "net_payable": float(self.net_payable),
        }


@dataclass(frozen=True)
class PayrollSheet:
    month: int
    year: int
    lines: list[PayrollLine] = field(default_factory=list)

    @property
    def total_salary(self) -> Decimal:
        return sum((line.salary.total_salary for line in self.lines), ZERO)

    @property
    def total_bonus(self) -> Decimal:
        return sum((line.salary.bonus for line in self.lines), ZERO)

    @property
    def total_net_payable(self) -> Decimal:
        return sum((line.net_payable for line in self.lines), ZERO)

    def to_dict(self) -> dict[str, Any]:
        return {
            "month": self.month,
            "year": self.year,
            "lines": [line.to_dict() for line in self.lines],
            "totals": {
                "total_salary": float(self.total_salary),
                "total_bonus": float(self.total_bonus),
                "total_net_payable": float(self.total_net_payable),
            },
        }
