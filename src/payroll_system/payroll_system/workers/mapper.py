"""Row <-> entity mapping shared by the MySQL and in-memory worker stores."""

from __future__ import annotations

from typing import Any, Mapping

from ..common.datetime_utils import coerce_date
from ..common.money import to_decimal
from ..common.parsers import parse_gender, parse_optional_bool
from .model import Worker


def worker_from_row(r: Mapping[str, Any]) -> Worker:
    base_salary = r.get("base_salary")
    inactive_date = r.get("inactive_date")
    return Worker(
        worker_id=str(r["worker_id"]),
        name=str(r["name"]),
        employee_id=str(r.get("employee_id") or ""),
        gender=parse_gender(r["gender"]),
        base_salary=to_decimal(base_salary) if base_salary is not None else None,
        default_overtime=parse_optional_bool(r.get("default_overtime")),
        department=r.get("department"),
        position=r.get("position"),
        is_packer=bool(r.get("is_packer") or False),
        is_cleaner=bool(r.get("is_cleaner") or False),
        is_active=bool(r.get("is_active", True)),
        inactive_date=coerce_date(inactive_date) if inactive_date else None,
        advance_current_month=to_decimal(r.get("advance_current_month")),
        advance_last_month=to_decimal(r.get("advance_last_month")),
        advance_deduction=to_decimal(r.get("advance_deduction")),
    )


def worker_to_row(w: Worker) -> dict[str, Any]:
    """Plain JSON-friendly dict (dates as ISO strings, money as strings)."""
    return {
        "worker_id": w.worker_id,
        "name": w.name,
        "employee_id": w.employee_id,
        "gender": w.gender.value,
        "base_salary": str(w.base_salary) if w.base_salary is not None else None,
        "default_overtime": w.default_overtime,
        "department": w.department,
        "position": w.position,
        "is_packer": w.is_packer,
        "is_cleaner": w.is_cleaner,
        "is_active": w.is_active,
        "inactive_date": w.inactive_date.isoformat() if w.inactive_date else None,
        "advance_current_month": str(w.advance_current_month),
        "advance_last_month": str(w.advance_last_month),
        "advance_deduction": str(w.advance_deduction),
    }
