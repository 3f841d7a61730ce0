from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..common.money import ZERO, round_money
from ..common.parsers import parse_gender, parse_optional_bool
from ..common.validators import require_non_empty, require_non_negative
from ..core.exceptions import ConfigurationError, NotFoundError, ValidationError
from .model import Worker
from .repository import WorkerRepository

logger = logging.getLogger(__name__)


class WorkerService:
    """Use cases around the worker registry (profiles, activity, advances)."""

    def __init__(self, workers: WorkerRepository):
        self._workers = workers

    def get(self, worker_id: str) -> Worker:
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError(f"Worker {worker_id} not found")
        return worker

    def list(self, *, active_only: bool = False) -> Sequence[Worker]:
        return self._workers.list_workers(active_only=active_only)

    def register_worker(
        self,
        *,
        name: str,
        employee_id: str,
        gender,
        base_salary=None,
        default_overtime=None,
        department: Optional[str] = None,
        position: Optional[str] = None,
        is_packer: bool = False,
        is_cleaner: bool = False,
        worker_id: Optional[str] = None,
    ) -> Worker:
        name = require_non_empty(name, "name")
        employee_id = require_non_empty(employee_id, "employee_id")
        try:
            gender = parse_gender(gender)
        except ConfigurationError as e:
            # a bad value typed by a user is an input error, not a data problem
            raise ValidationError(str(e)) from None

        salary = None
        if base_salary not in (None, ""):
            salary = require_non_negative(base_salary, "base_salary")

        if any(w.employee_id == employee_id for w in self._workers.list_workers()):
            raise ValidationError(f"Employee id {employee_id} is already used")

        worker = Worker(
            worker_id=worker_id or str(uuid.uuid4()),
            name=name,
            employee_id=employee_id,
            gender=gender,
            base_salary=salary,
            default_overtime=parse_optional_bool(default_overtime),
            department=department or None,
            position=position or None,
            is_packer=bool(is_packer),
            is_cleaner=bool(is_cleaner),
        )
        self._workers.save(worker)
        logger.info("Registered worker %s (%s)", worker.worker_id, worker.employee_id)
        return worker

    def update_salary(self, worker_id: str, base_salary) -> Worker:
        worker = self.get(worker_id)
        updated = replace(worker, base_salary=require_non_negative(base_salary, "base_salary"))
        self._workers.save(updated)
        logger.info("Updated base salary of worker %s", worker_id)
        return updated

    def set_default_overtime(self, worker_id: str, value) -> Worker:
        updated = replace(self.get(worker_id), default_overtime=parse_optional_bool(value))
        self._workers.save(updated)
        return updated

    def toggle_packer(self, worker_id: str) -> Worker:
        worker = self.get(worker_id)
        updated = replace(worker, is_packer=not worker.is_packer)
        self._workers.save(updated)
        return updated

    def deactivate(self, worker_id: str, *, on_date: date) -> Worker:
        """Mark inactive; salary stops accruing from `on_date`."""
        worker = self.get(worker_id)
        updated = replace(worker, is_active=False, inactive_date=on_date)
        self._workers.save(updated)
        logger.info("Deactivated worker %s from %s", worker_id, on_date.isoformat())
        return updated

    def reactivate(self, worker_id: str) -> Worker:
        updated = replace(self.get(worker_id), is_active=True, inactive_date=None)
        self._workers.save(updated)
        logger.info("Reactivated worker %s", worker_id)
        return updated

    def record_advance(self, worker_id: str, amount) -> Worker:
        amount = require_non_negative(amount, "amount")
        if amount == 0:
            raise ValidationError("amount must be greater than 0")
        worker = self.get(worker_id)
        updated = replace(worker, advance_current_month=round_money(worker.advance_current_month + amount))
        self._workers.save(updated)
        logger.info("Recorded advance of %s for worker %s", amount, worker_id)
        return updated

    def set_advance_deduction(self, worker_id: str, amount) -> Worker:
        amount = require_non_negative(amount, "amount")
        updated = replace(self.get(worker_id), advance_deduction=round_money(amount))
        self._workers.save(updated)
        return updated

    def roll_advances(self) -> int:
        """Month close: this month's advances become last month's."""
        count = 0
        for worker in self._workers.list_workers():
            if worker.advance_current_month == ZERO and worker.advance_last_month == ZERO:
                continue
            self._workers.save(
                replace(worker, advance_last_month=worker.advance_current_month, advance_current_month=Decimal("0"))
            )
            count += 1
        logger.info("Rolled advances for %d workers", count)
        return count

    def delete(self, worker_id: str) -> None:
        if not self._workers.delete_by_id(worker_id):
            raise NotFoundError(f"Worker {worker_id} not found")
        logger.info("Deleted worker %s", worker_id)
