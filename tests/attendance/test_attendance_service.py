from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.payroll_system.payroll_system.attendance.service import AttendanceService
from src.payroll_system.payroll_system.core.enums import AttendanceStatus, Gender
from src.payroll_system.payroll_system.core.exceptions import NotFoundError, ValidationError
from src.payroll_system.payroll_system.database.memory_store import MemoryStore
from src.payroll_system.payroll_system.workers.memory_worker_repository import InMemoryWorkerRepository
from src.payroll_system.payroll_system.workers.model import Worker

DAY = date(2025, 1, 2)


def _worker(worker_id: str, *, is_packer=False, is_active=True) -> Worker:
    return Worker(
        worker_id=worker_id,
        name=worker_id.upper(),
        employee_id=f"E-{worker_id}",
        gender=Gender.MALE,
        base_salary=Decimal("31000"),
        is_packer=is_packer,
        is_active=is_active,
    )


@pytest.fixture
def setup():
    store = MemoryStore()
    workers = InMemoryWorkerRepository(store)
    attendance = InMemoryAttendanceRepository(store)
    for w in (_worker("a", is_packer=True), _worker("b", is_packer=True), _worker("c"), _worker("d", is_packer=True, is_active=False)):
        workers.save(w)
    return AttendanceService(attendance, workers), attendance


def test_mark_replaces_existing_record(setup):
    service, attendance = setup
    service.mark("a", DAY, status="present", overtime="yes", late_minutes="15")
    service.mark("a", DAY, status="half_day", overtime="no")

    records = attendance.list_attendance(worker_id="a")
    assert len(records) == 1
    assert records[0].status == AttendanceStatus.HALF_DAY
    assert records[0].overtime is False
    assert records[0].late_minutes == 0


def test_mark_parses_loose_values(setup):
    service, _ = setup

    record = service.mark("a", DAY, status="PRESENT", overtime=1, late_minutes="20")

    assert record.status == AttendanceStatus.PRESENT
    assert record.overtime is True
    assert record.late_minutes == 20
    assert record.record_id == "attendance-a-2025-01-02"


def test_mark_rejects_unknown_status(setup):
    service, _ = setup

    with pytest.raises(ValidationError):
        service.mark("a", DAY, status="sick")


def test_mark_unknown_worker(setup):
    service, _ = setup

    with pytest.raises(NotFoundError):
        service.mark("zzz", DAY, status="present")


def test_toggle_overtime_creates_then_flips(setup):
    service, _ = setup

    created = service.toggle_overtime("b", DAY)
    assert created.status == AttendanceStatus.PRESENT
    assert created.overtime is True
    assert service.has_overtime("b", DAY) is True

    flipped = service.toggle_overtime("b", DAY)
    assert flipped.overtime is False
    assert service.has_overtime("b", DAY) is False


def test_present_packers_treat_missing_mark_as_present(setup):
    service, _ = setup
    service.mark("b", DAY, status="half_day")

    packers = service.present_packers(DAY)

    assert [w.worker_id for w in packers] == ["a"]


def test_monthly_summary_counts_window_only(setup):
    service, _ = setup
    service.mark("a", date(2025, 1, 2), status="present", overtime="yes", late_minutes=10)
    service.mark("a", date(2025, 1, 3), status="half_day")
    service.mark("a", date(2025, 1, 4), status="absent", overtime="yes")
    service.mark("a", date(2025, 1, 20), status="absent")

    summary = service.monthly_summary("a", month=0, year=2025, as_of=date(2025, 1, 10))

    assert summary.present_days == 1
    assert summary.half_days == 1
    assert summary.absent_days == 1
    assert summary.unrecorded_days == 7
    assert summary.overtime_days == 1
    assert summary.late_minutes == 10


def test_mark_rejects_non_finite_late_minutes(setup):
    service, attendance = setup

    with pytest.raises(ValidationError):
        service.mark("a", DAY, status="present", late_minutes=float("inf"))
    assert attendance.list_attendance(worker_id="a") == []
