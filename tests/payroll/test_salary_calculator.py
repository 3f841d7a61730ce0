from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.payroll_system.payroll_system.attendance.model import AttendanceRecord
from src.payroll_system.payroll_system.core.enums import AttendanceStatus, Gender
from src.payroll_system.payroll_system.core.exceptions import ConfigurationError
from src.payroll_system.payroll_system.payroll.calculator.salary_calculator import (
    CalculatorOptions,
    MonthlySalaryCalculator,
    calculate_monthly_salary,
)
from src.payroll_system.payroll_system.payroll.model import SalaryCalculationResult
from src.payroll_system.payroll_system.workers.model import Worker

# January 2025: 31 days, starts on a Wednesday, Tuesdays on 7/14/21/28.
JAN = 0
YEAR = 2025
AFTER_JAN = date(2025, 3, 1)


def make_worker(gender=Gender.MALE, base_salary="31000", **kwargs) -> Worker:
    return Worker(
        worker_id=kwargs.pop("worker_id", "w1"),
        name="A",
        employee_id="E1",
        gender=gender,
        base_salary=Decimal(base_salary) if base_salary is not None else None,
        **kwargs,
    )


def rec(day: int, status=AttendanceStatus.PRESENT, *, overtime=False, late=0, worker_id="w1", month=1):
    return AttendanceRecord(
        worker_id=worker_id,
        work_date=date(YEAR, month, day),
        status=status,
        overtime=overtime,
        late_minutes=late,
    )


def calc(worker, records=(), default_overtime=None, *, as_of=AFTER_JAN, options=None, month=JAN):
    return MonthlySalaryCalculator(options=options).calculate(
        worker, list(records), month, YEAR, default_overtime, as_of=as_of
    )


@pytest.mark.parametrize("base_salary", [None, "0", "-100"])
def test_missing_or_non_positive_salary_gives_zero_result(base_salary):
    worker = make_worker(base_salary=base_salary)
    result = calc(worker, [rec(2, overtime=True)], default_overtime=True)

    assert result == SalaryCalculationResult.zero()
    assert result.has_bonus is False


def test_male_full_month_spreads_salary_over_every_day():
    result = calc(make_worker(base_salary="30000"))

    assert result.base_salary == Decimal("30000.00")
    assert result.overtime_compensation == Decimal("0.00")
    assert result.bonus == Decimal("1000.00")
    assert result.total_salary == Decimal("31000.00")
    assert result.has_bonus is True


def test_male_is_paid_for_tuesday_but_gets_no_overtime_on_it():
    result = calc(make_worker(), [rec(7, overtime=True)])

    assert result.base_salary == Decimal("31000.00")
    assert result.overtime_compensation == Decimal("0.00")


def test_male_absence_and_half_day_reduce_pay_and_bonus():
    result = calc(make_worker(), [rec(2, AttendanceStatus.ABSENT), rec(3, AttendanceStatus.HALF_DAY)])

    # daily rate is 31000 / 31 = 1000
    assert result.base_salary == Decimal("29500.00")
    assert result.bonus == Decimal("500.00")
    assert result.total_salary == Decimal("30000.00")


def test_two_absences_remove_bonus():
    result = calc(make_worker(), [rec(2, AttendanceStatus.ABSENT), rec(3, AttendanceStatus.ABSENT)])

    assert result.bonus == Decimal("0.00")
    assert result.has_bonus is False
    assert result.total_salary == result.base_salary


def test_female_full_month_skips_tuesdays():
    result = calc(make_worker(Gender.FEMALE, "900"))

    # 27 non-Tuesdays at the daily wage
    assert result.base_salary == Decimal("24300.00")
    assert result.bonus == Decimal("500.00")
    assert result.total_salary == Decimal("24800.00")


def test_female_tuesday_record_contributes_nothing_even_with_overtime():
    worker = make_worker(Gender.FEMALE, "900")

    with_record = calc(worker, [rec(7, overtime=True, late=0)])
    without_record = calc(worker)

    assert with_record == without_record
    assert with_record.overtime_compensation == Decimal("0.00")


def test_female_tuesday_absence_does_not_count_against_bonus():
    result = calc(make_worker(Gender.FEMALE, "900"), [rec(7, AttendanceStatus.ABSENT), rec(14, AttendanceStatus.ABSENT)])

    assert result.bonus == Decimal("500.00")


@pytest.mark.parametrize(
    "gender, base, expected_bonus",
    [
        (Gender.MALE, "31000", Decimal("500.00")),
        (Gender.FEMALE, "900", Decimal("250.00")),
    ],
)
def test_two_half_days_fall_into_one_absence_tier(gender, base, expected_bonus):
    result = calc(make_worker(gender, base), [rec(2, AttendanceStatus.HALF_DAY), rec(3, AttendanceStatus.HALF_DAY)])

    assert result.bonus == expected_bonus


def test_single_half_day_keeps_full_bonus():
    result = calc(make_worker(), [rec(2, AttendanceStatus.HALF_DAY)])

    assert result.bonus == Decimal("1000.00")


def test_late_minutes_beyond_overtime_floor_at_zero():
    result = calc(make_worker(base_salary="30000"), [rec(2, overtime=True, late=90)])

    assert result.overtime_compensation == Decimal("0.00")
    assert result.base_salary == Decimal("30000.00")


def test_late_minutes_partially_reduce_overtime():
    result = calc(make_worker(base_salary="30000"), [rec(2, overtime=True, late=30)])

    # half an hour at double the hourly rate (30000 / 31 / 10)
    assert result.overtime_compensation == Decimal("96.77")
    assert result.base_salary == Decimal("30096.77")
    assert result.total_salary == Decimal("31096.77")


def test_overtime_is_allowed_on_half_days():
    result = calc(make_worker(), [rec(2, AttendanceStatus.HALF_DAY, overtime=True)])

    # hourly rate 100, one overtime hour at double rate
    assert result.overtime_compensation == Decimal("200.00")
    assert result.base_salary == Decimal("30700.00")


def test_late_minutes_only_count_on_overtime_days():
    result = calc(make_worker(), [rec(2, overtime=False, late=120)], default_overtime=True)

    # 27 non-Tuesdays minus the explicit no-overtime day
    assert result.overtime_compensation == Decimal("5200.00")
    assert result.base_salary == Decimal("36200.00")


def test_female_overtime_uses_nine_hour_rate():
    result = calc(make_worker(Gender.FEMALE, "900"), [rec(2, overtime=True, late=30)])

    assert result.overtime_compensation == Decimal("100.00")
    assert result.base_salary == Decimal("24400.00")
    assert result.total_salary == Decimal("24900.00")


def test_missing_record_behaves_like_present_with_default_overtime():
    worker = make_worker(base_salary="28750.50")
    explicit = [rec(day, overtime=True) for day in range(1, 32)]

    assert calc(worker, explicit) == calc(worker, [], default_overtime=True)
    assert calc(worker, [rec(day) for day in range(1, 32)]) == calc(worker, [], default_overtime=False)


def test_default_overtime_falls_back_to_worker_setting():
    worker = make_worker(default_overtime=True)

    assert calc(worker).overtime_compensation == Decimal("5400.00")
    assert calc(worker, default_overtime=False).overtime_compensation == Decimal("0.00")


def test_current_month_only_counts_days_up_to_as_of():
    as_of = date(2025, 1, 10)

    male = calc(make_worker(), as_of=as_of)
    female = calc(make_worker(Gender.FEMALE, "900"), as_of=as_of)

    assert male.base_salary == Decimal("10000.00")
    # Jan 7 is a Tuesday
    assert female.base_salary == Decimal("8100.00")


def test_future_month_gives_zero_result():
    result = calc(make_worker(), as_of=date(2025, 1, 10), month=1)

    assert result == SalaryCalculationResult.zero()


def test_accrual_stops_on_inactive_date():
    worker = make_worker(is_active=False, inactive_date=date(2025, 1, 11))

    assert calc(worker).base_salary == Decimal("10000.00")


def test_worker_inactive_before_month_gets_nothing():
    worker = make_worker(is_active=False, inactive_date=date(2024, 12, 15))

    assert calc(worker) == SalaryCalculationResult.zero()


def test_records_for_other_workers_and_months_are_ignored():
    records = [
        rec(2, AttendanceStatus.ABSENT, worker_id="w2"),
        rec(3, AttendanceStatus.ABSENT, month=2),
        AttendanceRecord(worker_id="w1", work_date=date(2024, 12, 31), status=AttendanceStatus.ABSENT),
    ]

    assert calc(make_worker(), records) == calc(make_worker())


def test_feature_flags_switch_off_bonus_overtime_and_late_deduction():
    worker = make_worker()
    records = [rec(2, overtime=True, late=90)]

    no_bonus = calc(worker, records, options=CalculatorOptions(include_bonus=False))
    no_late = calc(worker, records, options=CalculatorOptions(include_late_deduction=False))
    no_overtime = calc(worker, records, default_overtime=True, options=CalculatorOptions(include_overtime=False))

    assert no_bonus.bonus == Decimal("0.00")
    assert no_bonus.has_bonus is False
    assert no_late.overtime_compensation == Decimal("200.00")
    assert no_late.base_salary == Decimal("31200.00")
    assert no_overtime.overtime_compensation == Decimal("0.00")
    assert no_overtime.base_salary == Decimal("31000.00")


def test_unknown_gender_is_a_configuration_error():
    worker = make_worker(gender="other")

    with pytest.raises(ConfigurationError):
        calc(worker)


def test_invalid_month_degrades_to_zero():
    assert calc(make_worker(), month=12) == SalaryCalculationResult.zero()


def test_calculation_is_repeatable():
    worker = make_worker(Gender.FEMALE, "733.33")
    records = [rec(2, overtime=True, late=17), rec(9, AttendanceStatus.HALF_DAY), rec(20, AttendanceStatus.ABSENT)]

    first = calculate_monthly_salary(worker, records, JAN, YEAR, True, as_of=AFTER_JAN)
    second = calculate_monthly_salary(worker, records, JAN, YEAR, True, as_of=AFTER_JAN)

    assert first == second


@pytest.mark.parametrize("gender, base", [(Gender.MALE, "12345.67"), (Gender.FEMALE, "777.77")])
def test_money_fields_have_two_decimal_places(gender, base):
    records = [rec(2, overtime=True, late=13), rec(3, AttendanceStatus.HALF_DAY, overtime=True, late=7)]
    result = calc(make_worker(gender, base), records, default_overtime=True)

    for value in (result.base_salary, result.bonus, result.overtime_compensation, result.total_salary):
        assert value.as_tuple().exponent == -2
    assert result.total_salary == result.base_salary + result.bonus


def test_accepts_records_in_any_order():
    records = [rec(day, AttendanceStatus.HALF_DAY if day % 3 else AttendanceStatus.PRESENT) for day in range(1, 32)]
    shuffled = records[::2] + records[1::2]

    assert calc(make_worker(), records) == calc(make_worker(), shuffled)
