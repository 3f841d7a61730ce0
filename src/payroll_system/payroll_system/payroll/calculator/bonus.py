from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ...core.constants import FEMALE_BONUS_TIERS, HALF_DAYS_PER_ABSENCE, MALE_BONUS_TIERS


@dataclass(frozen=True)
class BonusTiers:
    full_attendance: Decimal
    one_absence: Decimal
    two_or_more_absences: Decimal

    @classmethod
    def of(cls, tiers: tuple[Decimal, Decimal, Decimal]) -> "BonusTiers":
        return cls(*tiers)

    def for_absences(self, absences: int) -> Decimal:
        if absences <= 0:
            return self.full_attendance
        if absences == 1:
            return self.one_absence
        return self.two_or_more_absences


MALE_TIERS = BonusTiers.of(MALE_BONUS_TIERS)
FEMALE_TIERS = BonusTiers.of(FEMALE_BONUS_TIERS)


def effective_absences(absent_days: int, half_days: int) -> int:
    """Two half days count as one absence; a lone half day is free."""
    return int(absent_days) + int(half_days) // HALF_DAYS_PER_ABSENCE


def attendance_bonus(
    absent_days: int,
    half_days: int,
    is_male: bool = True,
    *,
    tiers: Optional[BonusTiers] = None,
) -> Decimal:
    tiers = tiers or (MALE_TIERS if is_male else FEMALE_TIERS)
    return tiers.for_absences(effective_absences(absent_days, half_days))
