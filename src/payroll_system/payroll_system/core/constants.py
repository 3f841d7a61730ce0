"""Constants and defaults.

Note: Keep pay rules here to avoid magic numbers spread across code.
"""

from decimal import Decimal

# date.weekday(): Monday == 0
WEEKLY_OFF_WEEKDAY = 1

SALARIED_SHIFT_HOURS = 10
DAILY_WAGE_SHIFT_HOURS = 9

OVERTIME_MULTIPLIER = Decimal("2")
OVERTIME_HOURS_PER_DAY = 1
HALF_DAY_FACTOR = Decimal("0.5")

# (0 absences, 1 absence, 2+ absences)
MALE_BONUS_TIERS = (Decimal("1000"), Decimal("500"), Decimal("0"))
FEMALE_BONUS_TIERS = (Decimal("500"), Decimal("250"), Decimal("0"))

HALF_DAYS_PER_ABSENCE = 2
