from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() first so floats like 0.1 keep their printed value
    return Decimal(str(value))


def round_money(value) -> Decimal:
    """Round to 2 decimal places, half-up."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
