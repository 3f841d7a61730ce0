from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_non_negative(value, field_name: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not amount.is_finite() or amount < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return amount


def require_month_index(value) -> int:
    try:
        month = int(value)
    except (TypeError, ValueError):
        raise ValidationError("month must be an integer 0-11") from None
    if month < 0 or month > 11:
        raise ValidationError("month must be an integer 0-11")
    return month


def require_year(value) -> int:
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValidationError("year must be a four-digit integer") from None
    if year < 1000 or year > 9999:
        raise ValidationError("year must be a four-digit integer")
    return year
