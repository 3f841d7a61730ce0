"""Parsers for loosely typed values coming from storage or HTTP payloads."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..core.enums import AttendanceStatus, Gender
from ..core.exceptions import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"yes", "true", "1", "y", "on"}
_FALSE_VALUES = {"no", "false", "0", "n", "off", ""}


def parse_overtime_flag(value: Any) -> bool:
    """Accept 'yes'/'no', bools and 0/1."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValidationError(f"Invalid overtime flag: {value!r}")


def format_overtime_flag(value: bool) -> str:
    return "yes" if value else "no"


def parse_optional_bool(value: Any) -> Optional[bool]:
    if value is None or value == "":
        return None
    return parse_overtime_flag(value)


def parse_late_minutes(value: Any, *, strict: bool = False) -> int:
    """Minutes late as a non-negative int.

    Stored rows are read leniently (bad values become 0). With `strict` a bad
    value is a `ValidationError`, for input coming from users.
    """
    if value is None or value == "":
        return 0
    try:
        minutes = int(float(str(value).strip()))
    except (ValueError, OverflowError):
        if strict:
            raise ValidationError(f"Invalid late minutes: {value!r}") from None
        logger.warning("Ignoring unparseable late minutes value %r", value)
        return 0
    return max(minutes, 0)


def parse_status(value: Any) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Invalid attendance status: {value!r}") from None


def parse_gender(value: Any) -> Gender:
    """Stored gender -> enum. Unknown values are a data/config problem, not user input."""
    if isinstance(value, Gender):
        return value
    try:
        return Gender(str(value).strip().lower())
    except ValueError:
        raise ConfigurationError(f"Unsupported gender value: {value!r}") from None
