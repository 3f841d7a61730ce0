"""Shared helpers for the JSON controllers."""

from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request

from .datetime_utils import parse_iso_date, today_local
from ..core.exceptions import ConfigurationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_endpoint(view):
    """Translate domain errors into JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except NotFoundError as e:
            return jsonify({"success": False, "message": str(e)}), 404
        except ConfigurationError as e:
            logger.warning("Configuration error in %s: %s", request.path, e)
            return jsonify({"success": False, "message": str(e)}), 500

    return wrapper


def json_body() -> dict:
    return request.get_json(silent=True) or {}


def date_param(value, *, default_today: bool = True):
    if not value:
        if default_today:
            return today_local()
        raise ValidationError("date is required")
    try:
        return parse_iso_date(str(value))
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None
