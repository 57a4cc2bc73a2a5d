"""
Field validation helpers.

Structural checks shared by the lifecycle services. Each helper either
returns the normalized value or raises ValidationError naming the field.

Dependencies: chaseplus_backend.core.exceptions
System role: Content field validation
"""

import datetime as dt
import math
from collections.abc import Iterable
from typing import Any

from chaseplus_backend.core.exceptions import ValidationError


def is_provided(value: Any) -> bool:
    """True unless value is None or a blank string."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def require_text(value: Any, field: str) -> str:
    """
    Require a non-blank string.

    Args:
        value: Raw value
        field: Field name reported on failure

    Returns:
        str: Stripped value

    Raises:
        ValidationError: If value is missing, blank or not a string
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required", field=field)
    return value.strip()


def optional_text(value: Any) -> str | None:
    """Strip a string, mapping None and blank to None."""
    if not is_provided(value):
        return None
    return str(value).strip()


def require_non_empty_list(items: Iterable[Any] | None, field: str) -> list[str]:
    """
    Require a list with at least one non-blank string.

    Blank entries are dropped before the emptiness check; order is kept.

    Args:
        items: Raw list
        field: Field name reported on failure

    Returns:
        list[str]: Stripped, non-blank entries

    Raises:
        ValidationError: If the list is missing, not a list of strings, or empty
    """
    if items is None or isinstance(items, (str, bytes)):
        raise ValidationError(f"At least one {field} entry is required", field=field)

    cleaned: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise ValidationError(f"{field} entries must be strings", field=field)
        if item.strip():
            cleaned.append(item.strip())

    if not cleaned:
        raise ValidationError(f"At least one {field} entry is required", field=field)
    return cleaned


def _to_number(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number", field=field)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number", field=field)
    if not math.isfinite(number):
        raise ValidationError(f"{field} must be a number", field=field)
    return number


def require_price(value: Any, field: str = "price") -> float:
    """
    Require a non-negative number.

    Raises:
        ValidationError: If missing, not numeric or negative
    """
    if not is_provided(value):
        raise ValidationError(f"{field} is required", field=field)
    number = _to_number(value, field)
    if number < 0:
        raise ValidationError(f"{field} cannot be negative", field=field)
    return number


def optional_price(value: Any, field: str = "offer_price") -> float | None:
    """Parse an optional non-negative number; None and blank map to None."""
    if not is_provided(value):
        return None
    return require_price(value, field)


def require_date(value: Any, field: str = "date") -> dt.date:
    """
    Require a date, accepting date/datetime objects or ISO-8601 strings.

    Raises:
        ValidationError: If missing or unparseable
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    text = require_text(value, field)
    try:
        # Accepts both bare dates and full timestamps.
        return dt.datetime.fromisoformat(text).date()
    except ValueError:
        raise ValidationError(f"{field} must be an ISO date (YYYY-MM-DD)", field=field)
