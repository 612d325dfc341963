"""
Validation and coercion of untyped request values.

Every accepted value leaves this module in its canonical stored type.
Rejections raise ValidationError naming the offending field.

Dependencies: admin_panel.core.exceptions
System role: Input normalization ahead of any store interaction
"""

import math
import re
from typing import Any

from admin_panel.core.exceptions import ValidationError

RATING_MIN = 0.0
RATING_MAX = 5.0
# Upper bound of the INTEGER columns and identifiers
INT_MAX = 2**31 - 1

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
_DECIMAL_ID = re.compile(r"[+-]?[0-9]+")


def _int_from_digits(text: str) -> int:
    """Convert a signed digit string, clamping anything longer than INT_MAX to just past the range."""
    if len(text.lstrip("+-").lstrip("0")) > len(str(INT_MAX)):
        return -(INT_MAX + 1) if text.startswith("-") else INT_MAX + 1
    return int(text)


def _parse_int(value: Any) -> int | None:
    """Parse an integer the lenient way a form field arrives; None on failure."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        # Leading integer digits only: "3.7" -> 3, "1e3" -> 1
        match = _LEADING_INT.match(value)
        return _int_from_digits(match.group(1)) if match else None
    return None


def require_text(payload: dict[str, Any], field: str) -> str:
    """
    Return a required text field.

    Missing, None, empty and non-string values are rejected. Whitespace is
    kept as sent.

    Raises:
        ValidationError: If the field is absent or not non-empty text
    """
    value = payload.get(field)
    if not value or not isinstance(value, str):
        raise ValidationError(f"{field} is required", field=field)
    return value


def _check_count_range(number: int, field: str) -> int:
    if number < 0:
        raise ValidationError(f"{field} must be a non-negative integer", field=field)
    if number > INT_MAX:
        raise ValidationError(f"{field} must be at most {INT_MAX}", field=field)
    return number


def coerce_count(value: Any, field: str, default: int = 0) -> int:
    """
    Coerce a non-negative count, falling back to `default` when unparseable.

    Raises:
        ValidationError: If the parsed value is negative or too large
    """
    number = _parse_int(value)
    if number is None:
        number = default
    return _check_count_range(number, field)


def require_count(value: Any, field: str) -> int:
    """
    Coerce a count that the operation cannot do without.

    Raises:
        ValidationError: If the value is missing, unparseable, negative or too large
    """
    number = _parse_int(value)
    if number is None:
        raise ValidationError(f"{field} is required and must be a number", field=field)
    return _check_count_range(number, field)


def coerce_rating(value: Any, field: str = "rating") -> float:
    """
    Coerce a rating to a float in [0, 5] with two-digit precision.

    Raises:
        ValidationError: If the value is missing, not finite or out of range
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required", field=field)
    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number", field=field) from None
    if not math.isfinite(number):
        raise ValidationError(f"{field} must be a number", field=field)
    if number < RATING_MIN or number > RATING_MAX:
        raise ValidationError(
            f"{field} must be between {RATING_MIN:g} and {RATING_MAX:g}", field=field
        )
    return round(number, 2)


def parse_identifier(raw: str | int) -> int:
    """
    Parse a path identifier.

    Raises:
        ValidationError: If `raw` is not a decimal integer within the
            identifier column's range
    """
    if isinstance(raw, bool):
        raise ValidationError("Invalid id", field="id")
    if isinstance(raw, int):
        row_id = raw
    else:
        match = _DECIMAL_ID.fullmatch(str(raw).strip())
        if match is None:
            raise ValidationError("Invalid id", field="id")
        row_id = _int_from_digits(match.group(0))
    if abs(row_id) > INT_MAX:
        raise ValidationError("Invalid id", field="id")
    return row_id
