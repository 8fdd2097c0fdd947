from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.exceptions import ValidationError
from .datetime_utils import try_parse_iso_date


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_non_negative_number(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if number != number or number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_iso_date(value: str, field_name: str) -> str:
    parsed = try_parse_iso_date(value)
    if parsed is None:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD form")
    return parsed.isoformat()


def as_number(value, default: float = 0.0) -> float:
    """Permissive numeric read: missing or junk values become the default."""
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return default if number != number else number


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def as_flag(value, default: bool = True) -> bool:
    """Permissive boolean read: "false", "0" or "no" read as False, junk becomes the default."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "1", "yes", "y", "on"):
            return True
        if text in ("false", "0", "no", "n", "off"):
            return False
    return default
