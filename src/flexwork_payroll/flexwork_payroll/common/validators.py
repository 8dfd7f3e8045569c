from __future__ import annotations

import math
from decimal import Decimal
from numbers import Real

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date
from .rounding import round_half_up


def require_finite_non_negative(value, field_name: str):
    """Decimal values are returned as-is, other reals as float."""
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValidationError(f"{field_name} must be a number")
    finite = value.is_finite() if isinstance(value, Decimal) else math.isfinite(value)
    if not finite:
        raise ValidationError(f"{field_name} must be finite")
    if value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value if isinstance(value, Decimal) else float(value)


def require_flag(value, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value


def require_minutes(value, field_name: str):
    """Numeric duration from a payload; absent/null means 0. Sign is left to the extractor."""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise ValidationError(f"{field_name} must be a finite number of minutes")
    return value


def require_iso_date(value, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    try:
        parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be an ISO date (YYYY-MM-DD)") from None
    return value.strip()


def non_negative_minutes(value) -> int:
    """Clamp a break/training duration to whole minutes (half-up), not below 0."""
    try:
        number = float(value or 0)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number < 0:
        return 0
    return round_half_up(number)
