"""Input validators shared by the engine and its callers."""
import math
from typing import Any
from core.errors import ValidationError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def require_positive_int(value: Any, field: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"must be an integer, got {value!r}", field)
    if value <= 0:
        raise ValidationError(f"must be greater than 0, got {value}", field)
    return value


def require_non_blank(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("must be a non-empty string", field)
    return value


def require_latitude(value: Any, field: str = "latitude") -> float:
    if not _is_number(value) or not -90.0 <= value <= 90.0:
        raise ValidationError(f"must be within [-90, 90], got {value!r}", field)
    return float(value)


def require_longitude(value: Any, field: str = "longitude") -> float:
    if not _is_number(value) or not -180.0 <= value <= 180.0:
        raise ValidationError(f"must be within [-180, 180], got {value!r}", field)
    return float(value)


def require_positive_radius(value: Any, field: str = "radius_km") -> float:
    if not _is_number(value) or math.isnan(value) or value <= 0:
        raise ValidationError(f"must be a positive number of kilometres, got {value!r}", field)
    return float(value)


def require_rating(value: Any, field: str = "rating", low: float = 0.0, high: float = 5.0) -> float:
    """Check a rating lies within [low, high]; user-submitted ratings use low=1."""
    if not _is_number(value) or not low <= value <= high:
        raise ValidationError(f"must be within [{low:g}, {high:g}], got {value!r}", field)
    return float(value)


def require_non_negative(value: Any, field: str) -> float:
    if not _is_number(value) or math.isnan(value) or value < 0:
        raise ValidationError(f"must be a non-negative number, got {value!r}", field)
    return value


def require_one_of(value: Any, choices, field: str) -> str:
    if value not in choices:
        raise ValidationError(f"must be one of {', '.join(choices)}, got {value!r}", field)
    return value
