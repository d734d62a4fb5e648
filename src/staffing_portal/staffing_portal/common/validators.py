from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_positive_int(value: Any, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number


def optional_str(value: Any) -> Optional[str]:
    """Blank strings from forms become None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def to_float(value: Any, default: float = 0.0) -> float:
    """Lenient number parsing for values that arrive as form strings."""
    if value is None or value == "":
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def to_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def leading_int(value: Any) -> Optional[int]:
    """Integer prefix of free-form input: "10+" is 10, "2.5" is 2, "and above" is None."""
    if value is None:
        return None
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None
