from __future__ import annotations

from ..core.exceptions import ValidationError


def is_blank(value) -> bool:
    return value is None or not str(value).strip()


def require_non_empty(value: str, field_name: str) -> str:
    if is_blank(value):
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_hour(value: int, field_name: str) -> int:
    hour = int(value)
    if hour < 0 or hour > 23:
        raise ValidationError(f"{field_name} must be between 0 and 23")
    return hour
