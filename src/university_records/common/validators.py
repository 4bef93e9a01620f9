from __future__ import annotations

from ..core.exceptions import InvalidArgumentError, OutOfRangeError


def require_positive(value: float, field_name: str) -> float:
    if value is None or value <= 0:
        raise InvalidArgumentError(f"{field_name} must be positive")
    return value


def require_non_negative(value: int, field_name: str) -> int:
    if value is None or value < 0:
        raise OutOfRangeError(f"{field_name} must not be negative")
    return value


def require_in_range(value: int, field_name: str, low: int, high: int) -> int:
    if value is None or value < low or value > high:
        raise OutOfRangeError(f"{field_name} must be between {low} and {high}")
    return value
