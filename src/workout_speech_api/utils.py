"""Utility functions."""
from typing import Optional


def to_int(s: Optional[str]) -> Optional[int]:
    """Convert string to int, returning None if conversion fails."""
    try:
        return int(s) if s is not None else None
    except (TypeError, ValueError):
        return None


def to_float(s: Optional[str]) -> Optional[float]:
    """Convert string to float, returning None if conversion fails or is not finite."""
    try:
        value = float(s) if s is not None else None
    except (TypeError, ValueError):
        return None
    if value is not None and value != value:  # NaN
        return None
    if value in (float("inf"), float("-inf")):
        return None
    return value


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into the inclusive range [low, high]."""
    return min(high, max(low, value))
