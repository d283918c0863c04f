from typing import Optional


def ensure_non_negative(value: Optional[float], field: str) -> float:
    if value is None or float(value) < 0:
        raise ValueError(f"{field} must be >= 0")
    return float(value)


def ensure_rating(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= 5:
        raise ValueError(f"rating must be an integer between 1 and 5, got {value!r}")
    return value
