from __future__ import annotations

from typing import Iterable, Tuple, Union

from ..core.constants import WINDOW_BITS
from ..core.exceptions import ValidationError


def require_glyph(value: str, field_name: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValidationError(f"{field_name} must be a single character, got {value!r}")
    return value


def require_window(value: int, field_name: str) -> int:
    try:
        days = int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} is not an integer: {value!r}") from e
    if days < 1 or days > WINDOW_BITS:
        raise ValidationError(f"{field_name} must be between 1 and {WINDOW_BITS}, got {days}")
    return days


def require_windows(values: Union[str, Iterable[int]], field_name: str) -> Tuple[int, ...]:
    """Accept a sequence of days or a comma-separated string such as ``"7,30"``."""
    if isinstance(values, str):
        values = [v for v in values.split(",") if v.strip()]
    windows = tuple(require_window(v, field_name) for v in values)
    if not windows:
        raise ValidationError(f"{field_name} must not be empty")
    return windows


def require_positive(value: int, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{field_name} is not an integer: {value!r}") from e
    if number < 1:
        raise ValidationError(f"{field_name} must be at least 1")
    return number
