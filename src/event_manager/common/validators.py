from __future__ import annotations

import re
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required.")
    return str(value).strip()


def require_int(value: Any, field_name: str) -> int:
    """Coerce form/JSON input to int; bools and floats with a fraction are rejected."""
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be a whole number.")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"{field_name} must be a whole number.")
        return int(value)
    text = str(value).strip()
    if not re.fullmatch(r"[+-]?[0-9]+", text):
        raise ValidationError(f"{field_name} must be a whole number.")
    return int(text)


def require_min(value: int, field_name: str, minimum: int) -> int:
    if value < minimum:
        raise ValidationError(f"{field_name} must be at least {minimum}.")
    return value


def require_digits(value: Any, field_name: str, length: int) -> str:
    text = "" if value is None else str(value).strip()
    if not re.fullmatch(rf"[0-9]{{{length}}}", text):
        raise ValidationError(f"{field_name} must be exactly {length} digits.")
    return text
