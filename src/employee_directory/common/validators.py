from __future__ import annotations

import re
from typing import Optional

from ..core.constants import DB_INT_MAX, DB_INT_MIN
from ..core.exceptions import ValidationError

# ASCII digits only: int() would also take '1_0' and non-Latin digits.
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(
    value: Optional[str],
    field_name: str,
    *,
    min_value: int = DB_INT_MIN,
    max_value: int = DB_INT_MAX,
) -> int:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required", field=field_name)
    text = str(value).strip()
    if not _INT_RE.fullmatch(text):
        raise ValidationError(f"{field_name} must be an integer", field=field_name)
    number = int(text)
    if number < min_value or number > max_value:
        raise ValidationError(f"{field_name} is out of range", field=field_name)
    return number


def require_non_negative(value: int, field_name: str) -> int:
    if value < 0:
        raise ValidationError(f"{field_name} must be zero or greater", field=field_name)
    return value


def require_positive(value: int, field_name: str) -> int:
    if value < 1:
        raise ValidationError(f"{field_name} must be a positive integer", field=field_name)
    return value
