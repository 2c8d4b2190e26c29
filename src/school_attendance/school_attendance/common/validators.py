from __future__ import annotations

import re
from typing import Any, Callable, Iterable, Mapping, Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required", {field_name: "required"})
    return value.strip()


def require_email(value: Optional[str], field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if not _EMAIL_RE.match(value):
        raise ValidationError(f"{field_name} is not a valid email address", {field_name: "invalid email"})
    return value


def require_int_in_range(value: Optional[str], field_name: str, min_value: int, max_value: int) -> int:
    """Parse an integer typed into a text input and check it is within [min_value, max_value]."""
    raw = require_non_empty(None if value is None else str(value), field_name)
    try:
        number = int(raw)
    except ValueError:
        raise ValidationError(f"{field_name} must be a whole number", {field_name: "not a number"})
    if number < min_value or number > max_value:
        raise ValidationError(
            f"{field_name} must be between {min_value} and {max_value}",
            {field_name: f"out of range {min_value}-{max_value}"},
        )
    return number


def require_choice(value: Optional[str], field_name: str, choices: Iterable[str]) -> str:
    value = require_non_empty(value, field_name)
    allowed = list(choices)
    if value not in allowed:
        raise ValidationError(f"{field_name} must be one of {', '.join(allowed)}", {field_name: "invalid choice"})
    return value


def optional_int(value: Optional[str]) -> Optional[int]:
    """Blank or non-positive ids from a <select> mean 'nothing selected'."""
    if value is None or not str(value).strip():
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    return number if number > 0 else None


def validate_all(checks: Mapping[str, Callable[[], Any]]) -> dict:
    """Run every field check and raise one ValidationError listing all bad fields."""
    values: dict = {}
    errors: dict = {}
    for field, check in checks.items():
        try:
            values[field] = check()
        except ValidationError as e:
            errors.update(e.errors or {field: str(e)})
    if errors:
        raise ValidationError("Please correct the highlighted fields", errors)
    return values
