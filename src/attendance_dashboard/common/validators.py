from __future__ import annotations

from collections.abc import Mapping

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_presence_map(value: object, *, max_entries: int) -> dict[str, bool]:
    """Validate a `{employee_id: bool}` payload and return a plain copy."""
    if not isinstance(value, Mapping):
        raise ValidationError("Attendance must be an object mapping employee ids to true/false")
    if len(value) > max_entries:
        raise ValidationError(f"Attendance payload too large ({len(value)} > {max_entries} entries)")

    out: dict[str, bool] = {}
    for key, flag in value.items():
        if not isinstance(key, str) or not key.strip():
            raise ValidationError("Attendance keys must be non-empty employee ids")
        if not isinstance(flag, bool):
            raise ValidationError(f"Attendance value for {key!r} must be true or false")
        out[key] = flag
    return out
