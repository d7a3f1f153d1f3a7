"""Validation helpers shared by request schemas."""

from datetime import date


def require_not_blank(value: str, field_name: str) -> str:
    """Reject strings that are empty or whitespace only."""
    if not value or not value.strip():
        raise ValueError(f"{field_name} cannot be empty")
    return value


def optional_not_blank(value: str | None) -> str | None:
    """Map empty or whitespace-only optional strings to None."""
    if value is None or not value.strip():
        return None
    return value


def require_not_in_future(value: date, field_name: str) -> date:
    """Reject dates after today (local calendar date at validation time)."""
    if value > date.today():
        raise ValueError(f"{field_name} cannot be in the future")
    return value

# Primary keys are 32-bit INTEGER columns on PostgreSQL; ids beyond this cannot exist.
MAX_RECORD_ID = 2_147_483_647
