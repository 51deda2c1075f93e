"""Parsing helpers for identifiers and dates arriving as raw strings."""
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from study_tracker.core.errors import ValidationError

DATE_FORMAT = "%Y-%m-%d"


def parse_uuid(value: str, label: str = "ID") -> UUID:
    try:
        return UUID(str(value))
    except (ValueError, TypeError):
        raise ValidationError(f"Invalid {label}")


def parse_optional_uuid(value: Optional[str], label: str = "ID") -> Optional[UUID]:
    """Empty strings are treated the same as a missing reference."""
    if value is None or value == "":
        return None
    return parse_uuid(value, label)


def parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (ValueError, TypeError):
        raise ValidationError("Invalid date format, expected YYYY-MM-DD")


def normalize_pagination(limit: Optional[int], offset: Optional[int], default_limit: int = 50) -> tuple[int, int]:
    """Out-of-range values fall back to the defaults instead of failing."""
    if limit is None or limit < 1:
        limit = default_limit
    if offset is None or offset < 0:
        offset = 0
    return limit, offset
