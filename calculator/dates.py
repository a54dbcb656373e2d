"""
Calendar-day helpers shared by every stage of the calculation.

All comparisons and arithmetic in the engine happen on plain ``date``
objects. Anything carrying a time of day is truncated here first.
"""

from datetime import date, datetime, timezone
from typing import Optional, Union

DateLike = Union[date, datetime]


def normalize_date(value: DateLike) -> date:
    """Truncate a date or datetime to its calendar day (aware datetimes in UTC)."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def days_between(start: date, end: date) -> int:
    """Inclusive calendar-day count. Callers normalize both arguments first."""
    return (end - start).days + 1


def reference_date(override: Optional[DateLike] = None) -> date:
    """
    The 'today' used to cap in-progress periods and ongoing employment.
    Defaults to the current UTC day, the same frame normalize_date uses.
    """
    if override is not None:
        return normalize_date(override)
    return datetime.now(timezone.utc).date()
