"""
Form-level validation for periods and employment records.

These run before data reaches the calculator. Each returns ``None`` when the
record is acceptable, otherwise a message suitable for showing next to the
offending field. Records may be model instances or plain mappings (raw form
values), so drafts can be checked before a model is ever built. Raw values
may be dates, datetimes or date strings ("2024-01-05", "2024-1-5").
"""

from datetime import date, datetime
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from calculator.dates import normalize_date

_DATETIME_ADAPTER = TypeAdapter(datetime)


def _field(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def _coerce_date(value: Any) -> Optional[date]:
    """Calendar day for a raw form value, or None if it cannot be read as one."""
    if isinstance(value, date):
        return normalize_date(value)
    if isinstance(value, str):
        # Form inputs may drop zero padding
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError:
            pass
    try:
        return normalize_date(_DATETIME_ADAPTER.validate_python(value))
    except ValidationError:
        return None


def validate_employment_interval(record: Any) -> Optional[str]:
    """Check employer name, start date, and end-after-start ordering."""
    employer_name = _field(record, "employer_name")
    if not employer_name or not str(employer_name).strip():
        return "Employer name is required"

    start_date = _field(record, "start_date")
    if not start_date:
        return "Start date is required"
    start = _coerce_date(start_date)
    if start is None:
        return "Start date is not a valid date"

    end_date = _field(record, "end_date")
    if end_date:
        end = _coerce_date(end_date)
        if end is None:
            return "End date is not a valid date"
        if end < start:
            return "End date must be after start date"

    return None


def validate_eligibility_period(record: Any) -> Optional[str]:
    """Both dates are mandatory for an EAD period."""
    start_date = _field(record, "start_date")
    if not start_date:
        return "Start date is required"

    end_date = _field(record, "end_date")
    if not end_date:
        return "End date is required"

    start = _coerce_date(start_date)
    if start is None:
        return "Start date is not a valid date"
    end = _coerce_date(end_date)
    if end is None:
        return "End date is not a valid date"

    if end < start:
        return "End date must be after start date"

    return None
