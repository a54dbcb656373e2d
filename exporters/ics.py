"""
iCalendar (.ics) export of unemployment-limit reminders.

The reminder dates are fixed offsets from the OPT start date: the last day
on which 90 (resp. 150) consecutive unemployed days could still be within
the limit. They use the same constants as the compliance evaluator.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union
from uuid import uuid4

from models import EligibilityPeriod
from calculator.engine import OPT_UNEMPLOYMENT_LIMIT, TOTAL_UNEMPLOYMENT_LIMIT_WITH_STEM

logger = logging.getLogger(__name__)

PRODUCT_ID = "-//OPT Tracker//EN"


class IcsExportError(ValueError):
    """A reminder date could not be written in iCalendar form."""


def reminder_dates(opt_period: EligibilityPeriod) -> Tuple[date, date]:
    """(OPT 90-day deadline, combined 150-day deadline) counted from the OPT start."""
    start = opt_period.start_date
    return (
        start + timedelta(days=OPT_UNEMPLOYMENT_LIMIT - 1),
        start + timedelta(days=TOTAL_UNEMPLOYMENT_LIMIT_WITH_STEM - 1),
    )


def format_ics_date(value: Union[date, datetime]) -> str:
    """Render as a UTC iCalendar timestamp, e.g. 20240829T000000Z."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
    elif isinstance(value, date):
        value = datetime.combine(value, time(0, 0))
    else:
        raise IcsExportError(f"Invalid date for ICS event: {value!r}")
    return value.strftime("%Y%m%dT%H%M%SZ")


def _build_event(
    summary: str,
    day: date,
    description: str,
    stamp: datetime,
    uid_factory: Callable[[], str]
) -> List[str]:
    return [
        "BEGIN:VEVENT",
        f"UID:{uid_factory()}",
        f"DTSTAMP:{format_ics_date(stamp)}",
        f"DTSTART:{format_ics_date(day)}",
        f"DTEND:{format_ics_date(day + timedelta(days=1))}",
        f"SUMMARY:{summary}",
        f"DESCRIPTION:{description}",
        "END:VEVENT",
    ]


def create_unemployment_ics(
    opt_period: Optional[EligibilityPeriod],
    stem_period: Optional[EligibilityPeriod],
    now: Optional[datetime] = None,
    uid_factory: Callable[[], str] = lambda: str(uuid4())
) -> Optional[str]:
    """
    Build the calendar text. Returns None without an OPT period.
    `now` and `uid_factory` exist so output can be pinned in tests.
    """
    if opt_period is None:
        return None

    stamp = now or datetime.now(timezone.utc)
    opt_deadline, total_deadline = reminder_dates(opt_period)

    events: List[str] = []
    events += _build_event(
        f"OPT {OPT_UNEMPLOYMENT_LIMIT}-day unemployment limit",
        opt_deadline,
        f"Reminder: You must not exceed {OPT_UNEMPLOYMENT_LIMIT} days of unemployment during OPT.",
        stamp, uid_factory
    )
    events += _build_event(
        f"STEM {TOTAL_UNEMPLOYMENT_LIMIT_WITH_STEM}-day unemployment limit",
        total_deadline,
        f"Reminder: OPT + STEM combined unemployment must stay under "
        f"{TOTAL_UNEMPLOYMENT_LIMIT_WITH_STEM} days.",
        stamp, uid_factory
    )

    if stem_period is not None:
        events += _build_event(
            "STEM period ends",
            stem_period.end_date,
            "End of STEM EAD validity.",
            stamp, uid_factory
        )

    return "\r\n".join([
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODUCT_ID}",
        *events,
        "END:VCALENDAR",
    ])


def write_ics_file(content: str, path: Union[str, Path]) -> Path:
    path = Path(path)
    # newline='' keeps the CRLF line endings intact
    with open(path, 'w', newline='') as f:
        f.write(content)
    logger.info(f"Wrote calendar reminders to {path}")
    return path
