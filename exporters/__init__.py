"""
Export formats for the OPT Tracker (currently iCalendar reminders).
"""

from .ics import (
    IcsExportError,
    reminder_dates,
    format_ics_date,
    create_unemployment_ics,
    write_ics_file
)

__all__ = [
    "IcsExportError",
    "reminder_dates",
    "format_ics_date",
    "create_unemployment_ics",
    "write_ics_file",
]
