"""
Local storage for tracker inputs.

Periods and employment are serialized to a plain JSON record and
validated again on the way back in.
"""

from .store import (
    TrackerData,
    TrackerDataError,
    to_record,
    from_record,
    save_tracker_data,
    load_tracker_data
)

__all__ = [
    "TrackerData",
    "TrackerDataError",
    "to_record",
    "from_record",
    "save_tracker_data",
    "load_tracker_data",
]
