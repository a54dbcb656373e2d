"""
JSON save/load for tracker inputs.

Only user inputs are stored. Results are always recomputed, so a stale
verdict can never be read back from disk.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from models import EligibilityPeriod, EmploymentInterval, PhaseType

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class TrackerDataError(ValueError):
    """A stored record exists but does not describe valid tracker inputs."""


class TrackerData(BaseModel):
    """Everything the user has entered."""
    opt_period: Optional[EligibilityPeriod] = Field(default=None, description="OPT EAD period")
    stem_period: Optional[EligibilityPeriod] = Field(default=None, description="STEM extension EAD period")
    employment: List[EmploymentInterval] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_phases(self):
        if self.opt_period and self.opt_period.phase != PhaseType.OPT:
            raise ValueError("opt_period must have phase 'OPT'")
        if self.stem_period and self.stem_period.phase != PhaseType.STEM:
            raise ValueError("stem_period must have phase 'STEM'")
        return self

    @model_validator(mode='after')
    def validate_unique_ids(self):
        # TrackerState keys jobs by id; a duplicate would silently replace the earlier job
        seen = set()
        for interval in self.employment:
            if interval.id in seen:
                raise ValueError(f"Duplicate employment id: {interval.id}")
            seen.add(interval.id)
        return self

    model_config = ConfigDict(frozen=True)


def to_record(data: TrackerData) -> Dict[str, Any]:
    """Plain JSON-safe dict (dates as ISO strings)."""
    return data.model_dump(mode='json')


def from_record(record: Dict[str, Any]) -> TrackerData:
    """Validate a stored record. Raises TrackerDataError if it is malformed."""
    try:
        return TrackerData.model_validate(record)
    except ValidationError as e:
        raise TrackerDataError(f"Invalid tracker data: {e}") from e


def save_tracker_data(data: TrackerData, path: PathLike) -> None:
    path = Path(path)
    with open(path, 'w') as f:
        json.dump(to_record(data), f, indent=2)
    logger.info(f"Saved {len(data.employment)} employment entries to {path}")


def load_tracker_data(path: PathLike) -> Optional[TrackerData]:
    """
    Load inputs from disk.
    Returns None (and logs why) when the file is missing, unreadable, or invalid.
    """
    path = Path(path)
    try:
        with open(path, 'r') as f:
            record = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError):
        logger.warning(f"Data file {path} not found or not valid JSON.")
        return None

    try:
        data = from_record(record)
    except TrackerDataError as e:
        logger.error(f"Failed to load {path}: {e}")
        return None

    logger.info(f"Loaded {path}: {len(data.employment)} employment entries.")
    return data
