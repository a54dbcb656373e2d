"""
Input data models for the OPT Tracker.

This module defines the two things a user enters:
1. Eligibility periods (the OPT EAD and the optional STEM extension)
2. Employment intervals (jobs, possibly still ongoing)
"""

from enum import Enum
from typing import Optional
from uuid import uuid4
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict
from datetime import date, datetime

from calculator.dates import normalize_date
from .validation import validate_eligibility_period, validate_employment_interval


class PhaseType(str, Enum):
    """Which work-authorization phase a period belongs to."""
    OPT = "OPT"
    STEM = "STEM"


class EligibilityPeriod(BaseModel):
    """
    Validity window of an employment authorization document.
    Both dates are inclusive.
    """
    phase: PhaseType = Field(description="OPT or STEM")
    start_date: date = Field(description="First day of EAD validity")
    end_date: date = Field(description="Last day of EAD validity")

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def truncate_datetimes(cls, v):
        if isinstance(v, datetime):
            return normalize_date(v)
        return v

    @model_validator(mode='after')
    def validate_dates(self):
        error = validate_eligibility_period(self)
        if error:
            raise ValueError(error)
        return self

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "phase": "OPT",
            "start_date": "2023-06-01",
            "end_date": "2024-05-31"
        }
    })


class EmploymentInterval(BaseModel):
    """
    A single job. A missing end date means the job is ongoing and is
    treated as running through the reference date.
    """
    id: str = Field(default_factory=lambda: uuid4().hex, description="Unique identifier")
    employer_name: str = Field(description="Employer label shown to the user")
    start_date: date = Field(description="First day employed (inclusive)")
    end_date: Optional[date] = Field(
        default=None,
        description="Last day employed (inclusive); None while the job is ongoing"
    )

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def truncate_datetimes(cls, v):
        if isinstance(v, datetime):
            return normalize_date(v)
        return v

    @model_validator(mode='after')
    def validate_interval(self):
        error = validate_employment_interval(self)
        if error:
            raise ValueError(error)
        return self

    @property
    def is_ongoing(self) -> bool:
        return self.end_date is None

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "id": "job_acme_01",
            "employer_name": "Acme Robotics",
            "start_date": "2023-07-15",
            "end_date": None
        }
    })
