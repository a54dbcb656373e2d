"""
Result data models for the OPT Tracker.

This module defines the 'Output' of the calculation engine. Results are
derived values: frozen, and rebuilt on every calculation.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from .period import PhaseType


class ComplianceStatus(str, Enum):
    """Overall verdict across all phases."""
    NORMAL = "normal"
    WARNING = "warning"
    VIOLATION = "violation"


class PeriodSummary(BaseModel):
    """Unemployment accounting for a single eligibility period."""
    phase: PhaseType
    used_days: int = Field(ge=0, description="Unemployment days accrued so far")
    remaining_days: int = Field(ge=0, description="Days left before the limit")
    limit_days: int = Field(ge=0, description="Limit applied to this phase")

    # Not capped: goes above 100 once the limit is exceeded
    percentage: float = Field(ge=0, description="used_days as a percentage of limit_days")

    model_config = ConfigDict(frozen=True)


class ComplianceResult(BaseModel):
    """
    Combined verdict for OPT and (optionally) STEM.
    phase2 is None when no STEM period was supplied.
    """
    phase1: PeriodSummary
    phase2: Optional[PeriodSummary] = None
    total_used_days: int = Field(ge=0)
    total_allowed_days: int = Field(ge=0)
    status: ComplianceStatus
    status_message: str

    model_config = ConfigDict(frozen=True, json_schema_extra={
        "example": {
            "phase1": {
                "phase": "OPT",
                "used_days": 45,
                "remaining_days": 45,
                "limit_days": 90,
                "percentage": 50.0
            },
            "phase2": None,
            "total_used_days": 45,
            "total_allowed_days": 90,
            "status": "normal",
            "status_message": "Your unemployment days are within the allowed limit."
        }
    })
