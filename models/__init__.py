"""
Data models package for the OPT Tracker.

This package exports the three pieces of the data architecture:
1. Inputs (EligibilityPeriod, EmploymentInterval)
2. Outputs (PeriodSummary, ComplianceResult, ComplianceStatus)
3. Form validation (validate_employment_interval, validate_eligibility_period)
"""

from .period import (
    PhaseType,
    EligibilityPeriod,
    EmploymentInterval
)

from .summary import (
    ComplianceStatus,
    PeriodSummary,
    ComplianceResult
)

from .validation import (
    validate_employment_interval,
    validate_eligibility_period
)

__all__ = [
    # --- Input Models ---
    "PhaseType",
    "EligibilityPeriod",
    "EmploymentInterval",

    # --- Output Models ---
    "ComplianceStatus",
    "PeriodSummary",
    "ComplianceResult",

    # --- Validation ---
    "validate_employment_interval",
    "validate_eligibility_period",
]
