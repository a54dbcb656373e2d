"""
Tracker State Management.

This module acts as the 'Memory' of the tracker between user edits.
It holds:
1. The OPT period and the optional STEM period.
2. The employment list (keyed by interval id).
3. The latest ComplianceResult, recomputed after every change.

The engine itself stays pure; this class just re-invokes it.
"""

import logging
from datetime import date as date_type
from typing import Dict, List, Optional

from models import ComplianceResult, EligibilityPeriod, EmploymentInterval
from persistence import TrackerData
from .engine import ComplianceEvaluator

logger = logging.getLogger(__name__)


class TrackerState:
    """
    Mutable container for user inputs.
    Every mutation triggers a fresh evaluation.
    """

    def __init__(
        self,
        opt_period: Optional[EligibilityPeriod] = None,
        stem_period: Optional[EligibilityPeriod] = None,
        employment: Optional[List[EmploymentInterval]] = None,
        reference_date: Optional[date_type] = None,
        evaluator: Optional[ComplianceEvaluator] = None
    ):
        self.opt_period = opt_period
        self.stem_period = stem_period
        self.employment: Dict[str, EmploymentInterval] = {}
        for interval in employment or []:
            self.employment[interval.id] = interval

        # None = follow the real calendar day
        self.reference_date = reference_date
        self.evaluator = evaluator or ComplianceEvaluator()

        self.result: Optional[ComplianceResult] = None
        self.recalculate()

    # --- Mutations ---

    def set_opt_period(self, period: Optional[EligibilityPeriod]) -> None:
        self.opt_period = period
        self.recalculate()

    def set_stem_period(self, period: Optional[EligibilityPeriod]) -> None:
        self.stem_period = period
        self.recalculate()

    def add_employment(self, interval: EmploymentInterval) -> None:
        """Add a job. An existing entry with the same id is replaced."""
        self.employment[interval.id] = interval
        self.recalculate()

    def update_employment(self, interval: EmploymentInterval) -> None:
        """Replace an existing job, matched by id."""
        if interval.id not in self.employment:
            raise KeyError(f"Unknown employment interval: {interval.id}")
        self.employment[interval.id] = interval
        self.recalculate()

    def remove_employment(self, interval_id: str) -> bool:
        """Drop a job. Returns False if the id was not present."""
        if self.employment.pop(interval_id, None) is None:
            logger.warning(f"Tried to remove unknown employment interval {interval_id}")
            return False
        self.recalculate()
        return True

    def clear(self) -> None:
        """Reset all inputs."""
        self.opt_period = None
        self.stem_period = None
        self.employment.clear()
        self.recalculate()

    # --- Evaluation ---

    def get_employment(self) -> List[EmploymentInterval]:
        """Jobs sorted by start date, for display."""
        return sorted(self.employment.values(), key=lambda i: i.start_date)

    def recalculate(self) -> Optional[ComplianceResult]:
        """Re-run the evaluator on the current inputs (also useful when the day rolls over)."""
        self.result = self.evaluator.evaluate(
            self.opt_period,
            self.stem_period,
            list(self.employment.values()),
            self.reference_date
        )
        return self.result

    # --- Persistence bridge ---

    def to_data(self) -> TrackerData:
        """Snapshot of the inputs (the result is never stored)."""
        return TrackerData(
            opt_period=self.opt_period,
            stem_period=self.stem_period,
            employment=self.get_employment()
        )

    @classmethod
    def from_data(cls, data: TrackerData, **kwargs) -> "TrackerState":
        return cls(
            opt_period=data.opt_period,
            stem_period=data.stem_period,
            employment=list(data.employment),
            **kwargs
        )
