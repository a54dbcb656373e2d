"""
The OPT/STEM Compliance Evaluator.

This is the entry point of the calculation engine. It runs the
clamp -> merge -> account pipeline once per eligibility period and folds the
results into a single verdict:
1. OPT is measured against its own 90-day limit.
2. STEM gets whatever is left of the combined 150-day ceiling.
3. The combined usage decides normal / warning / violation.
"""

import logging
from typing import Iterable, Optional, Tuple

from models import (
    ComplianceResult,
    ComplianceStatus,
    EligibilityPeriod,
    EmploymentInterval,
    PeriodSummary,
)
from .accounting import summarize_period
from .dates import DateLike, reference_date as resolve_reference_date

logger = logging.getLogger(__name__)

# Regulatory limits (days). exporters.ics derives its reminder dates from these.
OPT_UNEMPLOYMENT_LIMIT = 90
TOTAL_UNEMPLOYMENT_LIMIT_WITH_STEM = 150

# Share of the allowance at which the user gets warned
WARNING_THRESHOLD = 0.80

VIOLATION_MESSAGE = (
    "You have exceeded the allowed unemployment days. You may be out of status. "
    "Please consult your international student office immediately."
)
WARNING_MESSAGE = (
    "You are approaching the unemployment limit. Please find employment soon to maintain status."
)
NORMAL_MESSAGE = "Your unemployment days are within the allowed limit."


def determine_status(
    total_used_days: int,
    total_allowed_days: int,
    warning_threshold: float = WARNING_THRESHOLD
) -> Tuple[ComplianceStatus, str]:
    """Map combined usage to a status and the message shown to the user."""
    if total_used_days > total_allowed_days:
        return ComplianceStatus.VIOLATION, VIOLATION_MESSAGE

    ratio = total_used_days / total_allowed_days if total_allowed_days else 0.0
    if ratio >= warning_threshold:
        return ComplianceStatus.WARNING, WARNING_MESSAGE

    return ComplianceStatus.NORMAL, NORMAL_MESSAGE


class ComplianceEvaluator:
    """
    Stateless evaluator. Limits live on the instance so a different
    regulatory regime can be modelled without touching the pipeline.
    """

    def __init__(
        self,
        opt_limit: int = OPT_UNEMPLOYMENT_LIMIT,
        combined_limit: int = TOTAL_UNEMPLOYMENT_LIMIT_WITH_STEM,
        warning_threshold: float = WARNING_THRESHOLD
    ):
        self.opt_limit = opt_limit
        self.combined_limit = combined_limit
        self.warning_threshold = warning_threshold

    def evaluate(
        self,
        opt_period: Optional[EligibilityPeriod],
        stem_period: Optional[EligibilityPeriod],
        employment: Iterable[EmploymentInterval],
        reference_date: Optional[DateLike] = None
    ) -> Optional[ComplianceResult]:
        """
        Compute the compliance verdict.
        Returns None when there is no OPT period (nothing to measure yet).
        """
        if opt_period is None:
            return None

        reference = resolve_reference_date(reference_date)
        # Snapshot so a generator argument can be walked once per phase
        intervals = list(employment)

        phase1 = summarize_period(intervals, opt_period, self.opt_limit, reference)

        phase2: Optional[PeriodSummary] = None
        total_used = phase1.used_days
        total_allowed = self.opt_limit

        if stem_period is not None:
            # STEM allowance is what OPT left of the combined ceiling
            stem_limit = max(0, self.combined_limit - phase1.used_days)
            phase2 = summarize_period(intervals, stem_period, stem_limit, reference)
            total_used = phase1.used_days + phase2.used_days
            total_allowed = self.combined_limit

        status, message = determine_status(total_used, total_allowed, self.warning_threshold)

        logger.info(
            f"Compliance as of {reference}: {total_used}/{total_allowed} days used -> {status.value}"
        )

        return ComplianceResult(
            phase1=phase1,
            phase2=phase2,
            total_used_days=total_used,
            total_allowed_days=total_allowed,
            status=status,
            status_message=message
        )


_default_evaluator = ComplianceEvaluator()


def evaluate_compliance(
    opt_period: Optional[EligibilityPeriod],
    stem_period: Optional[EligibilityPeriod],
    employment: Iterable[EmploymentInterval],
    reference_date: Optional[DateLike] = None
) -> Optional[ComplianceResult]:
    """Evaluate with the standard 90/150-day limits."""
    return _default_evaluator.evaluate(opt_period, stem_period, employment, reference_date)
