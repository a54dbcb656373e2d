"""
Per-period unemployment accounting.

Turns the employment list into used/remaining days for one EAD period.
Inputs are assumed validated (see models.validation); nothing here raises.
"""

import logging
from datetime import date as date_type
from typing import Iterable

from models import EligibilityPeriod, EmploymentInterval, PeriodSummary
from .dates import days_between, normalize_date
from .spans import clamp_span, merge_spans

logger = logging.getLogger(__name__)


def count_employed_days(
    intervals: Iterable[EmploymentInterval],
    period: EligibilityPeriod,
    reference: date_type
) -> int:
    """Total distinct days inside the period covered by at least one job."""
    clamped = []
    for interval in intervals:
        span = clamp_span(interval, period, reference)
        if span is not None:
            clamped.append(span)

    return sum(days_between(span.start, span.end) for span in merge_spans(clamped))


def summarize_period(
    intervals: Iterable[EmploymentInterval],
    period: EligibilityPeriod,
    limit_days: int,
    reference: date_type
) -> PeriodSummary:
    """
    Compute used/remaining unemployment days for one period.

    A period still in progress is only counted up to the reference date.
    A period that has not started yet has accrued nothing.
    """
    period_start = normalize_date(period.start_date)
    effective_end = min(normalize_date(period.end_date), reference)

    if effective_end < period_start:
        logger.debug(f"{period.phase.value} period starts {period_start}, after {reference}; nothing accrued")
        return PeriodSummary(
            phase=period.phase,
            used_days=0,
            remaining_days=limit_days,
            limit_days=limit_days,
            percentage=0.0
        )

    # Clamp against the elapsed part only, so future days never count as employed
    window = period.model_copy(update={"start_date": period_start, "end_date": effective_end})

    total_days = days_between(period_start, effective_end)
    employed_days = count_employed_days(intervals, window, reference)
    used_days = max(0, total_days - employed_days)
    remaining_days = max(0, limit_days - used_days)

    if limit_days > 0:
        percentage = used_days / limit_days * 100
    else:
        # Carried-over limit fully exhausted by an earlier phase
        percentage = 100.0 if used_days > 0 else 0.0

    logger.debug(
        f"{period.phase.value}: window={total_days}d employed={employed_days}d "
        f"used={used_days}d limit={limit_days}d"
    )

    return PeriodSummary(
        phase=period.phase,
        used_days=used_days,
        remaining_days=remaining_days,
        limit_days=limit_days,
        percentage=percentage
    )
