"""
Span clamping and merging.

This module answers the question: "Which days inside this EAD period was
the user employed?" It trims each job to the period, then collapses the
trimmed pieces into disjoint blocks so no day is counted twice.
"""

from dataclasses import dataclass
from datetime import date as date_type
from typing import Iterable, List, Optional

from models import EligibilityPeriod, EmploymentInterval
from .dates import normalize_date

# A job ending Friday and the next starting Saturday leaves no unemployed day.
# Business rule: keep at exactly 1.
MERGE_GAP_DAYS = 1


@dataclass(frozen=True)
class ClampedInterval:
    """Portion of one employment interval that falls inside one period."""
    start: date_type
    end: date_type


def clamp_span(
    interval: EmploymentInterval,
    period: EligibilityPeriod,
    reference: date_type
) -> Optional[ClampedInterval]:
    """
    Intersect a job with the period's [start, end] window.
    Returns None when they do not overlap (e.g. a job held before OPT began).
    """
    span_start = normalize_date(interval.start_date)
    # Ongoing jobs run through the reference date
    span_end = normalize_date(interval.end_date) if interval.end_date else reference
    period_start = normalize_date(period.start_date)
    period_end = normalize_date(period.end_date)

    if span_start > period_end or span_end < period_start:
        return None
    # Ongoing job that has not started as of the reference date
    if span_end < span_start:
        return None

    return ClampedInterval(
        start=max(span_start, period_start),
        end=min(span_end, period_end)
    )


def merge_spans(spans: Iterable[ClampedInterval]) -> List[ClampedInterval]:
    """
    Coalesce overlapping or back-to-back spans.
    Input order does not matter; output is ascending and disjoint.
    """
    ordered = sorted(spans, key=lambda s: s.start)
    if not ordered:
        return []

    merged: List[ClampedInterval] = []
    current = ordered[0]

    for candidate in ordered[1:]:
        gap = (candidate.start - current.end).days
        if gap <= MERGE_GAP_DAYS:
            current = ClampedInterval(current.start, max(current.end, candidate.end))
        else:
            merged.append(current)
            current = candidate

    merged.append(current)
    return merged
