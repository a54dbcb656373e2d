"""
Tests for per-period unemployment accounting.
"""

from datetime import date

import pytest

from calculator.accounting import count_employed_days, summarize_period
from calculator.dates import days_between
from models import EligibilityPeriod, PhaseType


class TestCountEmployedDays:

    def test_overlapping_jobs_not_double_counted(self, opt_2023, make_job):
        jobs = [
            make_job(date(2023, 2, 1), date(2023, 2, 28)),
            make_job(date(2023, 2, 20), date(2023, 3, 31), employer="Beta"),
        ]
        # Feb 1 .. Mar 31
        assert count_employed_days(jobs, opt_2023, date(2024, 1, 1)) == 59

    def test_jobs_outside_period_ignored(self, opt_2023, make_job):
        jobs = [make_job(date(2021, 1, 1), date(2022, 12, 31))]
        assert count_employed_days(jobs, opt_2023, date(2024, 1, 1)) == 0


class TestSummarizePeriod:

    def test_accounting_identity(self, opt_2023, make_job):
        """used + employed == days elapsed in the period."""
        reference = date(2023, 6, 30)
        jobs = [
            make_job(date(2023, 2, 1), date(2023, 2, 28)),
            make_job(date(2023, 2, 20), date(2023, 3, 31), employer="Beta"),
            make_job(date(2023, 5, 1), employer="Gamma"),
        ]
        window = EligibilityPeriod(phase=PhaseType.OPT, start_date=opt_2023.start_date, end_date=reference)

        summary = summarize_period(jobs, opt_2023, 90, reference)
        employed = count_employed_days(jobs, window, reference)

        assert employed == 120
        assert summary.used_days == 61  # January + April
        assert summary.used_days + employed == days_between(opt_2023.start_date, reference)

    def test_period_not_started(self):
        future = EligibilityPeriod(phase=PhaseType.OPT, start_date=date(2025, 1, 1), end_date=date(2026, 1, 1))
        summary = summarize_period([], future, 90, date(2024, 6, 1))

        assert summary.used_days == 0
        assert summary.remaining_days == 90
        assert summary.limit_days == 90
        assert summary.percentage == 0

    def test_in_progress_period_counts_to_reference(self, opt_2023):
        summary = summarize_period([], opt_2023, 90, date(2023, 1, 10))
        assert summary.used_days == 10
        assert summary.remaining_days == 80

    def test_percentage_not_capped(self, opt_2023):
        summary = summarize_period([], opt_2023, 90, date(2024, 1, 1))

        assert summary.used_days == 365
        assert summary.remaining_days == 0
        assert summary.percentage == pytest.approx(365 / 90 * 100)

    def test_zero_limit_with_usage(self, opt_2023):
        summary = summarize_period([], opt_2023, 0, date(2023, 1, 5))
        assert summary.percentage == 100
        assert summary.remaining_days == 0

    def test_zero_limit_without_usage(self, opt_2023, make_job):
        jobs = [make_job(date(2022, 12, 1))]
        summary = summarize_period(jobs, opt_2023, 0, date(2023, 3, 1))
        assert summary.used_days == 0
        assert summary.percentage == 0

    def test_phase_carried_through(self, stem_2024):
        summary = summarize_period([], stem_2024, 150, date(2024, 1, 1))
        assert summary.phase == PhaseType.STEM
