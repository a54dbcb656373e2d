"""Shared fixtures for the OPT Tracker tests."""

from datetime import date

import pytest

from models import EligibilityPeriod, EmploymentInterval, PhaseType


@pytest.fixture
def opt_2023():
    """OPT EAD covering calendar year 2023 (365 days)."""
    return EligibilityPeriod(phase=PhaseType.OPT, start_date=date(2023, 1, 1), end_date=date(2023, 12, 31))


@pytest.fixture
def stem_2024():
    """STEM extension directly following opt_2023."""
    return EligibilityPeriod(phase=PhaseType.STEM, start_date=date(2024, 1, 1), end_date=date(2025, 12, 31))


@pytest.fixture
def make_job():
    """Factory: make_job(start, end=None, employer='Acme')."""
    def _make(start, end=None, employer="Acme"):
        return EmploymentInterval(employer_name=employer, start_date=start, end_date=end)
    return _make
