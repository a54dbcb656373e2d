"""
Tests for the command-line runner.
"""

from datetime import date

import pytest

import run_tracker
from persistence import TrackerData, save_tracker_data


@pytest.fixture
def data_file(tmp_path, opt_2023, make_job):
    path = tmp_path / "tracker.json"
    save_tracker_data(TrackerData(opt_period=opt_2023, employment=[make_job(date(2023, 3, 22))]), path)
    return path


def test_prints_report(data_file, capsys):
    exit_code = run_tracker.main(["--data", str(data_file), "--as-of", "2024-01-01"])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "UNEMPLOYMENT REPORT" in out
    assert "Total: 80 / 90 days" in out
    assert "WARNING" in out


def test_writes_ics(data_file, tmp_path):
    ics_path = tmp_path / "reminders.ics"
    exit_code = run_tracker.main(["--data", str(data_file), "--as-of", "2024-01-01", "--ics", str(ics_path)])

    assert exit_code == 0
    assert "OPT 90-day unemployment limit" in ics_path.read_text()


def test_missing_data_file(tmp_path):
    assert run_tracker.main(["--data", str(tmp_path / "missing.json")]) == 1


def test_missing_opt_period(tmp_path):
    path = tmp_path / "tracker.json"
    save_tracker_data(TrackerData(), path)
    assert run_tracker.main(["--data", str(path)]) == 1
