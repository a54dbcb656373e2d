"""
Main Execution Script for the OPT Tracker.
Loads saved periods and employment, prints the unemployment report,
and optionally writes calendar reminders.
"""

import os
import sys
import logging
import argparse
from datetime import date
from typing import List, Optional

from calculator.state import TrackerState
from exporters import IcsExportError, create_unemployment_ics, write_ics_file
from models import ComplianceResult, PeriodSummary
from persistence import load_tracker_data

# --- CONFIGURATION ---
DATA_FILENAME = os.environ.get("OPT_TRACKER_DATA", "tracker_data.json")
LOG_LEVEL = os.environ.get("OPT_TRACKER_LOG_LEVEL", "INFO")
# ---------------------

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger("Main")

STATUS_ICONS = {
    "normal": "✅",
    "warning": "⚠️",
    "violation": "❌",
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="OPT/STEM unemployment day tracker")
    parser.add_argument("--data", default=DATA_FILENAME, help="Saved tracker data (JSON)")
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        default=None,
        help="Reference date YYYY-MM-DD (default: today)"
    )
    parser.add_argument("--ics", default=None, help="Write calendar reminders to this .ics file")
    return parser.parse_args(argv)


def format_phase(summary: PeriodSummary) -> str:
    return (
        f"{summary.phase.value:<5} {summary.used_days:>4} used / {summary.limit_days:>3} allowed"
        f"  ({summary.percentage:.1f}%, {summary.remaining_days} remaining)"
    )


def print_report(result: ComplianceResult) -> None:
    print("\n" + "="*50)
    print("📊 UNEMPLOYMENT REPORT")
    print("="*50)
    print(format_phase(result.phase1))
    if result.phase2:
        print(format_phase(result.phase2))
    print("-"*50)
    print(f"Total: {result.total_used_days} / {result.total_allowed_days} days")
    print(f"{STATUS_ICONS[result.status.value]} {result.status.value.upper()}: {result.status_message}")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    data = load_tracker_data(args.data)
    if data is None:
        logger.error(f"❌ No usable tracker data in {args.data}. Exiting.")
        return 1

    state = TrackerState.from_data(data, reference_date=args.as_of)
    if state.result is None:
        logger.error("❌ An OPT period is required before anything can be calculated.")
        return 1

    print_report(state.result)

    if args.ics:
        try:
            content = create_unemployment_ics(state.opt_period, state.stem_period)
        except IcsExportError as e:
            logger.error(f"❌ Calendar export failed: {e}")
            return 1
        write_ics_file(content, args.ics)

    return 0


if __name__ == "__main__":
    sys.exit(main())
