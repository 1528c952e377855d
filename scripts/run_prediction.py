"""
scripts/run_prediction.py
Print the numbers expected around a date, and optionally the per-number report.
"""
from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from rich.console import Console
from rich.table import Table

from lottorecur.models.recurrence_predictor import RecurrencePredictor
from lottorecur.pipeline.number_report import build_number_report, summarize_predictions
from lottorecur.utils.config import HISTORY_FILE, get_tolerance_days
from lottorecur.utils.history_loader import load_history
from lottorecur.utils.logger import get_logger

log = get_logger("run_prediction")


def render_report(rows: list[dict], console: Console) -> None:
    table = Table(title="Number statistics")
    table.add_column("Number", justify="right")
    table.add_column("Count", justify="right")
    table.add_column("Avg days", justify="right")
    table.add_column("Next date", justify="right")
    table.add_column("Week", justify="right")
    for row in rows:
        avg = row["average_gap_days"]
        nxt = row["predicted_next"]
        table.add_row(
            str(row["number"]),
            str(row["count"]),
            f"{avg:.1f}" if avg is not None else "-",
            nxt.isoformat() if nxt else "-",
            str(row["predicted_week"]) if row["predicted_week"] else "_",
        )
    console.print(table)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Recurrence-based number prediction")
    parser.add_argument("--history", default=str(HISTORY_FILE), help="Draw history JSON file")
    parser.add_argument("--date", type=date.fromisoformat, default=date.today(),
                        help="Target date (YYYY-MM-DD)")
    parser.add_argument("--tolerance", type=float, default=None, help="± days around the target date")
    parser.add_argument("--report", action="store_true", help="Also print the per-number report")
    args = parser.parse_args(argv)

    tolerance = args.tolerance if args.tolerance is not None else get_tolerance_days()
    if tolerance < 0:
        parser.error("--tolerance must be non-negative")

    draws = load_history(args.history)
    if not draws:
        log.error(f"No draws in {args.history}")
        return 1

    predictor = RecurrencePredictor.from_config()
    console = Console()

    if args.report:
        render_report(build_number_report(draws, predictor), console)

    summary = summarize_predictions(draws, args.date, tolerance, predictor)
    numbers = ", ".join(str(n) for n in summary["numbers"]) or "none"
    console.print(
        f"[bold]{summary['target_date'].isoformat()}[/bold] (±{tolerance:g} days): {numbers}\n"
        f"{summary['matched_count']} of {summary['total_numbers']} numbers are relevant"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
