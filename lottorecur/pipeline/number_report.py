"""
lottorecur/pipeline/number_report.py
Per-number frequency / gap / next-date rows and the prediction summary for a date.
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from typing import Any

from lottorecur.models.draw import Draw, to_day
from lottorecur.models.recurrence_predictor import RecurrencePredictor
from lottorecur.utils.logger import get_logger

log = get_logger("pipeline.report")


def build_number_report(
    draws: Iterable[Draw],
    predictor: RecurrencePredictor | None = None,
) -> list[dict[str, Any]]:
    """
    One row per number that has appeared, most frequent first (ties by number).
    Values are raw dates/floats/None; formatting is up to the caller.
    """
    predictor = predictor or RecurrencePredictor()
    stats = predictor.compute_statistics(draws)

    ordered = sorted(stats.values(), key=lambda s: (-s.count, s.number))
    rows = [
        {
            "number": s.number,
            "count": s.count,
            "average_gap_days": s.average_gap_days,
            "last_seen": s.last_seen,
            "predicted_next": s.predicted_next,
            "predicted_week": s.predicted_week,
        }
        for s in ordered
    ]
    log.info(f"Number report: {len(rows)} numbers")
    return rows


def summarize_predictions(
    draws: Iterable[Draw],
    target_date: date | datetime,
    tolerance_days: float,
    predictor: RecurrencePredictor | None = None,
) -> dict[str, Any]:
    """Numbers expected around target_date, with the "N of 34" totals."""
    predictor = predictor or RecurrencePredictor()
    numbers = predictor.predict_for_date(draws, target_date, tolerance_days)
    return {
        "target_date": to_day(target_date),
        "tolerance_days": tolerance_days,
        "numbers": numbers,
        "matched_count": len(numbers),
        "total_numbers": predictor.hi - predictor.lo + 1,
    }
