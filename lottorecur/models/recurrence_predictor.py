"""
lottorecur/models/recurrence_predictor.py
Per-number recurrence statistics → predicted next date → tolerance window query.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Any

from lottorecur.models.draw import Draw, NumberStats, to_day
from lottorecur.models.statistical.frequency_analyzer import FrequencyAnalyzer
from lottorecur.models.statistical.gap_analyzer import GapAnalyzer
from lottorecur.models.statistical.robust_average import (
    IQR_MULTIPLIER,
    MIN_IQR_SAMPLE,
    TRIM_FRACTION,
    robust_average,
    round_half_up,
)
from lottorecur.utils.config import NUMBER_RANGE, get_engine_config
from lottorecur.utils.logger import get_logger

log = get_logger("recurrence")


class RecurrencePredictor:
    """
    Stateless recurrence engine. Every call recomputes from the draws it is
    given; nothing is cached on the instance, so one predictor can be shared
    between threads.
    """

    def __init__(
        self,
        number_range: tuple[int, int] = NUMBER_RANGE,
        min_iqr_sample: int = MIN_IQR_SAMPLE,
        iqr_multiplier: float = IQR_MULTIPLIER,
        trim_fraction: float = TRIM_FRACTION,
    ):
        self.lo, self.hi = number_range
        self.min_iqr_sample = min_iqr_sample
        self.iqr_multiplier = iqr_multiplier
        self.trim_fraction = trim_fraction

        self.freq_analyzer = FrequencyAnalyzer(number_range=number_range)
        self.gap_analyzer = GapAnalyzer(number_range=number_range)

    @classmethod
    def from_config(cls, config: dict[str, Any] | None = None) -> "RecurrencePredictor":
        """Build from recurrence_params.json (or an already loaded dict)."""
        cfg = config if config is not None else get_engine_config()
        return cls(
            number_range=tuple(cfg.get("number_range", NUMBER_RANGE)),
            min_iqr_sample=cfg.get("min_iqr_sample", MIN_IQR_SAMPLE),
            iqr_multiplier=cfg.get("iqr_multiplier", IQR_MULTIPLIER),
            trim_fraction=cfg.get("trim_fraction", TRIM_FRACTION),
        )

    # ── Statistics ────────────────────────────────────────────────

    def average_gap(self, gaps: list[float]) -> float:
        return robust_average(
            gaps,
            min_iqr_sample=self.min_iqr_sample,
            k=self.iqr_multiplier,
            trim_fraction=self.trim_fraction,
        )

    def compute_statistics(self, draws: Iterable[Draw]) -> dict[int, NumberStats]:
        """
        Returns {number: NumberStats} for every in-range number seen at least once,
        keyed in ascending number order. Input draws are never modified.
        """
        snapshot = tuple(draws)
        appearances = self.gap_analyzer.get_appearances(snapshot)

        stats: dict[int, NumberStats] = {}
        for number, dates in appearances.items():
            last_seen = dates[-1]
            gaps = self.gap_analyzer.gaps_between(dates)
            stats[number] = NumberStats(
                number=number,
                count=len(dates),
                gaps_days=tuple(gaps),
                average_gap_days=self.average_gap(gaps) if gaps else None,
                last_seen=last_seen,
            )

        for number, predicted in self.predict_next_dates(stats).items():
            stats[number] = replace(stats[number], predicted_next=predicted)

        log.debug(f"Computed statistics for {len(stats)} numbers from {len(snapshot)} draws")
        return stats

    def get_frequencies(self, draws: Iterable[Draw]) -> dict[int, int]:
        return self.freq_analyzer.get_counts(draws)

    # ── Prediction ────────────────────────────────────────────────

    @staticmethod
    def predict_next_dates(stats: Mapping[int, NumberStats]) -> dict[int, date]:
        """
        Returns {number: last_seen + round(average_gap_days)} for numbers where
        both operands exist. Others are simply left out.
        """
        predictions: dict[int, date] = {}
        for number in sorted(stats):
            s = stats[number]
            if s.average_gap_days is None or s.last_seen is None:
                continue
            predictions[number] = s.last_seen + timedelta(days=round_half_up(s.average_gap_days))
        return predictions

    @staticmethod
    def numbers_near(
        predictions: Mapping[int, date],
        target_date: date | datetime,
        tolerance_days: float,
    ) -> set[int]:
        """
        Numbers whose predicted date lies within ±tolerance_days (whole days,
        inclusive) of target_date. Tolerance 0 means same day only.
        """
        if tolerance_days < 0:
            raise ValueError(f"Tolerance must be non-negative, got {tolerance_days}")
        target = to_day(target_date)
        return {
            number
            for number, predicted in predictions.items()
            if abs((to_day(predicted) - target).days) <= tolerance_days
        }

    def predict_for_date(
        self,
        draws: Iterable[Draw],
        target_date: date | datetime,
        tolerance_days: float,
    ) -> list[int]:
        """Full pipeline for one query: draws → statistics → predictions → sorted matches."""
        stats = self.compute_statistics(draws)
        predictions = self.predict_next_dates(stats)
        matches = sorted(self.numbers_near(predictions, target_date, tolerance_days))
        log.info(
            f"{len(matches)} of {self.hi - self.lo + 1} numbers expected around "
            f"{to_day(target_date).isoformat()} (±{tolerance_days:g}d): {matches}"
        )
        return matches
