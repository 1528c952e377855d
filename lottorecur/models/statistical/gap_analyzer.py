"""
lottorecur/models/statistical/gap_analyzer.py
Build per-number appearance dates and the day gaps between consecutive appearances.
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from lottorecur.models.draw import Draw
from lottorecur.utils.logger import get_logger

log = get_logger("stats.gaps")


class DrawIntegrityError(ValueError):
    """Draw history that cannot yield valid (non-negative) gaps."""


class GapAnalyzer:
    """Chronological appearance index and inter-appearance gaps in days."""

    def __init__(self, number_range: tuple[int, int] = (1, 34)):
        self.lo, self.hi = number_range

    def get_appearances(self, draws: Iterable[Draw]) -> dict[int, list[date]]:
        """
        Returns {number: [dates ascending]} for every in-range number seen.
        Duplicate dates are kept. Raises DrawIntegrityError for a draw
        without a calendar date.
        """
        appearances: dict[int, list[date]] = {}
        for draw in draws:
            day = draw.draw_date
            if isinstance(day, datetime):
                day = day.date()
            if not isinstance(day, date):
                log.error(f"Draw has no valid date: {draw!r}")
                raise DrawIntegrityError(f"Draw date must be a calendar date, got {day!r}")
            for num in draw.numbers:
                if self.lo <= num <= self.hi:
                    appearances.setdefault(num, []).append(day)

        return {n: sorted(appearances[n]) for n in sorted(appearances)}

    @staticmethod
    def gaps_between(dates: list[date]) -> list[float]:
        """
        Consecutive day differences for an ascending date sequence.
        A negative gap means the sequence was not chronological.
        """
        gaps: list[float] = []
        for prev, curr in zip(dates, dates[1:]):
            days = (curr - prev).days
            if days < 0:
                log.error(f"Negative gap {days}d between {prev} and {curr}")
                raise DrawIntegrityError(
                    f"Appearance dates out of order: {prev.isoformat()} -> {curr.isoformat()}"
                )
            gaps.append(float(days))
        return gaps

    def get_gaps(self, draws: Iterable[Draw]) -> dict[int, list[float]]:
        """Returns {number: gaps} for numbers with at least 2 appearances."""
        appearances = self.get_appearances(draws)
        return {
            n: self.gaps_between(dates)
            for n, dates in appearances.items()
            if len(dates) >= 2
        }

    def get_last_seen(self, draws: Iterable[Draw]) -> dict[int, date]:
        """Returns {number: most recent appearance date}."""
        return {n: dates[-1] for n, dates in self.get_appearances(draws).items()}
