"""
lottorecur/models/statistical/frequency_analyzer.py
Count how often each number appears across the draw history.
"""
from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from lottorecur.models.draw import Draw
from lottorecur.utils.logger import get_logger

log = get_logger("stats.frequency")


class FrequencyAnalyzer:
    """Occurrence counts per number, restricted to the valid number range."""

    def __init__(self, number_range: tuple[int, int] = (1, 34)):
        self.lo, self.hi = number_range

    def get_counts(self, draws: Iterable[Draw]) -> dict[int, int]:
        """
        Returns {number: count} for every number seen at least once.
        Out-of-range numbers are dropped silently.
        """
        counter: Counter = Counter()
        dropped = 0
        for draw in draws:
            for num in draw.numbers:
                if self.lo <= num <= self.hi:
                    counter[num] += 1
                else:
                    dropped += 1

        if dropped:
            log.debug(f"Ignored {dropped} out-of-range numbers outside [{self.lo},{self.hi}]")
        return {n: counter[n] for n in sorted(counter)}

    def get_ranking(self, draws: Iterable[Draw]) -> list[tuple[int, int]]:
        """(number, count) pairs, most frequent first; ties ordered by number."""
        counts = self.get_counts(draws)
        return sorted(counts.items(), key=lambda item: (-item[1], item[0]))

    def get_hot_numbers(self, draws: Iterable[Draw], top_n: int = 10) -> list[int]:
        return [n for n, _ in self.get_ranking(draws)[:top_n]]

    def get_cold_numbers(self, draws: Iterable[Draw], bottom_n: int = 10) -> list[int]:
        """Least frequent numbers, including numbers in range that never appeared."""
        counts = self.get_counts(draws)
        full = {n: counts.get(n, 0) for n in range(self.lo, self.hi + 1)}
        return sorted(full, key=lambda n: (full[n], n))[:bottom_n]
