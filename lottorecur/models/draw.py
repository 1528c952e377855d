"""
lottorecur/models/draw.py
Immutable value types shared by the statistics engine and its callers.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime

from lottorecur.utils.config import MAIN_SLOTS


def to_day(value: date | datetime) -> date:
    """Truncate a datetime to its calendar day; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class Draw:
    """One historical draw: a date plus its numbers (slot 8 is the extra number)."""

    draw_date: date
    numbers: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Normalize without breaking immutability for callers
        if isinstance(self.draw_date, datetime):
            object.__setattr__(self, "draw_date", self.draw_date.date())
        if not isinstance(self.numbers, tuple):
            object.__setattr__(self, "numbers", tuple(self.numbers))

    @property
    def main_numbers(self) -> tuple[int, ...]:
        return self.numbers[:MAIN_SLOTS]

    @property
    def extra_number(self) -> int | None:
        if len(self.numbers) > MAIN_SLOTS:
            return self.numbers[MAIN_SLOTS]
        return None


@dataclass(frozen=True)
class NumberStats:
    """Recurrence statistics for a single number. Optional fields are None when not derivable."""

    number: int
    count: int
    gaps_days: tuple[float, ...] = ()
    average_gap_days: float | None = None
    last_seen: date | None = None
    predicted_next: date | None = None

    @property
    def predicted_week(self) -> int | None:
        """ISO week number (1-53) of the predicted next date."""
        if self.predicted_next is None:
            return None
        return self.predicted_next.isocalendar()[1]
