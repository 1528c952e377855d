"""
lottorecur/pipeline/ticket_checker.py
Compare a player's rows against the winning draw of the same day.
"""
from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

from lottorecur.models.draw import Draw, to_day
from lottorecur.utils.logger import get_logger

log = get_logger("pipeline.checker")


@dataclass(frozen=True)
class Ticket:
    """A row the player submitted (7 numbers) for a draw date."""

    ticket_date: date
    numbers: tuple[int, ...] = field(default_factory=tuple)
    ticket_id: str = ""

    def __post_init__(self):
        if isinstance(self.ticket_date, datetime):
            object.__setattr__(self, "ticket_date", self.ticket_date.date())
        if not isinstance(self.numbers, tuple):
            object.__setattr__(self, "numbers", tuple(self.numbers))


def find_draw(draws: Iterable[Draw], on_date: date | datetime) -> Draw | None:
    """First draw recorded on the given calendar day, or None."""
    day = to_day(on_date)
    for draw in draws:
        if to_day(draw.draw_date) == day:
            return draw
    return None


def compare_ticket(ticket: Ticket, draw: Draw) -> dict[str, Any]:
    matched = sorted(set(ticket.numbers) & set(draw.main_numbers))
    extra = draw.extra_number
    matched_extra = extra if extra is not None and extra in ticket.numbers else None
    return {
        "ticket_id": ticket.ticket_id,
        "numbers": sorted(ticket.numbers),
        "matched_numbers": matched,
        "matched_count": len(matched),
        "matched_extra_number": matched_extra,
    }


def check_tickets(
    draws: Iterable[Draw],
    tickets: Sequence[Ticket],
    on_date: date | datetime,
) -> dict[str, Any]:
    """
    1. Find the winning draw for on_date
    2. Keep the tickets dated the same day
    3. Count matched main numbers + extra number per ticket
    4. Return comparisons, best first
    """
    day = to_day(on_date)
    log.info(f"[CHECK] tickets for {day.isoformat()}")

    draw = find_draw(draws, day)
    if draw is None:
        msg = f"No winning row registered for {day.isoformat()}."
        log.warning(msg)
        return {"success": False, "error": msg}

    todays = [t for t in tickets if t.ticket_date == day]
    comparisons = sorted(
        (compare_ticket(t, draw) for t in todays),
        key=lambda c: c["matched_count"],
        reverse=True,
    )

    best = comparisons[0]["matched_count"] if comparisons else 0
    log.info(f"[CHECK] {day.isoformat()} → {len(comparisons)} rows, best {best} matched")
    return {
        "success": True,
        "draw_date": day,
        "winning_numbers": sorted(draw.main_numbers),
        "extra_number": draw.extra_number,
        "comparisons": comparisons,
    }
