"""
lottorecur/utils/history_loader.py
Read the draw history seed file (JSON array of {"dato": "dd.MM.yyyy", "nr1".."nr8"}).
"""
from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any

from lottorecur.models.draw import Draw
from lottorecur.utils.config import DRAW_SLOTS, HISTORY_FILE
from lottorecur.utils.logger import get_logger

log = get_logger("history_loader")

DATE_FORMATS = ("%d.%m.%Y", "%Y-%m-%d")
SLOT_KEYS = [f"nr{i}" for i in range(1, DRAW_SLOTS + 1)]


def parse_date(raw: str) -> date:
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(raw.strip(), fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Date string does not match dd.MM.yyyy: {raw!r}")


def parse_draw_record(record: dict[str, Any]) -> Draw:
    """Convert one seed record to a Draw. Raises ValueError on missing/bad fields."""
    missing = ({"dato"} | set(SLOT_KEYS)) - record.keys()
    if missing:
        raise ValueError(f"Missing fields: {sorted(missing)}")
    if not isinstance(record["dato"], str):
        raise ValueError(f"dato must be a string, got {record['dato']!r}")

    try:
        numbers = tuple(int(record[key]) for key in SLOT_KEYS)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Non-integer number in record: {exc}") from exc

    return Draw(draw_date=parse_date(record["dato"]), numbers=numbers)


def validate_draw(draw: Draw) -> bool:
    """Structural check before a draw enters the history."""
    if not isinstance(draw.draw_date, date):
        log.error(f"Invalid draw date: {draw.draw_date!r}")
        return False
    if len(draw.numbers) != DRAW_SLOTS:
        log.error(f"Expected {DRAW_SLOTS} numbers, got {len(draw.numbers)}: {draw.numbers}")
        return False
    return True


def load_history(path: str | Path | None = None) -> list[Draw]:
    """
    Load all valid draws from the seed file, oldest first.
    Bad records are logged and skipped; file/JSON errors propagate.
    """
    path = Path(path) if path is not None else HISTORY_FILE
    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise ValueError(f"Expected a JSON array of draws in {path}")

    draws: list[Draw] = []
    skipped = 0
    for idx, record in enumerate(records):
        try:
            draw = parse_draw_record(record)
        except (ValueError, AttributeError) as exc:
            log.warning(f"Skipping record #{idx}: {exc}")
            skipped += 1
            continue
        if not validate_draw(draw):
            skipped += 1
            continue
        draws.append(draw)

    draws.sort(key=lambda d: d.draw_date)
    log.info(f"Loaded {len(draws)} draws from {path}" + (f" ({skipped} skipped)" if skipped else ""))
    return draws
