"""
lottorecur/utils/config.py
Load env vars and the recurrence engine config JSON.
"""
import json
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = ROOT / "config"
ENGINE_CONFIG_FILE = "recurrence_params.json"

# ── Draw layout ───────────────────────────────────────────────────
NUMBER_RANGE: tuple[int, int] = (1, 34)
DRAW_SLOTS: int = 8          # nr8 is the extra number
MAIN_SLOTS: int = 7

# ── Prediction ────────────────────────────────────────────────────
DEFAULT_TOLERANCE_DAYS: float = float(os.getenv("LOTTO_TOLERANCE_DAYS", "3.0"))

# ── History seed file ─────────────────────────────────────────────
HISTORY_FILE: Path = Path(os.getenv("LOTTO_HISTORY_FILE", str(ROOT / "data" / "lotto.json")))

_engine_config_cache: dict[str, Any] = {}


def get_engine_config() -> dict[str, Any]:
    """Load and cache the recurrence engine config JSON."""
    if _engine_config_cache:
        return _engine_config_cache
    path = CONFIG_DIR / ENGINE_CONFIG_FILE
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        config = json.load(f)
    _engine_config_cache.update(config)
    return _engine_config_cache


def get_number_range() -> tuple[int, int]:
    cfg = get_engine_config()
    lo, hi = cfg.get("number_range", NUMBER_RANGE)
    return lo, hi


def get_tolerance_days() -> float:
    """Env override wins over the JSON default."""
    if "LOTTO_TOLERANCE_DAYS" in os.environ:
        return DEFAULT_TOLERANCE_DAYS
    cfg = get_engine_config()
    return float(cfg.get("tolerance_days", DEFAULT_TOLERANCE_DAYS))


def get_min_iqr_sample() -> int:
    """Smallest gap sample that is averaged with IQR fences instead of trimming."""
    cfg = get_engine_config()
    return int(cfg.get("min_iqr_sample", 4))
