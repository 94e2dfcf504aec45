from datetime import date, datetime, timezone
from typing import List, Optional, Tuple

from .config import setup_logger

logger = setup_logger(__name__)


class ValidationWarning(str):
    """Lightweight tag for soft validation warnings."""
    pass


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def validate_date(raw: Optional[str]) -> Tuple[str, List[ValidationWarning]]:
    """Return (YYYY-MM-DD, warnings). Missing or unreadable dates fall back to today (UTC)."""
    if not raw or not str(raw).strip():
        return today_iso(), []
    value = str(raw).strip()
    try:
        return date.fromisoformat(value[:10]).isoformat(), []
    except ValueError:
        logger.warning("date_invalid: %s", value)
        return today_iso(), [ValidationWarning(f"date_invalid:{value}")]


def validate_league_id(raw: Optional[str]) -> Tuple[Optional[str], List[ValidationWarning]]:
    """Return (league_id_or_None, warnings). League ids are positive integers."""
    if raw is None or not str(raw).strip():
        return None, []
    value = str(raw).strip()
    if value.isdigit() and int(value) > 0:
        return str(int(value)), []
    logger.warning("league_invalid: %s", value)
    return None, [ValidationWarning(f"league_invalid:{value}")]


def validate_limit(raw: Optional[str], default: int, min_v: int = 1, max_v: int = 50):
    """Coerce to int and clamp to [min_v,max_v]. Return (value, warnings)."""
    if raw is None or raw == "":
        return default, []
    try:
        v = int(raw)
    except (TypeError, ValueError):
        logger.warning("limit_invalid: %s", raw)
        return default, [ValidationWarning("limit_invalid")]
    if v < min_v:
        logger.warning("limit_floor: %s -> %s", v, min_v)
        return min_v, [ValidationWarning("limit_floor")]
    if v > max_v:
        logger.warning("limit_cap: %s -> %s", v, max_v)
        return max_v, [ValidationWarning("limit_cap")]
    return v, []
