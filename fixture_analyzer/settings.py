import os
from dotenv import load_dotenv

from .constants import DEFAULT_HOME_ADVANTAGE as _DEFAULT_HOME_ADVANTAGE
from .constants import FIXTURES_BATCH_LIMIT as _FIXTURES_BATCH_LIMIT
from .constants import LOG_FILE_BACKUPS as _LOG_FILE_BACKUPS
from .constants import LOG_FILE_MAX_BYTES as _LOG_FILE_MAX_BYTES
from .constants import LOG_FILE_NAME as _LOG_FILE_NAME

# Load .env from repo root (dotenv auto-walks up from CWD)
load_dotenv()


def _get_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or not str(val).strip():
        return default
    try:
        return int(val)
    except ValueError:
        return default


def _get_float(name: str, default: float) -> float:
    val = os.getenv(name)
    if val is None or not str(val).strip():
        return default
    try:
        return float(val)
    except ValueError:
        return default


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# File sink used only when the root logger has no handlers
LOG_FILE = os.getenv("LOG_FILE", _LOG_FILE_NAME)
LOG_FILE_MAX_BYTES = _get_int("LOG_FILE_MAX_BYTES", _LOG_FILE_MAX_BYTES)
LOG_FILE_BACKUPS = _get_int("LOG_FILE_BACKUPS", _LOG_FILE_BACKUPS)

# --- Batch tunables ---
FIXTURES_BATCH_LIMIT = _get_int("FIXTURES_BATCH_LIMIT", _FIXTURES_BATCH_LIMIT)   # first N fixtures of a day
ENRICH_MAX_WORKERS = _get_int("ENRICH_MAX_WORKERS", 8)        # concurrent fixture enrichments

# --- Scoring tunables ---
DEFAULT_HOME_ADVANTAGE = _get_float("DEFAULT_HOME_ADVANTAGE", _DEFAULT_HOME_ADVANTAGE)
# "39:0.15,140:0.12" -> merged over the built-in league table
HOME_ADVANTAGE_OVERRIDES = os.getenv("HOME_ADVANTAGE_OVERRIDES", "")
