"""
Runtime configuration for the fixture analyzer.
Builds the logger setup and the immutable league home-advantage table.
"""

import logging
import os
from functools import lru_cache
from logging.handlers import RotatingFileHandler
from types import MappingProxyType
from typing import Dict, Mapping

from . import settings
from .constants import HOME_ADVANTAGE_BY_LEAGUE, LOG_FORMAT


def _file_handler(level: int) -> RotatingFileHandler:
    path = settings.LOG_FILE
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    handler = RotatingFileHandler(
        path,
        maxBytes=settings.LOG_FILE_MAX_BYTES,
        backupCount=settings.LOG_FILE_BACKUPS,
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    return handler


def setup_logger(name: str) -> logging.Logger:
    """Module logger: propagates to the root sink, else writes to ``settings.LOG_FILE``."""

    logger = logging.getLogger(name)
    level = getattr(logging, settings.LOG_LEVEL, logging.INFO)
    logger.setLevel(level)

    if logging.getLogger().handlers:
        logger.propagate = True
    elif not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        logger.addHandler(_file_handler(level))
        logger.propagate = False
    return logger


logger = setup_logger(__name__)


def parse_home_advantage_overrides(raw: str) -> Dict[int, float]:
    """Parse ``"39:0.15,140:0.12"`` into ``{39: 0.15, 140: 0.12}``.

    Malformed entries are skipped with a warning.
    """
    overrides: Dict[int, float] = {}
    for chunk in (raw or "").split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        league, sep, value = chunk.partition(":")
        try:
            if not sep:
                raise ValueError(chunk)
            overrides[int(league.strip())] = float(value.strip())
        except ValueError:
            logger.warning("home_advantage_override_invalid: %s", chunk)
    return overrides


@lru_cache(maxsize=1)
def home_advantage_table() -> Mapping[int, float]:
    """League id -> home advantage constant, built once and read-only."""

    table = dict(HOME_ADVANTAGE_BY_LEAGUE)
    table.update(parse_home_advantage_overrides(settings.HOME_ADVANTAGE_OVERRIDES))
    return MappingProxyType(table)


def default_home_advantage() -> float:
    return settings.DEFAULT_HOME_ADVANTAGE
