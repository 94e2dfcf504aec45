"""One-shot warnings for leagues scored with the default home advantage."""
from __future__ import annotations

import logging
import threading
from typing import Any, Optional, Set

_lock = threading.Lock()
_defaulted_leagues: Set[Any] = set()


def warn_league_default(league_id: Any, advantage: float, logger: Optional[logging.Logger] = None) -> bool:
    """Log the first default lookup per league; later lookups stay silent.

    The registry is bounded by the number of distinct leagues the provider
    returns, so it is never pruned during the process lifetime.
    """
    with _lock:
        if league_id in _defaulted_leagues:
            return False
        _defaulted_leagues.add(league_id)

    (logger or logging.getLogger(__name__)).warning(
        "home_advantage_default league=%s advantage=%s", league_id, advantage
    )
    return True


def defaulted_leagues() -> Set[Any]:
    with _lock:
        return set(_defaulted_leagues)


def reset_league_defaults() -> None:
    """Test helper: forget which leagues already warned."""
    with _lock:
        _defaulted_leagues.clear()
