"""Value types shared by the aggregators, the scorer and the enricher."""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Mapping, Optional

from ..constants import ADVICE_UNAVAILABLE, DATA_UNAVAILABLE
from ..errors import MalformedMatchError


def round_half_up(value: float) -> int:
    """Integer rounding with halves going up (-2.5 -> -2, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def round_one_decimal(value: float) -> float:
    """One-decimal rounding, half-up on the exact binary value."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _as_int(value: Any, field: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise MalformedMatchError(f"{field}: boolean is not a count")
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedMatchError(f"{field}: {value!r}") from exc
    # 2.0 and "1.0" are counts; 2.7, nan and inf are not
    if not number.is_integer():
        raise MalformedMatchError(f"{field}: {value!r} is not a whole number")
    return int(number)


def _as_id(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise MalformedMatchError(f"team id: {value!r}") from exc


def team_key(value: Any) -> Optional[int]:
    """Lenient team id normalisation: unreadable ids become None."""
    try:
        return _as_id(value)
    except MalformedMatchError:
        return None


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


@dataclass(frozen=True)
class Match:
    home_team_id: Optional[int]
    away_team_id: Optional[int]
    home_goals: int = 0
    away_goals: int = 0
    corners: int = 0
    yellow_cards: int = 0
    red_cards: int = 0

    @classmethod
    def from_payload(cls, payload: Any) -> "Match":
        """Read an API-Football fixture entry or a flat match record."""
        if isinstance(payload, Match):
            return payload
        if not isinstance(payload, Mapping):
            raise MalformedMatchError(f"match payload must be a mapping, got {type(payload).__name__}")

        stats = _mapping(payload.get("statistics"))
        if "teams" in payload or "goals" in payload:
            teams = _mapping(payload.get("teams"))
            goals = _mapping(payload.get("goals"))
            home_id = _mapping(teams.get("home")).get("id")
            away_id = _mapping(teams.get("away")).get("id")
            home_goals = goals.get("home")
            away_goals = goals.get("away")
        else:
            home_id = payload.get("homeTeamId")
            away_id = payload.get("awayTeamId")
            home_goals = payload.get("homeGoals")
            away_goals = payload.get("awayGoals")

        return cls(
            home_team_id=_as_id(home_id),
            away_team_id=_as_id(away_id),
            home_goals=_as_int(home_goals, "home goals"),
            away_goals=_as_int(away_goals, "away goals"),
            corners=_as_int(stats.get("corners"), "corners"),
            yellow_cards=_as_int(stats.get("yellow_cards", stats.get("yellowCards")), "yellow cards"),
            red_cards=_as_int(stats.get("red_cards", stats.get("redCards")), "red cards"),
        )

    def goals_for_against(self, team_id: Any) -> Optional[tuple[int, int]]:
        """Goals (for, against) from ``team_id``'s side; None if the team did not play."""
        team_id = team_key(team_id)
        if team_id is None:
            return None
        if self.home_team_id is not None and self.home_team_id == team_id:
            return self.home_goals, self.away_goals
        if self.away_team_id is not None and self.away_team_id == team_id:
            return self.away_goals, self.home_goals
        return None

    def winner_id(self) -> Optional[int]:
        if self.home_goals > self.away_goals:
            return self.home_team_id
        if self.away_goals > self.home_goals:
            return self.away_team_id
        return None

    @property
    def is_draw(self) -> bool:
        return self.home_goals == self.away_goals

    @property
    def cards(self) -> int:
        return self.yellow_cards + self.red_cards


@dataclass(frozen=True)
class TeamStats:
    goals_scored: float = 0.0
    goals_conceded: float = 0.0
    win_rate: int = 0
    draw_rate: int = 0
    loss_rate: int = 0
    clean_sheet_rate: int = 0
    btts_rate: int = 0
    avg_corners: int = 0
    avg_cards: float = 0.0
    form_matches: int = 0

    @classmethod
    def empty(cls) -> "TeamStats":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "goalsScored": self.goals_scored,
            "goalsConceded": self.goals_conceded,
            "winRate": self.win_rate,
            "drawRate": self.draw_rate,
            "lossRate": self.loss_rate,
            "cleanSheetRate": self.clean_sheet_rate,
            "bttsRate": self.btts_rate,
            "avgCorners": self.avg_corners,
            "avgCards": self.avg_cards,
            "formMatches": self.form_matches,
        }


@dataclass(frozen=True)
class H2HTally:
    home_wins: int = 0
    away_wins: int = 0
    draws: int = 0
    total: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "homeWins": self.home_wins,
            "awayWins": self.away_wins,
            "draws": self.draws,
            "total": self.total,
        }


@dataclass(frozen=True)
class Probabilities:
    home: int
    draw: int
    away: int

    def to_dict(self) -> Dict[str, int]:
        return {"home": self.home, "draw": self.draw, "away": self.away}


@dataclass(frozen=True)
class MatchAnalysis:
    recommendation: str
    confidence: int
    advice: str
    probabilities: Optional[Probabilities] = None

    @classmethod
    def unavailable(cls) -> "MatchAnalysis":
        return cls(recommendation=DATA_UNAVAILABLE, confidence=0, advice=ADVICE_UNAVAILABLE)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "recommendation": self.recommendation,
            "confidence": self.confidence,
            "advice": self.advice,
        }
        if self.probabilities is not None:
            payload["probabilities"] = self.probabilities.to_dict()
        return payload
