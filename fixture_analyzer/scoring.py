"""
Heuristic match scoring: form, head-to-head and league home advantage
combined into win/draw/away probabilities and a recommendation.
"""

import logging
from typing import Any, List, Optional, Tuple

from .config import default_home_advantage, home_advantage_table
from .constants import (
    ADVICE_AWAY_LEAKY,
    ADVICE_AWAY_WIN,
    ADVICE_DRAW,
    ADVICE_H2H_DOMINANCE,
    ADVICE_HOME_SCORING,
    ADVICE_HOME_WIN,
    ADVICE_SLIGHT_EDGE,
    AWAY_WIN,
    DRAW,
    DRAW_CONFIDENCE_CAP,
    DRAW_FLOOR,
    DRAW_MAX_GAP,
    FORM_NOT_LOST_WEIGHT,
    FORM_WIN_WEIGHT,
    H2H_DOMINANCE_FACTOR,
    HEAVY_SCORING_GOALS,
    HOME_WIN,
    LEAKY_DEFENCE_GOALS,
    NEUTRAL_PROBABILITY,
    STRENGTH_FORM_WEIGHT,
    STRENGTH_H2H_WEIGHT,
    STRENGTH_HOME_ADVANTAGE_WEIGHT,
    WIN_CONFIDENCE_CAP,
    WIN_FLOOR,
    WIN_MARGIN,
)
from .domain.models import H2HTally, MatchAnalysis, Probabilities, TeamStats, round_half_up
from .logging_utils import warn_league_default


logger = logging.getLogger(__name__)


def form_score(stats: TeamStats) -> float:
    return stats.win_rate * FORM_WIN_WEIGHT + (100 - stats.loss_rate) * FORM_NOT_LOST_WEIGHT


def _league_key(league_id: Any) -> Optional[int]:
    try:
        return int(league_id)
    except (TypeError, ValueError):
        return None


def home_advantage_for(league_id: Any) -> float:
    """Return the league's home advantage constant, or the default for unlisted leagues."""
    key = _league_key(league_id)
    table = home_advantage_table()
    if key in table:
        return table[key]
    advantage = default_home_advantage()
    warn_league_default(key, advantage, logger=logger)
    return advantage


def _h2h_share(wins: int, h2h: H2HTally) -> float:
    return wins / max(h2h.total, 1)


def win_probabilities(
    home: TeamStats,
    away: TeamStats,
    h2h: H2HTally,
    home_advantage: float,
) -> Tuple[float, float, float]:
    """Unrounded (home, draw, away) percentages."""
    home_strength = (
        form_score(home) * STRENGTH_FORM_WEIGHT
        + _h2h_share(h2h.home_wins, h2h) * 100 * STRENGTH_H2H_WEIGHT
        + home_advantage * 100 * STRENGTH_HOME_ADVANTAGE_WEIGHT
    )
    away_strength = (
        form_score(away) * STRENGTH_FORM_WEIGHT
        + _h2h_share(h2h.away_wins, h2h) * 100 * STRENGTH_H2H_WEIGHT
    )

    total_strength = home_strength + away_strength
    if total_strength > 0:
        home_prob = home_strength / total_strength * 100
        away_prob = away_strength / total_strength * 100
    else:
        home_prob = away_prob = NEUTRAL_PROBABILITY
    # Not clamped: may dip below zero on degenerate inputs
    draw_prob = 100 - home_prob - away_prob
    return home_prob, draw_prob, away_prob


def score_match(
    home: TeamStats,
    away: TeamStats,
    h2h: H2HTally,
    league_id: Any,
    home_advantage: Optional[float] = None,
) -> MatchAnalysis:
    """
    Score a fixture from both teams' statistics and the head-to-head tally.

    Args:
        home: Home team statistics
        away: Away team statistics
        h2h: Head-to-head tally relative to the home team
        league_id: Provider league id used for the home advantage lookup
        home_advantage: Explicit constant overriding the league lookup

    Returns:
        MatchAnalysis: recommendation, confidence, advice and probabilities
    """
    advantage = home_advantage if home_advantage is not None else home_advantage_for(league_id)
    home_prob, draw_prob, away_prob = win_probabilities(home, away, h2h, advantage)

    advice: List[str] = []
    if home_prob > away_prob + WIN_MARGIN and home_prob > WIN_FLOOR:
        recommendation = HOME_WIN
        confidence = min(WIN_CONFIDENCE_CAP, home_prob)
        advice.append(ADVICE_HOME_WIN)
    elif away_prob > home_prob + WIN_MARGIN and away_prob > WIN_FLOOR:
        recommendation = AWAY_WIN
        confidence = min(WIN_CONFIDENCE_CAP, away_prob)
        advice.append(ADVICE_AWAY_WIN)
    elif draw_prob > DRAW_FLOOR and abs(home_prob - away_prob) < DRAW_MAX_GAP:
        recommendation = DRAW
        confidence = min(DRAW_CONFIDENCE_CAP, draw_prob)
        advice.append(ADVICE_DRAW)
    else:
        recommendation = HOME_WIN if home_prob > away_prob else AWAY_WIN
        confidence = max(home_prob, away_prob)
        advice.append(ADVICE_SLIGHT_EDGE)

    if home.goals_scored > HEAVY_SCORING_GOALS:
        advice.append(ADVICE_HOME_SCORING)
    if away.goals_conceded > LEAKY_DEFENCE_GOALS:
        advice.append(ADVICE_AWAY_LEAKY)
    if h2h.home_wins > h2h.away_wins * H2H_DOMINANCE_FACTOR:
        advice.append(ADVICE_H2H_DOMINANCE)

    return MatchAnalysis(
        recommendation=recommendation,
        confidence=round_half_up(confidence),
        advice=" ".join(advice),
        probabilities=Probabilities(
            home=round_half_up(home_prob),
            draw=round_half_up(draw_prob),
            away=round_half_up(away_prob),
        ),
    )
