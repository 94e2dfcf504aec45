"""
Team statistics, form and head-to-head reducers.
Pure functions over provider match lists; no I/O.
"""

from typing import Any, Iterable, List, Optional, Tuple

from .constants import FORM_LENGTH, FORM_PLACEHOLDER, H2H_WINDOW
from .domain.models import (
    H2HTally,
    Match,
    TeamStats,
    round_half_up,
    round_one_decimal,
    team_key,
)


def _as_matches(matches: Iterable[Any], limit: Optional[int] = None) -> List[Match]:
    raw = list(matches or [])
    if limit is not None:
        raw = raw[:limit]
    return [Match.from_payload(m) for m in raw]


def _result_symbol(goals_for: int, goals_against: int) -> str:
    if goals_for > goals_against:
        return "W"
    if goals_for == goals_against:
        return "D"
    return "L"


def aggregate_team_stats(matches: Iterable[Any], team_id: Any) -> TeamStats:
    """
    Reduce a team's recent matches into rate statistics.

    Matches the team did not play in (or whose team ids are missing) are
    left out of every count, including the denominator.

    Args:
        matches: Provider match payloads or ``Match`` values
        team_id: Team the statistics are computed for

    Returns:
        TeamStats: ``TeamStats.empty()`` when no match involves the team
    """
    goals_for = goals_against = 0
    wins = draws = losses = 0
    clean_sheets = btts = corners = cards = 0
    total = 0

    for match in _as_matches(matches):
        oriented = match.goals_for_against(team_id)
        if oriented is None:
            continue
        gf, ga = oriented
        total += 1
        goals_for += gf
        goals_against += ga

        symbol = _result_symbol(gf, ga)
        if symbol == "W":
            wins += 1
        elif symbol == "D":
            draws += 1
        else:
            losses += 1

        if ga == 0:
            clean_sheets += 1
        if gf > 0 and ga > 0:
            btts += 1

        corners += match.corners
        cards += match.cards

    if total == 0:
        return TeamStats.empty()

    def rate(count: int) -> int:
        return round_half_up(count / total * 100)

    return TeamStats(
        goals_scored=round_one_decimal(goals_for / total),
        goals_conceded=round_one_decimal(goals_against / total),
        win_rate=rate(wins),
        draw_rate=rate(draws),
        loss_rate=rate(losses),
        clean_sheet_rate=rate(clean_sheets),
        btts_rate=rate(btts),
        avg_corners=round_half_up(corners / total),
        avg_cards=round_one_decimal(cards / total),
        form_matches=total,
    )


def extract_form(matches: Iterable[Any], team_id: Any) -> Tuple[str, ...]:
    """Last five results (most recent first) as W/D/L, right-padded with '-'."""
    symbols: List[str] = []
    for match in _as_matches(matches, FORM_LENGTH):
        oriented = match.goals_for_against(team_id)
        symbols.append(_result_symbol(*oriented) if oriented is not None else FORM_PLACEHOLDER)
    symbols.extend([FORM_PLACEHOLDER] * (FORM_LENGTH - len(symbols)))
    return tuple(symbols)


def tally_head_to_head(matches: Iterable[Any], home_team_id: Any, away_team_id: Any = None) -> H2HTally:
    """
    Count head-to-head results relative to the current fixture's home team.

    A historical win is a "home win" when the winner is the team playing at
    home in the current fixture, whichever side it was on back then. When
    ``away_team_id`` is given, only that team's wins are away wins; a winner
    that is neither team counts toward ``total`` only, as does any decided
    meeting while the home id is unknown.
    """
    window = _as_matches(matches, H2H_WINDOW)
    home_id = team_key(home_team_id)
    away_id = team_key(away_team_id)
    home_wins = away_wins = draws = 0

    for match in window:
        if match.is_draw:
            draws += 1
            continue
        winner = match.winner_id()
        if winner is None or home_id is None:
            continue
        if winner == home_id:
            home_wins += 1
        elif away_id is None or winner == away_id:
            away_wins += 1

    return H2HTally(home_wins=home_wins, away_wins=away_wins, draws=draws, total=len(window))
