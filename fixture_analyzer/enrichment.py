"""Per-fixture enrichment with a degraded fallback record."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .config import setup_logger
from .constants import H2H_DISPLAY_LIMIT
from .domain.contracts import DegradedFixtureRecord, EnrichedFixtureRecord
from .domain.models import MatchAnalysis
from .scoring import score_match
from .stats import aggregate_team_stats, extract_form, tally_head_to_head

logger = setup_logger(__name__)

MatchLists = Tuple[Sequence[Any], Sequence[Any], Sequence[Any]]


@dataclass(frozen=True)
class EnrichmentResult:
    """Outcome of enriching one fixture: always carries a serialisable record."""

    record: Dict[str, Any]
    degraded: bool = False
    error: Optional[str] = None

    @property
    def fixture_id(self) -> Any:
        fixture = self.record.get("fixture")
        return fixture.get("id") if isinstance(fixture, Mapping) else None


def _section(payload: Any, key: str) -> Mapping[str, Any]:
    if not isinstance(payload, Mapping):
        return {}
    value = payload.get(key)
    return value if isinstance(value, Mapping) else {}


def _fixture_id(fixture: Any) -> Any:
    return _section(fixture, "fixture").get("id")


def _first_bookmaker_bets(fixture: Mapping[str, Any]) -> Optional[List[Dict[str, Any]]]:
    bookmakers = _section(fixture, "odds").get("bookmakers") or []
    if not bookmakers or not isinstance(bookmakers[0], Mapping):
        return None
    # An empty bets list is passed through; only a missing one becomes null
    return bookmakers[0].get("bets")


def _team_info(team: Mapping[str, Any]) -> Dict[str, Any]:
    return {"id": team.get("id"), "name": team.get("name"), "logo": team.get("logo")}


def build_enriched_record(
    fixture: Mapping[str, Any],
    home_matches: Iterable[Any],
    away_matches: Iterable[Any],
    h2h_matches: Iterable[Any],
) -> EnrichedFixtureRecord:
    """Assemble the full enriched record; raises on malformed provider data."""
    meta = fixture["fixture"]
    league = fixture["league"]
    home_team = fixture["teams"]["home"]
    away_team = fixture["teams"]["away"]
    home_id = home_team["id"]
    away_id = away_team["id"]

    home_matches = list(home_matches or [])
    away_matches = list(away_matches or [])
    h2h_matches = list(h2h_matches or [])

    home_stats = aggregate_team_stats(home_matches, home_id)
    away_stats = aggregate_team_stats(away_matches, away_id)
    h2h = tally_head_to_head(h2h_matches, home_id, away_id)
    analysis = score_match(home_stats, away_stats, h2h, league.get("id"))

    return {
        "fixture": {
            "id": meta.get("id"),
            "date": meta.get("date"),
            "venue": _section(meta, "venue").get("name") or "TBD",
            "status": meta.get("status"),
        },
        "league": {
            "id": league.get("id"),
            "name": league.get("name"),
            "country": league.get("country"),
            "logo": league.get("logo"),
        },
        "teams": {
            "home": _team_info(home_team),
            "away": _team_info(away_team),
        },
        "goals": fixture.get("goals"),
        "odds": _first_bookmaker_bets(fixture),
        "analysis": analysis.to_dict(),
        "stats": {
            "home": home_stats.to_dict(),
            "away": away_stats.to_dict(),
        },
        "h2h": h2h_matches[:H2H_DISPLAY_LIMIT],
        "form": {
            "home": list(extract_form(home_matches, home_id)),
            "away": list(extract_form(away_matches, away_id)),
        },
    }


def degraded_record(fixture: Any) -> DegradedFixtureRecord:
    """Minimal record: provider sections as received plus the unavailable analysis."""
    source = fixture if isinstance(fixture, Mapping) else {}
    return {
        "fixture": source.get("fixture"),
        "league": source.get("league"),
        "teams": source.get("teams"),
        "goals": source.get("goals"),
        "analysis": MatchAnalysis.unavailable().to_dict(),
    }


def _degrade(fixture: Any, exc: Exception) -> EnrichmentResult:
    # Called from inside the except block, so the traceback is attached
    logger.exception("fixture_enrich_failed id=%s err=%s", _fixture_id(fixture), exc)
    return EnrichmentResult(record=dict(degraded_record(fixture)), degraded=True, error=str(exc))


def enrich_fixture(
    fixture: Mapping[str, Any],
    home_matches: Iterable[Any],
    away_matches: Iterable[Any],
    h2h_matches: Iterable[Any],
) -> EnrichmentResult:
    """Enrich one fixture; any failure yields a degraded record instead of raising."""
    try:
        record = build_enriched_record(fixture, home_matches, away_matches, h2h_matches)
    except Exception as exc:
        return _degrade(fixture, exc)
    return EnrichmentResult(record=dict(record))


def enrich_fixture_safely(fixture: Mapping[str, Any], loader: Callable[[], MatchLists]) -> EnrichmentResult:
    """
    Load the fixture's match lists through ``loader`` and enrich them.

    ``loader`` returns ``(home_matches, away_matches, h2h_matches)``; if it
    raises, the fixture degrades exactly as a scoring failure would.
    """
    try:
        home_matches, away_matches, h2h_matches = loader()
    except Exception as exc:
        return _degrade(fixture, exc)
    return enrich_fixture(fixture, home_matches, away_matches, h2h_matches)
