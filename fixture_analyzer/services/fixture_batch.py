from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..config import setup_logger
from ..constants import FORM_FETCH_LAST, H2H_WINDOW, NO_FIXTURES_MESSAGE
from ..enrichment import EnrichmentResult, MatchLists, enrich_fixture_safely
from ..errors import APIError
from ..ports.match_data import MatchDataPort
from .. import settings

logger = setup_logger(__name__)


def _league_id(record: Mapping[str, Any]) -> Optional[str]:
    league = record.get("league")
    if not isinstance(league, Mapping) or league.get("id") is None:
        return None
    return str(league.get("id"))


class FixtureBatchService:
    """
    Enriches a day's fixtures against an injected match-data provider.

    Only the first ``limit`` fixtures are processed; the rest are never
    started. Every fixture is enriched on its own worker and the three
    history lookups of a fixture run concurrently. Results come back in the
    provider's original order.
    """

    def __init__(
        self,
        provider: MatchDataPort,
        limit: Optional[int] = None,
        max_workers: Optional[int] = None,
    ) -> None:
        self.provider = provider
        self.limit = max(0, limit if limit is not None else settings.FIXTURES_BATCH_LIMIT)
        self.max_workers = max(1, max_workers or settings.ENRICH_MAX_WORKERS)

    def _load_histories(self, fixture: Mapping[str, Any]) -> MatchLists:
        home_id = fixture["teams"]["home"]["id"]
        away_id = fixture["teams"]["away"]["id"]
        with ThreadPoolExecutor(max_workers=3) as executor:
            h2h = executor.submit(self.provider.head_to_head, home_id, away_id, H2H_WINDOW)
            home_form = executor.submit(self.provider.team_form, home_id, FORM_FETCH_LAST)
            away_form = executor.submit(self.provider.team_form, away_id, FORM_FETCH_LAST)
            return home_form.result(), away_form.result(), h2h.result()

    def enrich_one(self, fixture: Mapping[str, Any]) -> EnrichmentResult:
        return enrich_fixture_safely(fixture, lambda: self._load_histories(fixture))

    def enrich_results(self, fixtures: Sequence[Mapping[str, Any]]) -> List[EnrichmentResult]:
        batch = list(fixtures or [])[: self.limit]
        if not batch:
            return []
        workers = min(self.max_workers, len(batch))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            # map() yields in submission order regardless of completion order
            results = list(executor.map(self.enrich_one, batch))
        degraded = sum(1 for r in results if r.degraded)
        if degraded:
            logger.warning("fixture_batch_degraded: %d/%d", degraded, len(results))
        return results

    def enrich(self, fixtures: Sequence[Mapping[str, Any]], league: Optional[str] = None) -> List[Dict[str, Any]]:
        """Enriched records for the capped batch, optionally filtered by league id."""
        records = [result.record for result in self.enrich_results(fixtures)]
        if league:
            records = [r for r in records if _league_id(r) == str(league)]
        return records

    def load_day(self, date_iso: str, league: Optional[str] = None) -> Dict[str, Any]:
        """Fetch the day's fixtures from the provider and build the response payload."""
        try:
            fixtures = self.provider.fixtures_on(date_iso)
        except APIError:
            raise
        except Exception as exc:
            logger.error("fixtures_fetch_failed date=%s err=%s", date_iso, exc)
            raise APIError("fixtures", "UPSTREAM_ERROR", "Failed to fetch data", details=str(exc)) from exc

        if not fixtures:
            logger.info("fixtures_empty date=%s", date_iso)
            return {"fixtures": [], "message": NO_FIXTURES_MESSAGE}

        logger.info("fixtures_loaded date=%s total=%d limit=%d", date_iso, len(fixtures), self.limit)
        records = self.enrich(fixtures, league=league)
        return {"fixtures": records, "count": len(records), "date": date_iso}
