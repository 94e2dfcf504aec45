from __future__ import annotations

import threading
import time
from typing import Any, Dict, List

import pytest

from fixture_analyzer.errors import APIError
from fixture_analyzer.services.fixture_batch import FixtureBatchService


def _fixture(fixture_id: int, home_id: int, away_id: int, league_id: int = 39) -> Dict[str, Any]:
    return {
        "fixture": {"id": fixture_id, "date": "2024-09-14T14:00:00+00:00", "venue": {"name": "Ground"}, "status": {"short": "NS"}},
        "league": {"id": league_id, "name": "League", "country": "Nowhere", "logo": None},
        "teams": {
            "home": {"id": home_id, "name": f"Team {home_id}", "logo": None},
            "away": {"id": away_id, "name": f"Team {away_id}", "logo": None},
        },
        "goals": {"home": None, "away": None},
    }


def _match(home_id, away_id, home_goals, away_goals):
    return {
        "teams": {"home": {"id": home_id}, "away": {"id": away_id}},
        "goals": {"home": home_goals, "away": away_goals},
    }


class FakeProvider:
    def __init__(self, fixtures=None, failing_teams=(), delays=None):
        self.fixtures = fixtures or []
        self.failing_teams = set(failing_teams)
        self.delays = delays or {}
        self.form_calls: List[int] = []
        self.h2h_calls: List[tuple] = []
        self._lock = threading.Lock()

    def fixtures_on(self, date_iso):
        return list(self.fixtures)

    def team_form(self, team_id, last=10):
        with self._lock:
            self.form_calls.append(team_id)
        time.sleep(self.delays.get(team_id, 0))
        if team_id in self.failing_teams:
            raise RuntimeError(f"form fetch failed for {team_id}")
        return [_match(team_id, 999, 2, 0)]

    def head_to_head(self, home_id, away_id, last=10):
        with self._lock:
            self.h2h_calls.append((home_id, away_id, last))
        return [_match(home_id, away_id, 1, 0)]


def test_results_keep_original_order_despite_completion_order():
    fixtures = [_fixture(i, 100 + i, 200 + i) for i in range(1, 6)]
    # Earlier fixtures finish last
    delays = {100 + i: 0.05 * (6 - i) for i in range(1, 6)}
    provider = FakeProvider(fixtures, delays=delays)

    records = FixtureBatchService(provider, limit=15, max_workers=5).enrich(fixtures)

    assert [r["fixture"]["id"] for r in records] == [1, 2, 3, 4, 5]
    assert all(r["form"]["home"][0] == "W" for r in records)


def test_fixtures_beyond_the_cap_are_never_started():
    fixtures = [_fixture(i, 100 + i, 200 + i) for i in range(1, 21)]
    provider = FakeProvider(fixtures)

    records = FixtureBatchService(provider, limit=15).enrich(fixtures)

    assert len(records) == 15
    assert sorted(provider.form_calls) == sorted([100 + i for i in range(1, 16)] + [200 + i for i in range(1, 16)])
    assert {call[0] for call in provider.h2h_calls} == {100 + i for i in range(1, 16)}
    assert all(call[2] == 10 for call in provider.h2h_calls)


def test_failing_fetch_degrades_only_that_fixture():
    fixtures = [_fixture(1, 10, 20), _fixture(2, 30, 40), _fixture(3, 50, 60)]
    provider = FakeProvider(fixtures, failing_teams={40})

    results = FixtureBatchService(provider).enrich_results(fixtures)

    assert [r.degraded for r in results] == [False, True, False]
    degraded = results[1].record
    assert degraded["analysis"]["recommendation"] == "DATA UNAVAILABLE"
    assert degraded["analysis"]["confidence"] == 0
    assert "stats" not in degraded
    assert results[0].record["analysis"]["recommendation"] != "DATA UNAVAILABLE"
    assert results[2].record["analysis"]["recommendation"] != "DATA UNAVAILABLE"


def test_league_filter_compares_ids_as_strings():
    fixtures = [_fixture(1, 10, 20, league_id=39), _fixture(2, 30, 40, league_id=140)]
    provider = FakeProvider(fixtures)

    records = FixtureBatchService(provider).enrich(fixtures, league="140")

    assert [r["fixture"]["id"] for r in records] == [2]


def test_load_day_payload():
    fixtures = [_fixture(1, 10, 20), _fixture(2, 30, 40)]
    provider = FakeProvider(fixtures)

    payload = FixtureBatchService(provider).load_day("2024-09-14")

    assert payload["date"] == "2024-09-14"
    assert payload["count"] == 2
    assert len(payload["fixtures"]) == 2


def test_load_day_without_fixtures():
    payload = FixtureBatchService(FakeProvider([])).load_day("2024-09-14")

    assert payload == {"fixtures": [], "message": "No fixtures found for this date"}


def test_load_day_wraps_provider_failure():
    class BrokenProvider(FakeProvider):
        def fixtures_on(self, date_iso):
            raise TimeoutError("upstream timed out")

    with pytest.raises(APIError) as excinfo:
        FixtureBatchService(BrokenProvider()).load_day("2024-09-14")

    assert excinfo.value.code == "UPSTREAM_ERROR"
    assert excinfo.value.details == "upstream timed out"


def test_empty_batch_skips_the_pool():
    assert FixtureBatchService(FakeProvider()).enrich_results([]) == []
