from typing import Any, Dict, List, Protocol


class MatchDataPort(Protocol):
    """External provider of fixtures and match history (API-Football shaped)."""

    def fixtures_on(self, date_iso: str) -> List[Dict[str, Any]]: ...

    def team_form(self, team_id: int, last: int = 10) -> List[Dict[str, Any]]: ...

    def head_to_head(self, home_id: int, away_id: int, last: int = 10) -> List[Dict[str, Any]]: ...
