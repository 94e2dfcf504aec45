from typing import Any, Dict, List, Optional, TypedDict, NotRequired


class AnalysisPayload(TypedDict):
    recommendation: str
    confidence: int
    advice: str
    probabilities: NotRequired[Dict[str, int]]


class FixtureInfo(TypedDict):
    id: Optional[int]
    date: Optional[str]
    venue: str
    status: Optional[Dict[str, Any]]


class LeagueInfo(TypedDict):
    id: Optional[int]
    name: Optional[str]
    country: Optional[str]
    logo: Optional[str]


class TeamInfo(TypedDict):
    id: Optional[int]
    name: Optional[str]
    logo: Optional[str]


class EnrichedFixtureRecord(TypedDict):
    fixture: FixtureInfo
    league: LeagueInfo
    teams: Dict[str, TeamInfo]
    goals: Optional[Dict[str, Optional[int]]]
    odds: Optional[List[Dict[str, Any]]]
    analysis: AnalysisPayload
    stats: Dict[str, Dict[str, Any]]
    h2h: List[Dict[str, Any]]
    form: Dict[str, List[str]]


class DegradedFixtureRecord(TypedDict):
    # Original provider sections, passed through untouched
    fixture: Any
    league: Any
    teams: Any
    goals: Any
    analysis: AnalysisPayload
