from fixture_analyzer import validators
from fixture_analyzer.validators import validate_date, validate_league_id, validate_limit


def test_validate_date_accepts_iso_and_datetime_prefix():
    assert validate_date("2024-09-14") == ("2024-09-14", [])
    assert validate_date("2024-09-14T10:00:00Z") == ("2024-09-14", [])


def test_validate_date_defaults_to_today(monkeypatch):
    monkeypatch.setattr(validators, "today_iso", lambda: "2024-01-01")

    assert validate_date(None) == ("2024-01-01", [])
    value, warnings = validate_date("14/09/2024")
    assert value == "2024-01-01"
    assert warnings == ["date_invalid:14/09/2024"]


def test_validate_league_id():
    assert validate_league_id(None) == (None, [])
    assert validate_league_id(" 39 ") == ("39", [])
    assert validate_league_id("039") == ("39", [])
    value, warnings = validate_league_id("EPL")
    assert value is None
    assert warnings == ["league_invalid:EPL"]


def test_validate_limit_clamps():
    assert validate_limit(None, default=15) == (15, [])
    assert validate_limit("5", default=15) == (5, [])
    assert validate_limit("0", default=15) == (1, ["limit_floor"])
    assert validate_limit("500", default=15) == (50, ["limit_cap"])
    assert validate_limit("many", default=15) == (15, ["limit_invalid"])
