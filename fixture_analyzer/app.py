from datetime import datetime, timezone
from typing import Optional

from flask import Flask, current_app, jsonify, request

from .app_utils import make_error, make_ok
from .config import setup_logger
from .constants import FIXTURES_CACHE_CONTROL
from .errors import APIError
from .ports.match_data import MatchDataPort
from .services.fixture_batch import FixtureBatchService
from . import settings
from .validators import validate_date, validate_league_id, validate_limit

logger = setup_logger(__name__)

PROVIDER_KEY = "MATCH_DATA_PROVIDER"


def _batch_service(limit: int) -> Optional[FixtureBatchService]:
    provider = current_app.config.get(PROVIDER_KEY)
    if provider is None:
        return None
    return FixtureBatchService(provider, limit=limit)


def health():
    return make_ok({"ok": True, "ts": datetime.now(timezone.utc).isoformat()}, message="OK")


def fixtures():
    date_iso, warnings = validate_date(request.args.get("date"))
    league, league_warnings = validate_league_id(request.args.get("league"))
    limit, limit_warnings = validate_limit(request.args.get("limit"), default=settings.FIXTURES_BATCH_LIMIT)
    warnings = warnings + league_warnings + limit_warnings

    service = _batch_service(limit)
    if service is None:
        logger.error("fixtures_provider_missing")
        return make_error(
            APIError("fixtures", "PROVIDER_UNCONFIGURED", "No match data provider configured"),
            message="Service unavailable",
            status_code=503,
        )

    try:
        payload = service.load_day(date_iso, league=league)
    except APIError as exc:
        logger.error("fixtures_request_failed date=%s code=%s", date_iso, exc.code)
        response = jsonify({"error": "Failed to fetch data", "details": exc.details or exc.message})
        return response, 500

    if warnings:
        payload["warnings"] = [str(w) for w in warnings]

    response = jsonify(payload)
    response.headers["Cache-Control"] = FIXTURES_CACHE_CONTROL
    return response, 200


def create_app(provider: Optional[MatchDataPort] = None) -> Flask:
    """Build the Flask app around an injected match-data provider."""
    app = Flask(__name__)
    app.config[PROVIDER_KEY] = provider
    app.add_url_rule("/health", "health", health, methods=["GET"])
    app.add_url_rule("/api/fixtures", "fixtures", fixtures, methods=["GET"])
    return app


app = create_app()
