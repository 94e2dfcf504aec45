import logging
from logging.handlers import RotatingFileHandler

import pytest

from fixture_analyzer import config, settings
from fixture_analyzer.logging_utils import defaulted_leagues, reset_league_defaults, warn_league_default


class _ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


@pytest.fixture(autouse=True)
def _reset_league_defaults():
    reset_league_defaults()
    yield
    reset_league_defaults()


def test_league_default_warns_once_per_league():
    logger = logging.getLogger("tests.league_default")
    handler = _ListHandler()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    assert warn_league_default(94, 0.12, logger=logger) is True
    assert warn_league_default(94, 0.12, logger=logger) is False
    assert warn_league_default(None, 0.12, logger=logger) is True

    assert handler.messages == [
        "home_advantage_default league=94 advantage=0.12",
        "home_advantage_default league=None advantage=0.12",
    ]
    assert defaulted_leagues() == {94, None}
    logger.removeHandler(handler)


def test_setup_logger_propagates_when_root_is_configured():
    root = logging.getLogger()
    assert root.handlers

    logger = config.setup_logger("tests.propagating")

    assert logger.propagate is True
    assert not any(isinstance(h, RotatingFileHandler) for h in logger.handlers)


def test_setup_logger_falls_back_to_rotating_file(monkeypatch, tmp_path):
    log_file = tmp_path / "logs" / "analyzer.log"
    monkeypatch.setattr(settings, "LOG_FILE", str(log_file))
    monkeypatch.setattr(logging.getLogger(), "handlers", [])

    logger = config.setup_logger("tests.file_sink")
    try:
        handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1
        assert handlers[0].maxBytes == settings.LOG_FILE_MAX_BYTES
        assert handlers[0].backupCount == settings.LOG_FILE_BACKUPS
        assert logger.propagate is False

        config.setup_logger("tests.file_sink")
        assert len([h for h in logger.handlers if isinstance(h, RotatingFileHandler)]) == 1

        logger.warning("fixture_enrich_failed id=%s", 9)
        handlers[0].flush()
        assert "fixture_enrich_failed id=9" in log_file.read_text()
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = True
