# /tests/test_logger.py

import logging

import pytest

from app.utils import logger as app_logging


@pytest.fixture
def fresh_logging(monkeypatch):
    """Lets a test run the one-time logging setup again, then undoes it."""
    names = ("app",) + app_logging._NOISY_LOGGERS
    saved = {name: (logging.getLogger(name).level, list(logging.getLogger(name).handlers)) for name in names}
    monkeypatch.setattr(app_logging, "_initialized", False)
    yield
    for name, (level, handlers) in saved.items():
        target = logging.getLogger(name)
        target.setLevel(level)
        target.handlers = handlers


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    (" error ", logging.ERROR),
    ("verbose", logging.INFO),
    ("", logging.INFO),
])
def test_resolve_level(name, expected):
    assert app_logging.resolve_level(name) == expected


def test_unknown_log_level_falls_back_to_info(monkeypatch, fresh_logging):
    monkeypatch.setattr(app_logging, "LOG_LEVEL", "VERBOSE")
    log = app_logging.get_logger("app.tests")
    assert logging.getLogger("app").level == logging.INFO
    assert log.getEffectiveLevel() == logging.INFO


def test_third_party_loggers_are_quiet_unless_debugging(monkeypatch, fresh_logging):
    monkeypatch.setattr(app_logging, "LOG_LEVEL", "INFO")
    app_logging.get_logger("app.tests")
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    assert logging.getLogger("uvicorn.access").level == logging.WARNING

    monkeypatch.setattr(app_logging, "_initialized", False)
    monkeypatch.setattr(app_logging, "LOG_LEVEL", "DEBUG")
    app_logging.get_logger("app.tests")
    assert logging.getLogger("app").level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.DEBUG
