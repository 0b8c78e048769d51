# /student-records/app/utils/logger.py

"""
Logging setup for the Student Records API.

Every application module logs through `get_logger(__name__)`, which hangs off
the "app" logger. The level comes from `LOG_LEVEL`; the chatty SQLAlchemy
engine and uvicorn access loggers are held at WARNING unless the app itself
runs at DEBUG, so one request does not print every SQL statement.
"""

import logging
import sys

from app.config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that follow the app's level only when debugging.
_NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")

_initialized = False


def resolve_level(name: str) -> int:
    """Maps a level name such as "debug" to its number; unknown names give INFO."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _init_logging() -> None:
    global _initialized
    if _initialized:
        return

    level = resolve_level(LOG_LEVEL)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))

    app_logger = logging.getLogger("app")
    app_logger.setLevel(level)
    app_logger.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else logging.WARNING)

    _initialized = True
    if level == logging.INFO and str(LOG_LEVEL).strip().upper() != "INFO":
        app_logger.warning(f"Unknown LOG_LEVEL {LOG_LEVEL!r}, using INFO")


def get_logger(name: str) -> logging.Logger:
    _init_logging()
    return logging.getLogger(name)
