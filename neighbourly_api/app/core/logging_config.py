"""
Logging configuration for the API process.

Application modules log through ``logging.getLogger(__name__)`` and
propagate to the root logger configured here.  The Mongo driver and the
SMTP client are chatty at DEBUG, so they are held at WARNING unless the
application itself runs at DEBUG; uvicorn's loggers are routed through
the same root handlers so request and application lines share a format.
"""

import logging
from pathlib import Path
from typing import Dict, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers and the level they are clamped to
LIBRARY_LEVELS: Dict[str, int] = {
    "pymongo": logging.WARNING,
    "aiosmtplib": logging.WARNING,
}

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _handlers(logfile: Optional[str]) -> list:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_library_loggers(level: int) -> None:
    """Clamp noisy third-party loggers and send uvicorn's through root."""
    for name, floor in LIBRARY_LEVELS.items():
        logging.getLogger(name).setLevel(level if level <= logging.DEBUG else max(level, floor))
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> int:
    """Configure logging for the process and return the numeric level.

    Library loggers are adjusted on every call.  Root handlers are only
    attached when the root logger has none yet, so repeated
    ``create_app`` calls (tests, reloads) do not duplicate output.
    Unknown level names fall back to ``INFO``.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    configure_library_loggers(numeric_level)

    root = logging.getLogger()
    if not root.handlers:
        root.setLevel(numeric_level)
        for handler in _handlers(logfile):
            root.addHandler(handler)
    return numeric_level
