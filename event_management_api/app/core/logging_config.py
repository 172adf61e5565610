"""
Logging configuration for the application.

All modules log through children of the ``event_management_api``
logger (``logging.getLogger(__name__)``).  ``setup_logging`` gives that
logger its handlers from ``Settings``: a console handler always, and a
file handler when ``LOG_FILE`` is set.  The root logger is left to the
ASGI server, so uvicorn's own output is not duplicated.
"""

import logging
from pathlib import Path

from .config import Settings

PACKAGE_LOGGER = "event_management_api"

_formatter = logging.Formatter(
    fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def _has_handler(logger: logging.Logger, kind: type, path: str = "") -> bool:
    for handler in logger.handlers:
        if type(handler) is not kind:
            continue
        if not path or getattr(handler, "baseFilename", "") == path:
            return True
    return False


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the package logger from ``settings`` and return it.

    Safe to call repeatedly (``create_app`` runs once per application,
    the test-suite builds many): the level is re-applied every time but
    each handler is attached only once.  Unknown level names fall back
    to ``INFO``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    logger.propagate = False

    if not _has_handler(logger, logging.StreamHandler):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_formatter)
        logger.addHandler(console_handler)

    if settings.log_file:
        log_path = str(Path(settings.log_file).resolve())
        if not _has_handler(logger, logging.FileHandler, log_path):
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(_formatter)
            logger.addHandler(file_handler)

    return logger
