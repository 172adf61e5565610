"""Tests for the package logging setup."""

import logging

import pytest

from event_management_api.app.core.config import Settings
from event_management_api.app.core.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:], logger.level, logger.propagate = saved


def test_setup_applies_level_from_settings(package_logger):
    logger = setup_logging(Settings(log_level="debug", log_file=""))
    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_unknown_level_falls_back_to_info(package_logger):
    assert setup_logging(Settings(log_level="chatty", log_file="")).level == logging.INFO


def test_repeated_setup_does_not_duplicate_handlers(package_logger, tmp_path):
    settings = Settings(log_level="INFO", log_file=str(tmp_path / "app.log"))
    setup_logging(settings)
    setup_logging(settings)
    kinds = [type(handler) for handler in package_logger.handlers]
    assert kinds.count(logging.StreamHandler) == 1
    assert kinds.count(logging.FileHandler) == 1


def test_module_loggers_write_to_log_file(package_logger, tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(Settings(log_level="INFO", log_file=str(log_file)))
    logging.getLogger(f"{PACKAGE_LOGGER}.app.services.event_service").info("Created event abc")
    for handler in package_logger.handlers:
        handler.flush()
    assert "Created event abc" in log_file.read_text(encoding="utf-8")
