"""Tests for logging configuration."""

import logging

import pytest

from heatzoo.logging_config import setup_logging


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("heatzoo")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)


def test_console_handler(restore_logger):
    setup_logging(logging.WARNING)
    assert restore_logger.level == logging.WARNING
    assert len(restore_logger.handlers) == 1


def test_repeated_setup_does_not_duplicate(restore_logger):
    setup_logging()
    setup_logging()
    assert len(restore_logger.handlers) == 1


def test_log_file(restore_logger, tmp_path):
    path = tmp_path / "run.log"
    setup_logging(logging.DEBUG, log_file=str(path))
    logging.getLogger("heatzoo.solvers").info("step done")
    for handler in restore_logger.handlers:
        handler.flush()
    text = path.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "heatzoo.solvers - INFO - step done" in text
