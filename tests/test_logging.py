"""Tests for logging configuration."""

import logging
import logging.handlers

import pytest

from venuekit.logging import configure_logging, logger_levels


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_console_and_rotating_file(tmp_path, monkeypatch, restore_root_logger):
    """Test the level comes from the environment and a rotating file is added."""
    monkeypatch.setenv("VENUEKIT_LOG_LEVEL", "debug")

    configure_logging(tmp_path / "logs")
    logging.getLogger("venuekit.test").debug("hello")

    root = restore_root_logger
    assert root.level == logging.DEBUG
    file_handlers = [h for h in root.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].maxBytes == 10 * 1024 * 1024
    assert file_handlers[0].backupCount == 5
    file_handlers[0].flush()
    assert "hello" in (tmp_path / "logs" / "venuekit.log").read_text(encoding="utf-8")


def test_repeated_calls_do_not_duplicate_handlers(restore_root_logger):
    configure_logging()
    configure_logging()

    assert len(restore_root_logger.handlers) == 1


def test_per_logger_levels(monkeypatch, restore_root_logger):
    """Test one adapter can log below the root level."""
    monkeypatch.setenv("VENUEKIT_LOG_LEVEL", "WARNING")
    monkeypatch.setenv("VENUEKIT_LOG_LEVEL__EXCHANGES__NASH", "debug")
    nash_logger = logging.getLogger("venuekit.exchanges.nash")
    previous = nash_logger.level

    try:
        configure_logging()

        assert restore_root_logger.level == logging.WARNING
        assert nash_logger.getEffectiveLevel() == logging.DEBUG
        assert logging.getLogger("venuekit.exchanges.coinbase").getEffectiveLevel() == logging.WARNING
        assert all(handler.level == logging.NOTSET for handler in restore_root_logger.handlers)
    finally:
        nash_logger.setLevel(previous)


def test_logger_levels_from_environment():
    """Test names map below the venuekit logger and unknown levels fall back to INFO."""
    levels = logger_levels({"VENUEKIT_LOG_LEVEL__CLI": "error", "VENUEKIT_LOG_LEVEL__CONFIG": "loud", "OTHER": "x"})

    assert levels == {"venuekit.cli": logging.ERROR, "venuekit.config": logging.INFO}
