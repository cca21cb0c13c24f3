"""Tests for logger setup and teardown."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from safe_backup.exceptions import ConfigurationError
from safe_backup.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    get_state,
    setup_file_logging,
    setup_logging,
)
from safe_backup.logger.handlers import create_file_handler


@pytest.fixture(autouse=True)
def fresh_logger():
    """Reset logger state before and after each test."""
    clear_logger_state()
    yield
    clear_logger_state()


def test_get_logger_returns_child(tmp_path: Path) -> None:
    """Test module loggers live under the safe_backup root."""
    logger = get_logger("safe_backup.core.test")
    assert logger.name == "safe_backup.core.test"
    assert get_state().root_initialized
    assert get_state().file_handler is None


def test_root_initialized_once(tmp_path: Path) -> None:
    """Test repeated setup does not add handlers."""
    setup_logging(log_file=tmp_path / "a.log")
    setup_logging(log_file=tmp_path / "b.log")

    root = logging.getLogger("safe_backup")
    assert len(root.handlers) == 2
    assert not (tmp_path / "b.log").exists()


def test_setup_file_logging_writes(tmp_path: Path) -> None:
    """Test enabling file logging after startup writes records."""
    get_logger("safe_backup.test")
    log_file = tmp_path / "logs" / "safe-backup.log"

    setup_file_logging(log_file=log_file, file_level="DEBUG")
    setup_file_logging(log_file=tmp_path / "other.log")
    logging.getLogger("safe_backup.test").debug("written %d", 1)
    flush_all_handlers()

    assert isinstance(get_state().file_handler, RotatingFileHandler)
    assert "written 1" in log_file.read_text()
    assert not (tmp_path / "other.log").exists()


def test_file_handler_error(tmp_path: Path) -> None:
    """Test an unusable log location raises ConfigurationError."""
    blocker = tmp_path / "file"
    blocker.write_text("x")
    with pytest.raises(ConfigurationError, match="file logging"):
        create_file_handler(blocker / "sub" / "x.log", "INFO")


def test_clear_logger_state(tmp_path: Path) -> None:
    """Test clearing detaches handlers and resets flags."""
    setup_logging(log_file=tmp_path / "a.log")
    clear_logger_state()

    state = get_state()
    assert not state.root_initialized
    assert state.handlers == []
    assert logging.getLogger("safe_backup").handlers == []
