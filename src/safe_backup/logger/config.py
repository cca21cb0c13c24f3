"""Configuration loading and updating for the logging system."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from safe_backup.constants import (
    CONFIG_DIR_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_CONFIG_DIR,
    ENV_LOG_DIR,
    LOG_FILE_NAME,
)

if TYPE_CHECKING:
    from safe_backup.logger.state import _LoggerState
    from safe_backup.types import Settings


def default_log_path() -> Path:
    """Return the diagnostic log file location.

    Resolved without importing the config package, which itself logs.

    Environment Variable Override:
        SAFE_BACKUP_LOG_DIR: Log directory (used by the test suite)
        SAFE_BACKUP_CONFIG_DIR: Logs go to ``<dir>/logs`` when
        SAFE_BACKUP_LOG_DIR is unset

    Returns:
        Path of ``safe-backup.log``

    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        return Path(env_log_dir).expanduser().resolve() / LOG_FILE_NAME

    env_config_dir = os.getenv(ENV_CONFIG_DIR)
    if env_config_dir:
        config_dir = Path(env_config_dir).expanduser().resolve()
    else:
        config_dir = Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR
    return config_dir / "logs" / LOG_FILE_NAME


def load_log_settings() -> tuple[str, str, Path]:
    """Load bootstrap console level, file level, and file path.

    Settings file values are applied later by
    ``update_logger_from_config``.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, default_log_path()


def apply_levels(
    state: "_LoggerState", console_level: str, file_level: str
) -> None:
    """Set handler levels on an initialized root logger.

    Args:
        state: Logger state object
        console_level: Level name for the console handler
        file_level: Level name for the rotating file handler

    """
    for handler in state.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(getattr(logging, file_level, logging.INFO))
        else:
            handler.setLevel(getattr(logging, console_level, logging.WARNING))


def update_logger_from_config(
    state: "_LoggerState", settings: "Settings | None" = None
) -> None:
    """Update logger handler levels from the settings file.

    Only updates handler levels, never adds or removes handlers.

    Args:
        state: Logger state object (from logger.state module)
        settings: Already loaded settings (loaded from disk if None)

    Raises:
        ConfigurationError: If the settings file is invalid

    """
    if settings is None:
        # Import here to avoid circular dependency
        from safe_backup.config import ConfigManager  # noqa: PLC0415

        settings = ConfigManager().load_settings()

    apply_levels(state, settings["console_log_level"], settings["log_level"])
    state.config_applied = True
