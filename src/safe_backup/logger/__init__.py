"""Logging utilities for safe-backup.

This package provides diagnostic logging, separate from the activity
log that records user operations:
- Colored console output (bare message for INFO)
- Rotating file output, enabled by the CLI once settings are loaded
- Hierarchical logger naming (e.g., safe_backup.core.locator)

Usage:
    >>> from safe_backup.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Restored %s", name)  # Use %-style formatting

Environment Variables:
    SAFE_BACKUP_LOG_DIR: Override the log directory (used by tests)

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Never use f-strings in log calls
"""

from safe_backup.logger.config import (
    update_logger_from_config as _update_config,
)
from safe_backup.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from safe_backup.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_file_logging,
    setup_logging,
)
from safe_backup.logger.state import _state, get_state
from safe_backup.types import Settings

__all__ = [
    "ColoredConsoleFormatter",
    "HybridConsoleFormatter",
    "_state",  # For testing only
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_file_logging",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(settings: Settings | None = None) -> None:
    """Update logger handler levels from the settings file.

    Convenience wrapper around the internal updater using the global
    state singleton.

    Args:
        settings: Already loaded settings (loaded from disk if None)

    """
    _update_config(get_state(), settings)
