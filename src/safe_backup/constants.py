"""Centralized constants module for safe-backup.

This module is the single source of truth for shared literals. Artifact
naming constants are part of the on-disk format and must not change.

Usage:
    from safe_backup.constants import BACKUP_SUFFIX
"""

from typing import Final

# =============================================================================
# Backup Artifact Naming (on-disk format)
# =============================================================================

# Suffix shared by timestamped and plain backup artifacts
BACKUP_SUFFIX: Final[str] = ".bak"

# Marker inserted into the destination name when restoring a plain backup
RESTORED_MARKER: Final[str] = "restored"

# Largest timestamp accepted from a backup file name (unsigned 64-bit)
MAX_TIMESTAMP: Final[int] = 2**64 - 1

# =============================================================================
# Activity Log
# =============================================================================

ACTION_BACKUP: Final[str] = "backup"
ACTION_RESTORE: Final[str] = "restore"
ACTION_DELETE: Final[str] = "delete"
ACTIONS: Final[tuple[str, ...]] = (
    ACTION_BACKUP,
    ACTION_RESTORE,
    ACTION_DELETE,
)

RESULT_OK: Final[str] = "ok"

DEFAULT_ACTIVITY_LOG_FILENAME: Final[str] = "logfile.txt"

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "safe-backup"

# Environment overrides (used to isolate test runs)
ENV_CONFIG_DIR: Final[str] = "SAFE_BACKUP_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "SAFE_BACKUP_LOG_DIR"

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_ACTIVITY: Final[str] = "activity"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_ACTIVITY_LOG_FILE: Final[str] = "log_file"

# =============================================================================
# Logging Constants
# =============================================================================

LOGGER_ROOT_NAME: Final[str] = "safe_backup"
LOG_FILE_NAME: Final[str] = "safe-backup.log"

# Maximum size for rotated log files (bytes)
LOG_MAX_FILE_SIZE_BYTES: Final[int] = 1024 * 1024  # 1 MB

# Number of rotated log files to keep
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# Interactive Prompt
# =============================================================================

PROMPT_FILENAME: Final[str] = "Please enter your file name: "
PROMPT_COMMAND: Final[str] = (
    "Please enter your command (backup, restore, delete): "
)
EXIT_WORDS: Final[tuple[str, ...]] = ("exit", "quit")
