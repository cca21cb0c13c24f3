"""Path constants and utilities for safe-backup configuration.

This module centralizes the locations of the settings file and the
diagnostic log directory so they can be overridden consistently.
"""

import os
from pathlib import Path

from safe_backup.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    ENV_CONFIG_DIR,
)
from safe_backup.logger.config import default_log_path


class Paths:
    """Application paths and directory structure.

    Directories are computed on access so that the environment overrides
    (``SAFE_BACKUP_CONFIG_DIR``, ``SAFE_BACKUP_LOG_DIR``) take effect
    even after import.
    """

    @classmethod
    def config_dir(cls) -> Path:
        """Get the configuration directory.

        Returns:
            ``$SAFE_BACKUP_CONFIG_DIR`` if set, else
            ``~/.config/safe-backup``
        """
        env_dir = os.getenv(ENV_CONFIG_DIR)
        if env_dir:
            return cls.expand_path(env_dir)
        return Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def settings_file(cls) -> Path:
        """Get path to the INI settings file."""
        return cls.config_dir() / CONFIG_FILE_NAME

    @classmethod
    def logs_dir(cls) -> Path:
        """Get the diagnostic log directory.

        Returns:
            ``$SAFE_BACKUP_LOG_DIR`` if set, else ``<config_dir>/logs``
        """
        return cls.log_file().parent

    @classmethod
    def log_file(cls) -> Path:
        """Get path to the rotating diagnostic log file."""
        return default_log_path()

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand and resolve path with ~ and relative path support.

        Args:
            path_str: Path string to expand (e.g., "~/my-path" or "./relative")

        Returns:
            Expanded and resolved Path object

        Example:
            >>> Paths.expand_path("~/Documents")
            Path('/home/user/Documents')
        """
        return Path(path_str).expanduser().resolve(strict=False)
