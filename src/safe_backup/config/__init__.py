"""Configuration management - settings and path utilities.

This package provides:
- ConfigManager: Facade for configuration operations
- SettingsManager: INI settings management (from settings.py)
- Paths: Path utilities honouring environment overrides (from paths.py)
"""

from safe_backup.config.config import ConfigManager
from safe_backup.config.paths import Paths
from safe_backup.config.settings import SettingsManager
from safe_backup.types import Settings

__all__ = [
    "ConfigManager",
    "Paths",
    "Settings",
    "SettingsManager",
]
