"""Configuration facade for safe-backup."""

from pathlib import Path

from safe_backup.config.settings import SettingsManager
from safe_backup.types import Settings


class ConfigManager:
    """Facade that coordinates configuration access.

    Settings are loaded once and cached; call ``reload_settings`` to
    pick up changes made on disk.
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize configuration manager.

        Args:
            config_dir: Optional custom config directory.
                Defaults to Paths.config_dir()
        """
        self.settings_manager = SettingsManager(config_dir)
        self._settings: Settings | None = None

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        return self.settings_manager.config_dir

    @property
    def settings_file(self) -> Path:
        """Get the settings file path."""
        return self.settings_manager.settings_file

    def load_settings(self) -> Settings:
        """Load settings, using the cached copy when available."""
        if self._settings is None:
            self._settings = self.settings_manager.load_settings()
        return self._settings

    def reload_settings(self) -> Settings:
        """Discard the cached settings and load them again."""
        self._settings = None
        return self.load_settings()

    def save_settings(self, settings: Settings) -> None:
        """Save settings to the INI file and refresh the cache."""
        self.settings_manager.save_settings(settings)
        self._settings = settings
