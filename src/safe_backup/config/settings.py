"""Settings manager for the INI configuration file."""

import configparser
from pathlib import Path

from safe_backup.config.paths import Paths
from safe_backup.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_ACTIVITY_LOG_FILENAME,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    KEY_ACTIVITY_LOG_FILE,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    SECTION_ACTIVITY,
    SECTION_DEFAULT,
    VALID_LOG_LEVELS,
)
from safe_backup.exceptions import ConfigurationError
from safe_backup.logger import get_logger
from safe_backup.types import ActivityConfig, Settings

logger = get_logger(__name__)

_FILE_HEADER = """\
# safe-backup settings
#
# log_level          level written to the rotating diagnostic log file
# console_log_level  level printed to the terminal
# [activity]
# log_file           activity log, relative to the working directory

"""


def _new_parser() -> configparser.ConfigParser:
    return configparser.ConfigParser(
        inline_comment_prefixes=("#", ";"),
        interpolation=None,
    )


class SettingsManager:
    """Manages the global INI settings file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.config_dir())

        """
        self.config_dir = config_dir or Paths.config_dir()
        self.settings_file = self.config_dir / CONFIG_FILE_NAME

    def get_default_settings(self) -> Settings:
        """Get default settings values."""
        return Settings(
            log_level=DEFAULT_LOG_LEVEL,
            console_log_level=DEFAULT_CONSOLE_LOG_LEVEL,
            activity=ActivityConfig(log_file=DEFAULT_ACTIVITY_LOG_FILENAME),
        )

    def load_settings(self) -> Settings:
        """Load settings from the INI file.

        A settings file with defaults is written when none exists.

        Returns:
            Loaded settings

        Raises:
            ConfigurationError: If the file cannot be parsed or holds an
                invalid value

        """
        defaults = self.get_default_settings()
        if not self.settings_file.exists():
            try:
                self.save_settings(defaults)
            except OSError as e:
                # Read-only home directories still get working defaults
                logger.warning(
                    "Could not write default settings to %s: %s",
                    self.settings_file,
                    e,
                )
            return defaults

        parser = _new_parser()
        try:
            parser.read(self.settings_file, encoding="utf-8")
        except configparser.Error as e:
            msg = f"cannot parse {self.settings_file}: {e}"
            raise ConfigurationError(msg) from e

        settings = self._convert_to_settings(parser, defaults)
        logger.debug("Loaded settings from %s", self.settings_file)
        return settings

    def save_settings(self, settings: Settings) -> None:
        """Save settings to the INI file with a commented header.

        Args:
            settings: Settings to save

        """
        self.config_dir.mkdir(parents=True, exist_ok=True)
        parser = _new_parser()
        parser.read_dict(
            {
                SECTION_DEFAULT: {
                    KEY_LOG_LEVEL: settings["log_level"],
                    KEY_CONSOLE_LOG_LEVEL: settings["console_log_level"],
                },
                SECTION_ACTIVITY: {
                    KEY_ACTIVITY_LOG_FILE: settings["activity"]["log_file"],
                },
            }
        )
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(_FILE_HEADER)
            parser.write(f)

    def _convert_to_settings(
        self, parser: configparser.ConfigParser, defaults: Settings
    ) -> Settings:
        """Convert a parsed INI file to typed settings.

        Raises:
            ConfigurationError: If a log level is unknown or the activity
                log file name is empty

        """
        log_level = parser.get(
            SECTION_DEFAULT, KEY_LOG_LEVEL, fallback=defaults["log_level"]
        ).upper()
        console_log_level = parser.get(
            SECTION_DEFAULT,
            KEY_CONSOLE_LOG_LEVEL,
            fallback=defaults["console_log_level"],
        ).upper()
        for key, level in (
            (KEY_LOG_LEVEL, log_level),
            (KEY_CONSOLE_LOG_LEVEL, console_log_level),
        ):
            if level not in VALID_LOG_LEVELS:
                msg = f"{key} must be one of {', '.join(VALID_LOG_LEVELS)}"
                raise ConfigurationError(msg, target=level)

        activity_file = parser.get(
            SECTION_ACTIVITY,
            KEY_ACTIVITY_LOG_FILE,
            fallback=defaults["activity"]["log_file"],
        ).strip()
        if not activity_file:
            msg = f"[{SECTION_ACTIVITY}] {KEY_ACTIVITY_LOG_FILE} is empty"
            raise ConfigurationError(msg)

        return Settings(
            log_level=log_level,
            console_log_level=console_log_level,
            activity=ActivityConfig(log_file=activity_file),
        )
