"""
Configuration manager.

Loads, validates and caches the logging configuration. A missing file
yields default settings.
"""

import logging
from pathlib import Path
from typing import Optional

from sqladminlog.domain.config import LoggingSettings
from sqladminlog.infrastructure.config.repository import ConfigRepository

logger = logging.getLogger(__name__)

LOGGING_CONFIG_FILE = "logging_config"


class ConfigManager:
    """
    High-level access to the logging configuration.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the config manager.

        Args:
            config_dir: Base directory for configuration files.
                       Defaults to 'config' subdirectory of current working directory.
        """
        if config_dir is None:
            config_dir = Path.cwd() / "config"

        self.config_dir = Path(config_dir)
        self.repository = ConfigRepository(self.config_dir)
        self._logging_settings: Optional[LoggingSettings] = None

    def load_logging_settings(self, force_reload: bool = False) -> LoggingSettings:
        """
        Load logging settings.

        Args:
            force_reload: Whether to force reload from disk

        Returns:
            LoggingSettings domain model

        Raises:
            ValueError: If the file cannot be parsed
            pydantic.ValidationError: If the content is invalid
        """
        if self._logging_settings is not None and not force_reload:
            return self._logging_settings

        if not self.repository.exists(LOGGING_CONFIG_FILE):
            logger.info("No %s file in %s, using defaults", LOGGING_CONFIG_FILE, self.config_dir)
            self._logging_settings = LoggingSettings()
            return self._logging_settings

        data = self.repository.load_json_file(LOGGING_CONFIG_FILE)
        self._logging_settings = LoggingSettings.model_validate(data)
        logger.info(
            "Loaded logging config: %d providers, interval %dms",
            len(self._logging_settings.providers), self._logging_settings.interval_ms
        )
        return self._logging_settings

    def save_logging_settings(self, settings: LoggingSettings) -> Path:
        """Persist settings as JSON and update the cache."""
        path = self.repository.save_json_file(
            LOGGING_CONFIG_FILE, settings.model_dump(mode="json")
        )
        self._logging_settings = settings
        return path
