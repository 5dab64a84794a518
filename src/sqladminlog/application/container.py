"""
Dependency injection container for the application.

Creates the config manager and a LoggingService with the providers
declared in the logging configuration already registered.
"""

import logging
from pathlib import Path
from typing import Optional

from sqladminlog.domain.config import LoggingSettings
from sqladminlog.infrastructure.config.manager import ConfigManager
from sqladminlog.infrastructure.providers import build_provider

from .logging_service import LoggingService

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency injection container.

    Manages the creation and lifecycle of application services and infrastructure components.
    """

    def __init__(self, config_dir: Optional[Path] = None, settings: Optional[LoggingSettings] = None):
        """
        Initialize the container.

        Args:
            config_dir: Base directory for configuration files
            settings: Logging settings (overrides the config file)
        """
        self.config_dir = Path(config_dir) if config_dir else Path.cwd() / "config"
        self._settings_override = settings
        self._config_manager: Optional[ConfigManager] = None
        self._logging_service: Optional[LoggingService] = None

    @property
    def config_manager(self) -> ConfigManager:
        """Get the configuration manager."""
        if self._config_manager is None:
            self._config_manager = ConfigManager(self.config_dir)
        return self._config_manager

    @property
    def settings(self) -> LoggingSettings:
        if self._settings_override is not None:
            return self._settings_override
        return self.config_manager.load_logging_settings()

    @property
    def logging_service(self) -> LoggingService:
        """Get the logging service, with configured providers registered."""
        if self._logging_service is None:
            self._logging_service = self._create_logging_service(self.settings)
        return self._logging_service

    @staticmethod
    def _create_logging_service(settings: LoggingSettings) -> LoggingService:
        service = LoggingService(settings)
        for provider_settings in settings.providers:
            service.register_provider(
                provider_settings.name,
                build_provider(provider_settings),
                enabled=provider_settings.enabled,
            )
            logger.debug(
                "Configured provider %s (%s, enabled=%s)",
                provider_settings.name, provider_settings.type.value, provider_settings.enabled
            )
        return service
