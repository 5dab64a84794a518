"""
Provider registry.

Holds every registered logging provider and its enabled/initialized
flags. Producers may register, enable and disable providers from any
thread while the dispatch loop reads the registry every cycle, so all
reads return snapshots taken under the lock.

Disabling a provider only stops future BeginEvent runs. A provider that
is already initialized keeps receiving messages until shutdown.
"""

from __future__ import annotations

import logging
import threading

from sqladminlog.domain.provider import (
    DEFAULT_ERROR_HISTORY,
    LoggingProvider,
    Provider,
    ProviderError,
)

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Thread-safe set of logging providers, kept in registration order."""

    def __init__(self, error_history_size: int = DEFAULT_ERROR_HISTORY):
        self.error_history_size = error_history_size
        self._providers: dict[str, Provider] = {}
        self._lock = threading.RLock()

    def register(self, name: str, hooks: LoggingProvider, enabled: bool = False) -> Provider:
        """
        Register a provider.

        Args:
            name: Unique provider name
            hooks: Implementation of the provider lifecycle hooks
            enabled: Enable immediately

        Returns:
            The new Provider record

        Raises:
            ValueError: If the name is already registered
        """
        if not name or not name.strip():
            raise ValueError("Provider name cannot be empty")
        with self._lock:
            if name in self._providers:
                raise ValueError(f"Provider already registered: {name}")
            provider = Provider(
                name=name,
                hooks=hooks,
                enabled=enabled,
                error_history_size=self.error_history_size,
            )
            self._providers[name] = provider
        logger.debug("Registered provider %s (enabled=%s)", name, enabled)
        return provider

    def unregister(self, name: str) -> None:
        """Remove a provider that has not been initialized."""
        with self._lock:
            provider = self._require(name)
            if provider.initialized:
                raise ValueError(f"Provider {name} is initialized and cannot be removed")
            del self._providers[name]
        logger.debug("Unregistered provider %s", name)

    def enable(self, name: str) -> None:
        with self._lock:
            self._require(name).enabled = True
        logger.debug("Enabled provider %s", name)

    def disable(self, name: str) -> None:
        with self._lock:
            self._require(name).enabled = False
        logger.debug("Disabled provider %s", name)

    def get(self, name: str) -> Provider:
        with self._lock:
            return self._require(name)

    def get_all(self) -> list[Provider]:
        with self._lock:
            return list(self._providers.values())

    def get_enabled(self) -> list[Provider]:
        with self._lock:
            return [p for p in self._providers.values() if p.enabled]

    def get_initialized(self) -> list[Provider]:
        with self._lock:
            return [p for p in self._providers.values() if p.initialized]

    def get_pending(self) -> list[Provider]:
        """Providers that are enabled but not yet initialized."""
        with self._lock:
            return [p for p in self._providers.values() if p.enabled and not p.initialized]

    def set_initialized(self, provider: Provider, value: bool) -> None:
        with self._lock:
            provider.initialized = value

    def record_error(self, provider: Provider, error: ProviderError) -> None:
        with self._lock:
            provider.record_error(error)

    def get_errors(self, name: str) -> list[ProviderError]:
        """Snapshot of the recent hook failures recorded for a provider."""
        with self._lock:
            return list(self._require(name).errors)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._providers

    def __len__(self) -> int:
        with self._lock:
            return len(self._providers)

    def _require(self, name: str) -> Provider:
        try:
            return self._providers[name]
        except KeyError:
            raise KeyError(f"Provider not registered: {name}") from None
