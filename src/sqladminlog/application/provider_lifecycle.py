"""
Provider lifecycle.

Runs the provider hooks in dispatch-cycle order:
1. BeginEvent for enabled, uninitialized providers
2. StartEvent for initialized providers
3. MessageEvent per queued entry
4. ErrorEvent per queued error record
5. EndEvent for initialized providers
plus FinalEvent at shutdown.

Every hook call is isolated: an exception is recorded against the
provider that raised it and the loop moves on to the next provider.
Hooks run serially, never concurrently with each other.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from sqladminlog.application.provider_registry import ProviderRegistry
from sqladminlog.domain.log_models import ErrorRecord, LogEntry
from sqladminlog.domain.logging_state import ProviderHook
from sqladminlog.domain.provider import Provider, ProviderError

logger = logging.getLogger(__name__)


class ProviderLifecycle:
    """Invokes provider hooks with per-provider failure isolation."""

    def __init__(self, registry: ProviderRegistry):
        self.registry = registry

    def begin(self, providers: Iterable[Provider]) -> list[Provider]:
        """
        Run BeginEvent for each provider; mark the successful ones initialized.

        Failed providers stay uninitialized and are retried next cycle.

        Returns:
            Providers that initialized in this call
        """
        started = []
        for provider in providers:
            if self._invoke(provider, ProviderHook.BEGIN, provider.hooks.on_begin):
                self.registry.set_initialized(provider, True)
                started.append(provider)
                logger.debug("Provider %s initialized", provider.name)
        return started

    def start(self, providers: Iterable[Provider]) -> None:
        for provider in providers:
            self._invoke(provider, ProviderHook.START, provider.hooks.on_start)

    def end(self, providers: Iterable[Provider]) -> None:
        for provider in providers:
            self._invoke(provider, ProviderHook.END, provider.hooks.on_end)

    def deliver_message(self, entry: LogEntry, providers: Iterable[Provider]) -> int:
        """Offer one entry to each provider whose filter accepts it. Returns delivery count."""
        delivered = 0
        for provider in providers:
            if not self._applies(provider, ProviderHook.MESSAGE, provider.hooks.message_applies, entry):
                continue
            if self._invoke(provider, ProviderHook.MESSAGE, provider.hooks.on_message, entry):
                delivered += 1
        return delivered

    def deliver_error(self, record: ErrorRecord, providers: Iterable[Provider]) -> int:
        """Offer one error record to each interested provider. Returns delivery count."""
        delivered = 0
        for provider in providers:
            if not self._applies(provider, ProviderHook.ERROR, provider.hooks.error_applies, record):
                continue
            if self._invoke(provider, ProviderHook.ERROR, provider.hooks.on_error, record):
                delivered += 1
        return delivered

    def finalize(self, providers: Iterable[Provider]) -> None:
        """
        Run FinalEvent for each provider, then mark every registered
        provider uninitialized.
        """
        for provider in providers:
            self._invoke(provider, ProviderHook.FINAL, provider.hooks.on_final)
        for provider in self.registry.get_all():
            self.registry.set_initialized(provider, False)

    def _applies(self, provider: Provider, hook: ProviderHook, predicate: Callable, item) -> bool:
        """Evaluate a filter predicate; a raising filter counts as a failure of the hook it guards."""
        try:
            return bool(predicate(item))
        except Exception as exc:  # pylint: disable=broad-except
            self._record(provider, hook, exc)
            return False

    def _invoke(self, provider: Provider, hook: ProviderHook, fn: Callable, *args) -> bool:
        try:
            fn(*args)
            return True
        except Exception as exc:  # pylint: disable=broad-except
            self._record(provider, hook, exc)
            return False

    def _record(self, provider: Provider, hook: ProviderHook, exc: Exception) -> None:
        self.registry.record_error(provider, ProviderError.from_exception(provider.name, hook, exc))
        logger.warning(
            "Provider %s failed in %s hook: %s: %s",
            provider.name, hook.value, type(exc).__name__, exc
        )
