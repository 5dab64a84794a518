"""
Logging context.

Owns everything one logging runspace shares between producers and the
dispatch loop: the provider registry, the message queues, the current
settings, and the LoggingState. Separate contexts are fully independent.
"""

from __future__ import annotations

import logging
import threading
from collections import deque

from sqladminlog.application.message_queues import MessageQueues
from sqladminlog.application.provider_registry import ProviderRegistry
from sqladminlog.domain.config import LoggingSettings
from sqladminlog.domain.logging_state import LoggingState

logger = logging.getLogger(__name__)

STATE_HISTORY_SIZE = 256


class LoggingContext:
    """
    Shared state for one logging runspace.

    Only the dispatch loop calls `set_state`; anyone may read `state`.
    """

    def __init__(self, settings: LoggingSettings | None = None):
        self._settings = settings or LoggingSettings()
        self.registry = ProviderRegistry(error_history_size=self._settings.error_history_size)
        self.queues = MessageQueues()
        self._state = LoggingState.STOPPED
        self._state_lock = threading.Lock()
        self.state_transitions: deque[LoggingState] = deque(maxlen=STATE_HISTORY_SIZE)

    @property
    def settings(self) -> LoggingSettings:
        return self._settings

    @settings.setter
    def settings(self, value: LoggingSettings) -> None:
        # Existing providers keep their error caps; new registrations pick up the new size.
        self._settings = value
        self.registry.error_history_size = value.error_history_size

    @property
    def state(self) -> LoggingState:
        with self._state_lock:
            return self._state

    def set_state(self, state: LoggingState) -> None:
        with self._state_lock:
            self._state = state
            self.state_transitions.append(state)
        logger.debug("Logging state -> %s", state.value)
