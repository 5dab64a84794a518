"""
Logging service.

Application-facing facade over one LoggingContext: producer calls,
provider registration, and runspace lifecycle control.

Producers only ever enqueue; provider failures never reach them. A
dispatch loop fault surfaces as the Broken logging state, which callers
poll through `get_logging_state()`.
"""

from __future__ import annotations

import atexit
import logging
from typing import Callable, Iterable

from sqladminlog.application.context import LoggingContext
from sqladminlog.application.dispatch_loop import DispatchLoop
from sqladminlog.application.runspace_host import RunspaceHost, RunspaceRecord
from sqladminlog.domain.config import LoggingSettings
from sqladminlog.domain.log_models import ErrorRecord, LogEntry, LogLevel
from sqladminlog.domain.logging_state import LoggingState, RunState
from sqladminlog.domain.provider import LoggingProvider, Provider, ProviderError

logger = logging.getLogger(__name__)


class LoggingService:
    """
    Entry point for host code.

    Usage:
        service = LoggingService()
        service.register_provider("console", RichConsoleProvider(), enabled=True)
        service.start_logging_runspace()
        service.write_message("Backup job configured", origin="jobs.backup")
        service.stop_logging_runspace()
    """

    def __init__(
        self,
        settings: LoggingSettings | None = None,
        host: RunspaceHost | None = None,
        sleep: Callable[[float], None] | None = None,
    ):
        self.context = LoggingContext(settings)
        self.host = host or RunspaceHost()
        self.loop = DispatchLoop(self.context, sleep=sleep)
        self._exit_hook_installed = False

    @property
    def settings(self) -> LoggingSettings:
        return self.context.settings

    @property
    def runspace_name(self) -> str:
        return self.context.settings.runspace_name

    # -------------------------------------------------------------------------
    # Producer API
    # -------------------------------------------------------------------------

    def enqueue_log_entry(self, entry: LogEntry) -> None:
        self.context.queues.enqueue_log_entry(entry)

    def enqueue_error_record(self, record: ErrorRecord) -> None:
        self.context.queues.enqueue_error_record(record)

    def write_message(
        self,
        message: str,
        level: LogLevel = LogLevel.INFO,
        origin: str = "",
        tags: Iterable[str] = (),
        **data,
    ) -> LogEntry:
        """Build and enqueue a log entry. Extra keyword arguments become entry data."""
        entry = LogEntry(message=message, level=level, origin=origin, tags=tuple(tags), data=data)
        self.enqueue_log_entry(entry)
        return entry

    def write_error(
        self,
        exc: BaseException,
        origin: str = "",
        message: str | None = None,
        target: str | None = None,
    ) -> ErrorRecord:
        """Capture an exception and enqueue it as an error record."""
        record = ErrorRecord.from_exception(exc, origin=origin, message=message, target=target)
        self.enqueue_error_record(record)
        return record

    # -------------------------------------------------------------------------
    # Provider registration
    # -------------------------------------------------------------------------

    def register_provider(self, name: str, hooks: LoggingProvider, enabled: bool = False) -> Provider:
        return self.context.registry.register(name, hooks, enabled=enabled)

    def enable_provider(self, name: str) -> None:
        self.context.registry.enable(name)

    def disable_provider(self, name: str) -> None:
        self.context.registry.disable(name)

    def get_providers(self) -> list[Provider]:
        return self.context.registry.get_all()

    def get_provider_errors(self, name: str) -> list[ProviderError]:
        return self.context.registry.get_errors(name)

    # -------------------------------------------------------------------------
    # Lifecycle control
    # -------------------------------------------------------------------------

    def start_logging_runspace(self) -> RunspaceRecord:
        """
        Start the dispatch loop in the background.

        Raises:
            RuntimeError: If the runspace is already running
        """
        record = self.host.start(self.loop.run, self.runspace_name)
        logger.info("Logging runspace %s started", self.runspace_name)
        return record

    def stop_logging_runspace(self, timeout: float | None = None) -> bool:
        """
        Stop the dispatch loop and block until it has flushed and signalled.

        Stopping a runspace that is not running is a no-op.

        Returns:
            True if stopped, False if the wait timed out
        """
        if self.host.get_state(self.runspace_name) in (None, RunState.STOPPED):
            return True
        if timeout is None:
            timeout = self.context.settings.stop_timeout_seconds
        stopped = self.host.stop(self.runspace_name, timeout=timeout)
        if stopped:
            logger.info("Logging runspace %s stopped: %s", self.runspace_name, self.get_logging_state().value)
        return stopped

    def get_logging_state(self) -> LoggingState:
        return self.context.state

    def get_runspace_state(self) -> RunState | None:
        return self.host.get_state(self.runspace_name)

    def update_settings(self, settings: LoggingSettings) -> None:
        """
        Replace the live settings.

        The interval applies from the next cycle and the flush flag at the
        next stop. The runspace name cannot change while running.
        """
        running = self.host.get_state(self.runspace_name) not in (None, RunState.STOPPED)
        if running and settings.runspace_name != self.runspace_name:
            raise ValueError("Cannot rename the logging runspace while it is running")
        self.context.settings = settings

    def install_exit_flush(self) -> None:
        """Stop (and flush) the runspace when the interpreter exits."""
        if self._exit_hook_installed:
            return
        atexit.register(self.stop_logging_runspace)
        self._exit_hook_installed = True
