"""
Dispatch loop.

The long-lived body of the logging runspace. Each cycle:
- runs BeginEvent for providers waiting to initialize
- runs StartEvent, drains the log queue, drains the error queue, runs EndEvent
- sleeps for the configured interval

Cancellation is cooperative and checked once, at the top of each cycle.
When the loop exits it flushes both queues one last time (unless
`disable_flush_on_exit` is set), runs FinalEvent, and reports Stopped,
or Broken if a fault escaped the cycle body.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from sqladminlog.application.provider_lifecycle import ProviderLifecycle
from sqladminlog.domain.logging_state import LoggingState

if TYPE_CHECKING:
    from sqladminlog.application.context import LoggingContext
    from sqladminlog.application.runspace_host import RunspaceRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CycleStats:
    """Items dispatched during one drain pass."""

    entries: int = 0
    errors: int = 0
    initialized: int = 0


class DispatchLoop:
    """
    Drains a LoggingContext's queues into its providers.

    Usage:
        loop = DispatchLoop(context)
        host.start(loop.run, "sqladminlog.logging")

    Tests can drive `run_cycle()` and `shutdown()` directly.
    """

    def __init__(self, context: LoggingContext, sleep: Callable[[float], None] | None = None):
        self.context = context
        self.lifecycle = ProviderLifecycle(context.registry)
        self._sleep = sleep or time.sleep

    def run(self, record: RunspaceRecord) -> None:
        """Loop until the runspace requests cancellation, then shut down."""
        faulted = False
        logger.info("Logging dispatch loop started (%s)", record.name)
        try:
            while not record.cancellation_requested:
                self.run_cycle()
                self._sleep(self.context.settings.interval_seconds)
        except Exception:  # pylint: disable=broad-except
            faulted = True
            logger.exception("Logging dispatch loop faulted")
        finally:
            try:
                self.shutdown(faulted)
            finally:
                record.signal_stopped()

    def run_cycle(self) -> CycleStats:
        """Run one full dispatch cycle (lifecycle phases 1-5), without the sleep."""
        registry = self.context.registry
        initialized = 0
        pending = registry.get_pending()
        if pending:
            self.context.set_state(LoggingState.INITIALIZING)
            initialized = len(self.lifecycle.begin(pending))
            self.context.set_state(LoggingState.READY)

        stats = self._drain_pass()
        return CycleStats(entries=stats.entries, errors=stats.errors, initialized=initialized)

    def flush(self) -> CycleStats:
        """Final drain: StartEvent, both queues, EndEvent."""
        has_targets = bool(self.context.registry.get_initialized())
        stats = self._drain_pass()
        if not has_targets and (stats.entries or stats.errors):
            logger.warning(
                "No initialized providers on exit: dropped %d entries and %d errors",
                stats.entries, stats.errors
            )
        else:
            logger.debug("Flushed %d entries and %d errors on exit", stats.entries, stats.errors)
        return stats

    def shutdown(self, faulted: bool = False) -> LoggingState:
        """
        Flush, run FinalEvent, and set the terminal state.

        The flush flag is read here, at stop time, from the context's
        current settings. Enabled providers that have not run BeginEvent
        yet are initialized first when there is anything left to flush.
        """
        flush_on_exit = not self.context.settings.disable_flush_on_exit
        if flush_on_exit:
            try:
                self._begin_pending_for_flush()
            except Exception:  # pylint: disable=broad-except
                faulted = True
                logger.exception("Provider initialization before flush failed")

        try:
            if flush_on_exit:
                self.flush()
            else:
                dropped_entries, dropped_errors = self.context.queues.discard_all()
                if dropped_entries or dropped_errors:
                    logger.warning(
                        "Log flush disabled: discarded %d entries and %d errors",
                        dropped_entries, dropped_errors
                    )
        except Exception:  # pylint: disable=broad-except
            faulted = True
            logger.exception("Logging flush on exit failed")

        try:
            self.lifecycle.finalize(self.context.registry.get_initialized())
        except Exception:  # pylint: disable=broad-except
            faulted = True
            logger.exception("Provider teardown failed")

        final_state = LoggingState.BROKEN if faulted else LoggingState.STOPPED
        self.context.set_state(final_state)
        logger.info("Logging dispatch loop ended: %s", final_state.value)
        return final_state

    def _begin_pending_for_flush(self) -> None:
        entries, errors = self.context.queues.pending_counts()
        if not (entries or errors):
            return
        pending = self.context.registry.get_pending()
        if pending:
            self.context.set_state(LoggingState.INITIALIZING)
            self.lifecycle.begin(pending)
            self.context.set_state(LoggingState.READY)

    def _drain_pass(self) -> CycleStats:
        providers = self.context.registry.get_initialized()
        self.lifecycle.start(providers)

        self.context.set_state(LoggingState.WRITING)
        queues = self.context.queues
        entries = 0
        while (entry := queues.try_dequeue_log_entry()) is not None:
            self.lifecycle.deliver_message(entry, providers)
            entries += 1

        errors = 0
        while (record := queues.try_dequeue_error_record()) is not None:
            self.lifecycle.deliver_error(record, providers)
            errors += 1
        self.context.set_state(LoggingState.READY)

        self.lifecycle.end(providers)
        return CycleStats(entries=entries, errors=errors)
