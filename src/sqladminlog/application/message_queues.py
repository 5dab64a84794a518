"""
Message queues.

Two unbounded FIFO queues, one for log entries and one for error
records. Any number of producer threads enqueue; the dispatch loop is
the only consumer. Neither side ever blocks.
"""

from __future__ import annotations

import logging
import queue

from sqladminlog.domain.log_models import ErrorRecord, LogEntry

logger = logging.getLogger(__name__)


class MessageQueues:
    """Thread-safe log and error queues."""

    def __init__(self) -> None:
        self._entries: queue.SimpleQueue[LogEntry] = queue.SimpleQueue()
        self._errors: queue.SimpleQueue[ErrorRecord] = queue.SimpleQueue()

    def enqueue_log_entry(self, entry: LogEntry) -> None:
        self._entries.put_nowait(entry)

    def enqueue_error_record(self, record: ErrorRecord) -> None:
        self._errors.put_nowait(record)

    def try_dequeue_log_entry(self) -> LogEntry | None:
        try:
            return self._entries.get_nowait()
        except queue.Empty:
            return None

    def try_dequeue_error_record(self) -> ErrorRecord | None:
        try:
            return self._errors.get_nowait()
        except queue.Empty:
            return None

    def pending_counts(self) -> tuple[int, int]:
        """Approximate (entries, errors) waiting for dispatch."""
        return self._entries.qsize(), self._errors.qsize()

    def discard_all(self) -> tuple[int, int]:
        """
        Drop everything currently queued.

        Returns:
            Tuple of (entries dropped, errors dropped)
        """
        dropped_entries = 0
        while self.try_dequeue_log_entry() is not None:
            dropped_entries += 1
        dropped_errors = 0
        while self.try_dequeue_error_record() is not None:
            dropped_errors += 1
        return dropped_entries, dropped_errors
