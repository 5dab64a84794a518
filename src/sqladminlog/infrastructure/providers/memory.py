"""
In-memory provider.

Keeps the most recent entries and error records in bounded histories so
the current session's log can be inspected without reading files.
"""

from __future__ import annotations

import threading
from collections import deque

from sqladminlog.domain.log_models import ErrorRecord, LogEntry

from .base import BaseProvider


class MemoryProvider(BaseProvider):
    """Bounded message and error history, safe to read from any thread."""

    def __init__(self, max_entries: int = 1024, **filters):
        super().__init__(**filters)
        self.max_entries = max_entries
        self._entries: deque[LogEntry] = deque(maxlen=max_entries)
        self._errors: deque[ErrorRecord] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def on_message(self, entry: LogEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def on_error(self, record: ErrorRecord) -> None:
        with self._lock:
            self._errors.append(record)

    @property
    def entries(self) -> list[LogEntry]:
        with self._lock:
            return list(self._entries)

    @property
    def errors(self) -> list[ErrorRecord]:
        with self._lock:
            return list(self._errors)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._errors.clear()
