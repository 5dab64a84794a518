"""
Stdlib logging bridge.

QueueLogHandler lets host code feed the dispatch loop through ordinary
`logging` calls. Records carrying exception info become ErrorRecords,
everything else becomes a LogEntry with the logger name as origin.
"""

from __future__ import annotations

import logging
import traceback
from typing import TYPE_CHECKING

from sqladminlog.domain.log_models import ErrorRecord, LogEntry, LogLevel

if TYPE_CHECKING:
    from sqladminlog.application.logging_service import LoggingService

# The framework's own diagnostics never re-enter the queues.
INTERNAL_LOGGER_PREFIX = "sqladminlog"


class QueueLogHandler(logging.Handler):
    """Enqueue stdlib log records into a LoggingService."""

    def __init__(self, service: LoggingService, level: int = logging.NOTSET):
        super().__init__(level)
        self.service = service

    def emit(self, record: logging.LogRecord) -> None:
        if record.name == INTERNAL_LOGGER_PREFIX or record.name.startswith(INTERNAL_LOGGER_PREFIX + "."):
            return
        try:
            if record.exc_info and record.exc_info[1] is not None:
                self.service.enqueue_error_record(self._to_error_record(record))
            else:
                self.service.enqueue_log_entry(self._to_log_entry(record))
        except Exception:  # pylint: disable=broad-except
            self.handleError(record)

    def _to_log_entry(self, record: logging.LogRecord) -> LogEntry:
        return LogEntry(
            message=record.getMessage(),
            level=LogLevel.from_logging_level(record.levelno),
            origin=record.name,
            data={
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno,
                "thread": record.threadName,
            },
        )

    def _to_error_record(self, record: logging.LogRecord) -> ErrorRecord:
        exc_type, exc, exc_tb = record.exc_info
        return ErrorRecord(
            message=record.getMessage(),
            origin=record.name,
            exception=exc,
            error_type=exc_type.__name__ if exc_type else "",
            traceback_text="".join(traceback.format_exception(exc_type, exc, exc_tb)),
        )
