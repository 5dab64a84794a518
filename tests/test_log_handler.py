"""
Tests for the stdlib logging bridge.
"""

import logging

import pytest

from sqladminlog.application.logging_service import LoggingService
from sqladminlog.domain.log_models import LogLevel
from sqladminlog.infrastructure.log_handler import QueueLogHandler


@pytest.fixture
def bridged():
    service = LoggingService()
    handler = QueueLogHandler(service)
    host_logger = logging.getLogger("dbatools.jobs")
    host_logger.setLevel(logging.DEBUG)
    host_logger.addHandler(handler)
    yield service, host_logger
    host_logger.removeHandler(handler)


def test_record_becomes_log_entry(bridged):
    service, host_logger = bridged

    host_logger.warning("Job %s disabled", "IndexOptimize")

    entry = service.context.queues.try_dequeue_log_entry()
    assert entry.message == "Job IndexOptimize disabled"
    assert entry.level == LogLevel.WARNING
    assert entry.origin == "dbatools.jobs"
    assert entry.data["function"] == "test_record_becomes_log_entry"


def test_exception_becomes_error_record(bridged):
    service, host_logger = bridged

    try:
        raise ConnectionError("SQL01 unreachable")
    except ConnectionError:
        host_logger.exception("Connect failed")

    assert service.context.queues.try_dequeue_log_entry() is None
    record = service.context.queues.try_dequeue_error_record()
    assert record.message == "Connect failed"
    assert record.error_type == "ConnectionError"
    assert "SQL01 unreachable" in record.traceback_text


def test_internal_loggers_are_ignored():
    service = LoggingService()
    handler = QueueLogHandler(service)

    handler.handle(logging.LogRecord("sqladminlog.application.dispatch_loop", logging.WARNING, __file__, 1, "x", None, None))
    handler.handle(logging.LogRecord("sqladminlog", logging.WARNING, __file__, 1, "x", None, None))
    handler.handle(logging.LogRecord("sqladminlog_other", logging.WARNING, __file__, 1, "kept", None, None))

    assert service.context.queues.pending_counts() == (1, 0)
