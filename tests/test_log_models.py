"""
Unit tests for the log value records and state enums.
"""

import dataclasses
import logging
import unittest

from sqladminlog.domain.log_models import ErrorRecord, LogEntry, LogLevel
from sqladminlog.domain.logging_state import LoggingState


class TestLogLevel(unittest.TestCase):
    """Test LogLevel ordering and conversions."""

    def test_ordering(self):
        self.assertTrue(LogLevel.DEBUG < LogLevel.VERBOSE < LogLevel.INFO)
        self.assertTrue(LogLevel.INFO < LogLevel.IMPORTANT < LogLevel.WARNING)
        self.assertTrue(LogLevel.ERROR <= LogLevel.CRITICAL)
        self.assertTrue(LogLevel.WARNING >= LogLevel.WARNING)

    def test_from_logging_level(self):
        self.assertEqual(LogLevel.from_logging_level(logging.DEBUG), LogLevel.DEBUG)
        self.assertEqual(LogLevel.from_logging_level(logging.INFO), LogLevel.INFO)
        self.assertEqual(LogLevel.from_logging_level(logging.WARNING), LogLevel.WARNING)
        self.assertEqual(LogLevel.from_logging_level(logging.CRITICAL), LogLevel.CRITICAL)
        self.assertEqual(LogLevel.from_logging_level(15), LogLevel.VERBOSE)
        self.assertEqual(LogLevel.from_logging_level(27), LogLevel.IMPORTANT)
        self.assertEqual(LogLevel.from_logging_level(1), LogLevel.DEBUG)

    def test_severity_round_trips_through_stdlib(self):
        for level in LogLevel:
            self.assertEqual(LogLevel.from_logging_level(level.severity), level)

    def test_from_string(self):
        self.assertEqual(LogLevel.from_string("warning"), LogLevel.WARNING)
        self.assertEqual(LogLevel.from_string("IMPORTANT"), LogLevel.IMPORTANT)
        self.assertEqual(LogLevel.from_string(" Verbose "), LogLevel.VERBOSE)
        self.assertIsNone(LogLevel.from_string("loud"))
        self.assertIsNone(LogLevel.from_string(None))


class TestLogEntry(unittest.TestCase):
    """Test LogEntry and ErrorRecord."""

    def test_entry_is_immutable(self):
        entry = LogEntry(message="Job configured", origin="jobs.backup")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            entry.message = "changed"

    def test_entry_defaults(self):
        entry = LogEntry(message="x")
        self.assertEqual(entry.level, LogLevel.INFO)
        self.assertEqual(entry.tags, ())
        self.assertIsNotNone(entry.timestamp.tzinfo)

    def test_entry_to_dict(self):
        entry = LogEntry(message="m", level=LogLevel.WARNING, origin="o", tags=("a",), data={"db": "master"})
        data = entry.to_dict()
        self.assertEqual(data["level"], "Warning")
        self.assertEqual(data["tags"], ["a"])
        self.assertEqual(data["data"], {"db": "master"})

    def test_error_record_from_exception(self):
        try:
            raise TimeoutError("query timed out")
        except TimeoutError as exc:
            record = ErrorRecord.from_exception(exc, origin="sql.query", target="SQL01")

        self.assertEqual(record.message, "query timed out")
        self.assertEqual(record.error_type, "TimeoutError")
        self.assertIn("Traceback", record.traceback_text)
        self.assertEqual(record.level, LogLevel.ERROR)
        self.assertEqual(record.to_dict()["target"], "SQL01")

    def test_error_record_message_override(self):
        record = ErrorRecord.from_exception(ValueError("raw"), message="Restore failed")
        self.assertEqual(record.message, "Restore failed")
        self.assertEqual(record.error_type, "ValueError")


class TestLoggingState(unittest.TestCase):

    def test_terminal_states(self):
        self.assertTrue(LoggingState.STOPPED.is_terminal())
        self.assertTrue(LoggingState.BROKEN.is_terminal())
        self.assertFalse(LoggingState.READY.is_terminal())
        self.assertFalse(LoggingState.WRITING.is_terminal())


if __name__ == "__main__":
    unittest.main()
