"""
Log value records.

This module defines the immutable records that producers hand to the
message queues:
- LogEntry: a regular log message
- ErrorRecord: a captured error with its traceback

Architecture Note:
    Pure domain module - no I/O, no queue or thread dependencies.
"""

from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LogLevel(str, Enum):
    """
    Severity of a log entry.

    Ordered from least to most severe. VERBOSE and IMPORTANT sit between
    the stdlib levels so admin scripts can keep their finer granularity.
    """

    DEBUG = "Debug"
    VERBOSE = "Verbose"
    INFO = "Info"
    IMPORTANT = "Important"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"

    @property
    def severity(self) -> int:
        """Numeric severity, compatible with stdlib logging levels."""
        return _LEVEL_NUMBERS[self]

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.severity >= other.severity

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.severity > other.severity

    def __le__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.severity <= other.severity

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.severity < other.severity

    @classmethod
    def from_logging_level(cls, levelno: int) -> LogLevel:
        """Map a stdlib logging level number to the closest LogLevel at or below it."""
        best = cls.DEBUG
        for level in cls:
            if level.severity <= levelno and level.severity >= best.severity:
                best = level
        return best

    @classmethod
    def from_string(cls, value: str | None) -> LogLevel | None:
        """Parse a level from its name, case-insensitively."""
        if value is None:
            return None
        lowered = str(value).strip().lower()
        for level in cls:
            if level.value.lower() == lowered or level.name.lower() == lowered:
                return level
        return None


_LEVEL_NUMBERS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.VERBOSE: 15,
    LogLevel.INFO: logging.INFO,
    LogLevel.IMPORTANT: 25,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.CRITICAL: logging.CRITICAL,
}


@dataclass(frozen=True)
class LogEntry:
    """A single log message produced by application code."""

    message: str
    level: LogLevel = LogLevel.INFO
    origin: str = ""
    timestamp: datetime = field(default_factory=_utc_now)
    tags: tuple[str, ...] = ()
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for file providers."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.value,
            "origin": self.origin,
            "message": self.message,
            "tags": list(self.tags),
            "data": dict(self.data),
        }


@dataclass(frozen=True)
class ErrorRecord:
    """An error captured by application code, carried to providers by value."""

    message: str
    origin: str = ""
    exception: BaseException | None = None
    error_type: str = ""
    traceback_text: str = ""
    timestamp: datetime = field(default_factory=_utc_now)
    target: str | None = None

    @property
    def level(self) -> LogLevel:
        return LogLevel.ERROR

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        origin: str = "",
        message: str | None = None,
        target: str | None = None,
    ) -> ErrorRecord:
        """
        Capture an exception as an error record.

        Args:
            exc: The exception to capture
            origin: Component that raised or caught it
            message: Optional override for the message (defaults to str(exc))
            target: Optional object the failing operation was aimed at (server, database...)
        """
        return cls(
            message=message if message is not None else str(exc),
            origin=origin,
            exception=exc,
            error_type=type(exc).__name__,
            traceback_text="".join(
                traceback.format_exception(type(exc), exc, exc.__traceback__)
            ),
            target=target,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize for file providers."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "level": self.level.value,
            "origin": self.origin,
            "message": self.message,
            "error_type": self.error_type,
            "target": self.target,
            "traceback": self.traceback_text,
        }
