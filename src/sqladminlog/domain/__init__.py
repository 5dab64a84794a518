"""
Domain layer for sqladminlog.

Pure value records and enums: no queues, threads, or I/O.
"""

from sqladminlog.domain.log_models import ErrorRecord, LogEntry, LogLevel
from sqladminlog.domain.logging_state import LoggingState, ProviderHook, RunState
from sqladminlog.domain.provider import LoggingProvider, Provider, ProviderError

__all__ = [
    "ErrorRecord",
    "LogEntry",
    "LogLevel",
    "LoggingProvider",
    "LoggingState",
    "Provider",
    "ProviderError",
    "ProviderHook",
    "RunState",
]
