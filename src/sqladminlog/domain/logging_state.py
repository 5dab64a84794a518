"""
State enumerations for the logging runspace.

LoggingState is the externally observable phase of the dispatch loop.
RunState is the supervision state of the background runspace hosting it.
"""

from __future__ import annotations

from enum import Enum


class LoggingState(str, Enum):
    """Current phase of the dispatch loop."""

    INITIALIZING = "Initializing"  # Running BeginEvent for pending providers
    READY = "Ready"  # Idle between cycles, output is current
    WRITING = "Writing"  # Draining queues into providers
    STOPPED = "Stopped"  # Loop exited cleanly
    BROKEN = "Broken"  # Loop exited via an unexpected fault

    def is_terminal(self) -> bool:
        """Check if the loop is no longer running in this state."""
        return self in (LoggingState.STOPPED, LoggingState.BROKEN)


class RunState(str, Enum):
    """Run state of a background runspace."""

    RUNNING = "Running"
    STOPPING = "Stopping"
    STOPPED = "Stopped"


class ProviderHook(str, Enum):
    """Lifecycle hooks a provider implements."""

    BEGIN = "begin"
    START = "start"
    MESSAGE = "message"
    ERROR = "error"
    END = "end"
    FINAL = "final"
