"""
Provider domain model.

A Provider is the registry's record for one pluggable log sink: its
name, its enabled/initialized flags, the hook implementation, and a
capped history of hook failures.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from sqladminlog.domain.logging_state import ProviderHook

if TYPE_CHECKING:
    from sqladminlog.domain.log_models import ErrorRecord, LogEntry

DEFAULT_ERROR_HISTORY = 128


# =============================================================================
# Protocols (Interfaces)
# =============================================================================

@runtime_checkable
class LoggingProvider(Protocol):
    """Capability interface every provider implementation supplies."""

    def on_begin(self) -> None:
        """Initialize the sink (open files, connect...)."""
        ...

    def on_start(self) -> None:
        """Called once per dispatch cycle before any message."""
        ...

    def on_message(self, entry: LogEntry) -> None:
        """Handle one log entry."""
        ...

    def on_error(self, record: ErrorRecord) -> None:
        """Handle one error record."""
        ...

    def on_end(self) -> None:
        """Called once per dispatch cycle after all messages."""
        ...

    def on_final(self) -> None:
        """Tear down the sink at shutdown."""
        ...

    def message_applies(self, entry: LogEntry) -> bool:
        """Filter predicate for log entries."""
        ...

    def error_applies(self, record: ErrorRecord) -> bool:
        """Filter predicate for error records."""
        ...


# =============================================================================
# Records
# =============================================================================

@dataclass(frozen=True)
class ProviderError:
    """One failed hook invocation, recorded against its provider."""

    provider_name: str
    hook: ProviderHook
    message: str
    error_type: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_exception(cls, provider_name: str, hook: ProviderHook, exc: Exception) -> ProviderError:
        return cls(
            provider_name=provider_name,
            hook=hook,
            message=str(exc),
            error_type=type(exc).__name__,
        )


@dataclass(eq=False)
class Provider:
    """
    Registry record for a logging provider.

    Created disabled and uninitialized. The dispatch loop flips
    `initialized` after a successful BeginEvent and resets it at shutdown.
    """

    name: str
    hooks: LoggingProvider
    enabled: bool = False
    initialized: bool = False
    error_history_size: int = DEFAULT_ERROR_HISTORY
    errors: deque[ProviderError] = field(init=False)
    error_count_total: int = 0

    def __post_init__(self):
        self.errors = deque(maxlen=self.error_history_size)

    def record_error(self, error: ProviderError) -> None:
        """Append a hook failure; oldest entries fall off past the cap."""
        self.errors.append(error)
        self.error_count_total += 1

    @property
    def last_error(self) -> ProviderError | None:
        return self.errors[-1] if self.errors else None
