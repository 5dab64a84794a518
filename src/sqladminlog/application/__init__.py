"""
Application layer: registry, queues, lifecycle, dispatch loop and
runspace supervision, plus the LoggingService facade.
"""

from .context import LoggingContext
from .dispatch_loop import CycleStats, DispatchLoop
from .logging_service import LoggingService
from .message_queues import MessageQueues
from .provider_lifecycle import ProviderLifecycle
from .provider_registry import ProviderRegistry
from .runspace_host import RunspaceHost, RunspaceRecord

__all__ = [
    "CycleStats",
    "DispatchLoop",
    "LoggingContext",
    "LoggingService",
    "MessageQueues",
    "ProviderLifecycle",
    "ProviderRegistry",
    "RunspaceHost",
    "RunspaceRecord",
]
