"""
Provider factory.

Builds provider implementations from validated ProviderSettings.
"""

from sqladminlog.domain.config import ProviderSettings, ProviderType

from .base import BaseProvider
from .console import RichConsoleProvider
from .logfile import LogFileProvider
from .memory import MemoryProvider


def build_provider(settings: ProviderSettings) -> BaseProvider:
    """Create the provider described by `settings`."""
    filters = {
        "min_level": settings.min_level,
        "include_origins": settings.include_origins,
        "exclude_origins": settings.exclude_origins,
        "include_tags": settings.include_tags,
    }
    if settings.type == ProviderType.CONSOLE:
        return RichConsoleProvider(**filters)
    if settings.type == ProviderType.LOGFILE:
        return LogFileProvider(settings.path, file_format=settings.format, **filters)
    if settings.type == ProviderType.MEMORY:
        return MemoryProvider(max_entries=settings.max_entries, **filters)
    raise ValueError(f"Unsupported provider type: {settings.type}")
