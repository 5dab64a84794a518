"""
Configuration domain package.

This package contains the domain layer for logging configuration.
"""

from .enums import LogFileFormat, ProviderType
from .logging_settings import DEFAULT_RUNSPACE_NAME, LoggingSettings, ProviderSettings

__all__ = [
    "DEFAULT_RUNSPACE_NAME",
    "LogFileFormat",
    "LoggingSettings",
    "ProviderSettings",
    "ProviderType",
]
