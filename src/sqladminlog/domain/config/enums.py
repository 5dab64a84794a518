"""
Enums for the configuration domain.
"""

from enum import Enum


class ProviderType(str, Enum):
    """Built-in provider implementations."""

    CONSOLE = "console"
    LOGFILE = "logfile"
    MEMORY = "memory"


class LogFileFormat(str, Enum):
    """Output format for the logfile provider."""

    JSON = "json"
    CSV = "csv"
