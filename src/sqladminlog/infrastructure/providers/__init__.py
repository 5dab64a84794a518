"""
Built-in logging providers.
"""

from .base import BaseProvider
from .console import RichConsoleProvider
from .factory import build_provider
from .logfile import LogFileProvider
from .memory import MemoryProvider

__all__ = [
    "BaseProvider",
    "LogFileProvider",
    "MemoryProvider",
    "RichConsoleProvider",
    "build_provider",
]
