"""
Configuration infrastructure: file I/O and typed loading.
"""

from .manager import LOGGING_CONFIG_FILE, ConfigManager
from .repository import ConfigRepository

__all__ = ["LOGGING_CONFIG_FILE", "ConfigManager", "ConfigRepository"]
