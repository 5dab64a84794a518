"""
CLI command functions.
"""

from .config import providers_command, validate_command
from .run import run_command

__all__ = ["providers_command", "run_command", "validate_command"]
