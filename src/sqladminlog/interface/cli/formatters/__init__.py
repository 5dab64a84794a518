"""
CLI output formatters.
"""

from .status_formatter import StatusFormatter

__all__ = ["StatusFormatter"]
