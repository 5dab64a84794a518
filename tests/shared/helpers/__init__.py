"""
Shared Helpers - Cross-suite test doubles.
"""

from .providers import RecordingProvider, wait_until

__all__ = [
    "RecordingProvider",
    "wait_until",
]
