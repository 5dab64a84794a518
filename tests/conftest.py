"""
Root test configuration.

Puts src/ and the project root on sys.path so the suite runs from a
plain checkout as well as an installed package.
"""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parents[1]
for path in (PROJECT_ROOT / "src", PROJECT_ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from sqladminlog.application.context import LoggingContext  # noqa: E402
from sqladminlog.application.dispatch_loop import DispatchLoop  # noqa: E402
from sqladminlog.domain.config import LoggingSettings  # noqa: E402


@pytest.fixture
def context() -> LoggingContext:
    """A fresh, independent logging context."""
    return LoggingContext(LoggingSettings())


@pytest.fixture
def loop(context) -> DispatchLoop:
    """A dispatch loop that never sleeps."""
    return DispatchLoop(context, sleep=lambda _seconds: None)
