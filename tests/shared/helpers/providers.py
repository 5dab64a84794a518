"""
Recording provider test double.

Records every hook call in order and can be told to fail specific hooks.
"""

from __future__ import annotations

import threading
import time
from typing import Callable

from sqladminlog.domain.log_models import ErrorRecord, LogEntry


class RecordingProvider:
    """
    Provider that records hook calls.

    Args:
        fail_begin: Number of BeginEvent calls that raise before one succeeds
        fail_hooks: Hook names that always raise ("start", "end", "final", "error")
        fail_message: Predicate; MessageEvent raises when it returns True
        applies: Filter predicate for entries (default: accept all)
    """

    def __init__(
        self,
        fail_begin: int = 0,
        fail_hooks: set[str] | None = None,
        fail_message: Callable[[LogEntry], bool] | None = None,
        applies: Callable[[LogEntry], bool] | None = None,
    ):
        self.fail_begin = fail_begin
        self.fail_hooks = fail_hooks or set()
        self.fail_message = fail_message
        self.applies = applies
        self.calls: list[tuple[str, object]] = []
        self._lock = threading.Lock()

    def _record(self, hook: str, payload: object = None) -> None:
        with self._lock:
            self.calls.append((hook, payload))

    def on_begin(self) -> None:
        self._record("begin")
        if self.fail_begin > 0:
            self.fail_begin -= 1
            raise ConnectionError("sink unavailable")

    def on_start(self) -> None:
        self._record("start")
        if "start" in self.fail_hooks:
            raise RuntimeError("start failed")

    def on_message(self, entry: LogEntry) -> None:
        self._record("message", entry)
        if self.fail_message is not None and self.fail_message(entry):
            raise ValueError(f"cannot write {entry.message}")

    def on_error(self, record: ErrorRecord) -> None:
        self._record("error", record)
        if "error" in self.fail_hooks:
            raise RuntimeError("error hook failed")

    def on_end(self) -> None:
        self._record("end")
        if "end" in self.fail_hooks:
            raise RuntimeError("end failed")

    def on_final(self) -> None:
        self._record("final")
        if "final" in self.fail_hooks:
            raise RuntimeError("final failed")

    def message_applies(self, entry: LogEntry) -> bool:
        return True if self.applies is None else self.applies(entry)

    def error_applies(self, record: ErrorRecord) -> bool:
        return True

    def hooks(self) -> list[str]:
        with self._lock:
            return [hook for hook, _ in self.calls]

    def messages(self) -> list[str]:
        with self._lock:
            return [payload.message for hook, payload in self.calls if hook == "message"]

    def errors(self) -> list[ErrorRecord]:
        with self._lock:
            return [payload for hook, payload in self.calls if hook == "error"]

    def count(self, hook: str) -> int:
        return self.hooks().count(hook)


def wait_until(predicate: Callable[[], bool], timeout: float = 5.0, interval: float = 0.01) -> bool:
    """Poll `predicate` until it is true or the timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()
