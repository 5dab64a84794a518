"""
Runspace host.

Supervises named background units of execution. Each runspace runs its
loop body on a daemon thread and exposes a cancellation flag and a
stopped signal the host can wait on.

Only one runspace per name may run at a time: starting a name that is
still running raises RuntimeError. A stopped runspace can be started
again under the same name.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from sqladminlog.domain.logging_state import RunState

logger = logging.getLogger(__name__)


class RunspaceRecord:
    """Run state and stop signal for one background runspace."""

    def __init__(self, name: str):
        self.name = name
        self._state = RunState.RUNNING
        self._lock = threading.Lock()
        self._cancel_event = threading.Event()
        self._stopped_event = threading.Event()
        self.thread: threading.Thread | None = None

    @property
    def state(self) -> RunState:
        with self._lock:
            return self._state

    @property
    def cancellation_requested(self) -> bool:
        return self._cancel_event.is_set()

    def request_stop(self) -> bool:
        """
        Flip the run state to Stopping.

        Returns:
            True if this call requested the stop, False if already stopping/stopped
        """
        with self._lock:
            if self._state != RunState.RUNNING:
                return False
            self._state = RunState.STOPPING
        self._cancel_event.set()
        return True

    def signal_stopped(self) -> None:
        """Mark the runspace stopped and release waiters. Safe to call repeatedly."""
        with self._lock:
            self._state = RunState.STOPPED
        self._cancel_event.set()
        self._stopped_event.set()

    def wait_stopped(self, timeout: float | None = None) -> bool:
        return self._stopped_event.wait(timeout)


class RunspaceHost:
    """
    Starts, stops and reports on named runspaces.

    Usage:
        host = RunspaceHost()
        host.start(loop.run, "sqladminlog.logging")
        ...
        host.stop("sqladminlog.logging", timeout=30)
    """

    def __init__(self) -> None:
        self._runspaces: dict[str, RunspaceRecord] = {}
        self._lock = threading.Lock()

    def start(self, loop_fn: Callable[[RunspaceRecord], None], name: str) -> RunspaceRecord:
        """
        Launch `loop_fn(record)` on a background thread.

        Raises:
            RuntimeError: If a runspace with this name is already running
        """
        with self._lock:
            existing = self._runspaces.get(name)
            if existing is not None and existing.state != RunState.STOPPED:
                raise RuntimeError(f"Runspace already running: {name}")

            record = RunspaceRecord(name)
            record.thread = threading.Thread(
                target=self._run,
                args=(loop_fn, record),
                name=name,
                daemon=True,
            )
            self._runspaces[name] = record
            record.thread.start()

        logger.debug("Started runspace %s", name)
        return record

    def stop(self, name: str, timeout: float | None = None) -> bool:
        """
        Request cancellation and wait for the runspace to signal stopped.

        Unknown or already stopped runspaces are a no-op.

        Returns:
            True if the runspace is stopped, False if the wait timed out
        """
        with self._lock:
            record = self._runspaces.get(name)
        if record is None:
            return True

        if record.request_stop():
            logger.debug("Stop requested for runspace %s", name)

        stopped = record.wait_stopped(timeout)
        if not stopped:
            logger.warning("Runspace %s did not stop within %s seconds", name, timeout)
        return stopped

    def get_state(self, name: str) -> RunState | None:
        with self._lock:
            record = self._runspaces.get(name)
        return record.state if record is not None else None

    def get_record(self, name: str) -> RunspaceRecord | None:
        with self._lock:
            return self._runspaces.get(name)

    def remove(self, name: str) -> None:
        """Forget a stopped runspace."""
        with self._lock:
            record = self._runspaces.get(name)
            if record is None:
                return
            if record.state != RunState.STOPPED:
                raise RuntimeError(f"Runspace {name} is still {record.state.value}")
            del self._runspaces[name]

    @staticmethod
    def _run(loop_fn: Callable[[RunspaceRecord], None], record: RunspaceRecord) -> None:
        try:
            loop_fn(record)
        except Exception:  # pylint: disable=broad-except
            logger.exception("Runspace %s terminated with an error", record.name)
        finally:
            record.signal_stopped()
