"""
Logfile provider.

Buffers entries during a dispatch cycle and writes them to disk at
EndEvent, as JSON Lines or CSV.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import IO, Any

from sqladminlog.domain.config import LogFileFormat
from sqladminlog.domain.log_models import ErrorRecord, LogEntry

from .base import BaseProvider

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["timestamp", "level", "origin", "message", "error_type", "target", "tags"]


class LogFileProvider(BaseProvider):
    """
    Append-only log file sink.

    The file is opened in BeginEvent (parent directories are created) and
    closed in FinalEvent. Lines are written once per cycle.
    """

    def __init__(self, path: str | Path, file_format: LogFileFormat = LogFileFormat.JSON, **filters):
        super().__init__(**filters)
        self.path = Path(path)
        self.file_format = LogFileFormat(file_format)
        self._handle: IO[str] | None = None
        self._buffer: list[dict[str, Any]] = []

    def on_begin(self) -> None:
        self._close()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        is_new = not self.path.exists() or self.path.stat().st_size == 0
        handle = open(self.path, "a", encoding="utf-8", newline="")
        try:
            if self.file_format == LogFileFormat.CSV and is_new:
                csv.writer(handle).writerow(CSV_COLUMNS)
                handle.flush()
        except Exception:
            handle.close()
            raise
        self._handle = handle
        logger.debug("Logfile provider writing to %s", self.path)

    def on_message(self, entry: LogEntry) -> None:
        self._buffer.append(entry.to_dict())

    def on_error(self, record: ErrorRecord) -> None:
        self._buffer.append(record.to_dict())

    def on_end(self) -> None:
        self._write_buffer()

    def on_final(self) -> None:
        try:
            self._write_buffer()
        finally:
            self._close()

    def _close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def _write_buffer(self) -> None:
        """Write buffered rows; rows that fail to write stay buffered for the next attempt."""
        if not self._buffer:
            return
        if self._handle is None:
            raise RuntimeError(f"Log file {self.path} is not open")

        written = 0
        try:
            for row in self._buffer:
                self._write_row(row)
                written += 1
            self._handle.flush()
        finally:
            del self._buffer[:written]

    def _write_row(self, row: dict[str, Any]) -> None:
        if self.file_format == LogFileFormat.CSV:
            csv.writer(self._handle).writerow([
                row.get("timestamp", ""),
                row.get("level", ""),
                row.get("origin", ""),
                row.get("message", ""),
                row.get("error_type", ""),
                row.get("target") or "",
                ";".join(row.get("tags", [])),
            ])
        else:
            self._handle.write(json.dumps(row, ensure_ascii=False, default=str) + "\n")
