"""
Console provider.

Renders log entries and error records with rich, colored by level.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from sqladminlog.domain.log_models import ErrorRecord, LogEntry, LogLevel

from .base import BaseProvider

LEVEL_STYLES = {
    LogLevel.DEBUG: "dim white",
    LogLevel.VERBOSE: "white",
    LogLevel.INFO: "cyan",
    LogLevel.IMPORTANT: "bold green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bright_red",
    LogLevel.CRITICAL: "bold white on red",
}


class RichConsoleProvider(BaseProvider):
    """Writes each entry as one line: time, level, origin, message."""

    def __init__(self, console: Console | None = None, show_tracebacks: bool = False, **filters):
        super().__init__(**filters)
        self.console = console or Console(stderr=True)
        self.show_tracebacks = show_tracebacks

    def on_message(self, entry: LogEntry) -> None:
        self.console.print(self._format_line(entry.timestamp.strftime("%H:%M:%S"), entry.level, entry.origin, entry.message))

    def on_error(self, record: ErrorRecord) -> None:
        message = record.message
        if record.error_type:
            message = f"{record.error_type}: {message}"
        if record.target:
            message = f"{message} (target: {record.target})"
        self.console.print(self._format_line(record.timestamp.strftime("%H:%M:%S"), record.level, record.origin, message))
        if self.show_tracebacks and record.traceback_text:
            self.console.print(Text(record.traceback_text.rstrip(), style="dim"))

    @staticmethod
    def _format_line(stamp: str, level: LogLevel, origin: str, message: str) -> Text:
        line = Text()
        line.append(f"[{stamp}] ", style="dim")
        line.append(f"{level.value:<9}", style=LEVEL_STYLES.get(level, "white"))
        if origin:
            line.append(f" [{origin}]", style="dim")
        line.append(f" {message}")
        return line
