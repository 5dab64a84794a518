"""
Base provider.

Supplies no-op lifecycle hooks and the standard message filter so
concrete providers only override what they need.
"""

from __future__ import annotations

from typing import Iterable

from sqladminlog.domain.log_models import ErrorRecord, LogEntry, LogLevel


class BaseProvider:
    """
    Default implementation of the LoggingProvider interface.

    Filtering:
        min_level       - entries below this level are ignored
        include_origins - when set, origin must start with one of these
        exclude_origins - origins starting with one of these are ignored
        include_tags    - when set, entry must carry at least one of these
    """

    def __init__(
        self,
        min_level: LogLevel = LogLevel.DEBUG,
        include_origins: Iterable[str] = (),
        exclude_origins: Iterable[str] = (),
        include_tags: Iterable[str] = (),
    ):
        self.min_level = min_level
        self.include_origins = tuple(include_origins)
        self.exclude_origins = tuple(exclude_origins)
        self.include_tags = frozenset(include_tags)

    def on_begin(self) -> None:
        pass

    def on_start(self) -> None:
        pass

    def on_message(self, entry: LogEntry) -> None:
        pass

    def on_error(self, record: ErrorRecord) -> None:
        pass

    def on_end(self) -> None:
        pass

    def on_final(self) -> None:
        pass

    def message_applies(self, entry: LogEntry) -> bool:
        if entry.level < self.min_level:
            return False
        if not self._origin_applies(entry.origin):
            return False
        if self.include_tags and not self.include_tags.intersection(entry.tags):
            return False
        return True

    def error_applies(self, record: ErrorRecord) -> bool:
        return self._origin_applies(record.origin)

    def _origin_applies(self, origin: str) -> bool:
        if self.include_origins and not origin.startswith(self.include_origins):
            return False
        if self.exclude_origins and origin.startswith(self.exclude_origins):
            return False
        return True
