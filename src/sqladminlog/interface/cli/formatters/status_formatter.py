"""
CLI formatters for provider status and configuration.

Keeps display logic out of the command functions.
"""

import logging
from typing import List

from rich.console import Console
from rich.table import Table

from sqladminlog.domain.config import ProviderSettings
from sqladminlog.domain.logging_state import LoggingState
from sqladminlog.domain.provider import Provider

logger = logging.getLogger(__name__)
console = Console()

STATE_STYLES = {
    LoggingState.INITIALIZING: "yellow",
    LoggingState.READY: "green",
    LoggingState.WRITING: "cyan",
    LoggingState.STOPPED: "blue",
    LoggingState.BROKEN: "bold red",
}


class StatusFormatter:
    """Renders provider and runspace status tables."""

    def display_provider_status(self, providers: List[Provider]) -> None:
        """
        Display runtime status for registered providers.

        Args:
            providers: Providers from the registry
        """
        table = Table(title="📋 Logging Providers")
        table.add_column("Provider", style="cyan", no_wrap=True)
        table.add_column("Implementation", style="blue")
        table.add_column("Enabled")
        table.add_column("Initialized")
        table.add_column("Errors", justify="right")
        table.add_column("Last Error", style="red")

        for provider in providers:
            last = provider.last_error
            table.add_row(
                provider.name,
                type(provider.hooks).__name__,
                self._flag(provider.enabled),
                self._flag(provider.initialized),
                str(provider.error_count_total),
                f"{last.hook.value}: {last.error_type}: {last.message}" if last else "",
            )

        console.print(table)

    def display_state(self, state: LoggingState) -> None:
        style = STATE_STYLES.get(state, "white")
        console.print(f"Logging state: [{style}]{state.value}[/{style}]")

    def display_configured_providers(self, providers: List[ProviderSettings]) -> None:
        """Display providers declared in the logging configuration."""
        if not providers:
            console.print("[yellow]⚠️ No providers configured[/yellow]")
            return

        table = Table(title="⚙️ Configured Providers")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Type", style="magenta")
        table.add_column("Enabled")
        table.add_column("Min Level", style="yellow")
        table.add_column("Filters")
        table.add_column("Output")

        for settings in providers:
            filters = []
            if settings.include_origins:
                filters.append("origins: " + ", ".join(settings.include_origins))
            if settings.exclude_origins:
                filters.append("not: " + ", ".join(settings.exclude_origins))
            if settings.include_tags:
                filters.append("tags: " + ", ".join(settings.include_tags))
            table.add_row(
                settings.name,
                settings.type.value,
                self._flag(settings.enabled),
                settings.min_level.value,
                "; ".join(filters),
                f"{settings.path} ({settings.format.value})" if settings.path else "",
            )

        console.print(table)

    @staticmethod
    def _flag(value: bool) -> str:
        return "[green]✅ Yes[/green]" if value else "[dim]No[/dim]"
