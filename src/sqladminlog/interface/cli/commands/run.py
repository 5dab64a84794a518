"""
Run Command - feed messages through the logging runspace.

Starts the dispatch loop with the configured providers, enqueues one
log entry per input line, then stops the runspace (flushing the queues)
and reports provider status.
"""

import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError

from sqladminlog.application.container import Container
from sqladminlog.domain.log_models import LogLevel
from sqladminlog.domain.logging_state import LoggingState

from ..formatters.status_formatter import StatusFormatter, console

logger = logging.getLogger(__name__)


def run_command(
    config_dir: Path = typer.Option(
        Path("config"),
        "--config-dir",
        "-c",
        help="Directory containing logging_config.json."
    ),
    input_file: str = typer.Option(
        "-",
        "--input",
        "-i",
        help="File with one message per line ('-' reads stdin)."
    ),
    level: str = typer.Option(
        "Info",
        "--level",
        "-l",
        help="Level for every message (Debug, Verbose, Info, Important, Warning, Error, Critical)."
    ),
    origin: str = typer.Option(
        "cli",
        "--origin",
        "-o",
        help="Origin tag for every message."
    ),
):
    """
    Dispatch input lines to the configured logging providers.
    """
    parsed_level = LogLevel.from_string(level)
    if parsed_level is None:
        console.print(f"[red]❌ Unknown level:[/red] {level}")
        raise typer.Exit(2)

    try:
        service = Container(config_dir).logging_service
    except (ValueError, ValidationError) as e:
        logger.error("Failed to load logging config: %s", e)
        console.print(f"[red]❌ Invalid configuration:[/red] {e}")
        raise typer.Exit(1)

    if not service.get_providers():
        console.print("[yellow]⚠️ No providers configured - messages will be discarded[/yellow]")

    count = 0
    service.start_logging_runspace()
    try:
        for line in _read_lines(input_file):
            if not line.strip():
                continue
            service.write_message(line, level=parsed_level, origin=origin)
            count += 1
    finally:
        stopped = service.stop_logging_runspace()

    formatter = StatusFormatter()
    console.print(f"[blue]📊 Dispatched {count} messages[/blue]")
    formatter.display_provider_status(service.get_providers())
    state = service.get_logging_state()
    formatter.display_state(state)

    if not stopped:
        console.print("[red]❌ Logging runspace did not stop in time[/red]")
        raise typer.Exit(1)
    if state == LoggingState.BROKEN:
        raise typer.Exit(1)


def _read_lines(input_file: str):
    if input_file == "-":
        for line in sys.stdin:
            yield line.rstrip("\r\n")
        return
    with open(input_file, "r", encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\r\n")
