"""
Config Commands - inspect and validate the logging configuration.
"""

import logging
from pathlib import Path

import typer
from pydantic import ValidationError

from sqladminlog.infrastructure.config import LOGGING_CONFIG_FILE, ConfigManager

from ..formatters.status_formatter import StatusFormatter, console

logger = logging.getLogger(__name__)

CONFIG_DIR_OPTION = typer.Option(
    Path("config"),
    "--config-dir",
    "-c",
    help="Directory containing logging_config.json."
)


def providers_command(config_dir: Path = CONFIG_DIR_OPTION):
    """
    List the providers declared in the logging configuration.
    """
    try:
        settings = ConfigManager(config_dir).load_logging_settings()
    except (ValueError, ValidationError) as e:
        logger.error("Failed to load logging config: %s", e)
        console.print(f"[red]❌ Invalid configuration:[/red] {e}")
        raise typer.Exit(1)

    StatusFormatter().display_configured_providers(settings.providers)


def validate_command(config_dir: Path = CONFIG_DIR_OPTION):
    """
    Validate the logging configuration file.
    """
    manager = ConfigManager(config_dir)
    if not manager.repository.exists(LOGGING_CONFIG_FILE):
        console.print(f"[yellow]⚠️ No {LOGGING_CONFIG_FILE}.json in {config_dir} - defaults apply[/yellow]")
        return

    try:
        settings = manager.load_logging_settings()
    except (ValueError, ValidationError) as e:
        logger.error("Config validation failed: %s", e)
        console.print(f"[red]❌ Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(
        f"[green]✅ Configuration valid:[/green] {len(settings.providers)} providers, "
        f"interval {settings.interval_ms}ms, flush on exit "
        f"{'disabled' if settings.disable_flush_on_exit else 'enabled'}"
    )
