"""
CLI Orchestrator - Main Typer application.

Wires the command functions into the `sqladminlog` app and handles the
global diagnostic logging options.
"""

import logging
from typing import Optional

import typer

from sqladminlog.infrastructure.logging_config import setup_logging

from .commands import providers_command, run_command, validate_command

app = typer.Typer(
    name="sqladminlog",
    help="📋 Asynchronous logging provider dispatch for SQL Server admin tooling",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("run")(run_command)
app.command("providers")(providers_command)
app.command("validate")(validate_command)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose diagnostic logging."),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Write diagnostic logs to file."),
):
    """
    📋 sqladminlog - background log dispatch to pluggable providers

    🎯 **Available Commands:**
    - `sqladminlog run` - Dispatch input lines through the configured providers
    - `sqladminlog providers` - List configured providers
    - `sqladminlog validate` - Validate logging_config.json
    """
    setup_logging(level=logging.DEBUG if verbose else logging.WARNING, log_file=log_file)
