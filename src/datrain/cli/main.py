from __future__ import annotations

import os
from typing import Annotated

import typer

from datrain.common import LoggingConfig, create_logger, disable_library_logging, setup_cli_logging
from datrain.config import load_global_config
from datrain.settings import settings

from .commands import config as config_commands
from .commands import onedrive as onedrive_commands

logger = create_logger("cli")

app = typer.Typer(help="DatRain command-line interface. Without a command, writes the OneDrive marker file.")
app.command("run")(onedrive_commands.run)
app.command("cache")(onedrive_commands.cache)
app.add_typer(config_commands.app, name="config")


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        onedrive_commands.run()


def _setup_logging() -> None:
    global_config = load_global_config(settings.to_paths_config()).unwrap_or(None)
    logging_config = global_config.logging if global_config else LoggingConfig()

    if not logging_config.enabled:
        return

    try:
        setup_cli_logging(
            app_info=settings.app,
            config=logging_config,
            paths=settings.to_paths_config(),
        )
    except OSError:
        # Unusable log location: commands run without a file sink.
        disable_library_logging()
        return

    logger.debug("CLI logging initialized", config=logging_config.model_dump())


def main() -> None:
    """Entrypoint for the datrain CLI."""
    _setup_logging()
    app()
