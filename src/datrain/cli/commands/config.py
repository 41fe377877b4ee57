from __future__ import annotations

import json
from enum import Enum
from typing import Annotated

import typer
import yaml
from result import Ok, Result, is_err

from datrain.config import ConfigError, ConfigNotFoundError, GlobalConfig, load_global_config
from datrain.settings import settings


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]

app = typer.Typer(help="Inspect DatRain configuration.")


@app.callback(invoke_without_command=True)
def _config_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("show")
def show(format: FormatOption = OutputFormat.YAML) -> None:
    """Show the effective marker and logging configuration."""
    selected_format = OutputFormat(format)
    result = _load_effective_config()
    if is_err(result):
        _handle_error(result.unwrap_err())
        raise typer.Exit(code=1)

    payload = {
        "marker": settings.marker.model_dump(mode="json"),
        "logging": result.unwrap().logging.model_dump(mode="json"),
    }
    typer.echo(_format_payload(payload, selected_format))


def _load_effective_config() -> Result[GlobalConfig, ConfigError]:
    result = load_global_config(settings.to_paths_config())
    if is_err(result) and isinstance(result.unwrap_err(), ConfigNotFoundError):
        return Ok(GlobalConfig())
    return result


def _format_payload(payload: dict[str, object], format: OutputFormat) -> str:
    if format is OutputFormat.JSON:
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)


def _handle_error(error: ConfigError) -> None:
    message = f"[global] {error.message}"
    expected_path = getattr(error, "expected_path", None)
    error_path = getattr(error, "path", None)
    if expected_path is not None:
        message = f"{message} (expected at {expected_path})"
    elif error_path is not None:
        message = f"{message} ({error_path})"

    typer.secho(message, err=True, fg=typer.colors.RED)
