from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import is_err

from datrain.onedrive import (
    MARKER_CONTENT,
    CacheReport,
    MarkerIOError,
    OneDriveError,
    copy_to_onedrive,
    resolve_marker_path,
    write_marker,
)
from datrain.settings import settings

SourceArgument = Annotated[
    Path | None,
    typer.Argument(
        show_default=False,
        help="Directory whose files are copied into the OneDrive folder (default: ./cache_to_onedrive).",
    ),
]


def run() -> None:
    """Write the marker file into the local OneDrive folder."""
    marker = settings.marker
    path_result = resolve_marker_path(marker)
    if is_err(path_result):
        _handle_error(path_result.unwrap_err())
        raise typer.Exit(code=1)

    path = path_result.unwrap()
    typer.echo(f"Copying file to: {path}")

    write_result = write_marker(path, MARKER_CONTENT)
    if is_err(write_result):
        _handle_error(write_result.unwrap_err())
        raise typer.Exit(code=1)

    typer.echo("File created in OneDrive folder. It should sync automatically.")


def cache(source: SourceArgument = None) -> None:
    """Copy files from a local directory into the OneDrive folder."""
    source_dir = source if source is not None else Path(settings.marker.cache_source_dir)
    result = copy_to_onedrive(source_dir, settings.marker)
    if is_err(result):
        _handle_error(result.unwrap_err())
        raise typer.Exit(code=1)

    report = result.unwrap()
    _print_report(report)
    typer.echo("Sync to OneDrive requested. OneDrive client will upload files automatically if running.")
    if not report.succeeded:
        raise typer.Exit(code=1)


def _print_report(report: CacheReport) -> None:
    for copied in report.copied:
        typer.echo(f"Copied {copied.source} to {copied.destination}")
    for failure in report.failures:
        typer.secho(f"Failed to copy {failure.source}: {failure.message}", err=True, fg=typer.colors.RED)


def _handle_error(error: OneDriveError) -> None:
    message = error.message
    if isinstance(error, MarkerIOError):
        message = f"{message}: {error.path} ({error.reason})"

    typer.secho(message, err=True, fg=typer.colors.RED)
