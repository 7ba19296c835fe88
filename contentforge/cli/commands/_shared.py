"""Helpers shared by the CLI commands: logging setup and source selection."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from contentforge.config import ReportSettings
from contentforge.models.schema import ContentType
from contentforge.sources import SchemaSource, SchemaSourceError
from contentforge.sources.json_file import JsonFileSource
from contentforge.sources.management_api import ManagementApiSource


def configure_logging(level: str, *, verbose: bool = False) -> None:
    """Route ``contentforge`` log records through a RichHandler on stderr."""
    resolved = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger("contentforge")
    logger.setLevel(resolved)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        )


def select_source(
    settings: ReportSettings, input_path: Path | None, console: Console
) -> SchemaSource:
    """Pick the JSON file source when *input_path* is set, else the API.

    Exits with code 1 when the API is needed but credentials are missing.
    """
    if input_path is not None:
        return JsonFileSource(input_path)

    missing = settings.missing_credentials()
    if missing:
        console.print("[bold red]Missing required environment variables:[/bold red]")
        for name in missing:
            console.print(f"  - {name}")
        console.print(
            "[dim]Check your .env file, or pass --input to read an exported schema.[/dim]"
        )
        raise typer.Exit(code=1)
    return ManagementApiSource.from_settings(settings)


def fetch_or_exit(source: SchemaSource, console: Console) -> list[ContentType]:
    """Fetch the content model, printing the error and exiting on failure."""
    try:
        return source.fetch_content_types()
    except SchemaSourceError as exc:
        console.print(f"[bold red]Error fetching content types:[/bold red] {escape(str(exc))}")
        if exc.details:
            console.print("API error details:", exc.details)
        raise typer.Exit(code=1) from exc
