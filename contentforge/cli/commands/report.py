"""``contentforge report`` — generate a content types and validations report.

Fetches the content model, audits decoder coverage, renders the report in
the selected format, writes it to the output directory and prints a
summary.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from contentforge.cli.commands._shared import configure_logging, fetch_or_exit, select_source
from contentforge.config import ReportSettings
from contentforge.core.completeness import audit_completeness
from contentforge.core.report import build_report
from contentforge.renderers import ReportFormat
from contentforge.sinks.local_file import LocalFileReportSink, default_report_filename
from contentforge.summary.projection import SchemaSummary
from contentforge.summary.renderer import SummaryRenderer

logger = logging.getLogger(__name__)

console = Console()


def report_cmd(
    format_name: str = typer.Option(
        "table",
        "--format",
        "-f",
        help="Output format: table, json, csv, markdown (md). Unknown values fall back to table.",
    ),
    output: str = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file name (default: timestamped name).",
    ),
    output_dir: Path = typer.Option(
        None,
        "--output-dir",
        help="Directory for the report (default: OUTPUT_DIR or 'reports').",
    ),
    input_path: Path = typer.Option(
        None,
        "--input",
        "-i",
        help="Read content types from an exported JSON file instead of the API.",
    ),
    show_unclassified: bool = typer.Option(
        False,
        "--show-unclassified",
        help="List every validation rule the decoder could not classify.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
) -> None:
    """Generate a report of all content types, fields and validations."""
    settings = ReportSettings()
    configure_logging(settings.log_level, verbose=verbose)
    report_format = ReportFormat.from_selector(format_name)

    console.print("[bold]Contentful Content Types Report Generator[/bold]")
    source = select_source(settings, input_path, console)
    if input_path is None:
        console.print(f"Space: {settings.space_id}")
        console.print(f"Environment: {settings.environment_id}")
    else:
        console.print(f"Input: {escape(str(input_path))}")
    console.print(f"Format: {report_format.value}")
    console.print()

    console.print("[cyan]Fetching content types...[/cyan]")
    content_types = fetch_or_exit(source, console)
    console.print(f"[green]Found {len(content_types)} content types[/green]")

    renderer = SummaryRenderer(console=console)
    try:
        completeness = audit_completeness(content_types)
        renderer.print_completeness(completeness, show_unclassified=show_unclassified)
    except Exception as exc:  # noqa: BLE001
        logger.warning("Completeness audit failed: %s", exc)
        console.print(f"[yellow]Completeness audit skipped:[/yellow] {exc}")

    content = build_report(
        content_types,
        report_format,
        space_id=settings.space_id,
        environment_id=settings.environment_id,
    )

    sink = LocalFileReportSink(output_dir or settings.output_dir)
    filename = output or default_report_filename(report_format.extension)
    try:
        path = sink.write(content, filename)
    except OSError as exc:
        console.print(f"[bold red]Error writing report:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    console.print(f"[green]Report saved to:[/green] {escape(str(path))}")
    console.print(f"File size: {len(content.encode('utf-8')) / 1024:.2f} KB")
    console.print()
    renderer.print_summary(SchemaSummary.from_content_types(content_types))
