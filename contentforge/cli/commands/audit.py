"""``contentforge audit`` — check decoder coverage without writing a report.

Runs the completeness auditor over the content model and lists every
validation rule that fell through to the unclassified fallback.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from contentforge.cli.commands._shared import configure_logging, fetch_or_exit, select_source
from contentforge.config import ReportSettings
from contentforge.core.completeness import audit_completeness
from contentforge.summary.renderer import SummaryRenderer

console = Console()


def audit_cmd(
    input_path: Path = typer.Option(
        None,
        "--input",
        "-i",
        help="Read content types from an exported JSON file instead of the API.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging.",
    ),
) -> None:
    """Report which validation keys, field types and rich text nodes are in use.

    Exits 0 even when unclassified rules are found; the audit is diagnostic.
    """
    settings = ReportSettings()
    configure_logging(settings.log_level, verbose=verbose)

    source = select_source(settings, input_path, console)
    content_types = fetch_or_exit(source, console)
    report = audit_completeness(content_types)

    SummaryRenderer(console=console).print_completeness(report, show_unclassified=True)

    if report.validation_types:
        console.print("[bold]Validation keys:[/bold] " + ", ".join(report.validation_types))
    if report.field_types:
        console.print("[bold]Field types:[/bold] " + ", ".join(report.field_types))
    if report.rich_text_node_types:
        console.print(
            "[bold]Rich text node types:[/bold] " + ", ".join(report.rich_text_node_types)
        )
    if report.rich_text_marks:
        console.print("[bold]Rich text marks:[/bold] " + ", ".join(report.rich_text_marks))
