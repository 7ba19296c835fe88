"""Rich terminal renderer for schema summaries and completeness audits.

Console-only output; the report files themselves are produced by
``contentforge.renderers``.
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from contentforge.core.validation_decoder import serialize_rule
from contentforge.models.audit import CompletenessReport
from contentforge.summary.projection import SchemaSummary


class SummaryRenderer:
    """Renders ``SchemaSummary`` and ``CompletenessReport`` as Rich panels.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # ------------------------------------------------------------------
    # Schema summary
    # ------------------------------------------------------------------

    def render_summary(self, summary: SchemaSummary) -> Panel:
        """Render the headline counts and the type breakdown."""
        counts = Table(show_header=False, box=None, pad_edge=False)
        counts.add_column("Metric", style="bold")
        counts.add_column("Value", justify="right")
        for label, value in (
            ("Content Types", summary.content_types),
            ("Total Fields", summary.total_fields),
            ("Required Fields", summary.required_fields),
            ("Localized Fields", summary.localized_fields),
            ("Reference Fields", summary.reference_fields),
            ("Rich Text Fields", summary.rich_text_fields),
            ("Disabled Fields", summary.disabled_fields),
            ("Fields with Validations", summary.fields_with_validations),
        ):
            counts.add_row(label, str(value))

        breakdown = Table(
            title="Field Type Breakdown",
            show_header=True,
            header_style="bold cyan",
            expand=True,
        )
        breakdown.add_column("Type")
        breakdown.add_column("Fields", justify="right", width=8)
        for entry in summary.type_breakdown:
            # Type labels contain square brackets; keep them literal.
            breakdown.add_row(Text(entry.type_label), str(entry.count))

        return Panel(
            Group(counts, Text(""), breakdown),
            title="[bold]Summary[/bold]",
            border_style="blue",
            padding=(1, 2),
        )

    # ------------------------------------------------------------------
    # Completeness audit
    # ------------------------------------------------------------------

    def render_completeness(
        self, report: CompletenessReport, *, show_unclassified: bool = False
    ) -> Panel:
        """Render audit counts, optionally listing every unclassified rule."""
        lines: list[Text] = [
            Text(f"Validation types found: {len(report.validation_types)}"),
            Text(f"Field types found: {len(report.field_types)}"),
        ]
        if report.rich_text_node_types:
            lines.append(Text(f"Rich text node types: {len(report.rich_text_node_types)}"))
        if report.rich_text_marks:
            lines.append(Text(f"Rich text marks: {len(report.rich_text_marks)}"))

        if report.is_complete:
            lines.append(Text("Every validation rule was classified.", style="green"))
            border_style = "green"
        else:
            lines.append(
                Text(
                    f"{len(report.unclassified)} potentially uncaptured validation(s)",
                    style="bold yellow",
                )
            )
            border_style = "yellow"
            if show_unclassified:
                for item in report.unclassified:
                    line = f"  {item.content_type}.{item.field}: {serialize_rule(item.validation)}"
                    if item.error:
                        line += f" (error: {item.error})"
                    lines.append(Text(line, style="dim"))

        return Panel(
            Group(*lines),
            title="[bold]Validation Coverage[/bold]",
            border_style=border_style,
            padding=(1, 2),
        )

    # ------------------------------------------------------------------
    # Standalone print
    # ------------------------------------------------------------------

    def print_summary(self, summary: SchemaSummary) -> None:
        self.console.print(self.render_summary(summary))

    def print_completeness(
        self, report: CompletenessReport, *, show_unclassified: bool = False
    ) -> None:
        self.console.print(
            self.render_completeness(report, show_unclassified=show_unclassified)
        )
