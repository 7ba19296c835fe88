"""Main Typer application — imports and registers all CLI commands.

Entry point: ``contentforge`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import typer

from contentforge.cli.commands.audit import audit_cmd
from contentforge.cli.commands.report import report_cmd

app = typer.Typer(
    name="contentforge",
    help="contentforge: Contentful content type and validation reports.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="report", help="Generate a content types and validations report.")(report_cmd)
app.command(name="audit", help="Check which validation rules the decoder can classify.")(audit_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
