"""Report renderers — four projections of the same decoded schema.

Modules
-------
table
    ``TableRenderer``: sections with a pipe-delimited field table.
json_report
    ``JsonRenderer``: raw field data plus resolved type labels.
csv_report
    ``CsvRenderer``: one row per field.
markdown
    ``MarkdownRenderer``: table of contents and a subsection per field.
"""

from __future__ import annotations

from enum import Enum

from contentforge.renderers.base import BaseReportRenderer
from contentforge.renderers.csv_report import CsvRenderer
from contentforge.renderers.json_report import JsonRenderer
from contentforge.renderers.markdown import MarkdownRenderer
from contentforge.renderers.table import TableRenderer


class ReportFormat(str, Enum):
    """Recognized report formats."""

    TABLE = "table"
    JSON = "json"
    CSV = "csv"
    MARKDOWN = "markdown"

    @classmethod
    def from_selector(cls, selector: str | None) -> ReportFormat:
        """Resolve a user-supplied format name.

        Case-insensitive; ``md`` is an alias for ``markdown``.  Anything
        unrecognized falls back to ``table``.
        """
        normalized = (selector or "").strip().lower()
        if normalized == "md":
            return cls.MARKDOWN
        try:
            return cls(normalized)
        except ValueError:
            return cls.TABLE

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]


_EXTENSIONS: dict[ReportFormat, str] = {
    ReportFormat.TABLE: "txt",
    ReportFormat.JSON: "json",
    ReportFormat.CSV: "csv",
    ReportFormat.MARKDOWN: "md",
}

RENDERERS: dict[ReportFormat, type[BaseReportRenderer]] = {
    ReportFormat.TABLE: TableRenderer,
    ReportFormat.JSON: JsonRenderer,
    ReportFormat.CSV: CsvRenderer,
    ReportFormat.MARKDOWN: MarkdownRenderer,
}


def get_renderer(selector: str | ReportFormat | None) -> BaseReportRenderer:
    """Return a renderer instance for *selector* (table when unrecognized)."""
    fmt = selector if isinstance(selector, ReportFormat) else ReportFormat.from_selector(selector)
    return RENDERERS[fmt]()


__all__ = [
    "BaseReportRenderer",
    "CsvRenderer",
    "JsonRenderer",
    "MarkdownRenderer",
    "RENDERERS",
    "ReportFormat",
    "TableRenderer",
    "get_renderer",
]
