"""Table renderer — one pipe-delimited field table per content type.

Columns: field id, name (with default), type label, required, localized,
status, validations.  Required / localized show ``✓`` or nothing; status
shows ``🚫`` for disabled and ``👁️`` for omitted, space-joined when both
apply.  Pipes inside cell text are escaped as ``\\|``.
"""

from __future__ import annotations

from contentforge.models.decoded import DecodedContentType, DecodedField, DecodedSchema
from contentforge.renderers._formatting import (
    format_date,
    format_timestamp,
    table_cell,
    validations_with_items,
)
from contentforge.renderers.base import BaseReportRenderer

CHECK_MARK = "✓"
DISABLED_MARK = "🚫"
OMITTED_MARK = "👁️"

_COLUMNS = ("Field ID", "Name", "Type", "Required", "Localized", "Status", "Validations")


def _row(cells: list[str]) -> str:
    return "| " + " | ".join(table_cell(c) for c in cells) + " |"


class TableRenderer(BaseReportRenderer):
    """Plain-text report with a fixed-column table per content type."""

    format_name = "table"

    def render_header(self, schema: DecodedSchema) -> list[str]:
        meta = schema.metadata
        return [
            "# Contentful Content Types and Validations Report",
            f"Generated on: {format_timestamp(meta.generated_at)}",
            f"Space ID: {meta.space_id}",
            f"Environment: {meta.environment_id}",
            f"Total Content Types: {schema.total_content_types}",
            "",
        ]

    def render_content_type(
        self, index: int, content_type: DecodedContentType
    ) -> list[str]:
        lines = [f"## {index}. {content_type.name} ({content_type.content_type_id})"]
        if content_type.description:
            lines.append(f"**Description:** {content_type.description}")
        lines.extend([
            f"**Display Field:** {content_type.display_field or 'Not set'}",
            f"**Fields Count:** {content_type.field_count}",
            f"**Created:** {format_date(content_type.created_at)}",
            f"**Last Updated:** {format_date(content_type.updated_at)}",
            "",
        ])

        if content_type.fields:
            lines.append("### Fields:")
            lines.append(_row(list(_COLUMNS)))
            lines.append("|" + "|".join("-" * (len(c) + 2) for c in _COLUMNS) + "|")
            lines.extend(self.render_fields(content_type))
        else:
            lines.append("_No fields defined._")
        lines.extend(["", "---", ""])
        return lines

    def render_field(
        self, content_type: DecodedContentType, field: DecodedField
    ) -> list[str]:
        name = field.name
        if field.has_default:
            name = f"{name} (default: {field.default_value})"

        status = " ".join(
            mark
            for mark, present in (
                (DISABLED_MARK, field.disabled),
                (OMITTED_MARK, field.omitted),
            )
            if present
        )
        return [
            _row([
                field.field_id,
                name,
                field.type_label,
                CHECK_MARK if field.required else "",
                CHECK_MARK if field.localized else "",
                status,
                validations_with_items(field),
            ])
        ]

    def render_field_error(
        self, content_type: DecodedContentType, field: DecodedField, exc: Exception
    ) -> list[str]:
        return [
            _row([field.field_id, field.name, field.base_type, "", "", "", f"Render error: {exc}"])
        ]
