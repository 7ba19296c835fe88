"""CSV renderer — one row per field, flattened with its content type.

Free-text columns are double-quoted with internal quotes doubled;
identifier columns stay bare; flags are ``YES`` / ``NO``.  A content type
without fields still gets exactly one placeholder row.
"""

from __future__ import annotations

from contentforge.models.decoded import DecodedContentType, DecodedField, DecodedSchema
from contentforge.renderers._formatting import csv_quote, yes_no
from contentforge.renderers.base import BaseReportRenderer

CSV_HEADER = (
    "ContentType ID",
    "ContentType Name",
    "Field ID",
    "Field Name",
    "Field Type",
    "Field Type Description",
    "Required",
    "Localized",
    "Disabled",
    "Omitted",
    "Default Value",
    "Validations",
    "Array Item Validations",
    "ContentType Description",
    "Display Field",
    "Created At",
    "Updated At",
)

NO_FIELDS = "No fields"


def _content_type_tail(content_type: DecodedContentType) -> list[str]:
    return [
        csv_quote(content_type.description or ""),
        csv_quote(content_type.display_field or ""),
        content_type.created_at or "",
        content_type.updated_at or "",
    ]


class CsvRenderer(BaseReportRenderer):
    """Flat CSV export, suitable for spreadsheets."""

    format_name = "csv"

    def render_header(self, schema: DecodedSchema) -> list[str]:
        return [",".join(CSV_HEADER)]

    def render_content_type(
        self, index: int, content_type: DecodedContentType
    ) -> list[str]:
        if not content_type.fields:
            row = [
                content_type.content_type_id,
                csv_quote(content_type.name),
                "",
                "",
                "",
                csv_quote(NO_FIELDS),
                "",
                "",
                "",
                "",
                "",
                csv_quote(NO_FIELDS),
                "",
                *_content_type_tail(content_type),
            ]
            return [",".join(row)]
        return self.render_fields(content_type)

    def render_field(
        self, content_type: DecodedContentType, field: DecodedField
    ) -> list[str]:
        row = [
            content_type.content_type_id,
            csv_quote(content_type.name),
            field.field_id,
            csv_quote(field.name),
            field.base_type,
            csv_quote(field.type_label),
            yes_no(field.required),
            yes_no(field.localized),
            yes_no(field.disabled),
            yes_no(field.omitted),
            csv_quote(field.default_value),
            csv_quote(field.validations),
            csv_quote(field.item_validations or ""),
            *_content_type_tail(content_type),
        ]
        return [",".join(row)]

    def render_field_error(
        self, content_type: DecodedContentType, field: DecodedField, exc: Exception
    ) -> list[str]:
        row = [
            content_type.content_type_id,
            csv_quote(content_type.name),
            field.field_id,
            csv_quote(field.name),
            field.base_type,
            csv_quote(field.base_type),
            yes_no(field.required),
            yes_no(field.localized),
            yes_no(field.disabled),
            yes_no(field.omitted),
            csv_quote(""),
            csv_quote(f"Render error: {exc}"),
            csv_quote(""),
            *_content_type_tail(content_type),
        ]
        return [",".join(row)]
