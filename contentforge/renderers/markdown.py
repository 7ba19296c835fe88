"""Markdown renderer — table of contents plus one subsection per field.

Each content type gets an anchor derived from its name (see
``anchor_slug``).  Two names that normalize to the same slug share an
anchor; no deduplication is attempted.
"""

from __future__ import annotations

from contentforge.models.decoded import DecodedContentType, DecodedField, DecodedSchema
from contentforge.renderers._formatting import (
    anchor_slug,
    format_date,
    format_timestamp,
    inline_code,
)
from contentforge.renderers.base import BaseReportRenderer


class MarkdownRenderer(BaseReportRenderer):
    """Human-oriented Markdown report."""

    format_name = "markdown"

    def render_header(self, schema: DecodedSchema) -> list[str]:
        meta = schema.metadata
        lines = [
            "# Contentful Content Types Report",
            "",
            f"**Generated:** {format_timestamp(meta.generated_at)}",
            f"**Space ID:** {meta.space_id}",
            f"**Environment:** {meta.environment_id}",
            f"**Total Content Types:** {schema.total_content_types}",
            "",
            "## Table of Contents",
            "",
        ]
        for index, content_type in enumerate(schema.content_types, start=1):
            lines.append(
                f"{index}. [{content_type.name}](#{anchor_slug(content_type.name)})"
            )
        lines.append("")
        return lines

    def render_content_type(
        self, index: int, content_type: DecodedContentType
    ) -> list[str]:
        lines = [
            f"## {content_type.name} {{#{anchor_slug(content_type.name)}}}",
            "",
            f"- **ID:** {inline_code(content_type.content_type_id)}",
            f"- **Display Field:** {content_type.display_field or 'Not set'}",
            f"- **Fields:** {content_type.field_count}",
            f"- **Created:** {format_date(content_type.created_at)}",
            f"- **Updated:** {format_date(content_type.updated_at)}",
        ]
        if content_type.description:
            lines.extend(["", f"> {content_type.description}"])

        lines.append("")
        if content_type.fields:
            lines.extend(["### Fields", ""])
            lines.extend(self.render_fields(content_type))
        else:
            lines.extend(["_No fields defined._", ""])
        lines.extend(["---", ""])
        return lines

    def render_field(
        self, content_type: DecodedContentType, field: DecodedField
    ) -> list[str]:
        lines = [
            f"#### {field.name}",
            "",
            f"- **ID:** {inline_code(field.field_id)}",
            f"- **Type:** {inline_code(field.type_label)}",
            f"- **Base Type:** {field.base_type}",
        ]
        if field.link_type:
            lines.append(f"- **Link Type:** {field.link_type}")

        badges = [
            f"`{label}`"
            for label, present in (
                ("Required", field.required),
                ("Localized", field.localized),
                ("Disabled", field.disabled),
                ("Omitted", field.omitted),
            )
            if present
        ]
        if badges:
            lines.append(f"- **Properties:** {' '.join(badges)}")

        if field.has_default:
            lines.append(f"- **Default Value:** {inline_code(field.default_value)}")

        lines.append(f"- **Validations:** {inline_code(field.validations)}")

        if field.is_array and field.item_type:
            lines.append(f"- **Array Item Type:** {field.item_type}")
            if field.item_link_type:
                lines.append(f"- **Array Item Link Type:** {field.item_link_type}")
            if field.item_validations:
                lines.append(
                    f"- **Array Item Validations:** {inline_code(field.item_validations)}"
                )

        lines.append("")
        return lines

    def render_field_error(
        self, content_type: DecodedContentType, field: DecodedField, exc: Exception
    ) -> list[str]:
        return [
            f"#### {field.name}",
            "",
            f"- **ID:** {inline_code(field.field_id)}",
            f"- **Render error:** {exc}",
            "",
        ]
