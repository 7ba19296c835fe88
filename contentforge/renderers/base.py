"""Base class for the report renderers.

Every renderer consumes the same ``DecodedSchema`` and returns one string.
Line-oriented formats (table, CSV, Markdown) share the header / section /
field skeleton below; each field is rendered in isolation so that one
failure becomes an error line instead of aborting the report.
"""

from __future__ import annotations

import logging

from contentforge.models.decoded import DecodedContentType, DecodedField, DecodedSchema

logger = logging.getLogger(__name__)


class BaseReportRenderer:
    """Skeleton for line-oriented report formats.

    Subclasses override ``render_header``, ``render_content_type``,
    ``render_field`` and ``render_field_error``.
    """

    format_name: str = ""

    def render(self, schema: DecodedSchema) -> str:
        """Render *schema* into the finished report string."""
        lines = self.render_header(schema)
        for index, content_type in enumerate(schema.content_types, start=1):
            lines.extend(self.render_content_type(index, content_type))
        return "\n".join(lines)

    def render_header(self, schema: DecodedSchema) -> list[str]:
        return []

    def render_content_type(
        self, index: int, content_type: DecodedContentType
    ) -> list[str]:
        raise NotImplementedError

    def render_field(
        self, content_type: DecodedContentType, field: DecodedField
    ) -> list[str]:
        raise NotImplementedError

    def render_field_error(
        self, content_type: DecodedContentType, field: DecodedField, exc: Exception
    ) -> list[str]:
        raise NotImplementedError

    def render_fields(self, content_type: DecodedContentType) -> list[str]:
        """Render every field of *content_type*, isolating failures per field."""
        lines: list[str] = []
        for field in content_type.fields:
            try:
                lines.extend(self.render_field(content_type, field))
            except Exception as exc:  # noqa: BLE001
                logger.error(
                    "%s renderer failed on field %s.%s: %s",
                    self.format_name,
                    content_type.content_type_id,
                    field.field_id,
                    exc,
                )
                lines.extend(self.render_field_error(content_type, field, exc))
        return lines
