"""JSON renderer — raw field data plus the resolved type label.

This is the only format that keeps the validation objects verbatim, so
downstream tools can re-derive anything the text decoder leaves out.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from contentforge.models.decoded import DecodedContentType, DecodedField, DecodedSchema
from contentforge.renderers._formatting import format_timestamp
from contentforge.renderers.base import BaseReportRenderer

logger = logging.getLogger(__name__)


class JsonRenderer(BaseReportRenderer):
    """Machine-readable report: a metadata block and a content type array."""

    format_name = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def render(self, schema: DecodedSchema) -> str:
        return json.dumps(
            self.build_document(schema),
            indent=self.indent,
            ensure_ascii=False,
            default=str,
        )

    def build_document(self, schema: DecodedSchema) -> dict[str, Any]:
        """Build the report as a plain dict (before serialization)."""
        meta = schema.metadata
        return {
            "metadata": {
                "generatedAt": format_timestamp(meta.generated_at),
                "spaceId": meta.space_id,
                "environmentId": meta.environment_id,
                "totalContentTypes": schema.total_content_types,
            },
            "contentTypes": [
                self._content_type_entry(ct) for ct in schema.content_types
            ],
        }

    def _content_type_entry(self, content_type: DecodedContentType) -> dict[str, Any]:
        return {
            "id": content_type.content_type_id,
            "name": content_type.name,
            "description": content_type.description,
            "displayField": content_type.display_field,
            "fieldsCount": content_type.field_count,
            "createdAt": content_type.created_at,
            "updatedAt": content_type.updated_at,
            "fields": [
                self._safe_field_entry(content_type, field)
                for field in content_type.fields
            ],
        }

    def _safe_field_entry(
        self, content_type: DecodedContentType, field: DecodedField
    ) -> dict[str, Any]:
        try:
            return self.field_entry(field)
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "json renderer failed on field %s.%s: %s",
                content_type.content_type_id,
                field.field_id,
                exc,
            )
            return {"id": field.field_id, "name": field.name, "error": str(exc)}

    def field_entry(self, field: DecodedField) -> dict[str, Any]:
        entry = dict(field.raw)
        entry["fieldTypeDescription"] = field.type_label
        if field.error:
            entry["decodeError"] = field.error
        return entry
