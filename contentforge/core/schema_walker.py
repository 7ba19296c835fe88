"""Schema walker — turns raw content types into the decoded record.

Single pass, input order preserved: content types in the order given, fields
in stored order.  No field is skipped; disabled and omitted fields are
surfaced through their flags.

A field that fails to decode is logged and replaced by a degraded entry so
one bad field never costs the rest of the report.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from datetime import datetime
from typing import Any

from contentforge.core.type_resolver import resolve_type
from contentforge.core.validation_decoder import decode_validations
from contentforge.models.decoded import (
    DecodedContentType,
    DecodedField,
    DecodedSchema,
    ReportMetadata,
)
from contentforge.models.schema import ContentField, ContentType

logger = logging.getLogger(__name__)


def render_default_value(value: Any) -> str:
    """Render a field default: strings pass through, everything else is JSON.

    ``None`` (no default) renders as the empty string.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


def decode_field(field: ContentField) -> DecodedField:
    """Decode one field: type label, validation text, flags, default."""
    items = field.items if field.is_array else None

    item_validations: str | None = None
    if items is not None and items.validations:
        # Item rules constrain each element, not the array length.
        item_validations = decode_validations(items.validations)

    return DecodedField(
        field_id=field.id,
        name=field.name,
        base_type=field.base_type,
        type_label=resolve_type(field),
        required=field.required,
        localized=field.localized,
        disabled=field.disabled,
        omitted=field.omitted,
        default_value=render_default_value(field.default_value),
        validations=decode_validations(field.validations, field),
        link_type=field.link_type,
        item_type=items.type if items is not None else None,
        item_link_type=items.link_type if items is not None else None,
        item_validations=item_validations,
        raw=field.raw(),
    )


def _degraded_field(field: ContentField, exc: Exception) -> DecodedField:
    return DecodedField(
        field_id=field.id,
        name=field.name,
        base_type=field.base_type,
        type_label=field.base_type,
        required=field.required,
        localized=field.localized,
        disabled=field.disabled,
        omitted=field.omitted,
        validations=f"Unavailable ({exc})",
        link_type=field.link_type,
        raw={"id": field.id, "name": field.name, "type": field.type},
        error=str(exc),
    )


def decode_content_type(content_type: ContentType) -> DecodedContentType:
    """Decode every field of *content_type*, isolating per-field failures."""
    fields: list[DecodedField] = []
    for field in content_type.fields:
        try:
            fields.append(decode_field(field))
        except Exception as exc:  # noqa: BLE001
            logger.error(
                "Failed to decode field %s.%s: %s", content_type.id, field.id, exc
            )
            fields.append(_degraded_field(field, exc))

    return DecodedContentType(
        content_type_id=content_type.id,
        name=content_type.name,
        description=content_type.description,
        display_field=content_type.display_field,
        created_at=content_type.sys.created_at,
        updated_at=content_type.sys.updated_at,
        fields=fields,
    )


def walk_schema(
    content_types: Sequence[ContentType],
    *,
    space_id: str = "",
    environment_id: str = "master",
    generated_at: datetime | None = None,
) -> DecodedSchema:
    """Decode a whole content model into a ``DecodedSchema``.

    Parameters
    ----------
    content_types:
        The full content type list, in the order it should be reported.
    space_id, environment_id:
        Header metadata only; they play no part in decoding.
    generated_at:
        Report timestamp.  Defaults to now (UTC).
    """
    metadata_kwargs: dict[str, Any] = {
        "space_id": space_id,
        "environment_id": environment_id,
    }
    if generated_at is not None:
        metadata_kwargs["generated_at"] = generated_at

    decoded = [decode_content_type(ct) for ct in content_types]
    logger.debug(
        "Decoded %d content types (%d fields)",
        len(decoded),
        sum(ct.field_count for ct in decoded),
    )
    return DecodedSchema(
        metadata=ReportMetadata(**metadata_kwargs),
        content_types=decoded,
    )
