"""Decoded record models — the format-independent view consumed by renderers.

Produced fresh by the schema walker on every report and discarded
afterwards.  Nothing here is ever persisted.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DecodedField(BaseModel):
    """One field with its type label and validation text resolved."""

    model_config = ConfigDict(frozen=True)

    field_id: str
    name: str
    base_type: str
    type_label: str
    required: bool = False
    localized: bool = False
    disabled: bool = False
    omitted: bool = False
    default_value: str = ""  # "" when the field has no default
    validations: str = "None"
    link_type: str | None = None
    item_type: str | None = None  # Array fields only
    item_link_type: str | None = None
    item_validations: str | None = None  # None when items carry no rules
    raw: dict[str, Any] = {}
    error: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default_value != ""

    @property
    def is_array(self) -> bool:
        return self.base_type == "Array"


class DecodedContentType(BaseModel):
    """A content type with every field decoded, in stored order."""

    model_config = ConfigDict(frozen=True)

    content_type_id: str
    name: str
    description: str | None = None
    display_field: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    fields: list[DecodedField] = []

    @property
    def field_count(self) -> int:
        return len(self.fields)


class ReportMetadata(BaseModel):
    """Header facts shared by every report format."""

    model_config = ConfigDict(frozen=True)

    space_id: str = ""
    environment_id: str = "master"
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )


class DecodedSchema(BaseModel):
    """The whole decoded content model, ready for rendering."""

    model_config = ConfigDict(frozen=True)

    metadata: ReportMetadata = ReportMetadata()
    content_types: list[DecodedContentType] = []

    @property
    def total_content_types(self) -> int:
        return len(self.content_types)

    @property
    def total_fields(self) -> int:
        return sum(ct.field_count for ct in self.content_types)
