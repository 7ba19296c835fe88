"""SchemaSummary — read-only statistics over a content model.

Computed fresh from the content type list on every call; never stored.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict

from contentforge.core.type_resolver import is_reference, resolve_type
from contentforge.models.schema import ContentType, FieldType


class TypeCount(BaseModel):
    """How many fields resolve to one type label."""

    model_config = ConfigDict(frozen=True)

    type_label: str
    count: int


class SchemaSummary(BaseModel):
    """Headline numbers for a content model."""

    model_config = ConfigDict(frozen=True)

    content_types: int = 0
    total_fields: int = 0
    required_fields: int = 0
    localized_fields: int = 0
    reference_fields: int = 0
    rich_text_fields: int = 0
    disabled_fields: int = 0
    fields_with_validations: int = 0
    type_breakdown: list[TypeCount] = []

    @classmethod
    def from_content_types(
        cls, content_types: Sequence[ContentType], *, top: int = 10
    ) -> SchemaSummary:
        """Summarize *content_types*.

        ``type_breakdown`` keeps the *top* most common type labels, count
        descending; ties keep first-seen order.
        """
        fields = [f for ct in content_types for f in ct.fields]
        labels = Counter(resolve_type(f) for f in fields)
        ranked = sorted(labels.items(), key=lambda item: -item[1])[:top]

        return cls(
            content_types=len(content_types),
            total_fields=len(fields),
            required_fields=sum(1 for f in fields if f.required),
            localized_fields=sum(1 for f in fields if f.localized),
            reference_fields=sum(1 for f in fields if is_reference(f)),
            rich_text_fields=sum(1 for f in fields if f.type == FieldType.RICH_TEXT),
            disabled_fields=sum(1 for f in fields if f.disabled),
            fields_with_validations=sum(1 for f in fields if f.validations),
            type_breakdown=[TypeCount(type_label=label, count=n) for label, n in ranked],
        )
