"""contentforge data models — all Pydantic v2, all frozen (immutable)."""

from contentforge.models.audit import CompletenessReport, UnclassifiedRule
from contentforge.models.decoded import (
    DecodedContentType,
    DecodedField,
    DecodedSchema,
    ReportMetadata,
)
from contentforge.models.schema import (
    ContentField,
    ContentType,
    ContentTypeSys,
    FieldItems,
    FieldType,
    LinkType,
    ValidationRule,
)

__all__ = [
    # schema
    "FieldType",
    "LinkType",
    "ValidationRule",
    "FieldItems",
    "ContentField",
    "ContentTypeSys",
    "ContentType",
    # decoded
    "DecodedField",
    "DecodedContentType",
    "DecodedSchema",
    "ReportMetadata",
    # audit
    "UnclassifiedRule",
    "CompletenessReport",
]
