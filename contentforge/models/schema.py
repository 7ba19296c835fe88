"""Content model input records — the schema as returned by the Management API.

These models mirror the Contentful wire format (camelCase keys) and are
read-only snapshots: the decoder and renderers never mutate them.  Unknown
keys are kept (``extra="allow"``) so the JSON report can reproduce the raw
field data verbatim.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldType(str, Enum):
    """Base type tags a content field can carry."""

    SYMBOL = "Symbol"
    TEXT = "Text"
    RICH_TEXT = "RichText"
    INTEGER = "Integer"
    NUMBER = "Number"
    DATE = "Date"
    BOOLEAN = "Boolean"
    OBJECT = "Object"
    LINK = "Link"
    ARRAY = "Array"
    LOCATION = "Location"


class LinkType(str, Enum):
    """Link targets with dedicated reference labels."""

    ENTRY = "Entry"
    ASSET = "Asset"


# A validation rule is an open record: any subset of the recognized keys
# may co-occur, so it stays a plain mapping rather than a closed model.
ValidationRule = dict[str, Any]

# Label used when a field arrives without a type tag.
UNKNOWN_TYPE = "Unknown"


_WIRE_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="allow")


class FieldItems(BaseModel):
    """Item descriptor of an ``Array`` field."""

    model_config = _WIRE_CONFIG

    type: str | None = None
    link_type: str | None = Field(default=None, alias="linkType")
    validations: list[Any] = []

    @field_validator("validations", mode="before")
    @classmethod
    def null_validations_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class ContentField(BaseModel):
    """One typed, independently validated slot within a content type."""

    model_config = _WIRE_CONFIG

    id: str
    name: str = ""
    type: str | None = None
    required: bool = False
    localized: bool = False
    disabled: bool = False
    omitted: bool = False
    default_value: Any = Field(default=None, alias="defaultValue")
    validations: list[Any] = []
    link_type: str | None = Field(default=None, alias="linkType")
    items: FieldItems | None = None

    @field_validator("validations", mode="before")
    @classmethod
    def null_validations_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def base_type(self) -> str:
        """The type tag, or ``Unknown`` when the field carries none."""
        return self.type or UNKNOWN_TYPE

    @property
    def is_array(self) -> bool:
        return self.type == FieldType.ARRAY

    @property
    def is_link(self) -> bool:
        return self.type == FieldType.LINK

    def raw(self) -> dict[str, Any]:
        """Return the field as it appeared on the wire (camelCase keys).

        Only keys present in the input are kept; explicit nulls survive.
        """
        data = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        data.update(self.model_extra or {})
        return data


class ContentTypeSys(BaseModel):
    """System metadata block of a content type."""

    model_config = _WIRE_CONFIG

    id: str
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class ContentType(BaseModel):
    """A named schema definition consisting of an ordered list of fields."""

    model_config = _WIRE_CONFIG

    sys: ContentTypeSys
    name: str
    description: str | None = None
    display_field: str | None = Field(default=None, alias="displayField")
    fields: list[ContentField] = []

    @field_validator("fields", mode="before")
    @classmethod
    def null_fields_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def id(self) -> str:
        return self.sys.id
