"""Unit tests for the content model input records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from contentforge.models import ContentField, ContentType, FieldType, LinkType


class TestContentField:

    def test_wire_aliases(self):
        field = ContentField.model_validate(
            {"id": "ref", "name": "Ref", "type": "Link", "linkType": "Entry", "defaultValue": 1}
        )
        assert field.link_type == LinkType.ENTRY
        assert field.default_value == 1
        assert field.is_link
        assert not field.is_array

    def test_flags_default_false(self):
        field = ContentField(id="x", type="Symbol")
        assert not (field.required or field.localized or field.disabled or field.omitted)
        assert field.validations == []

    def test_unknown_keys_kept_in_raw(self):
        field = ContentField.model_validate({"id": "x", "type": "Symbol", "appearance": "slug"})
        assert field.raw() == {"id": "x", "type": "Symbol", "appearance": "slug"}

    def test_raw_keeps_only_input_keys(self):
        field = ContentField.model_validate(
            {"id": "x", "type": "Symbol", "required": False, "defaultValue": None}
        )
        raw = field.raw()
        assert set(raw) == {"id", "type", "required", "defaultValue"}
        assert raw["defaultValue"] is None
        assert raw["required"] is False

    def test_missing_type_is_unknown(self):
        field = ContentField.model_validate({"id": "x", "name": "X"})
        assert field.type is None
        assert field.base_type == "Unknown"
        assert not (field.is_array or field.is_link)
        assert "type" not in field.raw()

    def test_null_validations_are_empty(self):
        field = ContentField.model_validate({"id": "x", "type": "Symbol", "validations": None})
        assert field.validations == []

    def test_null_item_validations_are_empty(self):
        field = ContentField.model_validate(
            {"id": "a", "type": "Array", "items": {"type": "Symbol", "validations": None}}
        )
        assert field.items is not None
        assert field.items.validations == []

    def test_frozen(self):
        field = ContentField(id="x", type="Symbol")
        with pytest.raises(ValidationError):
            field.required = True  # type: ignore[misc]

    def test_array_items(self):
        field = ContentField.model_validate(
            {"id": "a", "type": "Array", "items": {"type": "Link", "linkType": "Asset"}}
        )
        assert field.is_array
        assert field.items is not None
        assert field.items.link_type == "Asset"


class TestContentType:

    def test_id_from_sys(self):
        content_type = ContentType.model_validate(
            {"sys": {"id": "post", "createdAt": "2024-01-01T00:00:00Z"}, "name": "Post"}
        )
        assert content_type.id == "post"
        assert content_type.sys.created_at == "2024-01-01T00:00:00Z"
        assert content_type.fields == []
        assert content_type.display_field is None

    def test_field_order_preserved(self, sample_content_types):
        assert [f.id for f in sample_content_types[1].fields] == ["name", "bio"]

    def test_field_type_enum_matches_tags(self):
        assert FieldType.RICH_TEXT.value == "RichText"
        assert FieldType("Location") is FieldType.LOCATION

    def test_null_fields_are_empty(self):
        content_type = ContentType.model_validate(
            {"sys": {"id": "post"}, "name": "Post", "fields": None}
        )
        assert content_type.fields == []
