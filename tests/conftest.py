"""Shared test fixtures for contentforge."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

import pytest

from contentforge.core.schema_walker import walk_schema
from contentforge.models.decoded import DecodedSchema
from contentforge.models.schema import ContentField, ContentType


def _raw_content_types() -> list[dict[str, Any]]:
    """A small but representative content model in Management API shape."""
    return [
        {
            "sys": {
                "id": "blogPost",
                "type": "ContentType",
                "createdAt": "2024-01-15T10:00:00.000Z",
                "updatedAt": "2024-02-01T12:30:00.000Z",
            },
            "name": "Blog Post",
            "description": "A blog article",
            "displayField": "title",
            "fields": [
                {
                    "id": "title",
                    "name": "Title",
                    "type": "Symbol",
                    "required": True,
                    "localized": True,
                    "defaultValue": "Untitled",
                    "validations": [{"size": {"min": 5, "max": 120}}, {"unique": True}],
                },
                {
                    "id": "slug",
                    "name": "Slug",
                    "type": "Symbol",
                    "validations": [{"regexp": {"pattern": "^[a-z0-9-]+$", "flags": None}}],
                },
                {
                    "id": "body",
                    "name": "Body",
                    "type": "RichText",
                    "validations": [
                        {"enabledNodeTypes": ["heading-2", "embedded-entry-block", "hyperlink"]},
                        {"enabledMarks": ["bold", "italic"]},
                        {
                            "nodes": {
                                "embedded-entry-block": [{"linkContentType": ["author"]}],
                                "hyperlink": [],
                            }
                        },
                    ],
                },
                {
                    "id": "author",
                    "name": "Author",
                    "type": "Link",
                    "linkType": "Entry",
                    "required": True,
                    "validations": [{"linkContentType": ["author"]}],
                },
                {
                    "id": "heroImage",
                    "name": "Hero Image",
                    "type": "Link",
                    "linkType": "Asset",
                    "validations": [
                        {"linkMimetypeGroup": ["image"]},
                        {"assetFileSize": {"max": 2097152}},
                    ],
                },
                {
                    "id": "tags",
                    "name": "Tags",
                    "type": "Array",
                    "items": {"type": "Symbol", "validations": [{"in": ["news", "tech"]}]},
                    "validations": [{"size": {"max": 5}}],
                },
                {
                    "id": "related",
                    "name": "Related Posts",
                    "type": "Array",
                    "items": {
                        "type": "Link",
                        "linkType": "Entry",
                        "validations": [{"linkContentType": ["blogPost", "page"]}],
                    },
                },
                {
                    "id": "legacyId",
                    "name": "Legacy ID",
                    "type": "Integer",
                    "disabled": True,
                    "omitted": True,
                },
            ],
        },
        {
            "sys": {
                "id": "author",
                "createdAt": "2023-11-05T08:00:00Z",
                "updatedAt": "2023-11-06T08:00:00Z",
            },
            "name": "Author",
            "displayField": "name",
            "fields": [
                {"id": "name", "name": "Name", "type": "Symbol", "required": True},
                {"id": "bio", "name": "Bio", "type": "Text"},
            ],
        },
        {
            "sys": {"id": "emptyType"},
            "name": "Empty Type",
            "fields": [],
        },
    ]


@pytest.fixture
def raw_content_types() -> list[dict[str, Any]]:
    """The sample content model as raw API dicts."""
    return _raw_content_types()


@pytest.fixture
def sample_content_types() -> list[ContentType]:
    """The sample content model parsed into ``ContentType`` models."""
    return [ContentType.model_validate(item) for item in _raw_content_types()]


@pytest.fixture
def generated_at() -> datetime:
    """A fixed report timestamp."""
    return datetime(2026, 3, 1, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def decoded_schema(
    sample_content_types: list[ContentType], generated_at: datetime
) -> DecodedSchema:
    """The sample content model, decoded."""
    return walk_schema(
        sample_content_types,
        space_id="space-1",
        environment_id="master",
        generated_at=generated_at,
    )


# ---------------------------------------------------------------------------
# Model factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_field() -> Callable[..., ContentField]:
    """Factory fixture: build a ContentField with sensible defaults."""

    def _factory(
        field_id: str = "field",
        field_type: str = "Symbol",
        **overrides: Any,
    ) -> ContentField:
        defaults: dict[str, Any] = {
            "id": field_id,
            "name": field_id.title(),
            "type": field_type,
        }
        defaults.update(overrides)
        return ContentField.model_validate(defaults)

    return _factory


@pytest.fixture
def make_content_type() -> Callable[..., ContentType]:
    """Factory fixture: build a ContentType with sensible defaults."""

    def _factory(
        content_type_id: str = "thing",
        name: str = "Thing",
        fields: list[dict[str, Any]] | None = None,
        **overrides: Any,
    ) -> ContentType:
        defaults: dict[str, Any] = {
            "sys": {"id": content_type_id},
            "name": name,
            "fields": fields or [],
        }
        defaults.update(overrides)
        return ContentType.model_validate(defaults)

    return _factory


@pytest.fixture
def array_field(make_field: Callable[..., ContentField]) -> ContentField:
    """Convenience: an Array<Symbol> field."""
    return make_field("tags", "Array", items={"type": "Symbol"})
