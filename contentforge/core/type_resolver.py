"""Field type resolver — canonical type labels for content fields.

Reference targets are read from the field's own validation rules through
the decoder's ``link_targets`` scan, so both components agree on which
rule keys name a target content type.

Labels
------
- ``Reference to [post, page]`` / ``Reference to Entry`` / ``Reference to Asset``
- ``Link to <linkType>`` for any other link type, ``Link`` when it is missing
- ``Array<...>`` wrapping the item label, ``Array`` when items are missing
- the base type tag verbatim for everything else, ``Unknown`` when it is missing
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from contentforge.core.validation_decoder import link_targets
from contentforge.models.schema import ContentField, FieldType, LinkType


def _link_label(link_type: str | None, validations: Sequence[Any] | None) -> str:
    if link_type == LinkType.ENTRY:
        targets = link_targets(validations)
        if targets:
            return f"Reference to [{', '.join(targets)}]"
        return "Reference to Entry"
    if link_type == LinkType.ASSET:
        return "Reference to Asset"
    if not link_type:
        return FieldType.LINK.value
    return f"Link to {link_type}"


def resolve_type(field: ContentField) -> str:
    """Return the canonical type label for *field*.

    Pure and idempotent: reads the field and its validations, never
    mutates them.
    """
    if field.type == FieldType.LINK:
        return _link_label(field.link_type, field.validations)

    if field.type == FieldType.ARRAY:
        items = field.items
        if items is None or not items.type:
            return FieldType.ARRAY.value
        if items.type == FieldType.LINK:
            return f"Array<{_link_label(items.link_type, items.validations)}>"
        return f"Array<{items.type}>"

    return field.base_type


def is_reference(field: ContentField) -> bool:
    """Whether *field* points at entries or assets (directly or as array items)."""
    if field.type == FieldType.LINK:
        return True
    return (
        field.type == FieldType.ARRAY
        and field.items is not None
        and field.items.type == FieldType.LINK
    )
