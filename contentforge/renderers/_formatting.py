"""Shared formatting helpers for the report renderers.

Escaping is format-specific and lives here so each renderer applies the
same rule to every cell it writes.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from contentforge.models.decoded import DecodedField

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_SLUG = re.compile(r"[^a-z0-9-]")


def format_timestamp(value: datetime) -> str:
    """UTC ISO-8601 with a ``Z`` suffix, second precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def format_date(value: str | None) -> str:
    """Render an API timestamp as ``YYYY-MM-DD``.

    Unparseable values are returned verbatim; a missing value is ``Unknown``.

    >>> format_date("2024-03-01T10:20:30.123Z")
    '2024-03-01'
    """
    if not value:
        return "Unknown"
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return value


def anchor_slug(name: str) -> str:
    """Markdown anchor for a content type name.

    Lower-cased, whitespace runs collapsed to ``-``, anything outside
    ``[a-z0-9-]`` dropped.

    >>> anchor_slug("Blog Post!")
    'blog-post'
    """
    slug = _WHITESPACE_RUN.sub("-", name.lower())
    return _NON_SLUG.sub("", slug)


def table_cell(text: str) -> str:
    """Escape text for a pipe-delimited table cell."""
    return text.replace("|", "\\|").replace("\r", " ").replace("\n", " ")


def csv_quote(text: str) -> str:
    """Wrap text in double quotes, doubling any internal quote."""
    return '"' + text.replace('"', '""') + '"'


def yes_no(flag: bool) -> str:
    return "YES" if flag else "NO"


def inline_code(text: str) -> str:
    """Markdown inline code that survives backticks inside *text*."""
    text = text.replace("\r", " ").replace("\n", " ")
    if "`" in text:
        return f"`` {text} ``"
    return f"`{text}`"


def validations_with_items(field: DecodedField) -> str:
    """Field validation text, followed by the array item rules when present."""
    if field.item_validations:
        return f"{field.validations} [items: {field.item_validations}]"
    return field.validations
