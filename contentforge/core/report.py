"""Report builder — the core boundary.

Takes the fully materialized content type list and a format selector and
returns the finished report string.  No I/O happens here: fetching the
schema and writing the report belong to the sources and sinks.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from contentforge.core.schema_walker import walk_schema
from contentforge.models.schema import ContentType
from contentforge.renderers import ReportFormat, get_renderer


def build_report(
    content_types: Sequence[ContentType],
    selector: str | ReportFormat | None = ReportFormat.TABLE,
    *,
    space_id: str = "",
    environment_id: str = "master",
    generated_at: datetime | None = None,
) -> str:
    """Decode *content_types* and render them in the selected format.

    Parameters
    ----------
    content_types:
        The whole content model, in report order.
    selector:
        ``table`` (default), ``json``, ``csv``, ``markdown`` or ``md``.
        Unrecognized values fall back to ``table``.
    space_id, environment_id:
        Report header metadata.
    generated_at:
        Report timestamp; defaults to now (UTC).
    """
    schema = walk_schema(
        content_types,
        space_id=space_id,
        environment_id=environment_id,
        generated_at=generated_at,
    )
    return get_renderer(selector).render(schema)
