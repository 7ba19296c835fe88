"""Schema source protocol and shared helpers.

A schema source hands the core the complete content type list, or fails
with ``SchemaSourceError``.  Sources never decode or render anything.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from pydantic import ValidationError

from contentforge.models.schema import ContentType

logger = logging.getLogger(__name__)


class SchemaSourceError(RuntimeError):
    """Raised when the content model cannot be retrieved or parsed."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


@runtime_checkable
class SchemaSource(Protocol):
    """Protocol every schema source implements.

    Attributes
    ----------
    source_name : str
        Short identifier shown in console output (e.g. ``"management_api"``).
    """

    @property
    def source_name(self) -> str:
        """Return the name of this source."""
        ...

    def fetch_content_types(self) -> list[ContentType]:
        """Return the full content type list, in API order.

        Raises
        ------
        SchemaSourceError
            On transport, authentication or parse failures.
        """
        ...


def parse_content_types(items: Iterable[Any]) -> list[ContentType]:
    """Validate raw content type records into ``ContentType`` models."""
    content_types: list[ContentType] = []
    for index, item in enumerate(items):
        try:
            content_types.append(ContentType.model_validate(item))
        except ValidationError as exc:
            raise SchemaSourceError(
                f"Content type #{index} is malformed: {exc.error_count()} validation error(s)",
                details=exc.errors(include_url=False),
            ) from exc
    logger.debug("Parsed %d content types", len(content_types))
    return content_types
