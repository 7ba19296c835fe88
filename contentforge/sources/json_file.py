"""JSON file source — reads content types from an exported file.

Accepted shapes:

- a bare list of content type records
- a Management API collection response (``{"items": [...]}``)
- a ``contentful space export`` document (``{"contentTypes": [...]}``)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from contentforge.models.schema import ContentType
from contentforge.sources import SchemaSourceError, parse_content_types

logger = logging.getLogger(__name__)


class JsonFileSource:
    """Loads a content model from a local JSON file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def source_name(self) -> str:
        return "json_file"

    @property
    def path(self) -> Path:
        return self._path

    def fetch_content_types(self) -> list[ContentType]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise SchemaSourceError(f"Cannot read {self._path}: {exc}") from exc
        except ValueError as exc:
            raise SchemaSourceError(f"{self._path} is not valid JSON: {exc}") from exc

        items = self._extract_items(data)
        logger.info("Loaded %d content types from %s", len(items), self._path)
        return parse_content_types(items)

    def _extract_items(self, data: Any) -> list[Any]:
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            for key in ("items", "contentTypes"):
                if isinstance(data.get(key), list):
                    return data[key]
        raise SchemaSourceError(
            f"{self._path} holds no content type list "
            "(expected a list, 'items' or 'contentTypes')"
        )
