"""contentforge: Contentful content model reports.

Decodes content types, their fields and validation rules into canonical
descriptions and renders them as table text, JSON, CSV or Markdown.
"""

__version__ = "0.1.0"
__description__ = "Contentful content type and validation report generator"

from contentforge.core.report import build_report
from contentforge.core.schema_walker import walk_schema
from contentforge.core.type_resolver import resolve_type
from contentforge.core.validation_decoder import decode_validations

__all__ = [
    "build_report",
    "decode_validations",
    "resolve_type",
    "walk_schema",
    "__version__",
]
