"""Completeness audit models — diagnostics over the validation decoder."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class UnclassifiedRule(BaseModel):
    """A validation rule the decoder could not map to a known clause."""

    model_config = ConfigDict(frozen=True)

    content_type: str
    field: str
    validation: Any
    error: str | None = None  # set when decoding raised instead of falling back


class CompletenessReport(BaseModel):
    """Everything the auditor saw while running the decoder over a schema."""

    model_config = ConfigDict(frozen=True)

    validation_types: list[str] = []
    field_types: list[str] = []
    rich_text_node_types: list[str] = []
    rich_text_marks: list[str] = []
    unclassified: list[UnclassifiedRule] = []

    @property
    def is_complete(self) -> bool:
        """True when every rule decoded into at least one known clause."""
        return not self.unclassified
