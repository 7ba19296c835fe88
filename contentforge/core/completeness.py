"""Completeness auditor — checks the decoder against a real schema.

Runs the validation decoder speculatively over every rule and records what
it saw: rule keys, field base types, rich-text node types and marks, and
any rule that fell through to the unclassified ``Other:`` fallback.  Purely
diagnostic; its result never changes a report.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from contentforge.core.validation_decoder import rule_clauses
from contentforge.models.audit import CompletenessReport, UnclassifiedRule
from contentforge.models.schema import ContentField, ContentType

logger = logging.getLogger(__name__)


class _AuditCollector:
    """Accumulates audit findings across one pass over the schema."""

    def __init__(self) -> None:
        self.validation_types: set[str] = set()
        self.field_types: set[str] = set()
        self.node_types: set[str] = set()
        self.marks: set[str] = set()
        self.unclassified: list[UnclassifiedRule] = []

    def collect_keys(self, rule: Any, prefix: str = "") -> None:
        if not isinstance(rule, Mapping):
            return
        for key, value in rule.items():
            self.validation_types.add(f"{prefix}{key}")
            if key == "enabledNodeTypes" and isinstance(value, list):
                self.node_types.update(str(v) for v in value)
            elif key == "enabledMarks" and isinstance(value, list):
                self.marks.update(str(v) for v in value)
            elif key == "nodes" and isinstance(value, Mapping):
                self.node_types.update(str(k) for k in value)

    def check_rule(
        self,
        content_type: ContentType,
        field: ContentField,
        rule: Any,
        owning_field: ContentField | None,
    ) -> None:
        try:
            classified = bool(rule_clauses(rule, owning_field))
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Decoder raised on %s.%s: %s", content_type.name, field.name, exc
            )
            self.unclassified.append(
                UnclassifiedRule(
                    content_type=content_type.name,
                    field=field.name,
                    validation=rule,
                    error=str(exc),
                )
            )
            return

        if not classified:
            self.unclassified.append(
                UnclassifiedRule(
                    content_type=content_type.name,
                    field=field.name,
                    validation=rule,
                )
            )

    def report(self) -> CompletenessReport:
        return CompletenessReport(
            validation_types=sorted(self.validation_types),
            field_types=sorted(self.field_types),
            rich_text_node_types=sorted(self.node_types),
            rich_text_marks=sorted(self.marks),
            unclassified=self.unclassified,
        )


def audit_completeness(content_types: Sequence[ContentType]) -> CompletenessReport:
    """Run the decoder over every rule in *content_types* and report gaps.

    Array item rules are audited too; their keys are recorded with an
    ``items.`` prefix.
    """
    collector = _AuditCollector()

    for content_type in content_types:
        for field in content_type.fields:
            collector.field_types.add(field.base_type)

            for rule in field.validations:
                collector.collect_keys(rule)
                collector.check_rule(content_type, field, rule, field)

            if field.is_array and field.items is not None:
                for rule in field.items.validations:
                    collector.collect_keys(rule, prefix="items.")
                    collector.check_rule(content_type, field, rule, None)

    report = collector.report()
    if report.unclassified:
        logger.warning(
            "%d validation rule(s) fell through to the unclassified fallback",
            len(report.unclassified),
        )
    return report
