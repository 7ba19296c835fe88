"""Validation rule decoder — open validation records to readable clauses.

A validation rule is an open record: any subset of the recognized keys may
co-occur in one rule, and a field may carry several rules.  Decoding walks
``RULE_CLAUSES``, a fixed, ordered tuple of ``(key, formatter)`` pairs,
over each rule, so clause order never depends on the input key order.

The decoder emits plain text only.  Renderers escape it for their format.

Output shape
------------
- clauses within one rule are joined with ``"; "``
- rules within a field are joined with ``" | "``
- an empty or absent rule list decodes to ``"None"``
- a rule that yields no recognized clause decodes to ``Other: <json>``
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from contentforge.models.schema import ContentField

logger = logging.getLogger(__name__)

NO_VALIDATIONS = "None"
CLAUSE_SEPARATOR = "; "
RULE_SEPARATOR = " | "
UNCLASSIFIED_PREFIX = "Other: "

Formatter = Callable[[Any, "ContentField | None"], list[str]]


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _fmt_value(value: Any) -> str:
    """Render a bound the way the API sent it (``1.0`` stays ``1``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _bracketed(values: Sequence[Any]) -> str:
    return "[" + ", ".join(str(v) for v in values) + "]"


def bounded_range(label: str, bounds: Any, unit: str = "") -> str | None:
    """Format a ``{min?, max?}`` pair.

    Both bounds give ``"<Label>: <min>-<max> <unit>"``, a single bound gives
    ``"Min <label>: <min> <unit>"`` or ``"Max <label>: <max> <unit>"``.
    Returns ``None`` when neither bound is set.

    >>> bounded_range("Length", {"min": 5, "max": 10}, "chars")
    'Length: 5-10 chars'
    >>> bounded_range("Value", {"max": 3})
    'Max value: 3'
    """
    if not isinstance(bounds, Mapping):
        raise TypeError(f"expected a {{min, max}} mapping, got {type(bounds).__name__}")

    low = bounds.get("min")
    high = bounds.get("max")
    suffix = f" {unit}" if unit else ""

    if low is not None and high is not None:
        return f"{label}: {_fmt_value(low)}-{_fmt_value(high)}{suffix}"
    if low is not None:
        return f"Min {label.lower()}: {_fmt_value(low)}{suffix}"
    if high is not None:
        return f"Max {label.lower()}: {_fmt_value(high)}{suffix}"
    return None


def _pattern(value: Any) -> str:
    """Render a regexp constraint as ``/pattern/flags``.

    Flags always come from the constraint object itself.
    """
    if isinstance(value, Mapping):
        pattern = value.get("pattern", "")
        flags = value.get("flags") or ""
    else:
        pattern, flags = value, ""
    return f"/{pattern}/{flags}"


def link_targets(rules: Sequence[Any] | None) -> list[str]:
    """Collect the allowed link-target content types from *rules*.

    Reads ``linkContentType`` (a single name or a list) and then
    ``linkContentTypes``, preserving input order.  Non-mapping rules are
    ignored.
    """
    targets: list[str] = []
    for rule in rules or []:
        if not isinstance(rule, Mapping):
            continue
        single = rule.get("linkContentType")
        if single:
            targets.extend(str(t) for t in _as_list(single))
        multiple = rule.get("linkContentTypes")
        if isinstance(multiple, (list, tuple)):
            targets.extend(str(t) for t in multiple)
    return targets


# ---------------------------------------------------------------------------
# Per-key formatters
# ---------------------------------------------------------------------------


def _unique(value: Any, field: ContentField | None) -> list[str]:
    return ["Unique"] if value else []


def _size(value: Any, field: ContentField | None) -> list[str]:
    clauses: list[str] = []
    length = bounded_range("Length", value, "chars")
    if length:
        clauses.append(length)
    # The same key means item count on arrays; surface both readings.
    if field is not None and field.is_array:
        count = bounded_range("Array size", value, "items")
        if count:
            clauses.append(count)
    return clauses


def _range(value: Any, field: ContentField | None) -> list[str]:
    clause = bounded_range("Value", value)
    return [clause] if clause else []


def _options(value: Any, field: ContentField | None) -> list[str]:
    if not isinstance(value, (list, tuple)) or not value:
        return []
    quoted = ", ".join(f'"{option}"' for option in value)
    return [f"Options: [{quoted}]"]


def _link_content_type(value: Any, field: ContentField | None) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [f"Links to: {_bracketed(value)}"]
    return [f"Links to: {value}"] if value else []


def _link_content_types(value: Any, field: ContentField | None) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [f"Links to any: {_bracketed(value)}"]


def _mimetype_group(value: Any, field: ContentField | None) -> list[str]:
    groups = _as_list(value)
    return [f"Asset types: {_bracketed(groups)}"] if groups else []


def _asset_file_size(value: Any, field: ContentField | None) -> list[str]:
    clause = bounded_range("Asset size", value, "bytes")
    return [clause] if clause else []


def _image_dimensions(value: Any, field: ContentField | None) -> list[str]:
    if not isinstance(value, Mapping):
        raise TypeError("assetImageDimensions must be a mapping")
    parts: list[str] = []
    for key, label in (("width", "Width"), ("height", "Height")):
        if value.get(key):
            clause = bounded_range(label, value[key], "px")
            if clause:
                parts.append(clause)
    return [f"Image dimensions: {', '.join(parts)}"] if parts else []


def _regexp(value: Any, field: ContentField | None) -> list[str]:
    return [f"Pattern: {_pattern(value)}"] if value else []


def _node_types(value: Any, field: ContentField | None) -> list[str]:
    if value is None:
        return []
    return [f"Rich text nodes: {_bracketed(_as_list(value))}"]


def _marks(value: Any, field: ContentField | None) -> list[str]:
    if value is None:
        return []
    return [f"Rich text marks: {_bracketed(_as_list(value))}"]


# Nested rich-text permissions, in output order.
_NODE_PERMISSIONS: tuple[tuple[str, str], ...] = (
    ("embedded-entry-block", "Embedded entries"),
    ("embedded-entry-inline", "Inline entries"),
    ("embedded-asset-block", "Embedded assets"),
    ("entry-hyperlink", "Entry links"),
    ("asset-hyperlink", "Asset links"),
    ("hyperlink", "External links"),
)


def _node_permission(label: str, spec: Any) -> str:
    """One nested node kind: its allowed targets and optional count bound."""
    rules = [r for r in _as_list(spec) if isinstance(r, Mapping)]
    targets = link_targets(rules)
    text = f"{label}: {_bracketed(targets) if targets else 'allowed'}"

    counts = [
        clause
        for clause in (
            bounded_range("Count", r["size"], "nodes") for r in rules if r.get("size")
        )
        if clause
    ]
    if counts:
        text += f" ({', '.join(counts)})"
    return text


def _nodes(value: Any, field: ContentField | None) -> list[str]:
    if not isinstance(value, Mapping):
        raise TypeError("nodes must be a mapping of node type to permissions")
    parts = [
        _node_permission(label, value[key])
        for key, label in _NODE_PERMISSIONS
        if key in value
    ]
    return [f"Rich text content: {CLAUSE_SEPARATOR.join(parts)}"] if parts else []


def _date_range(value: Any, field: ContentField | None) -> list[str]:
    if not isinstance(value, Mapping):
        raise TypeError("dateRange must be a mapping")
    low, high = value.get("min"), value.get("max")
    if low and high:
        return [f"Date range: {low} to {high}"]
    if low:
        return [f"Date after: {low}"]
    if high:
        return [f"Date before: {high}"]
    return []


def _prohibit_regexp(value: Any, field: ContentField | None) -> list[str]:
    return [f"Prohibited pattern: {_pattern(value)}"] if value else []


def _message(value: Any, field: ContentField | None) -> list[str]:
    return [f'Message: "{value}"'] if value else []


RULE_CLAUSES: tuple[tuple[str, Formatter], ...] = (
    ("unique", _unique),
    ("size", _size),
    ("range", _range),
    ("in", _options),
    ("linkContentType", _link_content_type),
    ("linkContentTypes", _link_content_types),
    ("linkMimetypeGroup", _mimetype_group),
    ("assetFileSize", _asset_file_size),
    ("assetImageDimensions", _image_dimensions),
    ("regexp", _regexp),
    ("enabledNodeTypes", _node_types),
    ("enabledMarks", _marks),
    ("nodes", _nodes),
    ("dateRange", _date_range),
    ("prohibitRegexp", _prohibit_regexp),
    ("message", _message),
)

RECOGNIZED_KEYS: frozenset[str] = frozenset(key for key, _ in RULE_CLAUSES)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def rule_clauses(rule: Any, owning_field: ContentField | None = None) -> list[str]:
    """Return the recognized clauses for one rule.

    An empty list means the rule is unclassified.  A formatter that trips
    over a malformed value is skipped; the remaining keys still decode.
    """
    if not isinstance(rule, Mapping):
        return []

    clauses: list[str] = []
    for key, formatter in RULE_CLAUSES:
        if key not in rule:
            continue
        try:
            clauses.extend(formatter(rule[key], owning_field))
        except (TypeError, ValueError, AttributeError, KeyError) as exc:
            logger.debug("Skipping malformed %r constraint %r: %s", key, rule[key], exc)
    return clauses


def serialize_rule(rule: Any) -> str:
    """Compact JSON for a raw rule, falling back to ``repr``."""
    try:
        return json.dumps(rule, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(rule)


def format_rule(rule: Any, owning_field: ContentField | None = None) -> str:
    """Decode one rule into its clause text (never raises)."""
    clauses = rule_clauses(rule, owning_field)
    if clauses:
        return CLAUSE_SEPARATOR.join(clauses)
    return f"{UNCLASSIFIED_PREFIX}{serialize_rule(rule)}"


def decode_validations(
    rules: Sequence[Any] | None,
    owning_field: ContentField | None = None,
) -> str:
    """Decode a field's validation rules into one line of text.

    Parameters
    ----------
    rules:
        The raw validation rule objects, in stored order.
    owning_field:
        The field the rules belong to.  When it is an ``Array`` field, size
        bounds also produce an item-count clause.

    Returns
    -------
    str
        ``"None"`` for no rules; otherwise the per-rule clause text joined
        with ``" | "``.
    """
    if not rules:
        return NO_VALIDATIONS
    return RULE_SEPARATOR.join(format_rule(rule, owning_field) for rule in rules)
