"""Unit tests for the validation rule decoder.

Covers every recognized constraint key, clause ordering within a rule,
rule joining across a field, the unclassified fallback and tolerance of
malformed constraint values.
"""

from __future__ import annotations

import pytest

from contentforge.core.validation_decoder import (
    RECOGNIZED_KEYS,
    bounded_range,
    decode_validations,
    format_rule,
    link_targets,
    rule_clauses,
    serialize_rule,
)


# ---------------------------------------------------------------------------
# Test: bounded_range helper
# ---------------------------------------------------------------------------


class TestBoundedRange:
    """The shared {min, max} formatter used by size, range and asset rules."""

    def test_both_bounds(self):
        assert bounded_range("Length", {"min": 5, "max": 10}, "chars") == "Length: 5-10 chars"

    def test_min_only_lowercases_label(self):
        assert bounded_range("Length", {"min": 5}, "chars") == "Min length: 5 chars"

    def test_max_only(self):
        assert bounded_range("Asset size", {"max": 1024}, "bytes") == "Max asset size: 1024 bytes"

    def test_no_unit_has_no_trailing_space(self):
        assert bounded_range("Value", {"max": 3}) == "Max value: 3"

    def test_zero_is_a_real_bound(self):
        assert bounded_range("Value", {"min": 0, "max": 10}) == "Value: 0-10"

    def test_integral_float_renders_without_decimal(self):
        assert bounded_range("Value", {"min": 1.0, "max": 2.5}) == "Value: 1-2.5"

    def test_no_bounds_returns_none(self):
        assert bounded_range("Value", {}) is None

    def test_non_mapping_raises(self):
        with pytest.raises(TypeError):
            bounded_range("Value", 7)


# ---------------------------------------------------------------------------
# Test: individual constraint keys
# ---------------------------------------------------------------------------


class TestConstraintKeys:
    """Each recognized key produces its documented clause."""

    def test_unique(self):
        assert decode_validations([{"unique": True}]) == "Unique"

    def test_unique_false_is_unclassified(self):
        assert decode_validations([{"unique": False}]) == 'Other: {"unique": false}'

    def test_size_on_scalar_field(self, make_field):
        field = make_field("title", "Symbol")
        assert decode_validations([{"size": {"min": 1, "max": 80}}], field) == "Length: 1-80 chars"

    def test_size_on_array_field_adds_item_count(self, array_field):
        result = decode_validations([{"size": {"max": 5}}], array_field)
        assert result == "Max length: 5 chars; Max array size: 5 items"

    def test_size_without_owning_field(self):
        assert decode_validations([{"size": {"min": 2}}]) == "Min length: 2 chars"

    def test_range(self):
        assert decode_validations([{"range": {"min": 1, "max": 10}}]) == "Value: 1-10"

    def test_in_options_are_quoted(self):
        assert decode_validations([{"in": ["a", "b"]}]) == 'Options: ["a", "b"]'

    def test_link_content_type_list(self):
        assert decode_validations([{"linkContentType": ["post", "page"]}]) == "Links to: [post, page]"

    def test_link_content_type_single(self):
        assert decode_validations([{"linkContentType": "post"}]) == "Links to: post"

    def test_link_content_types(self):
        assert decode_validations([{"linkContentTypes": ["a", "b"]}]) == "Links to any: [a, b]"

    def test_mimetype_group(self):
        assert decode_validations([{"linkMimetypeGroup": ["image", "video"]}]) == "Asset types: [image, video]"

    def test_mimetype_group_single_string(self):
        assert decode_validations([{"linkMimetypeGroup": "image"}]) == "Asset types: [image]"

    def test_asset_file_size(self):
        result = decode_validations([{"assetFileSize": {"min": 10, "max": 2048}}])
        assert result == "Asset size: 10-2048 bytes"

    def test_image_dimensions(self):
        rule = {"assetImageDimensions": {"width": {"min": 100, "max": 200}, "height": {"max": 300}}}
        assert decode_validations([rule]) == "Image dimensions: Width: 100-200 px, Max height: 300 px"

    def test_image_dimensions_width_only(self):
        rule = {"assetImageDimensions": {"width": {"min": 640}}}
        assert decode_validations([rule]) == "Image dimensions: Min width: 640 px"

    def test_regexp_with_flags(self):
        rule = {"regexp": {"pattern": "^\\w+$", "flags": "i"}}
        assert decode_validations([rule]) == "Pattern: /^\\w+$/i"

    def test_regexp_null_flags(self):
        rule = {"regexp": {"pattern": "^a$", "flags": None}}
        assert decode_validations([rule]) == "Pattern: /^a$/"

    def test_prohibit_regexp_uses_its_own_flags(self):
        rule = {"prohibitRegexp": {"pattern": "foo", "flags": "gi"}}
        assert decode_validations([rule]) == "Prohibited pattern: /foo/gi"

    def test_enabled_node_types(self):
        rule = {"enabledNodeTypes": ["heading-1", "paragraph"]}
        assert decode_validations([rule]) == "Rich text nodes: [heading-1, paragraph]"

    def test_enabled_marks(self):
        assert decode_validations([{"enabledMarks": ["bold"]}]) == "Rich text marks: [bold]"

    @pytest.mark.parametrize("key", ["enabledNodeTypes", "enabledMarks"])
    def test_null_rich_text_list_falls_back(self, key):
        assert decode_validations([{key: None}]) == f'Other: {{"{key}": null}}'

    def test_date_range_both(self):
        rule = {"dateRange": {"min": "2020-01-01", "max": "2020-12-31"}}
        assert decode_validations([rule]) == "Date range: 2020-01-01 to 2020-12-31"

    def test_date_range_min_only(self):
        assert decode_validations([{"dateRange": {"min": "2020-01-01"}}]) == "Date after: 2020-01-01"

    def test_date_range_max_only(self):
        assert decode_validations([{"dateRange": {"max": "2021-06-30"}}]) == "Date before: 2021-06-30"

    def test_message_alone_is_a_clause(self):
        assert decode_validations([{"message": "Too long"}]) == 'Message: "Too long"'


# ---------------------------------------------------------------------------
# Test: nested rich-text node permissions
# ---------------------------------------------------------------------------


class TestNodePermissions:
    """The ``nodes`` key describes per-node-kind embedding permissions."""

    def test_targets_and_allowed(self):
        rule = {
            "nodes": {
                "embedded-entry-block": [{"linkContentType": ["author"]}],
                "hyperlink": [],
            }
        }
        result = decode_validations([rule])
        assert result == "Rich text content: Embedded entries: [author]; External links: allowed"

    def test_fixed_order_regardless_of_input_order(self):
        rule = {
            "nodes": {
                "hyperlink": [],
                "asset-hyperlink": [],
                "entry-hyperlink": [],
                "embedded-asset-block": [],
                "embedded-entry-inline": [],
                "embedded-entry-block": [],
            }
        }
        result = decode_validations([rule])
        assert result == (
            "Rich text content: Embedded entries: allowed; Inline entries: allowed; "
            "Embedded assets: allowed; Entry links: allowed; Asset links: allowed; "
            "External links: allowed"
        )

    def test_node_count_bound(self):
        rule = {
            "nodes": {
                "embedded-entry-block": [
                    {"linkContentType": ["quote"]},
                    {"size": {"max": 2}},
                ]
            }
        }
        result = decode_validations([rule])
        assert result == "Rich text content: Embedded entries: [quote] (Max count: 2 nodes)"

    def test_single_rule_object_instead_of_list(self):
        rule = {"nodes": {"entry-hyperlink": {"linkContentType": "page"}}}
        assert decode_validations([rule]) == "Rich text content: Entry links: [page]"

    def test_unknown_node_kinds_only_is_unclassified(self):
        rule = {"nodes": {"table": []}}
        assert decode_validations([rule]) == 'Other: {"nodes": {"table": []}}'


# ---------------------------------------------------------------------------
# Test: composition and fallback
# ---------------------------------------------------------------------------


class TestComposition:
    """Clause order, rule joining and the unclassified fallback."""

    def test_no_rules(self):
        assert decode_validations([]) == "None"
        assert decode_validations(None) == "None"

    def test_clause_order_is_fixed(self):
        rule = {"message": "Bad", "regexp": {"pattern": "x"}, "unique": True}
        assert decode_validations([rule]) == 'Unique; Pattern: /x/; Message: "Bad"'

    def test_rules_joined_with_pipe(self):
        result = decode_validations([{"size": {"min": 5, "max": 10}}, {"unique": True}])
        assert result == "Length: 5-10 chars | Unique"

    def test_message_attached_to_its_rule(self):
        rule = {"in": ["x"], "message": "Pick x"}
        assert decode_validations([rule]) == 'Options: ["x"]; Message: "Pick x"'

    def test_unknown_key_falls_back_to_json(self):
        assert decode_validations([{"futureRule": 1}]) == 'Other: {"futureRule": 1}'

    def test_empty_rule_falls_back(self):
        assert decode_validations([{}]) == "Other: {}"

    def test_unknown_key_beside_known_key_is_dropped(self):
        assert decode_validations([{"unique": True, "futureRule": 1}]) == "Unique"

    def test_non_ascii_kept_in_fallback(self):
        assert decode_validations([{"hinweis": "größe"}]) == 'Other: {"hinweis": "größe"}'

    def test_non_mapping_rule_falls_back(self):
        assert format_rule("unique") == 'Other: "unique"'

    def test_every_rule_yields_text(self):
        rules = [{"unique": True}, {"mystery": True}, {"range": {"max": 1}}]
        parts = decode_validations(rules).split(" | ")
        assert parts == ["Unique", 'Other: {"mystery": true}', "Max value: 1"]


# ---------------------------------------------------------------------------
# Test: malformed values never raise
# ---------------------------------------------------------------------------


class TestMalformedValues:
    """A formatter that cannot read its value is skipped, not fatal."""

    def test_malformed_size_is_skipped(self):
        assert decode_validations([{"size": "big", "unique": True}]) == "Unique"

    def test_malformed_only_key_falls_back(self):
        assert decode_validations([{"range": [1, 2]}]) == 'Other: {"range": [1, 2]}'

    def test_malformed_nodes_is_skipped(self):
        assert rule_clauses({"nodes": ["hyperlink"]}) == []

    def test_malformed_date_range_is_skipped(self):
        assert rule_clauses({"dateRange": "2020", "message": "m"}) == ['Message: "m"']

    def test_rule_clauses_on_non_mapping(self):
        assert rule_clauses(None) == []


# ---------------------------------------------------------------------------
# Test: helpers shared with the resolver and auditor
# ---------------------------------------------------------------------------


class TestHelpers:

    def test_link_targets_reads_both_keys_in_order(self):
        rules = [
            {"linkContentType": ["post"]},
            {"unique": True},
            {"linkContentTypes": ["page", "faq"]},
        ]
        assert link_targets(rules) == ["post", "page", "faq"]

    def test_link_targets_single_string(self):
        assert link_targets([{"linkContentType": "post"}]) == ["post"]

    def test_link_targets_ignores_non_mappings(self):
        assert link_targets(["junk", None]) == []
        assert link_targets(None) == []

    def test_serialize_rule_is_compact_json(self):
        assert serialize_rule({"a": [1, 2]}) == '{"a": [1, 2]}'

    def test_serialize_rule_falls_back_to_repr(self):
        rule: dict = {}
        rule["self"] = rule
        assert serialize_rule(rule) == repr(rule)

    def test_recognized_keys(self):
        assert "nodes" in RECOGNIZED_KEYS
        assert "message" in RECOGNIZED_KEYS
        assert "futureRule" not in RECOGNIZED_KEYS
