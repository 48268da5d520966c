"""Unit tests for the tag/attribute rule matcher."""

from __future__ import annotations

from lastfmq.parsing.matcher import TagAttr, match_attrs

_ATTRS = (("class", "big-tags big-tags--wide"), ("title", "1,234"), ("hidden", ""))


class TestMatchAttrs:
    def test_tag_only_rule_returns_tag_name(self) -> None:
        assert match_attrs("ol", _ATTRS, TagAttr.of("ol")) == "ol"

    def test_tag_name_must_match(self) -> None:
        assert match_attrs("ul", _ATTRS, TagAttr.of("ol")) == ""

    def test_presence_rule_returns_attribute_name(self) -> None:
        assert match_attrs("ol", _ATTRS, TagAttr.of("ol", "hidden")) == "hidden"

    def test_presence_rule_requires_attribute(self) -> None:
        assert match_attrs("ol", _ATTRS, TagAttr.of("ol", "href")) == ""

    def test_wildcard_captures_raw_value(self) -> None:
        assert match_attrs("abbr", _ATTRS, TagAttr.of("abbr", "title", "*")) == "1,234"

    def test_accepted_value_matches_as_substring(self) -> None:
        rule = TagAttr.of("ol", "class", "similar-items-sidebar", "big-tags")
        assert match_attrs("ol", _ATTRS, rule) == "big-tags"

    def test_unmatched_values_fall_through_to_next_rule(self) -> None:
        result = match_attrs(
            "ol",
            _ATTRS,
            TagAttr.of("ol", "class", "similar-artists"),
            TagAttr.of("ol", "title", "*"),
        )
        assert result == "1,234"

    def test_first_matching_rule_wins(self) -> None:
        result = match_attrs(
            "ol",
            _ATTRS,
            TagAttr.of("ol", "class", "big-tags"),
            TagAttr.of("ol"),
        )
        assert result == "big-tags"

    def test_no_rules_match_returns_empty(self) -> None:
        assert match_attrs("div", _ATTRS, TagAttr.of("ol"), TagAttr.of("a", "class")) == ""

    def test_no_attributes_with_attribute_rule(self) -> None:
        assert match_attrs("ol", (), TagAttr.of("ol", "class", "big-tags")) == ""

    def test_attrs_are_walked_once_per_rule(self) -> None:
        # A tuple is re-iterable; every rule must see all attributes.
        result = match_attrs(
            "ol",
            _ATTRS,
            TagAttr.of("ol", "hidden", "x"),
            TagAttr.of("ol", "class", "wide"),
        )
        assert result == "wide"
