"""Tests for the markup tree."""

from __future__ import annotations

import pytest

from funnelwind.markup import Element, TagInstance, attrs_to_html, parse_markup


class TestRoundTrip:
    """Untouched markup serializes back byte for byte."""

    @pytest.mark.parametrize(
        "markup",
        [
            '<div class="hero"><p>Hello &amp; welcome &#169; 2026</p></div>',
            "<!DOCTYPE html><html><body><!-- note --><br><img src=\"a.png\"></body></html>",
            '<script id="data">{"a": [1, 2], "b": "x &lt; y"}</script>',
            "plain text only",
        ],
    )
    def test_round_trip(self, markup: str) -> None:
        assert parse_markup(markup).to_html() == markup

    def test_attribute_escaping(self) -> None:
        document = parse_markup('<a title="Tom &amp; Jerry" href="/x?a=1&amp;b=2">x</a>')
        link = document.children[0]
        assert isinstance(link, Element)
        assert link.attrs["title"] == "Tom & Jerry"
        assert document.to_html() == '<a title="Tom &amp; Jerry" href="/x?a=1&amp;b=2">x</a>'


class TestTagInstances:
    def test_cf_tags_become_instances(self) -> None:
        document = parse_markup("<cf-section><div><cf-headline>Hi</cf-headline></div></cf-section>")
        instances = document.tag_instances()
        assert [i.tag for i in instances] == ["cf-section", "cf-headline"]
        assert all(isinstance(i, TagInstance) for i in instances)
        assert not any(i.rendered for i in instances)

    def test_valueless_attribute_is_present_but_empty(self) -> None:
        instance = parse_markup("<cf-flex wrap></cf-flex>").tag_instances()[0]
        assert instance.has_attr("wrap")
        assert instance.attr("wrap") == ""
        assert instance.attr("wrap", "fallback") == ""

    def test_absent_attribute_uses_default(self) -> None:
        instance = parse_markup("<cf-flex></cf-flex>").tag_instances()[0]
        assert instance.attr("gap") is None
        assert instance.attr("gap", "1.5em") == "1.5em"

    def test_parent_links(self) -> None:
        document = parse_markup("<cf-popup><cf-section><cf-row></cf-row></cf-section></cf-popup>")
        popup, section, row = document.tag_instances()
        assert row.parent is section
        assert section.parent is popup
        assert popup.parent is document

    def test_unrendered_instance_serializes_as_input(self) -> None:
        markup = '<cf-mystery foo="1">x</cf-mystery>'
        assert parse_markup(markup).to_html() == markup

    def test_self_closing_tag(self) -> None:
        document = parse_markup('<cf-image src="a.png" /><p>after</p>')
        image = document.tag_instances()[0]
        assert image.children == []
        assert isinstance(document.children[1], Element)


class TestQueries:
    def test_find_by_id(self) -> None:
        document = parse_markup('<div><span id="target">x</span></div>')
        found = document.find_by_id("target")
        assert found is not None
        assert found.tag == "span"
        assert document.find_by_id("missing") is None

    def test_find_all(self) -> None:
        document = parse_markup("<ul><li>a</li><li>b<ul><li>c</li></ul></li></ul>")
        assert len(document.find_all("li")) == 3

    def test_attrs_to_html(self) -> None:
        assert attrs_to_html({"allowfullscreen": None, "src": 'a"b'}) == ' allowfullscreen src="a&#34;b"'
