"""Tests for the structural pass (leaf-first scheduling and capture)."""

from __future__ import annotations

import logging

import pytest

from funnelwind.markup import TagInstance, parse_markup
from funnelwind.render.context import RenderContext
from funnelwind.render.registry import (
    CONTAINER_TAGS,
    RENDER_ORDER,
    RENDERERS,
    TagRenderer,
    get_renderer,
    render_rank,
)
from funnelwind.render.scheduler import render_instance, render_structure
from funnelwind.render.styles import ResolvedNode


class TestRenderOrder:
    """Tag kinds are ordered leaf-first."""

    def test_content_kinds_precede_containers(self) -> None:
        content_ranks = [render_rank(tag) for tag in RENDER_ORDER if tag not in CONTAINER_TAGS]
        container_ranks = [render_rank(tag) for tag in CONTAINER_TAGS]
        assert max(content_ranks) < min(container_ranks)

    def test_containers_innermost_first(self) -> None:
        chain = ["cf-flex", "cf-col", "cf-row", "cf-section", "cf-popup", "cf-page"]
        ranks = [render_rank(tag) for tag in chain]
        assert ranks == sorted(ranks)

    def test_unknown_kind_sorts_last(self) -> None:
        assert render_rank("cf-unknown") == len(RENDER_ORDER)

    def test_every_kind_registered_once(self) -> None:
        assert len(RENDER_ORDER) == len(set(RENDER_ORDER)) == len(RENDERERS)

    @pytest.mark.parametrize("tag", sorted(RENDERERS))
    def test_renderers_satisfy_protocol(self, tag: str) -> None:
        renderer = get_renderer(tag)
        assert isinstance(renderer, TagRenderer)
        assert renderer.tag == tag
        assert renderer.data_type

    def test_get_renderer_unknown(self) -> None:
        assert get_renderer("cf-nope") is None


class TestRenderInstance:
    def test_renders_once(self, bare_ctx: RenderContext) -> None:
        document = parse_markup("<cf-headline>Hi</cf-headline>")
        instance = document.tag_instances()[0]

        assert render_instance(instance, bare_ctx) is True
        output = instance.output
        assert render_instance(instance, bare_ctx) is False
        assert instance.output is output
        assert instance.rendered

    def test_unknown_tag_left_unrendered(self, bare_ctx: RenderContext) -> None:
        document = parse_markup("<cf-mystery></cf-mystery>")
        instance = document.tag_instances()[0]

        assert render_instance(instance, bare_ctx) is False
        assert instance.output is None
        assert bare_ctx.unknown_tags == {"cf-mystery"}


class TestRenderStructure:
    """Containers capture their descendants' outputs by reference."""

    def test_container_holds_leaf_output(self, render_tree, find_nodes) -> None:
        document = render_tree("<cf-section><cf-headline>Hi</cf-headline></cf-section>")
        (section,) = find_nodes(document, "SectionContainer/V1")
        (headline,) = find_nodes(document, "Headline/V1")

        assert any(child is headline for child in section.children)
        assert headline.to_html() in section.to_html()

    def test_nested_containers_hold_child_output(self, bare_ctx: RenderContext) -> None:
        document = parse_markup(
            "<cf-section><cf-row><cf-col><cf-flex>"
            "<cf-headline>Title</cf-headline><cf-icon></cf-icon>"
            "</cf-flex></cf-col></cf-row></cf-section>"
        )
        instances = {instance.tag: instance for instance in document.tag_instances()}
        render_structure(document, bare_ctx)
        outputs = {tag: instance.output for tag, instance in instances.items()}
        assert all(isinstance(output, ResolvedNode) for output in outputs.values())

        pairs = [
            ("cf-section", "cf-row"),
            ("cf-row", "cf-col"),
            ("cf-col", "cf-flex"),
            ("cf-flex", "cf-headline"),
            ("cf-flex", "cf-icon"),
        ]
        for parent_tag, child_tag in pairs:
            parent, child = outputs[parent_tag], outputs[child_tag]
            assert any(node is child for node in parent.iter_nodes()), (parent_tag, child_tag)
            assert child.to_html() in parent.to_html(), (parent_tag, child_tag)

        assert document.to_html() == outputs["cf-section"].to_html()

    def test_instances_replaced_by_output(self, bare_ctx: RenderContext) -> None:
        document = parse_markup("<div><cf-row><cf-col><cf-icon></cf-icon></cf-col></cf-row></div>")
        render_structure(document, bare_ctx)

        wrapper = document.children[0]
        row = wrapper.children[0]
        assert isinstance(row, ResolvedNode)
        assert row.data_type == "RowContainer/V1"
        assert "<cf-" not in document.to_html()

    def test_container_inside_content_kind(self, render_tree) -> None:
        document = render_tree(
            "<cf-paragraph>Before <cf-flex><cf-icon></cf-icon></cf-flex></cf-paragraph>"
        )
        html = document.to_html()
        assert 'data-type="Paragraph/V1"' in html
        assert 'data-type="FlexContainer/V1"' in html
        assert 'data-type="Icon/V1"' in html
        assert "<cf-flex" not in html

    def test_plain_markup_preserved(self, render_tree) -> None:
        document = render_tree('<cf-col><p class="note">Plain &amp; simple</p></cf-col>')
        assert '<p class="note">Plain &amp; simple</p>' in document.to_html()

    def test_unknown_tags_stay_raw(self, bare_ctx: RenderContext) -> None:
        document = parse_markup('<cf-mystery a="1"><cf-headline>x</cf-headline></cf-mystery>')
        report = render_structure(document, bare_ctx)

        html = document.to_html()
        assert report.unknown == ["cf-mystery"]
        assert html.startswith('<cf-mystery a="1">')
        assert 'data-type="Headline/V1"' in html
        assert isinstance(document.children[0], TagInstance)

    def test_report_counts(self, bare_ctx: RenderContext) -> None:
        document = parse_markup(
            "<cf-section><cf-headline>A</cf-headline><cf-headline>B</cf-headline></cf-section>"
        )
        report = render_structure(document, bare_ctx)
        assert report.rendered == {"cf-headline": 2, "cf-section": 1}
        assert report.total == 3
        assert report.unknown == []

    def test_empty_document(self, bare_ctx: RenderContext) -> None:
        document = parse_markup("")
        report = render_structure(document, bare_ctx)
        assert report.total == 0
        assert document.to_html() == ""

    def test_logs_summary(self, bare_ctx: RenderContext, caplog: pytest.LogCaptureFixture) -> None:
        document = parse_markup("<cf-divider></cf-divider>")
        with caplog.at_level(logging.DEBUG, logger="funnelwind"):
            render_structure(document, bare_ctx)
        assert "Structural pass rendered 1 tag(s)" in caplog.text
