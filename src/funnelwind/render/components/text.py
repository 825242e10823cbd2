"""Headline, subheadline and paragraph renderers."""

from __future__ import annotations

from funnelwind.markup import Child, TagInstance
from funnelwind.presets import FONT_SIZES, FONT_WEIGHTS, LINE_HEIGHTS
from funnelwind.render.context import RenderContext
from funnelwind.render.styles import (
    ResolvedNode,
    ResolvedStyle,
    animation_data,
    node,
    preset_or_raw,
)


def resolve_font_size(size: str, element_type: str, ctx: RenderContext) -> str:
    """Styleguide scale, then the static size presets, then the raw value."""
    return ctx.styleguide.resolve_size(size, element_type) or preset_or_raw(size, FONT_SIZES) or size


def icon_node(icon: str, align: str) -> ResolvedNode:
    spacing = "margin-right" if align == "left" else "margin-left"
    return node("i", {spacing: "8px"}, classes=icon)


class TextRenderer:
    """
    Shared wrapper/text-element resolution for the three text kinds.

    Subclasses set the data type, the scale element type and the defaults.
    The inner text element is registered as the "text" color target.
    """

    tag = ""
    data_type = ""
    element_type = "headline"
    default_size = "48px"
    default_weight = "bold"
    default_leading = "tight"
    default_tag = "h1"

    def wrapper_style(self, instance: TagInstance, style: ResolvedStyle) -> None:
        style.update(
            {
                "padding-top": instance.attr("pt", "0"),
                "padding-bottom": instance.attr("pb", "0"),
                "margin-top": instance.attr("mt", "0"),
                "box-sizing": "border-box",
            }
        )

    def text_tag(self, instance: TagInstance) -> str:
        return instance.attr("tag", self.default_tag) or self.default_tag

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        size = instance.attr("size", self.default_size)
        weight = instance.attr("weight", self.default_weight)
        align = instance.attr("align", "center")
        leading = instance.attr("leading", self.default_leading)
        color = instance.attr("color")
        explicit_color = instance.has_attr("color") and bool(color)
        font = instance.attr("font")
        tracking = instance.attr("tracking")
        transform = instance.attr("transform")
        icon = instance.attr("icon")
        icon_align = instance.attr("icon-align", "left")

        text = ResolvedStyle()
        text.update(
            {
                "margin": "0",
                "font-size": resolve_font_size(size, self.element_type, ctx),
                "font-weight": preset_or_raw(weight, FONT_WEIGHTS) or weight,
                "text-align": align,
                "line-height": preset_or_raw(leading, LINE_HEIGHTS) or leading,
            }
        )
        if explicit_color:
            text.set("color", f"{color} !important")
        text.set("font-family", font)
        text.set("letter-spacing", tracking)
        text.set("text-transform", transform)

        wrapper = ResolvedStyle()
        self.wrapper_style(instance, wrapper)

        wrapper.set_data("type", self.data_type)
        wrapper.set_data("size", size)
        wrapper.set_data("weight", weight)
        if explicit_color:
            wrapper.set_data("color", color)
            wrapper.set_data("color-explicit", True)
        wrapper.set_data("align", align)
        wrapper.set_data("leading", leading)
        wrapper.set_data("font", font or None)
        wrapper.set_data("tracking", tracking or None)
        wrapper.set_data("transform", transform or None)
        for name in ("pt", "pb", "mt"):
            value = instance.attr(name, "0")
            if value != "0":
                wrapper.set_data(name, value)
        self.extra_data(instance, wrapper)
        if icon:
            wrapper.set_data("icon", icon)
            if icon_align != "left":
                wrapper.set_data("icon-align", icon_align)
        animation_data(instance, wrapper)

        children: list[Child] = list(content)
        if icon:
            if icon_align == "left":
                children.insert(0, icon_node(icon, icon_align))
            else:
                children.append(icon_node(icon, icon_align))

        text_node = ResolvedNode(tag=self.text_tag(instance), style=text, children=children)
        return ResolvedNode(
            tag="div",
            style=wrapper,
            children=[text_node],
            color_targets={"text": [text_node]},
        )

    def extra_data(self, instance: TagInstance, style: ResolvedStyle) -> None:
        pass


class HeadlineRenderer(TextRenderer):
    tag = "cf-headline"
    data_type = "Headline/V1"
    element_type = "headline"

    def wrapper_style(self, instance: TagInstance, style: ResolvedStyle) -> None:
        super().wrapper_style(instance, style)
        # An empty mt falls back to the headline's top gap
        style.set("margin-top", instance.attr("mt", "0") or "20px")


class SubheadlineRenderer(TextRenderer):
    tag = "cf-subheadline"
    data_type = "SubHeadline/V1"
    element_type = "subheadline"
    default_size = "24px"
    default_weight = "normal"
    default_leading = "relaxed"
    default_tag = "h2"


class ParagraphRenderer(TextRenderer):
    """Paragraphs always render a <p> and accept a wrapper background."""

    tag = "cf-paragraph"
    data_type = "Paragraph/V1"
    element_type = "paragraph"
    default_size = "16px"
    default_weight = "normal"
    default_leading = "relaxed"
    default_tag = "p"

    def text_tag(self, instance: TagInstance) -> str:
        return "p"

    def wrapper_style(self, instance: TagInstance, style: ResolvedStyle) -> None:
        super().wrapper_style(instance, style)
        style.set("background-color", instance.attr("bg"))
        px = instance.attr("px")
        style.update({"padding-left": px, "padding-right": px})

    def extra_data(self, instance: TagInstance, style: ResolvedStyle) -> None:
        style.set_data("px", instance.attr("px") or None)
        style.set_data("bg", instance.attr("bg") or None)
