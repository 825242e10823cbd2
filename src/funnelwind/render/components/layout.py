"""
Structural container renderers: page, section, row, column, flex, popup.

Containers render after every content tag kind, so the ``content`` they
receive already holds the resolved nodes of their descendants.
"""

from __future__ import annotations

from urllib.parse import quote

from funnelwind.markup import Child, Element, TagInstance
from funnelwind.presets import (
    BORDER_WIDTHS,
    CONTAINER_WIDTHS,
    FLEX_DIRECTIONS,
    FLEX_ITEMS,
    FLEX_JUSTIFY,
    RADIUS,
    ROW_WIDTHS,
    SHADOWS,
    bg_style_class,
)
from funnelwind.render.components.common import (
    background,
    background_class,
    box_decoration,
    catalog_data,
    catalog_refs,
    element_id,
    source_data,
    with_overlay,
)
from funnelwind.render.context import RenderContext
from funnelwind.render.styles import (
    ResolvedNode,
    ResolvedStyle,
    animation_data,
    is_flag_set,
    node,
    parse_int,
    preset_or_raw,
    px_to_em,
    youtube_thumbnail,
    youtube_video_id,
)


def _uri_component(value: str) -> str:
    return quote(value, safe="-_.!~*'()")


class PageRenderer:
    """<cf-page> -> ContentNode root."""

    tag = "cf-page"
    data_type = "ContentNode"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        bg = instance.attr("bg", "#ffffff")
        bg_image = instance.attr("bg-image")
        gradient = instance.attr("gradient")
        overlay = instance.attr("overlay")
        custom_css = instance.attr("css")

        style = ResolvedStyle()
        style.update({"width": "100%", "min-height": "100vh", "position": "relative"})
        if gradient:
            style.set("background", gradient)
        else:
            style.set("background-color", bg)
        if bg_image:
            style.set("background-image", f"url({bg_image})")

        bg_class = bg_style_class(instance.attr("bg-style")) if bg_image else bg_style_class(None)
        style.add_class("content-node")
        style.add_class(bg_class)

        style.set_data("type", self.data_type)
        style.set_data("text-color", instance.attr("text-color", "#334155"))
        style.set_data("link-color", instance.attr("link-color", "#3b82f6"))
        style.set_data("bg-style", bg_class)
        if overlay:
            style.set_data("overlay", overlay)
        for name in ("font-family", "font-weight"):
            if instance.attr(name):
                style.set_data(name, instance.attr(name))
        for name, data_name in (
            ("header-code", "header-code"),
            ("footer-code", "footer-code"),
            ("css", "custom-css"),
        ):
            value = instance.attr(name)
            if value:
                style.set_data(data_name, _uri_component(value))

        root = ResolvedNode(
            tag="div",
            style=style,
            children=with_overlay(content, overlay, inherit_radius=False),
        )
        custom_style = node("style", children=[custom_css or ""], id="custom-css")
        return ResolvedNode(tag="", children=[root, custom_style])


def _popup_radius(instance: TagInstance) -> str | None:
    """Resolved radius of the enclosing popup, for its first section only."""
    ancestor: Element | None = instance.parent
    while ancestor is not None and not (
        isinstance(ancestor, TagInstance) and ancestor.tag == PopupRenderer.tag
    ):
        ancestor = ancestor.parent
    if not isinstance(ancestor, TagInstance):
        return None
    first_section = next(
        (
            el
            for el in ancestor.iter_elements()
            if isinstance(el, TagInstance) and el.tag == SectionRenderer.tag
        ),
        None,
    )
    if first_section is not instance:
        return None
    rounded = ancestor.attr("rounded", PopupRenderer.default_rounded)
    return preset_or_raw(rounded, RADIUS) or rounded


class SectionRenderer:
    """<cf-section> -> SectionContainer/V1."""

    tag = "cf-section"
    data_type = "SectionContainer/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        container = instance.attr("container", "full")
        px = instance.attr("px", "0")
        overlay = instance.attr("overlay")
        paint = instance.attr("paint")
        bg = instance.attr("bg")
        rounded = (
            instance.attr("rounded")
            or instance.attr("data-popup-rounded")
            or _popup_radius(instance)
        )
        refs = catalog_refs(instance, ctx)

        style = ResolvedStyle()
        style.update(
            {
                "width": "100%",
                "max-width": preset_or_raw(container, CONTAINER_WIDTHS) or "1170px",
                "margin-left": "auto",
                "margin-right": "auto",
                "position": "relative",
                "padding-top": instance.attr("pt", "64px"),
                "padding-bottom": instance.attr("pb", "64px"),
                "padding-left": px,
                "padding-right": px,
                "box-sizing": "border-box",
            }
        )
        bg_image = background(style, instance, ctx)
        style.set("margin-top", instance.attr("mt"))
        box_decoration(style, instance, refs, rounded)

        bg_class = background_class(instance, bg_image)
        style.add_class(bg_class)

        style.set_data("type", self.data_type)
        style.set_data("container", container)
        style.set_data("show", instance.attr("show") or None)
        style.set_data("bg-style", bg_class or None)
        style.set_data("overlay", overlay or None)
        source_data(style, instance)
        style.set_data("paint-colors", paint or None)
        catalog_data(style, refs)
        self._video_background(style, instance, bg, overlay)

        return ResolvedNode(
            tag="section",
            style=style,
            attrs=element_id(instance),
            children=with_overlay(content, overlay),
        )

    @staticmethod
    def _video_background(
        style: ResolvedStyle, instance: TagInstance, bg: str | None, overlay: str | None
    ) -> None:
        video_url = instance.attr("video-bg")
        video_id = youtube_video_id(video_url)
        if not video_id:
            return
        style.set_data("video-bg-url", video_url)
        style.set_data("video-bg-type", "youtube")
        style.set_data("video-bg-thumbnail", youtube_thumbnail(video_id))
        style.set_data(
            "video-bg-hide-mobile", instance.attr("video-bg-hide-mobile", "true") == "true"
        )
        style.set_data("video-bg-style", instance.attr("video-bg-style", "fill"))
        overlay_color = instance.attr("video-bg-overlay") or overlay
        if not overlay_color and bg and bg.startswith("rgba"):
            overlay_color = bg
        style.set_data("video-bg-overlay", overlay_color or None)


class RowRenderer:
    """<cf-row> -> RowContainer/V1."""

    tag = "cf-row"
    data_type = "RowContainer/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        width = instance.attr("width", "wide")
        overlay = instance.attr("overlay")
        paint = instance.attr("paint")
        px = instance.attr("px")
        refs = catalog_refs(instance, ctx)

        style = ResolvedStyle()
        style.update(
            {
                "display": "flex",
                "flex-wrap": "wrap",
                "width": preset_or_raw(width, ROW_WIDTHS) or width,
                "max-width": "100%",
                "margin-left": "auto",
                "margin-right": "auto",
                "position": "relative",
                "box-sizing": "border-box",
                "margin-top": instance.attr("mt") or "0",
            }
        )
        bg_image = background(style, instance, ctx)
        style.set("padding-top", instance.attr("pt"))
        style.set("padding-bottom", instance.attr("pb"))
        style.update({"padding-left": px, "padding-right": px})
        box_decoration(style, instance, refs, instance.attr("rounded"))

        bg_class = background_class(instance, bg_image)
        style.add_class(bg_class)

        style.set_data("type", self.data_type)
        style.set_data("width", width)
        style.set_data("show", instance.attr("show") or None)
        style.set_data("bg-style", bg_class or None)
        style.set_data("overlay", overlay or None)
        source_data(style, instance)
        style.set_data("paint-colors", paint or None)
        catalog_data(style, refs)
        animation_data(instance, style)

        children = with_overlay(
            content,
            overlay,
            inner={"display": "flex", "flex-wrap": "wrap", "width": "100%"},
        )
        return ResolvedNode(tag="div", style=style, attrs=element_id(instance), children=children)


_SEPARATE_CORNERS = (
    ("rounded-tl", "border-top-left-radius"),
    ("rounded-tr", "border-top-right-radius"),
    ("rounded-bl", "border-bottom-left-radius"),
    ("rounded-br", "border-bottom-right-radius"),
)

# Attributes that give a column a styled inner wrapper
_COL_INNER_ATTRS = (
    "bg",
    "bg-image",
    "gradient",
    "overlay",
    "paint",
    "pt",
    "pb",
    "px",
    "mx",
    "shadow",
    "rounded",
    "corner",
    "rounded-tl",
    "rounded-tr",
    "rounded-bl",
    "rounded-br",
    "border",
    "border-color",
)


def _separate_corners(style: ResolvedStyle, instance: TagInstance) -> None:
    has_separate = False
    for attr_name, prop in _SEPARATE_CORNERS:
        value = instance.attr(attr_name)
        if value:
            style.set(prop, preset_or_raw(value, RADIUS))
            has_separate = True
    if has_separate:
        style.set_data("separate-corners", True)


class ColRenderer:
    """<cf-col> -> ColContainer/V1 with a col-inner wrapper."""

    tag = "cf-col"
    data_type = "ColContainer/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        span = parse_int(instance.attr("span"), 12)
        align = instance.attr("align", "left")
        mx = instance.attr("mx", "16px")
        px = instance.attr("px")
        overlay = instance.attr("overlay")
        paint = instance.attr("paint")
        bg = instance.attr("bg")
        refs = catalog_refs(instance, ctx)

        width = f"{span / 12 * 100:.6f}%" if isinstance(span, int) else span
        outer = ResolvedStyle()
        outer.update(
            {
                "width": width,
                "position": "relative",
                "min-height": "1px",
                "box-sizing": "border-box",
                "z-index": "2",
            }
        )
        outer.set_data("type", self.data_type)
        outer.set_data("span", str(span))
        outer.set_data("col-direction", align)
        outer.set_data("show", instance.attr("show") or None)

        inner = ResolvedStyle()
        inner.update(
            {
                "height": "100%",
                "position": "relative",
                "text-align": align,
                "box-sizing": "border-box",
            }
        )
        inner.set("padding-top", instance.attr("pt"))
        inner.set("padding-bottom", instance.attr("pb"))
        inner.update({"padding-left": px, "padding-right": px})
        inner.update({"margin-left": mx, "margin-right": mx})
        bg_image = background(inner, instance, ctx)
        box_decoration(inner, instance, refs, instance.attr("rounded"))
        _separate_corners(inner, instance)

        inner.add_class("col-inner")
        styled = any(instance.attr(name) for name in _COL_INNER_ATTRS) or bool(bg_image)
        if styled:
            bg_class = background_class(instance, bg_image)
            inner.add_class(bg_class)
            if refs.shadow:
                inner.add_class(f"sg-shadow-{refs.shadow}")
            if refs.border:
                inner.add_class(f"sg-border-{refs.border}")
            if refs.corner:
                inner.add_class(f"sg-corner-{refs.corner}")
            inner.set_data("overlay", overlay or None)
            if bg and not paint:
                inner.set_data("bg", bg)
            source_data(inner, instance)
            inner.set_data("bg-style", bg_class or None)
            inner.set_data("paint-colors", paint or None)
            catalog_data(inner, refs)
            children = with_overlay(content, overlay)
        else:
            children = content

        inner_node = ResolvedNode(tag="div", style=inner, attrs=element_id(instance), children=children)
        return ResolvedNode(tag="div", style=outer, children=[inner_node])


class ColInnerRenderer:
    """<cf-col-inner> -> ColInner/V1 (legacy explicit inner wrapper)."""

    tag = "cf-col-inner"
    data_type = "ColInner/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        bg = instance.attr("bg")
        bg_image = instance.attr("bg-image")
        overlay = instance.attr("overlay")
        mx = instance.attr("mx", "16px")
        px = instance.attr("px")
        shadow = instance.attr("shadow")
        rounded = instance.attr("rounded")
        border = instance.attr("border")

        style = ResolvedStyle()
        style.update(
            {
                "height": "100%",
                "position": "relative",
                "background-size": "cover",
                "background-position": "center",
                "background-repeat": "no-repeat",
                "padding-top": instance.attr("pt", "20px"),
                "padding-bottom": instance.attr("pb", "20px"),
                "text-align": instance.attr("align", "left"),
                "box-sizing": "border-box",
                "margin-left": mx,
                "margin-right": mx,
            }
        )
        gradient = instance.attr("gradient")
        if gradient:
            style.set("background", gradient)
        else:
            style.set("background-color", bg)
        if bg_image:
            style.set("background-image", f"url({bg_image})")
        style.update({"padding-left": px, "padding-right": px})
        if shadow:
            style.set("box-shadow", preset_or_raw(shadow, SHADOWS))
        if rounded:
            style.set("border-radius", preset_or_raw(rounded, RADIUS))
        _separate_corners(style, instance)
        if border:
            style.set("border-width", preset_or_raw(border, BORDER_WIDTHS))
            style.set("border-style", instance.attr("border-style", "solid"))
        style.set("border-color", instance.attr("border-color"))

        bg_class = background_class(instance, bg_image)
        style.add_class("col-inner")
        style.add_class(bg_class)

        separate = style.data.pop("data-separate-corners", None)
        style.set_data("type", self.data_type)
        style.set_data("overlay", overlay or None)
        style.set_data("bg", bg or None)
        style.set_data("bg-image", bg_image or None)
        style.set_data("bg-style", bg_class or None)
        style.set_data("separate-corners", separate)

        return ResolvedNode(tag="div", style=style, children=with_overlay(content, overlay))


class FlexRenderer:
    """<cf-flex> -> FlexContainer/V1."""

    tag = "cf-flex"
    data_type = "FlexContainer/V1"
    default_gap = "1.5em"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        direction = instance.attr("direction", "row")
        justify = instance.attr("justify", "start")
        items = instance.attr("items", "start")
        wrap = is_flag_set(instance.attr("wrap"))
        gap = px_to_em(instance.attr("gap"), self.default_gap)
        width = instance.attr("width")
        height = instance.attr("height")
        refs = catalog_refs(instance, ctx)

        style = ResolvedStyle()
        style.update(
            {
                "display": "flex",
                "flex-direction": FLEX_DIRECTIONS.get(direction or "", "row"),
                "justify-content": FLEX_JUSTIFY.get(justify or "", "flex-start"),
                "align-items": FLEX_ITEMS.get(items or "", "center"),
                "box-sizing": "border-box",
                "margin-left": "auto",
                "margin-right": "auto",
            }
        )
        if wrap:
            style.set("flex-wrap", "wrap")
        style.set("gap", gap)

        if not instance.attr("paint"):
            gradient = instance.attr("gradient")
            if gradient:
                style.set("background", gradient)
            else:
                style.set("background-color", instance.attr("bg"))

        # Padding shorthand cascades p -> px/py -> pt/pb
        p = instance.attr("p")
        px = instance.attr("px")
        py = instance.attr("py")
        if p:
            style.update({"padding-top": p, "padding-bottom": p, "padding-left": p, "padding-right": p})
        if px:
            style.update({"padding-left": px, "padding-right": px})
        if py:
            style.update({"padding-top": py, "padding-bottom": py})
        style.set("padding-top", instance.attr("pt"))
        style.set("padding-bottom", instance.attr("pb"))
        style.set("margin-top", instance.attr("mt"))

        box_decoration(style, instance, refs, instance.attr("rounded") or instance.attr("corner"))
        style.set("width", width)
        style.set("height", height)

        style.set_data("type", self.data_type)
        style.set_data("show", instance.attr("show") or None)
        style.set_data("direction", direction)
        style.set_data("justify", justify)
        style.set_data("items", items)
        if wrap:
            style.set_data("wrap", True)
        style.set_data("gap", gap)
        style.set_data("width", width or None)
        style.set_data("height", height or None)
        style.set_data("paint-colors", instance.attr("paint") or None)
        catalog_data(style, refs)

        return ResolvedNode(tag="div", style=style, attrs=element_id(instance), children=content)


_CLOSE_BUTTON = (
    '<button class="cf-popup-close" style="position:absolute;top:-12px;right:-12px;'
    "width:28px;height:28px;border:none;background:#000000;border-radius:50%;"
    "cursor:pointer;display:flex;align-items:center;justify-content:center;z-index:10;"
    'box-shadow:0 2px 8px rgba(0,0,0,0.3);" '
    "onclick=\"this.closest('.cf-popup-wrapper').style.display='none'\">"
    '<svg width="14" height="14" viewBox="0 0 24 24" fill="none" stroke="#ffffff" '
    'stroke-width="2.5" stroke-linecap="round" stroke-linejoin="round">'
    '<line x1="18" y1="6" x2="6" y2="18"></line>'
    '<line x1="6" y1="6" x2="18" y2="18"></line>'
    "</svg></button>"
)


class PopupRenderer:
    """<cf-popup> -> ModalContainer/V1, hidden until opened."""

    tag = "cf-popup"
    data_type = "ModalContainer/V1"
    default_rounded = "16px"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        width = instance.attr("width", "750px")
        overlay = instance.attr("overlay", "rgba(0,0,0,0.5)")
        rounded = instance.attr("rounded", self.default_rounded)
        border = instance.attr("border")
        border_color = instance.attr("border-color", "#000000")
        shadow = instance.attr("shadow")
        px = instance.attr("px", "0")

        modal = ResolvedStyle()
        modal.update(
            {
                "max-width": "100%",
                "margin-top": instance.attr("mt", "45px"),
                "margin-bottom": instance.attr("mb", "10px"),
                "margin-left": "auto",
                "margin-right": "auto",
                "border-radius": preset_or_raw(rounded, RADIUS),
                "background-color": "#ffffff",
                "position": "relative",
                "box-sizing": "border-box",
            }
        )
        if border:
            modal.update(
                {
                    "border-width": preset_or_raw(border, BORDER_WIDTHS),
                    "border-style": "solid",
                    "border-color": border_color,
                }
            )
        if shadow:
            modal.set("box-shadow", preset_or_raw(shadow, SHADOWS))
        modal.classes.extend(["cf-popup-modal", "containerModal"])

        wrapper = ResolvedStyle()
        wrapper.update(
            {
                "position": "fixed",
                "inset": "0",
                "background-color": overlay,
                "display": "none",
                "align-items": "flex-start",
                "justify-content": "center",
                "overflow-y": "auto",
                "z-index": "9999",
                "padding-left": px,
                "padding-right": px,
            }
        )
        wrapper.add_class("cf-popup-wrapper")
        wrapper.set_data("type", self.data_type)
        wrapper.set_data("popup-width", width)
        wrapper.set_data("popup-overlay", overlay)
        wrapper.set_data("popup-rounded", rounded)
        wrapper.set_data("popup-border", border or None)
        wrapper.set_data("popup-border-color", border_color or None)
        wrapper.set_data("popup-shadow", shadow or None)

        inner = node(
            "div",
            {"width": width, "max-width": "100%", "margin-left": "auto", "margin-right": "auto"},
            content,
            classes="elModalInnerContainer",
        )
        modal_node = ResolvedNode(tag="div", style=modal, children=[_CLOSE_BUTTON, inner])
        return ResolvedNode(tag="div", style=wrapper, children=[modal_node])
