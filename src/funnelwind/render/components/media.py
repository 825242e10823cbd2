"""Image, icon, video, divider and video-popup renderers."""

from __future__ import annotations

from funnelwind.markup import Child, TagInstance
from funnelwind.presets import BORDER_WIDTHS, RADIUS, SHADOWS
from funnelwind.render.components.common import catalog_data, catalog_refs
from funnelwind.render.context import RenderContext
from funnelwind.render.styles import (
    ResolvedNode,
    ResolvedStyle,
    animation_data,
    node,
    preset_or_raw,
    youtube_thumbnail,
    youtube_video_id,
)

_DIVIDER_MARGINS = {
    "left": "0 auto 0 0",
    "center": "0 auto",
    "right": "0 0 0 auto",
}

_IFRAME_ALLOW = (
    "accelerometer; autoplay; clipboard-write; encrypted-media; gyroscope; picture-in-picture"
)


def _spacing(instance: TagInstance, **defaults: str) -> dict[str, str | None]:
    return {
        "padding-top": instance.attr("pt", defaults.get("pt", "0")),
        "padding-bottom": instance.attr("pb", defaults.get("pb", "0")),
        "margin-top": instance.attr("mt", defaults.get("mt", "0")),
        "box-sizing": "border-box",
    }


class ImageRenderer:
    """
    <cf-image> -> Image/V2.

    When both an inline radius and an inline shadow apply, the image is
    wrapped in a clipping span that carries them both.
    """

    tag = "cf-image"
    data_type = "Image/V2"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        original_src = instance.attr("src", "")
        alt = instance.attr("alt", "")
        width = instance.attr("width", "100%")
        height = instance.attr("height")
        align = instance.attr("align", "center")
        rounded = instance.attr("rounded")
        corner = instance.attr("corner")
        shadow = instance.attr("shadow")
        border = instance.attr("border")
        border_style = instance.attr("border-style", "solid")
        border_color = instance.attr("border-color")
        object_fit = instance.attr("object-fit")
        brand_asset = instance.attr("brand-asset")
        refs = catalog_refs(instance, ctx)

        src = ctx.brand_asset_url(brand_asset) or original_src
        radius_value = rounded or corner
        radius = preset_or_raw(radius_value, RADIUS) if radius_value else None
        inline_radius = bool(radius_value) and not refs.corner
        inline_shadow = bool(shadow) and not refs.shadow
        clipped = inline_radius and inline_shadow

        wrapper = ResolvedStyle()
        wrapper.set("text-align", align)
        wrapper.update(_spacing(instance))

        img = ResolvedStyle()
        img.update(
            {
                "display": "block" if clipped else "inline-block",
                "vertical-align": "top",
                "max-width": "100%",
                "width": width,
                "height": height,
            }
        )
        if not clipped:
            if inline_radius:
                img.set("border-radius", radius)
            if inline_shadow:
                img.set("box-shadow", preset_or_raw(shadow, SHADOWS))
        if border and not refs.border:
            img.set("border-width", preset_or_raw(border, BORDER_WIDTHS))
            img.set("border-style", border_style)
        img.set("border-color", border_color)
        img.set("object-fit", object_fit)

        wrapper.set_data("type", self.data_type)
        wrapper.set_data("src", original_src)
        wrapper.set_data("alt", alt or None)
        if width != "100%":
            wrapper.set_data("width", width)
        wrapper.set_data("height", height or None)
        if align != "center":
            wrapper.set_data("align", align)
        wrapper.set_data("rounded", rounded or None)
        wrapper.set_data("corner", corner or None)
        wrapper.set_data("shadow", shadow or None)
        wrapper.set_data("border", border or None)
        if border_style != "solid":
            wrapper.set_data("border-style", border_style)
        wrapper.set_data("border-color", border_color or None)
        wrapper.set_data("object-fit", object_fit or None)
        wrapper.set_data("brand-asset", brand_asset or None)
        catalog_data(wrapper, refs)
        animation_data(instance, wrapper)

        img_node = ResolvedNode(tag="img", style=img, attrs={"src": src, "alt": alt})
        inner: ResolvedNode = img_node
        if clipped:
            inner = node(
                "span",
                {
                    "display": "inline-block",
                    "border-radius": radius,
                    "overflow": "hidden",
                    "box-shadow": preset_or_raw(shadow, SHADOWS),
                    "max-width": "100%",
                },
                [img_node],
            )
        return ResolvedNode(tag="div", style=wrapper, children=[inner])


class IconRenderer:
    """<cf-icon> -> Icon/V1. The <i> element is the "icon" color target."""

    tag = "cf-icon"
    data_type = "Icon/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        icon = instance.attr("icon", "fas fa-star")
        size = instance.attr("size", "48px")
        color = instance.attr("color")
        explicit_color = instance.has_attr("color") and bool(color)
        align = instance.attr("align", "center")
        opacity = instance.attr("opacity")
        pt = instance.attr("pt", "12px")
        pb = instance.attr("pb", "12px")
        mt = instance.attr("mt", "0")

        wrapper = ResolvedStyle()
        wrapper.set("text-align", align)
        wrapper.update(_spacing(instance, pt="12px", pb="12px"))

        glyph = ResolvedStyle()
        glyph.update({"display": "inline-block", "font-size": size})
        if explicit_color:
            glyph.set("color", f"{color} !important")
        glyph.set("opacity", opacity)
        glyph.add_class(icon)

        wrapper.set_data("type", self.data_type)
        wrapper.set_data("icon", icon)
        if size != "48px":
            wrapper.set_data("size", size)
        if explicit_color:
            wrapper.set_data("color", color)
            wrapper.set_data("color-explicit", True)
        if align != "center":
            wrapper.set_data("align", align)
        wrapper.set_data("opacity", opacity or None)
        if pt != "12px":
            wrapper.set_data("pt", pt)
        if pb != "12px":
            wrapper.set_data("pb", pb)
        if mt != "0":
            wrapper.set_data("mt", mt)
        animation_data(instance, wrapper)

        glyph_node = ResolvedNode(tag="i", style=glyph)
        return ResolvedNode(
            tag="div",
            style=wrapper,
            children=[glyph_node],
            color_targets={"icon": [glyph_node]},
        )


class VideoRenderer:
    """<cf-video> -> Video/V1 (YouTube embed at 16:9)."""

    tag = "cf-video"
    data_type = "Video/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        url = instance.attr("url", "")
        rounded = instance.attr("rounded", "lg")
        corner = instance.attr("corner")
        shadow = instance.attr("shadow", "lg")
        border = instance.attr("border")
        border_style = instance.attr("border-style", "solid")
        border_color = instance.attr("border-color")
        bg = instance.attr("bg", "#000")
        px = instance.attr("px")
        refs = catalog_refs(instance, ctx)
        video_id = youtube_video_id(url) or ""

        wrapper = ResolvedStyle()
        wrapper.update(_spacing(instance))
        wrapper.update({"padding-left": px, "padding-right": px})

        frame = ResolvedStyle()
        frame.update(
            {
                "width": "100%",
                "aspect-ratio": "16/9",
                "position": "relative",
                "overflow": "hidden",
                "background-color": bg,
            }
        )
        radius_value = rounded or corner
        if radius_value and not refs.corner:
            frame.set("border-radius", preset_or_raw(radius_value, RADIUS))
        if shadow and not refs.shadow:
            frame.set("box-shadow", preset_or_raw(shadow, SHADOWS))
        if border and not refs.border:
            frame.set("border-width", preset_or_raw(border, BORDER_WIDTHS))
            frame.set("border-style", border_style)
        frame.set("border-color", border_color)

        wrapper.set_data("type", self.data_type)
        wrapper.set_data("video-type", "youtube")
        wrapper.set_data("video-url", url)
        if rounded != "lg":
            wrapper.set_data("rounded", rounded)
        wrapper.set_data("corner", corner or None)
        if shadow != "lg":
            wrapper.set_data("shadow", shadow)
        wrapper.set_data("border", border or None)
        if border_style != "solid":
            wrapper.set_data("border-style", border_style)
        wrapper.set_data("border-color", border_color or None)
        if bg != "#000":
            wrapper.set_data("bg", bg)
        catalog_data(wrapper, refs)

        iframe = node(
            "iframe",
            {"width": "100%", "height": "100%", "border": "none"},
            src=f"https://www.youtube.com/embed/{video_id}",
            allow=_IFRAME_ALLOW,
            allowfullscreen=None,
        )
        return ResolvedNode(
            tag="div",
            style=wrapper,
            children=[ResolvedNode(tag="div", style=frame, children=[iframe])],
        )


class DividerRenderer:
    """<cf-divider> -> Divider/V1."""

    tag = "cf-divider"
    data_type = "Divider/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        color = instance.attr("color", "#e2e8f0")
        width = instance.attr("width", "100%")
        thickness = instance.attr("thickness", "1px")
        border_style = instance.attr("style", "solid")
        align = instance.attr("align", "center")
        shadow = instance.attr("shadow")
        px = instance.attr("px")

        wrapper = ResolvedStyle()
        wrapper.update(
            {
                "padding-top": instance.attr("pt", "16px"),
                "padding-bottom": instance.attr("pb", "16px"),
                "box-sizing": "border-box",
                "padding-left": px,
                "padding-right": px,
                "margin-top": instance.attr("mt"),
            }
        )

        line = ResolvedStyle()
        line.update(
            {
                "border-top": f"{thickness} {border_style} {color}",
                "border-right": "none",
                "border-bottom": "none",
                "border-left": "none",
                "width": width,
                "margin": _DIVIDER_MARGINS.get(align or "", "0 auto"),
            }
        )
        if shadow:
            line.set("box-shadow", preset_or_raw(shadow, SHADOWS))

        wrapper.set_data("type", self.data_type)
        if color != "#e2e8f0":
            wrapper.set_data("color", color)
        if width != "100%":
            wrapper.set_data("width", width)
        if thickness != "1px":
            wrapper.set_data("thickness", thickness)
        if border_style != "solid":
            wrapper.set_data("style", border_style)
        if align != "center":
            wrapper.set_data("align", align)
        wrapper.set_data("shadow", shadow or None)
        wrapper.set_data("skip-shadow-settings", not shadow)

        return ResolvedNode(tag="div", style=wrapper, children=[ResolvedNode(tag="div", style=line)])


class VideoPopupRenderer:
    """<cf-video-popup> -> VideoPopup/V1: a thumbnail that opens a video."""

    tag = "cf-video-popup"
    data_type = "VideoPopup/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        url = instance.attr("url", "")
        thumbnail = instance.attr("thumbnail", "")
        alt = instance.attr("alt", "Video thumbnail")
        width = instance.attr("width", "100%")
        rounded = instance.attr("rounded", "lg")
        shadow = instance.attr("shadow", "lg")
        border = instance.attr("border")
        border_color = instance.attr("border-color", "#000000")
        overlay_bg = instance.attr("overlay-bg", "rgba(0,0,0,0.8)")
        play_icon = instance.attr("play-icon", "true") != "false"

        video_id = youtube_video_id(url)
        if not thumbnail and video_id:
            thumbnail = youtube_thumbnail(video_id)

        wrapper = ResolvedStyle()
        wrapper.update({"width": "100%", "text-align": instance.attr("align", "center")})
        wrapper.update(_spacing(instance))

        img = ResolvedStyle()
        img.update(
            {
                "display": "block",
                "width": "100%",
                "height": "auto",
                "border-radius": preset_or_raw(rounded, RADIUS),
            }
        )
        if shadow:
            img.set("box-shadow", preset_or_raw(shadow, SHADOWS))
        if border:
            img.update({"border-width": border, "border-style": "solid", "border-color": border_color})
        img.add_class("elImage")

        wrapper.set_data("type", self.data_type)
        wrapper.set_data("video-url", url)
        wrapper.set_data("video-type", "youtube")
        wrapper.set_data("thumbnail", thumbnail)
        wrapper.set_data("overlay-bg", overlay_bg)
        if rounded != "lg":
            wrapper.set_data("rounded", rounded)
        if shadow and shadow != "lg":
            wrapper.set_data("shadow", shadow)
        wrapper.set_data("border", border or None)
        if border_color != "#000000":
            wrapper.set_data("border-color", border_color)

        image_children: list[Child] = [
            ResolvedNode(tag="img", style=img, attrs={"src": thumbnail or "", "alt": alt or ""})
        ]
        if play_icon:
            image_children.append(
                node(
                    "i",
                    {
                        "position": "absolute",
                        "top": "50%",
                        "left": "50%",
                        "transform": "translate(-50%, -50%)",
                        "font-size": instance.attr("play-icon-size", "64px"),
                        "color": instance.attr("play-icon-color", "#ffffff"),
                        "opacity": "0.9",
                        "text-shadow": "0 2px 8px rgba(0,0,0,0.3)",
                        "pointer-events": "none",
                    },
                    classes="fas fa-play-circle",
                )
            )
        image_wrapper = node(
            "div",
            {
                "display": "inline-block",
                "position": "relative",
                "cursor": "pointer",
                "width": width,
                "max-width": "100%",
            },
            image_children,
            classes="elImageWrapper",
        )
        return ResolvedNode(tag="div", style=wrapper, children=[image_wrapper])
