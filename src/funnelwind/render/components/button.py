"""Call-to-action button renderer."""

from __future__ import annotations

from funnelwind.markup import Child, TagInstance
from funnelwind.presets import FONT_WEIGHTS, RADIUS, SHADOWS
from funnelwind.render.context import RenderContext
from funnelwind.render.styles import (
    ResolvedNode,
    ResolvedStyle,
    animation_data,
    is_flag_set,
    node,
    preset_or_raw,
)

DEFAULT_SUBTEXT_COLOR = "rgba(255,255,255,0.8)"


def action_href(action: str, href: str, scroll_target: str | None) -> str:
    """Map a button action onto the href the platform expects."""
    if action == "scroll":
        return f"#scroll-{scroll_target}" if scroll_target else href
    return _ACTION_HREFS.get(action, href)


_ACTION_HREFS = {
    "submit": "#submit-form",
    "popup": "#open-popup",
    "show-hide": "#show-hide",
    "next-step": "?next_funnel_step=true",
    "oto": "#submit-oto",
    "one-click-upsell": "#submit-oto",
}


class ButtonRenderer:
    """
    <cf-button> -> Button/V1.

    A ``style`` attribute naming a catalog button suppresses every inline
    surface declaration (background, radius, border, shadow, colors); the
    generated stylesheet styles the anchor through data-style-guide-button.
    """

    tag = "cf-button"
    data_type = "Button/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        action = instance.attr("action", "link")
        target = instance.attr("target", "_self")
        scroll_target = instance.attr("scroll-target")
        href = action_href(action, instance.attr("href", "#"), scroll_target)

        style_ref = instance.attr("style")
        catalog_button = bool(style_ref) and ctx.is_ref(style_ref, "button")

        bg = instance.attr("bg", "#3b82f6")
        color = instance.attr("color", "#ffffff")
        size = instance.attr("size", "20px")
        weight = instance.attr("weight", "bold")
        px = instance.attr("px", "32px")
        py = instance.attr("py", "16px")
        rounded = instance.attr("rounded", "default")
        shadow = instance.attr("shadow")
        border_color = instance.attr("border-color")
        border_width = instance.attr("border-width", "0")
        align = instance.attr("align", "center")
        full_width = is_flag_set(instance.attr("full-width"))
        subtext = instance.attr("subtext")
        subtext_color = instance.attr("subtext-color", DEFAULT_SUBTEXT_COLOR)
        icon = instance.attr("icon")
        icon_position = instance.attr("icon-position", "left")
        icon_color = instance.attr("icon-color", color)

        wrapper = ResolvedStyle()
        wrapper.update(
            {
                "text-align": align,
                "padding-top": instance.attr("pt", "0"),
                "margin-top": instance.attr("mt", "0"),
                "box-sizing": "border-box",
                "padding-bottom": instance.attr("pb"),
            }
        )

        anchor = ResolvedStyle()
        anchor.update(
            {
                "display": "inline-flex",
                "flex-direction": "column",
                "align-items": "center",
                "justify-content": "center",
                "text-decoration": "none",
                "cursor": "pointer",
                "padding-left": px,
                "padding-right": px,
                "padding-top": py,
                "padding-bottom": py,
                "box-sizing": "border-box",
            }
        )
        if not catalog_button:
            anchor.set("background-color", bg)
            if rounded:
                anchor.set("border-radius", preset_or_raw(rounded, RADIUS))
            anchor.set("border-style", "solid")
            anchor.set("border-width", border_width)
            anchor.set("border-color", border_color or "transparent")
            if shadow:
                anchor.set("box-shadow", preset_or_raw(shadow, SHADOWS))
        if full_width:
            anchor.set("width", "100%")

        label = ResolvedStyle()
        label.update(
            {
                "display": "inline-flex",
                "align-items": "center",
                "justify-content": "center",
                "font-size": size,
                "font-weight": preset_or_raw(weight, FONT_WEIGHTS) or weight,
            }
        )
        if not catalog_button:
            label.set("color", color)

        label_children: list[Child] = list(content)
        if icon:
            icon_style: dict[str, str | None] = {}
            if not catalog_button:
                icon_style["color"] = icon_color
            spacing = "margin-right" if icon_position == "left" else "margin-left"
            icon_style[spacing] = "10px"
            if icon_position == "left":
                label_children.insert(0, node("i", icon_style, classes=icon))
            elif icon_position == "right":
                label_children.append(node("i", icon_style, classes=icon))

        anchor_children: list[Child] = [ResolvedNode(tag="span", style=label, children=label_children)]
        if subtext:
            subtext_style = {
                "display": "block",
                "text-align": "center",
                "font-size": "14px",
                "margin-top": "4px",
                "color": None if catalog_button else subtext_color,
            }
            anchor_children.append(node("span", subtext_style, [subtext]))

        wrapper.set_data("type", self.data_type)
        wrapper.set_data("href", href)
        wrapper.set_data("target", target)
        wrapper.set_data("action", action)
        if catalog_button:
            wrapper.set_data("style-guide-button", style_ref)
        wrapper.set_data("bg", bg or None)
        wrapper.set_data("color", color or None)
        wrapper.set_data("rounded", rounded or None)
        wrapper.set_data("shadow", shadow or None)
        wrapper.set_data("border-color", border_color or None)
        if border_width != "0":
            wrapper.set_data("border-width", border_width)
        if icon_color and icon_color != color:
            wrapper.set_data("icon-color", icon_color)
        wrapper.set_data("size", size)
        wrapper.set_data("weight", weight)
        wrapper.set_data("px", px)
        wrapper.set_data("py", py)
        if align != "center":
            wrapper.set_data("align", align)
        if full_width:
            wrapper.set_data("full-width", True)
        wrapper.set_data("subtext", subtext or None)
        if subtext_color != DEFAULT_SUBTEXT_COLOR:
            wrapper.set_data("subtext-color", subtext_color)
        if icon:
            wrapper.set_data("icon", icon)
            wrapper.set_data("icon-position", icon_position)
        if action == "show-hide":
            wrapper.set_data("elbuttontype", "showHide")
            wrapper.set_data("show-ids", instance.attr("show-ids") or None)
            wrapper.set_data("hide-ids", instance.attr("hide-ids") or None)
        if action == "scroll" and scroll_target:
            wrapper.set_data("scroll-target", scroll_target)
        animation_data(instance, wrapper)

        anchor_node = ResolvedNode(
            tag="a", style=anchor, attrs={"href": href, "target": target}, children=anchor_children
        )
        return ResolvedNode(tag="div", style=wrapper, children=[anchor_node])
