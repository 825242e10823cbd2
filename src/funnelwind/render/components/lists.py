"""Bullet list, progress bar and countdown renderers."""

from __future__ import annotations

from collections.abc import Iterator

from funnelwind.markup import Child, Element, TagInstance
from funnelwind.presets import ALIGN_JUSTIFY, RADIUS, SHADOWS
from funnelwind.render.components.text import resolve_font_size
from funnelwind.render.context import RenderContext
from funnelwind.render.styles import (
    ResolvedNode,
    ResolvedStyle,
    node,
    parse_int,
    preset_or_raw,
)


def _list_items(children: list[Child]) -> Iterator[Element]:
    """Every <li> below the captured content, nested ones included."""
    for child in children:
        if isinstance(child, Element) and not isinstance(child, TagInstance):
            if child.tag == "li":
                yield child
            yield from _list_items(child.children)


class BulletListRenderer:
    """
    <cf-bullet-list> -> BulletList/V1.

    Every item shares the list's icon. Text and icon colours carry separate
    explicit markers, and each item's span / icon is registered as a
    "text" / "icon" color target.
    """

    tag = "cf-bullet-list"
    data_type = "BulletList/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        icon = instance.attr("icon", "fas fa-check")
        icon_color = instance.attr("icon-color")
        explicit_icon = instance.has_attr("icon-color") and bool(icon_color)
        text_color = instance.attr("text-color")
        explicit_text = instance.has_attr("text-color") and bool(text_color)
        icon_size = instance.attr("icon-size", "16px")
        size = instance.attr("size", "m")
        gap = instance.attr("gap", "12px")
        item_gap = instance.attr("item-gap", "8px")
        align = instance.attr("align", "left")

        wrapper = ResolvedStyle()
        wrapper.update(
            {
                "width": "100%",
                "padding-top": instance.attr("pt", "0"),
                "padding-bottom": instance.attr("pb", "0"),
                "margin-top": instance.attr("mt", "0"),
                "box-sizing": "border-box",
            }
        )

        item_style = {
            "display": "flex",
            "align-items": "flex-start",
            "justify-content": ALIGN_JUSTIFY.get(align or "", "flex-start"),
        }
        icon_style = {
            "flex-shrink": "0",
            "font-size": icon_size,
            "line-height": "1.5",
            "margin-top": "2px",
            "margin-right": gap,
            "color": f"{icon_color} !important" if explicit_icon else None,
        }
        text_style = {
            "font-size": resolve_font_size(size, "paragraph", ctx),
            "line-height": "1.5",
            "color": f"{text_color} !important" if explicit_text else None,
        }

        items: list[Child] = []
        text_targets: list[ResolvedNode] = []
        icon_targets: list[ResolvedNode] = []
        for li in _list_items(content):
            glyph = node("i", icon_style, classes=f"{icon} fa_icon")
            text = node("span", text_style, li.children)
            items.append(node("li", item_style, [glyph, text]))
            text_targets.append(text)
            icon_targets.append(glyph)

        wrapper.set_data("type", self.data_type)
        wrapper.set_data("icon", icon)
        if explicit_icon:
            wrapper.set_data("icon-color", icon_color)
            wrapper.set_data("icon-color-explicit", True)
        if explicit_text:
            wrapper.set_data("text-color", text_color)
            wrapper.set_data("text-color-explicit", True)
        wrapper.set_data("icon-size", icon_size)
        wrapper.set_data("size", size)
        wrapper.set_data("gap", gap)
        wrapper.set_data("item-gap", item_gap)
        if align != "left":
            wrapper.set_data("align", align)

        listing = node(
            "ul",
            {
                "list-style": "none",
                "padding": "0",
                "margin": "0",
                "display": "flex",
                "flex-direction": "column",
                "gap": item_gap,
            },
            items,
        )
        return ResolvedNode(
            tag="div",
            style=wrapper,
            children=[listing],
            color_targets={"text": text_targets, "icon": icon_targets},
        )


class ProgressBarRenderer:
    """<cf-progress-bar> -> ProgressBar/V1."""

    tag = "cf-progress-bar"
    data_type = "ProgressBar/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        progress = parse_int(instance.attr("progress"), 50)
        text = instance.attr("text", "")
        text_outside = instance.attr("text-outside", "false") == "true"
        height = instance.attr("height", "24px")
        bg = instance.attr("bg", "#e2e8f0")
        fill = instance.attr("fill", "#3b82f6")
        text_color = instance.attr("text-color", "#334155" if text_outside else "#ffffff")
        rounded = instance.attr("rounded", "full")
        shadow = instance.attr("shadow")
        border = instance.attr("border")
        border_color = instance.attr("border-color", "#000000")

        wrapper = ResolvedStyle()
        wrapper.update(
            {
                "width": "100%",
                "text-align": instance.attr("align", "center"),
                "padding-top": instance.attr("pt", "0"),
                "padding-bottom": instance.attr("pb", "0"),
                "margin-top": instance.attr("mt", "0"),
                "box-sizing": "border-box",
            }
        )

        track = ResolvedStyle()
        track.update(
            {
                "width": instance.attr("width", "100%"),
                "height": height,
                "background-color": bg,
                "border-radius": preset_or_raw(rounded, RADIUS),
                "overflow": "hidden",
                "position": "relative",
                "display": "inline-block",
            }
        )
        if shadow:
            track.set("box-shadow", preset_or_raw(shadow, SHADOWS))
        if border:
            track.update({"border-width": border, "border-style": "solid", "border-color": border_color})
        track.add_class("progress")

        wrapper.set_data("type", self.data_type)
        wrapper.set_data("progress", str(progress))
        wrapper.set_data("text", text or None)
        wrapper.set_data("text-outside", text_outside)
        wrapper.set_data("bg", bg)
        wrapper.set_data("fill", fill)
        wrapper.set_data("height", height)
        if rounded != "full":
            wrapper.set_data("rounded", rounded)
        wrapper.set_data("shadow", shadow or None)
        wrapper.set_data("border", border or None)
        if border_color != "#000000":
            wrapper.set_data("border-color", border_color)

        label: ResolvedNode | None = None
        if text:
            if text_outside:
                label_style = {
                    "display": "block",
                    "color": text_color,
                    "font-size": "14px",
                    "font-weight": "500",
                    "margin-bottom": "8px",
                }
            else:
                label_style = {
                    "position": "absolute",
                    "top": "50%",
                    "left": "50%",
                    "transform": "translate(-50%, -50%)",
                    "color": text_color,
                    "font-size": "14px",
                    "font-weight": "600",
                    "white-space": "nowrap",
                }
            label = node("span", label_style, [text], classes="progress-label")

        bar = node(
            "div",
            {
                "width": f"{progress}%",
                "height": "100%",
                "background-color": fill,
                "border-radius": "inherit",
                "transition": "width 0.3s ease",
            },
            classes="progress-bar",
        )
        track_children: list[Child] = [bar]
        if label is not None and not text_outside:
            track_children.append(label)

        children: list[Child] = []
        if label is not None and text_outside:
            children.append(label)
        children.append(ResolvedNode(tag="div", style=track, children=track_children))
        return ResolvedNode(tag="div", style=wrapper, children=children)


_COUNTDOWN_UNITS = (
    ("show-days", "Days", "days"),
    ("show-hours", "Hours", "hours"),
    ("show-minutes", "Minutes", "minutes"),
    ("show-seconds", "Seconds", "seconds"),
)


class CountdownRenderer:
    """
    <cf-countdown> -> Countdown/V1.

    Emits the static unit layout with zeroed amounts; ticking is left to the
    page runtime, which reads the end date/time and timezone data attributes.
    """

    tag = "cf-countdown"
    data_type = "Countdown/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        align = instance.attr("align", "center")
        rounded = instance.attr("rounded", "lg")
        number_bg = instance.attr("number-bg", "#1C65E1")
        number_color = instance.attr("number-color", "#ffffff")
        label_color = instance.attr("label-color", "#164EAD")
        shown = {key: instance.attr(key, "true") == "true" for key, _, _ in _COUNTDOWN_UNITS}

        wrapper = ResolvedStyle()
        wrapper.update(
            {
                "width": "100%",
                "padding-top": instance.attr("pt", "0"),
                "padding-bottom": instance.attr("pb", "0"),
                "margin-top": instance.attr("mt", "0"),
                "box-sizing": "border-box",
            }
        )
        wrapper.set_data("type", self.data_type)
        wrapper.set_data("end-date", instance.attr("end-date", ""))
        wrapper.set_data("end-time", instance.attr("end-time", "00:00:00"))
        wrapper.set_data("timezone", instance.attr("timezone", "America/New_York"))
        for key, _, _ in _COUNTDOWN_UNITS:
            wrapper.set_data(key, shown[key])
        wrapper.set_data("redirect", instance.attr("redirect") or None)
        wrapper.set_data("number-bg", number_bg)
        wrapper.set_data("number-color", number_color)
        wrapper.set_data("label-color", label_color)

        columns: list[Child] = []
        for key, label, unit in _COUNTDOWN_UNITS:
            if not shown[key]:
                continue
            amount = node(
                "span",
                {
                    "color": number_color,
                    "font-size": instance.attr("number-size", "28px"),
                    "font-weight": "700",
                    "line-height": "100%",
                },
                ["00"],
                classes="elCountdownAmount",
                data_unit=unit,
            )
            amount_box = node(
                "div",
                {
                    "background-color": number_bg,
                    "padding": "14px",
                    "border-radius": preset_or_raw(rounded, RADIUS),
                    "min-width": "60px",
                    "text-align": "center",
                },
                [amount],
                classes="elCountdownAmountContainer",
            )
            period = node(
                "span",
                {
                    "color": label_color,
                    "font-size": instance.attr("label-size", "11px"),
                    "font-weight": "600",
                    "text-transform": "uppercase",
                },
                [label],
                classes="elCountdownPeriod",
            )
            columns.append(
                node(
                    "div",
                    {"display": "flex", "flex-direction": "column", "align-items": "center", "gap": "0.5em"},
                    [amount_box, period],
                    classes="elCountdownColumn",
                )
            )

        row = node(
            "div",
            {
                "display": "flex",
                "justify-content": ALIGN_JUSTIFY.get(align or "", "center"),
                "gap": instance.attr("gap", "0.65em"),
                "flex-wrap": "wrap",
            },
            columns,
            classes="elCountdownRow",
        )
        return ResolvedNode(tag="div", style=wrapper, children=[row])
