"""Form field renderers: input, textarea, select, checkbox."""

from __future__ import annotations

from funnelwind.markup import Child, TagInstance
from funnelwind.presets import BORDER_WIDTHS, RADIUS, SHADOWS
from funnelwind.render.context import RenderContext
from funnelwind.render.styles import (
    ResolvedNode,
    ResolvedStyle,
    is_flag_set,
    node,
    preset_or_raw,
)

_HTML_INPUT_TYPES = {"email": "email", "phone_number": "tel"}


def field_box(instance: TagInstance, width: str | None = "100%") -> ResolvedStyle:
    """The bordered box around a form control."""
    px = instance.attr("px", "16px")
    py = instance.attr("py", "12px")
    rounded = instance.attr("rounded", "lg")
    border = instance.attr("border", "1")
    shadow = instance.attr("shadow")

    style = ResolvedStyle()
    style.update(
        {
            "width": width,
            "display": "block",
            "background-color": instance.attr("bg", "#ffffff"),
            "padding-left": px,
            "padding-right": px,
            "padding-top": py,
            "padding-bottom": py,
            "border-radius": preset_or_raw(rounded, RADIUS) or rounded,
            "border-width": preset_or_raw(border, BORDER_WIDTHS) or border,
            "border-style": instance.attr("border-style", "solid"),
            "border-color": instance.attr("border-color", "#d1d5db"),
            "box-sizing": "border-box",
        }
    )
    if shadow:
        style.set("box-shadow", preset_or_raw(shadow, SHADOWS))
    return style


def align_margins(style: ResolvedStyle, width: str | None, align: str | None) -> None:
    """Center or right-align a box that has an explicit percentage width."""
    if not width:
        return
    if align == "center":
        style.update({"margin-left": "auto", "margin-right": "auto"})
    elif align == "right":
        style.set("margin-left", "auto")


def control_style(instance: TagInstance, height: str | None = None, **extra: str) -> ResolvedStyle:
    style = ResolvedStyle()
    style.update(
        {
            "width": "100%",
            "height": height,
            "border": "none",
            "outline": "none",
            "background": "transparent",
            "font-family": "inherit",
            "font-size": instance.attr("font-size", "16px"),
            **extra,
        }
    )
    style.set("color", instance.attr("color"))
    return style


def _wrapper(instance: TagInstance) -> ResolvedStyle:
    style = ResolvedStyle()
    style.update(
        {
            "width": "100%",
            "box-sizing": "border-box",
            "padding-top": instance.attr("pt"),
            "margin-top": instance.attr("mt"),
        }
    )
    return style


def _common_data(style: ResolvedStyle, instance: TagInstance) -> None:
    style.set_data("font-size", instance.attr("font-size", "16px"))
    style.set_data("color", instance.attr("color") or None)


def _percent(width: str | None) -> str:
    return f"{width}%" if width else "100%"


class InputRenderer:
    """<cf-input> -> Input/V1."""

    tag = "cf-input"
    data_type = "Input/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        input_type = instance.attr("type", "email")
        name = instance.attr("name")
        placeholder = instance.attr("placeholder", "")
        width = instance.attr("width")
        align = instance.attr("align", "center")

        wrapper = _wrapper(instance)
        wrapper.set_data("type", self.data_type)
        wrapper.set_data("input-type", input_type)
        wrapper.set_data("align", align)
        _common_data(wrapper, instance)
        if input_type == "custom_type" and name:
            wrapper.set_data("input-name", name)
        if is_flag_set(instance.attr("required")):
            wrapper.set_data("required", True)
        wrapper.set_data("width", width or None)
        wrapper.set_data("placeholder", placeholder or None)

        box = field_box(instance, _percent(width))
        align_margins(box, width, align)

        attrs: dict[str, str | None] = {"type": _HTML_INPUT_TYPES.get(input_type or "", "text")}
        if placeholder:
            attrs["placeholder"] = placeholder
        control = ResolvedNode(tag="input", style=control_style(instance), attrs=attrs)
        return ResolvedNode(
            tag="div",
            style=wrapper,
            children=[ResolvedNode(tag="div", style=box, children=[control])],
        )


class TextareaRenderer:
    """<cf-textarea> -> TextArea/V1."""

    tag = "cf-textarea"
    data_type = "TextArea/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        name = instance.attr("name", "message")
        placeholder = instance.attr("placeholder", "")
        width = instance.attr("width")
        height = instance.attr("height", "120px")
        align = instance.attr("align", "center")

        wrapper = _wrapper(instance)
        wrapper.set_data("type", self.data_type)
        wrapper.set_data("textarea-name", name)
        wrapper.set_data("align", align)
        _common_data(wrapper, instance)
        if is_flag_set(instance.attr("required")):
            wrapper.set_data("required", True)
        wrapper.set_data("width", width or None)
        if height:
            wrapper.set_data("height", height.replace("px", "", 1))
        wrapper.set_data("placeholder", placeholder or None)

        box = field_box(instance, _percent(width))
        align_margins(box, width, align)

        attrs: dict[str, str | None] = {}
        if placeholder:
            attrs["placeholder"] = placeholder
        control = ResolvedNode(
            tag="textarea",
            style=control_style(instance, height=height, resize="vertical"),
            attrs=attrs,
        )
        return ResolvedNode(
            tag="div",
            style=wrapper,
            children=[ResolvedNode(tag="div", style=box, children=[control])],
        )


class SelectRenderer:
    """<cf-select> -> SelectBox/V1. Child <option> markup is kept as-is."""

    tag = "cf-select"
    data_type = "SelectBox/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        select_type = instance.attr("type", "custom_type")
        name = instance.attr("name", "option")
        placeholder = instance.attr("placeholder", "Select an option...")
        width = instance.attr("width")
        align = instance.attr("align", "center")

        wrapper = ResolvedStyle()
        wrapper.update(
            {
                "width": _percent(width),
                "margin-top": instance.attr("mt", "0"),
                "box-sizing": "border-box",
                "padding-top": instance.attr("pt"),
            }
        )
        align_margins(wrapper, width, align)
        wrapper.set_data("type", self.data_type)
        wrapper.set_data("select-name", name)
        wrapper.set_data("select-type", select_type)
        wrapper.set_data("align", align)
        _common_data(wrapper, instance)
        if is_flag_set(instance.attr("required")):
            wrapper.set_data("required", True)
        wrapper.set_data("width", width or None)
        wrapper.set_data("placeholder", placeholder or None)

        options: list[Child] = [node("option", children=[placeholder or ""], value="")]
        options.extend(content)
        control = ResolvedNode(
            tag="select", style=control_style(instance, cursor="pointer"), children=options
        )
        return ResolvedNode(
            tag="div",
            style=wrapper,
            children=[ResolvedNode(tag="div", style=field_box(instance), children=[control])],
        )


class CheckboxRenderer:
    """<cf-checkbox> -> Checkbox/V1 with a custom-drawn box."""

    tag = "cf-checkbox"
    data_type = "Checkbox/V1"

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        checked = is_flag_set(instance.attr("checked"))
        box_size = instance.attr("box-size", "20px")

        wrapper = ResolvedStyle()
        wrapper.update({"width": "100%", "box-sizing": "border-box", "margin-top": instance.attr("mt")})
        wrapper.set_data("type", self.data_type)
        wrapper.set_data("name", instance.attr("name", "agree"))
        if checked:
            wrapper.set_data("checked", True)
        if is_flag_set(instance.attr("required")):
            wrapper.set_data("required", True)

        hidden_input = node(
            "input",
            {"position": "absolute", "opacity": "0", "width": "0", "height": "0"},
            type="checkbox",
        )
        if checked:
            hidden_input.attrs["checked"] = None
        check_mark = node(
            "i",
            {
                "color": instance.attr("check-color", "#ffffff"),
                "font-size": f"calc({box_size} * 0.6)",
                "display": "none",
            },
            classes="fas fa-check",
        )
        box = node(
            "span",
            {
                "flex-shrink": "0",
                "width": box_size,
                "height": box_size,
                "border": f"2px solid {instance.attr('box-border-color', '#d1d5db')}",
                "border-radius": "4px",
                "background-color": instance.attr("box-bg", "#ffffff"),
                "display": "flex",
                "align-items": "center",
                "justify-content": "center",
            },
            [check_mark],
        )
        text = node(
            "span",
            {
                "font-size": instance.attr("label-size", "16px"),
                "line-height": "1.5",
                "color": instance.attr("label-color", "#334155"),
            },
            content,
        )
        label = node(
            "label",
            {
                "display": "flex",
                "align-items": "center",
                "gap": instance.attr("gap", "12px"),
                "cursor": "pointer",
            },
            [hidden_input, box, text],
        )
        return ResolvedNode(tag="div", style=wrapper, children=[label])
