"""
Resolution rules shared by several tag kinds.

Catalog references (shadow/border/corner) exclude the inline value for
their property: a referenced id is persisted as data-style-guide-<category>
and styled by the generated stylesheet instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from funnelwind.markup import Child, TagInstance
from funnelwind.presets import BORDER_WIDTHS, RADIUS, SHADOWS, bg_style_class
from funnelwind.render.context import RenderContext
from funnelwind.render.styles import ResolvedStyle, node, preset_or_raw


@dataclass(frozen=True)
class CatalogRefs:
    """Which of an instance's shadow/border/corner values are catalog ids."""

    shadow: str | None = None
    border: str | None = None
    corner: str | None = None


def catalog_refs(instance: TagInstance, ctx: RenderContext) -> CatalogRefs:
    shadow = instance.attr("shadow")
    border = instance.attr("border")
    corner = instance.attr("corner")
    return CatalogRefs(
        shadow=shadow if ctx.is_ref(shadow, "shadow") else None,
        border=border if ctx.is_ref(border, "border") else None,
        corner=corner if ctx.is_ref(corner, "corner") else None,
    )


def catalog_data(style: ResolvedStyle, refs: CatalogRefs) -> None:
    style.set_data("style-guide-shadow", refs.shadow)
    style.set_data("style-guide-border", refs.border)
    style.set_data("style-guide-corner", refs.corner)


def box_decoration(
    style: ResolvedStyle,
    instance: TagInstance,
    refs: CatalogRefs,
    rounded: str | None,
) -> None:
    """Inline shadow, radius and border for values that are not catalog ids."""
    shadow = instance.attr("shadow")
    if shadow and not refs.shadow:
        style.set("box-shadow", preset_or_raw(shadow, SHADOWS))
    if rounded and not refs.corner:
        style.set("border-radius", preset_or_raw(rounded, RADIUS))
    border = instance.attr("border")
    if border and not refs.border:
        style.set("border-width", preset_or_raw(border, BORDER_WIDTHS))
        style.set("border-style", instance.attr("border-style", "solid"))
    style.set("border-color", instance.attr("border-color"))


def background(style: ResolvedStyle, instance: TagInstance, ctx: RenderContext) -> str | None:
    """
    Apply bg / gradient / bg-image.

    A paint theme suppresses the element's own bg and gradient. A brand
    asset with a known URL replaces bg-image.

    Returns:
        The effective background image URL, if any.
    """
    if not instance.attr("paint"):
        gradient = instance.attr("gradient")
        if gradient:
            style.set("background", gradient)
        else:
            style.set("background-color", instance.attr("bg"))

    bg_image = instance.attr("bg-image")
    brand_url = ctx.brand_asset_url(instance.attr("brand-asset"))
    if brand_url:
        bg_image = brand_url
    if bg_image:
        style.set("background-image", f"url({bg_image})")
    return bg_image


def background_class(instance: TagInstance, bg_image: str | None) -> str:
    """Background style class, only when there is an image to style."""
    return bg_style_class(instance.attr("bg-style")) if bg_image else ""


def source_data(style: ResolvedStyle, instance: TagInstance) -> None:
    """Persist the original bg-image and brand-asset (not the swapped URL)."""
    if instance.attr("bg-image"):
        style.set_data("bg-image", instance.attr("bg-image"))
    if instance.attr("brand-asset"):
        style.set_data("brand-asset", instance.attr("brand-asset"))


def with_overlay(
    content: list[Child],
    overlay: str | None,
    *,
    inherit_radius: bool = True,
    inner: dict[str, str] | None = None,
) -> list[Child]:
    """Prepend an overlay layer and lift the content above it."""
    if not overlay:
        return content
    layer = node(
        "div",
        {
            "position": "absolute",
            "inset": "0",
            "background": overlay,
            "pointer-events": "none",
            "z-index": "1",
            "border-radius": "inherit" if inherit_radius else None,
        },
        classes="cf-overlay",
    )
    lifted = node("div", {"position": "relative", "z-index": "2", **(inner or {})}, content)
    return [layer, lifted]


def element_id(instance: TagInstance) -> dict[str, str]:
    value = instance.attr("element-id")
    return {"id": value} if value else {}
