"""
Pass 2: styleguide paint cascade.

Runs over the fully rendered tree. A text, icon or list node takes its
colours from the paint theme of its *nearest* ancestor carrying
data-paint-colors; wrappers without a paint theme are transparent, and a
nested paint container shields its own descendants from outer ones.
Colours marked explicit are never overwritten.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from funnelwind.markup import Child, Element, TagInstance
from funnelwind.render.context import RenderContext
from funnelwind.render.styles import ResolvedNode
from funnelwind.specs.styleguide import PaintThemeSpec

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorRule:
    """One colour a data type takes from its paint theme."""

    data_attr: str
    role: str
    target: str

    @property
    def explicit_marker(self) -> str:
        return f"{self.data_attr}-explicit"


# data-type -> colours patched from the paint theme
COLOR_RULES: dict[str, tuple[ColorRule, ...]] = {
    "Headline/V1": (ColorRule("data-color", "headline", "text"),),
    "SubHeadline/V1": (ColorRule("data-color", "subheadline", "text"),),
    "Paragraph/V1": (ColorRule("data-color", "content", "text"),),
    "Icon/V1": (ColorRule("data-color", "icon", "icon"),),
    "BulletList/V1": (
        ColorRule("data-text-color", "content", "text"),
        ColorRule("data-icon-color", "icon", "icon"),
    ),
}

# data-types that also receive the theme's link colour
LINK_COLOR_TYPES = frozenset({"Headline/V1", "SubHeadline/V1", "Paragraph/V1", "BulletList/V1"})

# data-type -> typography field providing its default font
FONT_FIELDS: dict[str, str] = {
    "Headline/V1": "headline_font",
    "SubHeadline/V1": "subheadline_font",
    "Paragraph/V1": "content_font",
}

_ROLE_FIELDS: dict[str, str] = {
    "headline": "headline_color_id",
    "subheadline": "subheadline_color_id",
    "content": "content_color_id",
    "icon": "icon_color_id",
}


def walk_with_paint(
    children: list[Child], paint: str | None = None
) -> Iterator[tuple[ResolvedNode, str | None]]:
    """Yield each ResolvedNode with the id of its nearest paint ancestor."""
    for child in children:
        if isinstance(child, TagInstance) and child.output is not None:
            yield from walk_with_paint([child.output], paint)
        elif isinstance(child, ResolvedNode):
            yield child, paint
            yield from walk_with_paint(child.children, child.data.get("data-paint-colors", paint))
        elif isinstance(child, Element):
            yield from walk_with_paint(child.children, paint)


def theme_colors(theme: PaintThemeSpec, ctx: RenderContext) -> dict[str, str]:
    """Role -> hex for a paint theme (missing ids resolve to black)."""
    colors = {role: ctx.styleguide.color_hex(getattr(theme, attr)) for role, attr in _ROLE_FIELDS.items()}
    if theme.link_color_id:
        colors["link"] = ctx.styleguide.color_hex(theme.link_color_id)
    return colors


def apply_paint_cascade(children: list[Child], ctx: RenderContext) -> int:
    """
    Patch paint-theme colours into rendered nodes.

    Returns:
        Number of nodes that received at least one colour.
    """
    if not ctx.styleguide.loaded:
        return 0

    palettes: dict[str, dict[str, str] | None] = {}
    patched = 0
    for resolved, paint in walk_with_paint(children):
        rules = COLOR_RULES.get(resolved.data_type or "")
        if not rules or paint is None:
            continue
        if paint not in palettes:
            theme = ctx.styleguide.paint_theme(paint)
            palettes[paint] = theme_colors(theme, ctx) if theme else None
            if theme is None:
                logger.debug(f"Paint theme {paint!r} not in styleguide, skipping cascade")
        colors = palettes[paint]
        if colors is None:
            continue

        changed = False
        for rule in rules:
            if rule.explicit_marker in resolved.data:
                continue
            color = colors[rule.role]
            resolved.data[rule.data_attr] = color
            for target in resolved.color_targets.get(rule.target, []):
                target.style.declarations["color"] = color
            changed = True
        if "link" in colors and resolved.data_type in LINK_COLOR_TYPES:
            resolved.data["data-link-color"] = colors["link"]
            changed = True
        patched += changed

    logger.debug(f"Paint cascade patched {patched} node(s)")
    return patched


def apply_typography_fonts(children: list[Child], ctx: RenderContext) -> int:
    """Stamp data-font from the styleguide typography on text without a font."""
    typography = ctx.styleguide.typography
    if typography is None:
        return 0
    stamped = 0
    for resolved, _ in walk_with_paint(children):
        field_name = FONT_FIELDS.get(resolved.data_type or "")
        if field_name is None or "data-font" in resolved.data:
            continue
        font = getattr(typography, field_name)
        if font:
            resolved.data["data-font"] = font
            stamped += 1
    return stamped


def run_cascade(children: list[Child], ctx: RenderContext) -> int:
    """Pass 2 entry point: typography fonts, then paint colours."""
    if not ctx.styleguide.loaded:
        logger.debug("No styleguide loaded, skipping paint cascade")
        return 0
    apply_typography_fonts(children, ctx)
    return apply_paint_cascade(children, ctx)
