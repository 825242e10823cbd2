"""
Google Fonts collection.

Font names come from ``font`` attributes, the styleguide typography and
inline ``font-family`` styles on text-bearing cf-* tags. System fonts are
skipped, and fonts already requested in this render session are not
requested again.
"""

from __future__ import annotations

import re

from funnelwind.markup import Document
from funnelwind.presets import SYSTEM_FONTS
from funnelwind.render.context import RenderContext
from funnelwind.specs.styleguide import TypographySpec

GOOGLE_FONTS_BASE = "https://fonts.googleapis.com/css2"
FONT_WEIGHTS_AXIS = "wght@300;400;500;600;700;800;900"

_INLINE_FONT_TAGS = frozenset({"cf-headline", "cf-subheadline", "cf-paragraph", "cf-button"})
_INLINE_FONT_FAMILY = re.compile(r"""font-family:\s*["']?([^"';,]+)""", re.IGNORECASE)


def is_system_font(name: str) -> bool:
    return name.lower() in SYSTEM_FONTS


def clean_font_name(value: str) -> str:
    """First family of a font stack, without quotes."""
    return re.sub(r"""["']""", "", value).split(",")[0].strip()


def collect_fonts(document: Document, typography: TypographySpec | None = None) -> list[str]:
    """Collect web font names in first-seen order."""
    fonts: dict[str, None] = {}

    def add(name: str | None) -> None:
        if name and not is_system_font(name):
            fonts.setdefault(name, None)

    for element in document.iter_elements():
        font = element.attrs.get("font")
        if font:
            add(clean_font_name(font))

    if typography is not None:
        for font in (typography.headline_font, typography.subheadline_font, typography.content_font):
            add(font)

    for element in document.iter_elements():
        if element.tag not in _INLINE_FONT_TAGS:
            continue
        match = _INLINE_FONT_FAMILY.search(element.attrs.get("style") or "")
        if match:
            add(match.group(1).strip())

    return list(fonts)


def google_fonts_url(fonts: list[str]) -> str | None:
    if not fonts:
        return None
    families = "&family=".join(font.replace(" ", "+") for font in fonts)
    # The weight axis follows the last family only; earlier families load at 400
    return f"{GOOGLE_FONTS_BASE}?family={families}:{FONT_WEIGHTS_AXIS}&display=swap"


def request_fonts(document: Document, ctx: RenderContext) -> str | None:
    """
    Build the stylesheet URL for fonts not yet requested in this session.

    Returns:
        The Google Fonts URL, or None when there is nothing new to load.
    """
    new_fonts = [
        font
        for font in collect_fonts(document, ctx.styleguide.typography)
        if font not in ctx.loaded_fonts
    ]
    ctx.loaded_fonts.update(new_fonts)
    return google_fonts_url(new_fonts)
