"""
Session-scoped styleguide and brand-asset stores.

Both stores are written once when a render session starts and only read
afterwards. An empty store (no payload loaded) answers every query with the
"not loaded" result so resolution falls back to the preset tables.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from funnelwind.specs.styleguide import (
    BrandAssetsSpec,
    PaintThemeSpec,
    StyleguideSpec,
    TypographySpec,
)
from funnelwind.styleguide.typescale import build_typescale

logger = logging.getLogger(__name__)

FALLBACK_COLOR = "#000000"


class StyleCategory(StrEnum):
    """Styleguide catalogs an attribute value may reference."""

    PAINT = "paint"
    SHADOW = "shadow"
    BORDER = "border"
    CORNER = "corner"
    BUTTON = "button"


class StyleguideStore:
    """Read-only view over a loaded styleguide."""

    def __init__(self, spec: StyleguideSpec | None = None) -> None:
        self._spec = spec
        self._colors: dict[str, str] = {}
        self._catalogs: dict[str, set[str]] = {}
        self._typescale: dict[str, dict[str, str]] | None = None

        if spec is not None:
            for color in spec.colors:
                self._colors.setdefault(color.id, color.hex)
            self._catalogs = {
                StyleCategory.PAINT: {t.id for t in spec.paint_themes},
                StyleCategory.SHADOW: {s.id for s in spec.shadows},
                StyleCategory.BORDER: {b.id for b in spec.borders},
                StyleCategory.CORNER: {c.id for c in spec.corners},
                StyleCategory.BUTTON: {b.id for b in spec.buttons},
            }
            if spec.typography is not None:
                self._typescale = build_typescale(spec.typography)

    @property
    def loaded(self) -> bool:
        return self._spec is not None

    @property
    def spec(self) -> StyleguideSpec | None:
        return self._spec

    @property
    def typography(self) -> TypographySpec | None:
        return self._spec.typography if self._spec else None

    @property
    def typescale(self) -> dict[str, dict[str, str]] | None:
        return self._typescale

    def color_hex(self, color_id: str | None) -> str:
        """Look up a palette color, falling back to black for unknown ids."""
        if color_id and color_id in self._colors:
            return self._colors[color_id]
        logger.debug(f"Color id {color_id!r} not in palette, using {FALLBACK_COLOR}")
        return FALLBACK_COLOR

    def paint_theme(self, theme_id: str | None) -> PaintThemeSpec | None:
        if not self._spec or not theme_id:
            return None
        for theme in self._spec.paint_themes:
            if theme.id == theme_id:
                return theme
        return None

    def is_styleguide_ref(self, value: str | None, category: str) -> bool:
        """
        Check whether a value names an entry in a styleguide catalog.

        Args:
            value: Attribute value
            category: One of paint, shadow, border, corner, button

        Returns:
            False without a loaded styleguide, for empty values and for
            unknown categories.
        """
        if not value or self._spec is None:
            return False
        return value in self._catalogs.get(category, ())

    def resolve_size(self, preset: str | None, element_type: str = "headline") -> str | None:
        """
        Resolve a size preset against the styleguide type scale.

        Returns None when no typography is loaded or the preset is not a
        scale key; callers then fall back to FONT_SIZES and the raw value.
        Unknown element types use the headline scale.
        """
        if not preset or self._typescale is None:
            return None
        table = self._typescale.get(element_type) or self._typescale["headline"]
        return table.get(preset)


class BrandAssetsStore:
    """Read-only view over brand asset URLs."""

    def __init__(self, spec: BrandAssetsSpec | None = None) -> None:
        self._assets: dict[str, list[str]] = dict(spec.assets) if spec else {}
        self._loaded = spec is not None

    @property
    def loaded(self) -> bool:
        return self._loaded

    def asset_url(self, asset_type: str | None) -> str | None:
        """Return the active (first) URL for an asset type."""
        if not asset_type:
            return None
        urls = self._assets.get(asset_type)
        return urls[0] if urls else None

    def has_asset(self, asset_type: str | None) -> bool:
        return self.asset_url(asset_type) is not None
