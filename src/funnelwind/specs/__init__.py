"""
Styleguide and brand-asset specification types.
"""

from funnelwind.specs.styleguide import (
    BRAND_ASSET_TYPES,
    BorderSpec,
    BrandAssetsSpec,
    ButtonShadowSpec,
    ButtonStateSpec,
    ButtonStyleSpec,
    ColorSpec,
    CornerSpec,
    PaintThemeSpec,
    ShadowSpec,
    StyleguideSpec,
    TypographySpec,
)

__all__ = [
    "BRAND_ASSET_TYPES",
    "BorderSpec",
    "BrandAssetsSpec",
    "ButtonShadowSpec",
    "ButtonStateSpec",
    "ButtonStyleSpec",
    "ColorSpec",
    "CornerSpec",
    "PaintThemeSpec",
    "ShadowSpec",
    "StyleguideSpec",
    "TypographySpec",
]
