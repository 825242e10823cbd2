"""
Styleguide support: loading, lookup stores, the type scale and CSS generation.
"""

from funnelwind.styleguide.css_generator import BG_STYLE_CSS, generate_styleguide_css
from funnelwind.styleguide.loader import (
    load_brand_assets_file,
    load_styleguide_file,
    parse_brand_assets,
    parse_styleguide,
)
from funnelwind.styleguide.store import BrandAssetsStore, StyleCategory, StyleguideStore
from funnelwind.styleguide.typescale import build_typescale, compute_scale

__all__ = [
    "BG_STYLE_CSS",
    "BrandAssetsStore",
    "StyleCategory",
    "StyleguideStore",
    "build_typescale",
    "compute_scale",
    "generate_styleguide_css",
    "load_brand_assets_file",
    "load_styleguide_file",
    "parse_brand_assets",
    "parse_styleguide",
]
