"""
Preset tables for FunnelWind.

Static keyword -> CSS value tables matching the ClickFunnels editor options.
Every lookup goes through resolve_preset(), which passes unknown keys through
verbatim so free-form values work alongside named presets.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType


def _table(values: dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(values)


# =============================================================================
# Style presets
# =============================================================================

SHADOWS = _table(
    {
        "none": "none",
        "sm": "0 1px 2px rgba(0,0,0,0.05)",
        "default": "0 1px 3px rgba(0,0,0,0.1)",
        "md": "0 4px 6px rgba(0,0,0,0.1)",
        "lg": "0 10px 15px rgba(0,0,0,0.1)",
        "xl": "0 20px 25px rgba(0,0,0,0.1)",
        "2xl": "0 25px 50px rgba(0,0,0,0.25)",
    }
)

RADIUS = _table(
    {
        "none": "0",
        "sm": "4px",
        "default": "8px",
        "md": "12px",
        "lg": "16px",
        "xl": "20px",
        "2xl": "24px",
        "3xl": "32px",
        "full": "9999px",
    }
)

# Percentages, the only line-height unit ClickFunnels accepts
LINE_HEIGHTS = _table(
    {
        "none": "100%",
        "tight": "110%",
        "snug": "120%",
        "normal": "140%",
        "relaxed": "160%",
        "loose": "180%",
    }
)

FONT_WEIGHTS = _table(
    {
        "thin": "100",
        "extralight": "200",
        "light": "300",
        "normal": "400",
        "medium": "500",
        "semibold": "600",
        "bold": "700",
        "extrabold": "800",
        "black": "900",
    }
)

FONT_SIZES = _table(
    {
        "xs": "12px",
        "s": "14px",
        "sm": "14px",
        "m": "16px",
        "md": "16px",
        "l": "20px",
        "lg": "20px",
        "xl": "24px",
        "2xl": "32px",
        "3xl": "40px",
        "4xl": "48px",
        "5xl": "64px",
    }
)

ROW_WIDTHS = _table(
    {
        "narrow": "800px",
        "medium": "960px",
        "wide": "1170px",
        "extra": "1400px",
    }
)

CONTAINER_WIDTHS = _table(
    {
        "small": "550px",
        "mid": "720px",
        "midWide": "960px",
        "wide": "1170px",
        "full": "100%",
    }
)

BORDER_WIDTHS = _table(
    {
        "0": "0",
        "1": "1px",
        "2": "2px",
        "3": "3px",
        "4": "4px",
        "6": "6px",
        "8": "8px",
    }
)

BG_STYLE_CLASSES = _table(
    {
        "cover": "bgCover",
        "cover-center": "bgCoverCenter",
        "parallax": "bgCoverV2",
        "w100": "bgW100",
        "w100h100": "bgW100H100",
        "no-repeat": "bgNoRepeat",
        "repeat": "bgRepeat",
        "repeat-x": "bgRepeatX",
        "repeat-y": "bgRepeatY",
    }
)

DEFAULT_BG_STYLE_CLASS = "bgCoverCenter"

# =============================================================================
# Flex keyword maps
# =============================================================================

FLEX_DIRECTIONS = _table(
    {
        "row": "row",
        "col": "column",
        "row-reverse": "row-reverse",
        "col-reverse": "column-reverse",
    }
)

FLEX_JUSTIFY = _table(
    {
        "start": "flex-start",
        "center": "center",
        "end": "flex-end",
        "between": "space-between",
        "around": "space-around",
        "evenly": "space-evenly",
    }
)

FLEX_ITEMS = _table(
    {
        "start": "flex-start",
        "center": "center",
        "end": "flex-end",
        "stretch": "stretch",
        "baseline": "baseline",
    }
)

ALIGN_JUSTIFY = _table(
    {
        "left": "flex-start",
        "center": "center",
        "right": "flex-end",
    }
)

# =============================================================================
# Fonts
# =============================================================================

# Never requested from Google Fonts
SYSTEM_FONTS: frozenset[str] = frozenset(
    {
        "sans-serif",
        "serif",
        "monospace",
        "cursive",
        "fantasy",
        "system-ui",
        "ui-sans-serif",
        "ui-serif",
        "ui-monospace",
        "ui-rounded",
        "arial",
        "helvetica",
        "times new roman",
        "times",
        "courier new",
        "courier",
        "verdana",
        "georgia",
        "palatino",
        "garamond",
        "bookman",
        "tahoma",
        "trebuchet ms",
        "arial black",
        "impact",
        "comic sans ms",
        "inherit",
    }
)


# =============================================================================
# Lookup
# =============================================================================


def resolve_preset(key: str | None, table: Mapping[str, str]) -> str | None:
    """
    Resolve a preset keyword against a table.

    Args:
        key: Attribute value (preset keyword or raw CSS value)
        table: Preset table to look the key up in

    Returns:
        The table value when the key is a preset, the key itself otherwise,
        or None when the key is missing or empty.
    """
    if not key:
        return None
    return table.get(key, key)


def bg_style_class(bg_style: str | None) -> str:
    """Map a bg-style keyword to its ClickFunnels background class."""
    if not bg_style:
        return DEFAULT_BG_STYLE_CLASS
    return BG_STYLE_CLASSES.get(bg_style, bg_style)
