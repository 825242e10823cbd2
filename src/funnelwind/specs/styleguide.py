"""
Styleguide specification types.

Defines the design-system payload a page is rendered against: palette, paint
themes, typography scale parameters and the shadow/border/corner/button
catalogs. JSON payloads use camelCase keys; every model accepts both the JSON
alias and the Python field name.
"""

from pydantic import BaseModel, ConfigDict, Field

Number = int | float

# Upper bounds keep every scale step finite (NaN and Infinity fail these too)
MAX_BASE_SIZE = 1000
MAX_SCALE_RATIO = 10


class _StyleguideModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


# =============================================================================
# Palette
# =============================================================================


class ColorSpec(_StyleguideModel):
    """
    Palette entry.

    Example:
        ColorSpec(id="brand", hex="#1c65e1")
    """

    id: str = Field(description="Color id referenced by paint themes")
    hex: str = Field(description="CSS color value")


class PaintThemeSpec(_StyleguideModel):
    """
    Role-based color set applied to a container and cascaded to its content.

    Every *_color_id names an entry in the palette. Missing ids resolve to
    #000000 at lookup time.
    """

    id: str = Field(description="Paint theme id used in paint=\"...\" attributes")
    background_color_id: str | None = Field(default=None, alias="backgroundColorId")
    headline_color_id: str | None = Field(default=None, alias="headlineColorId")
    subheadline_color_id: str | None = Field(default=None, alias="subheadlineColorId")
    content_color_id: str | None = Field(default=None, alias="contentColorId")
    icon_color_id: str | None = Field(default=None, alias="iconColorId")
    link_color_id: str | None = Field(default=None, alias="linkColorId")


# =============================================================================
# Typography
# =============================================================================


class TypographySpec(_StyleguideModel):
    """Typographic scale parameters and role fonts."""

    base_size: Number = Field(
        default=16,
        gt=0,
        le=MAX_BASE_SIZE,
        alias="baseSize",
        description="Base font size in px",
    )
    scale_ratio: Number = Field(
        default=1.25,
        gt=1,
        le=MAX_SCALE_RATIO,
        alias="scaleRatio",
        description="Geometric step ratio",
    )
    headline_font: str | None = Field(default=None, alias="headlineFont")
    subheadline_font: str | None = Field(default=None, alias="subheadlineFont")
    content_font: str | None = Field(default=None, alias="contentFont")
    headline_weight: str | None = Field(default=None, alias="headlineWeight")
    subheadline_weight: str | None = Field(default=None, alias="subheadlineWeight")
    content_weight: str | None = Field(default=None, alias="contentWeight")


# =============================================================================
# Catalogs
# =============================================================================


class ShadowSpec(_StyleguideModel):
    """Named box shadow."""

    id: str
    x: Number = 0
    y: Number = 0
    blur: Number = 0
    spread: Number = 0
    color: str = "rgba(0,0,0,0.1)"


class BorderSpec(_StyleguideModel):
    """Named border."""

    id: str
    width: Number = 1
    style: str = "solid"
    color: str = "#000000"


class CornerSpec(_StyleguideModel):
    """Named border radius."""

    id: str
    radius: Number = 0


class ButtonStateSpec(_StyleguideModel):
    """Background and text color for one button state."""

    bg: str | None = None
    color: str | None = None


class ButtonShadowSpec(_StyleguideModel):
    """Optional button shadow, applied only when enabled."""

    enabled: bool = False
    x: Number | None = None
    y: Number | None = None
    blur: Number | None = None
    spread: Number | None = None
    color: str | None = None


class ButtonStyleSpec(_StyleguideModel):
    """
    Named button style.

    Example:
        ButtonStyleSpec(
            id="primary",
            regular=ButtonStateSpec(bg="#1c65e1", color="#ffffff"),
            hover=ButtonStateSpec(bg="#1550b8"),
            border_radius=8,
        )
    """

    id: str
    regular: ButtonStateSpec | None = None
    hover: ButtonStateSpec | None = None
    active: ButtonStateSpec | None = None
    border_radius: Number | None = Field(default=None, alias="borderRadius")
    border_width: Number | None = Field(default=None, alias="borderWidth")
    border_style: str | None = Field(default=None, alias="borderStyle")
    border_color: str | None = Field(default=None, alias="borderColor")
    shadow: ButtonShadowSpec | None = None


# =============================================================================
# Styleguide
# =============================================================================


class StyleguideSpec(_StyleguideModel):
    """
    Complete styleguide payload.

    Catalogs are independent namespaces: a shadow id and a border id may be
    equal without conflict.
    """

    colors: list[ColorSpec] = Field(default_factory=list)
    paint_themes: list[PaintThemeSpec] = Field(default_factory=list, alias="paintThemes")
    typography: TypographySpec | None = None
    shadows: list[ShadowSpec] = Field(default_factory=list)
    borders: list[BorderSpec] = Field(default_factory=list)
    corners: list[CornerSpec] = Field(default_factory=list)
    buttons: list[ButtonStyleSpec] = Field(default_factory=list)


# =============================================================================
# Brand assets
# =============================================================================

BRAND_ASSET_TYPES: tuple[str, ...] = (
    "logo",
    "logo_light",
    "logo_dark",
    "background",
    "pattern",
    "icon",
    "product_image",
)


class BrandAssetsSpec(_StyleguideModel):
    """
    Brand asset URLs keyed by asset type.

    The active asset for a type is the first URL in its list.
    """

    assets: dict[str, list[str]] = Field(default_factory=dict)
