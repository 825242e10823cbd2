"""
CSS generator for FunnelWind styleguides.

Renderers only emit references (data-paint-colors, data-style-guide-*); the
rules behind those references are generated here, once per styleguide.
"""

from __future__ import annotations

from funnelwind.specs.styleguide import (
    ButtonStyleSpec,
    StyleguideSpec,
    TypographySpec,
)
from funnelwind.styleguide.store import StyleguideStore
from funnelwind.styleguide.typescale import css_number

DEFAULT_BUTTON_BG = "#3b82f6"
DEFAULT_BUTTON_COLOR = "#ffffff"
DEFAULT_SHADOW_COLOR = "rgba(0,0,0,0.1)"

# Background style classes, matching the page builder's background options
BG_STYLE_CSS = "\n".join(
    [
        "/* Background style classes */",
        ".bgCover { background-size: cover !important; background-repeat: no-repeat !important; }",
        ".bgCoverCenter { background-size: cover !important; background-position: center center !important;"
        " background-repeat: no-repeat !important; }",
        ".bgCoverV2 { background-attachment: fixed !important; background-size: cover !important;"
        " background-position: center center !important; background-repeat: no-repeat !important; }",
        ".bgW100 { background-size: 100% auto !important; background-repeat: no-repeat !important; }",
        ".bgW100H100 { background-size: 100% 100% !important; background-repeat: no-repeat !important; }",
        ".bgNoRepeat { background-repeat: no-repeat !important; }",
        ".bgRepeat { background-repeat: repeat !important; }",
        ".bgRepeatX { background-repeat: repeat-x !important; }",
        ".bgRepeatY { background-repeat: repeat-y !important; }",
    ]
)


def generate_styleguide_css(styleguide: StyleguideSpec | StyleguideStore | None) -> str:
    """
    Generate the stylesheet behind a styleguide's references.

    Args:
        styleguide: Parsed styleguide, or a store wrapping one

    Returns:
        CSS string; empty when no styleguide is loaded
    """
    spec = styleguide.spec if isinstance(styleguide, StyleguideStore) else styleguide
    if spec is None:
        return ""
    store = styleguide if isinstance(styleguide, StyleguideStore) else StyleguideStore(spec)

    lines: list[str] = ["/* FunnelWind Styleguide CSS */", ""]

    if spec.colors:
        lines.append(":root {")
        for color in spec.colors:
            lines.append(f"  --sg-color-{color.id}: {color.hex};")
        lines.append("}")
        lines.append("")

    if spec.typography is not None:
        lines.extend(_typography_lines(spec.typography))

    if spec.paint_themes:
        lines.extend(_paint_lines(spec, store))

    if spec.shadows:
        for shadow in spec.shadows:
            value = (
                f"{css_number(shadow.x)}px {css_number(shadow.y)}px "
                f"{css_number(shadow.blur)}px {css_number(shadow.spread)}px {shadow.color}"
            )
            lines.extend(_rule(f'[data-style-guide-shadow="{shadow.id}"]', f"box-shadow: {value}"))
        lines.append("")

    if spec.borders:
        for border in spec.borders:
            value = f"{css_number(border.width)}px {border.style} {border.color}"
            lines.extend(_rule(f'[data-style-guide-border="{border.id}"]', f"border: {value}"))
        lines.append("")

    if spec.corners:
        for corner in spec.corners:
            lines.extend(
                _rule(
                    f'[data-style-guide-corner="{corner.id}"]',
                    f"border-radius: {css_number(corner.radius)}px",
                )
            )
        lines.append("")

    for button in spec.buttons:
        lines.extend(_button_lines(button))

    return "\n".join(lines) + "\n"


def _rule(selector: str, *declarations: str) -> list[str]:
    """A rule whose declarations all carry !important."""
    return [f"{selector} {{", *(f"  {decl} !important;" for decl in declarations), "}"]


def _typography_lines(typography: TypographySpec) -> list[str]:
    lines = ["/* Typography styles */"]
    if typography.headline_font:
        lines.append('[data-type="Headline/V1"]:not([data-font]) h1,')
        lines.extend(
            _rule(
                '[data-type="Headline/V1"]:not([data-font]) h2',
                f'font-family: "{typography.headline_font}", sans-serif',
            )
        )
    if typography.subheadline_font:
        lines.append('[data-type="SubHeadline/V1"]:not([data-font]) h2,')
        lines.extend(
            _rule(
                '[data-type="SubHeadline/V1"]:not([data-font]) h3',
                f'font-family: "{typography.subheadline_font}", sans-serif',
            )
        )
    if typography.content_font:
        family = f'font-family: "{typography.content_font}", sans-serif'
        lines.extend(_rule('[data-type="Paragraph/V1"]:not([data-font]) p', family))
        # Bullet lists use the content font
        lines.extend(_rule('[data-type="BulletList/V1"] li', family))
    lines.append("")
    return lines


def _paint_lines(spec: StyleguideSpec, store: StyleguideStore) -> list[str]:
    lines: list[str] = []
    for theme in spec.paint_themes:
        lines.append(f'[data-paint-colors="{theme.id}"] {{')
        lines.append(f"  background-color: {store.color_hex(theme.background_color_id)} !important;")
        lines.append(f"  --sg-headline-color: {store.color_hex(theme.headline_color_id)};")
        lines.append(f"  --sg-subheadline-color: {store.color_hex(theme.subheadline_color_id)};")
        lines.append(f"  --sg-content-color: {store.color_hex(theme.content_color_id)};")
        lines.append(f"  --sg-link-color: {store.color_hex(theme.link_color_id)};")
        lines.append(f"  --sg-icon-color: {store.color_hex(theme.icon_color_id)};")
        lines.append("}")
        lines.append("")

    # Text colours follow the closest paint ancestor through the variables
    lines.append("/* Paint theme text colors */")
    lines.append('[data-paint-colors] [data-type="Headline/V1"] h1,')
    lines.extend(
        _rule('[data-paint-colors] [data-type="Headline/V1"] h2', "color: var(--sg-headline-color)")
    )
    lines.append('[data-paint-colors] [data-type="SubHeadline/V1"] h2,')
    lines.extend(
        _rule('[data-paint-colors] [data-type="SubHeadline/V1"] h3', "color: var(--sg-subheadline-color)")
    )
    lines.extend(
        _rule('[data-paint-colors] [data-type="Paragraph/V1"] p', "color: var(--sg-content-color)")
    )
    lines.extend(
        _rule('[data-paint-colors] a:not([data-type="Button/V1"] a)', "color: var(--sg-link-color)")
    )
    lines.append('[data-paint-colors] [data-type="Icon/V1"] i,')
    lines.extend(
        _rule('[data-paint-colors] [data-type="BulletList/V1"] .fa_icon', "color: var(--sg-icon-color)")
    )
    lines.append('[data-paint-colors] [data-type="BulletList/V1"] li,')
    lines.extend(
        _rule('[data-paint-colors] [data-type="BulletList/V1"] li span', "color: var(--sg-content-color)")
    )
    lines.append("")
    return lines


def _button_lines(button: ButtonStyleSpec) -> list[str]:
    selector = f'[data-style-guide-button="{button.id}"]'
    regular_bg = (button.regular.bg if button.regular else None) or DEFAULT_BUTTON_BG
    regular_color = (button.regular.color if button.regular else None) or DEFAULT_BUTTON_COLOR

    declarations = [f"background-color: {regular_bg}"]
    if button.border_radius:
        declarations.append(f"border-radius: {css_number(button.border_radius)}px")
    if button.border_width and button.border_width > 0:
        declarations.append(
            f"border: {css_number(button.border_width)}px {button.border_style or 'solid'} "
            f"{button.border_color or 'transparent'}"
        )
    shadow = button.shadow
    if shadow is not None and shadow.enabled:
        declarations.append(
            f"box-shadow: {css_number(shadow.x or 0)}px {css_number(shadow.y or 0)}px "
            f"{css_number(shadow.blur or 0)}px {css_number(shadow.spread or 0)}px "
            f"{shadow.color or DEFAULT_SHADOW_COLOR}"
        )

    lines = _rule(f"{selector} a", *declarations)
    lines.extend(_rule(f"{selector} a span", f"color: {regular_color}"))
    if button.hover is not None:
        lines.extend(
            _rule(f"{selector} a:hover", f"background-color: {button.hover.bg or regular_bg}")
        )
        lines.extend(
            _rule(f"{selector} a:hover span", f"color: {button.hover.color or regular_color}")
        )
    if button.active is not None:
        lines.extend(
            _rule(f"{selector} a:active", f"background-color: {button.active.bg or regular_bg}")
        )
    return lines
