"""Tests for styleguide stylesheet generation."""

from __future__ import annotations

from funnelwind.specs.styleguide import StyleguideSpec
from funnelwind.styleguide.css_generator import BG_STYLE_CSS, generate_styleguide_css
from funnelwind.styleguide.loader import parse_styleguide
from funnelwind.styleguide.store import StyleguideStore


def _block(css: str, selector: str) -> str:
    """The rule body following a selector line."""
    start = css.index(f"{selector} {{")
    return css[start : css.index("}", start) + 1]


class TestGenerateStyleguideCss:
    def test_no_styleguide(self) -> None:
        assert generate_styleguide_css(None) == ""
        assert generate_styleguide_css(StyleguideStore()) == ""

    def test_store_and_spec_agree(self, styleguide_spec: StyleguideSpec) -> None:
        assert generate_styleguide_css(StyleguideStore(styleguide_spec)) == generate_styleguide_css(
            styleguide_spec
        )

    def test_palette_variables(self, styleguide_spec: StyleguideSpec) -> None:
        css = generate_styleguide_css(styleguide_spec)
        assert css.startswith("/* FunnelWind Styleguide CSS */")
        root = _block(css, ":root")
        assert "  --sg-color-brand: #1c65e1;" in root
        assert "  --sg-color-accent: #ff6600;" in root

    def test_paint_themes(self, styleguide_spec: StyleguideSpec) -> None:
        css = generate_styleguide_css(styleguide_spec)
        dark = _block(css, '[data-paint-colors="dark-theme"]')
        assert "background-color: #111111 !important;" in dark
        assert "--sg-headline-color: #ffffff;" in dark
        assert "--sg-link-color: #ff6600;" in dark
        assert "--sg-icon-color: #ff6600;" in dark

    def test_paint_theme_missing_ids_are_black(self, styleguide_spec: StyleguideSpec) -> None:
        css = generate_styleguide_css(styleguide_spec)
        broken = _block(css, '[data-paint-colors="broken-theme"]')
        assert "background-color: #000000 !important;" in broken
        assert "--sg-content-color: #000000;" in broken

    def test_paint_text_rules(self, styleguide_spec: StyleguideSpec) -> None:
        css = generate_styleguide_css(styleguide_spec)
        assert '[data-paint-colors] [data-type="Headline/V1"] h1,' in css
        assert "color: var(--sg-headline-color) !important;" in css
        assert "color: var(--sg-icon-color) !important;" in css

    def test_catalog_rules(self, styleguide_spec: StyleguideSpec) -> None:
        css = generate_styleguide_css(styleguide_spec)
        shadow = _block(css, '[data-style-guide-shadow="style1"]')
        assert "box-shadow: 0px 4px 12px 0px rgba(0,0,0,0.2) !important;" in shadow
        border = _block(css, '[data-style-guide-border="style1"]')
        assert "border: 2px dashed #cccccc !important;" in border
        corner = _block(css, '[data-style-guide-corner="style1"]')
        assert "border-radius: 12px !important;" in corner

    def test_button_rules(self, styleguide_spec: StyleguideSpec) -> None:
        css = generate_styleguide_css(styleguide_spec)
        anchor = _block(css, '[data-style-guide-button="style1"] a')
        assert "background-color: #1c65e1 !important;" in anchor
        assert "border-radius: 8px !important;" in anchor
        assert "box-shadow" not in anchor
        label = _block(css, '[data-style-guide-button="style1"] a span')
        assert "color: #ffffff !important;" in label
        hover = _block(css, '[data-style-guide-button="style1"] a:hover')
        assert "background-color: #1550b8 !important;" in hover
        hover_label = _block(css, '[data-style-guide-button="style1"] a:hover span')
        assert "color: #ffffff !important;" in hover_label
        assert "a:active" not in css

    def test_button_defaults(self) -> None:
        spec = parse_styleguide({"buttons": [{"id": "plain"}]})
        assert spec is not None
        anchor = _block(generate_styleguide_css(spec), '[data-style-guide-button="plain"] a')
        assert "background-color: #3b82f6 !important;" in anchor

    def test_typography_rules(self, styleguide_spec: StyleguideSpec) -> None:
        css = generate_styleguide_css(styleguide_spec)
        assert '[data-type="Headline/V1"]:not([data-font]) h1,' in css
        assert 'font-family: "Poppins", sans-serif !important;' in css
        assert 'font-family: "Inter", sans-serif !important;' in css
        assert "SubHeadline/V1\"]:not([data-font])" not in css

    def test_sections_omitted_when_empty(self) -> None:
        spec = parse_styleguide({"colors": [{"id": "a", "hex": "#aaaaaa"}]})
        assert spec is not None
        css = generate_styleguide_css(spec)
        assert "--sg-color-a: #aaaaaa;" in css
        assert "data-paint-colors" not in css
        assert "data-style-guide" not in css


class TestBackgroundStyleCss:
    def test_one_rule_per_class(self) -> None:
        lines = BG_STYLE_CSS.splitlines()
        assert lines[0] == "/* Background style classes */"
        assert len(lines) == 10
        assert all(line.startswith(".bg") for line in lines[1:])

    def test_parallax_is_fixed(self) -> None:
        (line,) = [line for line in BG_STYLE_CSS.splitlines() if line.startswith(".bgCoverV2 ")]
        assert "background-attachment: fixed !important;" in line
