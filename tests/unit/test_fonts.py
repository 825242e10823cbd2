"""Tests for Google Fonts collection."""

from __future__ import annotations

from funnelwind.fonts import (
    clean_font_name,
    collect_fonts,
    google_fonts_url,
    is_system_font,
    request_fonts,
)
from funnelwind.markup import parse_markup
from funnelwind.render.context import RenderContext
from funnelwind.specs.styleguide import TypographySpec

MARKUP = (
    "<cf-paragraph style=\"font-family: 'Open Sans', serif\">x</cf-paragraph>"
    '<cf-headline font="Lato, sans-serif">y</cf-headline>'
    '<cf-headline font="Arial">z</cf-headline>'
)


class TestCollectFonts:
    def test_first_seen_order(self) -> None:
        typography = TypographySpec(headlineFont="Poppins", contentFont="Lato")
        fonts = collect_fonts(parse_markup(MARKUP), typography)
        assert fonts == ["Lato", "Poppins", "Open Sans"]

    def test_without_typography(self) -> None:
        assert collect_fonts(parse_markup(MARKUP)) == ["Lato", "Open Sans"]

    def test_inline_style_only_on_text_tags(self) -> None:
        document = parse_markup('<div style="font-family: Roboto">x</div>')
        assert collect_fonts(document) == []

    def test_system_fonts(self) -> None:
        assert is_system_font("Helvetica")
        assert is_system_font("sans-serif")
        assert not is_system_font("Poppins")

    def test_clean_font_name(self) -> None:
        assert clean_font_name("'Open Sans', sans-serif") == "Open Sans"
        assert clean_font_name('"Lato"') == "Lato"


class TestGoogleFontsUrl:
    def test_no_fonts(self) -> None:
        assert google_fonts_url([]) is None

    def test_families_joined(self) -> None:
        assert google_fonts_url(["Open Sans", "Lato"]) == (
            "https://fonts.googleapis.com/css2?family=Open+Sans&family=Lato"
            ":wght@300;400;500;600;700;800;900&display=swap"
        )

    def test_weight_axis_on_last_family_only(self) -> None:
        url = google_fonts_url(["Open Sans", "Lato", "Poppins"])
        assert url is not None
        assert url.count(":wght@") == 1
        assert "family=Poppins:wght@" in url
        assert "family=Open+Sans&" in url


class TestRequestFonts:
    """Fonts are requested once per session."""

    def test_session_memo(self) -> None:
        ctx = RenderContext()
        document = parse_markup('<cf-headline font="Lato">A</cf-headline>')

        url = request_fonts(document, ctx)
        assert url is not None and "family=Lato" in url
        assert ctx.loaded_fonts == {"Lato"}
        assert request_fonts(document, ctx) is None

    def test_only_new_fonts(self) -> None:
        ctx = RenderContext()
        request_fonts(parse_markup('<cf-headline font="Lato">A</cf-headline>'), ctx)
        url = request_fonts(
            parse_markup('<cf-headline font="Lato">A</cf-headline><cf-headline font="Inter">B</cf-headline>'),
            ctx,
        )
        assert url is not None
        assert "Lato" not in url
        assert "family=Inter" in url

    def test_styleguide_fonts(self, ctx: RenderContext) -> None:
        url = request_fonts(parse_markup("<p>plain</p>"), ctx)
        assert url is not None
        assert "family=Poppins&family=Inter:" in url

    def test_reset_clears_memo(self) -> None:
        ctx = RenderContext()
        document = parse_markup('<cf-headline font="Lato">A</cf-headline>')
        request_fonts(document, ctx)
        ctx.reset()
        assert request_fonts(document, ctx) is not None
