"""Tests for the typographic scale."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from funnelwind.specs.styleguide import TypographySpec
from funnelwind.styleguide.typescale import (
    ELEMENT_TYPES,
    build_typescale,
    compute_scale,
    css_number,
    round_half_up,
)


def _px(value: str) -> float:
    return float(value.removesuffix("px"))


class TestComputeScale:
    def test_default_steps(self) -> None:
        scale = compute_scale()
        assert scale["base"] == 16
        assert scale["p1"] == 20
        assert scale["p2"] == 25
        assert scale["p4"] == 39
        assert scale["n1"] == 13
        assert scale["p8"] == 95

    def test_base_step_is_unrounded(self) -> None:
        assert compute_scale(15.5, 1.2)["base"] == 15.5

    def test_largest_allowed_typography(self) -> None:
        scale = compute_scale(1000, 10)
        assert scale["p8"] == 1000 * 10**8
        assert scale["n3"] == 1

    def test_twelve_steps(self) -> None:
        assert list(compute_scale()) == [
            "n3", "n2", "n1", "base", "p1", "p2", "p3", "p4", "p5", "p6", "p7", "p8",
        ]


class TestRounding:
    def test_half_rounds_up(self) -> None:
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(-2.5) == -2
        assert round_half_up(2.49) == 2

    def test_css_number(self) -> None:
        assert css_number(18.0) == "18"
        assert css_number(1.25) == "1.25"
        assert css_number(7) == "7"


class TestBuildTypescale:
    """Headline / subheadline / paragraph size tables."""

    def test_documented_defaults(self) -> None:
        tables = build_typescale(TypographySpec(baseSize=16, scaleRatio=1.25))
        assert tables["headline"]["xl"] == "39px"
        assert tables["paragraph"]["m"] == "16px"
        assert tables["subheadline"]["m"] == "20px"

    def test_defaults_without_typography(self) -> None:
        assert build_typescale() == build_typescale(TypographySpec())

    def test_alias_presets_share_steps(self) -> None:
        headline = build_typescale()["headline"]
        assert headline["l"] == headline["lg"]
        assert headline["m"] == headline["md"]
        assert headline["s"] == headline["sm"]

    def test_float_base_size_formats_cleanly(self) -> None:
        tables = build_typescale(TypographySpec(baseSize=18.0))
        assert tables["headline"]["xs"] == "18px"

    def test_smallest_paragraph_step(self) -> None:
        assert build_typescale()["paragraph"]["xs"] == "10px"

    @given(
        base=st.integers(min_value=8, max_value=32),
        ratio=st.floats(min_value=1.05, max_value=1.6, allow_nan=False),
    )
    @settings(max_examples=100)
    def test_roles_stay_ordered(self, base: int, ratio: float) -> None:
        """Invariant: headline >= subheadline >= paragraph at every preset."""
        tables = build_typescale(TypographySpec(baseSize=base, scaleRatio=ratio))
        assert set(tables) == set(ELEMENT_TYPES)
        for preset in tables["headline"]:
            headline = _px(tables["headline"][preset])
            subheadline = _px(tables["subheadline"][preset])
            paragraph = _px(tables["paragraph"][preset])
            assert headline >= subheadline >= paragraph
