"""
Typographic scale derived from a base size and a geometric ratio.

Eleven steps n3..p8 sit around the base size. Headlines take the largest
step for each size preset, subheadlines one step down and paragraphs two
steps down, so the three roles stay visually ordered at every preset.
"""

from __future__ import annotations

import math

from funnelwind.specs.styleguide import Number, TypographySpec

# Step names and their offsets relative to the base size
_SCALE_STEPS: list[tuple[str, int]] = [
    ("n3", -3),
    ("n2", -2),
    ("n1", -1),
    ("base", 0),
    ("p1", 1),
    ("p2", 2),
    ("p3", 3),
    ("p4", 4),
    ("p5", 5),
    ("p6", 6),
    ("p7", 7),
    ("p8", 8),
]

# Size preset -> step used by headlines
_HEADLINE_STEPS: list[tuple[str, str]] = [
    ("5xl", "p8"),
    ("4xl", "p7"),
    ("3xl", "p6"),
    ("2xl", "p5"),
    ("xl", "p4"),
    ("l", "p3"),
    ("lg", "p3"),
    ("m", "p2"),
    ("md", "p2"),
    ("s", "p1"),
    ("sm", "p1"),
    ("xs", "base"),
]

ELEMENT_TYPES: tuple[str, ...] = ("headline", "subheadline", "paragraph")

# Steps each element type sits below the headline scale
_ELEMENT_OFFSETS: dict[str, int] = {
    "headline": 0,
    "subheadline": 1,
    "paragraph": 2,
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 rounding toward +infinity."""
    return math.floor(value + 0.5)


def css_number(value: Number) -> str:
    """Format a number the way CSS expects (no trailing .0 on integers)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def compute_scale(base_size: Number = 16, scale_ratio: Number = 1.25) -> dict[str, Number]:
    """Compute the eleven scale steps.

    Args:
        base_size: Base font size in px.
        scale_ratio: Ratio between adjacent steps.

    Returns:
        Dict of step name to size in px. The base step is the base size
        unchanged; every other step is rounded half up.
    """
    scale: dict[str, Number] = {}
    for name, offset in _SCALE_STEPS:
        if offset == 0:
            scale[name] = base_size
        else:
            scale[name] = round_half_up(base_size * scale_ratio**offset)
    return scale


def build_typescale(typography: TypographySpec | None = None) -> dict[str, dict[str, str]]:
    """Build the headline, subheadline and paragraph size tables.

    Args:
        typography: Styleguide typography; defaults apply when omitted.

    Returns:
        Dict of element type to a mapping of size preset -> "<n>px".
    """
    typography = typography or TypographySpec()
    scale = compute_scale(typography.base_size, typography.scale_ratio)
    step_names = [name for name, _ in _SCALE_STEPS]

    tables: dict[str, dict[str, str]] = {}
    for element_type, offset in _ELEMENT_OFFSETS.items():
        table: dict[str, str] = {}
        for preset, headline_step in _HEADLINE_STEPS:
            step = step_names[step_names.index(headline_step) - offset]
            table[preset] = f"{css_number(scale[step])}px"
        tables[element_type] = table
    return tables
