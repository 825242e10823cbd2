"""Shared fixtures for FunnelWind unit tests."""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from typing import Any

import pytest

from funnelwind.markup import Document, parse_markup
from funnelwind.render.cascade import run_cascade
from funnelwind.render.context import RenderContext
from funnelwind.render.scheduler import render_structure
from funnelwind.render.styles import ResolvedNode, iter_resolved
from funnelwind.specs.styleguide import StyleguideSpec
from funnelwind.styleguide.loader import parse_brand_assets, parse_styleguide
from funnelwind.styleguide.store import BrandAssetsStore, StyleguideStore

STYLEGUIDE_DATA: dict[str, Any] = {
    "colors": [
        {"id": "brand", "hex": "#1c65e1"},
        {"id": "dark", "hex": "#111111"},
        {"id": "light", "hex": "#ffffff"},
        {"id": "accent", "hex": "#ff6600"},
    ],
    "paintThemes": [
        {
            "id": "dark-theme",
            "backgroundColorId": "dark",
            "headlineColorId": "light",
            "subheadlineColorId": "light",
            "contentColorId": "light",
            "iconColorId": "accent",
            "linkColorId": "accent",
        },
        {
            "id": "light-theme",
            "backgroundColorId": "light",
            "headlineColorId": "dark",
            "subheadlineColorId": "dark",
            "contentColorId": "dark",
            "iconColorId": "brand",
        },
        {
            "id": "broken-theme",
            "backgroundColorId": "missing",
            "headlineColorId": "missing",
        },
    ],
    "typography": {
        "baseSize": 16,
        "scaleRatio": 1.25,
        "headlineFont": "Poppins",
        "contentFont": "Inter",
    },
    "shadows": [{"id": "style1", "x": 0, "y": 4, "blur": 12, "spread": 0, "color": "rgba(0,0,0,0.2)"}],
    "borders": [{"id": "style1", "width": 2, "style": "dashed", "color": "#cccccc"}],
    "corners": [{"id": "style1", "radius": 12}],
    "buttons": [
        {
            "id": "style1",
            "regular": {"bg": "#1c65e1", "color": "#ffffff"},
            "hover": {"bg": "#1550b8"},
            "borderRadius": 8,
        }
    ],
}

BRAND_ASSETS_DATA: dict[str, Any] = {
    "logo": ["https://cdn.example.com/logo.png", "https://cdn.example.com/logo-old.png"],
    "background": ["https://cdn.example.com/bg.jpg"],
    "icon": [],
}


@pytest.fixture(autouse=True)
def _reset_funnelwind_logger():
    """Undo setup_logging between tests."""
    yield
    logger = logging.getLogger("funnelwind")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def styleguide_data() -> dict[str, Any]:
    return copy.deepcopy(STYLEGUIDE_DATA)


@pytest.fixture
def styleguide_spec(styleguide_data: dict[str, Any]) -> StyleguideSpec:
    spec = parse_styleguide(styleguide_data)
    assert spec is not None
    return spec


@pytest.fixture
def ctx(styleguide_spec: StyleguideSpec) -> RenderContext:
    """Render context with the test styleguide and brand assets loaded."""
    return RenderContext(
        styleguide=StyleguideStore(styleguide_spec),
        brand_assets=BrandAssetsStore(parse_brand_assets(copy.deepcopy(BRAND_ASSETS_DATA))),
    )


@pytest.fixture
def bare_ctx() -> RenderContext:
    """Render context with nothing loaded (preset-only mode)."""
    return RenderContext()


@pytest.fixture
def render_tree() -> Callable[..., Document]:
    """Parse markup and run both passes over it."""

    def _render(markup: str, ctx: RenderContext | None = None, cascade: bool = True) -> Document:
        ctx = ctx if ctx is not None else RenderContext()
        document = parse_markup(markup)
        render_structure(document, ctx)
        if cascade:
            run_cascade(document.children, ctx)
        return document

    return _render


@pytest.fixture
def find_nodes() -> Callable[[Document, str], list[ResolvedNode]]:
    """Resolved nodes of one data-type, in document order."""

    def _find(document: Document, data_type: str) -> list[ResolvedNode]:
        return [node for node in iter_resolved(document.children) if node.data_type == data_type]

    return _find
