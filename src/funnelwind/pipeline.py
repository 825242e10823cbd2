"""
Render pipeline.

Ties the pieces of a render session together: parse the document, load the
styleguide and brand assets into a fresh RenderContext, collect fonts, run
the structural pass and the paint cascade, then build the stylesheet and
serialize. ``render_document`` wraps a result in a standalone HTML page via
the Jinja2 ``document.html`` template.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from funnelwind.fonts import request_fonts
from funnelwind.logging import log_with_context
from funnelwind.markup import Document, parse_markup
from funnelwind.render.cascade import run_cascade
from funnelwind.render.context import RenderContext
from funnelwind.render.scheduler import StructureReport, render_structure
from funnelwind.specs.styleguide import BrandAssetsSpec, StyleguideSpec
from funnelwind.styleguide.css_generator import BG_STYLE_CSS, generate_styleguide_css
from funnelwind.styleguide.loader import parse_brand_assets, parse_styleguide
from funnelwind.styleguide.store import BrandAssetsStore, StyleguideStore

logger = logging.getLogger(__name__)

# Template directory
TEMPLATES_DIR = Path(__file__).parent / "templates"

STYLEGUIDE_SCRIPT_ID = "cf-styleguide-data"
BRAND_ASSETS_SCRIPT_ID = "cf-brand-assets"

StyleguideInput = StyleguideSpec | str | Mapping[str, Any] | None
BrandAssetsInput = BrandAssetsSpec | str | Mapping[str, Any] | None


def create_jinja_env() -> Environment:
    """Create and configure the Jinja2 environment."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


# Module-level singleton
_env: Environment | None = None


def get_jinja_env() -> Environment:
    """Get the shared Jinja2 environment (lazy singleton)."""
    global _env
    if _env is None:
        _env = create_jinja_env()
    return _env


@dataclass
class RenderOptions:
    """Per-call switches for ``render_markup``."""

    inject_css: bool = True
    load_fonts: bool = True
    strict: bool = False


@dataclass
class RenderResult:
    """Output of one render session."""

    document: Document
    context: RenderContext
    report: StructureReport
    stylesheet: str = ""
    fonts_url: str | None = None
    patched: int = 0
    unknown_tags: list[str] = field(default_factory=list)

    @property
    def html(self) -> str:
        """The rendered markup fragment."""
        return self.document.to_html()


def embedded_payload(document: Document, script_id: str) -> str | None:
    """Raw text of an embedded ``<script id=...>`` data block, if present."""
    element = document.find_by_id(script_id)
    if element is None or element.tag != "script":
        return None
    return "".join(child for child in element.children if isinstance(child, str))


def _styleguide_spec(payload: StyleguideInput, strict: bool) -> StyleguideSpec | None:
    if payload is None or isinstance(payload, StyleguideSpec):
        return payload
    return parse_styleguide(payload, strict=strict)


def _brand_assets_spec(payload: BrandAssetsInput, strict: bool) -> BrandAssetsSpec | None:
    if payload is None or isinstance(payload, BrandAssetsSpec):
        return payload
    return parse_brand_assets(payload, strict=strict)


def create_context(
    document: Document,
    styleguide: StyleguideInput = None,
    brand_assets: BrandAssetsInput = None,
    *,
    strict: bool = False,
) -> RenderContext:
    """
    Build the session context for a document.

    Explicit styleguide / brand-asset data wins; otherwise the document's
    embedded script blocks are used when present.
    """
    if styleguide is None:
        styleguide = embedded_payload(document, STYLEGUIDE_SCRIPT_ID)
        if styleguide is not None:
            logger.debug("Using embedded styleguide data")
    if brand_assets is None:
        brand_assets = embedded_payload(document, BRAND_ASSETS_SCRIPT_ID)
        if brand_assets is not None:
            logger.debug("Using embedded brand assets")

    return RenderContext(
        styleguide=StyleguideStore(_styleguide_spec(styleguide, strict)),
        brand_assets=BrandAssetsStore(_brand_assets_spec(brand_assets, strict)),
    )


def build_stylesheet(ctx: RenderContext) -> str:
    """Background classes plus the styleguide rules for this session."""
    sheets = [BG_STYLE_CSS + "\n"]
    styleguide_css = generate_styleguide_css(ctx.styleguide)
    if styleguide_css:
        sheets.append(styleguide_css)
    return "\n".join(sheets)


def render_markup(
    markup: str,
    styleguide: StyleguideInput = None,
    brand_assets: BrandAssetsInput = None,
    options: RenderOptions | None = None,
) -> RenderResult:
    """
    Render every cf-* tag in a markup string.

    Args:
        markup: Input document or fragment
        styleguide: Styleguide as a spec, JSON text or mapping
        brand_assets: Brand assets as a spec, JSON text or mapping
        options: Render switches

    Returns:
        RenderResult holding the rendered tree, stylesheet and font URL
    """
    options = options or RenderOptions()
    document = parse_markup(markup)
    ctx = create_context(document, styleguide, brand_assets, strict=options.strict)

    fonts_url = request_fonts(document, ctx) if options.load_fonts else None
    report = render_structure(document, ctx)
    patched = run_cascade(document.children, ctx)
    stylesheet = build_stylesheet(ctx) if options.inject_css else ""

    log_with_context(
        logger,
        logging.INFO,
        f"Rendered {report.total} tag(s), cascade patched {patched}",
        rendered=report.rendered,
        unknown=sorted(ctx.unknown_tags),
    )
    return RenderResult(
        document=document,
        context=ctx,
        report=report,
        stylesheet=stylesheet,
        fonts_url=fonts_url,
        patched=patched,
        unknown_tags=sorted(ctx.unknown_tags),
    )


def render_document(result: RenderResult, title: str = "FunnelWind Page", lang: str = "en") -> str:
    """Wrap a render result in a standalone HTML page."""
    template = get_jinja_env().get_template("document.html")
    return template.render(
        title=title,
        lang=lang,
        fonts_url=result.fonts_url,
        stylesheet=Markup(result.stylesheet),
        body=Markup(result.html),
    )
