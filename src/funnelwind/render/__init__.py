"""
Tag rendering: the per-tag renderers, the structural pass and the paint cascade.
"""

from funnelwind.render.cascade import run_cascade
from funnelwind.render.context import RenderContext
from funnelwind.render.registry import RENDER_ORDER, RENDERERS, TagRenderer, get_renderer
from funnelwind.render.scheduler import StructureReport, render_structure
from funnelwind.render.styles import ResolvedNode, ResolvedStyle

__all__ = [
    "RENDERERS",
    "RENDER_ORDER",
    "RenderContext",
    "ResolvedNode",
    "ResolvedStyle",
    "StructureReport",
    "TagRenderer",
    "get_renderer",
    "render_structure",
    "run_cascade",
]
