"""
FunnelWind - cf-* tag attribute resolution and style cascade.

Renders Tailwind-like ``cf-*`` markup into ClickFunnels-compatible HTML:
pass 1 resolves every tag leaf-first into styled output nodes, pass 2
cascades styleguide paint-theme colours down the rendered tree.
"""

__version__ = "0.1.0"

from funnelwind.errors import (  # noqa: E402
    ConfigError,
    ErrorContext,
    FunnelWindError,
    MarkupError,
    StyleguideError,
)
from funnelwind.pipeline import (  # noqa: E402
    RenderOptions,
    RenderResult,
    create_context,
    render_document,
    render_markup,
)

__all__ = [
    "__version__",
    "ConfigError",
    "ErrorContext",
    "FunnelWindError",
    "MarkupError",
    "RenderOptions",
    "RenderResult",
    "StyleguideError",
    "create_context",
    "render_document",
    "render_markup",
]
