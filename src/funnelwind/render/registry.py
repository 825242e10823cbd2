"""
Tag renderer registry.

Maps each cf-* tag to its renderer and fixes the leaf-first order in which
tag kinds are rendered: every content kind before any container kind, and
containers from the innermost (flex) to the outermost (page).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from funnelwind.markup import Child, TagInstance
from funnelwind.render.components.button import ButtonRenderer
from funnelwind.render.components.forms import (
    CheckboxRenderer,
    InputRenderer,
    SelectRenderer,
    TextareaRenderer,
)
from funnelwind.render.components.layout import (
    ColInnerRenderer,
    ColRenderer,
    FlexRenderer,
    PageRenderer,
    PopupRenderer,
    RowRenderer,
    SectionRenderer,
)
from funnelwind.render.components.lists import (
    BulletListRenderer,
    CountdownRenderer,
    ProgressBarRenderer,
)
from funnelwind.render.components.media import (
    DividerRenderer,
    IconRenderer,
    ImageRenderer,
    VideoPopupRenderer,
    VideoRenderer,
)
from funnelwind.render.components.placeholders import (
    CheckoutPlaceholderRenderer,
    ConfirmationPlaceholderRenderer,
    OrderSummaryPlaceholderRenderer,
)
from funnelwind.render.components.text import (
    HeadlineRenderer,
    ParagraphRenderer,
    SubheadlineRenderer,
)
from funnelwind.render.context import RenderContext
from funnelwind.render.styles import ResolvedNode


@runtime_checkable
class TagRenderer(Protocol):
    """Resolves one tag instance into its output node."""

    tag: str
    data_type: str

    def render(self, instance: TagInstance, ctx: RenderContext, content: list[Child]) -> ResolvedNode:
        """Build the output node; ``content`` is the instance's captured children."""
        ...


# =============================================================================
# Registry
# =============================================================================

_CONTENT_RENDERERS: tuple[TagRenderer, ...] = (
    IconRenderer(),
    DividerRenderer(),
    ImageRenderer(),
    VideoRenderer(),
    HeadlineRenderer(),
    SubheadlineRenderer(),
    ParagraphRenderer(),
    ButtonRenderer(),
    InputRenderer(),
    TextareaRenderer(),
    SelectRenderer(),
    CheckboxRenderer(),
    BulletListRenderer(),
    ProgressBarRenderer(),
    VideoPopupRenderer(),
    CountdownRenderer(),
    CheckoutPlaceholderRenderer(),
    OrderSummaryPlaceholderRenderer(),
    ConfirmationPlaceholderRenderer(),
)

_CONTAINER_RENDERERS: tuple[TagRenderer, ...] = (
    FlexRenderer(),
    ColInnerRenderer(),
    ColRenderer(),
    RowRenderer(),
    SectionRenderer(),
    PopupRenderer(),
    PageRenderer(),
)

RENDERERS: dict[str, TagRenderer] = {
    renderer.tag: renderer for renderer in (*_CONTENT_RENDERERS, *_CONTAINER_RENDERERS)
}

RENDER_ORDER: tuple[str, ...] = tuple(
    renderer.tag for renderer in (*_CONTENT_RENDERERS, *_CONTAINER_RENDERERS)
)

CONTAINER_TAGS = frozenset(renderer.tag for renderer in _CONTAINER_RENDERERS)


def get_renderer(tag: str) -> TagRenderer | None:
    return RENDERERS.get(tag)


def render_rank(tag: str) -> int:
    """Position of a tag kind in the render order (unknown kinds sort last)."""
    try:
        return RENDER_ORDER.index(tag)
    except ValueError:
        return len(RENDER_ORDER)
