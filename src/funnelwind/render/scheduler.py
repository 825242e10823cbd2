"""
Pass 1: structural rendering.

Every cf-* instance is collected from the parsed tree up front, then
rendered kind by kind in RENDER_ORDER, document order within a kind. A
container captures its children by reference, so whatever its descendants
resolve to is exactly what it serializes; a leaf is never re-resolved after
capture.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field

from funnelwind.markup import Child, Document, Element, TagInstance
from funnelwind.render.context import RenderContext
from funnelwind.render.registry import RENDER_ORDER, get_renderer
from funnelwind.render.styles import ResolvedNode

logger = logging.getLogger(__name__)


@dataclass
class StructureReport:
    """What pass 1 did, for logging and the CLI summary."""

    rendered: dict[str, int] = field(default_factory=dict)
    unknown: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.rendered.values())


def render_instance(instance: TagInstance, ctx: RenderContext) -> bool:
    """
    Render one instance unless it is already rendered.

    Returns:
        True if the instance was rendered by this call.
    """
    if instance.rendered:
        return False
    renderer = get_renderer(instance.tag)
    if renderer is None:
        ctx.note_unknown_tag(instance.tag)
        return False
    instance.output = renderer.render(instance, ctx, list(instance.children))
    instance.rendered = True
    return True


def render_structure(document: Document, ctx: RenderContext) -> StructureReport:
    """Run pass 1 over a parsed document, then swap instances for their output."""
    report = StructureReport()
    by_kind: dict[str, list[TagInstance]] = defaultdict(list)
    for instance in document.tag_instances():
        by_kind[instance.tag].append(instance)

    for tag in RENDER_ORDER:
        for instance in by_kind.pop(tag, []):
            if render_instance(instance, ctx):
                report.rendered[tag] = report.rendered.get(tag, 0) + 1

    for tag, instances in by_kind.items():
        for instance in instances:
            render_instance(instance, ctx)
        report.unknown.append(tag)

    replace_rendered(document)
    logger.debug(f"Structural pass rendered {report.total} tag(s): {report.rendered}")
    return report


def replace_rendered(root: Element | ResolvedNode) -> None:
    """
    Replace every rendered TagInstance in the tree with its output node.

    The output objects themselves are reused, so serialization does not
    change; afterwards the tree holds ResolvedNodes, plain elements and raw
    markup only (plus any unknown cf-* tags left as-is).
    """
    root.children[:] = [_swap(child) for child in root.children]
    for child in root.children:
        if isinstance(child, (Element, ResolvedNode)):
            replace_rendered(child)


def _swap(child: Child) -> Child:
    if isinstance(child, TagInstance) and child.output is not None:
        return child.output
    return child
