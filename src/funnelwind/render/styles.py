"""
Resolved output types and shared resolution helpers.

A renderer turns one TagInstance into a ResolvedNode: an output element
carrying its ResolvedStyle (inline declarations, persisted data attributes,
classes), extra HTML attributes and children. Data attributes always store
the *input* value (preset key, styleguide id), never the resolved value, so
an external converter can reconstruct the original tag.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from funnelwind.markup import (
    VOID_ELEMENTS,
    Child,
    Element,
    TagInstance,
    attrs_to_html,
    serialize,
)
from funnelwind.presets import resolve_preset
from funnelwind.styleguide.typescale import css_number

# 16px per em, used when normalising gaps
PX_PER_EM = 16


def build_style(declarations: Mapping[str, str | None]) -> str:
    """Join declarations as ``prop: value; ...``, skipping empty values."""
    return "; ".join(f"{prop}: {value}" for prop, value in declarations.items() if value)


@dataclass
class ResolvedStyle:
    """Final inline declarations, persisted data attributes and classes."""

    declarations: dict[str, str] = field(default_factory=dict)
    data: dict[str, str] = field(default_factory=dict)
    classes: list[str] = field(default_factory=list)

    def set(self, prop: str, value: str | None) -> None:
        """Set a declaration; empty or missing values are dropped."""
        if value:
            self.declarations[prop] = value

    def update(self, declarations: Mapping[str, str | None]) -> None:
        for prop, value in declarations.items():
            self.set(prop, value)

    def set_data(self, name: str, value: str | bool | None) -> None:
        """Persist a data attribute (``name`` without the ``data-`` prefix)."""
        if value is None:
            return
        if isinstance(value, bool):
            value = "true" if value else "false"
        self.data[f"data-{name}"] = value

    def add_class(self, name: str | None) -> None:
        if name and name not in self.classes:
            self.classes.append(name)

    def css(self) -> str:
        return build_style(self.declarations)


@dataclass(eq=False)
class ResolvedNode:
    """
    One output element.

    ``color_targets`` maps a color role ("text", "icon") to the inner nodes
    whose inline color the paint cascade may patch. A node with an empty tag
    is a fragment and serializes as its children only.
    """

    tag: str
    style: ResolvedStyle = field(default_factory=ResolvedStyle)
    attrs: dict[str, str | None] = field(default_factory=dict)
    children: list[Child] = field(default_factory=list)
    color_targets: dict[str, list[ResolvedNode]] = field(default_factory=dict)

    @property
    def data(self) -> dict[str, str]:
        return self.style.data

    @property
    def data_type(self) -> str | None:
        return self.style.data.get("data-type")

    def html_attrs(self) -> dict[str, str | None]:
        attrs: dict[str, str | None] = {}
        if self.style.classes:
            attrs["class"] = " ".join(self.style.classes)
        attrs.update(self.attrs)
        attrs.update(self.style.data)
        css = self.style.css()
        if css:
            attrs["style"] = css
        return attrs

    def to_html(self) -> str:
        if not self.tag:
            return serialize(self.children)
        start = f"<{self.tag}{attrs_to_html(self.html_attrs())}>"
        if self.tag in VOID_ELEMENTS:
            return start
        return f"{start}{serialize(self.children)}</{self.tag}>"

    def iter_nodes(self) -> Iterator[ResolvedNode]:
        """This node and every ResolvedNode below it, in document order."""
        yield self
        yield from iter_resolved(self.children)

    def find_all(self, data_type: str) -> list[ResolvedNode]:
        return [node for node in self.iter_nodes() if node.data_type == data_type]

    def get_style(self, prop: str) -> str | None:
        return self.style.declarations.get(prop)


def iter_resolved(children: list[Child]) -> Iterator[ResolvedNode]:
    """Yield every ResolvedNode reachable from a child list, in document order.

    Rendered TagInstances are followed to their output; plain elements and
    unrendered instances are descended into.
    """
    for child in children:
        if isinstance(child, ResolvedNode):
            yield from child.iter_nodes()
        elif isinstance(child, TagInstance) and child.output is not None:
            yield from child.output.iter_nodes()
        elif isinstance(child, Element):
            yield from iter_resolved(child.children)


def node(
    tag: str,
    declarations: Mapping[str, str | None] | None = None,
    children: list[Child] | None = None,
    classes: str | None = None,
    **attrs: str | None,
) -> ResolvedNode:
    """Shorthand for an inner (non-tag) output element."""
    style = ResolvedStyle()
    if declarations:
        style.update(declarations)
    if classes:
        style.classes.extend(classes.split())
    return ResolvedNode(
        tag=tag,
        style=style,
        attrs={name.replace("_", "-"): value for name, value in attrs.items()},
        children=list(children or []),
    )


# =============================================================================
# Value helpers
# =============================================================================


def preset_or_raw(value: str | None, table: Mapping[str, str]) -> str | None:
    """Resolve through a preset table; unknown keys pass through verbatim."""
    return resolve_preset(value, table)


def is_flag_set(value: str | None) -> bool:
    """Boolean attribute check: "true" or present-but-empty."""
    return value == "true" or value == ""


_LEADING_NUMBER = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))")


def leading_number(value: str | None) -> float | None:
    """Parse the numeric prefix of a CSS length ("12.5px" -> 12.5)."""
    if not value:
        return None
    match = _LEADING_NUMBER.match(value)
    return float(match.group(1)) if match else None


def px_to_em(value: str | None, default: str) -> str:
    """Normalise a px length to em at 16px/em; other units pass through."""
    if not value:
        return default
    if value.endswith("px"):
        number = leading_number(value)
        if number is None:
            return value
        return f"{css_number(number / PX_PER_EM)}em"
    return value


def parse_int(value: str | None, default: int) -> int | str:
    """Integer prefix of an attribute; an unparseable value passes through."""
    if value is None:
        return default
    number = leading_number(value)
    if number is None:
        return value
    return int(number)


_YOUTUBE_ID = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\s?]+)")


def youtube_video_id(url: str | None) -> str | None:
    if not url:
        return None
    match = _YOUTUBE_ID.search(url)
    return match.group(1) if match else None


def youtube_thumbnail(video_id: str) -> str:
    return f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"


def animation_data(instance: TagInstance, style: ResolvedStyle) -> None:
    """Persist animation settings when an ``animation`` attribute is set."""
    animation = instance.attr("animation")
    if not animation:
        return
    style.set_data("skip-animation-settings", False)
    style.set_data("animation-type", animation)
    style.set_data("animation-time", instance.attr("animation-time", "1000"))
    style.set_data("animation-delay", instance.attr("animation-delay", "0"))
    style.set_data("animation-trigger", instance.attr("animation-trigger", "load"))
    style.set_data("animation-timing-function", instance.attr("animation-timing", "ease"))
    style.set_data("animation-direction", instance.attr("animation-direction", "normal"))
    style.set_data("animation-once", instance.attr("animation-once", "true") == "true")
    style.set_data("animation-loop", instance.attr("animation-loop", "false") == "true")
