"""
Markup tree for FunnelWind documents.

Parses an input document into a tree of plain elements, raw markup strings
and TagInstances (cf-* tags), and serializes any tree back to markup. Raw
text is kept verbatim (entities are not decoded) so untouched content
round-trips byte for byte.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from html.parser import HTMLParser
from typing import TYPE_CHECKING, Union

from markupsafe import escape

if TYPE_CHECKING:
    from funnelwind.render.styles import ResolvedNode

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

TAG_PREFIX = "cf-"

Child = Union[str, "Element", "ResolvedNode"]


def attrs_to_html(attrs: Mapping[str, str | None]) -> str:
    """Serialize an attribute map; None values become boolean attributes."""
    parts: list[str] = []
    for name, value in attrs.items():
        if value is None:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(value)}"')
    return "".join(parts)


def serialize(children: list[Child]) -> str:
    """Serialize a child list. Strings are raw markup and emitted verbatim."""
    return "".join(child if isinstance(child, str) else child.to_html() for child in children)


@dataclass(eq=False)
class Element:
    """Plain markup element."""

    tag: str
    attrs: dict[str, str | None] = field(default_factory=dict)
    children: list[Child] = field(default_factory=list)
    parent: Element | None = field(default=None, repr=False)

    def to_html(self) -> str:
        start = f"<{self.tag}{attrs_to_html(self.attrs)}>"
        if self.tag in VOID_ELEMENTS:
            return start
        return f"{start}{serialize(self.children)}</{self.tag}>"

    def has_attr(self, name: str) -> bool:
        return name in self.attrs

    def iter_elements(self) -> Iterator[Element]:
        """Yield descendant elements in document order (not self)."""
        for child in self.children:
            if isinstance(child, Element):
                yield child
                yield from child.iter_elements()

    def find_all(self, tag: str) -> list[Element]:
        """Recursively find all descendants with the given tag."""
        return [el for el in self.iter_elements() if el.tag == tag]

    def find_by_id(self, element_id: str) -> Element | None:
        for el in self.iter_elements():
            if el.attrs.get("id") == element_id:
                return el
        return None


@dataclass(eq=False)
class TagInstance(Element):
    """
    One cf-* tag in the input document.

    Attribute values are never None: a valueless attribute (``<cf-flex wrap>``)
    is stored as "" so presence stays distinguishable from absence.
    Once rendered, ``output`` holds the resolved node and serialization
    delegates to it.
    """

    rendered: bool = False
    output: ResolvedNode | None = field(default=None, repr=False)

    def attr(self, name: str, default: str | None = None) -> str | None:
        """Attribute value if present (even when empty), else the default."""
        value = self.attrs.get(name)
        return value if value is not None else default

    def to_html(self) -> str:
        if self.output is not None:
            return self.output.to_html()
        return super().to_html()


@dataclass(eq=False)
class Document(Element):
    """Root of a parsed document; serializes as its children only."""

    tag: str = "#document"

    def to_html(self) -> str:
        return serialize(self.children)

    def tag_instances(self) -> list[TagInstance]:
        """All cf-* instances in document order."""
        return [el for el in self.iter_elements() if isinstance(el, TagInstance)]


def is_cf_tag(tag: str) -> bool:
    return tag.startswith(TAG_PREFIX)


class _TreeBuilder(HTMLParser):
    """Build a Document tree from raw markup."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.root = Document()
        self._stack: list[Element] = [self.root]

    def _append(self, node: Child) -> None:
        parent = self._stack[-1]
        if isinstance(node, Element):
            node.parent = parent
        parent.children.append(node)

    def _make(self, tag: str, attrs: list[tuple[str, str | None]]) -> Element:
        if is_cf_tag(tag):
            return TagInstance(tag=tag, attrs={k: v if v is not None else "" for k, v in attrs})
        return Element(tag=tag, attrs=dict(attrs))

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        elem = self._make(tag, attrs)
        self._append(elem)
        # Void elements don't get pushed
        if tag not in VOID_ELEMENTS:
            self._stack.append(elem)

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._append(self._make(tag, attrs))

    def handle_endtag(self, tag: str) -> None:
        for depth in range(len(self._stack) - 1, 0, -1):
            if self._stack[depth].tag == tag:
                del self._stack[depth:]
                return

    def handle_data(self, data: str) -> None:
        self._append(data)

    def handle_entityref(self, name: str) -> None:
        self._append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self._append(f"&#{name};")

    def handle_comment(self, data: str) -> None:
        self._append(f"<!--{data}-->")

    def handle_decl(self, decl: str) -> None:
        self._append(f"<!{decl}>")

    def handle_pi(self, data: str) -> None:
        self._append(f"<?{data}>")

    def unknown_decl(self, data: str) -> None:
        self._append(f"<![{data}]>")


def parse_markup(markup: str) -> Document:
    """Parse a markup string into a Document tree."""
    builder = _TreeBuilder()
    builder.feed(markup)
    builder.close()
    return builder.root
