"""Depth-first traversal dispatching nodes to element renderers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from bs4.dammit import EntitySubstitution
from bs4.element import NavigableString, PageElement, Tag

from .buffer import OutputBuffer, node_name
from .protocols import NodeRenderer

logger = logging.getLogger(__name__)

# Containers introduced by fragment parsing; never passed through
STRUCTURAL_TAGS = frozenset({"[document]", "html", "head", "body"})


def start_tag(tag: Tag) -> str:
    """Serialize the opening tag of an element, attributes included."""
    parts = [tag.name]
    for key, value in tag.attrs.items():
        if value is None:
            parts.append(key)
            continue
        if isinstance(value, (list, tuple)):
            # Multi-valued attributes such as class
            value = " ".join(value)
        parts.append(f"{key}={EntitySubstitution.substitute_xml(str(value), make_quoted_attribute=True)}")
    closing = "/>" if tag.is_empty_element else ">"
    return "<" + " ".join(parts) + closing


def end_tag(tag: Tag) -> str:
    """Serialize the closing tag of an element; void elements have none."""
    if tag.is_empty_element:
        return ""
    return f"</{tag.name}>"


def serialize(node: PageElement) -> str:
    """Serialize a leaf node (text, comment, CDATA, doctype, ...) to its HTML form."""
    if isinstance(node, NavigableString):
        return node.output_ready(formatter="minimal")
    return str(node)


class CompositeRenderer:
    """
    Dispatches traversal events to a fixed, ordered set of renderers.

    Every renderer whose ``can_process`` matches a node receives the
    enter and leave events for it. A node no renderer matches is passed
    through as HTML, unless it is one of the structural containers
    produced by fragment parsing: an element's opening tag is written on
    enter and its closing tag on leave, so handled markup nested inside
    it is still converted. Comments and other special strings are
    written whole.

    Example:
        buffer = OutputBuffer()
        composite = CompositeRenderer(buffer, [ParagraphRenderer(buffer), TextRenderer(buffer)])
        traverse(composite, soup.contents)
    """

    def __init__(self, buffer: OutputBuffer, renderers: Sequence[NodeRenderer]):
        self._buffer = buffer
        self._renderers = tuple(renderers)

    @property
    def renderers(self) -> tuple[NodeRenderer, ...]:
        return self._renderers

    def _passes_through(self, node: PageElement) -> bool:
        return node_name(node) not in STRUCTURAL_TAGS

    def enter(self, node: PageElement, depth: int) -> None:
        """Handle entering a node."""
        processed = False
        for renderer in self._renderers:
            if renderer.can_process(node):
                renderer.on_enter(node, depth)
                processed = True

        if processed or not self._passes_through(node):
            return

        logger.debug(f"Passing through unhandled markup: {node_name(node) or type(node).__name__}")
        if isinstance(node, Tag):
            self._buffer.append(start_tag(node))
        else:
            self._buffer.append(serialize(node))

    def leave(self, node: PageElement, depth: int) -> None:
        """Handle leaving a node."""
        processed = False
        for renderer in self._renderers:
            if renderer.can_process(node):
                renderer.on_leave(node, depth)
                processed = True

        if not processed and isinstance(node, Tag) and self._passes_through(node):
            self._buffer.append(end_tag(node))


def traverse(composite: CompositeRenderer, nodes: Iterable[PageElement]) -> None:
    """
    Walk each node's subtree depth-first: enter, visit children, leave.

    Uses an explicit stack, so the nesting depth of the markup is not
    bounded by the recursion limit.

    Args:
        composite: Receiver of enter/leave events
        nodes: Root nodes, walked in order
    """
    for root in list(nodes):
        stack: list[tuple[PageElement, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, leaving = stack.pop()
            if leaving:
                composite.leave(node, depth)
                continue

            composite.enter(node, depth)
            stack.append((node, depth, True))
            if isinstance(node, Tag):
                for child in reversed(node.contents):
                    stack.append((child, depth + 1, False))
