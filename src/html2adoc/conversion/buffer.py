"""Shared output buffer for element renderers."""

from __future__ import annotations

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

NEWLINE = "\n"
PREFORMATTED_TAG = "pre"


def is_text_node(node: PageElement) -> bool:
    """Check if a node is a plain text node (not a comment, CDATA, doctype, ...)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def node_name(node: PageElement) -> str | None:
    """Get the tag name of a node, or None for strings."""
    if isinstance(node, Tag):
        return node.name
    return None


class OutputBuffer:
    """
    Append-only text accumulator shared by all renderers of one conversion.

    Example:
        buffer = OutputBuffer()
        buffer.append("*").append("bold").append("*").append_newline()
        str(buffer)  # "*bold*\\n"
    """

    def __init__(self) -> None:
        self._parts: list[str] = []
        self._last = ""

    def append(self, text: str) -> OutputBuffer:
        """Append text, returning the buffer for chaining."""
        if text:
            self._parts.append(text)
            self._last = text
        return self

    def append_newline(self) -> OutputBuffer:
        """Append a line separator."""
        return self.append(NEWLINE)

    def ends_with_newline(self) -> bool:
        """Check if the last appended text ends a line."""
        return self._last.endswith(NEWLINE)

    def getvalue(self) -> str:
        """Get the accumulated text."""
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.getvalue()


class BufferedRenderer:
    """
    Base for renderers writing to a shared OutputBuffer.

    Provides the buffer delegation and the node queries renderers need.
    Subclasses implement the NodeRenderer protocol methods.
    """

    def __init__(self, buffer: OutputBuffer):
        self._buffer = buffer

    def append(self, text: str) -> OutputBuffer:
        return self._buffer.append(text)

    def append_newline(self) -> OutputBuffer:
        return self._buffer.append_newline()

    @property
    def buffer(self) -> OutputBuffer:
        return self._buffer

    def get_text(self, node: PageElement) -> str:
        """
        Get the text of a node.

        Args:
            node: The node to get the text from

        Returns:
            The text for a plain text node, otherwise an empty string
        """
        if is_text_node(node):
            return str(node)
        return ""

    def get_child_text(self, node: PageElement) -> str:
        """
        Get the text of the first child of a node.

        Args:
            node: The node whose first child is inspected

        Returns:
            The first child's text if it is a plain text node, otherwise an empty string
        """
        if isinstance(node, Tag) and node.contents:
            return self.get_text(node.contents[0])
        return ""

    def in_listing(self, node: PageElement) -> bool:
        """Check if the node sits inside a <pre> block, where content is literal."""
        return node.find_parent(PREFORMATTED_TAG) is not None

    def name_matches(self, node: PageElement, *names: str) -> bool:
        """
        Check the node's tag name against a set of names.

        Args:
            node: The node to check
            names: Tag names that may match

        Returns:
            True if the node is a tag named one of names
        """
        return node_name(node) in names
