"""Protocol definitions for HTML to AsciiDoc conversion."""

from typing import Protocol, runtime_checkable

from bs4.element import PageElement


@runtime_checkable
class NodeRenderer(Protocol):
    """
    Protocol for element renderers.

    A renderer decides whether it applies to a node and writes AsciiDoc
    to the shared output buffer when the traversal enters and leaves
    that node. Renderers are created per conversion and may keep state
    for the duration of that conversion only.

    Example implementation:
        class RuleRenderer(BufferedRenderer):
            def can_process(self, node: PageElement) -> bool:
                return self.name_matches(node, "hr")

            def on_enter(self, node: PageElement, depth: int) -> None:
                self.append("'''").append_newline()

            def on_leave(self, node: PageElement, depth: int) -> None:
                pass
    """

    def can_process(self, node: PageElement) -> bool:
        """
        Check whether this renderer handles the node.

        Must be free of side effects; it is evaluated again when the
        traversal leaves the node.
        """
        ...

    def on_enter(self, node: PageElement, depth: int) -> None:
        """
        Handle entering a node, before its children are visited.

        Args:
            node: The node being entered
            depth: Distance of the node from the traversal root
        """
        ...

    def on_leave(self, node: PageElement, depth: int) -> None:
        """
        Handle leaving a node, after its children were visited.

        Args:
            node: The node being left
            depth: Distance of the node from the traversal root
        """
        ...


class AsciiDocConverter(Protocol):
    """
    Protocol for converting HTML to AsciiDoc.

    Implementations turn an HTML fragment (or plain text) into AsciiDoc
    text and must not fail on malformed markup.
    """

    def convert(self, text: str) -> str:
        """
        Convert HTML to AsciiDoc.

        Args:
            text: HTML fragment or plain text

        Returns:
            AsciiDoc string
        """
        ...
