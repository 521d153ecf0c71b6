"""Content conversion for html2adoc (HTML to AsciiDoc)."""

from .asciidoc import HtmlToAsciiDoc, build_renderers, convert
from .buffer import BufferedRenderer, OutputBuffer
from .protocols import AsciiDocConverter, NodeRenderer
from .renderers import (
    BoldRenderer,
    BreakRenderer,
    CodeBlockRenderer,
    ItalicRenderer,
    ListRenderer,
    ParagraphRenderer,
    TextRenderer,
)
from .traversal import CompositeRenderer, traverse

__all__ = [
    # Protocols
    "AsciiDocConverter",
    "NodeRenderer",
    # Entry points
    "HtmlToAsciiDoc",
    "convert",
    "build_renderers",
    # Traversal
    "CompositeRenderer",
    "traverse",
    # Buffer
    "OutputBuffer",
    "BufferedRenderer",
    # Renderers
    "ListRenderer",
    "ParagraphRenderer",
    "BreakRenderer",
    "CodeBlockRenderer",
    "BoldRenderer",
    "ItalicRenderer",
    "TextRenderer",
]
