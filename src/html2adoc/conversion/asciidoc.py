"""HTML to AsciiDoc conversion."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup

from ..models.config import AsciiDocConfig
from .buffer import OutputBuffer
from .protocols import NodeRenderer
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

logger = logging.getLogger(__name__)


def build_renderers(buffer: OutputBuffer, config: AsciiDocConfig) -> list[NodeRenderer]:
    """
    Create one instance of each element renderer sharing the buffer.

    Order: list, break, code block, paragraph, bold, italic, text. Each
    renderer matches a disjoint set of nodes, so the order does not
    change the output.
    """
    return [
        ListRenderer(buffer),
        BreakRenderer(buffer, hard_line_breaks=config.hard_line_breaks),
        CodeBlockRenderer(
            buffer,
            inline_delimiter=config.inline_code_delimiter,
            listing_delimiter=config.listing_delimiter,
        ),
        ParagraphRenderer(buffer),
        BoldRenderer(buffer, delimiter=config.bold_delimiter),
        ItalicRenderer(buffer, delimiter=config.italic_delimiter),
        TextRenderer(buffer),
    ]


class HtmlToAsciiDoc:
    """
    Converts HTML fragments to AsciiDoc.

    Each call parses the fragment and renders it with fresh renderers
    and a fresh buffer, so one instance can be shared between threads.

    Example:
        converter = HtmlToAsciiDoc()
        converter.convert("<p>Use <code>foo</code> <b>carefully</b>.</p>")
        # "\\nUse `foo` *carefully*.\\n"
    """

    def __init__(self, config: Optional[AsciiDocConfig] = None):
        """
        Initialize the AsciiDoc converter.

        Args:
            config: Markup and parser settings (defaults if None)
        """
        self._config = config or AsciiDocConfig()

    @property
    def config(self) -> AsciiDocConfig:
        return self._config

    def _parse(self, text: str) -> BeautifulSoup:
        return BeautifulSoup(text, self._config.parser)

    def convert(self, text: str) -> str:
        """
        Convert HTML to AsciiDoc.

        Args:
            text: HTML fragment or plain text

        Returns:
            AsciiDoc string, or text unchanged when it holds no markup

        Raises:
            ValueError: If text is None
        """
        if text is None:
            raise ValueError("Cannot convert None; expected a string")

        # Whitespace-only input holds no markup; the parser would collapse it
        if not text.strip():
            return text

        try:
            soup = self._parse(text)
        except ParserRejectedMarkup as e:
            logger.warning(f"Parser rejected markup, returning input unchanged: {e}")
            return text

        # No need to process if there is no HTML
        if soup.get_text() == text:
            logger.debug("No markup found, returning input unchanged")
            return text

        buffer = OutputBuffer()
        composite = CompositeRenderer(buffer, build_renderers(buffer, self._config))
        traverse(composite, soup.contents)

        result = buffer.getvalue()
        logger.debug(f"Converted {len(text)} chars of HTML to {len(result)} chars of AsciiDoc")
        return result

    def convert_fields(self, fields: Mapping[str, Optional[str]]) -> dict[str, Optional[str]]:
        """
        Convert several free-text fields, e.g. a description and a deprecation note.

        Args:
            fields: Field name to HTML text; None values are kept as None

        Returns:
            Field name to AsciiDoc text, in the same order
        """
        return {name: None if value is None else self.convert(value) for name, value in fields.items()}


def convert(text: str, config: Optional[AsciiDocConfig] = None) -> str:
    """
    Convert an HTML fragment to AsciiDoc.

    Args:
        text: HTML fragment or plain text
        config: Markup and parser settings (defaults if None)

    Returns:
        AsciiDoc string
    """
    return HtmlToAsciiDoc(config).convert(text)
