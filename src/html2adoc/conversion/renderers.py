"""Element renderers mapping HTML constructs to AsciiDoc."""

from bs4.element import PageElement

from .buffer import PREFORMATTED_TAG, BufferedRenderer, OutputBuffer, is_text_node

LIST_TAGS = ("ul", "ol")
ORDERED_MARKER = "."
UNORDERED_MARKER = "*"

BLOCK_TAGS = ("p", "div")
INLINE_CODE_TAGS = ("code", "tt", "kbd", "samp")
BOLD_TAGS = ("b", "strong")
ITALIC_TAGS = ("i", "em")

HARD_BREAK_MARKER = " +"


class ListRenderer(BufferedRenderer):
    """
    Renders ordered and unordered lists.

    Tracks the nesting depth and the marker of the most recently opened
    list. The marker is shared by all open levels, so a numbered list
    nested in a bulleted one prefixes its items with ``..`` and any
    later items of the outer list keep the ``.`` marker.
    """

    def __init__(self, buffer: OutputBuffer):
        super().__init__(buffer)
        self.list_depth = 0
        self.marker = UNORDERED_MARKER

    def can_process(self, node: PageElement) -> bool:
        return self.name_matches(node, "li", *LIST_TAGS)

    def on_enter(self, node: PageElement, depth: int) -> None:
        if self.name_matches(node, *LIST_TAGS):
            self.list_depth += 1
            self.marker = ORDERED_MARKER if self.name_matches(node, "ol") else UNORDERED_MARKER
            if self.list_depth == 1:
                self.append_newline()
            elif not self.buffer.ends_with_newline():
                # Nested list items must start on their own line
                self.append_newline()
        elif self.get_child_text(node).strip():
            self.append(self.marker * self.list_depth + " ")

    def on_leave(self, node: PageElement, depth: int) -> None:
        if self.name_matches(node, *LIST_TAGS):
            self.list_depth = max(0, self.list_depth - 1)
        else:
            self.append_newline()


class ParagraphRenderer(BufferedRenderer):
    """Separates paragraphs and generic blocks with line breaks."""

    def can_process(self, node: PageElement) -> bool:
        return self.name_matches(node, *BLOCK_TAGS)

    def on_enter(self, node: PageElement, depth: int) -> None:
        self.append_newline()

    def on_leave(self, node: PageElement, depth: int) -> None:
        self.append_newline()


class BreakRenderer(BufferedRenderer):
    """Renders ``<br>`` as a hard line break, or a plain newline (always inside ``<pre>``)."""

    def __init__(self, buffer: OutputBuffer, hard_line_breaks: bool = True):
        super().__init__(buffer)
        self._hard_line_breaks = hard_line_breaks

    def can_process(self, node: PageElement) -> bool:
        return self.name_matches(node, "br")

    def on_enter(self, node: PageElement, depth: int) -> None:
        if self._hard_line_breaks and not self.in_listing(node):
            self.append(HARD_BREAK_MARKER)
        self.append_newline()

    def on_leave(self, node: PageElement, depth: int) -> None:
        pass


class CodeBlockRenderer(BufferedRenderer):
    """
    Renders preformatted blocks and inline code.

    ``<pre>`` becomes a listing block; inline code elements are wrapped
    in the inline code delimiter unless they sit inside a ``<pre>``,
    where the listing block already makes them literal.
    """

    def __init__(
        self,
        buffer: OutputBuffer,
        inline_delimiter: str = "`",
        listing_delimiter: str = "----",
    ):
        super().__init__(buffer)
        self._inline_delimiter = inline_delimiter
        self._listing_delimiter = listing_delimiter

    def can_process(self, node: PageElement) -> bool:
        return self.name_matches(node, PREFORMATTED_TAG, *INLINE_CODE_TAGS)

    def on_enter(self, node: PageElement, depth: int) -> None:
        if self.name_matches(node, PREFORMATTED_TAG):
            if self.in_listing(node):
                return
            self.append_newline()
            self.append(self._listing_delimiter).append_newline()
        elif not self.in_listing(node):
            self.append(self._inline_delimiter)

    def on_leave(self, node: PageElement, depth: int) -> None:
        if self.name_matches(node, PREFORMATTED_TAG):
            if self.in_listing(node):
                return
            if not self.buffer.ends_with_newline():
                self.append_newline()
            self.append(self._listing_delimiter).append_newline()
        elif not self.in_listing(node):
            self.append(self._inline_delimiter)


class _DelimitedSpanRenderer(BufferedRenderer):
    """Wraps an inline span in a delimiter on both sides, except inside <pre>."""

    tags: tuple[str, ...] = ()

    def __init__(self, buffer: OutputBuffer, delimiter: str):
        super().__init__(buffer)
        self._delimiter = delimiter

    def can_process(self, node: PageElement) -> bool:
        return self.name_matches(node, *self.tags)

    def on_enter(self, node: PageElement, depth: int) -> None:
        if not self.in_listing(node):
            self.append(self._delimiter)

    def on_leave(self, node: PageElement, depth: int) -> None:
        if not self.in_listing(node):
            self.append(self._delimiter)


class BoldRenderer(_DelimitedSpanRenderer):
    """Renders ``<b>``/``<strong>`` as strong emphasis."""

    tags = BOLD_TAGS

    def __init__(self, buffer: OutputBuffer, delimiter: str = "*"):
        super().__init__(buffer, delimiter)


class ItalicRenderer(_DelimitedSpanRenderer):
    """Renders ``<i>``/``<em>`` as emphasis."""

    tags = ITALIC_TAGS

    def __init__(self, buffer: OutputBuffer, delimiter: str = "_"):
        super().__init__(buffer, delimiter)


class TextRenderer(BufferedRenderer):
    """Appends text nodes verbatim. AsciiDoc markup characters are not escaped."""

    def can_process(self, node: PageElement) -> bool:
        return is_text_node(node)

    def on_enter(self, node: PageElement, depth: int) -> None:
        self.append(self.get_text(node))

    def on_leave(self, node: PageElement, depth: int) -> None:
        pass
