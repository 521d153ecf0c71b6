"""Tests for the output buffer, element renderers and traversal."""

from bs4 import BeautifulSoup
from html2adoc.conversion import (
    BoldRenderer,
    BreakRenderer,
    CodeBlockRenderer,
    CompositeRenderer,
    ItalicRenderer,
    ListRenderer,
    NodeRenderer,
    OutputBuffer,
    ParagraphRenderer,
    TextRenderer,
    build_renderers,
    traverse,
)
from html2adoc.models.config import AsciiDocConfig


def parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html5lib")


def render(html: str, *renderer_types) -> str:
    """Render html with the given renderer types sharing one buffer."""
    buffer = OutputBuffer()
    composite = CompositeRenderer(buffer, [renderer_type(buffer) for renderer_type in renderer_types])
    traverse(composite, parse(html).contents)
    return buffer.getvalue()


class RecordingRenderer:
    """Records every enter/leave event it receives."""

    def __init__(self, names=None):
        self.names = names
        self.events = []

    def can_process(self, node):
        return self.names is None or getattr(node, "name", None) in self.names

    def on_enter(self, node, depth):
        self.events.append(("enter", getattr(node, "name", None) or str(node), depth))

    def on_leave(self, node, depth):
        self.events.append(("leave", getattr(node, "name", None) or str(node), depth))


class TestOutputBuffer:
    """Tests for OutputBuffer."""

    def test_append_chains(self):
        """Test appends can be chained."""
        buffer = OutputBuffer()
        buffer.append("a").append("b").append_newline()

        assert buffer.getvalue() == "ab\n"
        assert str(buffer) == "ab\n"

    def test_ends_with_newline(self):
        """Test line-end detection."""
        buffer = OutputBuffer()
        assert not buffer.ends_with_newline()

        buffer.append("x\n")
        assert buffer.ends_with_newline()

        buffer.append("y")
        assert not buffer.ends_with_newline()

    def test_empty_append_is_ignored(self):
        """Test appending empty text keeps the last line state."""
        buffer = OutputBuffer()
        buffer.append("x\n").append("")

        assert buffer.ends_with_newline()


class TestBufferedRendererHelpers:
    """Tests for the node queries shared by renderers."""

    def test_get_text_of_text_node(self):
        """Test text nodes return their text."""
        renderer = TextRenderer(OutputBuffer())
        soup = parse("<p>hello</p>")

        assert renderer.get_text(soup.p.contents[0]) == "hello"
        assert renderer.get_text(soup.p) == ""

    def test_get_text_ignores_comments(self):
        """Test comments are not treated as text."""
        renderer = TextRenderer(OutputBuffer())
        soup = parse("<p><!--c--></p>")

        assert renderer.get_text(soup.p.contents[0]) == ""

    def test_get_child_text(self):
        """Test first child text lookup."""
        renderer = TextRenderer(OutputBuffer())
        soup = parse("<li>first<b>second</b></li><li><b>x</b></li><li></li>")
        items = soup.find_all("li")

        assert renderer.get_child_text(items[0]) == "first"
        assert renderer.get_child_text(items[1]) == ""
        assert renderer.get_child_text(items[2]) == ""

    def test_name_matches(self):
        """Test tag name matching."""
        renderer = TextRenderer(OutputBuffer())
        soup = parse("<ul></ul>text")

        assert renderer.name_matches(soup.ul, "ol", "ul")
        assert not renderer.name_matches(soup.ul, "li")
        assert not renderer.name_matches(soup.body.contents[1], "ul")

    def test_in_listing(self):
        """Test detection of nodes nested in a preformatted block."""
        renderer = TextRenderer(OutputBuffer())
        soup = parse("<pre><b>x</b></pre><b>y</b>")
        inner, outer = soup.find_all("b")

        assert renderer.in_listing(inner)
        assert renderer.in_listing(inner.contents[0])
        assert not renderer.in_listing(outer)
        assert not renderer.in_listing(soup.pre)


class TestRendererProtocol:
    """Tests that every renderer satisfies NodeRenderer."""

    def test_renderers_implement_protocol(self):
        """Test isinstance checks against the runtime protocol."""
        buffer = OutputBuffer()
        for renderer in build_renderers(buffer, AsciiDocConfig()):
            assert isinstance(renderer, NodeRenderer)

    def test_build_renderers_order(self):
        """Test the fixed renderer order."""
        renderers = build_renderers(OutputBuffer(), AsciiDocConfig())

        assert [type(r) for r in renderers] == [
            ListRenderer,
            BreakRenderer,
            CodeBlockRenderer,
            ParagraphRenderer,
            BoldRenderer,
            ItalicRenderer,
            TextRenderer,
        ]

    def test_predicates_are_mutually_exclusive(self):
        """Test at most one renderer matches any node."""
        html = (
            "<div><p>a<br><b>b</b><i>c</i><code>d</code></p>"
            "<pre>e</pre><ul><li>f</li></ul><ol><li>g</li></ol><!--h--></div>"
        )
        soup = parse(html)
        renderers = build_renderers(OutputBuffer(), AsciiDocConfig())

        for node in soup.descendants:
            matches = [r for r in renderers if r.can_process(node)]
            assert len(matches) <= 1, node


class TestListRenderer:
    """Tests for ListRenderer state."""

    def test_depth_returns_to_zero(self):
        """Test depth bookkeeping after a nested list."""
        buffer = OutputBuffer()
        renderer = ListRenderer(buffer)
        composite = CompositeRenderer(buffer, [renderer, TextRenderer(buffer)])

        traverse(composite, parse("<ul><li>x<ol><li>y</li></ol></li></ul>").contents)

        assert renderer.list_depth == 0
        assert renderer.marker == "."

    def test_empty_list_keeps_depth_at_zero(self):
        """Test an empty list opens and closes cleanly."""
        buffer = OutputBuffer()
        renderer = ListRenderer(buffer)
        composite = CompositeRenderer(buffer, [renderer])

        traverse(composite, parse("<ul></ul>").contents)

        assert renderer.list_depth == 0
        assert buffer.getvalue() == "\n"

    def test_depth_never_negative(self):
        """Test leaving more lists than entered floors depth at zero."""
        buffer = OutputBuffer()
        renderer = ListRenderer(buffer)
        soup = parse("<ul></ul>")

        renderer.on_leave(soup.ul, 0)
        renderer.on_leave(soup.ul, 0)

        assert renderer.list_depth == 0

    def test_marker_follows_latest_list(self):
        """Test the marker is set by the most recently entered list."""
        renderer = ListRenderer(OutputBuffer())
        soup = parse("<ol></ol><ul></ul>")

        assert renderer.marker == "*"
        renderer.on_enter(soup.ol, 0)
        assert renderer.marker == "."
        renderer.on_enter(soup.ul, 0)
        assert renderer.marker == "*"
        assert renderer.list_depth == 2


class TestIndividualRenderers:
    """Tests for renderers in isolation."""

    def test_paragraph(self):
        """Test paragraphs are surrounded by newlines."""
        assert render("<p>x</p>", ParagraphRenderer, TextRenderer) == "\nx\n"

    def test_break(self):
        """Test the default hard line break."""
        assert render("a<br>b", BreakRenderer, TextRenderer) == "a +\nb"

    def test_bold_and_italic(self):
        """Test emphasis renderers with default delimiters."""
        result = render("<strong>a</strong><em>b</em>", BoldRenderer, ItalicRenderer, TextRenderer)

        assert result == "*a*_b_"

    def test_inline_code_variants(self):
        """Test all inline code tags use backticks."""
        result = render("<tt>a</tt><kbd>b</kbd><samp>c</samp>", CodeBlockRenderer, TextRenderer)

        assert result == "`a``b``c`"

    def test_text_only(self):
        """Test the text renderer alone emits text content."""
        assert render("plain", TextRenderer) == "plain"

    def test_emphasis_is_literal_in_listing(self):
        """Test emphasis delimiters are not written inside <pre>."""
        result = render("<pre><b>a</b><i>b</i></pre>", CodeBlockRenderer, BoldRenderer, ItalicRenderer, TextRenderer)

        assert result == "\n----\nab\n----\n"

    def test_break_in_listing_is_plain_newline(self):
        """Test <br> inside <pre> never adds the hard break marker."""
        result = render("<pre>a<br>b</pre>", CodeBlockRenderer, BreakRenderer, TextRenderer)

        assert result == "\n----\na\nb\n----\n"


class TestTraversal:
    """Tests for CompositeRenderer and traverse."""

    def test_enter_children_leave_order(self):
        """Test events arrive in depth-first enter/leave order with depths."""
        recorder = RecordingRenderer()
        composite = CompositeRenderer(OutputBuffer(), [recorder])

        traverse(composite, parse("<p>a<b>c</b></p>").body.contents)

        assert recorder.events == [
            ("enter", "p", 0),
            ("enter", "a", 1),
            ("leave", "a", 1),
            ("enter", "b", 1),
            ("enter", "c", 2),
            ("leave", "c", 2),
            ("leave", "b", 1),
            ("leave", "p", 0),
        ]

    def test_all_matching_renderers_are_called(self):
        """Test dispatch reaches every matching renderer in order."""
        first = RecordingRenderer({"p"})
        second = RecordingRenderer({"p"})
        composite = CompositeRenderer(OutputBuffer(), [first, second])

        traverse(composite, parse("<p></p>").body.contents)

        assert first.events == second.events == [("enter", "p", 0), ("leave", "p", 0)]

    def test_unmatched_node_is_serialized(self):
        """Test nodes without a renderer are written verbatim."""
        buffer = OutputBuffer()
        composite = CompositeRenderer(buffer, [])

        traverse(composite, parse('<p class="x">a &amp; b</p>').body.contents)

        assert buffer.getvalue() == '<p class="x">a &amp; b</p>'

    def test_unmatched_element_children_are_rendered(self):
        """Test handled markup inside an unhandled element still reaches renderers."""
        recorder = RecordingRenderer({"b"})
        buffer = OutputBuffer()
        composite = CompositeRenderer(buffer, [recorder])

        traverse(composite, parse("<span><b>x</b></span>").body.contents)

        assert recorder.events == [("enter", "b", 1), ("leave", "b", 1)]
        assert buffer.getvalue() == "<span>x</span>"

    def test_structural_tags_are_descended(self):
        """Test html/body wrappers are neither serialized nor skipped."""
        recorder = RecordingRenderer({"p"})
        buffer = OutputBuffer()
        composite = CompositeRenderer(buffer, [recorder])

        traverse(composite, parse("<p></p>").contents)

        assert recorder.events == [("enter", "p", 2), ("leave", "p", 2)]
        assert buffer.getvalue() == ""

    def test_void_element_has_no_end_tag(self):
        """Test void elements are written as a single self-closing tag."""
        buffer = OutputBuffer()
        composite = CompositeRenderer(buffer, [])

        traverse(composite, parse('a<img src="x.png">b').body.contents)

        assert buffer.getvalue() == 'a<img src="x.png"/>b'

    def test_multi_valued_attributes(self):
        """Test class lists are joined back into one attribute."""
        buffer = OutputBuffer()
        composite = CompositeRenderer(buffer, [])

        traverse(composite, parse('<span class="a b">x</span>').body.contents)

        assert buffer.getvalue() == '<span class="a b">x</span>'
