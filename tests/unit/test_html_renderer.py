#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the HTML renderer."""

import io

import pytest

from md_video_embed.ast import (
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)
from md_video_embed.options import HtmlRendererOptions
from md_video_embed.renderers import HtmlRenderer


@pytest.mark.unit
class TestBasicRendering:
    """Test rendering of common nodes."""

    def test_heading(self) -> None:
        """Test headings render with their level."""
        doc = Document(children=[Heading(level=2, content=[Text(content="Title")])])

        assert HtmlRenderer().render_to_string(doc) == "<h2>Title</h2>\n"

    def test_paragraph_with_inline(self) -> None:
        """Test inline formatting inside a paragraph."""
        doc = Document(
            children=[
                Paragraph(
                    content=[
                        Text(content="a "),
                        Strong(content=[Text(content="b")]),
                        Text(content=" "),
                        Emphasis(content=[Text(content="c")]),
                    ]
                )
            ]
        )

        assert HtmlRenderer().render_to_string(doc) == "<p>a <strong>b</strong> <em>c</em></p>\n"

    def test_text_escaped(self) -> None:
        """Test special characters in text are escaped."""
        doc = Document(children=[Paragraph(content=[Text(content="<b> & co")])])

        assert HtmlRenderer().render_to_string(doc) == "<p>&lt;b&gt; &amp; co</p>\n"

    def test_code_block(self) -> None:
        """Test code blocks get a language class and escaped content."""
        doc = Document(children=[CodeBlock(content="a < b\n", language="python")])

        html = HtmlRenderer().render_to_string(doc)

        assert html == '<pre><code class="language-python">a &lt; b\n</code></pre>\n'

    def test_code_block_without_highlighting(self) -> None:
        """Test the language class can be disabled."""
        doc = Document(children=[CodeBlock(content="x", language="python")])
        options = HtmlRendererOptions(syntax_highlighting=False)

        assert HtmlRenderer(options).render_to_string(doc) == "<pre><code>x</code></pre>\n"

    def test_link_and_image(self) -> None:
        """Test link and image attributes."""
        doc = Document(
            children=[
                Paragraph(
                    content=[
                        Link(url="/privacy", content=[Text(content="privacy")], title="P"),
                        Image(url="a.png", alt_text="A"),
                    ]
                )
            ]
        )

        html = HtmlRenderer().render_to_string(doc)

        assert '<a href="/privacy" title="P">privacy</a>' in html
        assert '<img src="a.png" alt="A">' in html

    def test_line_breaks(self) -> None:
        """Test soft breaks become spaces and hard breaks <br>."""
        doc = Document(
            children=[
                Paragraph(
                    content=[
                        Text(content="a"),
                        LineBreak(soft=True),
                        Text(content="b"),
                        LineBreak(),
                        Text(content="c"),
                    ]
                )
            ]
        )

        assert HtmlRenderer().render_to_string(doc) == "<p>a b<br>\nc</p>\n"

    def test_tight_list(self) -> None:
        """Test tight list items omit paragraph tags."""
        doc = Document(
            children=[
                List(
                    ordered=True,
                    start=3,
                    items=[ListItem(children=[Paragraph(content=[Text(content="x")])])],
                )
            ]
        )

        assert HtmlRenderer().render_to_string(doc) == '<ol start="3">\n<li>x</li>\n</ol>\n'

    def test_thematic_break(self) -> None:
        """Test horizontal rules."""
        assert HtmlRenderer().render_to_string(Document(children=[ThematicBreak()])) == "<hr>\n"


@pytest.mark.unit
class TestRawHtml:
    """Test html_passthrough_mode handling."""

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [
            ("pass-through", "<div>x</div>\n"),
            ("escape", "&lt;div&gt;x&lt;/div&gt;\n"),
            ("drop", ""),
        ],
    )
    def test_html_block_modes(self, mode: str, expected: str) -> None:
        """Test each passthrough mode for HTML blocks."""
        doc = Document(children=[HTMLBlock(content="<div>x</div>")])

        assert HtmlRenderer(HtmlRendererOptions(html_passthrough_mode=mode)).render_to_string(doc) == expected

    def test_default_escapes(self) -> None:
        """Test raw HTML is escaped by default."""
        doc = Document(children=[Paragraph(content=[HTMLInline(content="<span>")])])

        assert HtmlRenderer().render_to_string(doc) == "<p>&lt;span&gt;</p>\n"

    def test_invalid_mode(self) -> None:
        """Test unknown passthrough modes are rejected."""
        with pytest.raises(ValueError, match="html_passthrough_mode"):
            HtmlRendererOptions(html_passthrough_mode="unsafe")  # type: ignore[arg-type]


@pytest.mark.unit
class TestOutput:
    """Test standalone documents and output destinations."""

    def test_standalone(self) -> None:
        """Test the fragment is wrapped in an HTML5 page."""
        doc = Document(children=[Paragraph(content=[Text(content="x")])])
        options = HtmlRendererOptions(standalone=True, title="A & B", language="de")

        html = HtmlRenderer(options).render_to_string(doc)

        assert html.startswith("<!DOCTYPE html>")
        assert '<html lang="de">' in html
        assert "<title>A &amp; B</title>" in html
        assert "<p>x</p>" in html
        assert html.rstrip().endswith("</html>")

    def test_render_to_path(self, tmp_path) -> None:
        """Test rendering to a file path."""
        target = tmp_path / "out.html"

        HtmlRenderer().render(Document(children=[Paragraph(content=[Text(content="x")])]), target)

        assert target.read_text(encoding="utf-8") == "<p>x</p>\n"

    def test_render_to_stream(self) -> None:
        """Test rendering to a binary stream."""
        buffer = io.BytesIO()

        HtmlRenderer().render(Document(children=[Paragraph(content=[Text(content="x")])]), buffer)

        assert buffer.getvalue() == b"<p>x</p>\n"
