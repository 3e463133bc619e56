#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/renderers/html.py
"""HTML rendering from the document tree.

This module provides the HtmlRenderer class, which walks a Document with the
visitor pattern and produces an HTML fragment or a standalone HTML5 page.
Raw HTML nodes are handled according to ``html_passthrough_mode``; the video
embed pipeline switches this to ``"pass-through"`` so embed markup survives.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from md_video_embed.ast import (
    BlockQuote,
    Code,
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
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
    ThematicBreak,
)
from md_video_embed.ast.visitors import NodeVisitor
from md_video_embed.options.html import HtmlRendererOptions
from md_video_embed.utils.html_utils import escape_html, sanitize_html_content

logger = logging.getLogger(__name__)


class HtmlRenderer(NodeVisitor):
    """Render document nodes to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from md_video_embed.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> HtmlRenderer().render_to_string(doc)
        '<h1>Title</h1>\\n'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        self.options: HtmlRendererOptions = options or HtmlRendererOptions()
        self._output: list[str] = []

    def render_to_string(self, document: Document) -> str:
        """Render a document to an HTML string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            HTML text

        """
        self._output = []
        document.accept(self)
        content = "".join(self._output)

        if self.options.standalone:
            return self._wrap_in_document(content)

        return content

    def render(self, doc: Document, output: Union[str, Path, IO[bytes]]) -> None:
        """Render the document and write it to a path or binary stream.

        Parameters
        ----------
        doc : Document
            Document node to render
        output : str, Path, or IO[bytes]
            Output destination

        """
        html_bytes = self.render_to_string(doc).encode("utf-8")
        if isinstance(output, (str, Path)):
            Path(output).write_bytes(html_bytes)
        else:
            output.write(html_bytes)

    def _wrap_in_document(self, content: str) -> str:
        language = escape_html(self.options.language, enabled=self.options.escape_html)
        title = escape_html(self.options.title, enabled=self.options.escape_html)
        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{language}">',
            "<head>",
            '<meta charset="UTF-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
            f"<title>{title}</title>",
            "</head>",
            "<body>",
            content,
            "</body>",
            "</html>",
        ]
        return "\n".join(parts)

    def _render_inline_content(self, nodes: list[Node]) -> str:
        saved_output = self._output
        self._output = []
        for node in nodes:
            node.accept(self)
        rendered = "".join(self._output)
        self._output = saved_output
        return rendered

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for child in node.children:
            child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        level = min(6, max(1, node.level))
        content = self._render_inline_content(node.content)
        self._output.append(f"<h{level}>{content}</h{level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        content = self._render_inline_content(node.content)
        self._output.append(f"<p>{content}</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        class_attr = ""
        if self.options.syntax_highlighting and node.language:
            language = escape_html(node.language, enabled=self.options.escape_html)
            class_attr = f' class="language-{language}"'

        escaped_content = escape_html(node.content, enabled=self.options.escape_html)
        self._output.append(f"<pre><code{class_attr}>{escaped_content}</code></pre>\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node."""
        self._output.append("<blockquote>\n")

        for child in node.children:
            child.accept(self)

        self._output.append("</blockquote>\n")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Tight lists render their paragraphs without ``<p>`` wrappers.
        """
        tag = "ol" if node.ordered else "ul"
        start_attr = f' start="{node.start}"' if node.ordered and node.start != 1 else ""

        self._output.append(f"<{tag}{start_attr}>\n")

        for item in node.items:
            if node.tight:
                self._render_tight_item(item)
            else:
                item.accept(self)

        self._output.append(f"</{tag}>\n")

    def _render_tight_item(self, node: ListItem) -> None:
        self._output.append("<li>")
        for child in node.children:
            if isinstance(child, Paragraph):
                self._output.append(self._render_inline_content(child.content))
            else:
                child.accept(self)
        self._output.append("</li>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        self._output.append("<li>")
        for child in node.children:
            child.accept(self)
        self._output.append("</li>\n")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._output.append("<hr>\n")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node.

        Parameters
        ----------
        node : HTMLBlock
            HTML block to render

        """
        sanitized = sanitize_html_content(node.content, mode=self.options.html_passthrough_mode)
        if sanitized:
            self._output.append(sanitized)
            if not sanitized.endswith("\n"):
                self._output.append("\n")

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(escape_html(node.content, enabled=self.options.escape_html))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(f"<em>{self._render_inline_content(node.content)}</em>")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(f"<strong>{self._render_inline_content(node.content)}</strong>")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._output.append(f"<del>{self._render_inline_content(node.content)}</del>")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        escaped = escape_html(node.content, enabled=self.options.escape_html)
        self._output.append(f"<code>{escaped}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node."""
        content = self._render_inline_content(node.content)
        title_attr = f' title="{escape_html(node.title, enabled=self.options.escape_html)}"' if node.title else ""
        href = escape_html(node.url, enabled=self.options.escape_html)
        self._output.append(f'<a href="{href}"{title_attr}>{content}</a>')

    def visit_image(self, node: Image) -> None:
        """Render an Image node."""
        alt = escape_html(node.alt_text, enabled=self.options.escape_html)
        title_attr = f' title="{escape_html(node.title, enabled=self.options.escape_html)}"' if node.title else ""
        src = escape_html(node.url, enabled=self.options.escape_html)
        self._output.append(f'<img src="{src}" alt="{alt}"{title_attr}>')

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        if node.soft:
            # Soft breaks render as space in HTML (whitespace is collapsed)
            self._output.append(" ")
        else:
            self._output.append("<br>\n")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node."""
        sanitized = sanitize_html_content(node.content, mode=self.options.html_passthrough_mode)
        if sanitized:
            self._output.append(sanitized)
