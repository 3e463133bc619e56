#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/parsers/markdown.py
"""Markdown to document tree converter.

Markdown is tokenized with mistune (``renderer=None``) and the token stream
is converted into :mod:`md_video_embed.ast` nodes. Fenced code blocks keep
their complete info string so the video-embed pipeline can read the
``source=`` marker.

"""

from __future__ import annotations

import logging
from typing import Any, Union

import mistune

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
from md_video_embed.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)


class MarkdownToAstConverter:
    r"""Convert Markdown to the document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    def parse(self, input_data: Union[str, bytes]) -> Document:
        """Parse Markdown input into a Document.

        Parameters
        ----------
        input_data : str or bytes
            Markdown text; bytes are decoded as UTF-8

        Returns
        -------
        Document
            Document node

        """
        if isinstance(input_data, bytes):
            markdown_content = input_data.decode("utf-8", errors="replace")
        else:
            markdown_content = input_data

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        tokens, _state = markdown.parse(markdown_content)

        children = self._process_tokens(tokens) if isinstance(tokens, list) else []
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single block-level mistune token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting node, or None for tokens without a tree representation

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items - treat like paragraph
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            if not self.options.preserve_html:
                return None
            return HTMLBlock(content=token.get("raw", ""))

        if token_type != "blank_line":
            logger.debug("Skipping unsupported markdown token: %s", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1

        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        The full info string is kept in ``metadata["info_string"]``; the first
        word becomes the language and the remainder ``metadata["info_attrs"]``.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block node

        """
        code_content = token.get("raw", "")
        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None

        metadata: dict[str, Any] = {}
        language = None

        if info_string:
            info_string = info_string.strip()
            metadata["info_string"] = info_string

            parts = info_string.split(maxsplit=1)
            if parts:
                language = parts[0]
                if len(parts) > 1:
                    metadata["info_attrs"] = parts[1]

        fence = token.get("marker", "```")
        fence_char = fence[0] if fence and fence[0] in "`~" else "`"

        return CodeBlock(
            content=code_content,
            language=language,
            fence_char=fence_char,
            fence_length=max(3, len(fence)),
            metadata=metadata,
        )

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        tight = token.get("tight", attrs.get("tight", True))

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "list_item"
        ]

        return List(ordered=ordered, items=items, start=start, tight=bool(tight))

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs", {})
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(token.get("children", [])),
            title=attrs.get("title"),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        attrs = token.get("attrs", {})
        # Alt text is in children, not attrs
        alt_text = "".join(
            child.get("raw", "") for child in token.get("children", []) if child.get("type") == "text"
        )
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline | None:
        if not self.options.preserve_html:
            return None
        return HTMLInline(content=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline node

        """
        token_type = token.get("type", "")

        if token_type == "text":
            return Text(content=token.get("raw", ""))
        elif token_type == "strong":
            return Strong(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "emphasis":
            return Emphasis(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "strikethrough":
            return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "codespan":
            return Code(content=token.get("raw", ""))
        elif token_type == "link":
            return self._handle_link_token(token)
        elif token_type == "image":
            return self._handle_image_token(token)
        elif token_type == "linebreak":
            return LineBreak(soft=False)
        elif token_type == "softbreak":
            return LineBreak(soft=True)
        elif token_type == "inline_html":
            return self._handle_inline_html_token(token)

        logger.debug("Skipping unsupported inline token: %s", token_type)
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert a Markdown string to a Document.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        Document node

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
