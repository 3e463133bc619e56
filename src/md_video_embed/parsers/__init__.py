"""Markdown parsing into the document tree."""

from md_video_embed.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["MarkdownToAstConverter", "markdown_to_ast"]
