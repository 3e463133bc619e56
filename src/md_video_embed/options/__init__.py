"""Options dataclasses for parsing and rendering."""

from md_video_embed.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md_video_embed.options.html import HtmlRendererOptions
from md_video_embed.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
]
