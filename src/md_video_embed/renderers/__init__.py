"""Renderers turning the document tree into output formats."""

from md_video_embed.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
