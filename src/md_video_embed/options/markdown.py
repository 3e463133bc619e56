#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/options/markdown.py
"""Configuration options for markdown parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from md_video_embed.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for parsing markdown into the document tree.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Parse ``~~text~~`` as strikethrough (GFM extension).
    preserve_html : bool, default True
        Keep raw HTML as HTMLBlock/HTMLInline nodes; when False it is dropped.

    """

    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
    preserve_html: bool = field(
        default=True,
        metadata={"help": "Keep raw HTML blocks and inline HTML", "importance": "core"},
    )
