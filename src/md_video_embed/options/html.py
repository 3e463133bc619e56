#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/options/html.py
"""Configuration options for HTML rendering.

This module defines options for rendering the document tree to HTML, either
as a fragment or as a complete standalone document.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md_video_embed.constants import (
    DEFAULT_HTML_ESCAPE_HTML,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_HTML_PASSTHROUGH_MODE,
    HTML_PASSTHROUGH_MODES,
    HtmlPassthroughMode,
)
from md_video_embed.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering documents to HTML.

    Parameters
    ----------
    standalone : bool, default False
        Wrap the rendered fragment in a complete HTML5 document.
    title : str, default "Document"
        Document title used in standalone mode.
    escape_html : bool, default True
        Escape HTML special characters in text content.
    syntax_highlighting : bool, default True
        Add ``language-*`` classes to code blocks.
    html_passthrough_mode : {"pass-through", "escape", "drop"}, default "escape"
        How to handle HTMLBlock and HTMLInline nodes:
        - "pass-through": Pass through unchanged (use only with trusted content)
        - "escape": HTML-escape the content
        - "drop": Remove HTML content entirely
    language : str, default "en"
        Document language code for the ``<html lang="...">`` attribute.

    """

    standalone: bool = field(
        default=False,
        metadata={"help": "Generate complete HTML document (vs. fragment)", "importance": "core"},
    )
    title: str = field(
        default="Document",
        metadata={"help": "Document title for standalone output", "importance": "advanced"},
    )
    escape_html: bool = field(
        default=DEFAULT_HTML_ESCAPE_HTML,
        metadata={"help": "Escape HTML special characters in text", "importance": "security"},
    )
    syntax_highlighting: bool = field(
        default=True,
        metadata={"help": "Add language classes to code blocks", "importance": "advanced"},
    )
    html_passthrough_mode: HtmlPassthroughMode = field(
        default=DEFAULT_HTML_PASSTHROUGH_MODE,
        metadata={
            "help": "How to handle raw HTML content: pass-through, escape, or drop",
            "choices": HTML_PASSTHROUGH_MODES,
            "importance": "security",
        },
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "Document language code (ISO 639-1)", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the passthrough mode.

        Raises
        ------
        ValueError
            If ``html_passthrough_mode`` is not a known mode.

        """
        if self.html_passthrough_mode not in HTML_PASSTHROUGH_MODES:
            raise ValueError(
                f"html_passthrough_mode must be one of {HTML_PASSTHROUGH_MODES}, got {self.html_passthrough_mode!r}"
            )
