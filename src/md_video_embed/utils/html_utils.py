#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/utils/html_utils.py
"""HTML escaping and raw-HTML handling helpers."""

from __future__ import annotations

import html

from md_video_embed.constants import HtmlPassthroughMode


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return html.escape(text, quote=True)


def sanitize_html_content(content: str, mode: HtmlPassthroughMode = "escape") -> str:
    """Handle raw HTML content according to the specified mode.

    Parameters
    ----------
    content : str
        HTML content to handle
    mode : {"pass-through", "escape", "drop"}, default "escape"
        - "pass-through": Return content unchanged (for trusted sources)
        - "escape": HTML-escape all content
        - "drop": Return empty string

    Returns
    -------
    str
        Processed HTML content

    Examples
    --------
    >>> sanitize_html_content("<script>alert('xss')</script>", mode="escape")
    '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;'

    >>> sanitize_html_content("<b>hi</b>", mode="drop")
    ''

    """
    if mode == "pass-through":
        return content

    if mode == "drop":
        return ""

    return html.escape(content)
