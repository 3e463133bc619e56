#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/utils/fragments.py
"""Placeholder substitution and markdown-fragment rendering.

Providers accept short markdown snippets (consent messages, button text) that
may contain ``{{ name }}`` placeholders. Placeholders are substituted first,
verbatim, and the result is then rendered as a markdown fragment.
"""

from __future__ import annotations

import re
from typing import Callable, Mapping

from md_video_embed.options.html import HtmlRendererOptions

FragmentRenderer = Callable[[str], str]


def _placeholder_pattern(key: str) -> re.Pattern[str]:
    return re.compile(r"\{\{\s*" + re.escape(key) + r"\s*\}\}")


def replace_text_params(text: str, params: Mapping[str, object]) -> str:
    """Replace ``{{ key }}`` placeholders in ``text`` with values from ``params``.

    Whitespace inside the braces is ignored, so ``{{title}}`` and
    ``{{ title }}`` are equivalent. Values are inserted verbatim (no markdown
    or HTML escaping). Placeholders for keys missing from ``params`` are left
    untouched.

    Parameters
    ----------
    text : str
        Template text
    params : Mapping[str, object]
        Replacement values; non-string values are converted with ``str``

    Returns
    -------
    str
        Text with every matching placeholder replaced

    Examples
    --------
    >>> replace_text_params("Play {{ title }}", {"title": "Intro"})
    'Play Intro'

    """
    for key, value in params.items():
        replacement = str(value)
        text = _placeholder_pattern(key).sub(lambda _match: replacement, text)
    return text


def render_markdown_fragment(text: str) -> str:
    """Render a short markdown snippet to HTML.

    The snippet goes through the same parser and renderer as full documents,
    with default (escaping) options, and surrounding whitespace is stripped.

    Parameters
    ----------
    text : str
        Markdown text, ideally inline elements only (links, emphasis)

    Returns
    -------
    str
        Rendered HTML

    """
    from md_video_embed.parsers.markdown import markdown_to_ast
    from md_video_embed.renderers.html import HtmlRenderer

    document = markdown_to_ast(text)
    return HtmlRenderer(HtmlRendererOptions()).render_to_string(document).strip()
