#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/providers/youtube.py
"""YouTube video provider.

Two embedding modes are supported:

``local`` (default)
    Renders a thumbnail, a consent message and a play button. No request is
    made to YouTube until the reader clicks; the injected click-to-load script
    then swaps in a ``youtube-nocookie.com`` iframe.

``embedlite``
    Renders an iframe pointing at embedlite.com straight away. No script is
    needed.

Configuration Options
---------------------
mode : {"local", "embedlite"}, default "local"
    Embedding mode. The legacy key ``provider`` is accepted when ``mode`` is
    absent.
consent_message : str
    Markdown fragment shown above the play button in local mode.
use_default_css : bool, default False
    Inject the bundled stylesheet once per document.
button_text : str, default "Play {{ title }}"
    Markdown fragment used as the play button label.
button_aria_label : str, default "Play video: {{ title }}"
    Accessible label of the play button.

The consent message, button text and aria label support the ``{{ title }}``
placeholder.

Block Parameters
----------------
``mode`` overrides the configured mode for one block. ``title``,
``button-text``, ``button-aria-label`` and ``autoplay`` are consumed by the
provider. Everything else (``start``, ``end``, ``mute``, ``loop``,
``controls``...) is forwarded to the player as a query string, with
``controls=show|hide`` mapped to ``1|0``.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

from md_video_embed.blocks import parse_video_block
from md_video_embed.constants import (
    DEFAULT_YOUTUBE_BUTTON_ARIA_LABEL,
    DEFAULT_YOUTUBE_BUTTON_TEXT,
    DEFAULT_YOUTUBE_CONSENT_MESSAGE,
    DEFAULT_YOUTUBE_MODE,
    DEFAULT_YOUTUBE_TITLE,
    EMBED_ALLOW_BASE,
    EMBEDLITE_BASE_URL,
    YOUTUBE_CONTROLS_VALUES,
    YOUTUBE_MODES,
    YOUTUBE_STRUCTURAL_PARAMS,
    YOUTUBE_THUMBNAIL_BASE_URL,
    YOUTUBE_THUMBNAIL_TIERS,
    YouTubeMode,
)
from md_video_embed.options.base import CloneFrozenMixin
from md_video_embed.providers.base import VideoProvider
from md_video_embed.results import EmbedResult, Rejected
from md_video_embed.utils.fragments import FragmentRenderer, render_markdown_fragment, replace_text_params
from md_video_embed.utils.html_utils import escape_html

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).parent / "assets" / "youtube"

SCRIPT_BODY = "<script>" + (ASSETS_DIR / "click_to_load.js").read_text(encoding="utf-8") + "</script>"
STYLE_BODY = "<style>" + (ASSETS_DIR / "default.css").read_text(encoding="utf-8") + "</style>"

_TEXT_OPTIONS = ("consent_message", "button_text", "button_aria_label")


@dataclass(frozen=True)
class YouTubeConfig(CloneFrozenMixin):
    """Validated YouTube provider configuration.

    Parameters
    ----------
    mode : {"local", "embedlite"}, default "local"
        Default embedding mode for blocks without a ``mode`` parameter
    consent_message : str
        Markdown fragment shown in the local-mode overlay
    use_default_css : bool, default False
        Whether the bundled stylesheet is injected
    button_text : str, default "Play {{ title }}"
        Markdown fragment used as the play button label
    button_aria_label : str, default "Play video: {{ title }}"
        Accessible label of the play button

    """

    mode: YouTubeMode = DEFAULT_YOUTUBE_MODE
    consent_message: str = DEFAULT_YOUTUBE_CONSENT_MESSAGE
    use_default_css: bool = False
    button_text: str = DEFAULT_YOUTUBE_BUTTON_TEXT
    button_aria_label: str = DEFAULT_YOUTUBE_BUTTON_ARIA_LABEL


@dataclass(frozen=True)
class YouTubeFlags:
    """Document resources needed by the YouTube blocks seen so far."""

    script: bool = False
    style: bool = False


def normalize_title(params: Mapping[str, str]) -> str:
    """Return the block title, or the default title when missing or blank."""
    title = params.get("title", "")
    return title if title.strip() else DEFAULT_YOUTUBE_TITLE


def build_query_string(params: Mapping[str, str]) -> str:
    """Build the player query string from block parameters.

    Parameters consumed by the provider are left out, ``controls=show|hide``
    becomes ``controls=1|0`` and the remaining pairs keep their block order.

    Examples
    --------
    >>> build_query_string({"title": "Intro", "start": "30", "controls": "hide"})
    'start=30&controls=0'

    """
    pairs = []
    for key, value in params.items():
        if key in YOUTUBE_STRUCTURAL_PARAMS:
            continue
        if key == "controls":
            value = YOUTUBE_CONTROLS_VALUES.get(value, value)
        pairs.append(f"{escape_html(key)}={escape_html(value)}")
    return "&".join(pairs)


class YouTubeProvider(VideoProvider):
    """Privacy-respecting YouTube embeds.

    Parameters
    ----------
    fragment_renderer : callable, optional
        Function rendering a markdown snippet to HTML. Defaults to
        :func:`~md_video_embed.utils.fragments.render_markdown_fragment`.

    """

    name = "youtube"

    def __init__(self, fragment_renderer: Optional[FragmentRenderer] = None):
        self.fragment_renderer = fragment_renderer or render_markdown_fragment

    def config(self, options: Any) -> YouTubeConfig | Rejected:
        """Validate YouTube options and fill in defaults.

        Unknown keys are ignored.
        """
        if not isinstance(options, Mapping):
            return Rejected(f"Configuration must be a mapping, got: {options!r}")

        mode = options.get("mode", options.get("provider", DEFAULT_YOUTUBE_MODE))
        if mode not in YOUTUBE_MODES:
            return Rejected(f"Invalid YouTube mode {mode!r} (allowed: {list(YOUTUBE_MODES)!r})")

        for key in _TEXT_OPTIONS:
            if key in options and not isinstance(options[key], str):
                return Rejected(f"Option {key!r} must be a string, got: {options[key]!r}")

        use_default_css = options.get("use_default_css", False)
        if not isinstance(use_default_css, bool):
            return Rejected(f"Option 'use_default_css' must be a boolean, got: {use_default_css!r}")

        return YouTubeConfig(
            mode=mode,
            consent_message=options.get("consent_message", DEFAULT_YOUTUBE_CONSENT_MESSAGE),
            use_default_css=use_default_css,
            button_text=options.get("button_text", DEFAULT_YOUTUBE_BUTTON_TEXT),
            button_aria_label=options.get("button_aria_label", DEFAULT_YOUTUBE_BUTTON_ARIA_LABEL),
        )

    def embed_html(self, content: str, config: YouTubeConfig) -> EmbedResult | Rejected:
        """Render a block in the block's mode, falling back to the configured one."""
        block = parse_video_block(content)
        if isinstance(block, Rejected):
            return block

        mode = block.params.get("mode", config.mode)
        if mode == "local":
            html = self._build_local_embed(block.video_id, block.params, config)
            return EmbedResult(html, YouTubeFlags(script=True, style=config.use_default_css))
        if mode == "embedlite":
            html = self._build_embedlite_embed(block.video_id, block.params)
            return EmbedResult(html, YouTubeFlags(script=False, style=config.use_default_css))

        logger.debug("Unknown YouTube mode %r for video %r", mode, block.video_id)
        return Rejected(f"Invalid YouTube mode {mode!r} (allowed: {list(YOUTUBE_MODES)!r})")

    def merge_document_flags(self, existing: YouTubeFlags, incoming: YouTubeFlags) -> YouTubeFlags:
        """Combine flags; a resource stays required once any block needs it."""
        return YouTubeFlags(
            script=existing.script or incoming.script,
            style=existing.style or incoming.style,
        )

    def document_html(self, flags: YouTubeFlags) -> str:
        """Render the click-to-load script and default stylesheet as needed."""
        parts = []
        if flags.script:
            parts.append(SCRIPT_BODY)
        if flags.style:
            parts.append(STYLE_BODY)
        return "".join(parts)

    def _build_local_embed(self, video_id: str, params: Mapping[str, str], config: YouTubeConfig) -> str:
        title = normalize_title(params)
        replacements = {"title": title}

        button_text = self.fragment_renderer(
            replace_text_params(params.get("button-text", config.button_text), replacements)
        )
        button_aria = replace_text_params(params.get("button-aria-label", config.button_aria_label), replacements)
        consent_html = self.fragment_renderer(replace_text_params(config.consent_message, replacements))

        query_string = build_query_string(params)
        data_params_attr = f' data-video-embed-params="{query_string}"' if query_string else ""
        data_allow_attr = ' data-video-embed-allow="true"' if params.get("autoplay") == "true" else ""

        vid = escape_html(video_id)
        title_attr = escape_html(title)
        thumb = f"{YOUTUBE_THUMBNAIL_BASE_URL}/{vid}"
        srcset = ",\n               ".join(f"{thumb}/{name} {width}" for name, width in YOUTUBE_THUMBNAIL_TIERS)

        return (
            f'<div class="video-embed video-embed--youtube" data-video-embed-id="{vid}"'
            f"{data_params_attr}{data_allow_attr}>\n"
            f'  <img class="video-embed__thumbnail" id="yt-thumb-{vid}"\n'
            f'       src="{thumb}/{YOUTUBE_THUMBNAIL_TIERS[0][0]}"\n'
            f'       srcset="{srcset}"\n'
            f'       sizes="(min-width: 640px) 640px, 100vw"\n'
            f'       alt="{title_attr}"\n'
            f'       loading="lazy">\n'
            f'  <div class="video-embed__overlay">\n'
            f'    <h3 class="video-embed__title">{title_attr}</h3>\n'
            f'    <div class="video-embed__consent">{consent_html}</div>\n'
            f'    <button class="video-embed__show" aria-label="{escape_html(button_aria)}">\n'
            f"      {button_text}\n"
            f"    </button>\n"
            f"  </div>\n"
            f"</div>\n"
        )

    def _build_embedlite_embed(self, video_id: str, params: Mapping[str, str]) -> str:
        title = normalize_title(params)

        query_string = build_query_string(params)
        query = f"?{query_string}" if query_string else ""

        allow_parts = list(EMBED_ALLOW_BASE)
        if params.get("autoplay") == "true":
            allow_parts.append("autoplay")

        return (
            f'<div class="video-embed video-embed--embedlite">\n'
            f'  <iframe src="{EMBEDLITE_BASE_URL}/{escape_html(video_id)}{query}"\n'
            f'          title="{escape_html(title)}"\n'
            f'          frameborder="0"\n'
            f'          allow="{"; ".join(allow_parts)}"\n'
            f'          referrerpolicy="strict-origin-when-cross-origin"\n'
            f"          allowfullscreen\n"
            f'          loading="lazy">\n'
            f"  </iframe>\n"
            f"</div>\n"
        )
