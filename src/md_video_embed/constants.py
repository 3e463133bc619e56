#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md_video_embed.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Block Syntax - the fence tag and marker recognised by the pipeline
3. HTML Rendering - renderer defaults
4. YouTube Provider - defaults, URLs and allow-lists
5. CLI - configuration discovery and exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlPassthroughMode = Literal["pass-through", "escape", "drop"]
YouTubeMode = Literal["local", "embedlite"]

# =============================================================================
# Block Syntax
# =============================================================================

# Fence language that marks a block for the video-embed pipeline
VIDEO_EMBED_TAG = "video-embed"

# Key of the info-string marker naming the provider (``source=youtube``)
SOURCE_MARKER = "source"

# =============================================================================
# HTML Rendering
# =============================================================================

HTML_PASSTHROUGH_MODES: tuple[str, ...] = ("pass-through", "escape", "drop")
DEFAULT_HTML_PASSTHROUGH_MODE: HtmlPassthroughMode = "escape"
DEFAULT_HTML_ESCAPE_HTML = True
DEFAULT_HTML_LANGUAGE = "en"

# =============================================================================
# YouTube Provider
# =============================================================================

YOUTUBE_MODES: tuple[str, ...] = ("local", "embedlite")
DEFAULT_YOUTUBE_MODE: YouTubeMode = "local"
DEFAULT_YOUTUBE_TITLE = "YouTube video"
DEFAULT_YOUTUBE_BUTTON_TEXT = "Play {{ title }}"
DEFAULT_YOUTUBE_BUTTON_ARIA_LABEL = "Play video: {{ title }}"
DEFAULT_YOUTUBE_CONSENT_MESSAGE = (
    "This video is hosted on YouTube. By clicking **Play**, you consent to YouTube setting\n"
    "cookies and loading external content.\n"
)

YOUTUBE_THUMBNAIL_BASE_URL = "https://i.ytimg.com/vi"

# (file name, width descriptor) pairs offered in the thumbnail srcset, largest first
YOUTUBE_THUMBNAIL_TIERS: tuple[tuple[str, str], ...] = (
    ("sddefault.jpg", "640w"),
    ("hqdefault.jpg", "480w"),
    ("mqdefault.jpg", "320w"),
    ("default.jpg", "120w"),
)

EMBEDLITE_BASE_URL = "https://embedlite.com/embed"

# Iframe capabilities always granted; sensor capabilities (accelerometer, gyroscope) never are
EMBED_ALLOW_BASE: tuple[str, ...] = ("encrypted-media", "picture-in-picture")

# Block parameters consumed by the provider instead of passed to the player
YOUTUBE_STRUCTURAL_PARAMS: frozenset[str] = frozenset({"title", "button-text", "button-aria-label", "autoplay"})

YOUTUBE_CONTROLS_VALUES = {"show": "1", "hide": "0"}

# =============================================================================
# CLI
# =============================================================================

CONFIG_FILENAMES: tuple[str, ...] = (
    ".md-video-embed.toml",
    ".md-video-embed.yaml",
    ".md-video-embed.yml",
    ".md-video-embed.json",
)

EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_INPUT_ERROR = 2
