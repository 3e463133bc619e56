"""md_video_embed - privacy-respecting video embeds for markdown documents.

Fenced code blocks tagged ``video-embed`` are replaced with embed HTML from a
pluggable video provider. Document-level resources (click-to-load script,
default stylesheet) are injected once per document, only when needed.

Block Syntax
------------
::

    ```video-embed source=youtube
    dQw4w9WgXcQ
    title=Never Gonna Give You Up
    start=30
    ```

- Info string: ``video-embed source=<provider>``
- First non-blank line: video identifier
- Following lines: ``key=value`` parameters (provider specific)

Supported providers:

- ``youtube``: consent-gated thumbnail with click-to-load
  ``youtube-nocookie.com`` iframe (``local`` mode), or a direct embedlite.com
  iframe (``embedlite`` mode)

Examples
--------
One-off conversion:

    >>> from md_video_embed import to_html
    >>> html = to_html(markdown_text)

Reusable plugin with provider options:

    >>> from md_video_embed import attach
    >>> plugin = attach({"youtube": {"consent_message": "See our [privacy policy](/privacy)"}})
    >>> html = plugin.to_html(markdown_text)

Working with the document tree directly:

    >>> from md_video_embed.parsers import markdown_to_ast
    >>> doc = plugin.apply(markdown_to_ast(markdown_text))

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from md_video_embed.blocks import VideoBlock, parse_video_block
from md_video_embed.exceptions import (
    ConfigFileError,
    InvalidConfigurationError,
    ValidationError,
    VideoEmbedError,
)
from md_video_embed.options import HtmlRendererOptions, MarkdownParserOptions
from md_video_embed.pipeline import (
    VideoEmbedPlugin,
    VideoEmbedTransform,
    attach,
    embed_video_blocks,
    inject_resources,
    to_html,
)
from md_video_embed.providers import (
    ProviderRegistry,
    VideoProvider,
    YouTubeConfig,
    YouTubeFlags,
    YouTubeProvider,
    provider_registry,
)
from md_video_embed.results import EmbedResult, Rejected
from md_video_embed.utils.fragments import render_markdown_fragment, replace_text_params

__all__ = [
    "__version__",
    # Pipeline
    "attach",
    "to_html",
    "VideoEmbedPlugin",
    "VideoEmbedTransform",
    "embed_video_blocks",
    "inject_resources",
    # Block helpers
    "VideoBlock",
    "parse_video_block",
    "replace_text_params",
    "render_markdown_fragment",
    # Providers
    "VideoProvider",
    "ProviderRegistry",
    "provider_registry",
    "YouTubeProvider",
    "YouTubeConfig",
    "YouTubeFlags",
    "EmbedResult",
    "Rejected",
    # Options
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    # Exceptions
    "VideoEmbedError",
    "ValidationError",
    "InvalidConfigurationError",
    "ConfigFileError",
]
