#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/providers/base.py
"""Contract implemented by every video provider.

A provider supports one video platform. The pipeline calls it in four
places:

1. ``config`` once per attach, to validate and default the user's options.
2. ``embed_html`` once per matching block, to render the embed.
3. ``merge_document_flags`` to fold the resource flags of successive blocks.
4. ``document_html`` once per document, to render shared script/style
   resources from the folded flags.

Providers never raise for bad block content or bad options; they return a
:class:`~md_video_embed.results.Rejected` value instead.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from md_video_embed.exceptions import VideoEmbedError
from md_video_embed.results import EmbedResult, Rejected


class VideoProvider(ABC):
    """Abstract base class for video embed providers.

    Attributes
    ----------
    name : str
        Lower-case identifier used in ``source=<name>`` markers and as the
        key of the provider's attach-time options.

    Examples
    --------
    A minimal provider that links to the video instead of embedding it:

        >>> class LinkProvider(VideoProvider):
        ...     name = "link"
        ...
        ...     def config(self, options):
        ...         return dict(options) if isinstance(options, dict) else Rejected("not a dict")
        ...
        ...     def embed_html(self, content, config):
        ...         block = parse_video_block(content)
        ...         if isinstance(block, Rejected):
        ...             return block
        ...         return EmbedResult(f'<a href="{block.video_id}">video</a>')
        ...
        ...     def merge_document_flags(self, existing, incoming):
        ...         return incoming
        ...
        ...     def document_html(self, flags):
        ...         return ""

    """

    name: str = ""

    @abstractmethod
    def config(self, options: Any) -> Any:
        """Validate and normalize provider options.

        Parameters
        ----------
        options : any
            Raw options supplied at attach time

        Returns
        -------
        any or Rejected
            Immutable normalized configuration, or Rejected with a
            human-readable reason

        """

    @abstractmethod
    def embed_html(self, content: str, config: Any) -> EmbedResult | Rejected:
        """Render the embed HTML for one block.

        Parameters
        ----------
        content : str
            Raw block body; the provider parses it
        config : any
            Configuration previously returned by ``config``

        Returns
        -------
        EmbedResult or Rejected
            Rendered HTML with resource flags, or Rejected when the block
            cannot be embedded

        """

    @abstractmethod
    def merge_document_flags(self, existing: Any, incoming: Any) -> Any:
        """Combine flags from two blocks of the same document.

        Must be associative and independent of block order.
        """

    @abstractmethod
    def document_html(self, flags: Any) -> str:
        """Render document-level resources for the merged ``flags``.

        Returns an empty string when no resources are needed.
        """

    def default_config(self) -> Any:
        """Configuration used when a block references a provider with no options.

        Raises
        ------
        VideoEmbedError
            If the provider rejects its own defaults

        """
        result = self.config({})
        if isinstance(result, Rejected):
            raise VideoEmbedError(f"Provider {self.name!r} rejected its default configuration: {result.reason}")
        return result

    def __repr__(self) -> str:
        """Return a short representation naming the provider."""
        return f"{type(self).__name__}(name={self.name!r})"
