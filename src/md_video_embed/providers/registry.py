#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/providers/registry.py
"""Lookup of video providers by identifier.

The registry is built once and never changes afterwards. A miss is not an
error: blocks naming an unknown provider are simply left alone.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from md_video_embed.providers.base import VideoProvider
from md_video_embed.providers.youtube import YouTubeProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Read-only mapping from provider identifier to provider instance.

    Parameters
    ----------
    providers : iterable of VideoProvider
        Providers to register, keyed by their ``name``

    Raises
    ------
    ValueError
        If two providers share a name or a provider has no name

    Examples
    --------
    >>> registry = ProviderRegistry([YouTubeProvider()])
    >>> registry.get("youtube")
    YouTubeProvider(name='youtube')
    >>> registry.get("vimeo") is None
    True

    """

    def __init__(self, providers: Iterable[VideoProvider]):
        providers_by_name: dict[str, VideoProvider] = {}
        for provider in providers:
            if not provider.name:
                raise ValueError(f"Provider {provider!r} has no name")
            if provider.name in providers_by_name:
                raise ValueError(f"Duplicate provider name: {provider.name!r}")
            providers_by_name[provider.name] = provider
        self._providers = MappingProxyType(providers_by_name)

    def get(self, name: str) -> Optional[VideoProvider]:
        """Return the provider registered as ``name``, or None."""
        provider = self._providers.get(name)
        if provider is None:
            logger.debug("No video provider registered as %r", name)
        return provider

    def names(self) -> list[str]:
        """Return the registered identifiers in registration order."""
        return list(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __iter__(self) -> Iterator[VideoProvider]:
        return iter(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)


provider_registry = ProviderRegistry([YouTubeProvider()])
