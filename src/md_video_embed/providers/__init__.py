"""Video providers and the registry used to look them up."""

from md_video_embed.providers.base import VideoProvider
from md_video_embed.providers.registry import ProviderRegistry, provider_registry
from md_video_embed.providers.youtube import YouTubeConfig, YouTubeFlags, YouTubeProvider

__all__ = [
    "VideoProvider",
    "ProviderRegistry",
    "provider_registry",
    "YouTubeConfig",
    "YouTubeFlags",
    "YouTubeProvider",
]
