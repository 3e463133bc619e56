"""Pytest configuration and shared fixtures for the md_video_embed test suite."""

import os
from typing import Callable

import pytest
from hypothesis import Phase, Verbosity, settings

from md_video_embed import attach
from md_video_embed.providers import YouTubeProvider

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by hypothesis")


@pytest.fixture
def convert() -> Callable[..., str]:
    """Provide a markdown-to-HTML helper taking optional provider options.

    Returns
    -------
    callable
        ``convert(markdown, options=None)`` returning rendered HTML

    """

    def _convert(markdown: str, options=None) -> str:
        return attach(options).to_html(markdown)

    return _convert


@pytest.fixture
def stub_fragment_provider() -> YouTubeProvider:
    """Provide a YouTube provider whose fragments are wrapped in ``[[...]]`` instead of rendered."""
    return YouTubeProvider(fragment_renderer=lambda text: f"[[{text}]]")


@pytest.fixture
def youtube_block() -> Callable[..., str]:
    """Provide a builder for ``video-embed source=youtube`` markdown blocks.

    Returns
    -------
    callable
        ``youtube_block(video_id, **params)``; underscores in parameter names
        become dashes

    """

    def _block(video_id: str = "test123", **params: str) -> str:
        lines = ["```video-embed source=youtube", video_id]
        lines.extend(f"{key.replace('_', '-')}={value}" for key, value in params.items())
        lines.append("```")
        return "\n".join(lines) + "\n"

    return _block
