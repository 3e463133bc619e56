#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/pipeline.py
"""Video-embed document pipeline.

Processing runs in three steps:

1. ``attach`` validates every recognised provider's options once and returns
   a :class:`VideoEmbedPlugin`.
2. The traversal pass (:func:`embed_video_blocks`) replaces each matching
   ``video-embed`` code block with an HTML block and folds the resource flags
   reported by its provider.
3. The injection pass (:func:`inject_resources`) prepends each provider's
   document-level resources (script, style) once, based on the merged flags.

Problems with individual blocks never raise; the block is left as ordinary
code. Only invalid attach-time options raise
:class:`~md_video_embed.exceptions.InvalidConfigurationError`.

Examples
--------
    >>> from md_video_embed import attach
    >>> plugin = attach({"youtube": {"mode": "embedlite"}})
    >>> html = plugin.to_html("```video-embed source=youtube\\ndQw4w9WgXcQ\\n```")

"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

from md_video_embed.ast import CodeBlock, Document, HTMLBlock, Node, NodeTransformer
from md_video_embed.blocks import parse_source, video_block_info
from md_video_embed.exceptions import InvalidConfigurationError
from md_video_embed.options.html import HtmlRendererOptions
from md_video_embed.options.markdown import MarkdownParserOptions
from md_video_embed.parsers.markdown import markdown_to_ast
from md_video_embed.providers.base import VideoProvider
from md_video_embed.providers.registry import ProviderRegistry, provider_registry
from md_video_embed.renderers.html import HtmlRenderer
from md_video_embed.results import Rejected

logger = logging.getLogger(__name__)

ProviderOptions = Union[Mapping[Any, Any], Iterable[tuple[Any, Any]], None]

RESOURCE_METADATA_KEY = "video_embed_resource"


def validate_provider_options(
    options: ProviderOptions,
    registry: ProviderRegistry = provider_registry,
) -> MappingProxyType[str, Any]:
    """Validate the options of every recognised provider.

    Parameters
    ----------
    options : mapping, iterable of pairs, or None
        Raw options keyed by provider identifier. Identifiers are converted
        with ``str``.
    registry : ProviderRegistry
        Providers to validate against

    Returns
    -------
    MappingProxyType
        Read-only mapping from provider identifier to validated configuration.
        Identifiers not in the registry are skipped.

    Raises
    ------
    InvalidConfigurationError
        On the first provider that rejects its options

    """
    if options is None:
        items: Iterable[tuple[Any, Any]] = ()
    elif isinstance(options, Mapping):
        items = options.items()
    else:
        items = options

    validated: dict[str, Any] = {}
    for raw_name, provider_options in items:
        name = str(raw_name)
        provider = registry.get(name)
        if provider is None:
            logger.debug("Skipping options for unknown video provider %r", name)
            continue

        result = provider.config(provider_options)
        if isinstance(result, Rejected):
            raise InvalidConfigurationError(name, result.reason, provider_options)
        validated[name] = result

    return MappingProxyType(validated)


class VideoEmbedTransform(NodeTransformer):
    """Replace ``video-embed`` code blocks with provider HTML.

    After ``transform`` returns, ``document_flags`` maps each provider that
    embedded at least one block to its merged resource flags, in the order
    the providers were first seen.

    Parameters
    ----------
    provider_configs : Mapping[str, any]
        Validated configurations keyed by provider identifier
    registry : ProviderRegistry
        Providers available for lookup

    """

    def __init__(self, provider_configs: Mapping[str, Any], registry: ProviderRegistry = provider_registry):
        super().__init__()
        self.provider_configs = provider_configs
        self.registry = registry
        self.document_flags: dict[str, Any] = {}

    def visit_code_block(self, node: CodeBlock) -> Node | None:
        """Embed the block when it names a known provider, else copy it unchanged."""
        info = video_block_info(node)
        if info is None:
            return super().visit_code_block(node)

        source = parse_source(info)
        if source is None:
            logger.debug("Video block without a valid source marker: %r", info)
            return super().visit_code_block(node)

        provider = self.registry.get(source)
        if provider is None:
            return super().visit_code_block(node)

        try:
            config = self.provider_configs.get(source)
            if config is None:
                config = provider.default_config()
            result = provider.embed_html(node.content, config)
        except Exception as exc:
            logger.warning("Video provider %r failed to embed block: %s", source, exc)
            return super().visit_code_block(node)

        if isinstance(result, Rejected):
            logger.debug("Video provider %r rejected block: %s", source, result.reason)
            return super().visit_code_block(node)

        if result.flags is not None:
            self._fold_flags(provider, result.flags)

        return HTMLBlock(
            content=result.html,
            metadata=node.metadata.copy(),
            source_location=node.source_location,
        )

    def _fold_flags(self, provider: VideoProvider, flags: Any) -> None:
        existing = self.document_flags.get(provider.name)
        if existing is None:
            self.document_flags[provider.name] = flags
        else:
            self.document_flags[provider.name] = provider.merge_document_flags(existing, flags)


def embed_video_blocks(
    document: Document,
    provider_configs: Mapping[str, Any],
    registry: ProviderRegistry = provider_registry,
) -> tuple[Document, dict[str, Any]]:
    """Run the traversal pass over ``document``.

    Parameters
    ----------
    document : Document
        Parsed document; it is not modified
    provider_configs : Mapping[str, any]
        Validated configurations keyed by provider identifier
    registry : ProviderRegistry
        Providers available for lookup

    Returns
    -------
    tuple of (Document, dict)
        The rewritten document and the merged flags per provider identifier

    """
    transformer = VideoEmbedTransform(provider_configs, registry)
    new_document = transformer.transform(document)
    return new_document, transformer.document_flags  # type: ignore[return-value]


def inject_resources(
    document: Document,
    document_flags: Mapping[str, Any],
    registry: ProviderRegistry = provider_registry,
) -> Document:
    """Prepend each provider's document-level resources to ``document``.

    Providers are processed in the order of ``document_flags``; the first one
    ends up topmost. Providers returning an empty string contribute nothing.

    Parameters
    ----------
    document : Document
        Document produced by the traversal pass
    document_flags : Mapping[str, any]
        Merged flags keyed by provider identifier
    registry : ProviderRegistry
        Providers available for lookup

    Returns
    -------
    Document
        New document with resource blocks at the top, or ``document`` itself
        when nothing needs injecting

    """
    resource_nodes: list[Node] = []
    for name, flags in document_flags.items():
        provider = registry.get(name)
        if provider is None:
            continue
        html = provider.document_html(flags)
        if html:
            resource_nodes.append(HTMLBlock(content=html, metadata={RESOURCE_METADATA_KEY: name}))

    return document.prepend_nodes(resource_nodes)


class VideoEmbedPlugin:
    """Validated video-embed configuration bound to a provider registry.

    The plugin holds only immutable state and can be reused across documents.

    Parameters
    ----------
    options : mapping, iterable of pairs, or None
        Raw provider options keyed by provider identifier
    registry : ProviderRegistry, optional
        Providers to use instead of the built-in registry

    Raises
    ------
    InvalidConfigurationError
        If a recognised provider rejects its options

    """

    def __init__(self, options: ProviderOptions = None, *, registry: Optional[ProviderRegistry] = None):
        self.registry = registry or provider_registry
        self.provider_configs = validate_provider_options(options, self.registry)

    def apply(self, document: Document) -> Document:
        """Run the traversal and injection passes over ``document``."""
        document, document_flags = embed_video_blocks(document, self.provider_configs, self.registry)
        return inject_resources(document, document_flags, self.registry)

    def render(self, document: Document, renderer_options: Optional[HtmlRendererOptions] = None) -> str:
        """Apply the plugin and render ``document`` with raw HTML passed through."""
        renderer_options = renderer_options or HtmlRendererOptions()
        renderer_options = renderer_options.create_updated(html_passthrough_mode="pass-through")
        return HtmlRenderer(renderer_options).render_to_string(self.apply(document))

    def to_html(
        self,
        markdown: str,
        renderer_options: Optional[HtmlRendererOptions] = None,
        parser_options: Optional[MarkdownParserOptions] = None,
    ) -> str:
        """Convert markdown text to HTML with video blocks embedded.

        Parameters
        ----------
        markdown : str
            Markdown source
        renderer_options : HtmlRendererOptions, optional
            HTML rendering options; ``html_passthrough_mode`` is always
            switched to ``"pass-through"``
        parser_options : MarkdownParserOptions, optional
            Markdown parsing options

        Returns
        -------
        str
            Rendered HTML

        """
        return self.render(markdown_to_ast(markdown, parser_options), renderer_options)

    def __repr__(self) -> str:
        return f"VideoEmbedPlugin(providers={list(self.provider_configs)!r})"


def attach(options: ProviderOptions = None, *, registry: Optional[ProviderRegistry] = None) -> VideoEmbedPlugin:
    """Validate provider options and return a ready-to-use plugin.

    Examples
    --------
        >>> plugin = attach({"youtube": {"consent_message": "See our [privacy policy](/privacy)"}})
        >>> plugin.provider_configs["youtube"].mode
        'local'

    """
    return VideoEmbedPlugin(options, registry=registry)


def to_html(
    markdown: str,
    options: ProviderOptions = None,
    *,
    renderer_options: Optional[HtmlRendererOptions] = None,
) -> str:
    """Convert markdown to HTML with video blocks embedded, in one call."""
    return attach(options).to_html(markdown, renderer_options)
