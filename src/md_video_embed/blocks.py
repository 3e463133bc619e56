#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/blocks.py
"""Parsing of video code blocks and their info strings.

A video block looks like::

    ```video-embed source=youtube
    dQw4w9WgXcQ
    title=Never Gonna Give You Up
    start=30
    ```

The info string carries the provider marker. The body holds the video
identifier on its first non-blank line and ``key=value`` parameters on the
following lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from md_video_embed.ast import CodeBlock
from md_video_embed.constants import SOURCE_MARKER, VIDEO_EMBED_TAG
from md_video_embed.results import Rejected

logger = logging.getLogger(__name__)

EMPTY_BLOCK = Rejected("empty block")


@dataclass(frozen=True)
class VideoBlock:
    """Parsed body of a video block.

    Parameters
    ----------
    video_id : str
        Video identifier from the first non-blank line
    params : dict
        Parameters from the remaining lines; the last value wins for repeated keys

    """

    video_id: str
    params: dict[str, str] = field(default_factory=dict)


def parse_video_block(content: str) -> VideoBlock | Rejected:
    """Parse the body of a video block.

    Every line is trimmed and blank lines are discarded wherever they occur.
    The first remaining line is the video identifier, taken verbatim even if
    it contains ``=``. Each later line is split on its first ``=``; lines
    without ``=``, or whose key or value is empty, are ignored.

    Parameters
    ----------
    content : str
        Literal block body

    Returns
    -------
    VideoBlock or Rejected
        The parsed block, or ``Rejected("empty block")`` when the body has no
        non-blank lines

    Examples
    --------
    >>> parse_video_block("dQw4w9WgXcQ\\ntitle=Test Video\\nstart=30")
    VideoBlock(video_id='dQw4w9WgXcQ', params={'title': 'Test Video', 'start': '30'})

    >>> parse_video_block("\\n  \\n")
    Rejected(reason='empty block')

    """
    lines = [line.strip() for line in content.split("\n")]
    lines = [line for line in lines if line]

    if not lines:
        return EMPTY_BLOCK

    video_id, rest = lines[0], lines[1:]
    params: dict[str, str] = {}

    for line in rest:
        key, sep, value = line.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not key or not value:
            logger.debug("Ignoring video block line without key=value: %r", line)
            continue
        params[key] = value

    return VideoBlock(video_id=video_id, params=params)


def video_block_info(node: CodeBlock) -> Optional[str]:
    """Return the info text following the ``video-embed`` tag, if any.

    Only fenced blocks whose info string is the tag followed by more text
    qualify; a bare ``video-embed`` fence is ordinary code.
    """
    if node.language != VIDEO_EMBED_TAG:
        return None
    info = node.metadata.get("info_attrs")
    if not info:
        return None
    return str(info)


def parse_source(info: str) -> Optional[str]:
    """Extract the provider identifier from a ``source=<value>`` marker.

    Parameters
    ----------
    info : str
        Info text following the ``video-embed`` tag

    Returns
    -------
    str or None
        The provider identifier, or None when ``info`` is not exactly
        ``source=<value>`` with a non-empty value

    Examples
    --------
    >>> parse_source("source=youtube")
    'youtube'
    >>> parse_source("src=youtube") is None
    True

    """
    key, sep, value = info.partition("=")
    if not sep or key != SOURCE_MARKER or not value:
        return None
    return value
