#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md_video_embed/results.py
"""Result values returned by block parsing and by video providers.

Provider validators and renderers report failures as :class:`Rejected`
values rather than exceptions, so the pipeline can fall back to leaving a
block untouched without any try/except at the call site.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rejected:
    """A refused configuration or block, with a human-readable reason."""

    reason: str


@dataclass(frozen=True)
class EmbedResult:
    """Rendered embed HTML plus the document resources it needs.

    Parameters
    ----------
    html : str
        HTML replacing the code block
    flags : any
        Provider-specific resource flags, or None when nothing is needed

    """

    html: str
    flags: Any = None
