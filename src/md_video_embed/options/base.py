"""Frozen option base classes shared by the parser, the renderer and providers.

All option objects are immutable. Derive a variant with ``create_updated``::

    >>> opts = HtmlRendererOptions()
    >>> embed_opts = opts.create_updated(html_passthrough_mode="pass-through")

"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Adds ``create_updated`` to a frozen dataclass."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Parameters
        ----------
        **kwargs : Any
            New values keyed by field name

        Returns
        -------
        Self
            Updated copy; the receiver is unchanged

        Raises
        ------
        TypeError
            If a keyword does not name a field

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Common base of renderer options."""


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Common base of parser options."""
