#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for atlwiki renderers.

Each renderer has its own frozen Options dataclass derived from
``BaseRendererOptions``.
"""

from __future__ import annotations

from atlwiki.options.atlassian import AtlassianRendererOptions
from atlwiki.options.base import BaseRendererOptions, CloneFrozenMixin

__all__ = [
    "AtlassianRendererOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
]
