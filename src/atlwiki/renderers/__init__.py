#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers converting document trees to output formats."""

from atlwiki.renderers.atlassian import AtlassianWikiRenderer
from atlwiki.renderers.base import BaseRenderer
from atlwiki.renderers.context import RenderContext
from atlwiki.renderers.dispatch import DispatchRegistry, NodeHandlers

__all__ = [
    "AtlassianWikiRenderer",
    "BaseRenderer",
    "DispatchRegistry",
    "NodeHandlers",
    "RenderContext",
]
