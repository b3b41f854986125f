#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/api.py
"""Top-level conversion functions.

``convert`` returns the wiki markup for a tree as a string; ``render`` writes
it to a file path or file-like object. Both accept an options object and/or
individual option values as keyword arguments, the latter overriding the
former.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from atlwiki.ast.nodes import Node
from atlwiki.options.atlassian import AtlassianRendererOptions
from atlwiki.renderers.atlassian import AtlassianWikiRenderer
from atlwiki.renderers.base import SourceInput

logger = logging.getLogger(__name__)


def _resolve_options(options: Optional[AtlassianRendererOptions], **kwargs: Any) -> Optional[AtlassianRendererOptions]:
    if kwargs and options:
        return options.create_updated(**kwargs)
    if kwargs:
        return AtlassianRendererOptions(**kwargs)
    return options


def convert(
    root: Node,
    source: SourceInput = b"",
    options: Optional[AtlassianRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Convert a document tree to Atlassian wiki markup.

    Parameters
    ----------
    root : Node
        Root of the tree, usually a Document
    source : bytes or str, default = b""
        Source document the tree's segments refer to
    options : AtlassianRendererOptions, optional
        Rendering options
    kwargs : Any
        Individual option values that override ``options``

    Returns
    -------
    str
        The rendered markup, exactly as emitted

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an AtlassianRendererOptions instance
    RenderingError
        If rendering fails

    Examples
    --------
        >>> from atlwiki.ast import DocumentBuilder
        >>> builder = DocumentBuilder()
        >>> doc = builder.add_paragraph(builder.strong("bold")).get_document()
        >>> convert(doc, builder.get_source())
        '\\n*bold*\\n'

    """
    renderer = AtlassianWikiRenderer(_resolve_options(options, **kwargs))
    return renderer.convert(root, source)


def render(
    root: Node,
    output: Union[str, Path, IO[bytes], IO[str]],
    source: SourceInput = b"",
    options: Optional[AtlassianRendererOptions] = None,
    **kwargs: Any,
) -> None:
    """Convert a document tree and write the markup to ``output``.

    Paths and binary streams receive UTF-8 encoded text. Nothing is written
    if the conversion fails.

    Raises
    ------
    RenderingError
        If rendering fails
    OutputWriteError
        If the destination cannot be written

    """
    renderer = AtlassianWikiRenderer(_resolve_options(options, **kwargs))
    renderer.render(root, output, source)
    logger.debug("Rendered %s tree to %r", root.kind.value, output)
