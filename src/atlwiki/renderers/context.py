#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/renderers/context.py
"""Per-conversion rendering state.

A ``RenderContext`` is created for every conversion and thrown away when it
finishes. It carries the output sink, the source bytes, the active options
and the footnote lookup, so renderer instances themselves stay stateless and
can be shared.

Footnote links store only the index of their definition. The label is found
by searching the document's top-level footnote lists from the end of the
document backward, and the definitions inside each list in order; the first
definition with a matching index wins.

"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from atlwiki.ast.nodes import Document, Footnote, Node, NodeKind, Segment
from atlwiki.options.atlassian import AtlassianRendererOptions
from atlwiki.utils.io_utils import OutputSink

logger = logging.getLogger(__name__)


def iter_footnote_definitions(document: Document) -> Iterator[Footnote]:
    """Yield footnote definitions in lookup order.

    Parameters
    ----------
    document : Document
        Document whose top-level footnote lists are searched

    Yields
    ------
    Footnote
        Definitions of the last footnote list first, each list in document order

    """
    for child in reversed(document.children):
        if child.kind is not NodeKind.FOOTNOTE_LIST:
            continue
        for definition in child.children:
            if isinstance(definition, Footnote):
                yield definition


def scan_footnote_label(document: Document, index: int) -> Optional[str]:
    """Search ``document`` for the label of footnote ``index``."""
    for definition in iter_footnote_definitions(document):
        if definition.index == index:
            return definition.ref
    return None


def build_footnote_index(document: Document) -> dict[int, str]:
    """Map every footnote index in ``document`` to its label.

    Gives the same answers as ``scan_footnote_label`` for every index.
    """
    labels: dict[int, str] = {}
    for definition in iter_footnote_definitions(document):
        labels.setdefault(definition.index, definition.ref)
    return labels


class RenderContext:
    """Mutable state of a single conversion.

    Parameters
    ----------
    source : bytes
        Source the tree's segments refer to
    options : AtlassianRendererOptions
        Active rendering options
    sink : OutputSink or None, default = None
        Output buffer; one honoring ``options.max_output_size`` is created
        when omitted

    """

    def __init__(
        self,
        source: bytes,
        options: AtlassianRendererOptions,
        sink: OutputSink | None = None,
    ) -> None:
        """Initialize the context for one conversion."""
        self.source = source
        self.options = options
        self.sink = sink if sink is not None else OutputSink(max_size=options.max_output_size)
        self.current_node: Optional[Node] = None
        self._footnote_indexes: dict[int, dict[int, str]] = {}

    def write(self, text: str) -> None:
        self.sink.write(text)

    def decode(self, data: bytes) -> str:
        """Decode source bytes with the configured source encoding."""
        return data.decode(self.options.source_encoding)

    def segment_text(self, segment: Segment) -> str:
        return self.decode(segment.value(self.source))

    def node_text(self, node: Node) -> str:
        return self.decode(node.text(self.source))

    def resolve_footnote(self, link: Node, index: int) -> Optional[str]:
        """Find the label of footnote ``index`` referenced from ``link``.

        Parameters
        ----------
        link : Node
            The referencing node; its owning document is searched
        index : int
            Footnote index to resolve

        Returns
        -------
        str or None
            The footnote label, or None when no definition matches

        """
        document = link.owner_document
        if document is None:
            return None

        if self.options.footnote_resolution == "scan":
            return scan_footnote_label(document, index)

        key = id(document)
        labels = self._footnote_indexes.get(key)
        if labels is None:
            labels = build_footnote_index(document)
            self._footnote_indexes[key] = labels
            logger.debug("Indexed %d footnote definitions", len(labels))
        return labels.get(index)

    def getvalue(self) -> str:
        """Return the output written so far."""
        return self.sink.getvalue()
