#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/renderers/atlassian.py
"""Atlassian wiki markup rendering from a document tree.

This module provides the AtlassianWikiRenderer class which converts a parsed
Markdown tree into the wiki markup understood by Jira and Confluence.

The renderer walks the tree depth-first and, for every node, looks up the
emission routines registered for the node's kind. Routines write markup
fragments to the conversion's output sink when the walk enters a node and,
for kinds that need it, again when it leaves the node. Kinds without
routines are passed over silently, although their children are still
visited.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

from atlwiki.ast.nodes import (
    AutoLink,
    AutoLinkType,
    CodeBlock,
    Emphasis,
    FencedCodeBlock,
    Footnote,
    FootnoteLink,
    Heading,
    HTMLBlock,
    Image,
    Link,
    List,
    ListItem,
    Node,
    NodeKind,
    RawHTML,
    String,
    TaskCheckBox,
    Text,
)
from atlwiki.ast.walk import WalkStatus, walk
from atlwiki.constants import (
    CODE_LANGUAGE_TEMPLATE,
    CODE_MARKER,
    DEFINITION_DESCRIPTION_MARKER,
    DEFINITION_TERM_MARKER,
    DELETED,
    EMPHASIS,
    FOOTNOTE_ANCHOR_TEMPLATE,
    FOOTNOTE_REFERENCE_TEMPLATE,
    HEADING_TEMPLATE,
    HORIZONTAL_LINE,
    MAILTO_PREFIX,
    MONOSPACE_END,
    MONOSPACE_START,
    NEWLINE,
    ORDERED_LIST_MARKER,
    QUOTE_MARKER,
    STRONG,
    TABLE_CELL_SEPARATOR,
    TABLE_HEADER_SEPARATOR,
    TASK_CHECKED,
    TASK_UNCHECKED,
    UNORDERED_LIST_MARKER,
)
from atlwiki.exceptions import AtlWikiError, RenderingError
from atlwiki.options.atlassian import AtlassianRendererOptions
from atlwiki.renderers.base import BaseRenderer, SourceInput
from atlwiki.renderers.context import RenderContext
from atlwiki.renderers.dispatch import DispatchRegistry, NodeHandlers
from atlwiki.substitutions import substitute_html_fragment

logger = logging.getLogger(__name__)

# Paragraphs inside these containers are not separated by line breaks
_TIGHT_PARAGRAPH_PARENTS = frozenset({NodeKind.LIST_ITEM, NodeKind.FOOTNOTE})


class AtlassianWikiRenderer(BaseRenderer):
    """Render a document tree to Atlassian wiki markup.

    The renderer holds only its options and an immutable dispatch registry;
    every conversion gets its own ``RenderContext``, so one instance can
    convert several documents, including concurrently.

    Parameters
    ----------
    options : AtlassianRendererOptions or None, default = None
        Rendering options

    Examples
    --------
    Basic usage:

        >>> from atlwiki.ast import DocumentBuilder
        >>> builder = DocumentBuilder()
        >>> doc = builder.add_heading(1, "Title").get_document()
        >>> renderer = AtlassianWikiRenderer()
        >>> renderer.render_to_string(doc, builder.get_source())
        'h1.Title\\n\\n'

    """

    def __init__(self, options: AtlassianRendererOptions | None = None):
        """Initialize the renderer and build its dispatch registry."""
        BaseRenderer._validate_options_type(options, AtlassianRendererOptions, "atlassian")
        options = options or AtlassianRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: AtlassianRendererOptions = options
        self.registry = self._build_registry()

    def _build_registry(self) -> DispatchRegistry:
        symmetric = NodeHandlers.symmetric
        return DispatchRegistry(
            {
                NodeKind.DOCUMENT: NodeHandlers(enter=self._render_passthrough),
                NodeKind.TEXT_BLOCK: NodeHandlers(enter=self._render_passthrough),
                NodeKind.TABLE: NodeHandlers(enter=self._render_passthrough),
                NodeKind.HEADING: symmetric(self._render_heading),
                NodeKind.PARAGRAPH: symmetric(self._render_paragraph),
                NodeKind.THEMATIC_BREAK: NodeHandlers(enter=self._render_thematic_break),
                NodeKind.CODE_BLOCK: symmetric(self._render_code_block),
                NodeKind.FENCED_CODE_BLOCK: symmetric(self._render_code_block),
                NodeKind.HTML_BLOCK: symmetric(self._render_html_block),
                NodeKind.BLOCKQUOTE: symmetric(self._render_blockquote),
                NodeKind.LIST: NodeHandlers(enter=self._render_list),
                NodeKind.LIST_ITEM: symmetric(self._render_list_item),
                NodeKind.TABLE_HEADER: symmetric(self._render_table_header),
                NodeKind.TABLE_ROW: symmetric(self._render_table_row),
                NodeKind.TABLE_CELL: symmetric(self._render_table_cell),
                NodeKind.FOOTNOTE_LIST: NodeHandlers(enter=self._render_footnote_list),
                NodeKind.FOOTNOTE: NodeHandlers(enter=self._render_footnote),
                NodeKind.FOOTNOTE_LINK: NodeHandlers(enter=self._render_footnote_link),
                NodeKind.DEFINITION_TERM: NodeHandlers(enter=self._render_definition_term),
                NodeKind.DEFINITION_DESCRIPTION: NodeHandlers(enter=self._render_definition_description),
                NodeKind.TEXT: NodeHandlers(enter=self._render_text),
                NodeKind.STRING: NodeHandlers(enter=self._render_string),
                NodeKind.EMPHASIS: symmetric(self._render_emphasis),
                NodeKind.STRIKETHROUGH: symmetric(self._render_strikethrough),
                NodeKind.CODE_SPAN: symmetric(self._render_code_span),
                NodeKind.LINK: symmetric(self._render_link),
                NodeKind.AUTOLINK: NodeHandlers(enter=self._render_autolink),
                NodeKind.IMAGE: NodeHandlers(enter=self._render_image),
                NodeKind.RAW_HTML: NodeHandlers(enter=self._render_raw_html),
                NodeKind.TASK_CHECKBOX: NodeHandlers(enter=self._render_task_checkbox),
            }
        )

    # ------------------------------------------------------------------
    # Conversion entry points
    # ------------------------------------------------------------------

    def convert(self, root: Node, source: SourceInput = b"") -> str:
        """Convert the tree under ``root`` to wiki markup.

        Parameters
        ----------
        root : Node
            Root of the tree, usually a Document
        source : bytes or str, default = b""
            Source document the tree's segments refer to. A ``str`` is
            encoded with ``options.source_encoding``.

        Returns
        -------
        str
            The markup exactly as emitted, without trailing normalization

        Raises
        ------
        RenderingError
            If an emission routine fails; ``partial_output`` holds the text
            written before the failure
        OutputWriteError
            If the output exceeds ``options.max_output_size``

        """
        context = self._create_context(source)
        self._run(root, context)
        return context.getvalue()

    def render_to_string(self, doc: Node, source: SourceInput = b"") -> str:
        """Render a document tree to a wiki markup string."""
        return self.convert(doc, source)

    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]], source: SourceInput = b"") -> None:
        """Render a document tree and write the markup to ``output``.

        The text is only written once the whole walk has succeeded.

        Parameters
        ----------
        doc : Node
            Root of the tree to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination; files and binary streams receive UTF-8
        source : bytes or str, default = b""
            Source document the tree's segments refer to

        Raises
        ------
        OutputWriteError
            If the destination cannot be written

        """
        context = self._create_context(source)
        self._run(doc, context)
        context.sink.flush_to(output)

    def _create_context(self, source: SourceInput) -> RenderContext:
        return RenderContext(source=self._encode_source(source), options=self.options)

    def _run(self, root: Node, context: RenderContext) -> None:
        registry = self.registry
        logger.debug("Starting conversion of %s tree (%d source bytes)", root.kind.value, len(context.source))
        visited = 0

        def visit(node: Node, entering: bool) -> Optional[WalkStatus]:
            nonlocal visited
            handlers = registry.lookup(node.kind)
            if handlers is None:
                logger.debug("No emission routine for %s node, skipping", node.kind.value)
                return WalkStatus.CONTINUE
            if entering:
                visited += 1
            routine = handlers.enter if entering else handlers.exit
            if routine is None:
                return WalkStatus.CONTINUE
            context.current_node = node
            return routine(context, node, entering)

        try:
            status = walk(root, visit, wants_exit=registry.wants_exit)
        except AtlWikiError as e:
            if isinstance(e, RenderingError) and e.partial_output is None:
                e.partial_output = context.getvalue()
            raise
        except Exception as e:
            failed = context.current_node
            kind = failed.kind.value if failed is not None else root.kind.value
            raise RenderingError(
                f"Failed to render {kind} node: {e}",
                rendering_stage="walk",
                original_error=e,
                partial_output=context.getvalue(),
            ) from e

        if status is WalkStatus.STOP:
            logger.debug("Conversion stopped early by an emission routine")
        logger.debug("Finished conversion: %d nodes rendered, %d characters", visited, len(context.sink))

    # ------------------------------------------------------------------
    # Block routines
    # ------------------------------------------------------------------

    def _render_passthrough(self, context: RenderContext, node: Node, entering: bool) -> WalkStatus:
        return WalkStatus.CONTINUE

    def _render_heading(self, context: RenderContext, node: Heading, entering: bool) -> None:
        """Render a Heading node.

        No space separates the marker from the heading text.
        """
        if entering:
            context.write(HEADING_TEMPLATE.format(level=node.level))
        else:
            context.write(NEWLINE * 2)

    def _render_paragraph(self, context: RenderContext, node: Node, entering: bool) -> None:
        """Render a Paragraph node.

        The same line break is written on entry and exit, except inside list
        items and footnote definitions.
        """
        if node.parent is not None and node.parent.kind in _TIGHT_PARAGRAPH_PARENTS:
            return
        context.write(NEWLINE)

    def _render_thematic_break(self, context: RenderContext, node: Node, entering: bool) -> None:
        context.write(NEWLINE + HORIZONTAL_LINE + NEWLINE)

    def _render_code_block(self, context: RenderContext, node: Union[CodeBlock, FencedCodeBlock], entering: bool) -> None:
        """Render a CodeBlock or FencedCodeBlock node.

        Only fenced blocks with an info string get a language annotation.
        Lines are written verbatim.
        """
        if not entering:
            context.write(CODE_MARKER + NEWLINE)
            return

        language = node.language(context.source) if isinstance(node, FencedCodeBlock) else None
        if language:
            context.write(CODE_LANGUAGE_TEMPLATE.format(language=context.decode(language)))
        else:
            context.write(CODE_MARKER)
        self._write_lines(context, node)

    def _render_html_block(self, context: RenderContext, node: HTMLBlock, entering: bool) -> None:
        """Render an HTMLBlock node as a code macro.

        The block's text and lines are written unchanged; the inline HTML
        substitutions do not apply here.
        """
        if not entering:
            context.write(CODE_MARKER + NEWLINE)
            return

        language = self.options.html_block_language
        context.write(CODE_LANGUAGE_TEMPLATE.format(language=language) if language else CODE_MARKER)
        context.write(context.node_text(node))
        self._write_lines(context, node)

    @staticmethod
    def _write_lines(context: RenderContext, node: Union[CodeBlock, FencedCodeBlock, HTMLBlock]) -> None:
        for line in node.lines:
            context.write(context.segment_text(line))

    def _render_blockquote(self, context: RenderContext, node: Node, entering: bool) -> None:
        context.write(QUOTE_MARKER)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def _render_list(self, context: RenderContext, node: List, entering: bool) -> None:
        if node.parent is not None and node.parent.kind is NodeKind.LIST_ITEM:
            context.write(NEWLINE)

    @staticmethod
    def _list_depth(item: ListItem) -> int:
        """Count nesting by climbing item -> list -> item pairs."""
        depth = 1
        enclosing_list = item.parent
        ancestor = enclosing_list.parent if enclosing_list is not None else None
        while ancestor is not None and ancestor.kind is NodeKind.LIST_ITEM:
            depth += 1
            outer_list = ancestor.parent
            ancestor = outer_list.parent if outer_list is not None else None
        return depth

    def _render_list_item(self, context: RenderContext, node: ListItem, entering: bool) -> None:
        """Render a ListItem node.

        On entry the marker is repeated once per nesting level and followed
        by the item's offset in spaces. On exit a line break ends the item,
        unless a nested list already ended the line.
        """
        if entering:
            enclosing_list = node.parent
            ordered = isinstance(enclosing_list, List) and enclosing_list.ordered
            marker = ORDERED_LIST_MARKER if ordered else UNORDERED_LIST_MARKER
            context.write(marker * self._list_depth(node) + " " * node.offset)
            return

        if not any(child.kind is NodeKind.LIST for child in node.children):
            context.write(NEWLINE)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _render_table_header(self, context: RenderContext, node: Node, entering: bool) -> None:
        context.write(TABLE_HEADER_SEPARATOR if entering else TABLE_HEADER_SEPARATOR + NEWLINE)

    def _render_table_row(self, context: RenderContext, node: Node, entering: bool) -> None:
        context.write(TABLE_CELL_SEPARATOR if entering else TABLE_CELL_SEPARATOR + NEWLINE)

    def _render_table_cell(self, context: RenderContext, node: Node, entering: bool) -> None:
        """Render a TableCell node.

        Empty cells get a single space. Separators go between cells only; the
        row routines write the outer ones.
        """
        if entering:
            if not node.has_children:
                context.write(" ")
            return

        if node.next_sibling is None:
            return
        in_body_row = node.parent is not None and node.parent.kind is NodeKind.TABLE_ROW
        context.write(TABLE_CELL_SEPARATOR if in_body_row else TABLE_HEADER_SEPARATOR)

    # ------------------------------------------------------------------
    # Footnotes and definitions
    # ------------------------------------------------------------------

    def _render_footnote_list(self, context: RenderContext, node: Node, entering: bool) -> None:
        context.write(NEWLINE + HORIZONTAL_LINE)

    def _render_footnote(self, context: RenderContext, node: Footnote, entering: bool) -> None:
        if node.blank_previous_lines:
            context.write(NEWLINE)
        context.write(FOOTNOTE_ANCHOR_TEMPLATE.format(ref=node.ref))

    def _render_footnote_link(self, context: RenderContext, node: FootnoteLink, entering: bool) -> None:
        """Render a FootnoteLink node as a reference to its definition's anchor.

        Nothing is written when no definition has the link's index.
        """
        label = context.resolve_footnote(node, node.index)
        if label is None:
            logger.debug("Footnote link %d has no matching definition", node.index)
            return
        context.write(FOOTNOTE_REFERENCE_TEMPLATE.format(ref=label))

    def _render_definition_term(self, context: RenderContext, node: Node, entering: bool) -> None:
        context.write(NEWLINE + DEFINITION_TERM_MARKER)

    def _render_definition_description(self, context: RenderContext, node: Node, entering: bool) -> None:
        context.write(NEWLINE + DEFINITION_DESCRIPTION_MARKER)

    # ------------------------------------------------------------------
    # Inline routines
    # ------------------------------------------------------------------

    def _render_text(self, context: RenderContext, node: Text, entering: bool) -> None:
        context.write(context.segment_text(node.segment))
        if node.soft_line_break or node.hard_line_break:
            context.write(NEWLINE * 2)

    def _render_string(self, context: RenderContext, node: String, entering: bool) -> None:
        context.write(node.value)

    def _render_emphasis(self, context: RenderContext, node: Emphasis, entering: bool) -> None:
        context.write(STRONG if node.level == 2 else EMPHASIS)

    def _render_strikethrough(self, context: RenderContext, node: Node, entering: bool) -> None:
        context.write(DELETED)

    def _render_code_span(self, context: RenderContext, node: Node, entering: bool) -> None:
        context.write(MONOSPACE_START if entering else MONOSPACE_END)

    def _render_link(self, context: RenderContext, node: Link, entering: bool) -> None:
        if entering:
            context.write("[")
        else:
            context.write(f"|{node.destination}]")

    def _render_autolink(self, context: RenderContext, node: AutoLink, entering: bool) -> None:
        address = context.decode(node.url(context.source))
        if node.link_type is AutoLinkType.EMAIL:
            address = MAILTO_PREFIX + address
        context.write(f"[{address}]")

    def _render_image(self, context: RenderContext, node: Image, entering: bool) -> WalkStatus:
        """Render an Image node; the alternative text is not rendered."""
        context.write(f"!{node.destination}!")
        return WalkStatus.SKIP_CHILDREN

    def _render_raw_html(self, context: RenderContext, node: RawHTML, entering: bool) -> None:
        for segment in node.segments:
            context.write(substitute_html_fragment(context.segment_text(segment)))

    def _render_task_checkbox(self, context: RenderContext, node: TaskCheckBox, entering: bool) -> None:
        context.write(TASK_CHECKED if node.checked else TASK_UNCHECKED)
