#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/ast/builder.py
"""Builder helper classes for constructing document trees.

Nodes store their text as byte ranges into a source document, so building a
tree by hand means keeping the source and the segments in step. The helpers
in this module do that bookkeeping: every piece of text handed to a builder
is appended to a shared ``SourceBuffer`` and the resulting ``Segment`` is
stored on the node.

``DocumentBuilder`` assembles whole documents, ``ListBuilder`` handles
nested list levels and ``TableBuilder`` handles header and body rows.

"""

from __future__ import annotations

import copy
from typing import Sequence, Union

from atlwiki.ast.nodes import (
    Alignment,
    AutoLink,
    AutoLinkType,
    Blockquote,
    CodeBlock,
    CodeSpan,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    Document,
    Emphasis,
    FencedCodeBlock,
    Footnote,
    FootnoteLink,
    FootnoteList,
    Heading,
    HTMLBlock,
    Image,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    RawHTML,
    Segment,
    Strikethrough,
    String,
    Table,
    TableCell,
    TableHeader,
    TableRow,
    TaskCheckBox,
    Text,
    TextBlock,
    ThematicBreak,
)

InlineContent = Union[str, Node]


class SourceBuffer:
    """Append-only source document that hands out segments.

    Parameters
    ----------
    encoding : str, default = "utf-8"
        Encoding used to turn appended text into source bytes

    Examples
    --------
    >>> buffer = SourceBuffer()
    >>> segment = buffer.add("Hello")
    >>> segment.value(buffer.getvalue())
    b'Hello'

    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize an empty buffer."""
        self.encoding = encoding
        self._data = bytearray()

    def add(self, text: str) -> Segment:
        """Append ``text`` and return the segment that covers it."""
        start = len(self._data)
        self._data.extend(text.encode(self.encoding))
        return Segment(start, len(self._data))

    def add_lines(self, text: str) -> list[Segment]:
        """Append ``text`` line by line, keeping line endings."""
        return [self.add(line) for line in text.splitlines(keepends=True)]

    def getvalue(self) -> bytes:
        return bytes(self._data)


class InlineFactory:
    """Creates inline nodes whose text lives in a shared source buffer.

    Parameters
    ----------
    source : SourceBuffer or None, default = None
        Buffer receiving the text. A new buffer is created when omitted.

    """

    def __init__(self, source: SourceBuffer | None = None) -> None:
        """Initialize the factory with an optional shared buffer."""
        self.source = source or SourceBuffer()

    def inline(self, content: Sequence[InlineContent]) -> list[Node]:
        """Normalize a mix of strings and nodes into a list of nodes.

        Strings become ``Text`` nodes; nodes are kept as they are.
        """
        return [self.text(item) if isinstance(item, str) else item for item in content]

    def text(self, content: str, soft_line_break: bool = False, hard_line_break: bool = False) -> Text:
        return Text(
            segment=self.source.add(content),
            soft_line_break=soft_line_break,
            hard_line_break=hard_line_break,
        )

    def string(self, value: str) -> String:
        return String(value=value)

    def emphasis(self, *content: InlineContent) -> Emphasis:
        return Emphasis(level=1, children=self.inline(content))

    def strong(self, *content: InlineContent) -> Emphasis:
        return Emphasis(level=2, children=self.inline(content))

    def strikethrough(self, *content: InlineContent) -> Strikethrough:
        return Strikethrough(children=self.inline(content))

    def code_span(self, code: str) -> CodeSpan:
        return CodeSpan(children=[self.text(code)])

    def link(self, destination: str, *content: InlineContent, title: str | None = None) -> Link:
        return Link(destination=destination, title=title, children=self.inline(content))

    def autolink(self, address: str, email: bool = False) -> AutoLink:
        link_type = AutoLinkType.EMAIL if email else AutoLinkType.URL
        return AutoLink(segment=self.source.add(address), link_type=link_type)

    def image(self, destination: str, alt_text: str = "", title: str | None = None) -> Image:
        children: list[Node] = [self.text(alt_text)] if alt_text else []
        return Image(destination=destination, title=title, children=children)

    def raw_html(self, *fragments: str) -> RawHTML:
        """Create an inline HTML node with one segment per fragment."""
        return RawHTML(segments=[self.source.add(fragment) for fragment in fragments])

    def footnote_link(self, index: int) -> FootnoteLink:
        return FootnoteLink(index=index)

    def task_checkbox(self, checked: bool = False) -> TaskCheckBox:
        return TaskCheckBox(checked=checked)


class ListBuilder:
    """Helper for building nested list structures.

    Items are added with an explicit nesting level; the builder opens and
    closes nested lists as the level changes, attaching each nested list to
    the last item of the enclosing level the way Markdown parsers do.

    Parameters
    ----------
    factory : InlineFactory or None, default = None
        Factory used for item text. A new one is created when omitted.
    allow_placeholders : bool, default = False
        If True, nesting below a list that has no items yet creates an empty
        placeholder item. If False, such nesting raises ValueError.
    default_offset : int, default = 2
        Offset used for items that do not specify one

    Examples
    --------
    >>> builder = ListBuilder()
    >>> builder.add_item(level=1, ordered=False, content=["Item 1"])
    >>> builder.add_item(level=2, ordered=False, content=["Nested"])
    >>> builder.add_item(level=1, ordered=False, content=["Item 2"])
    >>> lists = builder.get_lists()

    """

    def __init__(
        self,
        factory: InlineFactory | None = None,
        allow_placeholders: bool = False,
        default_offset: int = 2,
    ):
        """Initialize the list builder."""
        self.factory = factory or InlineFactory()
        self.allow_placeholders = allow_placeholders
        self.default_offset = default_offset
        self._roots: list[List] = []
        self._list_stack: list[tuple[List, int]] = []

    def _attach_list(self, new_list: List, level: int) -> None:
        if level == 1:
            self._roots.append(new_list)
            return
        parent_list = self._list_stack[-1][0]
        if not parent_list.children:
            if not self.allow_placeholders:
                raise ValueError(
                    f"Cannot nest to level {level} without a parent item at level {level - 1}. "
                    f"Either add an item at level {level - 1} first, or enable allow_placeholders."
                )
            parent_list.append_child(ListItem(offset=self.default_offset))
        parent_item = parent_list.children[-1]
        parent_item.append_child(new_list)

    def add_item(
        self,
        level: int,
        ordered: bool,
        content: Sequence[InlineContent],
        offset: int | None = None,
        checked: bool | None = None,
    ) -> ListItem:
        """Add a list item at the specified nesting level.

        Parameters
        ----------
        level : int
            Nesting level (1 is top-level, 2 is nested once, etc.)
        ordered : bool
            True for ordered lists, False for unordered
        content : sequence of str or Node
            Inline content of the item, wrapped in a TextBlock
        offset : int or None, default = None
            Marker-to-content offset; ``default_offset`` when None
        checked : bool or None, default = None
            Adds a task checkbox in front of the content when not None

        Returns
        -------
        ListItem
            The new item

        Raises
        ------
        ValueError
            If level is less than 1, or if nesting is attempted without a
            parent item and placeholders are not allowed

        """
        if level < 1:
            raise ValueError(f"Level must be >= 1, got {level}")

        while self._list_stack and self._list_stack[-1][1] > level:
            self._list_stack.pop()

        current_level = self._list_stack[-1][1] if self._list_stack else 0

        # Same level but different list type starts a sibling list
        if self._list_stack and current_level == level and self._list_stack[-1][0].ordered != ordered:
            self._list_stack.pop()
            new_list = List(ordered=ordered)
            self._attach_list(new_list, level)
            self._list_stack.append((new_list, level))

        while current_level < level:
            current_level += 1
            new_list = List(ordered=ordered)
            self._attach_list(new_list, current_level)
            self._list_stack.append((new_list, current_level))

        inline = self.factory.inline(content)
        if checked is not None:
            inline.insert(0, self.factory.task_checkbox(checked))

        item = ListItem(
            offset=self.default_offset if offset is None else offset,
            children=[TextBlock(children=inline)],
        )
        self._list_stack[-1][0].append_child(item)
        return item

    def get_lists(self) -> list[List]:
        """Get the top-level lists built so far."""
        return list(self._roots)


class TableBuilder:
    """Helper for building table structures.

    Parameters
    ----------
    factory : InlineFactory or None, default = None
        Factory used for cell text. A new one is created when omitted.
    has_header : bool, default = False
        Whether the first row should be designated as the header

    Examples
    --------
    >>> builder = TableBuilder(has_header=True)
    >>> builder.add_row(["Name", "Age"])
    >>> builder.add_row(["Alice", "30"])
    >>> builder.add_row(["Bob", ""])  # empty cell
    >>> table = builder.get_table()

    """

    def __init__(self, factory: InlineFactory | None = None, has_header: bool = False):
        """Initialize the table builder with optional header flag."""
        self.factory = factory or InlineFactory()
        self.has_header = has_header
        self.header: TableHeader | None = None
        self.rows: list[TableRow] = []
        self.alignments: list[Alignment | None] = []

    def _make_cell(self, cell_content: str | Node | Sequence[InlineContent], column: int) -> TableCell:
        if isinstance(cell_content, str):
            children: list[Node] = [self.factory.text(cell_content)] if cell_content else []
        elif isinstance(cell_content, Node):
            children = [cell_content]
        else:
            children = self.factory.inline(cell_content)
        alignment = self.alignments[column] if column < len(self.alignments) else None
        return TableCell(alignment=alignment, children=children)

    def add_row(
        self,
        cells: Sequence[str | Node | Sequence[InlineContent]],
        is_header: bool = False,
        alignments: list[Alignment | None] | None = None,
    ) -> None:
        """Add a row to the table.

        Parameters
        ----------
        cells : sequence of str, Node, or sequence of str/Node
            Cell contents. An empty string creates an empty cell with no
            children.
        is_header : bool, default False
            Whether this is the header row. With ``has_header=True`` the first
            row added becomes the header automatically.
        alignments : list of Alignment or None, optional
            Column alignments, only used for header rows

        Raises
        ------
        ValueError
            If a second header row is added, or the alignment count does not
            match the cell count

        """
        if self.has_header and self.header is None and not is_header:
            is_header = True

        if is_header:
            if self.header is not None:
                raise ValueError(
                    "Table already has a header row. Cannot add another header. Use is_header=False for body rows."
                )
            if alignments:
                if len(alignments) != len(cells):
                    raise ValueError(f"Alignment count ({len(alignments)}) must match cell count ({len(cells)})")
                self.alignments = list(alignments)
            elif not self.alignments:
                self.alignments = [None] * len(cells)
            self.header = TableHeader(children=[self._make_cell(cell, i) for i, cell in enumerate(cells)])
        else:
            if len(cells) > len(self.alignments):
                self.alignments.extend([None] * (len(cells) - len(self.alignments)))
            self.rows.append(TableRow(children=[self._make_cell(cell, i) for i, cell in enumerate(cells)]))

    def get_table(self) -> Table:
        """Get the constructed table, header first."""
        children: list[Node] = [self.header] if self.header is not None else []
        children.extend(self.rows)
        return Table(alignments=list(self.alignments), children=children)


class DocumentBuilder(InlineFactory):
    """Helper for building complete documents together with their source.

    This class provides a fluent interface for constructing documents with
    multiple block-level elements. Inline factory methods (``text``,
    ``strong``, ``link``, ...) are inherited from ``InlineFactory`` and
    share the builder's source buffer.

    Footnote definitions are collected into a single ``FootnoteList`` that
    is placed at the end of the document, as Markdown parsers do.

    Examples
    --------
    Using method chaining:

        >>> builder = DocumentBuilder()
        >>> doc = (builder
        ...     .add_heading(1, "My Document")
        ...     .add_paragraph("Some ", builder.strong("bold"), " text.")
        ...     .add_fenced_code_block("print('Hello, world!')\\n", info="python")
        ...     .add_thematic_break()
        ...     .get_document())
        >>> source = builder.get_source()

    """

    def __init__(self, source: SourceBuffer | None = None) -> None:
        """Initialize the document builder with an empty children list."""
        super().__init__(source)
        self.children: list[Node] = []
        self.footnotes: list[Footnote] = []

    def add_node(self, node: Node) -> DocumentBuilder:
        """Add a block-level node to the document."""
        self.children.append(node)
        return self

    def add_nodes(self, nodes: Sequence[Node]) -> DocumentBuilder:
        """Add multiple block-level nodes to the document at once."""
        self.children.extend(nodes)
        return self

    def add_heading(self, level: int, *content: InlineContent) -> DocumentBuilder:
        """Add a heading to the document.

        Parameters
        ----------
        level : int
            Heading level (1-6)
        *content : str or Node
            Inline content

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        return self.add_node(Heading(level=level, children=self.inline(content)))

    def add_paragraph(self, *content: InlineContent) -> DocumentBuilder:
        """Add a paragraph of inline content."""
        return self.add_node(Paragraph(children=self.inline(content)))

    def add_code_block(self, code: str) -> DocumentBuilder:
        """Add an indented code block; ``code`` keeps its line endings."""
        return self.add_node(CodeBlock(lines=self.source.add_lines(code)))

    def add_fenced_code_block(self, code: str, info: str | None = None) -> DocumentBuilder:
        """Add a fenced code block.

        Parameters
        ----------
        code : str
            Code content; line endings are kept
        info : str or None, default = None
            Info string after the opening fence, e.g. ``"python"``

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        info_segment = self.source.add(info) if info else None
        return self.add_node(FencedCodeBlock(info=info_segment, lines=self.source.add_lines(code)))

    def add_html_block(self, html: str) -> DocumentBuilder:
        """Add a raw HTML block; ``html`` keeps its line endings."""
        return self.add_node(HTMLBlock(lines=self.source.add_lines(html)))

    def add_block_quote(self, children: Sequence[Node]) -> DocumentBuilder:
        """Add a block quote around block-level ``children``."""
        return self.add_node(Blockquote(children=list(children)))

    def add_thematic_break(self) -> DocumentBuilder:
        return self.add_node(ThematicBreak())

    def list_builder(self, default_offset: int = 2) -> ListBuilder:
        """Return a ListBuilder that shares this builder's source buffer."""
        return ListBuilder(factory=self, default_offset=default_offset)

    def table_builder(self, has_header: bool = False) -> TableBuilder:
        """Return a TableBuilder that shares this builder's source buffer."""
        return TableBuilder(factory=self, has_header=has_header)

    def add_list(self, builder: ListBuilder) -> DocumentBuilder:
        """Add every top-level list built by ``builder``."""
        return self.add_nodes(builder.get_lists())

    def add_table(self, builder: TableBuilder) -> DocumentBuilder:
        """Add the table built by ``builder``."""
        return self.add_node(builder.get_table())

    def add_footnote(
        self,
        ref: str,
        *content: InlineContent,
        index: int | None = None,
        blank_previous_lines: bool = False,
    ) -> DocumentBuilder:
        """Add a footnote definition.

        Parameters
        ----------
        ref : str
            Footnote label
        *content : str or Node
            Inline content, wrapped in a paragraph
        index : int or None, default = None
            Index used by footnote links; defaults to the next sequential
            number starting at 1
        blank_previous_lines : bool, default = False
            Whether a blank line precedes the definition

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        if index is None:
            index = len(self.footnotes) + 1
        footnote = Footnote(
            ref=ref,
            index=index,
            blank_previous_lines=blank_previous_lines,
            children=[Paragraph(children=self.inline(content))],
        )
        self.footnotes.append(footnote)
        return self

    def add_definition_list(
        self, items: Sequence[tuple[InlineContent, Sequence[InlineContent]]]
    ) -> DocumentBuilder:
        """Add a definition list.

        Parameters
        ----------
        items : sequence of tuple
            ``(term, descriptions)`` pairs; each description is inline content

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        definition_list = DefinitionList()
        for term, descriptions in items:
            definition_list.append_child(DefinitionTerm(children=self.inline([term])))
            for description in descriptions:
                definition_list.append_child(DefinitionDescription(children=self.inline([description])))
        return self.add_node(definition_list)

    def get_document(self) -> Document:
        """Get the constructed document.

        Returns
        -------
        Document
            Completed document, with a trailing FootnoteList when footnotes
            were added. Each call returns an independent copy, so documents
            returned earlier keep their own parent links.

        """
        nodes = list(self.children) + list(self.footnotes)
        # Parents outside the copied nodes become None instead of being copied
        memo = {id(node.parent): None for node in nodes if node.parent is not None}
        children = copy.deepcopy(list(self.children), memo)
        if self.footnotes:
            children.append(FootnoteList(children=copy.deepcopy(list(self.footnotes), memo)))
        return Document(children=children)

    def get_source(self) -> bytes:
        """Get the source bytes the document's segments refer to."""
        return self.source.getvalue()
