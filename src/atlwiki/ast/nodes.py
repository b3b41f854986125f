#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/ast/nodes.py
"""AST node classes for the document tree consumed by the wiki renderer.

This module defines the node hierarchy that upstream Markdown parsers hand
to the renderer. The shape follows the CommonMark/GFM trees produced by
parsers such as goldmark: every node has an ordered list of children, a
parent reference and sibling navigation, and textual attributes are stored
as byte ranges (``Segment``) into the original source rather than copied
strings.

Node Hierarchy
--------------
Every node class declares its category as ``kind``, a member of the closed
``NodeKind`` enumeration. Renderers dispatch on ``kind``, never on the
concrete Python type.

Block-level nodes:
    - Document, Heading, Paragraph, TextBlock, ThematicBreak
    - CodeBlock, FencedCodeBlock, HTMLBlock, Blockquote
    - List, ListItem
    - Table, TableHeader, TableRow, TableCell
    - FootnoteList, Footnote
    - DefinitionList, DefinitionTerm, DefinitionDescription

Inline nodes:
    - Text, String, Emphasis, Strikethrough, CodeSpan
    - Link, AutoLink, Image, RawHTML
    - FootnoteLink, TaskCheckBox

Trees are treated as read-only by the renderer. Parent links are set
automatically when a node is constructed with children and when
``Node.append_child`` is used.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Iterator, Literal, Optional

Alignment = Literal["left", "center", "right"]


class NodeKind(Enum):
    """Closed enumeration of node categories."""

    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    TEXT_BLOCK = "text_block"
    THEMATIC_BREAK = "thematic_break"
    CODE_BLOCK = "code_block"
    FENCED_CODE_BLOCK = "fenced_code_block"
    HTML_BLOCK = "html_block"
    BLOCKQUOTE = "blockquote"
    LIST = "list"
    LIST_ITEM = "list_item"
    TABLE = "table"
    TABLE_HEADER = "table_header"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    FOOTNOTE_LIST = "footnote_list"
    FOOTNOTE = "footnote"
    FOOTNOTE_LINK = "footnote_link"
    DEFINITION_LIST = "definition_list"
    DEFINITION_TERM = "definition_term"
    DEFINITION_DESCRIPTION = "definition_description"
    TEXT = "text"
    STRING = "string"
    EMPHASIS = "emphasis"
    STRIKETHROUGH = "strikethrough"
    CODE_SPAN = "code_span"
    LINK = "link"
    AUTOLINK = "autolink"
    IMAGE = "image"
    RAW_HTML = "raw_html"
    TASK_CHECKBOX = "task_checkbox"


class AutoLinkType(Enum):
    """Kind of address carried by an autolink."""

    URL = "url"
    EMAIL = "email"


@dataclass(frozen=True)
class Segment:
    """Half-open byte range ``[start, stop)`` into the source document.

    Parameters
    ----------
    start : int
        Offset of the first byte
    stop : int
        Offset one past the last byte

    """

    start: int
    stop: int

    def __post_init__(self) -> None:
        """Validate that the range is well ordered."""
        if self.start < 0 or self.stop < self.start:
            raise ValueError(f"Invalid segment range [{self.start}, {self.stop})")

    def value(self, source: bytes) -> bytes:
        """Return the bytes this segment covers in ``source``."""
        return source[self.start : self.stop]


class Node:
    """Base class for all AST nodes.

    Concrete subclasses are dataclasses that define ``children`` and
    ``parent`` fields and set the ``kind`` class variable.

    Attributes
    ----------
    kind : NodeKind
        Category of the node
    children : list of Node
        Ordered child nodes
    parent : Node or None
        Enclosing node; None for the root

    """

    kind: ClassVar[NodeKind]
    children: list[Node]
    parent: Optional[Node]

    def __post_init__(self) -> None:
        """Point every child back at this node."""
        for child in self.children:
            child.parent = self

    def append_child(self, child: Node) -> Node:
        """Append ``child`` and set its parent reference.

        Parameters
        ----------
        child : Node
            Node to attach as the last child

        Returns
        -------
        Node
            The appended child, for chaining construction

        """
        child.parent = self
        self.children.append(child)
        return child

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def first_child(self) -> Optional[Node]:
        return self.children[0] if self.children else None

    @property
    def last_child(self) -> Optional[Node]:
        return self.children[-1] if self.children else None

    def _sibling(self, step: int) -> Optional[Node]:
        if self.parent is None:
            return None
        siblings = self.parent.children
        for position, sibling in enumerate(siblings):
            if sibling is self:
                target = position + step
                return siblings[target] if 0 <= target < len(siblings) else None
        return None

    @property
    def next_sibling(self) -> Optional[Node]:
        """Return the following sibling, or None for the last child."""
        return self._sibling(1)

    @property
    def previous_sibling(self) -> Optional[Node]:
        """Return the preceding sibling, or None for the first child."""
        return self._sibling(-1)

    def ancestors(self) -> Iterator[Node]:
        """Yield the parent chain, nearest first."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    @property
    def owner_document(self) -> Optional[Document]:
        """Return the Document at the root of this tree, if any."""
        if isinstance(self, Document):
            return self
        for ancestor in self.ancestors():
            if isinstance(ancestor, Document):
                return ancestor
        return None

    def text(self, source: bytes) -> bytes:
        """Return the textual content of this node.

        For containers this is the concatenated text of the children; leaf
        nodes that carry text override it.

        Parameters
        ----------
        source : bytes
            Original source the segments refer to

        Returns
        -------
        bytes
            Raw text content

        """
        return b"".join(child.text(source) for child in self.children)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document

    """

    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    children : list of Node, default = empty list
        Inline nodes representing heading text

    """

    kind: ClassVar[NodeKind] = NodeKind.HEADING

    level: int
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        super().__post_init__()


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class TextBlock(Node):
    """Inline container without paragraph semantics.

    Parsers use text blocks for the content of tight list items.
    """

    kind: ClassVar[NodeKind] = NodeKind.TEXT_BLOCK

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class ThematicBreak(Node):
    """Thematic break (horizontal rule) node."""

    kind: ClassVar[NodeKind] = NodeKind.THEMATIC_BREAK

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class CodeBlock(Node):
    """Indented code block node.

    Parameters
    ----------
    lines : list of Segment, default = empty list
        Literal code lines, each including its trailing newline

    """

    kind: ClassVar[NodeKind] = NodeKind.CODE_BLOCK

    lines: list[Segment] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class FencedCodeBlock(Node):
    """Fenced code block node with optional info string.

    Parameters
    ----------
    info : Segment or None, default = None
        Info string following the opening fence; its first word is the
        language
    lines : list of Segment, default = empty list
        Literal code lines, each including its trailing newline

    """

    kind: ClassVar[NodeKind] = NodeKind.FENCED_CODE_BLOCK

    info: Optional[Segment] = None
    lines: list[Segment] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def language(self, source: bytes) -> Optional[bytes]:
        """Return the language named in the info string.

        Parameters
        ----------
        source : bytes
            Original source the segments refer to

        Returns
        -------
        bytes or None
            The info string up to its first space, or None when there is no
            info string

        """
        if self.info is None:
            return None
        info = self.info.value(source)
        return info.split(b" ", 1)[0]


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node.

    Parameters
    ----------
    lines : list of Segment, default = empty list
        Literal HTML lines, each including its trailing newline

    """

    kind: ClassVar[NodeKind] = NodeKind.HTML_BLOCK

    lines: list[Segment] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class Blockquote(Node):
    """Block quote node containing other block elements."""

    kind: ClassVar[NodeKind] = NodeKind.BLOCKQUOTE

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool, default = False
        True for ordered lists, False for unordered
    children : list of ListItem, default = empty list
        List items

    """

    kind: ClassVar[NodeKind] = NodeKind.LIST

    ordered: bool = False
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    offset : int, default = 0
        Number of columns between the list marker and the item content,
        preserved as spaces in the output
    children : list of Node, default = empty list
        Block-level nodes in the list item

    """

    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM

    offset: int = 0
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the offset is not negative."""
        if self.offset < 0:
            raise ValueError(f"List item offset must be >= 0, got {self.offset}")
        super().__post_init__()


@dataclass
class Table(Node):
    """Table node (GFM extension).

    Parameters
    ----------
    alignments : list of Alignment or None, default = empty list
        Column alignments
    children : list of Node, default = empty list
        A TableHeader followed by TableRow nodes

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE

    alignments: list[Optional[Alignment]] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class TableHeader(Node):
    """Header row of a table; its children are TableCell nodes."""

    kind: ClassVar[NodeKind] = NodeKind.TABLE_HEADER

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class TableRow(Node):
    """Body row of a table; its children are TableCell nodes."""

    kind: ClassVar[NodeKind] = NodeKind.TABLE_ROW

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class TableCell(Node):
    """Table cell containing inline content.

    Parameters
    ----------
    alignment : Alignment or None, default = None
        Column alignment of the cell
    children : list of Node, default = empty list
        Inline content; empty for an empty cell

    """

    kind: ClassVar[NodeKind] = NodeKind.TABLE_CELL

    alignment: Optional[Alignment] = None
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    @property
    def in_header(self) -> bool:
        """Return True when the cell belongs to the table header row."""
        return self.parent is not None and self.parent.kind is NodeKind.TABLE_HEADER


@dataclass
class FootnoteList(Node):
    """Container for every footnote definition of a document."""

    kind: ClassVar[NodeKind] = NodeKind.FOOTNOTE_LIST

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class Footnote(Node):
    """Footnote definition.

    Parameters
    ----------
    ref : str
        Label of the footnote as written in the source (``1`` for ``[^1]``)
    index : int
        Sequential number assigned by the parser; footnote links refer to it
    blank_previous_lines : bool, default = False
        Whether a blank line precedes the definition in the source
    children : list of Node, default = empty list
        Block content of the footnote

    """

    kind: ClassVar[NodeKind] = NodeKind.FOOTNOTE

    ref: str
    index: int
    blank_previous_lines: bool = False
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class DefinitionList(Node):
    """Definition list containing terms and descriptions."""

    kind: ClassVar[NodeKind] = NodeKind.DEFINITION_LIST

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class DefinitionTerm(Node):
    """Term in a definition list."""

    kind: ClassVar[NodeKind] = NodeKind.DEFINITION_TERM

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class DefinitionDescription(Node):
    """Description of a term in a definition list."""

    kind: ClassVar[NodeKind] = NodeKind.DEFINITION_DESCRIPTION

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    segment : Segment
        Location of the text in the source
    soft_line_break : bool, default = False
        Whether a soft line break follows the text
    hard_line_break : bool, default = False
        Whether a hard line break follows the text

    """

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    segment: Segment
    soft_line_break: bool = False
    hard_line_break: bool = False
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def text(self, source: bytes) -> bytes:
        return self.segment.value(source)


@dataclass
class String(Node):
    """Literal string that does not come from the source bytes.

    Parameters
    ----------
    value : str
        Literal text

    """

    kind: ClassVar[NodeKind] = NodeKind.STRING

    value: str
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def text(self, source: bytes) -> bytes:
        return self.value.encode("utf-8")


@dataclass
class Emphasis(Node):
    """Emphasis node.

    Parameters
    ----------
    level : int, default = 1
        1 for light emphasis (italic), 2 for strong emphasis (bold)
    children : list of Node, default = empty list
        Emphasized inline nodes

    """

    kind: ClassVar[NodeKind] = NodeKind.EMPHASIS

    level: int = 1
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate emphasis level is 1 or 2."""
        if self.level not in (1, 2):
            raise ValueError(f"Emphasis level must be 1 or 2, got {self.level}")
        super().__post_init__()


@dataclass
class Strikethrough(Node):
    """Strikethrough (deleted text) node (GFM extension)."""

    kind: ClassVar[NodeKind] = NodeKind.STRIKETHROUGH

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class CodeSpan(Node):
    """Inline code node; its children hold the code text."""

    kind: ClassVar[NodeKind] = NodeKind.CODE_SPAN

    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    destination : str
        Link destination URL
    title : str or None, default = None
        Optional link title
    children : list of Node, default = empty list
        Inline nodes representing link text

    """

    kind: ClassVar[NodeKind] = NodeKind.LINK

    destination: str
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class AutoLink(Node):
    """Autolink node (``<https://...>`` or ``<user@example.com>``).

    Parameters
    ----------
    segment : Segment
        Location of the address in the source
    link_type : AutoLinkType, default = AutoLinkType.URL
        Whether the address is a URL or an email address

    """

    kind: ClassVar[NodeKind] = NodeKind.AUTOLINK

    segment: Segment
    link_type: AutoLinkType = AutoLinkType.URL
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def url(self, source: bytes) -> bytes:
        """Return the address exactly as written in the source."""
        return self.segment.value(source)

    def text(self, source: bytes) -> bytes:
        return self.url(source)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    destination : str
        Image source URL
    title : str or None, default = None
        Optional image title
    children : list of Node, default = empty list
        Inline nodes representing the alternative text

    """

    kind: ClassVar[NodeKind] = NodeKind.IMAGE

    destination: str
    title: Optional[str] = None
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class RawHTML(Node):
    """Inline raw HTML node.

    Parameters
    ----------
    segments : list of Segment, default = empty list
        Literal HTML fragments, usually a single tag each

    """

    kind: ClassVar[NodeKind] = NodeKind.RAW_HTML

    segments: list[Segment] = field(default_factory=list)
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)

    def text(self, source: bytes) -> bytes:
        return b"".join(segment.value(source) for segment in self.segments)


@dataclass
class FootnoteLink(Node):
    """Reference to a footnote from the document body.

    Parameters
    ----------
    index : int
        Index of the referenced footnote definition

    """

    kind: ClassVar[NodeKind] = NodeKind.FOOTNOTE_LINK

    index: int
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)


@dataclass
class TaskCheckBox(Node):
    """Task list checkbox (GFM extension).

    Parameters
    ----------
    checked : bool, default = False
        Whether the task is done

    """

    kind: ClassVar[NodeKind] = NodeKind.TASK_CHECKBOX

    checked: bool = False
    children: list[Node] = field(default_factory=list)
    parent: Optional[Node] = field(default=None, repr=False, compare=False)
