#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/ast/__init__.py
"""Document tree module.

This module provides the tree representation of parsed Markdown documents
that the renderer consumes. It consists of:

- nodes: node classes, the closed ``NodeKind`` enumeration and ``Segment``
- walk: depth-first traversal with entry and exit events
- builder: helpers for constructing trees together with their source

Examples
--------
    >>> from atlwiki.ast import DocumentBuilder
    >>> builder = DocumentBuilder()
    >>> doc = builder.add_heading(1, "Title").add_paragraph("Hello world").get_document()
    >>> source = builder.get_source()

"""

from atlwiki.ast.builder import DocumentBuilder, InlineFactory, ListBuilder, SourceBuffer, TableBuilder
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
    NodeKind,
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
from atlwiki.ast.walk import WalkCallback, WalkStatus, walk

__all__ = [
    # Nodes
    "Alignment",
    "AutoLink",
    "AutoLinkType",
    "Blockquote",
    "CodeBlock",
    "CodeSpan",
    "DefinitionDescription",
    "DefinitionList",
    "DefinitionTerm",
    "Document",
    "Emphasis",
    "FencedCodeBlock",
    "Footnote",
    "FootnoteLink",
    "FootnoteList",
    "Heading",
    "HTMLBlock",
    "Image",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeKind",
    "Paragraph",
    "RawHTML",
    "Segment",
    "Strikethrough",
    "String",
    "Table",
    "TableCell",
    "TableHeader",
    "TableRow",
    "TaskCheckBox",
    "Text",
    "TextBlock",
    "ThematicBreak",
    # Traversal
    "WalkCallback",
    "WalkStatus",
    "walk",
    # Builders
    "DocumentBuilder",
    "InlineFactory",
    "ListBuilder",
    "SourceBuffer",
    "TableBuilder",
]
