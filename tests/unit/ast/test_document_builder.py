#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for tree builder utilities."""

import pytest

from atlwiki.ast import (
    AutoLinkType,
    CodeBlock,
    DefinitionDescription,
    DefinitionList,
    DefinitionTerm,
    DocumentBuilder,
    Emphasis,
    FencedCodeBlock,
    Footnote,
    FootnoteList,
    Heading,
    HTMLBlock,
    ListBuilder,
    Paragraph,
    SourceBuffer,
    TableBuilder,
    TableHeader,
    TableRow,
    TaskCheckBox,
    Text,
    TextBlock,
)
from atlwiki.renderers.atlassian import AtlassianWikiRenderer


@pytest.mark.unit
class TestSourceBuffer:
    """Test SourceBuffer functionality."""

    def test_segments_cover_added_text(self) -> None:
        """Test that returned segments resolve to the added text."""
        buffer = SourceBuffer()
        first = buffer.add("Hello")
        second = buffer.add(" wörld")
        source = buffer.getvalue()

        assert first.value(source) == b"Hello"
        assert second.value(source).decode("utf-8") == " wörld"

    def test_add_lines_keeps_line_endings(self) -> None:
        """Test that lines keep their terminators."""
        buffer = SourceBuffer()
        lines = buffer.add_lines("a\nb\n")
        source = buffer.getvalue()

        assert [line.value(source) for line in lines] == [b"a\n", b"b\n"]


@pytest.mark.unit
class TestDocumentBuilder:
    """Test DocumentBuilder functionality."""

    def test_init_creates_empty_children(self) -> None:
        """Test that initialization creates empty children list."""
        builder = DocumentBuilder()
        assert builder.children == []
        assert builder.get_document().children == []

    def test_add_heading(self) -> None:
        """Test adding a heading."""
        builder = DocumentBuilder()
        doc = builder.add_heading(2, "Title").get_document()

        heading = doc.children[0]
        assert isinstance(heading, Heading)
        assert heading.level == 2
        assert heading.text(builder.get_source()) == b"Title"
        assert heading.parent is doc

    def test_add_paragraph_mixed_content(self) -> None:
        """Test that strings and nodes mix in inline content."""
        builder = DocumentBuilder()
        doc = builder.add_paragraph("Some ", builder.strong("bold"), " text").get_document()

        paragraph = doc.children[0]
        assert isinstance(paragraph, Paragraph)
        assert isinstance(paragraph.children[1], Emphasis)
        assert paragraph.children[1].level == 2
        assert paragraph.text(builder.get_source()) == b"Some bold text"

    def test_add_code_blocks(self) -> None:
        """Test adding indented and fenced code blocks."""
        builder = DocumentBuilder()
        doc = (
            builder.add_code_block("x = 1\n")
            .add_fenced_code_block("print(1)\nprint(2)\n", info="python")
            .get_document()
        )
        source = builder.get_source()

        assert isinstance(doc.children[0], CodeBlock)
        fenced = doc.children[1]
        assert isinstance(fenced, FencedCodeBlock)
        assert fenced.language(source) == b"python"
        assert len(fenced.lines) == 2

    def test_add_html_block(self) -> None:
        """Test adding an HTML block."""
        builder = DocumentBuilder()
        doc = builder.add_html_block("<div>\n</div>\n").get_document()

        block = doc.children[0]
        assert isinstance(block, HTMLBlock)
        assert b"".join(line.value(builder.get_source()) for line in block.lines) == b"<div>\n</div>\n"

    def test_footnotes_collected_at_end(self) -> None:
        """Test that footnotes end up in a trailing footnote list."""
        builder = DocumentBuilder()
        doc = (
            builder.add_paragraph("See", builder.footnote_link(1))
            .add_footnote("note", "First")
            .add_footnote("other", "Second")
            .add_paragraph("After")
            .get_document()
        )

        footnotes = doc.children[-1]
        assert isinstance(footnotes, FootnoteList)
        assert [fn.ref for fn in footnotes.children if isinstance(fn, Footnote)] == ["note", "other"]
        assert [fn.index for fn in footnotes.children if isinstance(fn, Footnote)] == [1, 2]

    def test_definition_list(self) -> None:
        """Test adding a definition list."""
        builder = DocumentBuilder()
        doc = builder.add_definition_list([("Term", ["First", "Second"])]).get_document()

        definition_list = doc.children[0]
        assert isinstance(definition_list, DefinitionList)
        assert [type(child) for child in definition_list.children] == [
            DefinitionTerm,
            DefinitionDescription,
            DefinitionDescription,
        ]

    def test_earlier_documents_keep_their_tree(self) -> None:
        """Test that later get_document calls do not re-parent earlier documents."""
        builder = DocumentBuilder()
        first = builder.add_paragraph("Claim", builder.footnote_link(2)).get_document()
        renderer = AtlassianWikiRenderer()
        before = renderer.convert(first, builder.get_source())

        builder.add_node(FootnoteList(children=[Footnote(ref="z", index=2)]))
        second = builder.get_document()

        assert renderer.convert(first, builder.get_source()) == before == "\nClaim\n"
        assert renderer.convert(second, builder.get_source()) == "\nClaim[#z]\n\n----{anchor:z}z: "
        assert all(child.parent is first for child in first.children)
        assert all(child.parent is second for child in second.children)
        assert first.children[0] is not second.children[0]

    def test_autolink_kinds(self) -> None:
        """Test URL and email autolinks."""
        builder = DocumentBuilder()
        assert builder.autolink("https://example.com").link_type is AutoLinkType.URL
        assert builder.autolink("a@b.c", email=True).link_type is AutoLinkType.EMAIL


@pytest.mark.unit
class TestListBuilder:
    """Test ListBuilder functionality."""

    def test_nested_list_attaches_to_last_item(self) -> None:
        """Test that nested lists hang off the preceding item."""
        builder = ListBuilder()
        builder.add_item(level=1, ordered=False, content=["A"])
        builder.add_item(level=2, ordered=False, content=["B"])
        builder.add_item(level=1, ordered=False, content=["C"])

        (top,) = builder.get_lists()
        assert len(top.children) == 2
        first_item = top.children[0]
        assert isinstance(first_item.children[0], TextBlock)
        nested = first_item.children[1]
        assert nested.parent is first_item
        assert len(nested.children) == 1

    def test_type_change_starts_new_list(self) -> None:
        """Test that switching between ordered and unordered starts a sibling list."""
        builder = ListBuilder()
        builder.add_item(level=1, ordered=False, content=["A"])
        builder.add_item(level=1, ordered=True, content=["B"])

        lists = builder.get_lists()
        assert [lst.ordered for lst in lists] == [False, True]

    def test_nesting_without_parent_item(self) -> None:
        """Test that nesting below an empty list requires placeholders."""
        with pytest.raises(ValueError):
            ListBuilder().add_item(level=2, ordered=False, content=["orphan"])

        builder = ListBuilder(allow_placeholders=True)
        builder.add_item(level=2, ordered=False, content=["orphan"])
        (top,) = builder.get_lists()
        nested = top.children[0].children[0]
        assert nested.kind.value == "list"
        assert len(nested.children) == 1

    def test_invalid_level(self) -> None:
        """Test that levels below 1 are rejected."""
        with pytest.raises(ValueError):
            ListBuilder().add_item(level=0, ordered=False, content=["x"])

    def test_task_item(self) -> None:
        """Test that checked items start with a task checkbox."""
        builder = ListBuilder()
        item = builder.add_item(level=1, ordered=False, content=["done"], checked=True)

        checkbox = item.children[0].children[0]
        assert isinstance(checkbox, TaskCheckBox)
        assert checkbox.checked

    def test_default_offset(self) -> None:
        """Test that items use the default offset unless given one."""
        builder = ListBuilder(default_offset=3)
        assert builder.add_item(level=1, ordered=True, content=["x"]).offset == 3
        assert builder.add_item(level=1, ordered=True, content=["y"], offset=1).offset == 1


@pytest.mark.unit
class TestTableBuilder:
    """Test TableBuilder functionality."""

    def test_header_and_rows(self) -> None:
        """Test that the first row becomes the header."""
        builder = TableBuilder(has_header=True)
        builder.add_row(["Name", "Age"])
        builder.add_row(["Alice", "30"])
        table = builder.get_table()

        assert isinstance(table.children[0], TableHeader)
        assert isinstance(table.children[1], TableRow)
        assert table.alignments == [None, None]

    def test_empty_string_gives_empty_cell(self) -> None:
        """Test that an empty string creates a cell without children."""
        builder = TableBuilder()
        builder.add_row(["a", ""])
        row = builder.get_table().children[0]

        assert row.children[0].has_children
        assert not row.children[1].has_children

    def test_second_header_rejected(self) -> None:
        """Test that only one header row is allowed."""
        builder = TableBuilder()
        builder.add_row(["a"], is_header=True)
        with pytest.raises(ValueError, match="already has a header"):
            builder.add_row(["b"], is_header=True)

    def test_alignment_count_must_match(self) -> None:
        """Test that alignments must match the header cell count."""
        builder = TableBuilder()
        with pytest.raises(ValueError, match="Alignment count"):
            builder.add_row(["a", "b"], is_header=True, alignments=["left"])

    def test_cells_share_document_source(self) -> None:
        """Test that a builder obtained from a document builder shares its source."""
        doc_builder = DocumentBuilder()
        table_builder = doc_builder.table_builder(has_header=True)
        table_builder.add_row(["h"])
        doc = doc_builder.add_table(table_builder).get_document()

        cell = doc.children[0].children[0].children[0]
        assert isinstance(cell.children[0], Text)
        assert cell.text(doc_builder.get_source()) == b"h"
