#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for depth-first tree traversal."""

import pytest

from atlwiki.ast import Document, Emphasis, Heading, Node, NodeKind, Paragraph, String, WalkStatus, walk


def _sample_tree() -> Document:
    return Document(
        children=[
            Heading(level=1, children=[String(value="title")]),
            Paragraph(children=[String(value="a"), Emphasis(children=[String(value="b")])]),
        ]
    )


def _record(events: list):
    def callback(node: Node, entering: bool) -> None:
        events.append((node.kind, entering))

    return callback


@pytest.mark.unit
class TestWalkOrder:
    """Tests for visit order."""

    def test_entry_and_exit_order(self) -> None:
        """Test that nodes are entered before and left after their children."""
        events: list = []
        walk(_sample_tree(), _record(events))

        assert events == [
            (NodeKind.DOCUMENT, True),
            (NodeKind.HEADING, True),
            (NodeKind.STRING, True),
            (NodeKind.STRING, False),
            (NodeKind.HEADING, False),
            (NodeKind.PARAGRAPH, True),
            (NodeKind.STRING, True),
            (NodeKind.STRING, False),
            (NodeKind.EMPHASIS, True),
            (NodeKind.STRING, True),
            (NodeKind.STRING, False),
            (NodeKind.EMPHASIS, False),
            (NodeKind.PARAGRAPH, False),
            (NodeKind.DOCUMENT, False),
        ]

    def test_every_node_entered_once(self) -> None:
        """Test that each node gets exactly one entry and one exit visit."""
        entered: list[Node] = []
        left: list[Node] = []

        def callback(node: Node, entering: bool) -> None:
            (entered if entering else left).append(node)

        walk(_sample_tree(), callback)

        assert len(entered) == 7
        assert len({id(node) for node in entered}) == 7
        assert sorted(map(id, entered)) == sorted(map(id, left))

    def test_wants_exit_filters_exit_visits(self) -> None:
        """Test that only nodes accepted by wants_exit get an exit visit."""
        events: list = []
        walk(_sample_tree(), _record(events), wants_exit=lambda node: node.kind is NodeKind.HEADING)

        exits = [kind for kind, entering in events if not entering]
        assert exits == [NodeKind.HEADING]

    def test_deep_tree_does_not_recurse(self) -> None:
        """Test that very deep trees do not hit the recursion limit."""
        root = Emphasis()
        node = root
        for _ in range(5000):
            node = node.append_child(Emphasis())

        count = 0

        def callback(node: Node, entering: bool) -> None:
            nonlocal count
            if entering:
                count += 1

        assert walk(root, callback) is WalkStatus.CONTINUE
        assert count == 5001


@pytest.mark.unit
class TestWalkStatus:
    """Tests for callback return values."""

    def test_skip_children_still_exits(self) -> None:
        """Test that SKIP_CHILDREN skips descendants but keeps the exit visit."""
        events: list = []

        def callback(node: Node, entering: bool):
            events.append((node.kind, entering))
            if node.kind is NodeKind.PARAGRAPH:
                return WalkStatus.SKIP_CHILDREN
            return None

        walk(_sample_tree(), callback)

        assert (NodeKind.EMPHASIS, True) not in events
        assert (NodeKind.PARAGRAPH, False) in events
        assert events[-1] == (NodeKind.DOCUMENT, False)

    def test_stop_ends_walk(self) -> None:
        """Test that STOP ends the traversal immediately."""
        events: list = []

        def callback(node: Node, entering: bool):
            events.append((node.kind, entering))
            if node.kind is NodeKind.HEADING and not entering:
                return WalkStatus.STOP
            return WalkStatus.CONTINUE

        assert walk(_sample_tree(), callback) is WalkStatus.STOP
        assert events[-1] == (NodeKind.HEADING, False)
        assert (NodeKind.PARAGRAPH, True) not in events

    def test_exception_propagates(self) -> None:
        """Test that callback exceptions abort the walk."""
        events: list = []

        def callback(node: Node, entering: bool) -> None:
            events.append(node.kind)
            if node.kind is NodeKind.HEADING:
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            walk(_sample_tree(), callback)
        assert events == [NodeKind.DOCUMENT, NodeKind.HEADING]
