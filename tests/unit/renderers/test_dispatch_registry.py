#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the dispatch registry."""

import pytest

from atlwiki.ast import NodeKind, Paragraph, String
from atlwiki.renderers.dispatch import DispatchRegistry, NodeHandlers


def _noop(context, node, entering):
    return None


@pytest.mark.unit
class TestDispatchRegistry:
    """Tests for DispatchRegistry lookups."""

    def test_lookup_registered_kind(self) -> None:
        """Test that registered kinds return their handlers."""
        handlers = NodeHandlers(enter=_noop)
        registry = DispatchRegistry({NodeKind.STRING: handlers})

        assert registry.lookup(NodeKind.STRING) is handlers
        assert NodeKind.STRING in registry
        assert len(registry) == 1
        assert list(registry) == [NodeKind.STRING]

    def test_lookup_unregistered_kind(self) -> None:
        """Test that unregistered kinds return None."""
        registry = DispatchRegistry({})
        assert registry.lookup(NodeKind.TABLE) is None
        assert NodeKind.TABLE not in registry

    def test_wants_exit(self) -> None:
        """Test that only kinds with an exit routine get exit visits."""
        registry = DispatchRegistry(
            {
                NodeKind.STRING: NodeHandlers(enter=_noop),
                NodeKind.PARAGRAPH: NodeHandlers.symmetric(_noop),
            }
        )

        assert registry.wants_exit(Paragraph())
        assert not registry.wants_exit(String(value="x"))

    def test_symmetric_handlers(self) -> None:
        """Test that symmetric handlers use one routine for both phases."""
        handlers = NodeHandlers.symmetric(_noop)
        assert handlers.enter is handlers.exit is _noop

    def test_source_mapping_is_copied(self) -> None:
        """Test that later changes to the source mapping do not leak in."""
        source = {NodeKind.STRING: NodeHandlers(enter=_noop)}
        registry = DispatchRegistry(source)
        source[NodeKind.TABLE] = NodeHandlers(enter=_noop)

        assert NodeKind.TABLE not in registry

    def test_mapping_is_read_only(self) -> None:
        """Test that the exposed mapping rejects assignment."""
        registry = DispatchRegistry({})
        with pytest.raises(TypeError):
            registry.handlers[NodeKind.TABLE] = NodeHandlers()  # type: ignore[index]

    def test_invalid_keys_rejected(self) -> None:
        """Test that keys must be NodeKind members."""
        with pytest.raises(TypeError):
            DispatchRegistry({"string": NodeHandlers(enter=_noop)})  # type: ignore[dict-item]

    def test_invalid_values_rejected(self) -> None:
        """Test that values must be NodeHandlers."""
        with pytest.raises(TypeError):
            DispatchRegistry({NodeKind.STRING: _noop})  # type: ignore[dict-item]
