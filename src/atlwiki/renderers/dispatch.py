#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/renderers/dispatch.py
"""Read-only mapping from node kinds to emission routines.

A renderer builds its registry once, at construction time. Afterwards the
registry can only be queried: it is backed by ``types.MappingProxyType`` and
offers no registration methods.

"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Iterator, Mapping, Optional

from atlwiki.ast.nodes import Node, NodeKind
from atlwiki.ast.walk import WalkStatus

if TYPE_CHECKING:
    from atlwiki.renderers.context import RenderContext

EmitRoutine = Callable[["RenderContext", Node, bool], Optional[WalkStatus]]


@dataclass(frozen=True)
class NodeHandlers:
    """Entry and exit routines for one node kind.

    Parameters
    ----------
    enter : callable or None
        Routine called when the walk enters the node
    exit : callable or None
        Routine called when the walk leaves the node. ``None`` means the
        node gets no exit visit at all.

    """

    enter: Optional[EmitRoutine] = None
    exit: Optional[EmitRoutine] = None

    @classmethod
    def symmetric(cls, routine: EmitRoutine) -> NodeHandlers:
        """Use the same routine for both phases."""
        return cls(enter=routine, exit=routine)


class DispatchRegistry:
    """Immutable ``NodeKind -> NodeHandlers`` table.

    Parameters
    ----------
    handlers : mapping of NodeKind to NodeHandlers
        Routines per kind; the mapping is copied

    Examples
    --------
        >>> registry = DispatchRegistry({NodeKind.THEMATIC_BREAK: NodeHandlers(enter=render_break)})
        >>> NodeKind.THEMATIC_BREAK in registry
        True
        >>> registry.lookup(NodeKind.TABLE) is None
        True

    """

    def __init__(self, handlers: Mapping[NodeKind, NodeHandlers]) -> None:
        """Freeze a copy of ``handlers``."""
        for kind, entry in handlers.items():
            if not isinstance(kind, NodeKind):
                raise TypeError(f"Registry keys must be NodeKind members, got {kind!r}")
            if not isinstance(entry, NodeHandlers):
                raise TypeError(f"Registry values must be NodeHandlers, got {type(entry).__name__}")
        self._handlers: Mapping[NodeKind, NodeHandlers] = MappingProxyType(dict(handlers))

    @property
    def handlers(self) -> Mapping[NodeKind, NodeHandlers]:
        return self._handlers

    def lookup(self, kind: NodeKind) -> Optional[NodeHandlers]:
        """Return the routines for ``kind``, or None when it is unregistered."""
        return self._handlers.get(kind)

    def wants_exit(self, node: Node) -> bool:
        """Whether ``node`` has an exit routine and so needs an exit visit."""
        entry = self._handlers.get(node.kind)
        return entry is not None and entry.exit is not None

    def __contains__(self, kind: object) -> bool:
        return kind in self._handlers

    def __iter__(self) -> Iterator[NodeKind]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)
