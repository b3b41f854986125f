#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/atlwiki/ast/walk.py
"""Depth-first traversal with entry and exit events.

The walker visits every node twice: once on entry, before any of its
children, and once on exit, after all of them. The callback steers the walk
through its return value:

- ``WalkStatus.CONTINUE`` (or ``None``): descend into the children
- ``WalkStatus.SKIP_CHILDREN``: do not descend, but still emit the exit event
  and carry on with the siblings
- ``WalkStatus.STOP``: end the whole walk at once

Exceptions raised by the callback are not caught; they end the walk and
propagate to the caller.

The traversal uses an explicit stack, so tree depth is not limited by the
interpreter recursion limit.

Examples
--------
Collect the kinds of all nodes in document order:

    >>> kinds = []
    >>> def record(node, entering):
    ...     if entering:
    ...         kinds.append(node.kind)
    >>> walk(document, record)

"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from atlwiki.ast.nodes import Node


class WalkStatus(Enum):
    """Traversal control signal returned by walk callbacks."""

    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"
    STOP = "stop"


WalkCallback = Callable[[Node, bool], Optional[WalkStatus]]


def walk(
    root: Node,
    callback: WalkCallback,
    wants_exit: Callable[[Node], bool] | None = None,
) -> WalkStatus:
    """Walk the tree under ``root`` depth-first.

    Parameters
    ----------
    root : Node
        Node to start from; it is visited like any other node
    callback : callable
        Called as ``callback(node, entering)`` for every visit
    wants_exit : callable or None, default = None
        Predicate deciding whether a node gets an exit visit. When None,
        every node is visited on exit.

    Returns
    -------
    WalkStatus
        ``WalkStatus.STOP`` if a callback stopped the walk, otherwise
        ``WalkStatus.CONTINUE``

    """
    stack: list[tuple[Node, bool]] = [(root, True)]

    while stack:
        node, entering = stack.pop()
        status = callback(node, entering)
        if status is None:
            status = WalkStatus.CONTINUE

        if status is WalkStatus.STOP:
            return WalkStatus.STOP
        if not entering:
            continue

        # Exit event goes below the children so it pops after all of them
        if wants_exit is None or wants_exit(node):
            stack.append((node, False))
        if status is not WalkStatus.SKIP_CHILDREN:
            stack.extend((child, True) for child in reversed(node.children))

    return WalkStatus.CONTINUE
