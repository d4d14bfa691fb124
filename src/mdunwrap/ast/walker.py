#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdunwrap/ast/walker.py
"""Depth-first event stream over an AST.

The renderer does not recurse into the tree. Instead it consumes a flat
sequence of :class:`WalkEvent` values, one entering and one exiting event per
non-leaf node in pre/post order, and a single entering event for each leaf.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from mdunwrap.ast.nodes import Node


@dataclass(frozen=True)
class WalkEvent:
    """One step of a tree walk.

    Parameters
    ----------
    entering : bool
        True when the walk enters ``node`` (always True for leaves)
    node : Node
        The node the event refers to

    """

    entering: bool
    node: Node


def walk(root: Node) -> Iterator[WalkEvent]:
    """Yield walk events for ``root`` and its descendants.

    The traversal uses an explicit stack, so deeply nested documents do not
    hit the interpreter's recursion limit.

    Parameters
    ----------
    root : Node
        Node to start from, usually a :class:`~mdunwrap.ast.nodes.Document`

    Yields
    ------
    WalkEvent
        Events in depth-first order

    Examples
    --------
        >>> from mdunwrap.ast import Document, Paragraph, Text
        >>> doc = Document(children=[Paragraph(children=[Text(content="hi")])])
        >>> [(e.entering, e.node.kind) for e in walk(doc)]
        [(True, 'document'), (True, 'paragraph'), (True, 'text'), (False, 'paragraph'), (False, 'document')]

    """
    yield WalkEvent(True, root)
    if root.is_leaf:
        return

    stack: list[tuple[Node, int]] = [(root, 0)]
    while stack:
        node, index = stack[-1]
        if index < len(node.children):
            child = node.children[index]
            stack[-1] = (node, index + 1)
            yield WalkEvent(True, child)
            if not child.is_leaf:
                stack.append((child, 0))
        else:
            stack.pop()
            yield WalkEvent(False, node)
