"""Column assignment for tree layout.

A post-order depth-first pass threads a single ``min_column`` value through
the tree. Leaves take exactly their label width starting at that column;
each following sibling starts ``min_leaf_distance`` columns after the
previous sibling's subtree ends; a parent sits at the midpoint of its first
and last child's root columns.

The traversal uses an explicit stack, so tree depth is not bounded by the
interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ascii_tree.layout.types import LayoutTable
from ascii_tree.types import Node, Position

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    node: Node
    children: list[Node]
    min_column: int
    cursor: int = field(init=False)
    next_child: int = 0

    def __post_init__(self) -> None:
        self.cursor = self.min_column


def compute_layout(root: Node, min_leaf_distance: int) -> LayoutTable:
    """Assign a Position to every node reachable from ``root``.

    Raises:
        StructuralError: If any identifier is reached twice.
        ValueError: If ``min_leaf_distance`` is negative.
    """
    if min_leaf_distance < 0:
        raise ValueError(f"min_leaf_distance must be non-negative, got {min_leaf_distance}")

    table = LayoutTable(root)
    stack = [_Frame(root, table.children(root.identifier()), 0)]

    while stack:
        frame = stack[-1]
        if frame.next_child < len(frame.children):
            if frame.next_child > 0:
                prev = frame.children[frame.next_child - 1]
                frame.cursor = table.position(prev.identifier()).max_column + 1 + min_leaf_distance
            child = frame.children[frame.next_child]
            frame.next_child += 1
            grandchildren = table.attach(frame.node, child)
            stack.append(_Frame(child, grandchildren, frame.cursor))
            continue

        stack.pop()
        table.set_position(frame.node.identifier(), _place(frame, table))

    if logger.isEnabledFor(logging.DEBUG):
        root_pos = table.position(root.identifier())
        logger.debug(
            "laid out %d nodes in %d levels across columns %d..%d (gap %d)",
            len(table),
            table.height(),
            root_pos.min_column,
            root_pos.max_column,
            min_leaf_distance,
        )
    return table


def _place(frame: _Frame, table: LayoutTable) -> Position:
    """Position for a node whose children (if any) are already placed."""
    label_width = len(frame.node.label())
    if not frame.children:
        return Position(
            root_column=frame.min_column,
            min_column=frame.min_column,
            max_column=frame.min_column + label_width - 1,
        )

    first = table.position(frame.children[0].identifier())
    last = table.position(frame.children[-1].identifier())
    root_column = (first.root_column + last.root_column) // 2
    return Position(
        root_column=root_column,
        min_column=frame.min_column,
        max_column=max(last.max_column, root_column + label_width - 1),
    )
