"""Node protocol and the value types shared by layout and rendering.

Callers bring their own tree type; anything with ``identifier()``,
``children()`` and ``label()`` can be drawn. ``TreeNode`` is the concrete
implementation used by the parsers and the CLI.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol


class Node(Protocol):
    """Anything that can be laid out as a tree node."""

    def identifier(self) -> str:
        """Stable identifier, unique across the whole tree."""
        ...

    def children(self) -> Sequence[Node]:
        """Children in left-to-right order; empty for a leaf."""
        ...

    def label(self) -> str:
        """Single-line text drawn for the node."""
        ...


@dataclass
class TreeNode:
    id: str
    text: str
    kids: list[TreeNode] = field(default_factory=list)

    def identifier(self) -> str:
        return self.id

    def children(self) -> list[TreeNode]:
        return self.kids

    def label(self) -> str:
        return self.text

    def add(self, child: TreeNode) -> TreeNode:
        """Append a child and return it."""
        self.kids.append(child)
        return child


@dataclass(frozen=True)
class Position:
    """Column placement of a node and the inclusive span of its subtree."""

    root_column: int
    min_column: int
    max_column: int
