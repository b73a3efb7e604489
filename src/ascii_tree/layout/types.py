"""Layout table — per-node positions plus the child and parent relations.

The table wraps a networkx DiGraph with one vertex per node identifier and
one edge per parent -> child link. Edges are added in child order, so
successor order is left-to-right order.
"""

from __future__ import annotations

import networkx as nx

from ascii_tree.errors import StructuralError
from ascii_tree.types import Node, Position


class LayoutTable:
    """Positions, children and parents for a single layout run."""

    def __init__(self, root: Node) -> None:
        self.digraph: nx.DiGraph = nx.DiGraph()
        self.root = root
        self.visit(root)

    def visit(self, node: Node) -> list[Node]:
        """Register ``node`` and cache its children.

        Raises StructuralError when the identifier has been seen before.
        """
        ident = node.identifier()
        if ident in self.digraph:
            raise StructuralError(ident)
        children = list(node.children())
        self.digraph.add_node(ident, node=node, children=children, position=None)
        return children

    def attach(self, parent: Node, child: Node) -> list[Node]:
        """Visit ``child`` and record ``parent`` as its parent."""
        children = self.visit(child)
        self.digraph.add_edge(parent.identifier(), child.identifier())
        return children

    def set_position(self, ident: str, position: Position) -> None:
        self.digraph.nodes[ident]["position"] = position

    def position(self, ident: str) -> Position:
        pos = self.digraph.nodes[ident]["position"]
        if pos is None:
            raise KeyError(f"node '{ident}' has no position yet")
        return pos

    def node(self, ident: str) -> Node:
        return self.digraph.nodes[ident]["node"]

    def children(self, ident: str) -> list[Node]:
        return self.digraph.nodes[ident]["children"]

    def parent(self, ident: str) -> Node | None:
        for pred in self.digraph.predecessors(ident):
            return self.digraph.nodes[pred]["node"]
        return None

    def height(self) -> int:
        """Number of levels; a lone root has height 1."""
        return nx.dag_longest_path_length(self.digraph) + 1

    def __contains__(self, ident: object) -> bool:
        return ident in self.digraph

    def __len__(self) -> int:
        return self.digraph.number_of_nodes()
