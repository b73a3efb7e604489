"""Top-level tree rendering: layout followed by level rendering."""

from __future__ import annotations

from ascii_tree.layout.engine import compute_layout
from ascii_tree.renderers.base import Renderer
from ascii_tree.renderers.level import LevelRenderer
from ascii_tree.types import Node

DEFAULT_MIN_LEAF_DISTANCE = 1


def render(root: Node, min_leaf_distance: int = DEFAULT_MIN_LEAF_DISTANCE) -> str:
    """Draw the tree under ``root`` as ASCII text.

    Args:
        root: Root node; any object implementing the Node protocol.
        min_leaf_distance: Minimum blank columns between adjacent sibling subtrees.

    Returns:
        Newline-separated rows, without a trailing newline.

    Raises:
        StructuralError: If a node identifier is reached twice.
        ValueError: If ``min_leaf_distance`` is negative.
    """
    layout = compute_layout(root, min_leaf_distance)
    renderer: Renderer = LevelRenderer()
    return renderer.render(root, layout)
