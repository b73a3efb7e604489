"""ascii-tree: draw rooted trees as monospace ASCII diagrams."""

from ascii_tree.config import RenderConfig
from ascii_tree.errors import StructuralError, TreeParseError
from ascii_tree.layout import LayoutTable, compute_layout
from ascii_tree.parsers import parse
from ascii_tree.render import render
from ascii_tree.renderers import render_levels
from ascii_tree.types import Node, Position, TreeNode

__all__ = [
    "LayoutTable",
    "Node",
    "Position",
    "RenderConfig",
    "StructuralError",
    "TreeNode",
    "TreeParseError",
    "compute_layout",
    "parse",
    "render",
    "render_config",
    "render_levels",
    "render_text",
]


def render_config(src: str, config: RenderConfig) -> str:
    """Parse ``src`` and render it with the settings in ``config``.

    Raises:
        TreeParseError: If the input cannot be parsed.
        StructuralError: If the parsed tree reuses a node identifier.
        ValueError: If the configuration is invalid.
    """
    config.validate()
    root = parse(src, config.input_format)
    return render(root, config.min_leaf_distance)


def render_text(src: str, min_leaf_distance: int = 1, fmt: str | None = None) -> str:
    """Parse an outline or JSON tree and render it to ASCII art.

    Args:
        src: Tree source text.
        min_leaf_distance: Minimum blank columns between sibling subtrees.
        fmt: 'outline' or 'json'; None auto-detects.

    Returns:
        The rendered diagram, without a trailing newline.
    """
    return render_config(src, RenderConfig(min_leaf_distance=min_leaf_distance, input_format=fmt))
