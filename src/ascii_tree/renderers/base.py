"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol

from ascii_tree.layout.types import LayoutTable
from ascii_tree.types import Node


class Renderer(Protocol):
    """Protocol that all renderers must implement."""

    def render(self, root: Node, layout: LayoutTable) -> str:
        """Render a laid-out tree to an output string."""
        ...
