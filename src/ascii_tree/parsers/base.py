"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from ascii_tree.types import TreeNode


class Parser(Protocol):
    """Protocol that all tree parsers must implement."""

    def parse(self, src: str) -> TreeNode:
        """Parse source text into a tree rooted at the returned node."""
        ...
