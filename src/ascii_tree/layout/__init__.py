"""Layout engine public API."""

from __future__ import annotations

from ascii_tree.layout.engine import compute_layout
from ascii_tree.layout.types import LayoutTable

__all__ = [
    "LayoutTable",
    "compute_layout",
]
