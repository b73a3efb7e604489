"""Centralized configuration for ascii-tree."""

from __future__ import annotations

from dataclasses import dataclass

from ascii_tree.parsers import FORMATS
from ascii_tree.render import DEFAULT_MIN_LEAF_DISTANCE


@dataclass
class RenderConfig:
    """Configuration for the parse-and-render pipeline."""

    min_leaf_distance: int = DEFAULT_MIN_LEAF_DISTANCE
    input_format: str | None = None

    def validate(self) -> None:
        if self.min_leaf_distance < 0:
            raise ValueError(f"min_leaf_distance must be non-negative, got {self.min_leaf_distance}")
        if self.input_format is not None and self.input_format not in FORMATS:
            raise ValueError(f"Unknown input format '{self.input_format}'; use {', '.join(FORMATS)}")
