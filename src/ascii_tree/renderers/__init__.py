"""Renderers that turn a layout table into text."""

from ascii_tree.renderers.base import Renderer
from ascii_tree.renderers.level import LevelRenderer, render_levels

__all__ = ["LevelRenderer", "Renderer", "render_levels"]
