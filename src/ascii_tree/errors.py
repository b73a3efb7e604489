"""Exceptions raised by the layout engine and the text parsers."""

from __future__ import annotations


class StructuralError(ValueError):
    """A node identifier was reached twice: the input is not a tree."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"node '{identifier}' reached more than once; input is not a tree")
        self.identifier = identifier


class TreeParseError(ValueError):
    """Text input could not be turned into a tree."""

    def __init__(self, message: str, line: int | None = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line
