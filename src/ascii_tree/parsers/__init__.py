"""Parser registry — detect the input format and dispatch to the right parser."""

from __future__ import annotations

from ascii_tree.parsers.base import Parser
from ascii_tree.parsers.json_tree import JsonParser
from ascii_tree.parsers.outline import OutlineParser
from ascii_tree.types import TreeNode

_PARSERS: dict[str, type[Parser]] = {
    "outline": OutlineParser,
    "json": JsonParser,
}

FORMATS: tuple[str, ...] = tuple(_PARSERS)


def detect_type(src: str) -> str:
    """Detect the input format from source text. Returns 'outline' or 'json'."""
    if src.lstrip().startswith("{"):
        return "json"
    return "outline"


def parse(src: str, fmt: str | None = None) -> TreeNode:
    """Parse ``src`` as ``fmt``, auto-detecting the format when it is None."""
    fmt = fmt or detect_type(src)
    parser_cls = _PARSERS.get(fmt)
    if parser_cls is None:
        raise ValueError(f"Unsupported input format: {fmt}")
    return parser_cls().parse(src)
