"""Outline parser — indentation-structured text, one node per line.

    root
        left
            leaf  #custom-id
        right

Blank lines and lines starting with ``//`` are ignored. Tabs expand to four
spaces. Identifiers default to the path of child indices from the root
(``#0``, ``#0.1``, ``#0.1.0``); a ``#id`` suffix separated from the label by
at least two spaces overrides it. Explicit ids cannot contain ``#``, so they
never collide with generated ones.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ascii_tree.errors import TreeParseError
from ascii_tree.types import TreeNode

_EXPLICIT_ID_RE = re.compile(r"^(.*?)\s{2,}#([^\s#]+)$")
_GENERATED_PREFIX = "#"
_COMMENT_PREFIX = "//"
_TAB_SIZE = 4


@dataclass
class _Open:
    """A node that may still receive children."""

    indent: int
    node: TreeNode
    path: str
    child_indent: int | None = None


def _split_label(text: str) -> tuple[str, str | None]:
    m = _EXPLICIT_ID_RE.match(text)
    if m:
        return m.group(1), m.group(2)
    return text, None


class OutlineParser:
    def parse(self, src: str) -> TreeNode:
        root: TreeNode | None = None
        stack: list[_Open] = []

        for lineno, raw in enumerate(src.splitlines(), start=1):
            line = raw.expandtabs(_TAB_SIZE).rstrip()
            text = line.lstrip(" ")
            if not text or text.startswith(_COMMENT_PREFIX):
                continue
            indent = len(line) - len(text)
            label, explicit_id = _split_label(text)

            if root is None:
                root_path = f"{_GENERATED_PREFIX}0"
                root = TreeNode(id=explicit_id or root_path, text=label)
                stack.append(_Open(indent, root, root_path))
                continue

            while stack and stack[-1].indent >= indent:
                stack.pop()
            if not stack:
                raise TreeParseError("more than one root node", line=lineno)

            parent = stack[-1]
            if parent.child_indent is None:
                parent.child_indent = indent
            elif parent.child_indent != indent:
                raise TreeParseError(
                    f"inconsistent indentation: expected {parent.child_indent} spaces, got {indent}",
                    line=lineno,
                )

            path = f"{parent.path}.{len(parent.node.kids)}"
            child = parent.node.add(TreeNode(id=explicit_id or path, text=label))
            stack.append(_Open(indent, child, path))

        if root is None:
            raise TreeParseError("input contains no nodes")
        return root
