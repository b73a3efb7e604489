"""JSON parser — nested objects of the form ``{"id", "label", "children"}``.

Nodes are built with an explicit stack, so tree depth is limited only by
what ``json.loads`` itself can decode.
"""

from __future__ import annotations

import json
from typing import Any

from ascii_tree.errors import TreeParseError
from ascii_tree.types import TreeNode

_LINE_BREAKS = "\r\n"


def _make_node(obj: Any, where: str) -> tuple[TreeNode, list[Any]]:
    if not isinstance(obj, dict):
        raise TreeParseError(f"{where}: expected an object, got {type(obj).__name__}")

    ident = obj.get("id")
    label = obj.get("label")
    if ident is None and label is None:
        raise TreeParseError(f"{where}: node needs an 'id' or a 'label'")
    if ident is None:
        ident = label
    if label is None:
        label = ident
    if not isinstance(ident, str) or not isinstance(label, str):
        raise TreeParseError(f"{where}: 'id' and 'label' must be strings")
    if any(c in label for c in _LINE_BREAKS):
        raise TreeParseError(f"{where}: label of '{ident}' contains a line break")

    children = obj.get("children", [])
    if not isinstance(children, list):
        raise TreeParseError(f"{where}: 'children' must be a list")

    return TreeNode(id=ident, text=label), children


def _build(data: Any) -> TreeNode:
    root, children = _make_node(data, "$")
    # Children are pushed in reverse so they are popped, and appended, in order.
    stack = [(root, child, f"$.children[{i}]") for i, child in reversed(list(enumerate(children)))]
    while stack:
        parent, obj, where = stack.pop()
        node, kids = _make_node(obj, where)
        parent.add(node)
        stack.extend((node, kid, f"{where}.children[{i}]") for i, kid in reversed(list(enumerate(kids))))
    return root


class JsonParser:
    def parse(self, src: str) -> TreeNode:
        try:
            data = json.loads(src)
        except json.JSONDecodeError as e:
            raise TreeParseError(e.msg, line=e.lineno) from e
        except RecursionError as e:
            raise TreeParseError("input is nested too deeply to decode") from e
        return _build(data)
