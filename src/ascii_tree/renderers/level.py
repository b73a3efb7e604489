"""Level-by-level text renderer.

Each tree level becomes up to four rows:

    label row      root
    descender        |
    sibling rule  -------
    ascender      |  |  |

The final level stops after its label row. Every row is written left to
right with padding measured from where the previous item ended, so the
nodes of a level must arrive in increasing column order.
"""

from __future__ import annotations

from ascii_tree.layout.types import LayoutTable
from ascii_tree.types import Node

VERTICAL = "|"
HORIZONTAL = "-"
BLANK = " "


class _Row:
    """One output row built by appending runs of characters."""

    def __init__(self) -> None:
        self.parts: list[str] = []
        self.first_empty_column = 0

    def pad_to(self, column: int, fill: str = BLANK) -> None:
        # Overlapping items give a negative gap; nothing is written then.
        gap = column - self.first_empty_column
        if gap > 0:
            self.parts.append(fill * gap)
        self.first_empty_column = column

    def write(self, column: int, text: str, fill: str = BLANK) -> None:
        self.pad_to(column, fill)
        self.parts.append(text)
        self.first_empty_column = column + len(text)

    def text(self) -> str:
        return "".join(self.parts)


def _label_row(level: list[Node], layout: LayoutTable) -> str:
    row = _Row()
    for node in level:
        row.write(layout.position(node.identifier()).root_column, node.label())
    return row.text()


def _descender_row(level: list[Node], layout: LayoutTable) -> str:
    row = _Row()
    for node in level:
        ident = node.identifier()
        column = layout.position(ident).root_column
        if layout.children(ident):
            row.write(column, VERTICAL)
        else:
            row.pad_to(column)
    return row.text()


def _sibling_rule_row(level: list[Node], layout: LayoutTable) -> str:
    row = _Row()
    last_parent: str | None = None
    for node in level:
        ident = node.identifier()
        parent = layout.parent(ident)
        parent_id = parent.identifier() if parent is not None else None
        fill = HORIZONTAL if parent_id is not None and parent_id == last_parent else BLANK
        only_child = parent_id is not None and len(layout.children(parent_id)) == 1
        row.write(layout.position(ident).root_column, VERTICAL if only_child else HORIZONTAL, fill)
        last_parent = parent_id
    return row.text()


def _ascender_row(level: list[Node], layout: LayoutTable) -> str:
    row = _Row()
    for node in level:
        row.write(layout.position(node.identifier()).root_column, VERTICAL)
    return row.text()


def render_levels(root: Node, layout: LayoutTable) -> str:
    """Render ``root`` using the columns recorded in ``layout``."""
    rows: list[str] = []
    level = [root]
    while True:
        rows.append(_label_row(level, layout))

        next_level = [child for node in level for child in layout.children(node.identifier())]
        if not next_level:
            break

        rows.append(_descender_row(level, layout))
        rows.append(_sibling_rule_row(next_level, layout))
        rows.append(_ascender_row(next_level, layout))
        level = next_level

    return "\n".join(rows)


class LevelRenderer:
    """Renderer that draws a tree one level at a time."""

    def render(self, root: Node, layout: LayoutTable) -> str:
        return render_levels(root, layout)
