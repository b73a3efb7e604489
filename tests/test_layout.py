"""Tests for layout/engine.py — column assignment and structural checks."""

from __future__ import annotations

import logging

import pytest

from ascii_tree import Position, StructuralError, TreeNode, compute_layout


def _t(id: str, *kids: TreeNode) -> TreeNode:
    return TreeNode(id=id, text=id, kids=list(kids))


class _LazyNode:
    """Caller-owned node type whose children are produced on demand."""

    def __init__(self, name: str, graph: dict[str, list[str]]) -> None:
        self.name = name
        self.graph = graph

    def identifier(self) -> str:
        return self.name

    def children(self) -> list[_LazyNode]:
        return [_LazyNode(k, self.graph) for k in self.graph.get(self.name, [])]

    def label(self) -> str:
        return self.name.upper()


def _sibling_gaps(tree: TreeNode, gap: int) -> list[int]:
    layout = compute_layout(tree, gap)
    gaps = []
    stack = [tree]
    while stack:
        node = stack.pop()
        kids = node.children()
        for left, right in zip(kids, kids[1:]):
            gaps.append(
                layout.position(right.identifier()).min_column - layout.position(left.identifier()).max_column - 1
            )
        stack.extend(kids)
    return gaps


class TestLeafPlacement:
    def test_root_leaf(self):
        layout = compute_layout(_t("hello"), 1)
        assert layout.position("hello") == Position(root_column=0, min_column=0, max_column=4)

    def test_leaves_separated_by_gap(self):
        tree = _t("P", _t("ab"), _t("cde"), _t("f"))
        layout = compute_layout(tree, 2)
        assert layout.position("ab") == Position(0, 0, 1)
        assert layout.position("cde") == Position(4, 4, 6)
        assert layout.position("f") == Position(9, 9, 9)

    def test_empty_label_has_empty_span(self):
        layout = compute_layout(TreeNode("e", ""), 0)
        pos = layout.position("e")
        assert pos.max_column == pos.min_column - 1


class TestParentPlacement:
    def test_centered_over_first_and_last_root_columns(self):
        tree = _t("P", _t("ab"), _t("cde"), _t("f"))
        layout = compute_layout(tree, 2)
        assert layout.position("P") == Position(root_column=4, min_column=0, max_column=9)

    def test_centering_rounds_down(self):
        tree = _t("P", _t("a"), _t("b"))
        layout = compute_layout(tree, 0)
        # children at columns 0 and 1
        assert layout.position("P").root_column == 0

    def test_single_child_chain_stays_straight(self):
        tree = _t("a", _t("b", _t("c")))
        layout = compute_layout(tree, 3)
        assert {layout.position(i).root_column for i in "abc"} == {0}

    def test_wide_label_extends_span(self):
        tree = _t("G", TreeNode("P", "parent-label", [_t("c")]), _t("Q"))
        layout = compute_layout(tree, 1)
        assert layout.position("P") == Position(root_column=0, min_column=0, max_column=11)
        assert layout.position("Q").min_column == 13
        assert layout.position("G").root_column == 6

    def test_centering_uses_root_columns_not_span(self):
        wide = _t("L", _t("l1"), _t("l2"), _t("l3"))
        tree = _t("R", wide, _t("r"))
        layout = compute_layout(tree, 1)
        # l1, l2, l3 at columns 0, 3, 6 put L at 3 with span 0..7; r starts at 9
        assert layout.position("L") == Position(3, 0, 7)
        assert layout.position("r").root_column == 9
        assert layout.position("R").root_column == 6

    def test_min_column_is_entry_column(self):
        tree = _t("R", _t("a"), _t("B", _t("b1"), _t("b2")))
        layout = compute_layout(tree, 1)
        assert layout.position("B").min_column == 2
        assert layout.position("b1").min_column == 2


class TestMinimumGap:
    @pytest.mark.parametrize("gap", [0, 1, 2, 5])
    def test_adjacent_subtrees_respect_gap(self, gap):
        tree = _t(
            "root",
            _t("a", _t("a1"), _t("a2", _t("a21"), _t("a22"))),
            TreeNode("b", "a-rather-long-label", [_t("b1")]),
            _t("c"),
            _t("d", _t("d1"), _t("d2"), _t("d3")),
        )
        gaps = _sibling_gaps(tree, gap)
        assert gaps
        assert all(g >= gap for g in gaps)

    def test_negative_gap_rejected(self):
        with pytest.raises(ValueError):
            compute_layout(_t("a"), -1)


class TestStructuralErrors:
    def test_same_child_twice(self):
        leaf = _t("x")
        with pytest.raises(StructuralError) as exc:
            compute_layout(_t("p", leaf, leaf), 1)
        assert exc.value.identifier == "x"

    def test_diamond(self):
        graph = {"a": ["b", "c"], "b": ["d"], "c": ["d"]}
        with pytest.raises(StructuralError):
            compute_layout(_LazyNode("a", graph), 1)

    def test_cycle(self):
        graph = {"a": ["b"], "b": ["a"]}
        with pytest.raises(StructuralError):
            compute_layout(_LazyNode("a", graph), 1)

    def test_self_loop(self):
        graph = {"a": ["a"]}
        with pytest.raises(StructuralError):
            compute_layout(_LazyNode("a", graph), 1)

    def test_duplicate_identifier_distinct_objects(self):
        tree = _t("p", TreeNode("same", "one"), TreeNode("same", "two"))
        with pytest.raises(StructuralError):
            compute_layout(tree, 1)

    def test_structural_error_is_value_error(self):
        assert issubclass(StructuralError, ValueError)


class TestCallerNodeTypes:
    def test_protocol_node(self):
        graph = {"a": ["b", "c"]}
        layout = compute_layout(_LazyNode("a", graph), 1)
        assert layout.position("b") == Position(0, 0, 0)
        assert layout.position("c") == Position(2, 2, 2)
        assert layout.position("a").root_column == 1

    def test_children_called_once_per_node(self):
        calls: dict[str, int] = {}

        class Counting(_LazyNode):
            def children(self):
                calls[self.name] = calls.get(self.name, 0) + 1
                return [Counting(k, self.graph) for k in self.graph.get(self.name, [])]

        compute_layout(Counting("a", {"a": ["b", "c"], "b": ["d"]}), 1)
        assert calls == {"a": 1, "b": 1, "c": 1, "d": 1}

    def test_deep_chain_without_recursion(self):
        root = _t("n0")
        node = root
        for i in range(1, 5000):
            node = node.add(_t(f"n{i}"))
        layout = compute_layout(root, 1)
        assert len(layout) == 5000
        assert layout.position("n4999").root_column == 0


class TestLogging:
    def test_debug_summary(self, caplog):
        tree = _t("R", _t("X", _t("x1")), _t("Y"))
        with caplog.at_level(logging.DEBUG, logger="ascii_tree.layout.engine"):
            compute_layout(tree, 1)
        assert "laid out 4 nodes in 3 levels" in caplog.text
