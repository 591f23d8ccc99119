#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_traversal.py
"""Tests for depth-first traversal and its directives."""

import pytest

from autolink_headings.ast import (
    CONTINUE,
    EXIT,
    SKIP,
    Action,
    Comment,
    Element,
    Root,
    Text,
    VisitResult,
    h,
    skip_to,
    visit,
)
from autolink_headings.exceptions import ValidationError


@pytest.fixture
def tree():
    return Root(children=[
        h("h1", None, "One"),
        h("div", None, h("p", None, "Two"), Comment(value="note")),
        h("h2", None, "Three"),
    ])


def _tags(tree, visitor_result=None):
    seen = []

    def record(node, index, parent):
        seen.append(node.tag_name)
        return visitor_result(node) if visitor_result else None

    visit(tree, record, test=Element)
    return seen


@pytest.mark.unit
class TestVisitOrder:
    """Tests for traversal order and filtering."""

    def test_preorder(self, tree):
        assert _tags(tree) == ["h1", "div", "p", "h2"]

    def test_all_nodes_without_test(self, tree):
        types = []
        visit(tree, lambda node, index, parent: types.append(node.type))
        assert types == ["root", "element", "text", "element", "element", "text", "comment", "element", "text"]

    def test_root_has_no_position(self, tree):
        positions = []
        visit(tree, lambda node, index, parent: positions.append((index, parent)), test="root")
        assert positions == [(None, None)]

    def test_index_and_parent(self, tree):
        found = []
        visit(tree, lambda node, index, parent: found.append((index, parent)), test="comment")
        assert found == [(1, tree.children[1])]

    def test_type_name_test(self, tree):
        values = []
        visit(tree, lambda node, index, parent: values.append(node.value), test="text")
        assert values == ["One", "Two", "Three"]

    def test_callable_test(self, tree):
        values = []
        visit(tree, lambda node, index, parent: values.append(node.tag_name),
              test=lambda node, index, parent: isinstance(node, Element) and index == 0)
        assert values == ["h1", "p"]

    def test_non_matching_nodes_are_descended(self, tree):
        assert _tags(tree)[2] == "p"

    def test_invalid_test(self, tree):
        with pytest.raises(ValidationError):
            visit(tree, lambda node, index, parent: None, test=3)


@pytest.mark.unit
class TestDirectives:
    """Tests for SKIP, EXIT and resume indices."""

    def test_skip_children(self, tree):
        assert _tags(tree, lambda node: SKIP if node.tag_name == "div" else None) == ["h1", "div", "h2"]

    def test_exit_stops_everything(self, tree):
        assert _tags(tree, lambda node: EXIT if node.tag_name == "p" else CONTINUE) == ["h1", "div", "p"]

    def test_bare_action_accepted(self, tree):
        assert _tags(tree, lambda node: Action.EXIT) == ["h1"]

    def test_invalid_return_value(self, tree):
        with pytest.raises(ValidationError, match="Visitor must return"):
            visit(tree, lambda node, index, parent: "skip")

    def test_skip_to_resumes_after_inserted_nodes(self):
        tree = Root(children=[h("h1"), h("h2")])
        seen = []

        def insert_before(node, index, parent):
            seen.append(node.tag_name)
            if node.tag_name.startswith("h"):
                parent.children.insert(index, h("hr"))
                return skip_to(index + 2)
            return None

        visit(tree, insert_before, test=Element)

        assert seen == ["h1", "h2"]
        assert [child.tag_name for child in tree.children] == ["hr", "h1", "hr", "h2"]

    def test_skip_to_can_revisit(self):
        tree = Root(children=[Text(value="a"), Text(value="b")])
        seen = []

        def replace(node, index, parent):
            seen.append(node.value)
            if node.value == "a":
                parent.children[index] = Text(value="c")
                return VisitResult(Action.CONTINUE, index)
            return None

        visit(tree, replace, test="text")

        assert seen == ["a", "c", "b"]

    def test_out_of_range_index_ends_parent(self):
        tree = Root(children=[h("p"), h("p"), h("p")])
        seen = []

        def jump(node, index, parent):
            seen.append(index)
            return skip_to(len(parent.children) + 5)

        visit(tree, jump, test=Element)

        assert seen == [0]

    def test_removal_with_same_index(self):
        tree = Root(children=[Comment(value="x"), h("p"), Comment(value="y")])

        def drop(node, index, parent):
            del parent.children[index]
            return skip_to(index)

        visit(tree, drop, test="comment")

        assert tree.children == [h("p")]
