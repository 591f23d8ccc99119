#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for structured_clone."""

import io

import pytest

from autolink_headings.ast import Comment, Doctype, Root, Text, h, structured_clone
from autolink_headings.exceptions import CloneError


@pytest.mark.unit
class TestStructuredClone:
    """Test copying template data."""

    @pytest.mark.parametrize("value", ["text", 3, 2.5, True, None, b"raw"])
    def test_scalars(self, value):
        assert structured_clone(value) == value

    def test_nested_data(self):
        original = {"className": ["icon", "icon-link"], "meta": ({"a": 1},)}
        copy = structured_clone(original)

        assert copy == original
        assert copy is not original
        assert copy["className"] is not original["className"]
        assert copy["meta"][0] is not original["meta"][0]

    def test_element_tree(self):
        original = h("span", {"className": ["icon"]}, h("svg", {"viewBox": "0 0 16 16"}), "text")
        copy = structured_clone(original)

        assert copy == original
        assert copy is not original
        assert copy.properties is not original.properties
        assert copy.properties["className"] is not original.properties["className"]
        assert copy.children[0] is not original.children[0]
        assert copy.children[1] is not original.children[1]

    @pytest.mark.parametrize("node", [Root(children=[Text(value="a")]), Comment(value="c"), Doctype()])
    def test_other_node_types(self, node):
        copy = structured_clone(node)
        assert copy == node
        assert type(copy) is type(node)

    def test_position_and_data_copied(self):
        original = h("h2", {"id": "a"})
        original.position = {"start": {"line": 3}}
        original.data = {"tags": ["x"]}
        copy = structured_clone(original)

        assert copy == original
        assert copy.position is not original.position
        assert copy.data["tags"] is not original.data["tags"]

    def test_list_of_nodes(self):
        original = [Text(value="a"), h("b")]
        copy = structured_clone(original)
        assert copy == original
        assert all(new is not old for new, old in zip(copy, original))

    def test_shared_subobject_copied_separately(self):
        shared = ["icon"]
        copy = structured_clone({"a": shared, "b": shared})

        assert copy["a"] is not copy["b"]
        copy["a"].append("x")
        assert copy["b"] == ["icon"]

    def test_function_rejected(self):
        with pytest.raises(CloneError) as exc_info:
            structured_clone({"onClick": lambda: None})
        assert exc_info.value.value_type == "function"

    def test_function_in_node_rejected(self):
        with pytest.raises(CloneError):
            structured_clone(h("span", {"onClick": print}))

    def test_arbitrary_object_rejected(self):
        with pytest.raises(CloneError, match="plain data"):
            structured_clone([object()])

    def test_file_rejected(self):
        with pytest.raises(CloneError):
            structured_clone({"stream": io.StringIO()})

    def test_cycle_rejected(self):
        data = {"className": []}
        data["self"] = data
        with pytest.raises(CloneError, match="cyclic"):
            structured_clone(data)

    def test_cyclic_tree_rejected(self):
        node = h("div")
        node.children.append(node)
        with pytest.raises(CloneError, match="cyclic"):
            structured_clone(node)
