#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for hast JSON serialization and deserialization."""
import json
import logging

import pytest

from autolink_headings.ast import (
    Comment,
    Doctype,
    Element,
    Raw,
    Root,
    Text,
    dict_to_node,
    h,
    json_to_tree,
    node_to_dict,
    tree_to_json,
)
from autolink_headings.exceptions import ValidationError


@pytest.mark.unit
class TestNodeToDict:
    """Test serializing nodes."""

    def test_element(self):
        data = node_to_dict(h("h2", {"id": "intro", "className": ["x"]}, "Intro"))
        assert data == {
            "type": "element",
            "tagName": "h2",
            "properties": {"id": "intro", "className": ["x"]},
            "children": [{"type": "text", "value": "Intro"}],
        }

    def test_root_comment_doctype(self):
        data = node_to_dict(Root(children=[Doctype(), Comment(value="c")]))
        assert data == {"type": "root", "children": [{"type": "doctype"}, {"type": "comment", "value": "c"}]}

    def test_property_lists_copied(self):
        node = h("span", {"className": ["icon"]})
        data = node_to_dict(node)
        data["properties"]["className"].append("x")
        assert node.properties["className"] == ["icon"]

    def test_tree_to_json_keeps_unicode(self):
        assert tree_to_json(Text(value="§ über")) == '{"type": "text", "value": "§ über"}'

    def test_tree_to_json_indent(self):
        assert tree_to_json(Root(), indent=2) == json.dumps({"type": "root", "children": []}, indent=2)


@pytest.mark.unit
class TestDictToNode:
    """Test deserializing nodes."""

    def test_element(self):
        node = dict_to_node({
            "type": "element",
            "tagName": "h2",
            "properties": {"id": "intro"},
            "children": [{"type": "text", "value": "Intro"}],
        })
        assert node == h("h2", {"id": "intro"}, "Intro")

    def test_missing_properties_and_children(self):
        assert dict_to_node({"type": "element", "tagName": "hr"}) == Element(tag_name="hr")

    def test_extra_keys_ignored(self):
        node = dict_to_node({"type": "text", "value": "x", "meta": "ignored"})
        assert node == Text(value="x")

    def test_position_and_data_kept(self):
        position = {"start": {"line": 1, "column": 1}, "end": {"line": 1, "column": 9}}
        node = dict_to_node({
            "type": "element",
            "tagName": "h2",
            "properties": {"id": "intro"},
            "children": [],
            "position": position,
            "data": {"slug": "intro"},
        })
        assert node.position == position
        assert node.data == {"slug": "intro"}

    def test_raw_node(self):
        node = dict_to_node({"type": "raw", "value": "<b>bold</b>", "position": {"start": {"line": 2}}})
        assert node == Raw(value="<b>bold</b>", position={"start": {"line": 2}})

    def test_position_must_be_object(self):
        with pytest.raises(ValidationError, match="position"):
            dict_to_node({"type": "text", "value": "x", "position": [1, 1]})

    def test_unknown_type_strict(self):
        with pytest.raises(ValidationError, match="Unknown node type"):
            dict_to_node({"type": "mdxJsxFlowElement", "name": "Chart"})

    def test_unknown_type_lenient(self, caplog):
        caplog.set_level(logging.WARNING)
        node = dict_to_node({
            "type": "root",
            "children": [{"type": "mdxJsxFlowElement", "name": "Chart"}, {"type": "text", "value": "ok"}],
        }, strict_mode=False)
        assert node == Root(children=[Text(value="ok")])
        assert "Unknown node type" in caplog.text

    def test_element_requires_tag_name(self):
        with pytest.raises(ValidationError, match="tagName"):
            dict_to_node({"type": "element", "tagName": ""})

    def test_properties_must_be_object(self):
        with pytest.raises(ValidationError, match="properties"):
            dict_to_node({"type": "element", "tagName": "p", "properties": ["id"]})

    def test_children_must_be_array(self):
        with pytest.raises(ValidationError, match="children"):
            dict_to_node({"type": "root", "children": {"type": "text"}})

    def test_non_object(self):
        with pytest.raises(ValidationError, match="must be an object"):
            dict_to_node(["root"])


@pytest.mark.unit
class TestJsonRoundTrip:
    """Test JSON string conversion."""

    def test_document(self):
        tree = Root(children=[
            Doctype(),
            h("h1", {"id": "title", "ariaHidden": False}, "Title"),
            Comment(value="end"),
        ])
        assert json_to_tree(tree_to_json(tree)) == tree

    def test_position_data_and_raw_survive(self):
        source = {
            "type": "root",
            "children": [
                {"type": "element", "tagName": "h2", "properties": {"id": "intro"},
                 "children": [{"type": "text", "value": "Intro", "position": {"start": {"line": 1, "column": 4}}}],
                 "position": {"start": {"line": 1, "column": 1}, "end": {"line": 1, "column": 9}},
                 "data": {"hProperties": {"className": ["title"]}}},
                {"type": "raw", "value": "<div class=\"note\">Hi</div>"},
            ],
            "data": {"quirksMode": False},
        }

        assert json.loads(tree_to_json(json_to_tree(json.dumps(source)))) == source

    def test_serialized_extras_are_copies(self):
        node = Text(value="x", data={"tags": ["a"]})
        data = node_to_dict(node)
        data["data"]["tags"].append("b")
        assert node.data == {"tags": ["a"]}

    def test_invalid_json(self):
        with pytest.raises(ValidationError, match="Invalid JSON"):
            json_to_tree("{not json")

    def test_unsupported_top_level_lenient(self):
        with pytest.raises(ValidationError, match="supported node"):
            json_to_tree('{"type": "mdxJsxFlowElement"}', strict_mode=False)
