#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/autolink_headings/ast/serialization.py
"""JSON serialization and deserialization for trees.

Trees are exchanged in the hast JSON shape used by HTML tooling::

    {
      "type": "element",
      "tagName": "h2",
      "properties": {"id": "intro"},
      "children": [{"type": "text", "value": "Intro"}]
    }

The optional ``position`` and ``data`` objects are kept on every node and
written back out. Other unknown keys are ignored on input.

Examples
--------
    >>> tree = json_to_tree('{"type": "root", "children": []}')
    >>> tree_to_json(tree)
    '{"type": "root", "children": []}'

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

from autolink_headings.ast.clone import structured_clone
from autolink_headings.ast.nodes import Comment, Doctype, Element, Node, Raw, Root, Text
from autolink_headings.exceptions import ValidationError

logger = logging.getLogger(__name__)


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its descendants to hast JSON data.

    Parameters
    ----------
    node : Node
        Node to serialize

    Returns
    -------
    dict
        Plain data; property dicts and lists are copied

    """
    data = _node_fields(node)
    for key in ("position", "data"):
        value = getattr(node, key)
        if value is not None:
            data[key] = structured_clone(value)
    return data


def _node_fields(node: Node) -> dict[str, Any]:
    if isinstance(node, Element):
        return {
            "type": "element",
            "tagName": node.tag_name,
            "properties": {key: list(value) if isinstance(value, list) else value
                           for key, value in node.properties.items()},
            "children": [node_to_dict(child) for child in node.children],
        }
    if isinstance(node, Root):
        return {"type": "root", "children": [node_to_dict(child) for child in node.children]}
    if isinstance(node, (Text, Comment, Raw)):
        return {"type": node.type, "value": node.value}
    if isinstance(node, Doctype):
        return {"type": "doctype"}
    raise ValidationError(f"Cannot serialize node of type {type(node).__name__}", parameter_value=node)


def _require_mapping(data: Any, context: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError(f"{context} must be an object, got {type(data).__name__}", parameter_value=data)
    return data


def _deserialize_extras(data: dict[str, Any]) -> dict[str, Any]:
    extras = {}
    for key in ("position", "data"):
        value = data.get(key)
        if value is not None:
            extras[key] = dict(_require_mapping(value, f"'{key}'"))
    return extras


def _deserialize_children(data: dict[str, Any], strict_mode: bool) -> list[Node]:
    raw_children = data.get("children", [])
    if not isinstance(raw_children, list):
        raise ValidationError(f"'children' must be an array, got {type(raw_children).__name__}",
                              parameter_name="children", parameter_value=raw_children)
    children = []
    for child_data in raw_children:
        child = dict_to_node(child_data, strict_mode=strict_mode)
        if child is not None:
            children.append(child)
    return children


def _deserialize_root(data: dict[str, Any], strict_mode: bool) -> Root:
    return Root(children=_deserialize_children(data, strict_mode), **_deserialize_extras(data))


def _deserialize_element(data: dict[str, Any], strict_mode: bool) -> Element:
    tag_name = data.get("tagName")
    if not isinstance(tag_name, str) or not tag_name:
        raise ValidationError("Element node requires a non-empty 'tagName'", parameter_name="tagName",
                              parameter_value=tag_name)
    properties = data.get("properties") or {}
    _require_mapping(properties, "'properties'")
    return Element(
        tag_name=tag_name,
        properties={key: list(value) if isinstance(value, list) else value for key, value in properties.items()},
        children=_deserialize_children(data, strict_mode),
        **_deserialize_extras(data),
    )


def _deserialize_text(data: dict[str, Any], strict_mode: bool) -> Text:
    return Text(value=str(data.get("value", "")), **_deserialize_extras(data))


def _deserialize_comment(data: dict[str, Any], strict_mode: bool) -> Comment:
    return Comment(value=str(data.get("value", "")), **_deserialize_extras(data))


def _deserialize_doctype(data: dict[str, Any], strict_mode: bool) -> Doctype:
    return Doctype(**_deserialize_extras(data))


def _deserialize_raw(data: dict[str, Any], strict_mode: bool) -> Raw:
    return Raw(value=str(data.get("value", "")), **_deserialize_extras(data))


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], bool], Node]] = {
    "root": _deserialize_root,
    "element": _deserialize_element,
    "text": _deserialize_text,
    "comment": _deserialize_comment,
    "doctype": _deserialize_doctype,
    "raw": _deserialize_raw,
}


def dict_to_node(data: Any, strict_mode: bool = True) -> Optional[Node]:
    """Convert hast JSON data back into nodes.

    Parameters
    ----------
    data : dict
        Node data
    strict_mode : bool, default True
        If True, raise on unknown node types. If False, log a warning and
        drop the node (None is returned for an unknown top-level node).

    Returns
    -------
    Node or None
        Reconstructed node

    Raises
    ------
    ValidationError
        If the data is malformed, or names an unknown type in strict mode

    """
    data = _require_mapping(data, "Node")
    node_type = data.get("type")
    deserializer = _DESERIALIZATION_DISPATCH.get(node_type) if isinstance(node_type, str) else None
    if deserializer is None:
        if strict_mode:
            raise ValidationError(f"Unknown node type: {node_type!r}", parameter_name="type",
                                  parameter_value=node_type)
        logger.warning("Unknown node type %r, skipping", node_type)
        return None
    return deserializer(data, strict_mode)


def tree_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string.

    Unicode characters are preserved without escape sequences.
    """
    return json.dumps(node_to_dict(node), indent=indent, ensure_ascii=False)


def json_to_tree(json_str: str, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string into a tree.

    Raises
    ------
    ValidationError
        If the JSON is malformed or does not describe a node

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON tree: {e}", original_error=e) from e

    node = dict_to_node(data, strict_mode=strict_mode)
    if node is None:
        raise ValidationError("JSON document does not describe a supported node", parameter_value=data)
    return node
