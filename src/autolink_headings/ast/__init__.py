#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/autolink_headings/ast/__init__.py
"""HTML syntax tree nodes and the utilities that operate on them.

This package provides:

- Node classes (:mod:`~autolink_headings.ast.nodes`)
- Depth-first traversal with skip/resume directives (:mod:`~autolink_headings.ast.traversal`)
- Heading rank and element tests (:mod:`~autolink_headings.ast.utils`)
- Structural cloning of template data (:mod:`~autolink_headings.ast.clone`)
- hast JSON serialization (:mod:`~autolink_headings.ast.serialization`)
- HTML rendering (:mod:`~autolink_headings.ast.renderer`)

"""

from autolink_headings.ast.clone import structured_clone
from autolink_headings.ast.nodes import (
    Comment,
    Doctype,
    Element,
    Node,
    Parent,
    Properties,
    PropertyValue,
    Raw,
    Root,
    Text,
    h,
)
from autolink_headings.ast.renderer import HtmlRenderer, to_html
from autolink_headings.ast.serialization import dict_to_node, json_to_tree, node_to_dict, tree_to_json
from autolink_headings.ast.traversal import CONTINUE, EXIT, SKIP, Action, VisitResult, skip_to, visit
from autolink_headings.ast.utils import convert_element, heading_rank, is_element
from autolink_headings.ast.visitors import NodeVisitor

__all__ = [
    # Nodes
    "Node",
    "Parent",
    "Root",
    "Element",
    "Text",
    "Comment",
    "Doctype",
    "Raw",
    "Properties",
    "PropertyValue",
    "h",
    # Traversal
    "visit",
    "Action",
    "VisitResult",
    "CONTINUE",
    "SKIP",
    "EXIT",
    "skip_to",
    "NodeVisitor",
    # Classification
    "heading_rank",
    "is_element",
    "convert_element",
    # Cloning
    "structured_clone",
    # Serialization
    "node_to_dict",
    "dict_to_node",
    "tree_to_json",
    "json_to_tree",
    # Rendering
    "HtmlRenderer",
    "to_html",
]
