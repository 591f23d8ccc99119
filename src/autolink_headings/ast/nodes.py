#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/autolink_headings/ast/nodes.py
"""Node classes for HTML syntax trees.

This module defines the node hierarchy used to represent HTML documents as
mutable trees, following the shape of the hast format (``root``, ``element``,
``text``, ``comment``, ``doctype`` and ``raw`` nodes).

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Parent nodes hold an ordered list of children:
    - Root, Element

Leaf nodes:
    - Text, Comment, Doctype, Raw

Every node also carries the optional hast ``position`` (source location) and
``data`` (plugin scratch space) mappings. The transforms never read them; they
are kept so trees survive a JSON round-trip unchanged.

Element properties use hast property names (``className``, ``tabIndex``,
``ariaHidden``) rather than HTML attribute names. Property values are strings,
numbers, booleans, ``None`` or lists of strings/numbers.

Every node is owned by exactly one parent's ``children`` list. Code that
inserts template content must insert fresh copies, never the same object twice.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union

PropertyValue = Union[str, int, float, bool, None, list[Union[str, int, float]]]
Properties = dict[str, PropertyValue]
Extra = Optional[dict[str, Any]]


class Node(ABC):
    """Base class for all tree nodes.

    Subclasses set the ``type`` class attribute to their hast type name.

    """

    type: ClassVar[str]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


class Parent(Node):
    """Base class for nodes that hold children."""

    children: list[Node]


@dataclass
class Root(Parent):
    """Root node of a tree.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes of the document

    """

    type: ClassVar[str] = "root"

    children: list[Node] = field(default_factory=list)
    position: Extra = None
    data: Extra = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_root``."""
        return visitor.visit_root(self)


@dataclass
class Element(Parent):
    """An HTML element.

    Parameters
    ----------
    tag_name : str
        Lowercase tag name (e.g., ``"h2"``, ``"a"``)
    properties : dict, default = empty dict
        Mapping of hast property names to values
    children : list of Node, default = empty list
        Child nodes
    position : dict, optional
        Source location from the parser that produced the tree
    data : dict, optional
        Extra information attached by other tools

    """

    type: ClassVar[str] = "element"

    tag_name: str
    properties: Properties = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)
    position: Extra = None
    data: Extra = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_element``."""
        return visitor.visit_element(self)


@dataclass
class Text(Node):
    """A run of text.

    Parameters
    ----------
    value : str
        Text content, unescaped

    """

    type: ClassVar[str] = "text"

    value: str = ""
    position: Extra = None
    data: Extra = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class Comment(Node):
    """An HTML comment."""

    type: ClassVar[str] = "comment"

    value: str = ""
    position: Extra = None
    data: Extra = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_comment``."""
        return visitor.visit_comment(self)


@dataclass
class Doctype(Node):
    """An HTML ``<!doctype html>`` declaration."""

    type: ClassVar[str] = "doctype"

    position: Extra = None
    data: Extra = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_doctype``."""
        return visitor.visit_doctype(self)


@dataclass
class Raw(Node):
    """Markup passed through verbatim, as produced by raw HTML in Markdown.

    Parameters
    ----------
    value : str
        HTML source, rendered without escaping

    """

    type: ClassVar[str] = "raw"

    value: str = ""
    position: Extra = None
    data: Extra = None

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_raw``."""
        return visitor.visit_raw(self)


def h(tag_name: str, properties: Properties | None = None, *children: Node | str) -> Element:
    """Build an element, turning string children into Text nodes.

    Parameters
    ----------
    tag_name : str
        Tag name of the element
    properties : dict, optional
        Element properties; a new dict is always created
    *children : Node or str
        Child nodes or strings

    Returns
    -------
    Element
        The new element

    Examples
    --------
    >>> heading = h("h2", {"id": "intro"}, "Intro")
    >>> heading.children[0].value
    'Intro'

    """
    return Element(
        tag_name=tag_name,
        properties=dict(properties) if properties else {},
        children=[Text(value=child) if isinstance(child, str) else child for child in children],
    )
