#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/autolink_headings/ast/utils.py
"""Element classification helpers.

This module answers two questions about nodes:

- :func:`heading_rank`: is this node a heading, and of which level?
- :func:`convert_element`: does this node pass a user-supplied element test?

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Optional, Sequence, Union

from autolink_headings.ast.nodes import Element, Node, Parent
from autolink_headings.constants import HEADING_TAG_NAMES
from autolink_headings.exceptions import ValidationError

ElementPredicate = Callable[[Node, Optional[int], Optional[Parent]], bool]
ElementTest = Union[str, Sequence[Any], Mapping[str, Any], ElementPredicate, None]


def heading_rank(node: Node) -> Optional[int]:
    """Return the heading level of ``node``.

    Parameters
    ----------
    node : Node
        Node to classify

    Returns
    -------
    int or None
        1 to 6 for ``h1``..``h6`` elements, None for anything else

    Examples
    --------
    >>> heading_rank(h("h3"))
    3
    >>> heading_rank(h("p")) is None
    True

    """
    if isinstance(node, Element) and node.tag_name in HEADING_TAG_NAMES:
        return int(node.tag_name[1])
    return None


def is_element(node: Any) -> bool:
    """Return True if ``node`` is an Element."""
    return isinstance(node, Element)


def convert_element(test: ElementTest = None) -> ElementPredicate:
    """Compile an element test into a uniform predicate.

    Parameters
    ----------
    test : str, sequence, mapping, callable or None
        - None: any element
        - str: elements with that tag name
        - sequence: elements passing any of the contained tests
        - mapping: elements whose properties contain every given key/value
        - callable: elements for which ``test(node, index, parent)`` is truthy

    Returns
    -------
    callable
        Predicate ``(node, index, parent) -> bool``. Non-element nodes never pass.

    Raises
    ------
    ValidationError
        If ``test`` is of an unsupported type

    Examples
    --------
    >>> is_h2 = convert_element("h2")
    >>> is_h2(h("h2"), 0, None)
    True
    >>> not_top = convert_element(lambda node, index, parent: node.tag_name != "h1")

    """
    if test is None:
        return lambda node, index=None, parent=None: is_element(node)

    if isinstance(test, str):
        return lambda node, index=None, parent=None: is_element(node) and node.tag_name == test

    if isinstance(test, Mapping):
        expected = dict(test)

        def matches_properties(node: Node, index: Optional[int] = None, parent: Optional[Parent] = None) -> bool:
            if not is_element(node):
                return False
            properties = node.properties  # type: ignore[attr-defined]
            return all(key in properties and properties[key] == value for key, value in expected.items())

        return matches_properties

    if callable(test):

        def matches_callable(node: Node, index: Optional[int] = None, parent: Optional[Parent] = None) -> bool:
            return is_element(node) and bool(test(node, index, parent))

        return matches_callable

    if isinstance(test, (list, tuple)):
        checks = [convert_element(item) for item in test]
        return lambda node, index=None, parent=None: any(check(node, index, parent) for check in checks)

    raise ValidationError(
        f"Element test must be a tag name, list, property mapping, callable or None, got {type(test).__name__}",
        parameter_name="test",
        parameter_value=test,
    )
