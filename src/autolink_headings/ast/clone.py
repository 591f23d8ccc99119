#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/autolink_headings/ast/clone.py
"""Structural deep copy of template data.

:func:`structured_clone` duplicates plain data (dicts, lists, tuples, scalars)
and tree nodes so that the copy shares no mutable structure with the original
or with any earlier copy. Unlike :func:`copy.deepcopy`, it refuses values that
are not data: functions, modules, open files and arbitrary objects raise
:class:`~autolink_headings.exceptions.CloneError` instead of being shared by
reference.

Shared sub-objects in the input are copied independently, since a node may
appear only once in a tree. Cycles are rejected.

"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, TypeVar

from autolink_headings.ast.nodes import Node
from autolink_headings.exceptions import CloneError

T = TypeVar("T")

_SCALAR_TYPES = (str, int, float, bool, bytes, type(None))


def structured_clone(value: T) -> T:
    """Return an independent deep copy of ``value``.

    Parameters
    ----------
    value : Any
        Node, dict, list, tuple or scalar, nested arbitrarily

    Returns
    -------
    Any
        Structurally equal copy with no shared mutable parts

    Raises
    ------
    CloneError
        If ``value`` contains a non-data value or a reference cycle

    Examples
    --------
    >>> template = {"className": ["icon"]}
    >>> copy = structured_clone(template)
    >>> copy["className"].append("x")
    >>> template
    {'className': ['icon']}

    """
    return _clone(value, set())  # type: ignore[no-any-return]


def _clone(value: Any, active: set[int]) -> Any:
    if isinstance(value, _SCALAR_TYPES):
        return value

    marker = id(value)
    if marker in active:
        raise CloneError(f"Cannot clone a cyclic structure ({type(value).__name__} contains itself)",
                         value_type=type(value).__name__)

    active.add(marker)
    try:
        if isinstance(value, Node):
            return _clone_node(value, active)
        if isinstance(value, dict):
            return {_clone(key, active): _clone(item, active) for key, item in value.items()}
        if isinstance(value, list):
            return [_clone(item, active) for item in value]
        if isinstance(value, tuple):
            return tuple(_clone(item, active) for item in value)
    finally:
        active.discard(marker)

    raise CloneError(f"Cannot clone value of type {type(value).__name__}: templates must hold plain data",
                     value_type=type(value).__name__)


def _clone_node(node: Node, active: set[int]) -> Node:
    values = {f.name: _clone(getattr(node, f.name), active) for f in fields(node) if f.init}  # type: ignore[arg-type]
    return type(node)(**values)
