#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/autolink_headings/ast/traversal.py
"""Depth-first tree traversal with in-place mutation support.

:func:`visit` walks a tree in document (pre-order) order and calls a visitor
with ``(node, index, parent)``. The visitor may mutate the tree around the
current node and steer the walk by returning a :class:`VisitResult`:

- ``CONTINUE`` (or ``None``): descend into the node's children, then move on
- ``SKIP``: do not descend into the node's children
- ``EXIT``: stop the whole traversal
- any of the above with an ``index``: resume at that position in the parent's
  children instead of at ``index + 1``

A visitor that inserts siblings next to the current node returns
``skip_to(index + inserted)`` so the walk resumes after the new nodes.

Examples
--------
Collect heading tag names:

    >>> names = []
    >>> visit(tree, lambda node, index, parent: names.append(node.tag_name), test=Element)

Stop at the first comment:

    >>> visit(tree, lambda node, index, parent: EXIT, test="comment")

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Union

from autolink_headings.ast.nodes import Node, Parent
from autolink_headings.exceptions import ValidationError


class Action(Enum):
    """Traversal control actions."""

    CONTINUE = "continue"
    SKIP = "skip"
    EXIT = "exit"


@dataclass(frozen=True)
class VisitResult:
    """Directive returned by a visitor.

    Parameters
    ----------
    action : Action, default = Action.CONTINUE
        What to do with the current node's children
    index : int or None, default = None
        Sibling index to resume at; ``None`` means the next sibling

    """

    action: Action = Action.CONTINUE
    index: Optional[int] = None


CONTINUE = VisitResult(Action.CONTINUE)
SKIP = VisitResult(Action.SKIP)
EXIT = VisitResult(Action.EXIT)

NodePredicate = Callable[[Node, Optional[int], Optional[Parent]], bool]
Visitor = Callable[[Node, Optional[int], Optional[Parent]], Union[VisitResult, Action, None]]
NodeTest = Union[str, type, NodePredicate, None]


def skip_to(index: int) -> VisitResult:
    """Skip the current node's children and resume at ``index`` in its parent."""
    return VisitResult(Action.SKIP, index)


def _to_result(value: VisitResult | Action | None) -> VisitResult:
    if value is None:
        return CONTINUE
    if isinstance(value, VisitResult):
        return value
    if isinstance(value, Action):
        return VisitResult(value)
    raise ValidationError(
        f"Visitor must return VisitResult, Action or None, got {type(value).__name__}",
        parameter_name="visitor",
        parameter_value=value,
    )


def _convert_test(test: NodeTest) -> NodePredicate:
    """Compile a node test into a predicate.

    ``None`` matches every node, a string matches the node ``type``, a class
    matches by ``isinstance`` and a callable is used as-is.
    """
    if test is None:
        return lambda node, index, parent: True
    if isinstance(test, str):
        return lambda node, index, parent: node.type == test
    if isinstance(test, type):
        return lambda node, index, parent: isinstance(node, test)
    if callable(test):
        return lambda node, index, parent: bool(test(node, index, parent))
    raise ValidationError(
        f"Node test must be a type name, node class, callable or None, got {type(test).__name__}",
        parameter_name="test",
        parameter_value=test,
    )


def visit(tree: Node, visitor: Visitor, test: NodeTest = None) -> None:
    """Walk ``tree`` depth-first, calling ``visitor`` on nodes that pass ``test``.

    Parameters
    ----------
    tree : Node
        Tree to walk; the root is visited with ``index`` and ``parent`` set to None
    visitor : callable
        Called as ``visitor(node, index, parent)``; returns a directive or None
    test : str, type, callable or None, default = None
        Restricts which nodes the visitor is called for. Nodes that fail the
        test are still descended into.

    Notes
    -----
    A parent's ``children`` list is re-read on every step, so visitors may
    insert or remove siblings as long as the returned directive accounts for it.

    """
    matches = _convert_test(test)

    def walk(node: Node, index: Optional[int], parent: Optional[Parent]) -> VisitResult:
        result = _to_result(visitor(node, index, parent)) if matches(node, index, parent) else CONTINUE

        if result.action is Action.EXIT:
            return result

        if result.action is not Action.SKIP and isinstance(node, Parent):
            offset = 0
            while 0 <= offset < len(node.children):
                child_result = walk(node.children[offset], offset, node)
                if child_result.action is Action.EXIT:
                    return child_result
                offset = child_result.index if child_result.index is not None else offset + 1

        return result

    walk(tree, None, None)
