#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/autolink_headings/ast/visitors.py
"""Visitor pattern base class for tree processing.

Visitors separate algorithms (rendering, statistics) from the node classes.
Each node's ``accept`` method dispatches to the matching ``visit_*`` method.

For in-place, position-aware traversal with skip/resume control see
:mod:`autolink_headings.ast.traversal`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from autolink_headings.ast.nodes import Comment, Doctype, Element, Raw, Root, Text


class NodeVisitor(ABC):
    """Abstract base class for node visitors.

    Examples
    --------
    Visitor that counts elements:

        >>> class ElementCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_root(self, node):
        ...         for child in node.children:
        ...             child.accept(self)
        ...     def visit_element(self, node):
        ...         self.count += 1
        ...         for child in node.children:
        ...             child.accept(self)
        ...     def visit_text(self, node):
        ...         pass
        ...     def visit_comment(self, node):
        ...         pass
        ...     def visit_doctype(self, node):
        ...         pass
        ...     def visit_raw(self, node):
        ...         pass

    """

    @abstractmethod
    def visit_root(self, node: Root) -> Any:
        """Visit a Root node."""
        pass

    @abstractmethod
    def visit_element(self, node: Element) -> Any:
        """Visit an Element node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_comment(self, node: Comment) -> Any:
        """Visit a Comment node."""
        pass

    @abstractmethod
    def visit_doctype(self, node: Doctype) -> Any:
        """Visit a Doctype node."""
        pass

    @abstractmethod
    def visit_raw(self, node: Raw) -> Any:
        """Visit a Raw node."""
        pass
