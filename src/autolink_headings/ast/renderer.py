#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/autolink_headings/ast/renderer.py
"""HTML rendering for trees.

This module serializes trees to HTML strings so transformed documents can be
written out or compared in tests.

Property names follow hast conventions and are mapped to attribute names:
``className`` becomes ``class``, ``ariaDescribedBy`` becomes
``aria-describedby``, ``dataFooBar`` becomes ``data-foo-bar`` and ``tabIndex``
becomes ``tabindex``. ``raw`` nodes are written out unescaped.

Examples
--------
    >>> to_html(h("h2", {"id": "intro"}, "Intro"))
    '<h2 id="intro">Intro</h2>'

"""

from __future__ import annotations

import re
from html import escape

from autolink_headings.ast.nodes import Comment, Doctype, Element, Node, PropertyValue, Raw, Root, Text
from autolink_headings.ast.visitors import NodeVisitor
from autolink_headings.constants import COMMA_SEPARATED_PROPERTIES, PROPERTY_TO_ATTRIBUTE, VOID_ELEMENTS

_RAW_TEXT_ELEMENTS = frozenset({"script", "style"})
_UPPER = re.compile(r"[A-Z]")


def property_to_attribute(name: str) -> str:
    """Map a hast property name to its HTML attribute name."""
    if name in PROPERTY_TO_ATTRIBUTE:
        return PROPERTY_TO_ATTRIBUTE[name]
    if _is_booleanish(name):
        if name.startswith("aria"):
            return "aria-" + name[4:].lower()
        return _UPPER.sub(lambda match: "-" + match.group(0).lower(), name)
    return name.lower()


def _is_booleanish(name: str) -> bool:
    # aria-* and data-* attributes spell booleans out as "true"/"false"
    return (name.startswith("aria") or name.startswith("data")) and len(name) > 4 and name[4].isupper()


class HtmlRenderer(NodeVisitor):
    """Render a tree to an HTML string.

    Examples
    --------
    >>> renderer = HtmlRenderer()
    >>> renderer.render(Root(children=[Text(value="a < b")]))
    'a &lt; b'

    """

    def render(self, node: Node) -> str:
        """Render ``node`` and its descendants."""
        return node.accept(self)

    def _render_children(self, children: list[Node], raw: bool = False) -> str:
        if raw:
            return "".join(child.value if isinstance(child, Text) else child.accept(self) for child in children)
        return "".join(child.accept(self) for child in children)

    def visit_root(self, node: Root) -> str:
        """Render the children of the root."""
        return self._render_children(node.children)

    def visit_element(self, node: Element) -> str:
        """Render an element with its attributes and children."""
        attributes = "".join(self._render_attribute(name, value) for name, value in node.properties.items())
        opening = f"<{node.tag_name}{attributes}>"
        if node.tag_name in VOID_ELEMENTS:
            return opening
        content = self._render_children(node.children, raw=node.tag_name in _RAW_TEXT_ELEMENTS)
        return f"{opening}{content}</{node.tag_name}>"

    def visit_text(self, node: Text) -> str:
        """Render escaped text."""
        return escape(node.value, quote=False)

    def visit_comment(self, node: Comment) -> str:
        """Render a comment."""
        return f"<!--{node.value}-->"

    def visit_doctype(self, node: Doctype) -> str:
        """Render the HTML doctype."""
        return "<!doctype html>"

    def visit_raw(self, node: Raw) -> str:
        """Render raw markup as-is."""
        return node.value

    def _render_attribute(self, name: str, value: PropertyValue) -> str:
        attribute = property_to_attribute(name)
        booleanish = _is_booleanish(name)

        if value is None or (value is False and not booleanish):
            return ""
        if isinstance(value, bool):
            if booleanish:
                return f' {attribute}="{"true" if value else "false"}"'
            return f" {attribute}"
        if isinstance(value, list):
            separator = ", " if name in COMMA_SEPARATED_PROPERTIES else " "
            text = separator.join(str(item) for item in value)
        else:
            text = str(value)
        return f' {attribute}="{escape(text, quote=True)}"'


def to_html(node: Node) -> str:
    """Render ``node`` to an HTML string."""
    return HtmlRenderer().render(node)
