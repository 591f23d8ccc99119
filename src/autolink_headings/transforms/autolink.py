#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/autolink_headings/transforms/autolink.py
"""Add links from headings back to themselves.

The transform only applies to headings (``h1``..``h6``) that have an ``id``
property. Generate ids upstream before running it.

Behaviors
---------
- ``prepend`` (default): inject the link before the heading text
- ``append``: inject the link after the heading text
- ``wrap``: wrap the whole heading text with the link
- ``substitute``: replace the heading text with the link content
- ``before``: insert the link before the heading
- ``after``: insert the link after the heading

Examples
--------
Default behavior:

    >>> tree = Root(children=[h("h2", {"id": "intro"}, "Intro")])
    >>> autolink_headings()(tree)
    >>> to_html(tree)
    '<h2 id="intro"><a aria-hidden="true" tabindex="-1" href="#intro"><span class="icon icon-link"></span></a>Intro</h2>'

Wrap heading text, linking only second-level headings:

    >>> transform = AutolinkHeadingsTransform(behavior="wrap", test="h2")
    >>> transform(tree)

Group the heading and its link in a ``div``:

    >>> transform = AutolinkHeadingsTransform(
    ...     behavior="before",
    ...     group=h("div", {"className": ["heading-group"]}),
    ... )

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from autolink_headings.ast.nodes import Element, Node, Parent, Properties
from autolink_headings.ast.traversal import SKIP, VisitResult, skip_to, visit
from autolink_headings.ast.utils import ElementPredicate, convert_element, heading_rank
from autolink_headings.constants import (
    DEFAULT_BEHAVIOR,
    INJECT_DEFAULT_PROPERTIES,
    LINK_TAG_NAME,
    SUBSTITUTE_DEFAULT_PROPERTIES,
    Behavior,
)
from autolink_headings.exceptions import ConfigurationError, ValidationError
from autolink_headings.transforms.options import (
    AutolinkOptions,
    ContentValue,
    StaticTemplate,
    Template,
    as_template,
    default_content,
    materialize,
    to_children,
    to_properties,
)

logger = logging.getLogger(__name__)

TreeTransform = Callable[[Node], None]

_DEFAULT_PROPERTIES: dict[str, dict[str, Any]] = {
    "prepend": INJECT_DEFAULT_PROPERTIES,
    "append": INJECT_DEFAULT_PROPERTIES,
    "substitute": SUBSTITUTE_DEFAULT_PROPERTIES,
}


@dataclass(frozen=True)
class ResolvedStrategy:
    """Settings resolved once from :class:`AutolinkOptions`.

    Parameters
    ----------
    behavior : str
        Placement behavior
    content : Template
        Link content template
    group : Template or None
        Grouping template, only set for ``before``/``after``
    properties : Template or None
        Extra link properties template
    test : callable
        Extra heading filter ``(node, index, parent) -> bool``

    """

    behavior: Behavior
    content: Template[ContentValue]
    group: Optional[Template[Any]]
    properties: Optional[Template[Properties]]
    test: ElementPredicate

    def qualifies(self, node: Node, index: Optional[int], parent: Optional[Parent]) -> bool:
        """Return True if ``node`` is a heading with an id that passes the test."""
        return (
            heading_rank(node) is not None
            and bool(node.properties.get("id"))  # type: ignore[attr-defined]
            and self.test(node, index, parent)
        )

    def place(self, node: Element, index: Optional[int], parent: Optional[Parent]) -> Optional[VisitResult]:
        """Link ``node`` according to the behavior and return the traversal directive."""
        return _PLACEMENTS[self.behavior](self, node, index, parent)


def resolve_strategy(options: Union[AutolinkOptions, Mapping[str, Any], None] = None) -> ResolvedStrategy:
    """Resolve options into a :class:`ResolvedStrategy`.

    Parameters
    ----------
    options : AutolinkOptions, mapping or None
        Configuration; a mapping is read with :meth:`AutolinkOptions.from_dict`

    Returns
    -------
    ResolvedStrategy
        Immutable resolved settings

    Raises
    ------
    ConfigurationError
        If the options are invalid

    """
    if options is None:
        options = AutolinkOptions()
    elif isinstance(options, Mapping):
        options = AutolinkOptions.from_dict(options)

    behavior: Behavior = options.behavior or DEFAULT_BEHAVIOR  # type: ignore[assignment]

    properties = options.properties
    if properties is None and behavior in _DEFAULT_PROPERTIES:
        properties = _DEFAULT_PROPERTIES[behavior]

    group = None
    if options.group is not None:
        if behavior in ("before", "after"):
            group = as_template(options.group)
        else:
            logger.debug("Ignoring group option for behavior %r", behavior)

    try:
        test = convert_element(options.test)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid heading test: {e.message}", parameter_name="test",
                                 parameter_value=options.test, original_error=e) from e

    content = as_template(options.content) or StaticTemplate(default_content())

    return ResolvedStrategy(
        behavior=behavior,
        content=content,
        group=group,
        properties=as_template(properties),
        test=test,
    )


def create_link(heading: Element, properties: Properties, children: list[Node]) -> Element:
    """Create the ``a`` element pointing at ``heading``.

    ``href`` is computed from the heading's current ``id`` and overrides any
    ``href`` in ``properties``.
    """
    return Element(
        tag_name=LINK_TAG_NAME,
        properties={**properties, "href": f"#{heading.properties['id']}"},
        children=children,
    )


def _inject(strategy: ResolvedStrategy, node: Element, index: Optional[int],
            parent: Optional[Parent]) -> VisitResult:
    children = to_children(strategy.content, node)
    link = create_link(node, to_properties(strategy.properties, node), children)
    if strategy.behavior == "prepend":
        node.children.insert(0, link)
    else:
        node.children.append(link)
    return SKIP


def _around(strategy: ResolvedStrategy, node: Element, index: Optional[int],
            parent: Optional[Parent]) -> Optional[VisitResult]:
    if index is None or parent is None:
        logger.debug("Heading #%s has no parent, cannot insert link %s it", node.properties.get("id"),
                     strategy.behavior)
        return None

    children = to_children(strategy.content, node)
    link = create_link(node, to_properties(strategy.properties, node), children)
    nodes: list[Node] = [link, node] if strategy.behavior == "before" else [node, link]

    if strategy.group is not None:
        grouping = materialize(strategy.group, node)
        if isinstance(grouping, Element):
            grouping.children = nodes
            nodes = [grouping]
        else:
            logger.debug("Group for heading #%s is not a single element, inserting ungrouped",
                         node.properties.get("id"))

    parent.children[index:index + 1] = nodes
    return skip_to(index + len(nodes))


def _wrap(strategy: ResolvedStrategy, node: Element, index: Optional[int],
          parent: Optional[Parent]) -> VisitResult:
    node.children = [create_link(node, to_properties(strategy.properties, node), node.children)]
    return SKIP


def _substitute(strategy: ResolvedStrategy, node: Element, index: Optional[int],
                parent: Optional[Parent]) -> VisitResult:
    children = to_children(strategy.content, node)
    node.children = [create_link(node, to_properties(strategy.properties, node), children)]
    return SKIP


_PLACEMENTS: dict[str, Callable[[ResolvedStrategy, Element, Optional[int], Optional[Parent]], Optional[VisitResult]]] = {
    "prepend": _inject,
    "append": _inject,
    "before": _around,
    "after": _around,
    "wrap": _wrap,
    "substitute": _substitute,
}


class AutolinkHeadingsTransform:
    """Tree transform adding self-links to headings with ids.

    Configuration is resolved once on construction; the instance can then be
    applied to any number of trees. Each call mutates the given tree in place.

    Parameters
    ----------
    options : AutolinkOptions, mapping or None, default = None
        Base configuration
    **overrides
        Option fields overriding ``options`` (e.g. ``behavior="wrap"``)

    Raises
    ------
    ConfigurationError
        If the configuration is invalid

    Examples
    --------
    >>> transform = AutolinkHeadingsTransform(behavior="append", content=Text(value="#"))
    >>> transform(tree)

    """

    name = "autolink-headings"

    def __init__(self, options: Union[AutolinkOptions, Mapping[str, Any], None] = None, **overrides: Any):
        """Resolve options into a placement strategy."""
        if isinstance(options, Mapping):
            options = AutolinkOptions.from_dict(options)
        if overrides:
            options = options.create_updated(**overrides) if options else AutolinkOptions(**overrides)
        self.options = options or AutolinkOptions()
        self.strategy = resolve_strategy(self.options)

    def __call__(self, tree: Node) -> None:
        """Link every qualifying heading in ``tree``, in document order."""
        self.link_headings(tree)

    def link_headings(self, tree: Node) -> list[Element]:
        """Link headings in ``tree`` and return the ones that received a link.

        Headings nested inside an already linked heading are never visited,
        and ``before``/``after`` skip headings without a parent, so the result
        can be shorter than the number of qualifying headings.

        Parameters
        ----------
        tree : Node
            Tree to mutate in place

        Returns
        -------
        list of Element
            Linked headings, in document order

        """
        strategy = self.strategy
        linked: list[Element] = []

        def link_heading(node: Node, index: Optional[int], parent: Optional[Parent]) -> Optional[VisitResult]:
            if not strategy.qualifies(node, index, parent):
                return None
            logger.debug("Linking heading #%s (%s)", node.properties["id"], strategy.behavior)  # type: ignore[attr-defined]
            result = strategy.place(node, index, parent)  # type: ignore[arg-type]
            if result is not None:
                linked.append(node)  # type: ignore[arg-type]
            return result

        visit(tree, link_heading, test=Element)
        return linked

    def transform(self, tree: Node) -> Node:
        """Apply the transform and return the same, mutated, tree."""
        self(tree)
        return tree

    def __repr__(self) -> str:
        """Return a short description including the behavior."""
        return f"{type(self).__name__}(behavior={self.strategy.behavior!r})"


def autolink_headings(options: Union[AutolinkOptions, Mapping[str, Any], None] = None,
                      **overrides: Any) -> TreeTransform:
    """Create a transform that adds links from headings back to themselves.

    Parameters
    ----------
    options : AutolinkOptions, mapping or None, default = None
        Configuration
    **overrides
        Option fields overriding ``options``

    Returns
    -------
    callable
        ``transform(tree) -> None``, mutating the tree in place

    Raises
    ------
    ConfigurationError
        If the configuration is invalid

    """
    return AutolinkHeadingsTransform(options, **overrides)
