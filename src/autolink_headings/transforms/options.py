#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/autolink_headings/transforms/options.py
"""Options and templates for the heading autolink transform.

Templates come in two flavors, represented as a tagged variant:

- :class:`StaticTemplate` wraps plain data (a node, a list of nodes, a
  property mapping). Each use produces an independent deep copy.
- :class:`GeneratedTemplate` wraps a function called with the current heading.
  Its return value is used as-is; the function is responsible for returning
  fresh objects on every call.

:class:`AutolinkOptions` is the immutable, user-facing configuration object.

"""

from __future__ import annotations

import sys
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Generic, Optional, TypeVar, Union

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from autolink_headings.ast.clone import structured_clone
from autolink_headings.ast.nodes import Element, Node, Properties, Text
from autolink_headings.ast.serialization import dict_to_node
from autolink_headings.ast.utils import ElementTest
from autolink_headings.constants import BEHAVIORS, DEFAULT_ICON_CLASS_NAMES, DEFAULT_ICON_TAG_NAME
from autolink_headings.exceptions import ConfigurationError, ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class StaticTemplate(Generic[T]):
    """Template backed by plain data, copied on every use."""

    value: T


@dataclass(frozen=True)
class GeneratedTemplate(Generic[T]):
    """Template backed by a function of the current heading."""

    build: Callable[[Element], T]


Template = Union[StaticTemplate[T], GeneratedTemplate[T]]

ContentValue = Union[Node, list[Node]]
ContentTemplateInput = Union[Node, list[Node], tuple[Node, ...], Callable[[Element], ContentValue], None]
PropertiesTemplateInput = Union[Mapping[str, Any], Callable[[Element], Properties], None]


def as_template(value: Any) -> Optional[Template[Any]]:
    """Wrap a raw option value in the matching template variant.

    None stays None, callables become :class:`GeneratedTemplate`, templates are
    returned unchanged and everything else becomes :class:`StaticTemplate`.
    """
    if value is None or isinstance(value, (StaticTemplate, GeneratedTemplate)):
        return value
    if callable(value):
        return GeneratedTemplate(value)
    return StaticTemplate(value)


def materialize(template: Template[T], heading: Element) -> T:
    """Produce a value owned by exactly one new location in the tree.

    Parameters
    ----------
    template : StaticTemplate or GeneratedTemplate
        Template to resolve
    heading : Element
        Heading currently being decorated

    Returns
    -------
    Any
        A deep copy of static data, or the generator's return value

    Raises
    ------
    CloneError
        If static data contains values that cannot be copied

    """
    if isinstance(template, GeneratedTemplate):
        return template.build(heading)
    return structured_clone(template.value)


def to_children(template: Template[ContentValue], heading: Element) -> list[Node]:
    """Materialize a content template as a list of child nodes."""
    result = materialize(template, heading)
    if isinstance(result, (list, tuple)):
        return list(result)
    return [result]


def to_properties(template: Optional[Template[Properties]], heading: Element) -> Properties:
    """Materialize a properties template; an absent template gives ``{}``."""
    if template is None:
        return {}
    return dict(materialize(template, heading) or {})


def default_content() -> Element:
    """Return the default link content, ``<span class="icon icon-link"></span>``."""
    return Element(tag_name=DEFAULT_ICON_TAG_NAME, properties={"className": list(DEFAULT_ICON_CLASS_NAMES)})


@dataclass(frozen=True)
class AutolinkOptions:
    """Configuration for :class:`~autolink_headings.transforms.autolink.AutolinkHeadingsTransform`.

    Parameters
    ----------
    behavior : str or None, default = None
        Where links go: ``"prepend"`` (default when None or empty), ``"append"``,
        ``"wrap"``, ``"substitute"``, ``"before"`` or ``"after"``
    content : Node, list of Node or callable, optional
        Link content for every behavior except ``"wrap"``. Defaults to
        ``<span class="icon icon-link"></span>``.
    group : Element or callable, optional
        Element wrapping the heading and its link, for ``"before"``/``"after"``
    properties : mapping or callable, optional
        Extra link properties. Defaults to ``{"ariaHidden": True, "tabIndex": -1}``
        for ``"prepend"``/``"append"``, ``{"tabIndex": -1}`` for ``"substitute"``
        and nothing otherwise. ``href`` is always overwritten.
    test : str, list, mapping or callable, optional
        Extra filter for which headings are linked; see
        :func:`~autolink_headings.ast.utils.convert_element`

    Raises
    ------
    ConfigurationError
        If ``behavior`` is unrecognized or a static template has the wrong shape

    """

    behavior: Optional[str] = field(
        default=None,
        metadata={"help": "How to create links", "choices": list(BEHAVIORS)},
    )
    content: ContentTemplateInput = field(
        default=None,
        metadata={"help": "Content to insert in the link (node, list of nodes, or function of the heading)"},
    )
    group: Union[Element, Callable[[Element], Any], None] = field(
        default=None,
        metadata={"help": "Element wrapping heading and link when behavior is 'before' or 'after'"},
    )
    properties: PropertiesTemplateInput = field(
        default=None,
        metadata={"help": "Extra properties to set on the link"},
    )
    test: ElementTest = field(
        default=None,
        metadata={"help": "Extra test for which headings are linked"},
    )

    def __post_init__(self) -> None:
        """Validate behavior and the shape of static templates.

        Raises
        ------
        ConfigurationError
            If any field has an unsupported value

        """
        if self.behavior and self.behavior not in BEHAVIORS:
            raise ConfigurationError(
                f"Unknown behavior {self.behavior!r}; expected one of: {', '.join(BEHAVIORS)}",
                parameter_name="behavior",
                parameter_value=self.behavior,
            )

        content = self.content
        if content is not None and not _is_dynamic(content):
            items = content if isinstance(content, (list, tuple)) else [content]
            if not all(isinstance(item, Node) for item in items):
                raise ConfigurationError(
                    "content must be a node, a list of nodes, or a function returning them",
                    parameter_name="content",
                    parameter_value=content,
                )

        group = self.group
        if group is not None and not _is_dynamic(group) and not isinstance(group, Element):
            raise ConfigurationError(
                f"group must be a single element or a function returning one, got {type(group).__name__}",
                parameter_name="group",
                parameter_value=group,
            )

        properties = self.properties
        if properties is not None and not _is_dynamic(properties) and not isinstance(properties, Mapping):
            raise ConfigurationError(
                f"properties must be a mapping or a function returning one, got {type(properties).__name__}",
                parameter_name="properties",
                parameter_value=properties,
            )

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced."""
        return replace(self, **kwargs)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AutolinkOptions:
        """Build options from plain configuration data.

        Templates may be given in hast JSON form: ``content`` as a node object,
        a list of node objects or a string (inserted as text); ``group`` as an
        element object. ``test`` may be a tag name, a list of tag names or a
        property mapping.

        Parameters
        ----------
        data : mapping
            Configuration data, e.g. loaded from a TOML or YAML file

        Returns
        -------
        AutolinkOptions
            Validated options

        Raises
        ------
        ConfigurationError
            If keys are unknown or values cannot be converted

        Examples
        --------
        >>> options = AutolinkOptions.from_dict({
        ...     "behavior": "append",
        ...     "content": {"type": "text", "value": "#"},
        ... })

        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown option(s): {', '.join(unknown)}; expected: {', '.join(sorted(known))}",
                parameter_name=unknown[0],
            )

        values = dict(data)
        try:
            if "content" in values:
                values["content"] = _content_from_data(values["content"])
            if isinstance(values.get("group"), Mapping):
                values["group"] = dict_to_node(dict(values["group"]))
        except ValidationError as e:
            if isinstance(e, ConfigurationError):
                raise
            raise ConfigurationError(f"Invalid template in configuration: {e.message}", original_error=e) from e

        return cls(**values)


def _is_dynamic(value: Any) -> bool:
    return callable(value) or isinstance(value, (StaticTemplate, GeneratedTemplate))


def _content_from_data(value: Any) -> Any:
    if isinstance(value, str):
        return Text(value=value)
    if isinstance(value, Mapping):
        return dict_to_node(dict(value))
    if isinstance(value, list):
        return [_content_from_data(item) for item in value]
    return value
