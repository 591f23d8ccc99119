#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/autolink_headings/transforms/__init__.py
"""Tree transforms.

The heading autolink transform is configured once and then applied to trees
in place:

    >>> from autolink_headings.transforms import autolink_headings
    >>> transform = autolink_headings(behavior="append")
    >>> transform(tree)

"""

from __future__ import annotations

from .autolink import (
    AutolinkHeadingsTransform,
    ResolvedStrategy,
    TreeTransform,
    autolink_headings,
    create_link,
    resolve_strategy,
)
from .options import (
    AutolinkOptions,
    GeneratedTemplate,
    StaticTemplate,
    Template,
    as_template,
    default_content,
    materialize,
    to_children,
    to_properties,
)

__all__ = [
    # Transform
    "AutolinkHeadingsTransform",
    "autolink_headings",
    "ResolvedStrategy",
    "resolve_strategy",
    "create_link",
    "TreeTransform",
    # Options
    "AutolinkOptions",
    # Templates
    "StaticTemplate",
    "GeneratedTemplate",
    "Template",
    "as_template",
    "materialize",
    "to_children",
    "to_properties",
    "default_content",
]
