"""autolink_headings - add links from HTML headings back to themselves.

The package provides one tree transform for document-processing pipelines
(e.g. Markdown to HTML): every heading element (``h1``..``h6``) that has an
``id`` gets an ``a`` element pointing at ``#id``, placed according to a
configurable behavior.

Key Features
------------
- Six placement behaviors: prepend, append, wrap, substitute, before, after
- Static or generated link content, grouping element and link properties
- Heading filters by tag name, property values or arbitrary predicate
- hast JSON input/output and HTML rendering
- Command-line interface with TOML/YAML/JSON configuration files

Requirements
------------
- Python 3.10+

Examples
--------
Link all headings with ids:

    >>> from autolink_headings import autolink_headings, json_to_tree, to_html
    >>> tree = json_to_tree(hast_json)
    >>> autolink_headings()(tree)
    >>> html = to_html(tree)

Wrap heading text, skipping top-level headings:

    >>> transform = autolink_headings(
    ...     behavior="wrap",
    ...     test=lambda node, index, parent: node.tag_name != "h1",
    ... )
    >>> transform(tree)

See Also
--------
autolink_headings.transforms : The transform and its options
autolink_headings.ast : Node definitions and tree utilities

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from autolink_headings.ast import (
    Comment,
    Doctype,
    Element,
    Node,
    Raw,
    Root,
    Text,
    h,
    json_to_tree,
    to_html,
    tree_to_json,
)
from autolink_headings.exceptions import (
    AutolinkError,
    CloneError,
    ConfigurationError,
    FileError,
    ValidationError,
)
from autolink_headings.transforms import (
    AutolinkHeadingsTransform,
    AutolinkOptions,
    GeneratedTemplate,
    StaticTemplate,
    autolink_headings,
)

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Transform
    "autolink_headings",
    "AutolinkHeadingsTransform",
    "AutolinkOptions",
    "StaticTemplate",
    "GeneratedTemplate",
    # Nodes
    "Node",
    "Root",
    "Element",
    "Text",
    "Comment",
    "Doctype",
    "Raw",
    "h",
    # I/O
    "json_to_tree",
    "tree_to_json",
    "to_html",
    # Exceptions
    "AutolinkError",
    "ValidationError",
    "ConfigurationError",
    "CloneError",
    "FileError",
]
