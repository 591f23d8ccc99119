#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for autolink_headings.

Constants are organized by category:
1. Type Definitions
2. Transform Defaults
3. HTML Serialization
4. Configuration Discovery
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Behavior = Literal["after", "append", "before", "prepend", "wrap", "substitute"]
OutputFormat = Literal["json", "html"]

# =============================================================================
# Transform Defaults
# =============================================================================

BEHAVIORS: tuple[str, ...] = ("after", "append", "before", "prepend", "wrap", "substitute")
DEFAULT_BEHAVIOR: Behavior = "prepend"

HEADING_TAG_NAMES: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")

# Extra link properties applied when the caller supplies none
INJECT_DEFAULT_PROPERTIES: dict[str, bool | int] = {"ariaHidden": True, "tabIndex": -1}
SUBSTITUTE_DEFAULT_PROPERTIES: dict[str, bool | int] = {"tabIndex": -1}

DEFAULT_ICON_TAG_NAME = "span"
DEFAULT_ICON_CLASS_NAMES: tuple[str, ...] = ("icon", "icon-link")

LINK_TAG_NAME = "a"

# =============================================================================
# HTML Serialization
# =============================================================================

VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

# hast property names that do not map to attributes by simple lowercasing
PROPERTY_TO_ATTRIBUTE: dict[str, str] = {
    "className": "class",
    "htmlFor": "for",
    "httpEquiv": "http-equiv",
    "acceptCharset": "accept-charset",
}

# Properties whose list values are joined with commas instead of spaces
COMMA_SEPARATED_PROPERTIES: frozenset[str] = frozenset({"accept", "coords", "sizes", "srcSet"})

# =============================================================================
# Configuration Discovery
# =============================================================================

CONFIG_FILENAMES: tuple[str, ...] = (
    ".autolink-headings.toml",
    ".autolink-headings.yaml",
    ".autolink-headings.yml",
    ".autolink-headings.json",
)
PYPROJECT_SECTION = "autolink-headings"
CONFIG_ENV_VAR = "AUTOLINK_HEADINGS_CONFIG"
