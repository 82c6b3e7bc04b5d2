"""Shared constants for nodeplate."""

from __future__ import annotations

# Elements that never have children or a closing tag
# Source: WHATWG HTML Living Standard, "void elements"
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
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Attribute values that suppress the attribute entirely when rendered
OMITTED_ATTR_VALUE = "false"
