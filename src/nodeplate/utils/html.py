"""HTML escaping for attribute values."""

from __future__ import annotations

# Single-pass translation table
_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#x27;",
    }
)

_NEWLINE_TABLE = str.maketrans({"\n": " ", "\r": " "})


def html_escape(value: str) -> str:
    """Escape ``& < > " '`` for safe use inside a quoted attribute."""
    return value.translate(_ESCAPE_TABLE)


def attr_escape(value: str) -> str:
    """Escape an attribute value and flatten line breaks to spaces."""
    return html_escape(value).translate(_NEWLINE_TABLE)
