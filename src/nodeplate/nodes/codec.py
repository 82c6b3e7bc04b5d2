"""JSON encoding of node trees.

Lets template trees be stored and reloaded, and output trees be shipped
to another process for serialization. ``Script`` attribute values are
encoded as ``{"script": "<code>"}``.
"""

from __future__ import annotations

import json
from typing import Any

from nodeplate.exceptions import ErrorCode, TemplateError
from nodeplate.nodes.base import Node, Script

_SCRIPT_KEY = "script"


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node tree to plain JSON-compatible data."""
    return {
        "tag": node.tag,
        "attrs": {name: _encode_attr(value) for name, value in node.attrs.items()},
        "children": [node_to_dict(child) for child in node.children],
        "content": node.content,
    }


def node_from_dict(data: dict[str, Any]) -> Node:
    """Rebuild a node tree from :func:`node_to_dict` output.

    Missing keys take the Node defaults, so ``{}`` is an empty text leaf.
    """
    attrs = data.get("attrs") or {}
    return Node(
        tag=data.get("tag") or "",
        attrs={name: _decode_attr(value) for name, value in attrs.items()},
        children=tuple(node_from_dict(child) for child in data.get("children") or ()),
        content=data.get("content") or "",
    )


def dump_node(node: Node, *, indent: int | None = None) -> str:
    """Serialize a node tree to JSON text."""
    return json.dumps(node_to_dict(node), indent=indent, ensure_ascii=False, default=str)


def load_node(source: str) -> Node:
    """Parse JSON text produced by :func:`dump_node`.

    Raises:
        TemplateError: If the text is not valid JSON or not a JSON object.
    """
    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        raise TemplateError(
            f"Invalid node JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            code=ErrorCode.INVALID_NODE_JSON,
        ) from e
    if not isinstance(data, dict):
        raise TemplateError(
            f"Invalid node JSON: expected an object, got {type(data).__name__}",
            code=ErrorCode.INVALID_NODE_JSON,
        )
    return node_from_dict(data)


def _encode_attr(value: Any) -> Any:
    if isinstance(value, Script):
        return {_SCRIPT_KEY: value.code}
    return value


def _decode_attr(value: Any) -> Any:
    if isinstance(value, dict) and set(value) == {_SCRIPT_KEY}:
        return Script(str(value[_SCRIPT_KEY]))
    return value
