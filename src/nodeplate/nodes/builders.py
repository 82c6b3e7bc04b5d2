"""Small constructors for building template trees by hand.

Example:
    >>> card = tag(
    ...     "div",
    ...     {"id": "{{id}}", "class": "card card-{{variant}}"},
    ...     tag("h3", None, "{{title}}"),
    ...     "{{children}}",
    ... )

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from nodeplate.nodes.base import Node

ChildLike = Node | str | Iterable["ChildLike"] | None


def text(content: str) -> Node:
    """Create a text leaf."""
    return Node(content=content)


def tag(name: str, attrs: Mapping[str, Any] | None = None, *children: ChildLike) -> Node:
    """Create an element node.

    Children may be nodes, strings (wrapped as text leaves), nested
    iterables of either (flattened in order), or None (skipped).
    """
    return Node(tag=name, attrs=dict(attrs or {}), children=tuple(flatten_children(children)))


def flatten_children(children: Iterable[ChildLike]) -> Iterator[Node]:
    """Normalize child arguments to nodes, in order."""
    for child in children:
        if child is None:
            continue
        if isinstance(child, Node):
            yield child
        elif isinstance(child, str):
            yield text(child)
        else:
            yield from flatten_children(child)
