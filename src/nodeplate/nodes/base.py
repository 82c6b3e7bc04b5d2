"""Node types for nodeplate templates and output trees."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Script:
    """JavaScript to run once on the client after the node is presented.

    As an attribute value its code is interpolated with literal
    serialization (strings keep their quotes) because the destination is
    code, not an attribute string.
    """

    code: str

    def __bool__(self) -> bool:
        return bool(self.code.strip())


@dataclass(frozen=True, slots=True)
class Node:
    """A markup node.

    The same type serves as template (attribute values and text may hold
    ``{{name}}`` placeholders and ``${...}`` expressions) and as render
    output (everything resolved). Nodes are never mutated; rendering
    builds new ones.

    Attributes:
        tag: Element name. Empty for a text leaf.
        attrs: Attribute name to raw value (str, bool, number, Script, ...).
        children: Child nodes in document order.
        content: Literal text. For text leaves this is the whole payload.

    """

    tag: str = ""
    attrs: Mapping[str, Any] = field(default_factory=dict)
    children: tuple[Node, ...] = ()
    content: str = ""

    @property
    def is_text(self) -> bool:
        """True for text leaves (no tag)."""
        return not self.tag
