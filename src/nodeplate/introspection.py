"""Static inspection of template trees.

Useful for checking that a component's defaults cover everything its
template references, or for documenting a component's inputs.

Example:
    >>> names = placeholder_names(template)
    >>> missing = names - set(defaults)

"""

from __future__ import annotations

from collections.abc import Iterator

from nodeplate.config import DEFAULT_CONFIG
from nodeplate.nodes.base import Node, Script
from nodeplate.substitute import PLACEHOLDER_RE


def placeholder_names(
    template: Node,
    *,
    children_marker: str = DEFAULT_CONFIG.children_marker,
) -> frozenset[str]:
    """All ``{{name}}`` references in a template tree.

    Covers attribute values, script code, text leaves, node content and
    references inside ``${...}`` expressions. Child markers are not
    references and are skipped.
    """
    names: set[str] = set()
    for text in _template_strings(template, children_marker):
        names.update(PLACEHOLDER_RE.findall(text))
    return frozenset(names)


def _template_strings(node: Node, children_marker: str) -> Iterator[str]:
    if node.is_text:
        if node.content.strip() != children_marker:
            yield node.content
        return
    for value in node.attrs.values():
        if isinstance(value, Script):
            yield value.code
        elif isinstance(value, str):
            yield value
    if node.content:
        yield node.content
    for child in node.children:
        yield from _template_strings(child, children_marker)
