"""Template tree interpolation.

Walks a template :class:`~nodeplate.nodes.Node` and builds a fresh output
tree with every placeholder and expression resolved against a value
table, splicing caller-supplied children in at the child marker. The
template is never modified, so one template serves any number of
concurrent renders.

Attribute values are handled by kind:

====================  ==================================================
template value        output value
====================  ==================================================
``Script``            ``Script`` with code substituted (literal form)
``"{{name}}"``        the value itself if it is a ``Script``, else its
                      unwrapped text (``""`` when missing)
other ``str``         :func:`~nodeplate.substitute.substitute` result
bool/int/float/None   unchanged
list/tuple/mapping    compact JSON text
====================  ==================================================
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from nodeplate.config import DEFAULT_CONFIG
from nodeplate.nodes.base import Node, Script
from nodeplate.substitute import substitute, whole_placeholder
from nodeplate.utils.serialize import to_literal, to_unwrapped


def interpolate(
    template: Node,
    values: Mapping[str, Any],
    children: Sequence[Node] = (),
    *,
    children_marker: str = DEFAULT_CONFIG.children_marker,
) -> Node:
    """Render ``template`` against ``values``.

    Args:
        template: Template tree (not modified).
        values: Merged value table.
        children: Nodes spliced in wherever a text leaf reads exactly
            ``children_marker`` (after trimming). Spliced at every marker,
            at any depth.
        children_marker: Child marker text.

    Returns:
        A new, fully resolved node tree.
    """
    return Node(
        tag=template.tag,
        attrs={name: interpolate_attr(raw, values) for name, raw in template.attrs.items()},
        children=tuple(_interpolate_children(template.children, values, children, children_marker)),
        content=substitute(template.content, values) if template.content else "",
    )


def interpolate_attr(raw: Any, values: Mapping[str, Any]) -> Any:
    """Resolve a single attribute value."""
    if isinstance(raw, Script):
        return Script(substitute(raw.code, values, literal=True))
    if isinstance(raw, str):
        name = whole_placeholder(raw)
        if name is None:
            return substitute(raw, values)
        value = values.get(name)
        if isinstance(value, Script):
            return value
        return to_unwrapped(value)
    if raw is None or isinstance(raw, (bool, int, float)):
        return raw
    if isinstance(raw, (list, tuple, Mapping)):
        return to_literal(raw)
    return to_unwrapped(raw)


def _interpolate_children(
    template_children: Sequence[Node],
    values: Mapping[str, Any],
    children: Sequence[Node],
    children_marker: str,
):
    for child in template_children:
        if not child.is_text:
            yield interpolate(child, values, children, children_marker=children_marker)
        elif child.content.strip() == children_marker:
            yield from children
        else:
            yield Node(content=substitute(child.content, values))
