"""Reusable components built from template trees.

A component pairs a template with default values and an optional
deferred script. Calling it merges the caller's values over the
defaults, makes sure an ``id`` exists, interpolates the template and
attaches the script to the root node.

Example:
    >>> Alert = make_component(
    ...     tag("div", {"id": "{{id}}", "class": "alert alert-{{type}}"}, "{{children}}"),
    ...     script=Script("() => document.getElementById({{id}}).focus()"),
    ...     defaults={"type": "info"},
    ... )
    >>> node = Alert({"type": "error"}, "Disk full")
    >>> node.attrs["class"]
    'alert alert-error'

Thread-Safety:
    Components are read-only after construction. The only shared mutable
    state is the id counter behind :func:`next_id`, which is lock-guarded
    so concurrent renders (including free-threaded builds) always mint
    distinct ids.

"""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType
from typing import Any

from nodeplate.config import DEFAULT_CONFIG, RenderConfig
from nodeplate.exceptions import ErrorCode, TemplateError
from nodeplate.interpolate import interpolate
from nodeplate.nodes.base import Node, Script
from nodeplate.nodes.builders import ChildLike, flatten_children
from nodeplate.substitute import substitute
from nodeplate.utils.serialize import to_unwrapped

logger = logging.getLogger(__name__)

_id_counter = itertools.count(1)
_id_lock = threading.Lock()


def next_id(prefix: str = DEFAULT_CONFIG.id_prefix) -> str:
    """Mint a process-unique identifier, ``<prefix>-<n>``.

    ``n`` increases monotonically across all prefixes.
    """
    with _id_lock:
        n = next(_id_counter)
    return f"{prefix}-{n}"


def merge_values(*tables: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge value tables left to right; later tables win. None is skipped."""
    merged: dict[str, Any] = {}
    for table in tables:
        if table:
            merged.update(table)
    return merged


class Component:
    """A template plus defaults, callable as ``component(values, *children)``.

    Args:
        template: Root template node.
        script: Deferred script attached to every rendered root, unless
            the merged values supply (or opt out of) their own in the slot.
        defaults: Fallback values; caller values override per key.
        config: Reserved names (id prefix, script slot, child marker).
        name: Label used in ``repr`` and log messages.

    Raises:
        TemplateError: If ``template`` is not a Node.
    """

    __slots__ = ("_template", "_script", "_defaults", "_config", "_name")

    def __init__(
        self,
        template: Node,
        script: Script | str | None = None,
        defaults: Mapping[str, Any] | None = None,
        *,
        config: RenderConfig | None = None,
        name: str | None = None,
    ) -> None:
        if not isinstance(template, Node):
            raise TemplateError(
                f"Component template must be a Node, got {type(template).__name__}",
                code=ErrorCode.INVALID_TEMPLATE,
            )
        self._template = template
        self._script = _as_script(script)
        self._defaults: Mapping[str, Any] = MappingProxyType(dict(defaults or {}))
        self._config = config or DEFAULT_CONFIG
        self._name = name or template.tag or "component"

    @property
    def template(self) -> Node:
        return self._template

    @property
    def script(self) -> Script | None:
        return self._script

    @property
    def defaults(self) -> Mapping[str, Any]:
        return self._defaults

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __repr__(self) -> str:
        return f"<Component {self._name!r}>"

    def __call__(self, values: Mapping[str, Any] | None = None, *children: ChildLike) -> Node:
        """Render the component.

        Args:
            values: Caller values, merged over the defaults.
            *children: Nodes (or strings, or iterables of either) spliced
                in at the child marker.

        Returns:
            The rendered root node, with at most one deferred script in
            the script slot.
        """
        merged = merge_values(self._defaults, values)

        if _is_blank(merged.get("id")):
            merged["id"] = next_id(self._config.id_prefix)
            logger.debug("Minted id %s for %r", merged["id"], self)

        node = interpolate(
            self._template,
            merged,
            tuple(flatten_children(children)),
            children_marker=self._config.children_marker,
        )

        script = self._select_script(node, merged)
        if script is None:
            return node

        attrs = dict(node.attrs)
        attrs[self._config.script_slot] = Script(substitute(script.code, merged, literal=True))
        return replace(node, attrs=attrs)

    def _select_script(self, node: Node, values: Mapping[str, Any]) -> Script | None:
        """Pick the script to attach, or None.

        The template already routing a value into the slot wins; then a
        slot value in the merged table (caller over defaults, a blank one
        opts out); then the registered script.
        """
        slot = self._config.script_slot
        if slot in node.attrs:
            return None
        if slot in values:
            return _as_script(values[slot])
        return self._script


def make_component(
    template: Node,
    script: Script | str | None = None,
    defaults: Mapping[str, Any] | None = None,
    *,
    config: RenderConfig | None = None,
    name: str | None = None,
) -> Component:
    """Create a :class:`Component`. See the class for arguments."""
    return Component(template, script, defaults, config=config, name=name)


def _as_script(value: Any) -> Script | None:
    if isinstance(value, Script):
        return value if value else None
    if isinstance(value, str) and value.strip():
        return Script(value)
    return None


def _is_blank(value: Any) -> bool:
    return value is None or to_unwrapped(value).strip() == ""
