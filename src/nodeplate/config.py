"""Render configuration for nodeplate components."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Names reserved by the engine.

    Attributes:
        id_prefix: Prefix of minted component identifiers (``<prefix>-<n>``).
        script_slot: Attribute under which a component's deferred script
            is attached to its root output node.
        children_marker: Text-leaf content (after trimming) replaced by
            the caller's child nodes.

    Example:
        >>> config = RenderConfig(id_prefix="ui")
        >>> Button = make_component(template, config=config)

    """

    id_prefix: str = "component"
    script_slot: str = "onDOMReady"
    children_marker: str = "{{children}}"


DEFAULT_CONFIG = RenderConfig()
