"""HTML serialization of rendered node trees.

Rules:
    - Text leaves are emitted as-is (their content is trusted template text).
    - Attribute values are stringified with the unwrapped serializer,
      HTML-escaped, and have line breaks flattened to spaces.
    - An attribute whose value is ``None`` or the text ``false`` is
      omitted, so ``{"disabled": "{{disabled}}"}`` disappears when
      ``disabled`` is False.
    - Void elements (``input``, ``br``, ...) get no closing tag.
    - A populated script slot is not an attribute: it becomes a
      ``<script>`` after the element that calls the function once, when
      the document is ready (immediately if it already is).

Example:
    >>> render_html(tag("button", {"class": "btn", "disabled": "false"}, "OK"))
    '<button class="btn">OK</button>'

"""

from __future__ import annotations

from nodeplate.config import DEFAULT_CONFIG
from nodeplate.nodes.base import Node, Script
from nodeplate.utils.constants import OMITTED_ATTR_VALUE, VOID_ELEMENTS
from nodeplate.utils.html import attr_escape
from nodeplate.utils.serialize import to_unwrapped

_READY_WRAPPER = (
    "(function(){{var fn={code};"
    "if(document.readyState==='loading'){{"
    "document.addEventListener('DOMContentLoaded',fn,{{once:true}});"
    "}}else{{fn();}}}})();"
)


def render_html(node: Node, *, script_slot: str = DEFAULT_CONFIG.script_slot) -> str:
    """Serialize a rendered tree to HTML."""
    out: list[str] = []
    _render(node, out, script_slot)
    return "".join(out)


def ready_script(code: str) -> str:
    """Wrap function-expression code in a run-once-when-ready ``<script>``."""
    # Keep the payload from closing the script element early
    safe = code.replace("</script", "<\\/script")
    return f"<script>{_READY_WRAPPER.format(code=safe)}</script>"


def _render(node: Node, out: list[str], script_slot: str) -> None:
    if node.is_text:
        out.append(node.content)
        return

    on_ready = ""
    out.append(f"<{node.tag}")
    for name, value in node.attrs.items():
        if name == script_slot:
            on_ready = _script_code(value)
            continue
        if value is None:
            continue
        text = to_unwrapped(value)
        if text == OMITTED_ATTR_VALUE:
            continue
        out.append(f' {name}="{attr_escape(text)}"')
    out.append(">")

    if node.tag.lower() not in VOID_ELEMENTS:
        out.append(node.content)
        for child in node.children:
            _render(child, out, script_slot)
        out.append(f"</{node.tag}>")

    if on_ready.strip():
        out.append(ready_script(on_ready))


def _script_code(value: object) -> str:
    if isinstance(value, Script):
        return value.code
    if isinstance(value, str):
        return value
    return ""
