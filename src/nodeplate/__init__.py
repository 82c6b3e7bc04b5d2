"""nodeplate: node-tree templates for server-rendered UI components.

Templates are immutable trees of markup nodes whose attribute values and
text carry ``{{name}}`` placeholders and ``${...}`` micro-expressions.
Components pair a template with default values and an optional deferred
script; calling a component produces a fully resolved output tree, ready
for :func:`render_html`.

Quickstart:
    >>> from nodeplate import make_component, render_html, tag
    >>> Badge = make_component(
    ...     tag("span", {"class": "badge ${{{pill}} ? 'rounded-pill' : ''}"}, "{{label}}"),
    ...     defaults={"pill": False, "label": ""},
    ... )
    >>> render_html(Badge({"label": "New", "pill": True}))
    '<span class="badge rounded-pill">New</span>'

Architecture:
Component → value merge → interpolate (tree) → substitute (text)
→ expressions (lexer → parser → evaluator) → output tree → render_html

Placeholder syntax:
- ``{{name}}``: value lookup. Unwrapped in attributes/text
  (``"primary"`` → ``primary``), literal inside expressions and scripts.
- ``${ expr }``: ternaries, ``===``/``==``/``!==``/``!=``, ``&&``/``||``,
  parentheses and ``'text'.trim()``.
- ``{{children}}`` as a whole text leaf: where caller children go.

Totality:
Rendering never raises for template text or values. Missing names
resolve to empty text (``null`` inside expressions), malformed
expressions degrade to their literal text, and values JSON cannot encode
fall back to ``str()``.

Thread-Safety:
Templates, defaults and components are read-only after construction.
Every render builds new nodes; the id counter is lock-guarded.

"""

from nodeplate.component import Component, make_component, merge_values, next_id
from nodeplate.config import DEFAULT_CONFIG, RenderConfig
from nodeplate.exceptions import ErrorCode, ExpressionSyntaxError, TemplateError
from nodeplate.expressions import evaluate, evaluate_condition
from nodeplate.interpolate import interpolate
from nodeplate.introspection import placeholder_names
from nodeplate.nodes import Node, Script, dump_node, load_node, tag, text
from nodeplate.render import render_html
from nodeplate.substitute import substitute
from nodeplate.utils.serialize import to_literal, to_unwrapped

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "Component",
    "ErrorCode",
    "ExpressionSyntaxError",
    "Node",
    "RenderConfig",
    "Script",
    "TemplateError",
    "__version__",
    "dump_node",
    "evaluate",
    "evaluate_condition",
    "interpolate",
    "load_node",
    "make_component",
    "merge_values",
    "next_id",
    "placeholder_names",
    "render_html",
    "substitute",
    "tag",
    "text",
    "to_literal",
    "to_unwrapped",
]
