"""Placeholder substitution for template text.

Two markers are recognised:

- ``{{name}}`` -- replaced by the value of ``name``. Outside expressions
  the value is serialized in unwrapped form (``"primary"`` → ``primary``);
  a missing name becomes empty text.
- ``${ expr }`` -- ``{{name}}`` references inside are first replaced by
  *literal* forms (strings keep their quotes so ``{{kind}} === 'error'``
  compares strings), then the block is evaluated by
  :func:`nodeplate.expressions.evaluate` and replaced by the result. A
  missing name becomes ``null``.

The closing ``}`` of an expression block is found by brace-depth
counting, so placeholders and braces inside the block do not end it
early. A ``${`` that is never closed is left in place, together with the
rest of the text.

Example:
    >>> substitute("btn btn-{{variant}}", {"variant": "primary"})
    'btn btn-primary'
    >>> substitute("${{{open}} ? 'block' : 'none'}", {"open": False})
    'none'

"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from nodeplate.expressions import evaluate
from nodeplate.utils.serialize import to_literal, to_unwrapped

PLACEHOLDER_RE = re.compile(r"\{\{\s*([^{}]+?)\s*\}\}")

_EXPR_OPEN = "${"


def substitute(text: str, values: Mapping[str, Any], *, literal: bool = False) -> str:
    """Resolve every placeholder and expression block in ``text``.

    Args:
        text: Template text.
        values: Merged value table.
        literal: Serialize plain placeholders in literal form (quotes kept,
            missing names as ``null``). Used for script payloads.

    Returns:
        The resolved text. Never raises for malformed templates.
    """
    if "{{" not in text and _EXPR_OPEN not in text:
        return text

    parts: list[str] = []
    pos = 0
    while True:
        start = text.find(_EXPR_OPEN, pos)
        if start < 0:
            break
        end = find_block_end(text, start)
        if end < 0:
            parts.append(replace_placeholders(text[pos:start], values, literal=literal))
            parts.append(text[start:])
            return "".join(parts)
        parts.append(replace_placeholders(text[pos:start], values, literal=literal))
        body = replace_placeholders(text[start + len(_EXPR_OPEN) : end], values, literal=True)
        parts.append(evaluate(body))
        pos = end + 1

    parts.append(replace_placeholders(text[pos:], values, literal=literal))
    return "".join(parts)


def replace_placeholders(text: str, values: Mapping[str, Any], *, literal: bool = False) -> str:
    """Replace ``{{name}}`` references only; ``${`` is not special here."""
    if "{{" not in text:
        return text
    return PLACEHOLDER_RE.sub(lambda m: resolve(values, m.group(1), literal=literal), text)


def resolve(values: Mapping[str, Any], name: str, *, literal: bool = False) -> str:
    """Serialized value of ``name``; total over missing names."""
    if name not in values:
        return "null" if literal else ""
    value = values[name]
    return to_literal(value) if literal else to_unwrapped(value)


def whole_placeholder(text: str) -> str | None:
    """Name referenced when ``text`` is exactly one ``{{name}}``, else None.

    Surrounding whitespace is ignored.
    """
    match = PLACEHOLDER_RE.fullmatch(text.strip())
    return match.group(1) if match else None


def find_block_end(text: str, start: int) -> int:
    """Index of the ``}`` closing the ``${`` at ``start``, or -1."""
    depth = 1
    for i in range(start + len(_EXPR_OPEN), len(text)):
        char = text[i]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return i
    return -1
