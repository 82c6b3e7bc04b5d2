"""Value serialization for placeholder substitution.

Two forms:

- **literal**: text valid as a JavaScript literal. Strings keep their
  quotes, lists and mappings become compact JSON, booleans are
  ``true``/``false``, ``None`` is ``null``. Used inside ``${...}``
  expressions and deferred scripts.
- **unwrapped**: the literal form with one outer layer of string quoting
  removed. Used for attribute values and text, where ``"primary"``
  should read ``primary``. Quoting of elements nested inside lists or
  mappings is kept: ``["a","b"]`` stays ``["a","b"]``.

Neither function raises. Values the JSON encoder rejects fall back to
``str(value)``.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import math
from collections.abc import Mapping, Set
from typing import Any

from nodeplate.nodes.base import Script

logger = logging.getLogger(__name__)


def to_literal(value: Any) -> str:
    """Serialize a value to its JavaScript-literal text.

    Example:
        >>> to_literal("primary")
        '"primary"'
        >>> to_literal(["a", "b"])
        '["a","b"]'
        >>> to_literal(None)
        'null'
    """
    if value is None:
        return "null"
    if isinstance(value, Script):
        return value.code
    # bool before int: True is an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_literal(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    try:
        return json.dumps(
            value,
            ensure_ascii=False,
            separators=(",", ":"),
            default=_json_default,
        )
    except (TypeError, ValueError) as e:
        logger.debug("Falling back to str() for %s value: %s", type(value).__name__, e)
        return str(value)


def to_unwrapped(value: Any) -> str:
    """Serialize a value for attribute/text context.

    Example:
        >>> to_unwrapped("primary")
        'primary'
        >>> to_unwrapped(True)
        'true'
        >>> to_unwrapped(None)
        ''
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Script):
        return value.code
    return unwrap_literal(to_literal(value))


def unwrap_literal(text: str) -> str:
    """Strip one layer of JSON string quoting, resolving escapes.

    Text that is not exactly one JSON string literal is returned unchanged.
    """
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        return text
    try:
        decoded = json.loads(text)
    except ValueError:
        return text
    return decoded if isinstance(decoded, str) else text


def _float_literal(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _json_default(obj: Any) -> Any:
    if isinstance(obj, Script):
        return obj.code
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, Set):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
