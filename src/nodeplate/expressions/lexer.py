"""Tokenizer for ``${...}`` micro-expressions.

Quote-aware: anything between matching single or double quotes is one
STRING token, so ``'a ? b : c'`` never yields operator tokens. Backslash
escapes inside strings are honoured. Everything that is not a string,
operator or whitespace accumulates into WORD tokens (``true``, ``42``,
``primary``).

Operator matching is longest-first so ``!==`` is never read as ``!``
followed by ``==``.
"""

from __future__ import annotations

import json

from nodeplate._types import Token, TokenType
from nodeplate.exceptions import ErrorCode, ExpressionSyntaxError
from nodeplate.utils.serialize import unwrap_literal

# Longest first
_OPERATORS: tuple[tuple[str, TokenType], ...] = (
    (".trim()", TokenType.TRIM),
    ("===", TokenType.STRICT_EQ),
    ("!==", TokenType.STRICT_NE),
    ("==", TokenType.EQ),
    ("!=", TokenType.NE),
    ("&&", TokenType.AND),
    ("||", TokenType.OR),
    ("(", TokenType.LPAREN),
    (")", TokenType.RPAREN),
    ("?", TokenType.QUESTION),
    (":", TokenType.COLON),
)

_QUOTES = frozenset("'\"")

_SINGLE_QUOTE_ESCAPES = {
    "'": "'",
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


def tokenize(source: str) -> list[Token]:
    """Split an expression into tokens.

    Raises:
        ExpressionSyntaxError: On an unterminated string literal.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(source)
    word_start = -1

    def flush_word(end: int) -> None:
        nonlocal word_start
        if word_start >= 0:
            tokens.append(Token(TokenType.WORD, source[word_start:end], word_start, end))
            word_start = -1

    while pos < length:
        char = source[pos]

        if char.isspace():
            flush_word(pos)
            pos += 1
            continue

        if char in _QUOTES:
            flush_word(pos)
            end = _scan_string(source, pos)
            tokens.append(Token(TokenType.STRING, _decode_string(source[pos:end]), pos, end))
            pos = end
            continue

        operator = _match_operator(source, pos)
        if operator is not None:
            text, token_type = operator
            flush_word(pos)
            tokens.append(Token(token_type, text, pos, pos + len(text)))
            pos += len(text)
            continue

        if word_start < 0:
            word_start = pos
        pos += 1

    flush_word(length)
    return tokens


def _match_operator(source: str, pos: int) -> tuple[str, TokenType] | None:
    for text, token_type in _OPERATORS:
        if source.startswith(text, pos):
            return text, token_type
    return None


def _scan_string(source: str, start: int) -> int:
    """Return the offset just past the string literal opening at ``start``."""
    quote = source[start]
    pos = start + 1
    while pos < len(source):
        char = source[pos]
        if char == "\\":
            pos += 2
            continue
        if char == quote:
            return pos + 1
        pos += 1
    raise ExpressionSyntaxError(
        "Unterminated string literal",
        source,
        start,
        code=ErrorCode.UNTERMINATED_STRING,
    )


def _decode_string(raw: str) -> str:
    """Decode a quoted literal (quotes included) to its text.

    A single-quoted body that is itself a JSON string literal (a string
    placeholder substituted inside quotes, ``'{{label}}'``) is kept raw;
    the parser unquotes it with JSON rules so ``\\"`` and ``\\\\`` in the
    value survive.
    """
    body = raw[1:-1]
    if raw[0] == '"':
        try:
            return json.loads(raw)
        except ValueError:
            pass
    elif unwrap_literal(body) != body:
        return body
    if "\\" not in body:
        return body
    out: list[str] = []
    pos = 0
    while pos < len(body):
        char = body[pos]
        if char == "\\" and pos + 1 < len(body):
            nxt = body[pos + 1]
            out.append(_SINGLE_QUOTE_ESCAPES.get(nxt, nxt))
            pos += 2
            continue
        out.append(char)
        pos += 1
    return "".join(out)
