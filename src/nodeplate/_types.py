"""Token types for the ``${...}`` expression lexer."""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class TokenType(Enum):
    """Kinds of tokens produced by :func:`nodeplate.expressions.lexer.tokenize`."""

    STRING = "string"
    WORD = "word"
    LPAREN = "("
    RPAREN = ")"
    QUESTION = "?"
    COLON = ":"
    AND = "&&"
    OR = "||"
    STRICT_EQ = "==="
    EQ = "=="
    STRICT_NE = "!=="
    NE = "!="
    TRIM = ".trim()"


class Token(NamedTuple):
    """A single expression token.

    ``value`` is the decoded text for STRING tokens (quotes removed,
    escapes resolved) and the raw text for everything else. ``start`` and
    ``end`` are offsets into the expression source, so any run of tokens
    can be sliced back to its original text.
    """

    type: TokenType
    value: str
    start: int
    end: int


EQUALITY_TOKENS: frozenset[TokenType] = frozenset({TokenType.STRICT_EQ, TokenType.EQ})
INEQUALITY_TOKENS: frozenset[TokenType] = frozenset({TokenType.STRICT_NE, TokenType.NE})
