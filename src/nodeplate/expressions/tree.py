"""Parsed form of ``${...}`` micro-expressions.

Two families: value expressions (what a ``${...}`` block evaluates to)
and conditions (the test of a ternary). Operands are kept as already
unquoted text; the grammar has no other value type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal as LiteralType


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for value expressions."""


@dataclass(frozen=True, slots=True)
class Literal(Expr):
    """Text returned as-is: an unquoted string or verbatim source."""

    text: str


@dataclass(frozen=True, slots=True)
class Conditional(Expr):
    """Ternary: test ? if_true : if_false"""

    test: Condition
    if_true: Expr
    if_false: Expr


@dataclass(frozen=True, slots=True)
class Condition:
    """Base class for ternary tests."""


@dataclass(frozen=True, slots=True)
class And(Condition):
    """left && right"""

    left: Condition
    right: Condition


@dataclass(frozen=True, slots=True)
class Or(Condition):
    """left || right"""

    left: Condition
    right: Condition


@dataclass(frozen=True, slots=True)
class TrimTest(Condition):
    """'text'.trim() -- true when text has non-whitespace characters."""

    operand: str


@dataclass(frozen=True, slots=True)
class Compare(Condition):
    """Equality (===, ==) or inequality (!==, !=) of unquoted operands."""

    op: LiteralType["eq", "ne"]
    left: str
    right: str


@dataclass(frozen=True, slots=True)
class Truthy(Condition):
    """Bare operand; false only for '', 'false' and 'null'."""

    operand: str
