"""The ``${...}`` micro-expression language.

Pipeline: source → :func:`tokenize` → :class:`ExpressionParser` →
:mod:`tree <nodeplate.expressions.tree>` → :func:`evaluate`.
"""

from nodeplate.expressions.evaluator import (
    eval_condition,
    eval_expr,
    evaluate,
    evaluate_condition,
)
from nodeplate.expressions.lexer import tokenize
from nodeplate.expressions.parser import ExpressionParser, parse, parse_condition

__all__ = [
    "ExpressionParser",
    "eval_condition",
    "eval_expr",
    "evaluate",
    "evaluate_condition",
    "parse",
    "parse_condition",
    "tokenize",
]
