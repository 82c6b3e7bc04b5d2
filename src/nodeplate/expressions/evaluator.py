"""Evaluation of parsed ``${...}`` micro-expressions.

Evaluation is total. Malformed source (unterminated quotes, unbalanced
parentheses) degrades to the most literal reading of the text: the
unquoted string if the whole text is one quoted literal, otherwise the
text itself.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from nodeplate.exceptions import ExpressionSyntaxError
from nodeplate.expressions.parser import parse, parse_condition
from nodeplate.expressions.tree import (
    And,
    Compare,
    Condition,
    Conditional,
    Expr,
    Literal,
    Or,
    TrimTest,
    Truthy,
)

logger = logging.getLogger(__name__)

_FALSY_TEXT: frozenset[str] = frozenset({"", "false", "null"})


def evaluate(source: str) -> str:
    """Evaluate an expression to its result text.

    Example:
        >>> evaluate("true ? 'x' : 'y'")
        'x'
        >>> evaluate("'  '.trim() ? 'shown' : 'hidden'")
        'hidden'
        >>> evaluate("plain text")
        'plain text'

    Note:
        Placeholders are substituted as JSON literals before evaluation,
        so a string value wrapped in single quotes (``'{{title}}'``) that
        itself contains an apostrophe leaves the quote unterminated and
        the whole block degrades to its text. Reference such values bare
        (``{{title}}.trim()``); they already arrive quoted.
    """
    try:
        tree = parse(source)
    except ExpressionSyntaxError as e:
        logger.debug("Degrading malformed expression %r: %s", source, e.message)
        return _degrade(source)
    return eval_expr(tree)


def evaluate_condition(source: str) -> bool:
    """Evaluate a ternary test on its own.

    Example:
        >>> evaluate_condition("'a' === 'a' && true")
        True
    """
    try:
        tree = parse_condition(source)
    except ExpressionSyntaxError as e:
        logger.debug("Degrading malformed condition %r: %s", source, e.message)
        return _is_truthy(_degrade(source))
    return eval_condition(tree)


def eval_expr(node: Expr) -> str:
    """Evaluate a parsed value expression."""
    while isinstance(node, Conditional):
        node = node.if_true if eval_condition(node.test) else node.if_false
    if isinstance(node, Literal):
        return node.text
    raise TypeError(f"Unknown expression node: {type(node).__name__}")


def eval_condition(node: Condition) -> bool:
    """Evaluate a parsed condition."""
    handler = _CONDITION_HANDLERS.get(type(node))
    if handler is None:
        raise TypeError(f"Unknown condition node: {type(node).__name__}")
    return handler(node)


def _test_and(node: And) -> bool:
    return eval_condition(node.left) and eval_condition(node.right)


def _test_or(node: Or) -> bool:
    return eval_condition(node.left) or eval_condition(node.right)


def _test_trim(node: TrimTest) -> bool:
    return node.operand.strip() != ""


def _test_compare(node: Compare) -> bool:
    equal = node.left == node.right
    return equal if node.op == "eq" else not equal


def _test_truthy(node: Truthy) -> bool:
    return _is_truthy(node.operand)


# O(1) dispatch by node type
_CONDITION_HANDLERS: dict[type[Condition], Callable[..., bool]] = {
    And: _test_and,
    Or: _test_or,
    TrimTest: _test_trim,
    Compare: _test_compare,
    Truthy: _test_truthy,
}


def _is_truthy(text: str) -> bool:
    return text not in _FALSY_TEXT


def _degrade(source: str) -> str:
    text = source.strip()
    if len(text) >= 2 and text[0] in "'\"" and text[-1] == text[0]:
        return text[1:-1]
    return text
