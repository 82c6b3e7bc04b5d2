"""Recursive-descent parser for ``${...}`` micro-expressions.

Grammar (informal; "top-level" means parenthesis depth 0 of the span
being parsed)::

    expr       := condition '?' branch ':' branch   # first top-level '?'
                | operand                           # no ternary
    branch     := '(' expr ')' | expr               # one paren layer stripped
    condition  := '(' condition ')'                 # one paren layer stripped
                | condition '&&' condition          # first top-level '&&'
                | condition '||' condition          # first top-level '||'
                | operand '.trim()'
                | operand ('===' | '==') operand
                | operand ('!==' | '!=') operand
                | operand

The ``':'`` closing a ternary is found by pairing nested ``'?'``/``':'``,
so ``a ? b ? x : y : z`` nests on the true branch and
``a ? x : b ? y : z`` nests on the false branch.

``&&`` is always split before ``||`` and at its first occurrence. This
is a deliberate simplification: ``a && b || c`` reads as
``a && (b || c)``.

Example:
    >>> parse("{{x}} === 'a' ? 'on' : 'off'")   # after placeholder substitution
    Conditional(test=Compare(...), if_true=Literal('on'), if_false=Literal('off'))

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from nodeplate._types import EQUALITY_TOKENS, INEQUALITY_TOKENS, Token, TokenType
from nodeplate.exceptions import ErrorCode, ExpressionSyntaxError
from nodeplate.expressions.lexer import tokenize
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
from nodeplate.utils.serialize import unwrap_literal


class ExpressionParser:
    """Parse one expression source into an :class:`Expr` tree.

    Works on half-open token index ranges ``[lo, hi)`` so sub-expressions
    never copy the token list, and slices the original source for
    verbatim operands.

    Raises:
        ExpressionSyntaxError: On unterminated strings or unbalanced
            parentheses.
    """

    __slots__ = ("_source", "_tokens", "_matching")

    def __init__(self, source: str):
        self._source = source
        self._tokens: Sequence[Token] = tokenize(source)
        self._matching = self._match_parens()

    def parse(self) -> Expr:
        """Parse the whole source as a value expression."""
        return self._parse_expr(0, len(self._tokens))

    def parse_condition(self) -> Condition:
        """Parse the whole source as a ternary test."""
        return self._parse_condition(0, len(self._tokens))

    # -- value expressions ------------------------------------------------

    def _parse_expr(self, lo: int, hi: int) -> Expr:
        question = self._find_first(lo, hi, TokenType.QUESTION)
        if question is None:
            return Literal(self._operand(lo, hi))
        colon = self._find_matching_colon(question + 1, hi)
        if colon is None:
            return Literal(self._operand(lo, hi))
        return Conditional(
            test=self._parse_condition(lo, question),
            if_true=self._parse_branch(question + 1, colon),
            if_false=self._parse_branch(colon + 1, hi),
        )

    def _parse_branch(self, lo: int, hi: int) -> Expr:
        lo, hi = self._strip_parens(lo, hi)
        return self._parse_expr(lo, hi)

    def _find_matching_colon(self, lo: int, hi: int) -> int | None:
        pending = 1
        for i in self._top_level(lo, hi):
            token_type = self._tokens[i].type
            if token_type is TokenType.QUESTION:
                pending += 1
            elif token_type is TokenType.COLON:
                pending -= 1
                if pending == 0:
                    return i
        return None

    # -- conditions -------------------------------------------------------

    def _parse_condition(self, lo: int, hi: int) -> Condition:
        lo, hi = self._strip_parens(lo, hi)

        split = self._find_first(lo, hi, TokenType.AND)
        if split is not None:
            return And(self._parse_condition(lo, split), self._parse_condition(split + 1, hi))

        split = self._find_first(lo, hi, TokenType.OR)
        if split is not None:
            return Or(self._parse_condition(lo, split), self._parse_condition(split + 1, hi))

        if hi - lo >= 2 and self._tokens[hi - 1].type is TokenType.TRIM:
            return TrimTest(self._operand(lo, hi - 1))

        for op, kinds in (("eq", EQUALITY_TOKENS), ("ne", INEQUALITY_TOKENS)):
            split = self._find_first(lo, hi, *kinds)
            if split is not None:
                return Compare(op, self._operand(lo, split), self._operand(split + 1, hi))

        return Truthy(self._operand(lo, hi))

    # -- helpers ----------------------------------------------------------

    def _operand(self, lo: int, hi: int) -> str:
        """Unquoted value of tokens[lo:hi].

        A lone string token yields its text, unquoted once more when that
        text is itself a JSON string literal (a placeholder substituted
        inside quotes, e.g. ``'{{label}}'``). Anything else is the
        trimmed source text.
        """
        if lo >= hi:
            return ""
        if hi - lo == 1 and self._tokens[lo].type is TokenType.STRING:
            return unwrap_literal(self._tokens[lo].value)
        return self._source[self._tokens[lo].start : self._tokens[hi - 1].end].strip()

    def _strip_parens(self, lo: int, hi: int) -> tuple[int, int]:
        if (
            hi - lo >= 2
            and self._tokens[lo].type is TokenType.LPAREN
            and self._matching.get(lo) == hi - 1
        ):
            return lo + 1, hi - 1
        return lo, hi

    def _find_first(self, lo: int, hi: int, *types: TokenType) -> int | None:
        for i in self._top_level(lo, hi):
            if self._tokens[i].type in types:
                return i
        return None

    def _top_level(self, lo: int, hi: int) -> Iterator[int]:
        """Yield indices in [lo, hi) at parenthesis depth 0, parens excluded."""
        depth = 0
        for i in range(lo, hi):
            token_type = self._tokens[i].type
            if token_type is TokenType.LPAREN:
                depth += 1
            elif token_type is TokenType.RPAREN:
                depth -= 1
            elif depth == 0:
                yield i

    def _match_parens(self) -> dict[int, int]:
        matching: dict[int, int] = {}
        stack: list[int] = []
        for i, token in enumerate(self._tokens):
            if token.type is TokenType.LPAREN:
                stack.append(i)
            elif token.type is TokenType.RPAREN:
                if not stack:
                    raise ExpressionSyntaxError(
                        "Unbalanced parenthesis in expression",
                        self._source,
                        token.start,
                        code=ErrorCode.UNBALANCED_PARENS,
                    )
                matching[stack.pop()] = i
        if stack:
            raise ExpressionSyntaxError(
                "Unclosed parenthesis in expression",
                self._source,
                self._tokens[stack[-1]].start,
                code=ErrorCode.UNBALANCED_PARENS,
            )
        return matching


def parse(source: str) -> Expr:
    """Parse an expression (the text between ``${`` and ``}``)."""
    return ExpressionParser(source).parse()


def parse_condition(source: str) -> Condition:
    """Parse a ternary test on its own."""
    return ExpressionParser(source).parse_condition()
