"""Exceptions for the nodeplate template engine.

Exception Hierarchy:
TemplateError (base)
└── ExpressionSyntaxError     # Malformed ``${...}`` expression

Rendering itself is total: nothing in :mod:`nodeplate.substitute`,
:mod:`nodeplate.expressions` or :mod:`nodeplate.interpolate` lets an
exception escape for bad template text or odd values. ``TemplateError``
reaches callers only for programming errors in the host, such as
defining a component without a template node or loading a node tree from
invalid JSON. ``ExpressionSyntaxError`` is raised by the expression
parser and handled by the evaluator, which degrades to literal text.

Example:
    ```
    NP-EXP-002: Unbalanced parenthesis in expression at offset 4
       |
       | true) ? 'x' : 'y'
       |     ^
    ```

"""

from __future__ import annotations

from enum import Enum

# Relative to the repository root
_NODEPLATE_ERRORS_DOC = "docs/errors.md"


class ErrorCode(Enum):
    """Searchable error codes for nodeplate errors.

    Format: NP-{CATEGORY}-{NUMBER}
    Categories: EXP (expression), TPL (template definition/loading)
    """

    # Expression errors (NP-EXP-xxx)
    UNTERMINATED_STRING = "NP-EXP-001"
    UNBALANCED_PARENS = "NP-EXP-002"

    # Template errors (NP-TPL-xxx)
    INVALID_TEMPLATE = "NP-TPL-001"
    INVALID_NODE_JSON = "NP-TPL-002"

    @property
    def docs_url(self) -> str:
        """Location of this error code's entry in the error reference."""
        anchor = self.value.lower()
        return f"{_NODEPLATE_ERRORS_DOC}#{anchor}"

    @property
    def category(self) -> str:
        """Error category ('expression' or 'template')."""
        prefix = self.value.split("-")[1]
        return {
            "EXP": "expression",
            "TPL": "template",
        }.get(prefix, "unknown")


class TemplateError(Exception):
    """Base exception for all nodeplate errors.

    Attributes:
        code: Optional ErrorCode for searchable error identification.
    """

    code: ErrorCode | None = None

    def __init__(self, message: str, code: ErrorCode | None = None):
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def format_compact(self) -> str:
        """Format error as a short, human-readable summary.

        Format::

            NP-TPL-001: Component template must be a Node, got dict
              Docs: docs/errors.md#np-tpl-001
        """
        header = str(self)
        if self.code and self.code.value not in header:
            header = f"{self.code.value}: {header}"
        parts = [header]
        if self.code:
            parts.append(f"  Docs: {self.code.docs_url}")
        return "\n".join(parts)


class ExpressionSyntaxError(TemplateError):
    """Malformed ``${...}`` expression.

    Carries the expression source and the offending offset so the error
    can point at the exact character.
    """

    code: ErrorCode | None = ErrorCode.UNBALANCED_PARENS

    def __init__(
        self,
        message: str,
        source: str,
        offset: int,
        code: ErrorCode | None = None,
    ):
        self.source = source
        self.offset = offset
        super().__init__(message, code)

    def __str__(self) -> str:
        return self._format()

    def _format(self) -> str:
        header = f"{self.message} at offset {self.offset}"
        if not self.source or "\n" in self.source:
            return header
        pointer = " " * self.offset + "^"
        return f"{header}\n   |\n   | {self.source}\n   | {pointer}"
