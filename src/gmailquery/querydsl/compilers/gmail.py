"""Gmail advanced-search compiler.

Transforms filter trees into Gmail search expressions
(https://support.google.com/mail/answer/7190).

Gmail search supports:
- Implicit AND: adjacent terms, grouped with parentheses
- Logical: OR, negation with a `-` prefix
- Header directives: header:"value" (substring match only)
- Quoted full-text phrases

Limitations:
- No exact match, ordering, set membership or regex
- Only the headers in SUPPORTED_HEADERS can be searched
- Only string values can be matched
"""

from typing import List, Tuple

from gmailquery.constants import SUPPORTED_HEADERS, BinaryOperator, UnaryOperator
from gmailquery.exceptions import (
    UnsupportedHeaderError,
    UnsupportedLiteralError,
    UnsupportedOperatorError,
)

from ..nodes import (
    ArrayLiteral,
    BinaryExpr,
    BooleanLiteral,
    DurationLiteral,
    FieldReference,
    FilterNode,
    FulltextTerm,
    InfinityLiteral,
    MomentLiteral,
    NaNLiteral,
    NullLiteral,
    NumericLiteral,
    ObjectLiteral,
    RegExpLiteral,
    StringLiteral,
    UnaryExpr,
)
from .base import BaseFilterCompiler
from .utils import quote_phrase

__all__ = (
    "GmailFilterCompiler",
    "gmail_filter",
    "compile_filter",
)

_UNSUPPORTED_LITERALS = (
    NumericLiteral,
    BooleanLiteral,
    NullLiteral,
    RegExpLiteral,
    MomentLiteral,
    DurationLiteral,
    ArrayLiteral,
    ObjectLiteral,
    InfinityLiteral,
    NaNLiteral,
)


class GmailFilterCompiler(BaseFilterCompiler):
    """Compile filter trees into Gmail search expressions.

    The compiler is stateless: each call walks only its own tree, so a single
    instance can be shared between threads. The walk keeps an explicit stack
    instead of recursing, so tree depth is not bounded by the interpreter's
    recursion limit.
    """

    SUPPORTED_HEADERS = SUPPORTED_HEADERS

    _BINARY_OPS = {
        BinaryOperator.AND,
        BinaryOperator.OR,
        BinaryOperator.MATCH,
        BinaryOperator.NOT_MATCH,
    }

    @classmethod
    def supported_headers(cls) -> Tuple[str, ...]:
        return cls.SUPPORTED_HEADERS

    def to_expr(self, node: FilterNode) -> str:
        """Convert a filter tree into a Gmail search expression.

        Args:
            node: Root of the filter tree

        Returns:
            A standalone term or parenthesized group

        Raises:
            UnsupportedOperatorError: For operators outside NOT, AND, OR, =~, !~
            UnsupportedHeaderError: For matches on headers Gmail cannot search
            UnsupportedLiteralError: For literals that are not strings, and for
                empty string literals standing as terms
        """
        # Post-order walk: (node, children_done) pairs in, compiled fragments out
        pending: List[Tuple[FilterNode, bool]] = [(node, False)]
        fragments: List[str] = []

        while pending:
            current, children_done = pending.pop()

            if isinstance(current, UnaryExpr):
                if children_done:
                    fragments.append("-" + self._term(fragments.pop()))
                    continue
                if current.operator != UnaryOperator.NOT:
                    raise UnsupportedOperatorError(current.operator)
                pending.append((current, True))
                pending.append((current.operand, False))

            elif isinstance(current, BinaryExpr):
                if children_done:
                    right = fragments.pop()
                    left = fragments.pop()
                    fragments.append(self._binary_to_expr(current.operator, left, right))
                    continue
                if current.operator not in self._BINARY_OPS:
                    raise UnsupportedOperatorError(current.operator)
                pending.append((current, True))
                pending.append((current.right, False))
                pending.append((current.left, False))

            else:
                fragments.append(self._leaf_to_expr(current))

        return self._term(fragments.pop())

    def _leaf_to_expr(self, node: FilterNode) -> str:
        if isinstance(node, StringLiteral):
            return node.value
        if isinstance(node, FieldReference):
            return node.name
        if isinstance(node, FulltextTerm):
            return quote_phrase(node.text)
        if isinstance(node, _UNSUPPORTED_LITERALS):
            raise UnsupportedLiteralError(node.type)
        raise TypeError(f"Unknown filter node {type(node).__name__}")

    def _term(self, fragment: str) -> str:
        # Only an empty StringLiteral compiles to an empty fragment
        if not fragment:
            raise UnsupportedLiteralError(StringLiteral.__name__)
        return fragment

    def _binary_to_expr(self, operator: str, left: str, right: str) -> str:
        if operator == BinaryOperator.AND:
            # Gmail treats adjacent terms as AND
            return f"({self._term(left)} {self._term(right)})"
        if operator == BinaryOperator.OR:
            return f"({self._term(left)} OR {self._term(right)})"

        # Gmail only does substring matching, so =~ and !~ are the only comparisons
        if left not in self.SUPPORTED_HEADERS:
            raise UnsupportedHeaderError(left)
        term = f"{left}:{quote_phrase(right)}"
        if operator == BinaryOperator.NOT_MATCH:
            return "-" + term
        return term


gmail_filter = GmailFilterCompiler()


def compile_filter(node) -> str:
    """Compile a filter tree (nodes or dict form) with the shared Gmail compiler."""
    return gmail_filter.compile(node)
