"""Query DSL module.

Exports the filter node types and construction helpers. Compiled
representations are handled by the `compilers` subpackage.
"""

from .nodes import (
    BinaryExpr,
    FieldReference,
    FilterNode,
    FulltextTerm,
    StringLiteral,
    UnaryExpr,
    header,
    literal,
    parse_filter,
    text,
)

__all__ = (
    "FilterNode",
    "StringLiteral",
    "FieldReference",
    "FulltextTerm",
    "UnaryExpr",
    "BinaryExpr",
    "header",
    "literal",
    "text",
    "parse_filter",
)
