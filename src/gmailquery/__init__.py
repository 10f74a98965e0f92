"""
This __init__.py file makes the gmailquery directory a Python package
and exposes the filter compiler, node types and search assembly for easy access.
"""

from .constants import SUPPORTED_HEADERS
from .exceptions import (
    CompileError,
    ErrorKind,
    GmailQueryError,
    UnsupportedHeaderError,
    UnsupportedLiteralError,
    UnsupportedOperatorError,
)
from .querydsl import FilterNode, parse_filter
from .querydsl.compilers import GmailFilterCompiler, compile_filter
from .search import SearchQueryBuilder, build_search_query

__version__ = "0.1.0"

__all__ = [
    "SUPPORTED_HEADERS",
    "GmailFilterCompiler",
    "compile_filter",
    "FilterNode",
    "parse_filter",
    "SearchQueryBuilder",
    "build_search_query",
    "GmailQueryError",
    "CompileError",
    "ErrorKind",
    "UnsupportedOperatorError",
    "UnsupportedHeaderError",
    "UnsupportedLiteralError",
]
