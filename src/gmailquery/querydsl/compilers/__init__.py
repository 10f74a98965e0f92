from .base import BaseFilterCompiler
from .gmail import GmailFilterCompiler, compile_filter, gmail_filter

__all__ = (
    "BaseFilterCompiler",
    "GmailFilterCompiler",
    "gmail_filter",
    "compile_filter",
)
