"""Custom exceptions for gmailquery.

Compile errors carry a structured kind and the offending token only; turning
them into user-facing diagnostics is left to the caller.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    UNSUPPORTED_OPERATOR = "UNSUPPORTED_OPERATOR"
    UNSUPPORTED_HEADER = "UNSUPPORTED_HEADER"
    UNSUPPORTED_LITERAL = "UNSUPPORTED_LITERAL"


# Base exception
class GmailQueryError(Exception):
    """Base exception for all gmailquery errors.

    Attributes:
        message: Error message, empty for structured errors
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Filter compilation exceptions
class CompileError(GmailQueryError):
    """Raised when a filter uses a construct the Gmail search grammar cannot express.

    Attributes:
        kind: Which capability is missing
        token: The offending operator, header name or node kind
    """

    code = "FILTER-FEATURE-NOT-SUPPORTED"
    kind: Optional[ErrorKind] = None

    @property
    def token(self) -> Optional[str]:
        return None


class UnsupportedOperatorError(CompileError):
    """Raised for unary or binary operators outside NOT, AND, OR, =~ and !~.

    Example:
        >>> raise UnsupportedOperatorError("==")
    """

    kind = ErrorKind.UNSUPPORTED_OPERATOR

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(operator=operator)

    @property
    def token(self) -> str:
        return self.operator


class UnsupportedHeaderError(CompileError):
    """Raised when a match targets a header outside SUPPORTED_HEADERS.

    Example:
        >>> raise UnsupportedHeaderError("not_a_header")
    """

    kind = ErrorKind.UNSUPPORTED_HEADER

    def __init__(self, header: str) -> None:
        self.header = header
        super().__init__(header=header)

    @property
    def token(self) -> str:
        return self.header


class UnsupportedLiteralError(CompileError):
    """Raised for literal nodes that are not string-valued.

    Example:
        >>> raise UnsupportedLiteralError("NumericLiteral")
    """

    kind = ErrorKind.UNSUPPORTED_LITERAL

    def __init__(self, node_kind: str) -> None:
        self.node_kind = node_kind
        super().__init__(node_kind=node_kind)

    @property
    def token(self) -> str:
        return self.node_kind


# Configuration exceptions
class ConfigurationError(GmailQueryError):
    """Raised when configuration is invalid or missing."""


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid.

    Example:
        >>> raise InvalidConfigError("Unknown time zone", config_key="SEARCH_TIMEZONE", value="Mars/Base")
    """
