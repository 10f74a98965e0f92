"""
Gmail search grammar constants shared by the filter nodes and compilers.
"""

# Message headers the Gmail search grammar can match on, in display order.
SUPPORTED_HEADERS = (
    "from",
    "to",
    "subject",
    "cc",
    "bcc",
)


class UnaryOperator:
    NOT = "NOT"


class BinaryOperator:
    AND = "AND"
    OR = "OR"
    MATCH = "=~"
    NOT_MATCH = "!~"
