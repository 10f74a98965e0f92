"""Pytest configuration and fixtures for gmailquery tests."""

import pytest
from dotenv import load_dotenv

from gmailquery.querydsl.compilers.gmail import GmailFilterCompiler
from gmailquery.querydsl.nodes import (
    BinaryExpr,
    FieldReference,
    StringLiteral,
    UnaryExpr,
    header,
    text,
)

# Load environment variables
load_dotenv()


@pytest.fixture
def compiler():
    """A fresh Gmail filter compiler."""
    return GmailFilterCompiler()


@pytest.fixture
def match():
    """Build `header =~ value` nodes."""

    def _match(name, value):
        return header(name).contains(value)

    return _match


@pytest.fixture
def not_match():
    """Build `header !~ value` nodes."""

    def _not_match(name, value):
        return header(name).excludes(value)

    return _not_match


@pytest.fixture
def nested_filter():
    """A filter mixing every supported node kind, with its expected Gmail expression."""
    node = BinaryExpr(
        operator="AND",
        left=UnaryExpr(
            operator="NOT",
            operand=BinaryExpr(
                operator="=~",
                left=FieldReference(name="from"),
                right=StringLiteral(value="bob"),
            ),
        ),
        right=BinaryExpr(
            operator="OR",
            left=text("quarterly report"),
            right=BinaryExpr(
                operator="!~",
                left=FieldReference(name="cc"),
                right=StringLiteral(value="alice"),
            ),
        ),
    )
    return node, '(-from:"bob" ("quarterly report" OR -cc:"alice"))'
