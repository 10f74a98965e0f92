"""Filter AST node types.

The upstream query-language front end hands over a boolean filter tree made of
the node types below. Nodes are frozen pydantic models discriminated by their
`type` field, so a tree can be built in Python or validated from the plain dict
form the front end emits.

Typical usage:

- Build filters: `header("subject").contains("foo") & text("some text")`
- Negate: `~header("from").contains("bob")`
- Validate a dict tree: `parse_filter({"type": "FulltextTerm", "text": "foo"})`
- Compile: `compile_filter(node)` from `gmailquery.querydsl.compilers`
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from gmailquery.constants import BinaryOperator, UnaryOperator

__all__ = (
    "FilterNode",
    "StringLiteral",
    "FieldReference",
    "FulltextTerm",
    "UnaryExpr",
    "BinaryExpr",
    "NumericLiteral",
    "BooleanLiteral",
    "NullLiteral",
    "RegExpLiteral",
    "MomentLiteral",
    "DurationLiteral",
    "ArrayLiteral",
    "ObjectLiteral",
    "InfinityLiteral",
    "NaNLiteral",
    "header",
    "text",
    "literal",
    "parse_filter",
)


class FilterNodeBase(BaseModel):
    """Common behaviour of every filter node.

    - Use `&` to combine with logical AND.
    - Use `|` to combine with logical OR.
    - Use `~` to negate a node.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __and__(self, other: FilterNode) -> BinaryExpr:
        return BinaryExpr(operator=BinaryOperator.AND, left=self, right=other)

    def __or__(self, other: FilterNode) -> BinaryExpr:
        return BinaryExpr(operator=BinaryOperator.OR, left=self, right=other)

    def __invert__(self) -> UnaryExpr:
        return UnaryExpr(operator=UnaryOperator.NOT, operand=self)

    def to_dict(self) -> Dict[str, Any]:
        """Return the plain dict form understood by `parse_filter`."""
        return self.model_dump()


# -------------------
# Leaves
# -------------------


class StringLiteral(FilterNodeBase):
    type: Literal["StringLiteral"] = "StringLiteral"
    value: str


class FieldReference(FilterNodeBase):
    """A message header name, already resolved by the front end."""

    type: Literal["FieldReference"] = "FieldReference"
    name: str = Field(min_length=1)

    def contains(self, value: str) -> BinaryExpr:
        """Substring match of `value` against this header."""
        return BinaryExpr(operator=BinaryOperator.MATCH, left=self, right=StringLiteral(value=value))

    def excludes(self, value: str) -> BinaryExpr:
        """Substring non-match of `value` against this header."""
        return BinaryExpr(operator=BinaryOperator.NOT_MATCH, left=self, right=StringLiteral(value=value))


class FulltextTerm(FilterNodeBase):
    """A bare search phrase not bound to any header."""

    type: Literal["FulltextTerm"] = "FulltextTerm"
    text: str


# Literal kinds the front end can produce but Gmail search cannot express


class NumericLiteral(FilterNodeBase):
    type: Literal["NumericLiteral"] = "NumericLiteral"
    value: Union[int, float]


class BooleanLiteral(FilterNodeBase):
    type: Literal["BooleanLiteral"] = "BooleanLiteral"
    value: bool


class NullLiteral(FilterNodeBase):
    type: Literal["NullLiteral"] = "NullLiteral"


class RegExpLiteral(FilterNodeBase):
    type: Literal["RegExpLiteral"] = "RegExpLiteral"
    pattern: str
    flags: str = ""


class MomentLiteral(FilterNodeBase):
    type: Literal["MomentLiteral"] = "MomentLiteral"
    value: str


class DurationLiteral(FilterNodeBase):
    type: Literal["DurationLiteral"] = "DurationLiteral"
    value: str


class ArrayLiteral(FilterNodeBase):
    # Elements stay raw: no array can reach Gmail search, so they are never walked
    type: Literal["ArrayLiteral"] = "ArrayLiteral"
    elements: List[Any] = Field(default_factory=list)


class ObjectLiteral(FilterNodeBase):
    type: Literal["ObjectLiteral"] = "ObjectLiteral"
    properties: List[Any] = Field(default_factory=list)


class InfinityLiteral(FilterNodeBase):
    type: Literal["InfinityLiteral"] = "InfinityLiteral"
    negative: bool = False


class NaNLiteral(FilterNodeBase):
    type: Literal["NaNLiteral"] = "NaNLiteral"


# -------------------
# Expressions
# -------------------


class UnaryExpr(FilterNodeBase):
    type: Literal["UnaryExpr"] = "UnaryExpr"
    operator: str
    operand: FilterNode


class BinaryExpr(FilterNodeBase):
    type: Literal["BinaryExpr"] = "BinaryExpr"
    operator: str
    left: FilterNode
    right: FilterNode


FilterNode = Annotated[
    Union[
        StringLiteral,
        FieldReference,
        FulltextTerm,
        UnaryExpr,
        BinaryExpr,
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
    ],
    Field(discriminator="type"),
]

UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()

_filter_adapter: TypeAdapter[FilterNode] = TypeAdapter(FilterNode)

# Expression kinds and the fields holding their child nodes, in walk order
_EXPRESSIONS = {
    "UnaryExpr": (UnaryExpr, ("operand",)),
    "BinaryExpr": (BinaryExpr, ("left", "right")),
}


def parse_filter(data: Dict[str, Any]) -> FilterNode:
    """Validate the dict form of a filter tree into nodes.

    Expressions are built bottom-up from an explicit stack, one level per
    validation, so tree depth is not bounded by the validator's recursion
    guard or the interpreter's recursion limit.

    Raises:
        pydantic.ValidationError: If the dict does not describe a filter tree
    """
    pending: List[Tuple[Any, bool]] = [(data, False)]
    built: List[FilterNode] = []

    while pending:
        item, children_done = pending.pop()

        if isinstance(item, FilterNodeBase):
            built.append(item)
            continue
        expression = _EXPRESSIONS.get(item.get("type")) if isinstance(item, dict) else None
        if expression is None:
            built.append(_filter_adapter.validate_python(item))
            continue

        model, child_fields = expression
        present = [f for f in child_fields if f in item]
        if not children_done:
            pending.append((item, True))
            for f in reversed(present):
                pending.append((item[f], False))
            continue

        values = dict(item)
        for f in reversed(present):
            values[f] = built.pop()
        # Missing children and extra keys are reported by the model itself
        built.append(model(**values))

    return built.pop()


def header(name: str) -> FieldReference:
    return FieldReference(name=name)


def text(phrase: str) -> FulltextTerm:
    return FulltextTerm(text=phrase)


def literal(value: str) -> StringLiteral:
    return StringLiteral(value=value)
