"""Compiler utility functions.

Provides helpers for normalizing compiler input and quoting search values.
"""

from typing import Any

from ..nodes import FilterNodeBase, FilterNode, parse_filter


def normalize_filter_input(node: Any) -> FilterNode:
    """Normalize a filter node or its dict form to filter nodes.

    Args:
        node: Filter node instance or dict with a `type` discriminator

    Returns:
        Validated filter tree ready for compilation

    Raises:
        TypeError: If input is neither a filter node nor a dict
    """
    if isinstance(node, FilterNodeBase):
        return node
    elif isinstance(node, dict):
        return parse_filter(node)
    else:
        raise TypeError(f"filter must be a filter node or dict, got {type(node).__name__}")


def quote_phrase(value: str) -> str:
    # Gmail has no escape for embedded quotes; values pass through as given
    return f'"{value}"'
