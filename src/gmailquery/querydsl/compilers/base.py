"""Base compiler interface.

Defines the abstract contract every filter-to-search-query compiler follows.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..nodes import FilterNode
from .utils import normalize_filter_input

__all__ = ("BaseFilterCompiler",)


class BaseFilterCompiler(ABC):
    """Abstract base class for filter compilers.

    Subclasses implement `to_expr` on validated filter nodes; `compile`
    accepts either nodes or the dict form of a tree.
    """

    def compile(self, node: Any) -> str:
        """Compile a filter tree (nodes or dict form) into a search query string."""
        return self.to_expr(normalize_filter_input(node))

    @abstractmethod
    def to_expr(self, node: FilterNode) -> str:
        """Convert a validated filter tree into the target search grammar."""
        raise NotImplementedError
