"""Configuration system for DazzleForest.

This module defines how users specify traversal order, depth limits and
pattern-cache sizing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, Union

from .exceptions import InvalidArgumentError


class TraversalOrder(Enum):
    """Order in which a walk visits nodes."""
    PRE = "pre"             # Parent before children
    POST = "post"           # Children before parent
    BREADTH = "breadth"     # Level by level


# Accepted string tokens, including the spellings used by other tree tools
ORDER_ALIASES = {
    'pre': TraversalOrder.PRE,
    'dfs_pre': TraversalOrder.PRE,
    'depth_first_pre': TraversalOrder.PRE,
    'post': TraversalOrder.POST,
    'dfs_post': TraversalOrder.POST,
    'depth_first_post': TraversalOrder.POST,
    'breadth': TraversalOrder.BREADTH,
    'bfs': TraversalOrder.BREADTH,
    'breadth_first': TraversalOrder.BREADTH,
}


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Resolve an order token to a TraversalOrder.

    Args:
        order: TraversalOrder member or string token (case-insensitive)

    Returns:
        The matching TraversalOrder

    Raises:
        InvalidArgumentError: If the token is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order
    if isinstance(order, str) and order.lower() in ORDER_ALIASES:
        return ORDER_ALIASES[order.lower()]
    raise InvalidArgumentError(
        f"Unknown traversal order: {order!r}. "
        f"Choose from: {', '.join(ORDER_ALIASES.keys())}"
    )


@dataclass
class TraversalConfig:
    """Configuration for a single walk over a forest."""

    order: TraversalOrder = TraversalOrder.PRE
    max_depth: Optional[int] = None    # Deepest level to visit (None = unlimited)
    min_depth: int = 0                 # Shallowest level to yield

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, not {type(self.order).__name__}")

        if not _is_int(self.min_depth):
            errors.append("min_depth must be an integer")
        elif self.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.max_depth is not None:
            if not _is_int(self.max_depth):
                errors.append("max_depth must be an integer")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")
            elif _is_int(self.min_depth) and self.max_depth < self.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        return errors


@dataclass
class CacheConfig:
    """Configuration for the pattern-search query cache."""

    enabled: bool = True
    max_entries: Optional[int] = 1000    # None = unbounded

    def validate(self) -> List[str]:
        errors = []
        if self.max_entries is not None and (not _is_int(self.max_entries) or self.max_entries <= 0):
            errors.append("max_entries must be a positive integer or None")
        return errors


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
