"""Forest traversal strategies for DazzleForest.

Traversers implement different algorithms for walking through a forest.
They reach children only through a TreeAdapter, so they stay independent
of the node representation.

Every traverser yields ``(node, depth, parent)`` triples. Roots have depth 0
and parent None. Traversal is lazy: a node's children are read only after
the node itself has been yielded (pre-order, breadth-first), so a consumer
may annotate a node before its children are reached.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterable, Iterator, List, Optional, Tuple, Union

from ..config import TraversalOrder, parse_order
from .adapter import TreeAdapter, default_adapter

Visit = Tuple[Any, int, Optional[Any]]

_EXHAUSTED = object()


class TreeTraverser(ABC):
    """Abstract base class for forest traversal strategies."""

    def __init__(self, adapter: Optional[TreeAdapter] = None):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating nodes (defaults to dict nodes)
        """
        self.adapter = adapter or default_adapter

    @abstractmethod
    def traverse(self,
                 forest: Iterable[Any],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Visit]:
        """Traverse every tree of the forest.

        Args:
            forest: Root nodes, in order
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth, parent)
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1, keeping
    sibling and forest order within a level. The FIFO frontier is seeded
    with every root of the forest.
    """

    def traverse(self,
                 forest: Iterable[Any],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Visit]:
        queue: Deque[Visit] = deque((root, 0, None) for root in forest)

        while queue:
            node, depth, parent = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth, parent)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1, node))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, children in sibling order. Good for
    copying trees or anything that needs to see a node before its subtree.
    Uses an explicit stack, so arbitrarily deep forests are handled.
    """

    def traverse(self,
                 forest: Iterable[Any],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Visit]:
        stack: List[Visit] = [(root, 0, None) for root in reversed(list(forest))]

        while stack:
            node, depth, parent = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth, parent)

            if self._should_explore(depth, max_depth):
                children = list(self.adapter.get_children(node))
                stack.extend((child, depth + 1, node) for child in reversed(children))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for deletion or for aggregating
    values up the tree. Each stack frame keeps the iterator over the
    node's remaining children.
    """

    def traverse(self,
                 forest: Iterable[Any],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Visit]:
        for root in forest:
            stack = [(root, 0, None, self._children(root, 0, max_depth))]

            while stack:
                node, depth, parent, children = stack[-1]
                child = next(children, _EXHAUSTED)

                if child is not _EXHAUSTED:
                    stack.append((child, depth + 1, node, self._children(child, depth + 1, max_depth)))
                    continue

                stack.pop()
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth, parent)

    def _children(self, node: Any, depth: int, max_depth: Optional[int]) -> Iterator[Any]:
        if self._should_explore(depth, max_depth):
            return iter(self.adapter.get_children(node))
        return iter(())


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    Yields the same nodes as BreadthFirstTraverser, but levels() also
    exposes each level as a list, which is what the metrics and search
    modules work with.
    """

    def levels(self, forest: Iterable[Any], max_depth: Optional[int] = None) -> Iterator[List[Any]]:
        """Yield each non-empty level of the forest as a list of nodes."""
        current_level: List[Any] = list(forest)
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            yield current_level

            next_level: List[Any] = []
            for node in current_level:
                next_level.extend(self.adapter.get_children(node))

            current_level = next_level
            current_depth += 1

    def traverse(self,
                 forest: Iterable[Any],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Visit]:
        """Traverse forest level by level.

        Parents are tracked per level, so the whole level is materialized
        before any of its nodes are yielded.
        """
        current_level: List[Tuple[Any, Optional[Any]]] = [(root, None) for root in forest]
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            next_level: List[Tuple[Any, Optional[Any]]] = []

            for node, parent in current_level:
                if self._should_yield(current_depth, min_depth, max_depth):
                    yield (node, current_depth, parent)

                if self._should_explore(current_depth, max_depth):
                    for child in self.adapter.get_children(node):
                        next_level.append((child, node))

            current_level = next_level
            current_depth += 1


_TRAVERSERS = {
    TraversalOrder.PRE: DepthFirstPreOrderTraverser,
    TraversalOrder.POST: DepthFirstPostOrderTraverser,
    TraversalOrder.BREADTH: BreadthFirstTraverser,
}


def create_traverser(order: Union[TraversalOrder, str],
                     adapter: Optional[TreeAdapter] = None) -> TreeTraverser:
    """Create a traverser instance by order.

    Args:
        order: TraversalOrder member or token (pre, post, breadth, bfs, ...)
        adapter: TreeAdapter for the node representation

    Returns:
        TreeTraverser instance

    Raises:
        InvalidArgumentError: If the order is not recognized
    """
    return _TRAVERSERS[parse_order(order)](adapter)
