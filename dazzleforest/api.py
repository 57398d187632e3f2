"""High-level traversal API for DazzleForest.

These functions wrap the traverser classes for the common cases: calling a
visitor on every node, iterating over nodes, counting them and collecting
data from them.
"""

from typing import Any, Callable, Iterator, List, Optional, Union

from .config import TraversalConfig, TraversalOrder, parse_order
from .core.collector import DataCollector
from .core.node import Forest, Node, require_callable, require_forest
from .core.traverser import Visit, create_traverser
from .exceptions import InvalidArgumentError


def traverse(
    forest: Forest,
    visitor: Callable[[Node, int, Optional[Node]], Any],
    order: Union[TraversalOrder, str] = TraversalOrder.PRE,
) -> Forest:
    """Call ``visitor(node, depth, parent)`` once for every node.

    Args:
        forest: The forest to walk
        visitor: Callback receiving each node, its depth (roots are 0) and
            its parent (None for roots)
        order: 'pre', 'post' or 'breadth' (or a TraversalOrder)

    Returns:
        The forest itself, for chaining

    Raises:
        InvalidArgumentError: If forest is not a list, visitor is not
            callable or order is unrecognized

    Example:
        >>> seen = []
        >>> traverse(forest, lambda n, d, p: seen.append((n['name'], d)), 'breadth')
    """
    require_forest(forest)
    require_callable(visitor, "visitor")

    for node, depth, parent in walk(forest, order):
        visitor(node, depth, parent)

    return forest


def walk(
    forest: Forest,
    order: Union[TraversalOrder, str] = TraversalOrder.PRE,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Visit]:
    """Iterate over ``(node, depth, parent)`` triples.

    Args:
        forest: The forest to walk
        order: Traversal order
        max_depth: Deepest level to visit (None = unlimited)
        min_depth: Shallowest level to yield; shallower nodes are still
            explored

    Raises:
        InvalidArgumentError: If forest is not a list or the configuration
            is inconsistent
    """
    require_forest(forest)
    config = TraversalConfig(order=parse_order(order), max_depth=max_depth, min_depth=min_depth)

    errors = config.validate()
    if errors:
        raise InvalidArgumentError(f"Invalid configuration: {'; '.join(errors)}")

    traverser = create_traverser(config.order)
    return traverser.traverse(forest, max_depth=config.max_depth, min_depth=config.min_depth)


def count_nodes(forest: Forest, **kwargs) -> int:
    """Count the nodes a walk would visit.

    Args:
        forest: The forest to count
        **kwargs: Walk options (see walk)
    """
    count = 0
    for _ in walk(forest, **kwargs):
        count += 1
    return count


def collect(
    forest: Forest,
    collector: DataCollector,
    predicate: Optional[Callable[[Node], bool]] = None,
    order: Union[TraversalOrder, str] = TraversalOrder.PRE,
) -> List[Any]:
    """Walk the forest and gather ``collector.collect(node, depth)`` results.

    Args:
        forest: The forest to walk
        collector: What to extract from each node
        predicate: Only nodes for which this returns True are collected
        order: Traversal order

    Returns:
        Collected values in visitation order
    """
    if predicate is not None:
        require_callable(predicate, "predicate")

    results = []
    for node, depth, _ in walk(forest, order):
        if predicate is None or predicate(node):
            results.append(collector.collect(node, depth))
    return results
