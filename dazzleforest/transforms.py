"""Ordering and copy transforms.

clone, filter_nodes, find_nodes and flatten build new structures. flip,
sort_by_name and map_field edit the forest in place and return it.
"""

from typing import Any, Callable, Iterator, List

from .api import collect
from .core import node as nodes
from .core.collector import FullNodeCollector, SnapshotCollector
from .core.node import Forest, Node, require_callable, require_forest, require_value

DEPTH_FIELD = "depth"

Predicate = Callable[[Node], bool]

_END = object()


def clone(forest: Forest) -> Forest:
    """Deep copy of the forest sharing no nodes or field values with it."""
    require_forest(forest)
    return [nodes.clone_node(node) for node in forest]


def _sibling_lists(forest: Forest, shallow: bool) -> Iterator[Forest]:
    # The forest itself, then (unless shallow) every non-empty children list
    pending = [forest]
    while pending:
        siblings = pending.pop()
        yield siblings
        if not shallow:
            pending.extend(nodes.get_children(node) for node in siblings if nodes.has_children(node))


def flip(forest: Forest, shallow: bool = True) -> Forest:
    """Reverse sibling order, at every level unless shallow."""
    require_forest(forest)
    for siblings in _sibling_lists(forest, shallow):
        siblings.reverse()
    return forest


def sort_by_name(forest: Forest, shallow: bool = True) -> Forest:
    """Sort siblings by name in ascending code-point order.

    The sort is stable, so nodes with equal names keep their relative
    order. Sorts every level unless shallow.
    """
    require_forest(forest)
    for siblings in _sibling_lists(forest, shallow):
        siblings.sort(key=lambda node: nodes.name_of(node) or "")
    return forest


def map_field(key: str, forest: Forest, fn: Callable[[Any], Any]) -> Forest:
    """Set ``node[key] = fn(node.get(key))`` on every node.

    Raises:
        InvalidArgumentError: If key is empty or fn is not callable
    """
    require_forest(forest)
    require_value(key, "key")
    require_callable(fn, "fn")

    for siblings in _sibling_lists(forest, shallow=False):
        for node in siblings:
            node[key] = fn(node.get(key))

    return forest


def filter_nodes(forest: Forest, predicate: Predicate, keep_subtree: bool = False) -> Forest:
    """Keep the nodes satisfying predicate, promoting survivors of dropped nodes.

    A node that passes is kept either with its whole original subtree
    (keep_subtree) or as a shallow copy whose children are filtered in
    turn. A node that fails is dropped, and whatever survives among its
    descendants takes its place, in order.

    Returns:
        A new forest; the input is not modified

    Raises:
        InvalidArgumentError: If predicate is not callable
    """
    require_forest(forest)
    require_callable(predicate, "predicate")

    result: Forest = []
    # Frames of (remaining siblings, output list, kept copy owning that output)
    frames = [(iter(forest), result, None)]

    while frames:
        siblings, output, owner = frames[-1]
        node = next(siblings, _END)

        if node is _END:
            frames.pop()
            if owner is not None:
                nodes.set_children(owner, output)
            continue

        if predicate(node):
            if keep_subtree:
                output.append(node)
                continue
            kept = dict(node)
            output.append(kept)
            frames.append((iter(nodes.get_children(node)), [], kept))
        elif nodes.has_children(node):
            frames.append((iter(nodes.get_children(node)), output, None))

    return result


def find_nodes(forest: Forest, predicate: Predicate, include_subtree: bool = False) -> List[Node]:
    """Every node satisfying predicate, in pre-order.

    With include_subtree the live nodes are returned; otherwise detached
    snapshots without children. Descendants of a match are tested too.

    Raises:
        InvalidArgumentError: If predicate is not callable
    """
    require_forest(forest)
    require_callable(predicate, "predicate")
    collector = FullNodeCollector() if include_subtree else SnapshotCollector()
    return collect(forest, collector, predicate=predicate)


def flatten(forest: Forest, include_depth: bool = False) -> List[Node]:
    """Pre-order list of childless snapshots of every node.

    With include_depth each snapshot records its depth (roots are 0) under
    the ``depth`` key.
    """
    require_forest(forest)
    return collect(forest, SnapshotCollector(DEPTH_FIELD if include_depth else None))


def by_name(name: str) -> Predicate:
    """Predicate matching nodes with the given name."""
    return lambda node: nodes.name_of(node) == name
