"""Structural metrics: depth, width, level slicing and shape comparison."""

from typing import Optional

from .core import node as nodes
from .core.node import Forest, require_forest
from .core.traverser import LevelOrderTraverser
from .exceptions import InvalidArgumentError


def get_depth(forest: Forest) -> int:
    """Number of levels below the roots.

    Counts the level expansions that produce at least one node, so a forest
    whose nodes are all childless (or an empty forest) has depth 0.
    """
    require_forest(forest)
    levels = sum(1 for _ in LevelOrderTraverser().levels(forest))
    return max(levels - 1, 0)


def get_width(forest: Forest) -> int:
    """Largest number of nodes found on a single level, roots included."""
    require_forest(forest)
    return max((len(level) for level in LevelOrderTraverser().levels(forest)), default=0)


def level_slice(forest: Forest, start: int, end: Optional[int] = None) -> Forest:
    """Extract the subtrees rooted at one level.

    The nodes at level ``start`` become the roots of a new forest. When the
    result reaches level ``end`` of the original forest, the nodes there
    have their children severed. The returned subtrees are clones, so the
    input forest is left untouched.

    Args:
        forest: Source forest
        start: Level whose nodes become the new roots
        end: Last level kept (defaults to the forest's depth)

    Returns:
        New forest; empty when ``start`` is below the deepest level

    Raises:
        InvalidArgumentError: If start is negative or not an integer, end
            is not an integer, or end is less than start
    """
    require_forest(forest)
    if not _is_int(start) or start < 0:
        raise InvalidArgumentError("start must be a non-negative integer")

    if end is None:
        end = max(get_depth(forest), start)
    elif not _is_int(end):
        raise InvalidArgumentError("end must be an integer")
    if end < start:
        raise InvalidArgumentError("end cannot be less than start")

    roots = []
    for depth, level in enumerate(LevelOrderTraverser().levels(forest, max_depth=start)):
        if depth == start:
            roots = level

    result = [nodes.clone_node(root) for root in roots]
    _truncate(result, end - start)
    return result


def _truncate(forest: Forest, remaining: int) -> None:
    pending = [(forest, remaining)]
    while pending:
        siblings, left = pending.pop()
        for node in siblings:
            if left <= 0:
                nodes.set_children(node, None)
            elif nodes.has_children(node):
                pending.append((nodes.get_children(node), left - 1))


def compare(forest: Forest, other: Forest) -> bool:
    """Check whether two forests have the same names in the same shape.

    Only ``name`` and the ``sub`` structure are compared; other fields are
    ignored.
    """
    require_forest(forest)
    require_forest(other, "other")

    pending = [(forest, other)]
    while pending:
        left_level, right_level = pending.pop()
        if len(left_level) != len(right_level):
            return False

        for left, right in zip(left_level, right_level):
            if nodes.name_of(left) != nodes.name_of(right):
                return False
            pending.append((nodes.get_children(left), nodes.get_children(right)))

    return True


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
