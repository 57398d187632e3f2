"""Node and forest data model for DazzleForest.

A node is a plain dict. Two keys are interpreted: ``name`` (the label) and
``sub`` (``None`` when the node has no children, otherwise a non-empty list
of nodes). Any other key is carried along untouched. A forest is a list of
root nodes.

Keeping nodes as dicts means forests decoded from JSON, YAML or any other
generic structured format can be handed to the engine as they are.
"""

import copy
from typing import Any, Callable, Dict, List, Optional

from ..exceptions import InvalidArgumentError

NAME = "name"
SUB = "sub"

Node = Dict[str, Any]
Forest = List[Node]


def is_node(obj: Any) -> bool:
    """Check whether obj can be handled as a node."""
    return isinstance(obj, dict)


def is_forest(obj: Any) -> bool:
    """Check whether obj can be handled as a forest."""
    return isinstance(obj, list)


def require_forest(forest: Any, arg: str = "forest") -> Forest:
    """Return forest unchanged, raising if it is not a list.

    Raises:
        InvalidArgumentError: If forest is not a list
    """
    if not is_forest(forest):
        raise InvalidArgumentError(
            f"{arg} must be a list of nodes, not {type(forest).__name__}"
        )
    return forest


def require_callable(fn: Any, arg: str) -> Callable:
    if not callable(fn):
        raise InvalidArgumentError(f"{arg} must be callable, not {type(fn).__name__}")
    return fn


def require_value(value: Any, arg: str) -> Any:
    """Raise if a required key, name or pattern is missing or empty."""
    if not value:
        raise InvalidArgumentError(f"{arg} parameter is required")
    return value


def require_node(node: Any, arg: str = "node", named: bool = True) -> Node:
    """Return node unchanged, raising if it is not a dict (with a name).

    Args:
        node: Candidate node
        arg: Argument name used in the error message
        named: Also require a non-empty ``name``

    Raises:
        InvalidArgumentError: If node is not a dict, lacks a name, or has a
            ``sub`` that is neither None nor a list
    """
    if not is_node(node):
        raise InvalidArgumentError(f"{arg} must be a dict, not {type(node).__name__}")
    if named and not node.get(NAME):
        raise InvalidArgumentError(f"{arg} must have a {NAME!r} field")
    sub = node.get(SUB)
    if sub is not None and not is_forest(sub):
        raise InvalidArgumentError(
            f"{arg}[{SUB!r}] must be None or a list, not {type(sub).__name__}"
        )
    return node


def make_node(name: str, sub: Optional[Forest] = None, **fields: Any) -> Node:
    """Build a node.

    Example:
        >>> make_node("docs", [make_node("a.txt", size=3)], type="folder")
        {'name': 'docs', 'sub': [{'name': 'a.txt', 'sub': None, 'size': 3}], 'type': 'folder'}
    """
    node = {NAME: name, SUB: sub or None}
    node.update(fields)
    return node


def name_of(node: Node) -> Any:
    return node.get(NAME)


def get_children(node: Node) -> Forest:
    """Return the live children list, or an empty list for a childless node.

    The empty list returned for a childless node is a fresh object, so
    appending to it does not attach anything to the node. Use
    set_children or append_child for that.
    """
    return node.get(SUB) or []


def has_children(node: Node) -> bool:
    return bool(node.get(SUB))


def set_children(node: Node, children: Optional[Forest]) -> Node:
    """Replace a node's children, collapsing an empty list to None."""
    node[SUB] = children if children else None
    return node


def append_child(parent: Node, child: Node) -> Node:
    if parent.get(SUB):
        parent[SUB].append(child)
    else:
        parent[SUB] = [child]
    return parent


def normalize_node(node: Node) -> Node:
    """Give node an explicit ``sub`` key and collapse ``[]`` to None."""
    if not node.get(SUB):
        node[SUB] = None
    return node


def snapshot(node: Node) -> Node:
    """Shallow copy of node with its children severed."""
    copied = dict(node)
    copied[SUB] = None
    return copied


def clone_node(node: Node) -> Node:
    """Deep copy of node and all of its descendants.

    Children are copied level by level with an explicit stack; every other
    field value is deep-copied, so the result shares no mutable state with
    node.
    """
    copied = _copy_fields(node)
    pending = [(node, copied)]

    while pending:
        source, target = pending.pop()
        children = source.get(SUB)
        if children:
            copies = [_copy_fields(child) for child in children]
            target[SUB] = copies
            pending.extend(zip(children, copies))

    return copied


def _copy_fields(node: Node) -> Node:
    # sub keeps its key position; the caller fills in copied children
    return {key: None if key == SUB else copy.deepcopy(value) for key, value in node.items()}
