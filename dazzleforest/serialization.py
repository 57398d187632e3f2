"""Conversion between forests and plain data / JSON text.

to_plain and from_plain rebuild a forest node by node, optionally passing
each node through a transform first. to_json and from_json add the JSON
framing with the standard json module.
"""

import json
from typing import Any, Callable, List, Optional

from .core import node as nodes
from .core.node import Forest, Node, require_callable, require_forest
from .exceptions import DecodeError, InvalidArgumentError

Transform = Callable[[Node], Node]


def to_plain(forest: Forest, transform: Optional[Transform] = None) -> List[Node]:
    """Rebuild the forest as fresh dicts.

    Args:
        forest: Forest to export
        transform: Applied to every node before its children are rebuilt;
            the children it returns are transformed in turn

    Returns:
        New list of new dicts; extra fields are copied by reference

    Raises:
        InvalidArgumentError: If a node (after transform) is not a dict or
            its ``sub`` is neither None nor a list
    """
    require_forest(forest)
    if transform is not None:
        require_callable(transform, "transform")
    return _rebuild(forest, transform)


def from_plain(data: Any, transform: Optional[Transform] = None) -> Forest:
    """Build a forest from decoded data.

    A missing or empty ``sub`` becomes None.

    Raises:
        InvalidArgumentError: If data is not a list, or a node is not an
            object or has a ``sub`` that is neither null nor a list
    """
    if not nodes.is_forest(data):
        raise InvalidArgumentError(f"data must represent a list, not {type(data).__name__}")
    if transform is not None:
        require_callable(transform, "transform")
    return _rebuild(data, transform)


def _rebuild(forest: Forest, transform: Optional[Transform]) -> Forest:
    result: Forest = []
    pending = [(forest, result)]

    while pending:
        source, output = pending.pop()
        for node in source:
            processed = transform(node) if transform else node
            if not nodes.is_node(processed):
                raise InvalidArgumentError(f"nodes must be objects, not {type(processed).__name__}")

            rebuilt = dict(processed)
            sub = processed.get(nodes.SUB)
            if sub is not None and not nodes.is_forest(sub):
                raise InvalidArgumentError(
                    f"{nodes.SUB!r} of node {nodes.name_of(processed)!r} must be null or a list, "
                    f"not {type(sub).__name__}"
                )
            if sub:
                children: Forest = []
                rebuilt[nodes.SUB] = children
                pending.append((sub, children))
            else:
                rebuilt[nodes.SUB] = None
            output.append(rebuilt)

    return result


def to_json(forest: Forest, transform: Optional[Transform] = None, indent: Optional[int] = 2) -> str:
    """Serialize the forest to JSON text."""
    return json.dumps(to_plain(forest, transform), indent=indent)


def from_json(text: str, transform: Optional[Transform] = None) -> Forest:
    """Parse JSON text into a forest.

    Raises:
        InvalidArgumentError: If text is not a string, does not hold a list,
            or holds a node whose ``sub`` is neither null nor a list
        DecodeError: If text is not valid JSON
    """
    if not isinstance(text, str):
        raise InvalidArgumentError(f"json must be a string, not {type(text).__name__}")

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON: {e}") from e

    return from_plain(parsed, transform)
