"""In-place structural edits: insert, remove and replace by name.

Every function edits the forest it is given and returns that same forest so
calls can be chained. Nothing is copied defensively; clone first if the
original must survive.

Edits that find nothing to do (duplicate insert, unknown parent, unknown
name) are silent no-ops.
"""

import logging

from .core import node as nodes
from .core.adapter import default_adapter
from .core.traverser import DepthFirstPreOrderTraverser
from .core.node import Forest, Node, require_forest, require_node, require_value

logger = logging.getLogger(__name__)


def insert_node(forest: Forest, parent_name: str, new_node: Node) -> Forest:
    """Append new_node as the last child of the first node named parent_name.

    The first match is found depth-first in sibling order. Names are kept
    unique: if any node in the forest already carries ``new_node['name']``
    the forest is returned unchanged.

    Args:
        forest: Forest to edit
        parent_name: Name of the node receiving the child
        new_node: Node to insert; its ``sub`` is normalized

    Returns:
        The forest

    Raises:
        InvalidArgumentError: If forest is not a list, parent_name is empty,
            or new_node is not a dict with a name
    """
    require_forest(forest)
    require_value(parent_name, "parent_name")
    require_node(new_node, "new_node")

    traverser = DepthFirstPreOrderTraverser(default_adapter)
    new_name = default_adapter.get_name(new_node)
    parent = None
    for node, _, _ in traverser.traverse(forest):
        name = default_adapter.get_name(node)
        if name == new_name:
            logger.debug("Insert skipped: a node named %r already exists", new_name)
            return forest
        if parent is None and name == parent_name:
            parent = node

    if parent is None:
        logger.debug("Insert skipped: no parent named %r", parent_name)
        return forest

    default_adapter.add_child(parent, nodes.normalize_node(new_node))
    return forest


def remove_node(forest: Forest, name: str, preserve_subtree: bool = False) -> Forest:
    """Remove every non-root node named name.

    Removal happens from the parent's side, so a root named name stays.
    With preserve_subtree the removed node's children are moved up to its
    former parent, after that parent's remaining children. Moved children
    are detached from the removed node, and are themselves removed if they
    carry the same name.

    Args:
        forest: Forest to edit
        name: Name of the nodes to remove
        preserve_subtree: Promote the removed nodes' children instead of
            discarding them

    Returns:
        The forest

    Raises:
        InvalidArgumentError: If forest is not a list or name is empty
    """
    require_forest(forest)
    require_value(name, "name")

    removed = _remove_children(forest, name, preserve_subtree)
    logger.debug("Removed %d node(s) named %r", removed, name)
    return forest


def _remove_children(forest: Forest, name: str, preserve_subtree: bool) -> int:
    removed = 0
    parents = list(forest)

    while parents:
        parent = parents.pop()
        children = nodes.get_children(parent)
        if not children:
            continue

        i = 0
        while i < len(children):
            child = children[i]
            if default_adapter.get_name(child) != name:
                i += 1
                continue

            del children[i]
            removed += 1
            if preserve_subtree and nodes.has_children(child):
                children.extend(nodes.get_children(child))
                nodes.set_children(child, None)

        nodes.set_children(parent, children)
        parents.extend(children)

    return removed


def replace_node(forest: Forest, name: str, new_node: Node, preserve_prev_subtree: bool = False) -> Forest:
    """Substitute every node named name, roots included.

    Matches are found in pre-order and the subtree of a replaced node is
    not searched. The first match gets new_node itself; every later match
    gets its own clone of new_node as it was passed in, so one node never
    ends up in two places.

    Args:
        forest: Forest to edit
        name: Name of the nodes to replace
        new_node: Replacement node
        preserve_prev_subtree: When the replacement has no children, give
            it the replaced node's children

    Returns:
        The forest

    Raises:
        InvalidArgumentError: If forest is not a list, name is empty or
            new_node is not a dict
    """
    require_forest(forest)
    require_value(name, "name")
    require_node(new_node, "new_node", named=False)

    template = nodes.clone_node(new_node)
    replaced = 0
    # (sibling list, index of the next sibling to look at)
    pending = [(forest, 0)]

    while pending:
        level, i = pending.pop()
        if i >= len(level):
            continue
        pending.append((level, i + 1))

        node = level[i]
        if default_adapter.get_name(node) != name:
            pending.append((nodes.get_children(node), 0))
            continue

        replacement = new_node if replaced == 0 else nodes.clone_node(template)
        nodes.normalize_node(replacement)
        if preserve_prev_subtree and not nodes.has_children(replacement):
            nodes.set_children(replacement, nodes.get_children(node))
        level[i] = replacement
        replaced += 1

    logger.debug("Replaced %d node(s) named %r", replaced, name)
    return forest
