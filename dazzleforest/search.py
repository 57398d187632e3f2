"""Exact-key and pattern search over a forest.

Both searches scan level by level. A node that matches is reported and its
subtree is not explored further; the children of every node that did not
match make up the next level.
"""

import logging
import re
from typing import List, Optional

from .cache import PatternCache, PatternLike
from .core import node as nodes
from .core.adapter import default_adapter
from .core.node import Forest, Node, require_forest, require_value
from .exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def key_search(key: str, forest: Forest, include_subtree: bool = False) -> Optional[Node]:
    """Find the first node named ``key`` in level order.

    Args:
        key: Exact name to look for
        forest: Forest to search
        include_subtree: Return the live node with its children. When False
            a detached snapshot with ``sub`` set to None is returned and the
            forest is not modified.

    Returns:
        The matching node (or its snapshot), or None if nothing matches

    Raises:
        InvalidArgumentError: If forest is not a list or key is empty
    """
    require_forest(forest)
    require_value(key, "key")

    level = list(forest)
    while level:
        next_level = []
        for node in level:
            if default_adapter.get_name(node) == key:
                return node if include_subtree else nodes.snapshot(node)
            next_level.extend(default_adapter.get_children(node))
        level = next_level

    return None


def pattern_search(
    pattern: PatternLike,
    forest: Forest,
    cache: Optional[PatternCache] = None,
    bypass_cache: bool = False,
    accumulator: Optional[List[Node]] = None,
) -> List[Node]:
    """Collect every node whose name matches ``pattern``.

    Matching uses ``re.search``, so a plain string matches anywhere in the
    name. Matches are listed level by level in encounter order; descendants
    of a match are not examined.

    Args:
        pattern: Regular expression (string or compiled)
        forest: Forest to search
        cache: Optional PatternCache to serve and store results
        bypass_cache: Skip the cache lookup but still refresh the entry
        accumulator: List to append matches to (a new list by default)

    Returns:
        The accumulator holding the matched (live) nodes

    Raises:
        InvalidArgumentError: If forest is not a list, pattern is empty or
            pattern is not a valid regular expression
    """
    require_forest(forest)
    require_value(pattern, "pattern")
    results = [] if accumulator is None else accumulator

    if cache is not None and not bypass_cache:
        cached = cache.get(forest, pattern)
        if cached is not None:
            results.extend(cached)
            return results

    matches = _scan_levels(_compile(pattern), forest)
    if cache is not None:
        cache.put(forest, pattern, matches)

    results.extend(matches)
    return results


def _compile(pattern: PatternLike) -> re.Pattern:
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise InvalidArgumentError(f"pattern must be a string, not {type(pattern).__name__}")
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidArgumentError(f"Invalid pattern {pattern!r}: {e}") from e


def _scan_levels(regex: re.Pattern, forest: Forest) -> List[Node]:
    matched: List[Node] = []
    level = list(forest)

    while level:
        unmatched_children: List[Node] = []
        for node in level:
            name = default_adapter.get_name(node)
            if isinstance(name, str) and regex.search(name):
                matched.append(node)
            else:
                unmatched_children.extend(default_adapter.get_children(node))
        level = unmatched_children

    logger.debug("Pattern %r matched %d nodes", regex.pattern, len(matched))
    return matched
