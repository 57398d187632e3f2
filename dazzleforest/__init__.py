"""DazzleForest - traversal, search and editing of in-memory forests.

A forest is an ordered list of trees made of plain dict nodes::

    [{"name": "docs", "sub": [{"name": "a.txt", "sub": None}]}]

━━━━━━━━━━━━━━━━━━━━━━━━━━
Walk:       traverse, walk, count_nodes
Measure:    get_depth, get_width, level_slice, compare
Search:     key_search, pattern_search (+ PatternCache)
Edit:       insert_node, remove_node, replace_node
Transform:  clone, flip, sort_by_name, map_field,
            filter_nodes, find_nodes, flatten
Exchange:   to_plain, from_plain, to_json, from_json
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .exceptions import ForestError, InvalidArgumentError, DecodeError
from .config import TraversalOrder, TraversalConfig, CacheConfig
from .core.node import NAME, SUB, Node, Forest, make_node, is_node, is_forest
from .api import traverse, walk, count_nodes, collect
from .metrics import get_depth, get_width, level_slice, compare
from .cache import PatternCache
from .search import key_search, pattern_search
from .mutation import insert_node, remove_node, replace_node
from .transforms import (
    clone,
    flip,
    sort_by_name,
    map_field,
    filter_nodes,
    find_nodes,
    flatten,
    by_name,
)
from .serialization import to_plain, from_plain, to_json, from_json
from .session import ForestSession

__all__ = [
    "__version__",
    # Errors
    "ForestError",
    "InvalidArgumentError",
    "DecodeError",
    # Config
    "TraversalOrder",
    "TraversalConfig",
    "CacheConfig",
    # Model
    "NAME",
    "SUB",
    "Node",
    "Forest",
    "make_node",
    "is_node",
    "is_forest",
    # Traversal
    "traverse",
    "walk",
    "count_nodes",
    "collect",
    # Metrics
    "get_depth",
    "get_width",
    "level_slice",
    "compare",
    # Search
    "PatternCache",
    "key_search",
    "pattern_search",
    # Mutation
    "insert_node",
    "remove_node",
    "replace_node",
    # Transforms
    "clone",
    "flip",
    "sort_by_name",
    "map_field",
    "filter_nodes",
    "find_nodes",
    "flatten",
    "by_name",
    # Serialization
    "to_plain",
    "from_plain",
    "to_json",
    "from_json",
    # Session
    "ForestSession",
]
