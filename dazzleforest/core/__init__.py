"""Core abstractions for DazzleForest.

This package contains the node model and the adapter, traverser and
collector building blocks every public operation is made of.
"""

from .node import NAME, SUB, Node, Forest, make_node
from .adapter import TreeAdapter, DictNodeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    NameCollector,
    FullNodeCollector,
    SnapshotCollector,
    CustomCollector,
)

__all__ = [
    "NAME",
    "SUB",
    "Node",
    "Forest",
    "make_node",
    "TreeAdapter",
    "DictNodeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
    "NameCollector",
    "FullNodeCollector",
    "SnapshotCollector",
    "CustomCollector",
]
