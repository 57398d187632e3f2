"""Data collection strategies for DazzleForest.

DataCollectors decide what is extracted from each node a walk visits. The
same pre-order walk backs flatten (snapshots tagged with depth), find_nodes
(live nodes or snapshots) and name listings.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from . import node as nodes


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: nodes.Node, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Depth of node (roots are 0)

        Returns:
            Collected data (type depends on collector)
        """
        pass


class NameCollector(DataCollector):
    """Collects only node names."""

    def collect(self, node: nodes.Node, depth: int) -> Any:
        return nodes.name_of(node)


class FullNodeCollector(DataCollector):
    """Collects the live node, children included."""

    def collect(self, node: nodes.Node, depth: int) -> nodes.Node:
        return node


class SnapshotCollector(DataCollector):
    """Collects a detached copy of each node with ``sub`` severed.

    Args:
        depth_field: When set, each snapshot also records its depth under
            this key
    """

    def __init__(self, depth_field: Optional[str] = None):
        self.depth_field = depth_field

    def collect(self, node: nodes.Node, depth: int) -> nodes.Node:
        copied = nodes.snapshot(node)
        if self.depth_field:
            copied[self.depth_field] = depth
        return copied


class CustomCollector(DataCollector):
    """Wraps a user function ``fn(node, depth)``."""

    def __init__(self, fn: Callable[[nodes.Node, int], Any]):
        self.fn = nodes.require_callable(fn, "fn")

    def collect(self, node: nodes.Node, depth: int) -> Any:
        return self.fn(node, depth)
