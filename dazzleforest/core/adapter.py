"""TreeAdapter abstraction for DazzleForest.

The adapter holds the navigation logic for a node representation, keeping
the traversers independent of how children are stored.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from . import node as nodes


class TreeAdapter(ABC):
    """Abstract adapter for navigating a specific node representation.

    Traversers only ever ask an adapter for a node's children and name, so
    the same traversal algorithms work for any node type that can answer
    those two questions.
    """

    @abstractmethod
    def get_children(self, node: Any) -> Iterator[Any]:
        """Get an iterator of child nodes for the given node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes in sibling order
        """
        pass

    @abstractmethod
    def get_name(self, node: Any) -> Optional[str]:
        """Return the label of node."""
        pass

    def is_leaf(self, node: Any) -> bool:
        """Check if node has no children.

        Default implementation peeks at get_children.
        Adapters can override for more efficient implementations.
        """
        for _ in self.get_children(node):
            return False
        return True

    def add_child(self, parent: Any, child: Any) -> None:
        """Attach child as the last child of parent."""
        raise NotImplementedError(f"{self.__class__.__name__} does not support modification")


class DictNodeAdapter(TreeAdapter):
    """Adapter for dict nodes with ``name`` and ``sub`` keys.

    This is the representation used throughout DazzleForest.
    """

    def get_children(self, node: nodes.Node) -> Iterator[nodes.Node]:
        return iter(nodes.get_children(node))

    def get_name(self, node: nodes.Node) -> Optional[str]:
        return nodes.name_of(node)

    def is_leaf(self, node: nodes.Node) -> bool:
        return not nodes.has_children(node)

    def add_child(self, parent: nodes.Node, child: nodes.Node) -> None:
        nodes.append_child(parent, child)


default_adapter = DictNodeAdapter()
