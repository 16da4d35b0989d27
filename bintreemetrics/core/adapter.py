"""TreeAdapter abstraction for BinTreeMetrics.

The TreeAdapter provides the navigation logic for a specific tree structure,
decoupling the node representation from traversal and metric evaluation.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator

from .node import BinaryNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating specific types of tree structures.

    Traversers and metric collectors only ever talk to the adapter, so
    the same evaluation code works for any node type an adapter can
    describe:
    - ``get_children`` supplies the structure
    - ``get_value`` supplies the integer payload summed by ``tree_sum``
    """

    @abstractmethod
    def get_children(self, node: Any) -> Iterator[Any]:
        """Get an iterator of child nodes for the given node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding the present children, in order
        """
        pass

    @abstractmethod
    def get_value(self, node: Any) -> int:
        """Return the integer payload of a node.

        Args:
            node: Node to read

        Returns:
            The node's value
        """
        pass

    def is_leaf(self, node: Any) -> bool:
        """Check if a node has no children.

        Default implementation probes ``get_children``.
        """
        for _ in self.get_children(node):
            return False
        return True


class BinaryTreeAdapter(TreeAdapter):
    """Adapter for ``BinaryNode`` trees (the default everywhere)."""

    def get_children(self, node: BinaryNode) -> Iterator[BinaryNode]:
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def get_value(self, node: BinaryNode) -> int:
        return node.value

    def is_leaf(self, node: BinaryNode) -> bool:
        return node.left is None and node.right is None
