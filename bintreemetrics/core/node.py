"""TreeNode abstraction for BinTreeMetrics.

The TreeNode is intentionally kept simple - it's primarily a data container.
Navigation logic is delegated to the TreeAdapter, which lets the same metric
code run over binary trees and any other tree a caller can describe.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional


class TreeNode(ABC):
    """Abstract base class for nodes in any tree structure.

    This class defines the minimal interface that all tree nodes must implement.
    Navigation (how to get children) is handled by the TreeAdapter.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return a unique identifier for this node.

        The identifier must be unique within the tree and stable for the
        lifetime of the node. Payload values are NOT identifiers: two
        nodes in the same tree may carry the same value.

        Returns:
            str: Unique, stable identifier for this node
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node is a leaf (has no children).

        Returns:
            bool: True if this node has no children, False otherwise
        """
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return basic metadata about this node.

        Returns:
            Dict[str, Any]: Metadata dictionary
        """
        pass

    def __str__(self) -> str:
        """String representation defaults to identifier."""
        return self.identifier()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(id={self.identifier()!r})"


class BinaryNode(TreeNode):
    """One vertex of a binary tree.

    Each node exclusively owns its left and right subtrees. An absent
    child is ``None``; the absent tree is simply ``None`` as well.

    Example:
        >>> root = BinaryNode(1, BinaryNode(2), BinaryNode(3))
        >>> root.left.value
        2
    """

    __slots__ = ("value", "left", "right")

    def __init__(self,
                 value: int,
                 left: Optional["BinaryNode"] = None,
                 right: Optional["BinaryNode"] = None):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"BinaryNode value must be an integer, got {value!r}")
        self.value = value
        self.left = left
        self.right = right

    def identifier(self) -> str:
        """Identity-based id: unique among live nodes of the process."""
        return f"{self.value}@{id(self):x}"

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def metadata(self) -> Dict[str, Any]:
        return {
            'value': self.value,
            'has_left': self.left is not None,
            'has_right': self.right is not None,
        }

    def children(self) -> Iterator["BinaryNode"]:
        """Yield present children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def __repr__(self) -> str:
        return f"BinaryNode({self.value!r})"
