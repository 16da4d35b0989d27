"""Tree generators for BinTreeMetrics consumers.

These helpers build well-known tree shapes for test suites: random trees
for property checks, perfect trees, degenerate chains and the small
seven-node example used throughout the documentation.
"""

import random
from typing import List, Optional, Tuple

from ..builders import build_tree_from_level_order
from ..core.node import BinaryNode


def random_tree(size: int,
                seed: Optional[int] = None,
                value_range: Tuple[int, int] = (-100, 100)) -> Optional[BinaryNode]:
    """Build a random tree with exactly ``size`` nodes.

    Shapes come from random splits: each node hands a uniformly chosen
    share of its remaining nodes to the left subtree and the rest to the
    right, which gives an expected height logarithmic in ``size``.

    Args:
        size: Number of nodes (0 returns None)
        seed: Seed for reproducible trees
        value_range: Inclusive bounds for node values

    Raises:
        ValueError: If size is negative
    """
    if size < 0:
        raise ValueError(f"size cannot be negative: {size}")
    if size == 0:
        return None

    rng = random.Random(seed)
    low, high = value_range

    root = BinaryNode(rng.randint(low, high))
    stack: List[Tuple[BinaryNode, int]] = [(root, size)]
    while stack:
        node, subtree_size = stack.pop()
        remaining = subtree_size - 1
        left_size = rng.randint(0, remaining)
        right_size = remaining - left_size
        if left_size:
            node.left = BinaryNode(rng.randint(low, high))
            stack.append((node.left, left_size))
        if right_size:
            node.right = BinaryNode(rng.randint(low, high))
            stack.append((node.right, right_size))
    return root


def perfect_tree(height: int) -> Optional[BinaryNode]:
    """Perfect tree of the given height, values 1, 2, 3... in level order."""
    if height < 0:
        raise ValueError(f"height cannot be negative: {height}")
    return build_tree_from_level_order(range(1, 2 ** height))


def chain(length: int, side: str = "left") -> Optional[BinaryNode]:
    """Degenerate tree: every node has one child on ``side``.

    Values run from 1 at the root to ``length`` at the leaf.
    """
    if side not in ("left", "right"):
        raise ValueError(f"side must be 'left' or 'right', got {side!r}")
    if length <= 0:
        return None

    root = BinaryNode(1)
    node = root
    for value in range(2, length + 1):
        child = BinaryNode(value)
        setattr(node, side, child)
        node = child
    return root


def classroom_tree() -> BinaryNode:
    """The seven-node example tree.

    ::

             1
           /   \\
          2     3
         / \\   / \\
        4   5 6   7
    """
    root = BinaryNode(1)
    root.left = BinaryNode(2)
    root.right = BinaryNode(3)
    root.left.left = BinaryNode(4)
    root.left.right = BinaryNode(5)
    root.right.left = BinaryNode(6)
    root.right.right = BinaryNode(7)
    return root
