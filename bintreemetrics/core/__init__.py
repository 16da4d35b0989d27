"""Core abstractions for BinTreeMetrics.

This module contains the node, adapter, traverser and collector building
blocks that the planning layer assembles.
"""

from .node import TreeNode, BinaryNode
from .adapter import TreeAdapter, BinaryTreeAdapter
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .collector import (
    MetricCollector,
    HeightCollector,
    CountCollector,
    SumCollector,
    LeafCountCollector,
    DiameterCollector,
    BalanceCollector,
    CustomCollector,
    create_collector,
)

__all__ = [
    "TreeNode",
    "BinaryNode",
    "TreeAdapter",
    "BinaryTreeAdapter",
    "TreeTraverser",
    "PreOrderTraverser",
    "PostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    "MetricCollector",
    "HeightCollector",
    "CountCollector",
    "SumCollector",
    "LeafCountCollector",
    "DiameterCollector",
    "BalanceCollector",
    "CustomCollector",
    "create_collector",
]
