"""BinTreeMetrics - aggregate properties of binary trees.

BinTreeMetrics computes height, node count, value sum and diameter of a
binary tree, each by a post-order fold that never mutates the tree.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from bintreemetrics import parse_tree, compute_metrics

    root = parse_tree("1{2{4,5},3{6,7}}")
    compute_metrics(root)   # TreeMetrics(height=3, count=7, total=28, diameter=5)
━━━━━━━━━━━━━━━━━━━━━━━━━━

The absent tree is ``None`` and is valid input everywhere.
"""

__version__ = "0.1.0"

# Core components
from .core.node import TreeNode, BinaryNode
from .core.adapter import TreeAdapter, BinaryTreeAdapter
from .core.traverser import (
    TreeTraverser,
    PreOrderTraverser,
    PostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .core.collector import (
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

# Configuration and planning
from .config import Metric, EvaluationMode, MetricsConfig
from .planning import MetricsPlan, ConfigurationError

# Tree construction
from .builders import (
    TreeSyntaxError,
    build_tree_from_level_order,
    level_order_values,
    parse_tree,
    format_tree,
    mirror,
    render_tree,
)

# High-level API
from .api import (
    TreeMetrics,
    traverse_tree,
    compute_metrics,
    height,
    count,
    tree_sum,
    diameter,
    height_and_diameter,
    diameter_quadratic,
    is_balanced,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    'TreeNode',
    'BinaryNode',
    'TreeAdapter',
    'BinaryTreeAdapter',
    'TreeTraverser',
    'PreOrderTraverser',
    'PostOrderTraverser',
    'BreadthFirstTraverser',
    'create_traverser',
    'MetricCollector',
    'HeightCollector',
    'CountCollector',
    'SumCollector',
    'LeafCountCollector',
    'DiameterCollector',
    'BalanceCollector',
    'CustomCollector',
    'create_collector',
    # Config
    'Metric',
    'EvaluationMode',
    'MetricsConfig',
    'MetricsPlan',
    'ConfigurationError',
    # Builders
    'TreeSyntaxError',
    'build_tree_from_level_order',
    'level_order_values',
    'parse_tree',
    'format_tree',
    'mirror',
    'render_tree',
    # API
    'TreeMetrics',
    'traverse_tree',
    'compute_metrics',
    'height',
    'count',
    'tree_sum',
    'diameter',
    'height_and_diameter',
    'diameter_quadratic',
    'is_balanced',
    'get_tree_stats',
]
