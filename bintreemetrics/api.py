"""High-level API for BinTreeMetrics.

This module provides simple, functional interfaces for the tree metrics.
These functions wrap the MetricsPlan for ease of use in simple cases. Every
function accepts ``None`` as the absent tree and never raises for a valid
tree.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from .config import CORE_METRICS, EvaluationMode, Metric, MetricsConfig
from .core.adapter import BinaryTreeAdapter, TreeAdapter
from .core.traverser import PreOrderTraverser, create_traverser
from .planning import ConfigurationError, MetricsPlan

Mode = Union[EvaluationMode, str]


@dataclass(frozen=True)
class TreeMetrics:
    """The four core metrics of one tree.

    Metrics that were not requested are None.
    """

    height: Optional[int] = None
    count: Optional[int] = None
    total: Optional[int] = None
    diameter: Optional[int] = None

    def as_dict(self) -> Dict[str, int]:
        """Return the computed metrics only."""
        values = {
            'height': self.height,
            'count': self.count,
            'sum': self.total,
            'diameter': self.diameter,
        }
        return {k: v for k, v in values.items() if v is not None}


def _evaluate(root: Any,
              metrics: Tuple[Metric, ...],
              adapter: Optional[TreeAdapter],
              mode: Mode) -> Dict[str, Any]:
    config = MetricsConfig(metrics=metrics, mode=mode)
    return MetricsPlan(config, adapter).execute(root)


def traverse_tree(
    root: Any,
    strategy: str = "pre",
    adapter: Optional[TreeAdapter] = None,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Any]:
    """Iterate over the nodes of a tree.

    Args:
        root: Starting node (None yields nothing)
        strategy: Traversal order (pre, post, bfs)
        adapter: Tree adapter for the node type
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes

    Yields:
        Nodes in the requested order

    Example:
        >>> [n.value for n in traverse_tree(parse_tree("1{2,3}"), "post")]
        [2, 3, 1]
    """
    traverser = create_traverser(strategy, adapter)
    for node, _ in traverser.traverse(root, max_depth=max_depth, min_depth=min_depth):
        yield node


def compute_metrics(
    root: Any,
    config: Optional[MetricsConfig] = None,
    adapter: Optional[TreeAdapter] = None,
) -> TreeMetrics:
    """Compute several metrics in a single traversal.

    Args:
        root: Root node, or None for the absent tree
        config: Which metrics to compute (defaults to all four core metrics)
        adapter: Tree adapter for the node type

    Returns:
        TreeMetrics record

    Raises:
        ConfigurationError: If the configuration is invalid or requests
            a metric outside height, count, sum and diameter

    Example:
        >>> compute_metrics(classroom_tree())
        TreeMetrics(height=3, count=7, total=28, diameter=5)
    """
    config = config or MetricsConfig()
    plan = MetricsPlan(config, adapter)

    unsupported = [c.name for c in plan.collectors
                   if c.name not in {m.value for m in CORE_METRICS}]
    if unsupported:
        raise ConfigurationError(
            f"compute_metrics only returns core metrics, not: {', '.join(unsupported)}"
        )

    values = plan.execute(root)
    return TreeMetrics(
        height=values.get(Metric.HEIGHT.value),
        count=values.get(Metric.COUNT.value),
        total=values.get(Metric.SUM.value),
        diameter=values.get(Metric.DIAMETER.value),
    )


def height(root: Any,
           adapter: Optional[TreeAdapter] = None,
           mode: Mode = EvaluationMode.ITERATIVE) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for None)."""
    return _evaluate(root, (Metric.HEIGHT,), adapter, mode)[Metric.HEIGHT.value]


def count(root: Any,
          adapter: Optional[TreeAdapter] = None,
          mode: Mode = EvaluationMode.ITERATIVE) -> int:
    """Number of nodes in the tree (0 for None)."""
    return _evaluate(root, (Metric.COUNT,), adapter, mode)[Metric.COUNT.value]


def tree_sum(root: Any,
             adapter: Optional[TreeAdapter] = None,
             mode: Mode = EvaluationMode.ITERATIVE) -> int:
    """Sum of all node values (0 for None)."""
    return _evaluate(root, (Metric.SUM,), adapter, mode)[Metric.SUM.value]


def diameter(root: Any,
             adapter: Optional[TreeAdapter] = None,
             mode: Mode = EvaluationMode.ITERATIVE) -> int:
    """Number of nodes on the longest path between any two nodes.

    Runs in O(n): each node combines the (height, diameter) pairs of its
    children, so no height is computed twice. See ``diameter_quadratic``
    for the textbook definition.
    """
    return _evaluate(root, (Metric.DIAMETER,), adapter, mode)[Metric.DIAMETER.value]


def height_and_diameter(root: Any,
                        adapter: Optional[TreeAdapter] = None,
                        mode: Mode = EvaluationMode.ITERATIVE) -> Tuple[int, int]:
    """Return ``(height, diameter)`` from one traversal."""
    values = _evaluate(root, (Metric.HEIGHT, Metric.DIAMETER), adapter, mode)
    return values[Metric.HEIGHT.value], values[Metric.DIAMETER.value]


def diameter_quadratic(root: Any, adapter: Optional[TreeAdapter] = None) -> int:
    """Diameter straight from its definition.

    For every node this takes ``height(left) + height(right) + 1`` and
    keeps the best value over the whole tree, which is the same as taking
    the best of the left diameter, the right diameter and the path
    through the node. Heights are recomputed at every node, so this is
    O(n^2) on a degenerate chain and O(n log n) on a balanced tree;
    prefer ``diameter``. Both the walk and the height computation use
    explicit stacks, so any depth works.
    """
    adapter = adapter or BinaryTreeAdapter()

    def _height(node: Any) -> int:
        levels = 0
        level = [node]
        while level:
            levels += 1
            level = [child for n in level for child in adapter.get_children(n)]
        return levels

    best = 0
    for node, _ in PreOrderTraverser(adapter).traverse(root):
        heights = sorted((_height(c) for c in adapter.get_children(node)), reverse=True)
        best = max(best, 1 + sum(heights[:2]))
    return best


def is_balanced(root: Any,
                adapter: Optional[TreeAdapter] = None,
                mode: Mode = EvaluationMode.ITERATIVE) -> bool:
    """True when subtree heights differ by at most one at every node."""
    return _evaluate(root, (Metric.BALANCED,), adapter, mode)[Metric.BALANCED.value]


def get_tree_stats(root: Any,
                   adapter: Optional[TreeAdapter] = None,
                   mode: Mode = EvaluationMode.ITERATIVE) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with height, count, sum, diameter, leaf_nodes,
        internal_nodes and balanced

    Example:
        >>> stats = get_tree_stats(classroom_tree())
        >>> stats['leaf_nodes'], stats['internal_nodes']
        (4, 3)
    """
    values = MetricsPlan(MetricsConfig.all_metrics(mode=mode), adapter).execute(root)

    stats = {
        'height': values[Metric.HEIGHT.value],
        'count': values[Metric.COUNT.value],
        'sum': values[Metric.SUM.value],
        'diameter': values[Metric.DIAMETER.value],
        'leaf_nodes': values[Metric.LEAVES.value],
        'balanced': values[Metric.BALANCED.value],
    }
    stats['internal_nodes'] = stats['count'] - stats['leaf_nodes']
    return stats
