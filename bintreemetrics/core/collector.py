"""Metric collection strategies for BinTreeMetrics.

A MetricCollector is a post-order fold: it knows the result for an absent
subtree and how to combine a node with the results of its children. The
MetricsPlan drives any number of collectors through a single traversal.
"""

import heapq
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Tuple

from ..config import Metric, MetricSpec, parse_metric
from .adapter import BinaryTreeAdapter, TreeAdapter


class MetricCollector(ABC):
    """Abstract base class for subtree aggregations.

    Subclasses define three things:
    - ``empty()`` - the result for an absent subtree
    - ``combine(node, child_results)`` - the result for ``node`` given the
      results of its present children, in child order
    - ``finalize(result)`` - the public value extracted from a result
    """

    name: str = ""

    def __init__(self, adapter: Optional[TreeAdapter] = None):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for reading node values
        """
        self.adapter = adapter or BinaryTreeAdapter()

    @abstractmethod
    def empty(self) -> Any:
        pass

    @abstractmethod
    def combine(self, node: Any, child_results: List[Any]) -> Any:
        pass

    def finalize(self, result: Any) -> Any:
        """Return the public value of a result (identity by default)."""
        return result


class HeightCollector(MetricCollector):
    """Height in nodes: 0 for absent, 1 + tallest child otherwise."""

    name = Metric.HEIGHT.value

    def empty(self) -> int:
        return 0

    def combine(self, node: Any, child_results: List[int]) -> int:
        return 1 + max(child_results, default=0)


class CountCollector(MetricCollector):
    """Number of nodes in the subtree."""

    name = Metric.COUNT.value

    def empty(self) -> int:
        return 0

    def combine(self, node: Any, child_results: List[int]) -> int:
        return 1 + sum(child_results)


class SumCollector(MetricCollector):
    """Sum of node values in the subtree."""

    name = Metric.SUM.value

    def empty(self) -> int:
        return 0

    def combine(self, node: Any, child_results: List[int]) -> int:
        return self.adapter.get_value(node) + sum(child_results)


class LeafCountCollector(MetricCollector):
    """Number of leaves in the subtree."""

    name = Metric.LEAVES.value

    def empty(self) -> int:
        return 0

    def combine(self, node: Any, child_results: List[int]) -> int:
        if not child_results:
            return 1
        return sum(child_results)


class DiameterCollector(MetricCollector):
    """Diameter in nodes, computed in linear time.

    Each result is a ``(height, diameter)`` pair so heights are never
    recomputed. The longest path through a node joins its two tallest
    children; with at most two children this is
    ``height(left) + height(right) + 1``.
    """

    name = Metric.DIAMETER.value

    def empty(self) -> Tuple[int, int]:
        return (0, 0)

    def combine(self, node: Any, child_results: List[Tuple[int, int]]) -> Tuple[int, int]:
        heights = [h for h, _ in child_results]
        tallest = heapq.nlargest(2, heights)
        through_node = 1 + sum(tallest)
        widest_below = max((d for _, d in child_results), default=0)
        return (1 + max(heights, default=0), max(through_node, widest_below))

    def finalize(self, result: Tuple[int, int]) -> int:
        return result[1]


class BalanceCollector(MetricCollector):
    """Height-balanced check.

    A tree is balanced when, at every node, the heights of the left and
    right subtrees differ by at most one. Missing children count as
    height 0. Results are ``(balanced, height)`` pairs.
    """

    name = Metric.BALANCED.value

    def empty(self) -> Tuple[bool, int]:
        return (True, 0)

    def combine(self, node: Any, child_results: List[Tuple[bool, int]]) -> Tuple[bool, int]:
        heights = [h for _, h in child_results]
        while len(heights) < 2:
            heights.append(0)
        balanced = (
            all(b for b, _ in child_results)
            and max(heights) - min(heights) <= 1
        )
        return (balanced, 1 + max(heights))

    def finalize(self, result: Tuple[bool, int]) -> bool:
        return result[0]


class CustomCollector(MetricCollector):
    """Collector that uses user-provided functions.

    Allows custom aggregations without subclassing.

    Example:
        >>> max_value = CustomCollector(
        ...     "max_value",
        ...     empty=lambda: None,
        ...     combine=lambda node, kids: max([node.value] + [k for k in kids if k is not None]),
        ... )
    """

    def __init__(self,
                 name: str,
                 empty: Callable[[], Any],
                 combine: Callable[[Any, List[Any]], Any],
                 finalize: Optional[Callable[[Any], Any]] = None,
                 adapter: Optional[TreeAdapter] = None):
        super().__init__(adapter)
        self.name = name
        self._empty = empty
        self._combine = combine
        self._finalize = finalize

    def empty(self) -> Any:
        return self._empty()

    def combine(self, node: Any, child_results: List[Any]) -> Any:
        return self._combine(node, child_results)

    def finalize(self, result: Any) -> Any:
        if self._finalize is None:
            return result
        return self._finalize(result)


_COLLECTORS = {
    Metric.HEIGHT: HeightCollector,
    Metric.COUNT: CountCollector,
    Metric.SUM: SumCollector,
    Metric.DIAMETER: DiameterCollector,
    Metric.LEAVES: LeafCountCollector,
    Metric.BALANCED: BalanceCollector,
}


def create_collector(metric: MetricSpec, adapter: Optional[TreeAdapter] = None) -> MetricCollector:
    """Create a collector instance for a metric.

    Args:
        metric: Metric enum member or name (height, count, sum, diameter, ...)
        adapter: TreeAdapter for the tree structure

    Returns:
        MetricCollector instance

    Raises:
        ValueError: If metric name is not recognized
    """
    return _COLLECTORS[parse_metric(metric)](adapter)
