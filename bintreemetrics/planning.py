"""Execution planning for BinTreeMetrics.

The MetricsPlan validates a MetricsConfig, assembles one collector per
requested metric and evaluates all of them in a single post-order fold.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .config import EvaluationMode, MetricsConfig, parse_mode
from .core.adapter import BinaryTreeAdapter, TreeAdapter
from .core.collector import MetricCollector, create_collector

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class ConfigurationError(Exception):
    """Raised when a MetricsConfig cannot be turned into a plan."""
    pass


class MetricsPlan:
    """Validated evaluation plan for a set of tree metrics.

    The plan is the bridge between user intent (MetricsConfig) and
    evaluation. Configuration problems are reported before any node is
    visited; once built, a plan never fails on a valid tree.

    Example:
        >>> plan = MetricsPlan(MetricsConfig(metrics=("height", "diameter")))
        >>> plan.execute(root)
        {'height': 3, 'diameter': 5}
    """

    def __init__(self,
                 config: Optional[MetricsConfig] = None,
                 adapter: Optional[TreeAdapter] = None,
                 extra_collectors: Optional[Sequence[MetricCollector]] = None):
        """Create and validate a plan.

        Args:
            config: Which metrics to compute and how (defaults to the four core metrics)
            adapter: Tree adapter for the node type (binary by default)
            extra_collectors: Additional collectors evaluated in the same pass

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or MetricsConfig()
        self.adapter = adapter or BinaryTreeAdapter()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.mode = parse_mode(self.config.mode)
        self.collectors = self._select_collectors(extra_collectors or ())

        # Execution state, reset on every execute()
        self.nodes_processed = 0

        logger.debug(
            "Metrics plan: mode=%s collectors=%s adapter=%s",
            self.mode.value,
            [c.name for c in self.collectors],
            self.adapter.__class__.__name__,
        )

    def _select_collectors(self, extra: Sequence[MetricCollector]) -> List[MetricCollector]:
        collectors = [
            create_collector(metric, self.adapter)
            for metric in self.config.resolved_metrics()
        ]
        collectors.extend(extra)

        names = [c.name for c in collectors]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ConfigurationError(
                f"Collector names must be unique: {', '.join(duplicates)}"
            )
        return collectors

    def _report_progress(self) -> None:
        """Report progress if callback configured."""
        if self.config.progress_callback:
            if self.nodes_processed % self.config.progress_interval == 0:
                self.config.progress_callback(self.nodes_processed)

    def _combine(self, node: Any, child_results: List[Tuple[Any, ...]]) -> Tuple[Any, ...]:
        """Fold one node: one combined result per collector."""
        self.nodes_processed += 1
        self._report_progress()
        return tuple(
            collector.combine(node, [results[i] for results in child_results])
            for i, collector in enumerate(self.collectors)
        )

    def _fold_recursive(self, node: Any) -> Tuple[Any, ...]:
        child_results = [
            self._fold_recursive(child)
            for child in self.adapter.get_children(node)
        ]
        return self._combine(node, child_results)

    def _fold_iterative(self, root: Any) -> Tuple[Any, ...]:
        # Frames are (node, pending children, results of finished children)
        stack = [(root, iter(self.adapter.get_children(root)), [])]
        while True:
            node, children, finished = stack[-1]
            child = next(children, _EXHAUSTED)
            if child is not _EXHAUSTED:
                stack.append((child, iter(self.adapter.get_children(child)), []))
                continue

            stack.pop()
            result = self._combine(node, finished)
            if not stack:
                return result
            stack[-1][2].append(result)

    def execute(self, root: Any) -> Dict[str, Any]:
        """Evaluate every collector over the tree rooted at ``root``.

        Args:
            root: Root node, or None for the absent tree

        Returns:
            Mapping of collector name to finalized value, in request order

        Raises:
            RecursionError: Only in RECURSIVE mode, for trees deeper than
                the interpreter recursion limit
        """
        self.nodes_processed = 0

        if root is None:
            results = tuple(c.empty() for c in self.collectors)
        elif self.mode == EvaluationMode.RECURSIVE:
            results = self._fold_recursive(root)
        else:
            results = self._fold_iterative(root)

        logger.debug("Metrics plan finished after %d nodes", self.nodes_processed)

        return {
            collector.name: collector.finalize(result)
            for collector, result in zip(self.collectors, results)
        }

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of the plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'mode': self.mode.value,
            'metrics': [c.name for c in self.collectors],
            'adapter': self.adapter.__class__.__name__,
            'progress_interval': self.config.progress_interval,
        }
