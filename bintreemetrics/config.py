"""Configuration system for BinTreeMetrics.

This module defines how users specify which metrics they want and how the
tree should be evaluated.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, Union


class Metric(Enum):
    """Aggregate properties a plan can compute."""
    HEIGHT = "height"       # Nodes on the longest root-to-leaf path
    COUNT = "count"         # Number of nodes
    SUM = "sum"             # Sum of node values
    DIAMETER = "diameter"   # Nodes on the longest path between any two nodes
    LEAVES = "leaves"       # Number of leaf nodes
    BALANCED = "balanced"   # Height-balanced check


class EvaluationMode(Enum):
    """How the post-order fold is executed.

    Both modes produce identical results.
    """
    RECURSIVE = "recursive"   # Python recursion; usable depth is roughly half sys.getrecursionlimit()
    ITERATIVE = "iterative"   # Explicit stack; any depth


# The four metrics returned by compute_metrics()
CORE_METRICS: Tuple[Metric, ...] = (
    Metric.HEIGHT,
    Metric.COUNT,
    Metric.SUM,
    Metric.DIAMETER,
)

MetricSpec = Union[Metric, str]


def parse_metric(metric: MetricSpec) -> Metric:
    """Parse a metric from string or enum.

    Raises:
        ValueError: If the name is not a known metric
    """
    if isinstance(metric, Metric):
        return metric

    name = metric.lower() if isinstance(metric, str) else str(metric)
    aliases = {'total': Metric.SUM, 'size': Metric.COUNT}
    if name in aliases:
        return aliases[name]
    for candidate in Metric:
        if candidate.value == name:
            return candidate

    raise ValueError(
        f"Unknown metric: {metric}. "
        f"Choose from: {', '.join(m.value for m in Metric)}"
    )


def parse_mode(mode: Union[EvaluationMode, str]) -> EvaluationMode:
    """Parse an evaluation mode from string or enum."""
    if isinstance(mode, EvaluationMode):
        return mode
    try:
        return EvaluationMode(str(mode).lower())
    except ValueError:
        raise ValueError(
            f"Unknown evaluation mode: {mode}. "
            f"Choose from: {', '.join(m.value for m in EvaluationMode)}"
        ) from None


@dataclass
class MetricsConfig:
    """Complete configuration for a metrics evaluation.

    The MetricsPlan validates this configuration before any node is visited.
    """

    metrics: Sequence[MetricSpec] = field(default_factory=lambda: CORE_METRICS)
    mode: EvaluationMode = EvaluationMode.ITERATIVE

    # Progress reporting
    progress_callback: Optional[Callable[[int], None]] = None
    progress_interval: int = 1000  # Report every N nodes

    @classmethod
    def all_metrics(cls, mode: EvaluationMode = EvaluationMode.ITERATIVE) -> 'MetricsConfig':
        """Create config computing every available metric in one pass."""
        return cls(metrics=tuple(Metric), mode=mode)

    @classmethod
    def single(cls, metric: MetricSpec,
               mode: EvaluationMode = EvaluationMode.ITERATIVE) -> 'MetricsConfig':
        """Create config computing exactly one metric."""
        return cls(metrics=(metric,), mode=mode)

    def resolved_metrics(self) -> List[Metric]:
        """Return the requested metrics as enum members, in request order.

        Raises:
            ValueError: If a metric name is unknown
        """
        return [parse_metric(m) for m in self.metrics]

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.metrics:
            errors.append("at least one metric must be requested")

        seen = set()
        for metric in self.metrics:
            try:
                resolved = parse_metric(metric)
            except ValueError as e:
                errors.append(str(e))
                continue
            if resolved in seen:
                errors.append(f"metric requested more than once: {resolved.value}")
            seen.add(resolved)

        try:
            parse_mode(self.mode)
        except ValueError as e:
            errors.append(str(e))

        if self.progress_interval <= 0:
            errors.append("progress_interval must be positive")

        return errors
