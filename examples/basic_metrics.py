#!/usr/bin/env python3
"""
Basic BinTreeMetrics usage.

This example demonstrates:
- Building trees from brace notation, level order and by hand
- Computing all metrics in one pass
- Linear vs. quadratic diameter on a larger random tree
"""

import logging
import sys
import time
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreemetrics import (
    build_tree_from_level_order,
    compute_metrics,
    diameter,
    diameter_quadratic,
    get_tree_stats,
    parse_tree,
    render_tree,
)
from bintreemetrics.testing import classroom_tree, random_tree


def show(title, root):
    """Print a tree and its metrics."""
    print(f"\n=== {title} ===")
    print(render_tree(root))
    metrics = compute_metrics(root)
    print(f"height={metrics.height} count={metrics.count} "
          f"sum={metrics.total} diameter={metrics.diameter}")


def compare_diameters(size: int):
    """Time both diameter implementations on one random tree."""
    print(f"\n=== Diameter on a random tree of {size} nodes ===")
    root = random_tree(size, seed=1)

    start = time.perf_counter()
    linear = diameter(root)
    linear_time = time.perf_counter() - start

    start = time.perf_counter()
    quadratic = diameter_quadratic(root)
    quadratic_time = time.perf_counter() - start

    print(f"linear:    {linear} ({linear_time * 1000:.1f} ms)")
    print(f"quadratic: {quadratic} ({quadratic_time * 1000:.1f} ms)")


def main():
    logging.basicConfig(level=logging.DEBUG)

    show("Classroom tree", classroom_tree())
    show("Brace notation 1{2{3{4},5{,6{7}}}}", parse_tree("1{2{3{4},5{,6{7}}}}"))
    show("Level order [1, 2, None, 3]", build_tree_from_level_order([1, 2, None, 3]))
    show("Absent tree", None)

    print("\n=== Stats for the classroom tree ===")
    for key, value in get_tree_stats(classroom_tree()).items():
        print(f"  {key}: {value}")

    compare_diameters(10_000)


if __name__ == "__main__":
    main()
