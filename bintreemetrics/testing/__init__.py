"""Testing utilities for BinTreeMetrics consumers."""

from .fixtures import random_tree, perfect_tree, chain, classroom_tree

__all__ = ['random_tree', 'perfect_tree', 'chain', 'classroom_tree']
