"""Utility helpers for tree traversal and analysis."""

from .tree_utils import (
    get_all_nodes,
    count_nodes,
    calculate_tree_depth,
    leaf_depths,
    first_leaf
)

__all__ = [
    'get_all_nodes',
    'count_nodes',
    'calculate_tree_depth',
    'leaf_depths',
    'first_leaf'
]
