"""Tree Module

Generic GP tree representation: the node capability set, the owning
container and the pre-order traversal primitives built on it.
"""

from .core import Tree, BoxTree, NodeSlot, exchange
from .utils import get_all_nodes, count_nodes, calculate_tree_depth, leaf_depths, first_leaf

__all__ = [
    "Tree", "BoxTree", "NodeSlot", "exchange",
    "get_all_nodes", "count_nodes", "calculate_tree_depth", "leaf_depths", "first_leaf"
]
