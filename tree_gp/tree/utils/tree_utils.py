"""
Tree Utility Functions

Traversal and analysis helpers shared by the generator, Individual and the
genetic operators. All walks are depth-first pre-order with the root at
depth 0, matching the indexing used by crossover.
"""

from typing import List, Union

from ..core.node import Tree
from ..core.box_tree import BoxTree


def _root_of(tree: Union[Tree, BoxTree]) -> Tree:
    return tree.root if isinstance(tree, BoxTree) else tree


def get_all_nodes(tree: Union[Tree, BoxTree]) -> List[Tree]:
    """
    Get all nodes in pre-order.

    Args:
        tree: Root node or BoxTree

    Returns:
        List where position i holds the node with pre-order index i
    """
    root = _root_of(tree)
    return [node for node, _ in BoxTree(root).iter_nodes()]


def count_nodes(tree: Union[Tree, BoxTree]) -> int:
    """Total number of nodes in the tree"""
    return BoxTree(_root_of(tree)).count_nodes()


def calculate_tree_depth(tree: Union[Tree, BoxTree]) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        tree: Root node or BoxTree

    Returns:
        Depth of the deepest node (a lone terminal has depth 0)
    """
    return BoxTree(_root_of(tree)).depth()


def leaf_depths(tree: Union[Tree, BoxTree]) -> List[int]:
    """Depths of all terminals, in pre-order"""
    root = _root_of(tree)
    return [depth for node, depth in BoxTree(root).iter_nodes() if node.is_leaf()]


def first_leaf(node: Tree) -> Tree:
    """Terminal reached by always descending into the first child"""
    while not node.is_leaf():
        node = node.children()[0]
    return node
