"""Core tree components."""

from .node import Tree
from .box_tree import BoxTree, NodeSlot, exchange

__all__ = ['Tree', 'BoxTree', 'NodeSlot', 'exchange']
