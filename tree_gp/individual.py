from typing import Any, Type, Union

from .exceptions import InvalidDepthRangeError
from .generator import TreeGen
from .tree import Tree, BoxTree, NodeSlot, exchange, first_leaf


class Individual:
  """A genetic individual to mate and mutate: a BoxTree plus cached metadata.

  ``nodes_count()`` is a cached pre-order node count. Operators in this
  package refresh it themselves; code that edits ``tree`` directly must call
  :meth:`recalculate_metadata` afterwards.
  """

  __slots__ = ('tree', '_nodes_count')

  def __init__(self, tree: Union[BoxTree, Tree]):
    if not isinstance(tree, BoxTree):
      tree = BoxTree(tree)
    self.tree = tree
    self._nodes_count = 0
    self.recalculate_metadata()

  @classmethod
  def new(cls, node_type: Type[Tree], tg: TreeGen, config: Any) -> 'Individual':
    """Generate a new tree with ``node_type.construct`` and wrap it"""
    return cls.new_from_tree(node_type.tree(tg, config))

  @classmethod
  def new_from_tree(cls, tree: Union[BoxTree, Tree]) -> 'Individual':
    return cls(tree)

  def nodes_count(self) -> int:
    """Cached number of nodes in the tree"""
    return self._nodes_count

  def recalculate_metadata(self):
    """Refresh cached metadata such as the node count"""
    self._nodes_count = self.tree.count_nodes()

  def prune_at(self, max_depth: int):
    """Cut every branch that extends past ``max_depth`` (root at depth 0).

    Each node at depth ``max_depth`` that still has children is replaced by a
    copy of its first leaf (first child, repeatedly). The walk is pre-order,
    so a replaced node's discarded descendants are never visited.
    """
    if max_depth < 0:
      raise InvalidDepthRangeError(f"prune depth must be non-negative, got {max_depth}")

    def _prune(slot: NodeSlot, index: int, depth: int):
      node = slot.node
      if depth == max_depth and not node.is_leaf():
        exchange(slot, NodeSlot(BoxTree(first_leaf(node).copy())))

    self.tree.map(_prune)
    self.recalculate_metadata()

  def depth(self) -> int:
    return self.tree.depth()

  def copy(self) -> 'Individual':
    return Individual(self.tree.copy())

  def __eq__(self, other) -> bool:
    if not isinstance(other, Individual):
      return False
    return self.tree == other.tree

  __hash__ = None

  def __str__(self) -> str:
    return str(self.tree)

  def __repr__(self) -> str:
    return f"Individual(nodes={self._nodes_count}, tree={self.tree!r})"
