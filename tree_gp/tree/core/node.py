import copy
from abc import ABC, abstractmethod
from typing import Any, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
  from .box_tree import BoxTree
  from ...generator import TreeGen


class Tree(ABC):
  """Base node class: the capability set every GP node type provides.

  A node owns its children exclusively; trees are acyclic and no subtree is
  shared between two parents. Domain node types subclass this and supply the
  child accessors plus the recursive ``construct`` classmethod.
  """

  __slots__ = ()

  @abstractmethod
  def children(self) -> Sequence['Tree']:
    """Ordered children of this node, empty for terminals"""
    pass

  @abstractmethod
  def set_child(self, index: int, node: 'Tree'):
    """Replace the child at ``index``, giving this node ownership of ``node``"""
    pass

  @classmethod
  @abstractmethod
  def construct(cls, tg: 'TreeGen', config: Any, depth: int) -> 'Tree':
    """Build a node at ``depth``.

    Implementations must ask ``tg.have_reached_a_leaf(depth)`` and emit a
    terminal when it answers True, otherwise build children at ``depth + 1``.
    """
    pass

  @classmethod
  def tree(cls, tg: 'TreeGen', config: Any) -> 'BoxTree':
    from .box_tree import BoxTree
    return BoxTree(cls.construct(tg, config, 0))

  def count_children(self) -> int:
    return len(self.children())

  def is_leaf(self) -> bool:
    return self.count_children() == 0

  def payload(self) -> Tuple:
    """Domain data compared by structural equality, excluding children"""
    return ()

  def copy(self) -> 'Tree':
    return copy.deepcopy(self)

  def to_string(self) -> str:
    name = type(self).__name__
    if self.is_leaf():
      return name
    return f"{name}({', '.join(child.to_string() for child in self.children())})"

  def __str__(self) -> str:
    return self.to_string()

  def __eq__(self, other) -> bool:
    if type(self) is not type(other):
      return False
    if self.payload() != other.payload():
      return False
    mine, theirs = self.children(), other.children()
    if len(mine) != len(theirs):
      return False
    return all(a == b for a, b in zip(mine, theirs))

  __hash__ = None
