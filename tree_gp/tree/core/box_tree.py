from typing import Callable, Iterator, Optional, Tuple, Union
from .node import Tree


class NodeSlot:
  """A position that owns a node: the root of a BoxTree or one child of a parent.

  Reading ``slot.node`` returns the current occupant; assigning to it moves
  ownership of the whole subtree into this position.
  """

  __slots__ = ('owner', 'index')

  def __init__(self, owner: Union['BoxTree', Tree], index: Optional[int] = None):
    self.owner = owner
    self.index = index

  @property
  def node(self) -> Tree:
    if self.index is None:
      return self.owner.root
    return self.owner.children()[self.index]

  @node.setter
  def node(self, value: Tree):
    if self.index is None:
      self.owner.root = value
    else:
      self.owner.set_child(self.index, value)

  def __repr__(self) -> str:
    return f"NodeSlot({self.node!r})"


def exchange(slot1: NodeSlot, slot2: NodeSlot):
  """Swap the subtrees owned by two positions.

  The slots must not be on the same root-to-leaf path, otherwise the swap
  would make a node its own descendant. Derived metadata held by whoever owns
  the trees (node counts) is stale afterwards.
  """
  node1 = slot1.node
  node2 = slot2.node
  slot1.node = node2
  slot2.node = node1


Visitor = Callable[[NodeSlot, int, int], bool]


class BoxTree:
  """Owning container for a tree rooted at a single node"""

  __slots__ = ('root',)

  def __init__(self, root: Tree):
    self.root = root

  def count_nodes(self) -> int:
    """Number of nodes visited by a depth-first pre-order walk"""
    count = 0
    stack = [self.root]
    while stack:
      node = stack.pop()
      count += 1
      stack.extend(node.children())
    return count

  def map_while(self, visitor: Visitor) -> bool:
    """Pre-order walk calling ``visitor(slot, index, depth)`` until it returns False.

    ``index`` is the node's pre-order position and ``depth`` its distance
    from the root. Children are taken from whatever node occupies the slot
    once the visitor returns. Returns True if every node was visited.
    """
    index = 0
    stack = [(NodeSlot(self), 0)]
    while stack:
      slot, depth = stack.pop()
      if not visitor(slot, index, depth):
        return False
      index += 1
      node = slot.node
      for child_index in reversed(range(node.count_children())):
        stack.append((NodeSlot(node, child_index), depth + 1))
    return True

  def map(self, visitor: Callable[[NodeSlot, int, int], None]):
    """Pre-order walk over every node; the visitor may replace ``slot.node``"""
    def _continue(slot: NodeSlot, index: int, depth: int) -> bool:
      visitor(slot, index, depth)
      return True

    self.map_while(_continue)

  def iter_nodes(self) -> Iterator[Tuple[Tree, int]]:
    """Yield ``(node, depth)`` pairs in pre-order"""
    stack = [(self.root, 0)]
    while stack:
      node, depth = stack.pop()
      yield node, depth
      for child in reversed(node.children()):
        stack.append((child, depth + 1))

  def depth(self) -> int:
    """Deepest node depth, the root sitting at depth 0"""
    return max(depth for _, depth in self.iter_nodes())

  def copy(self) -> 'BoxTree':
    return BoxTree(self.root.copy())

  def __len__(self) -> int:
    return self.count_nodes()

  def __eq__(self, other) -> bool:
    if not isinstance(other, BoxTree):
      return False
    return self.root == other.root

  __hash__ = None

  def __str__(self) -> str:
    return str(self.root)

  def __repr__(self) -> str:
    return f"BoxTree({self.root!r})"
