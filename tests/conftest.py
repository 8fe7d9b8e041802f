import numpy as np
import pytest

from tree_gp import Tree


class LabelNode(Tree):
  """Minimal node carrying a label, used to spell trees such as A(B, C)"""

  __slots__ = ('label', '_children')

  def __init__(self, label, *children):
    self.label = label
    self._children = list(children)

  def children(self):
    return self._children

  def set_child(self, index, node):
    self._children[index] = node

  @classmethod
  def construct(cls, tg, config, depth):
    if tg.have_reached_a_leaf(depth):
      return cls(f"t{depth}")
    arity = config.get('arity', 2) if config else 2
    return cls(f"f{depth}", *[cls.construct(tg, config, depth + 1) for _ in range(arity)])

  def payload(self):
    return (self.label,)

  def to_string(self):
    if not self._children:
      return self.label
    return f"{self.label}({', '.join(c.to_string() for c in self._children)})"

  def __repr__(self):
    return self.to_string()


def N(label, *children):
  return LabelNode(label, *children)


class ScriptedRng:
  """Stands in for numpy's Generator, replaying fixed integers/random values"""

  def __init__(self, integers=(), randoms=()):
    self._integers = list(integers)
    self._randoms = list(randoms)

  def integers(self, low, high=None):
    value = self._integers.pop(0)
    assert low <= value < high
    return value

  def random(self):
    return self._randoms.pop(0)


@pytest.fixture
def rng():
  return np.random.default_rng(42)
