import sympy as sp
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from ..generator import TreeGen
from ..tree import Tree

BINARY_OP_MAP: Dict[str, Any] = {
  '+': lambda a, b: sp.Add(a, b),
  '-': lambda a, b: sp.Add(a, sp.Mul(-1, b)),
  '*': lambda a, b: sp.Mul(a, b),
  '/': lambda a, b: sp.Mul(a, sp.Pow(b, -1)),
  '^': lambda a, b: sp.Pow(a, b),
}

UNARY_OP_MAP: Dict[str, Any] = {
  'sin': sp.sin,
  'cos': sp.cos,
  'exp': sp.exp,
  'log': sp.log,
  'sqrt': sp.sqrt,
  'abs': sp.Abs,
  'neg': lambda a: -a,
  'square': lambda a: a**2,
}


@dataclass
class ArithmeticConfig:
  """Primitive set and sampling weights for arithmetic expression trees"""
  n_inputs: int = 1
  binary_ops: List[str] = field(default_factory=lambda: ['+', '-', '*', '/'])
  unary_ops: List[str] = field(default_factory=lambda: ['sin', 'cos', 'neg'])
  constant_range: Tuple[float, float] = (-5.0, 5.0)
  variable_prob: float = 0.65  # Favor variables over constants
  unary_prob: float = 0.2

  def __post_init__(self):
    if self.n_inputs < 1:
      raise ValueError("n_inputs must be greater than 0")
    if not self.binary_ops and not self.unary_ops:
      raise ValueError("At least one binary or unary operator is required")
    for op in self.binary_ops:
      if op not in BINARY_OP_MAP:
        raise ValueError(f"Unknown binary operator: {op}")
    for op in self.unary_ops:
      if op not in UNARY_OP_MAP:
        raise ValueError(f"Unknown unary operator: {op}")


class ArithmeticNode(Tree):
  """Base node of the arithmetic vocabulary; owns its children in a list"""

  __slots__ = ('_children',)

  def __init__(self, children: Sequence[Tree] = ()):
    self._children = list(children)

  def children(self) -> List[Tree]:
    return self._children

  def set_child(self, index: int, node: Tree):
    self._children[index] = node

  @classmethod
  def construct(cls, tg: TreeGen, config: ArithmeticConfig, depth: int) -> 'ArithmeticNode':
    if tg.have_reached_a_leaf(depth):
      if tg.random() < config.variable_prob:
        return VariableNode(int(tg.integers(0, config.n_inputs)))
      low, high = config.constant_range
      return ConstantNode(float(tg.uniform(low, high)))

    use_unary = bool(config.unary_ops) and (not config.binary_ops or tg.random() < config.unary_prob)
    if use_unary:
      op = config.unary_ops[int(tg.integers(0, len(config.unary_ops)))]
      return UnaryOpNode(op, cls.construct(tg, config, depth + 1))

    op = config.binary_ops[int(tg.integers(0, len(config.binary_ops)))]
    left = cls.construct(tg, config, depth + 1)
    right = cls.construct(tg, config, depth + 1)
    return BinaryOpNode(op, left, right)

  def to_sympy(self) -> sp.Expr:
    raise NotImplementedError


class VariableNode(ArithmeticNode):
  __slots__ = ('index',)

  def __init__(self, index: int):
    super().__init__()
    self.index = index

  def payload(self) -> Tuple:
    return (self.index,)

  def to_string(self) -> str:
    return f"X{self.index}"

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(f'x{self.index}')

  def __repr__(self) -> str:
    return f"VariableNode({self.index})"


class ConstantNode(ArithmeticNode):
  __slots__ = ('value',)

  def __init__(self, value: float):
    super().__init__()
    self.value = float(value)

  def payload(self) -> Tuple:
    return (self.value,)

  def to_string(self) -> str:
    return f"{self.value:.3f}"

  def to_sympy(self) -> sp.Expr:
    return sp.Float(self.value)

  def __repr__(self) -> str:
    return f"ConstantNode({self.value})"


class UnaryOpNode(ArithmeticNode):
  __slots__ = ('operator',)

  def __init__(self, operator: str, operand: Tree):
    super().__init__([operand])
    self.operator = operator

  @property
  def operand(self) -> Tree:
    return self._children[0]

  def payload(self) -> Tuple:
    return (self.operator,)

  def to_string(self) -> str:
    return f"{self.operator}({self.operand.to_string()})"

  def to_sympy(self) -> sp.Expr:
    if self.operator not in UNARY_OP_MAP:
      raise RuntimeWarning(f"to_sympy reached unexpected unary operation: {self.operator}")
    return UNARY_OP_MAP[self.operator](self.operand.to_sympy())

  def __repr__(self) -> str:
    return f"UnaryOpNode({self.operator!r}, {self.operand!r})"


class BinaryOpNode(ArithmeticNode):
  __slots__ = ('operator',)

  def __init__(self, operator: str, left: Tree, right: Tree):
    super().__init__([left, right])
    self.operator = operator

  @property
  def left(self) -> Tree:
    return self._children[0]

  @property
  def right(self) -> Tree:
    return self._children[1]

  def payload(self) -> Tuple:
    return (self.operator,)

  def to_string(self) -> str:
    return f"({self.left.to_string()} {self.operator} {self.right.to_string()})"

  def to_sympy(self) -> sp.Expr:
    if self.operator not in BINARY_OP_MAP:
      raise RuntimeWarning(f"to_sympy reached unexpected operation: {self.operator}")
    return BINARY_OP_MAP[self.operator](self.left.to_sympy(), self.right.to_sympy())

  def __repr__(self) -> str:
    return f"BinaryOpNode({self.operator!r}, {self.left!r}, {self.right!r})"
