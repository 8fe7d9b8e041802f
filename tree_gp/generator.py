from enum import Enum
from typing import Optional, Union

import numpy as np

from .exceptions import InvalidDepthRangeError
from .logging_system import log_debug

RandomSource = Union[np.random.Generator, int, None]


class TreeGenMode(Enum):
  """Depth logic used by a TreeGen"""
  PERFECT = 'perfect'
  FULL = 'full'
  FULL_RANGED = 'full_ranged'


def _validate_depths(min_depth: int, max_depth: int):
  if min_depth < 0 or max_depth < 0:
    raise InvalidDepthRangeError(f"Depths must be non-negative, got [{min_depth}, {max_depth}]")
  if min_depth > max_depth:
    raise InvalidDepthRangeError(f"min_depth {min_depth} is greater than max_depth {max_depth}")


class TreeGen:
  """Depth-shape policy plus random source used while constructing trees.

  Node ``construct`` implementations call :meth:`have_reached_a_leaf` at every
  level and use the TreeGen itself for their own random choices: any
  attribute not defined here is forwarded to the wrapped
  ``numpy.random.Generator`` (``tg.integers``, ``tg.random``, ``tg.choice``...).

  Build instances through :meth:`perfect`, :meth:`full`, :meth:`full_ranged`
  or :meth:`half_and_half`.
  """

  __slots__ = ('_mode', '_rng', '_min_depth', '_max_depth', '_chosen_depth')

  def __init__(self, mode: TreeGenMode, rng: RandomSource, min_depth: int, max_depth: int,
               chosen_depth: Optional[int] = None):
    _validate_depths(min_depth, max_depth)
    if mode != TreeGenMode.FULL and chosen_depth is None:
      raise ValueError(f"{mode.value} mode needs a chosen depth")
    if chosen_depth is not None and not min_depth <= chosen_depth <= max_depth:
      raise InvalidDepthRangeError(
        f"chosen_depth {chosen_depth} outside [{min_depth}, {max_depth}]")
    self._mode = mode
    self._rng = np.random.default_rng(rng)
    self._min_depth = min_depth
    self._max_depth = max_depth
    self._chosen_depth = chosen_depth

  @staticmethod
  def _draw_depth(rng: np.random.Generator, min_depth: int, max_depth: int) -> int:
    return int(rng.integers(min_depth, max_depth + 1))

  @classmethod
  def perfect(cls, rng: RandomSource, min_depth: int, max_depth: int) -> 'TreeGen':
    """Generate perfect trees: every leaf at one depth drawn from [min_depth, max_depth].

    Equivalent of DEAP's ``genFull``.
    """
    _validate_depths(min_depth, max_depth)
    rng = np.random.default_rng(rng)
    chosen_depth = cls._draw_depth(rng, min_depth, max_depth)
    log_debug(f"TreeGen.perfect chose depth {chosen_depth}")
    return cls(TreeGenMode.PERFECT, rng, min_depth, max_depth, chosen_depth)

  @classmethod
  def full(cls, rng: RandomSource, min_depth: int, max_depth: int) -> 'TreeGen':
    """Generate trees with leaves spread between min_depth and max_depth.

    Past ``min_depth`` every node becomes a leaf with probability
    ``1 / (max_depth - min_depth)``; ``max_depth`` always ends a branch.
    Not the same as DEAP's ``genFull``, see :meth:`perfect`.
    """
    tg = cls(TreeGenMode.FULL, rng, min_depth, max_depth)
    tg._log_degenerate_interval(max_depth)
    return tg

  @classmethod
  def full_ranged(cls, rng: RandomSource, min_depth: int, max_depth: int) -> 'TreeGen':
    """Like :meth:`full`, with the cap drawn once from [min_depth, max_depth].

    Equivalent of DEAP's ``genGrow``.
    """
    _validate_depths(min_depth, max_depth)
    rng = np.random.default_rng(rng)
    chosen_depth = cls._draw_depth(rng, min_depth, max_depth)
    log_debug(f"TreeGen.full_ranged chose depth {chosen_depth}")
    tg = cls(TreeGenMode.FULL_RANGED, rng, min_depth, max_depth, chosen_depth)
    tg._log_degenerate_interval(chosen_depth)
    return tg

  @classmethod
  def half_and_half(cls, rng: RandomSource, min_depth: int, max_depth: int) -> 'TreeGen':
    """Pick :meth:`perfect` or :meth:`full_ranged` with equal probability.

    Equivalent of DEAP's ``genHalfAndHalf``. The choice is made once, here.
    """
    _validate_depths(min_depth, max_depth)
    rng = np.random.default_rng(rng)
    if rng.random() < 0.5:
      return cls.perfect(rng, min_depth, max_depth)
    return cls.full_ranged(rng, min_depth, max_depth)

  @property
  def mode(self) -> TreeGenMode:
    return self._mode

  @property
  def rng(self) -> np.random.Generator:
    return self._rng

  @property
  def min_depth(self) -> int:
    return self._min_depth

  @property
  def max_depth(self) -> int:
    return self._max_depth

  @property
  def chosen_depth(self) -> Optional[int]:
    return self._chosen_depth

  def gen_bool(self, probability: float) -> bool:
    return bool(self._rng.random() < probability)

  def _log_degenerate_interval(self, cap: int):
    if cap == self._min_depth:
      log_debug(f"TreeGen {self._mode.value}: depth interval collapsed at {cap}, "
                f"every node from depth {cap} on is a leaf")

  def _leaf_probability(self, cap: int) -> float:
    depth_interval = cap - self._min_depth
    if depth_interval == 0:
      # Degenerate range: any node at or past min_depth ends the branch
      return 1.0
    return 1.0 / depth_interval

  def have_reached_a_leaf(self, current_depth: int) -> bool:
    """Whether the node being built at ``current_depth`` must be a terminal"""
    if self._mode == TreeGenMode.PERFECT:
      return current_depth == self._chosen_depth

    cap = self._max_depth if self._mode == TreeGenMode.FULL else self._chosen_depth
    if current_depth == cap:
      return True
    return current_depth >= self._min_depth and self.gen_bool(self._leaf_probability(cap))

  def __getattr__(self, name: str):
    # Only reached for names missing on TreeGen: forward to the random source
    if name.startswith('_'):
      raise AttributeError(name)
    return getattr(self._rng, name)

  def __repr__(self) -> str:
    return (f"TreeGen(mode={self._mode.value}, min_depth={self._min_depth}, "
            f"max_depth={self._max_depth}, chosen_depth={self._chosen_depth})")
