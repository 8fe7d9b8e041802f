"""
Configuration objects for tree generation and crossover.

Plain dataclasses that validate on construction and build the runtime
operator, so experiment settings can live in dicts (JSON/YAML) and be turned
into a TreeGen or Crossover in one call.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

import numpy as np

from .exceptions import InvalidDepthRangeError
from .generator import TreeGen
from .genetic_ops import Crossover

TREEGEN_METHODS = ('perfect', 'full', 'full_ranged', 'half_and_half')
CROSSOVER_METHODS = ('one_point', 'one_point_leaf_biased', 'hard_prune')


@dataclass
class TreeGenConfig:
    method: str = 'half_and_half'
    min_depth: int = 1
    max_depth: int = 4
    seed: Optional[int] = None   # used when build() gets no generator

    def __post_init__(self):
        if self.method not in TREEGEN_METHODS:
            raise ValueError(f"Unknown tree generation method '{self.method}'. "
                             f"Choose from {', '.join(TREEGEN_METHODS)}.")
        if self.min_depth < 0 or self.min_depth > self.max_depth:
            raise InvalidDepthRangeError(
                f"Invalid depth range [{self.min_depth}, {self.max_depth}]")

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> TreeGenConfig:
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def build(self, rng: Optional[np.random.Generator] = None) -> TreeGen:
        """Create the TreeGen, drawing from ``rng`` or a generator seeded with ``seed``"""
        if rng is None:
            rng = np.random.default_rng(self.seed)
        factory = getattr(TreeGen, self.method)
        return factory(rng, self.min_depth, self.max_depth)


@dataclass
class CrossoverConfig:
    method: str = 'one_point'
    bias: float = 0.1
    max_depth: int = 8

    def __post_init__(self):
        if self.method not in CROSSOVER_METHODS:
            raise ValueError(f"Unknown crossover method '{self.method}'. "
                             f"Choose from {', '.join(CROSSOVER_METHODS)}.")
        if not 0.0 <= self.bias <= 1.0:
            raise ValueError(f"bias must be within [0, 1], got {self.bias}")
        if self.max_depth < 0:
            raise InvalidDepthRangeError(f"max_depth must be non-negative, got {self.max_depth}")

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> CrossoverConfig:
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def build(self) -> Crossover:
        if self.method == 'one_point_leaf_biased':
            return Crossover.one_point_leaf_biased(self.bias)
        if self.method == 'hard_prune':
            return Crossover.hard_prune(self.max_depth)
        return Crossover.one_point()
