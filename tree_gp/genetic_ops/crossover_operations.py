"""
Crossover Operations Module

Subtree-exchange crossover for GP individuals: plain one-point, a variant
biased toward terminals or internal nodes, and one-point followed by a
depth cap on the first offspring.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np

from ..exceptions import EmptyTreeError, InvalidDepthRangeError
from ..individual import Individual
from ..logging_system import log_debug
from ..tree import NodeSlot, exchange


class CrossoverMode(Enum):
    """The crossover mode in use. See `Crossover`."""
    ONE_POINT = 'one_point'
    ONE_POINT_LEAF_BIASED = 'one_point_leaf_biased'
    HARD_PRUNE = 'hard_prune'


def _draw_index(indv: Individual, rng: np.random.Generator, label: str) -> int:
    count = indv.nodes_count()
    if count <= 0:
        raise EmptyTreeError(f"{label} has no nodes to pick a crossover point from")
    return int(rng.integers(0, count))


@dataclass(frozen=True)
class Crossover:
    """Configures crossover (mating) between GP individuals.

    Instances are immutable; build them with :meth:`one_point`,
    :meth:`one_point_leaf_biased` or :meth:`hard_prune` and call :meth:`mate`.
    All randomness comes from the generator passed to ``mate``.
    """

    mode: CrossoverMode
    bias: Optional[float] = None
    max_depth: Optional[int] = None

    def __post_init__(self):
        if self.mode == CrossoverMode.ONE_POINT_LEAF_BIASED:
            if self.bias is None or not 0.0 <= self.bias <= 1.0:
                raise ValueError(f"bias must be within [0, 1], got {self.bias}")
        elif self.mode == CrossoverMode.HARD_PRUNE:
            if self.max_depth is None or self.max_depth < 0:
                raise InvalidDepthRangeError(
                    f"max_depth must be non-negative, got {self.max_depth}")

    @classmethod
    def one_point(cls) -> 'Crossover':
        """Swap the subtree at a random position of one individual with a
        random position of the other."""
        return cls(CrossoverMode.ONE_POINT)

    @classmethod
    def one_point_leaf_biased(cls, bias: float) -> 'Crossover':
        """One-point crossover where the second swap point is a terminal with
        probability ``bias`` and an internal node otherwise."""
        return cls(CrossoverMode.ONE_POINT_LEAF_BIASED, bias=float(bias))

    @classmethod
    def hard_prune(cls, max_depth: int) -> 'Crossover':
        """One-point crossover, then the first offspring is pruned at
        ``max_depth``: deeper branches are replaced with their first leaf."""
        return cls(CrossoverMode.HARD_PRUNE, max_depth=int(max_depth))

    def mate(self, indv1: Individual, indv2: Individual, rng: Union[np.random.Generator, int, None]):
        """Crossover (mate) two individuals in place according to the configured mode.

        Both individuals must carry an up to date ``nodes_count``; their
        metadata is refreshed before returning.
        """
        if indv1 is indv2:
            raise ValueError("Cannot mate an individual with itself")
        if rng is None or isinstance(rng, (int, np.integer)):
            rng = np.random.default_rng(rng)

        if self.mode == CrossoverMode.ONE_POINT:
            self._mate_one_point(indv1, indv2, rng)
        elif self.mode == CrossoverMode.ONE_POINT_LEAF_BIASED:
            self._mate_one_point_leaf_biased(indv1, indv2, self.bias, rng)
        elif self.mode == CrossoverMode.HARD_PRUNE:
            self._mate_hard_prune(indv1, indv2, self.max_depth, rng)
        else:
            raise ValueError(f"Unknown crossover mode: {self.mode}")

    def _mate_one_point(self, indv1: Individual, indv2: Individual, rng: np.random.Generator):
        target_index1 = _draw_index(indv1, rng, "first individual")
        target_index2 = _draw_index(indv2, rng, "second individual")
        log_debug(f"one-point crossover at {target_index1} <-> {target_index2}")

        def _find_second(slot1: NodeSlot, index1: int, _depth: int) -> bool:
            if index1 != target_index1:
                return True

            def _swap(slot2: NodeSlot, index2: int, _depth2: int) -> bool:
                if index2 != target_index2:
                    return True
                exchange(slot1, slot2)
                return False

            indv2.tree.map_while(_swap)
            return False

        indv1.tree.map_while(_find_second)

        indv1.recalculate_metadata()
        indv2.recalculate_metadata()

    def _mate_one_point_leaf_biased(self, indv1: Individual, indv2: Individual, bias: float,
                                    rng: np.random.Generator):
        leaf = bool(rng.random() < bias)

        target_index1 = _draw_index(indv1, rng, "first individual")
        # Soft target: lowered by every node of the wrong kind seen before the match
        target_index2 = _draw_index(indv2, rng, "second individual")
        node_counter = 0
        swapped = False

        def _find_second(slot1: NodeSlot, index1: int, _depth: int) -> bool:
            if index1 != target_index1:
                return True

            def _swap(slot2: NodeSlot, _index2: int, _depth2: int) -> bool:
                nonlocal target_index2, node_counter, swapped
                if slot2.node.is_leaf() != leaf:
                    target_index2 -= 1
                    return True
                if node_counter == target_index2:
                    exchange(slot1, slot2)
                    swapped = True
                    return False
                node_counter += 1
                return True

            indv2.tree.map_while(_swap)
            return False

        indv1.tree.map_while(_find_second)
        log_debug(f"leaf-biased crossover (leaf={leaf}) at {target_index1}, "
                  f"swapped={swapped}")

        indv1.recalculate_metadata()
        indv2.recalculate_metadata()

    def _mate_hard_prune(self, indv1: Individual, indv2: Individual, max_depth: int,
                         rng: np.random.Generator):
        self._mate_one_point(indv1, indv2, rng)
        indv1.prune_at(max_depth)
