import dataclasses

import numpy as np
import pytest

from tree_gp import BoxTree, Crossover, CrossoverMode, EmptyTreeError, Individual, TreeGen
from tree_gp import InvalidDepthRangeError
from tree_gp.domains import ArithmeticNode, ArithmeticConfig
from conftest import N, ScriptedRng


def random_individual(seed, min_depth=1, max_depth=5):
  tg = TreeGen.half_and_half(np.random.default_rng(seed), min_depth, max_depth)
  return Individual.new(ArithmeticNode, tg, ArithmeticConfig(n_inputs=2))


def test_one_point_swaps_selected_subtrees():
  indv1 = Individual(N('A', N('B'), N('C')))
  indv2 = Individual(N('X'))

  Crossover.one_point().mate(indv1, indv2, ScriptedRng(integers=[1, 0]))

  assert indv1.tree == BoxTree(N('A', N('X'), N('C')))
  assert indv2.tree == BoxTree(N('B'))
  assert indv1.nodes_count() == 3
  assert indv2.nodes_count() == 1


def test_one_point_can_swap_whole_trees():
  indv1 = Individual(N('A', N('B'), N('C')))
  indv2 = Individual(N('X', N('Y')))

  Crossover.one_point().mate(indv1, indv2, ScriptedRng(integers=[0, 0]))

  assert indv1.tree == BoxTree(N('X', N('Y')))
  assert indv2.tree == BoxTree(N('A', N('B'), N('C')))


def test_one_point_preserves_total_node_count():
  rng = np.random.default_rng(5)
  crossover = Crossover.one_point()
  for seed in range(25):
    indv1, indv2 = random_individual(seed), random_individual(seed + 100)
    total = indv1.nodes_count() + indv2.nodes_count()
    crossover.mate(indv1, indv2, rng)
    assert indv1.nodes_count() + indv2.nodes_count() == total
    assert indv1.nodes_count() == indv1.tree.count_nodes()
    assert indv2.nodes_count() == indv2.tree.count_nodes()


def test_hard_prune_only_prunes_first_individual():
  for seed in range(25):
    a1, a2 = random_individual(seed, 3, 6), random_individual(seed + 50, 3, 6)
    b1, b2 = a1.copy(), a2.copy()

    Crossover.one_point().mate(a1, a2, np.random.default_rng(seed))
    Crossover.hard_prune(2).mate(b1, b2, np.random.default_rng(seed))

    assert b2 == a2
    assert b1.depth() <= 2
    assert b1.nodes_count() == b1.tree.count_nodes()


def test_leaf_biased_picks_matching_leaf():
  # P(Q(R, S), T): soft target 3 drops to 1 after P and Q, so S is picked
  indv1 = Individual(N('A', N('B'), N('C')))
  indv2 = Individual(N('P', N('Q', N('R'), N('S')), N('T')))

  Crossover.one_point_leaf_biased(0.5).mate(
    indv1, indv2, ScriptedRng(integers=[0, 3], randoms=[0.1]))

  assert indv1.tree == BoxTree(N('S'))
  assert indv2.tree == BoxTree(N('P', N('Q', N('R'), N('A', N('B'), N('C'))), N('T')))
  assert indv1.nodes_count() == 1
  assert indv2.nodes_count() == 7


def test_leaf_biased_picks_matching_internal_node():
  indv1 = Individual(N('A', N('B'), N('C')))
  indv2 = Individual(N('P', N('Q', N('R'), N('S')), N('T')))

  Crossover.one_point_leaf_biased(0.5).mate(
    indv1, indv2, ScriptedRng(integers=[2, 1], randoms=[0.9]))

  assert indv1.tree == BoxTree(N('A', N('B'), N('Q', N('R'), N('S'))))
  assert indv2.tree == BoxTree(N('P', N('C'), N('T')))
  assert indv1.nodes_count() == 5
  assert indv2.nodes_count() == 3


def test_leaf_biased_without_match_leaves_trees_alone():
  # Soft target 1 is lowered below zero by P and Q, so no leaf ever matches
  indv1 = Individual(N('A', N('B'), N('C')))
  indv2 = Individual(N('P', N('Q', N('R'), N('S')), N('T')))

  Crossover.one_point_leaf_biased(0.5).mate(
    indv1, indv2, ScriptedRng(integers=[0, 1], randoms=[0.1]))

  assert indv1.tree == BoxTree(N('A', N('B'), N('C')))
  assert indv2.tree == BoxTree(N('P', N('Q', N('R'), N('S')), N('T')))


def test_leaf_biased_keeps_metadata_accurate():
  rng = np.random.default_rng(9)
  crossover = Crossover.one_point_leaf_biased(0.9)
  for seed in range(25):
    indv1, indv2 = random_individual(seed), random_individual(seed + 200)
    total = indv1.nodes_count() + indv2.nodes_count()
    crossover.mate(indv1, indv2, rng)
    assert indv1.nodes_count() == indv1.tree.count_nodes()
    assert indv2.nodes_count() == indv2.tree.count_nodes()
    assert indv1.nodes_count() + indv2.nodes_count() == total


def test_mate_accepts_integer_seed():
  a1, a2 = random_individual(1), random_individual(2)
  b1, b2 = a1.copy(), a2.copy()
  Crossover.one_point().mate(a1, a2, 123)
  Crossover.one_point().mate(b1, b2, np.random.default_rng(123))
  assert a1 == b1 and a2 == b2


def test_empty_tree_is_reported():
  indv1 = Individual(N('A'))
  indv2 = Individual(N('B'))
  indv1._nodes_count = 0
  with pytest.raises(EmptyTreeError):
    Crossover.one_point().mate(indv1, indv2, np.random.default_rng(0))


def test_mating_with_itself_is_rejected():
  indv = Individual(N('A'))
  with pytest.raises(ValueError):
    Crossover.one_point().mate(indv, indv, np.random.default_rng(0))


def test_configuration_values():
  assert Crossover.one_point() == Crossover.one_point()
  assert Crossover.one_point_leaf_biased(0.3).bias == 0.3
  assert Crossover.hard_prune(4).mode == CrossoverMode.HARD_PRUNE
  with pytest.raises(ValueError):
    Crossover.one_point_leaf_biased(1.5)
  with pytest.raises(InvalidDepthRangeError):
    Crossover.hard_prune(-1)
  with pytest.raises(dataclasses.FrozenInstanceError):
    Crossover.one_point().mode = CrossoverMode.HARD_PRUNE


def chain(length):
  node = N('X')
  for i in range(length - 1):
    node = N(f"n{i}", node)
  return node


def test_one_point_handles_trees_deeper_than_recursion_limit():
  indv1 = Individual(chain(1501))
  indv2 = Individual(N('X'))
  Crossover.one_point().mate(indv1, indv2, ScriptedRng(integers=[750, 0]))
  assert indv1.nodes_count() == indv1.tree.count_nodes() == 751
  assert indv2.nodes_count() == indv2.tree.count_nodes() == 751
  assert indv2.depth() == 750
  assert indv2.tree.root.label == 'n749'


def test_hard_prune_on_very_deep_tree():
  indv1 = Individual(chain(1501))
  indv2 = Individual(N('Y'))
  Crossover.hard_prune(5).mate(indv1, indv2, ScriptedRng(integers=[1500, 0]))
  assert indv1.depth() == 5
  assert indv1.nodes_count() == 6
  assert indv2.nodes_count() == 1


def test_direct_construction_is_validated():
  with pytest.raises(ValueError):
    Crossover(CrossoverMode.ONE_POINT_LEAF_BIASED)
  with pytest.raises(ValueError):
    Crossover(CrossoverMode.ONE_POINT_LEAF_BIASED, bias=-0.1)
  with pytest.raises(InvalidDepthRangeError):
    Crossover(CrossoverMode.HARD_PRUNE)
  with pytest.raises(InvalidDepthRangeError):
    Crossover(CrossoverMode.HARD_PRUNE, max_depth=-2)
  assert Crossover(CrossoverMode.HARD_PRUNE, max_depth=3) == Crossover.hard_prune(3)
