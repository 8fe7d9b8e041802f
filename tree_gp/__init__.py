"""Tree GP Package

Typed expression trees, depth-controlled random generation and subtree
crossover for genetic programming.
"""

from .tree import (
  Tree, BoxTree, NodeSlot, exchange,
  get_all_nodes, count_nodes, calculate_tree_depth, leaf_depths, first_leaf
)
from .exceptions import TreeGPError, EmptyTreeError, InvalidDepthRangeError
from .generator import TreeGen, TreeGenMode
from .individual import Individual
from .genetic_ops import Crossover, CrossoverMode
from .config import TreeGenConfig, CrossoverConfig
from .logging_system import (
  LogLevel, TreeGPLogger, get_logger, set_log_level, configure_logging,
  log_debug
)

__version__ = "0.1.0"
__all__ = [
  "Tree", "BoxTree", "NodeSlot", "exchange",
  "get_all_nodes", "count_nodes", "calculate_tree_depth", "leaf_depths", "first_leaf",
  "TreeGPError", "EmptyTreeError", "InvalidDepthRangeError",
  "TreeGen", "TreeGenMode", "Individual",
  "Crossover", "CrossoverMode",
  "TreeGenConfig", "CrossoverConfig",
  "LogLevel", "TreeGPLogger", "get_logger", "set_log_level", "configure_logging",
  "log_debug"
]
