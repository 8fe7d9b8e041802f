"""Error types raised by the GP tree core."""


class TreeGPError(Exception):
  """Base class for tree_gp errors"""


class EmptyTreeError(TreeGPError, ValueError):
  """Raised when an index has to be drawn from a tree without nodes"""


class InvalidDepthRangeError(TreeGPError, ValueError):
  """Raised for negative depths or a min_depth greater than max_depth"""
