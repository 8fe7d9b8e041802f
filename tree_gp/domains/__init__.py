"""Concrete node vocabularies built on the Tree capability set."""

from .arithmetic import (
    ArithmeticConfig, ArithmeticNode,
    VariableNode, ConstantNode, UnaryOpNode, BinaryOpNode,
    BINARY_OP_MAP, UNARY_OP_MAP
)

__all__ = [
    'ArithmeticConfig', 'ArithmeticNode',
    'VariableNode', 'ConstantNode', 'UnaryOpNode', 'BinaryOpNode',
    'BINARY_OP_MAP', 'UNARY_OP_MAP'
]
