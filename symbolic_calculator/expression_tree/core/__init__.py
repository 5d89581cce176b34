"""Core expression tree components."""

from .node import Node, NumberNode, VariableNode, OperationNode
from .operators import (
    NodeType, OpType, BINARY_OP_MAP, UNARY_OP_MAP,
    FOLDING_OPS, GUARDED_OPS, UNARY_OPS,
    ARITHMETIC_ARITY, COMMAND_ARITY, is_command,
    evaluate_binary_op_fast, evaluate_unary_op_fast
)

__all__ = [
    'Node', 'NumberNode', 'VariableNode', 'OperationNode',
    'NodeType', 'OpType', 'BINARY_OP_MAP', 'UNARY_OP_MAP',
    'FOLDING_OPS', 'GUARDED_OPS', 'UNARY_OPS',
    'ARITHMETIC_ARITY', 'COMMAND_ARITY', 'is_command',
    'evaluate_binary_op_fast', 'evaluate_unary_op_fast'
]
