"""Expression Tree Module

Core expression tree functionality: nodes, evaluation and constant folding.
"""

from .expression import Expression
from .core.node import (
    Node,
    NumberNode,
    VariableNode,
    OperationNode
)
from .core.operators import (
    NodeType,
    OpType,
    BINARY_OP_MAP,
    UNARY_OP_MAP,
    ARITHMETIC_ARITY,
    COMMAND_ARITY,
    evaluate_binary_op_fast,
    evaluate_unary_op_fast
)
from .utils import (
    ExpressionEvaluator, ExpressionSimplifier, ExpressionValidator, SymPyRenderer
)

__all__ = [
    "Expression",
    "Node", "NumberNode", "VariableNode", "OperationNode",
    "NodeType", "OpType",
    "BINARY_OP_MAP", "UNARY_OP_MAP",
    "ARITHMETIC_ARITY", "COMMAND_ARITY",
    "evaluate_binary_op_fast", "evaluate_unary_op_fast",
    "ExpressionEvaluator", "ExpressionSimplifier", "ExpressionValidator", "SymPyRenderer"
]
