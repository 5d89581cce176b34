import numpy as np
from typing import Tuple
from ..core.node import Node, NumberNode, VariableNode, OperationNode
from ..core.operators import BINARY_OP_MAP, UNARY_OP_MAP, evaluate_binary_op_fast, evaluate_unary_op_fast
from ...errors import UndefinedVariable, UnknownOperation, CyclicBinding, NonFiniteResult


class ExpressionEvaluator:
  """Reduces an expression tree to a float under a variable store"""

  @staticmethod
  def to_double(node: Node, variables, resolving: Tuple[str, ...] = ()) -> float:
    """
    Evaluate ``node`` to a finite float.

    ``variables`` follows the VariableStore contract (lookup/contains).
    ``resolving`` is the chain of variable names currently being expanded;
    re-entering one of them raises CyclicBinding.
    """
    result = ExpressionEvaluator._evaluate(node, variables, resolving)
    if not np.isfinite(result):
      raise NonFiniteResult(f"Expression {node.to_string()} evaluated to {result}")
    return float(result)

  @staticmethod
  def _evaluate(node: Node, variables, resolving: Tuple[str, ...]) -> float:
    if isinstance(node, NumberNode):
      return node.value

    elif isinstance(node, VariableNode):
      return ExpressionEvaluator._resolve_variable(node.name, variables, resolving)

    elif isinstance(node, OperationNode):
      name = node.name
      children = node.children
      if name in BINARY_OP_MAP:
        left_val = ExpressionEvaluator._evaluate(children[0], variables, resolving)
        right_val = ExpressionEvaluator._evaluate(children[1], variables, resolving)
        return evaluate_binary_op_fast(float(left_val), float(right_val), BINARY_OP_MAP[name])
      elif name in UNARY_OP_MAP:
        operand_val = ExpressionEvaluator._evaluate(children[0], variables, resolving)
        return evaluate_unary_op_fast(float(operand_val), UNARY_OP_MAP[name])
      raise UnknownOperation(name)

    raise TypeError(f"Cannot evaluate {type(node).__name__}")

  @staticmethod
  def _resolve_variable(name: str, variables, resolving: Tuple[str, ...]) -> float:
    bound = variables.lookup(name)
    if bound is None:
      raise UndefinedVariable(name)
    if isinstance(bound, NumberNode):
      return bound.value
    if name in resolving:
      raise CyclicBinding(name, resolving)

    # Bound to a variable or a still-symbolic expression: simplify first, then evaluate
    from .simplifier import ExpressionSimplifier
    chain = resolving + (name,)
    simplified = ExpressionSimplifier.simplify(bound, variables, chain)
    return ExpressionEvaluator._evaluate(simplified, variables, chain)
