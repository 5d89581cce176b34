from typing import Tuple
from ..core.node import Node, NumberNode, VariableNode, OperationNode
from ..core.operators import FOLDING_OPS, GUARDED_OPS, UNARY_OPS
from ...errors import UnknownOperation, CyclicBinding


class ExpressionSimplifier:
  """
  Constant folding with a fixed per-operator policy:

  - ``+ - *`` fold whenever both simplified operands are numbers.
  - ``/ ^`` only recurse when an operand is itself an operation and never
    fold; a pair of leaves is returned untouched (bound variables included).
  - ``negate sin cos`` recurse into their operand and never fold.

  Input nodes are never modified; rebuilt operations get fresh child tuples.
  """

  @staticmethod
  def simplify(node: Node, variables, resolving: Tuple[str, ...] = ()) -> Node:
    if isinstance(node, NumberNode):
      return node

    elif isinstance(node, VariableNode):
      bound = variables.lookup(node.name)
      if bound is None:
        return node
      if node.name in resolving:
        raise CyclicBinding(node.name, resolving)
      return ExpressionSimplifier.simplify(bound, variables, resolving + (node.name,))

    elif isinstance(node, OperationNode):
      name = node.name
      if name in FOLDING_OPS:
        return ExpressionSimplifier._simplify_folding(node, variables, resolving)
      elif name in GUARDED_OPS:
        return ExpressionSimplifier._simplify_guarded(node, variables, resolving)
      elif name in UNARY_OPS:
        operand = ExpressionSimplifier.simplify(node.children[0], variables, resolving)
        return node.with_children((operand,))
      raise UnknownOperation(name)

    raise TypeError(f"Cannot simplify {type(node).__name__}")

  @staticmethod
  def _simplify_folding(node: OperationNode, variables, resolving: Tuple[str, ...]) -> Node:
    left = ExpressionSimplifier.simplify(node.children[0], variables, resolving)
    right = ExpressionSimplifier.simplify(node.children[1], variables, resolving)

    if isinstance(left, NumberNode) and isinstance(right, NumberNode):
      from .evaluator import ExpressionEvaluator
      folded = node.with_children((left, right))
      return NumberNode(ExpressionEvaluator.to_double(folded, variables, resolving))

    return node.with_children((left, right))

  @staticmethod
  def _simplify_guarded(node: OperationNode, variables, resolving: Tuple[str, ...]) -> Node:
    if not any(isinstance(child, OperationNode) for child in node.children):
      return node

    left = ExpressionSimplifier.simplify(node.children[0], variables, resolving)
    right = ExpressionSimplifier.simplify(node.children[1], variables, resolving)
    return node.with_children((left, right))
