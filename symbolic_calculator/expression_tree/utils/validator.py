from ..core.node import Node, NumberNode, VariableNode, OperationNode
from ..core.operators import ARITHMETIC_ARITY
from ...errors import MalformedCommand, UnknownOperation


class ExpressionValidator:
  """Structural checks run before any evaluation starts"""

  @staticmethod
  def is_valid_expression(node: Node) -> bool:
    try:
      ExpressionValidator.validate(node)
      return True
    except (MalformedCommand, UnknownOperation):
      return False

  @staticmethod
  def validate(node: Node):
    """
    Raise if any operation in the tree has the wrong arity or is not an
    arithmetic operation. Commands are only legal at the top level, so a
    nested command counts as an unknown operation.
    """
    ExpressionValidator._validate_recursive(node)

  @staticmethod
  def _validate_recursive(node: Node):
    if isinstance(node, (NumberNode, VariableNode)):
      return

    elif isinstance(node, OperationNode):
      expected = ARITHMETIC_ARITY.get(node.name)
      if expected is None:
        raise UnknownOperation(node.name)
      ExpressionValidator.check_arity(node, expected)
      for child in node.children:
        ExpressionValidator._validate_recursive(child)
      return

    raise MalformedCommand(f"Not an expression node: {node!r}")

  @staticmethod
  def check_arity(node: OperationNode, expected: int):
    if len(node.children) != expected:
      raise MalformedCommand(
        f"Operation {node.name} expects {expected} argument(s), got {len(node.children)}")

