import sympy as sp
from typing import Optional, Set
from .core.node import Node
from .utils.evaluator import ExpressionEvaluator
from .utils.simplifier import ExpressionSimplifier
from .utils.sympy_utils import SymPyRenderer
from .utils.tree_utils import calculate_tree_depth, get_variables


class Expression:
  """Expression wrapper with cached string form"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    if not isinstance(root, Node):
      raise TypeError(f"Expression root must be a Node, got {type(root).__name__}")
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self, variables) -> float:
    return ExpressionEvaluator.to_double(self.root, variables)

  def simplify(self, variables) -> 'Expression':
    return Expression(ExpressionSimplifier.simplify(self.root, variables))

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def depth(self) -> int:
    return calculate_tree_depth(self.root)

  def variables(self) -> Set[str]:
    """Names of all variables referenced by the expression"""
    return get_variables(self.root)

  def to_sympy(self) -> sp.Expr:
    return SymPyRenderer.to_sympy(self.root)

  def latex(self) -> str:
    return SymPyRenderer.latex_representation(self.root)

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.to_string()})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return False
    return self.root == other.root
