import sympy as sp
from ..core.node import Node


class SymPyRenderer:
  """Converts expression trees to SymPy for display and export"""

  @staticmethod
  def to_sympy(node: Node) -> sp.Expr:
    """Structure-preserving conversion (no automatic SymPy evaluation)"""
    return node.to_sympy()

  @staticmethod
  def latex_representation(node: Node) -> str:
    """Get LaTeX representation of the expression"""
    return sp.latex(node.to_sympy())

  @staticmethod
  def pretty(node: Node) -> str:
    return sp.pretty(node.to_sympy())
