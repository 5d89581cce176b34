import pytest

from symbolic_calculator import (
  NumberNode, VariableNode, OperationNode, VariableStore, ExpressionSimplifier,
  UnknownOperation, CyclicBinding
)
from symbolic_calculator.expression_tree.utils import is_fully_folded


def op(name, *children):
  return OperationNode(name, children)


def num(value):
  return NumberNode(value)


def var(name):
  return VariableNode(name)


def simplify(node, variables=None):
  return ExpressionSimplifier.simplify(node, variables if variables is not None else VariableStore())


def test_numbers_and_unbound_variables_unchanged():
  assert simplify(num(3)) == num(3)
  assert simplify(var('y')) == var('y')


def test_additive_folding():
  assert simplify(op('+', num(3), num(4))) == num(7)
  assert simplify(op('-', num(3), num(4))) == num(-1)
  assert simplify(op('*', num(3), num(4))) == num(12)


def test_partial_folding_keeps_symbols():
  result = simplify(op('*', op('+', num(1), num(2)), var('y')))
  assert result == op('*', num(3), var('y'))


def test_nested_folding():
  expr = op('+', op('*', num(2), num(3)), op('-', num(10), num(4)))
  assert simplify(expr) == num(12)


def test_division_of_leaves_is_not_folded():
  expr = op('/', num(6), num(2))
  assert simplify(expr) == op('/', num(6), num(2))
  assert simplify(op('^', num(2), num(3))) == op('^', num(2), num(3))


def test_division_leaves_bound_variables_alone():
  variables = VariableStore()
  variables.bind('x', num(4))
  expr = op('/', var('x'), num(2))
  assert simplify(expr, variables) == op('/', var('x'), num(2))


def test_division_with_nested_operation_recurses_without_folding():
  variables = VariableStore()
  variables.bind('x', num(4))
  expr = op('/', op('+', num(1), num(2)), var('x'))
  assert simplify(expr, variables) == op('/', num(3), num(4))
  assert simplify(op('^', var('y'), op('*', num(2), num(2)))) == op('^', var('y'), num(4))


def test_unary_operations_never_fold():
  assert simplify(op('sin', num(0))) == op('sin', num(0))
  assert simplify(op('negate', op('+', num(1), num(2)))) == op('negate', num(3))
  assert simplify(op('cos', op('*', var('y'), num(1)))) == op('cos', op('*', var('y'), num(1)))


def test_bound_variable_is_inlined():
  variables = VariableStore()
  variables.bind('c', num(4))
  assert simplify(op('+', var('c'), num(1)), variables) == num(5)


def test_symbolic_binding_is_inlined():
  variables = VariableStore()
  variables.bind('f', op('*', num(2), var('t')))
  assert simplify(op('+', var('f'), num(1)), variables) == op('+', op('*', num(2), var('t')), num(1))


def test_input_tree_is_not_modified():
  inner = op('+', num(1), num(2))
  expr = op('*', inner, var('y'))
  simplify(expr)
  assert expr == op('*', op('+', num(1), num(2)), var('y'))
  assert expr.children[0] is inner


def test_unknown_operation():
  with pytest.raises(UnknownOperation):
    simplify(op('sqrt', num(4)))


def test_cyclic_binding():
  variables = VariableStore()
  variables.bind('a', var('b'))
  variables.bind('b', op('*', var('a'), num(2)))
  with pytest.raises(CyclicBinding):
    simplify(var('a'), variables)


@pytest.mark.parametrize("expr", [
  op('+', num(3), num(4)),
  op('*', op('+', num(1), num(2)), op('-', num(5), var('c'))),
  op('-', var('c'), op('*', var('c'), var('c'))),
])
def test_simplify_is_idempotent_when_fully_folded(expr):
  variables = VariableStore()
  variables.bind('c', num(4))
  once = simplify(expr, variables)
  assert is_fully_folded(once)
  assert simplify(once, variables) == once
