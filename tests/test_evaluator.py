import math

import pytest

from symbolic_calculator import (
  NumberNode, VariableNode, OperationNode, VariableStore, ExpressionEvaluator,
  UndefinedVariable, UnknownOperation, CyclicBinding, NonFiniteResult
)


def op(name, *children):
  return OperationNode(name, children)


def num(value):
  return NumberNode(value)


def var(name):
  return VariableNode(name)


def to_double(node, variables=None):
  return ExpressionEvaluator.to_double(node, variables if variables is not None else VariableStore())


def test_arithmetic_operations():
  assert to_double(op('+', num(3), num(4))) == 7.0
  assert to_double(op('-', num(3), num(4))) == -1.0
  assert to_double(op('*', num(3), num(4))) == 12.0
  assert to_double(op('/', num(3), num(4))) == 0.75
  assert to_double(op('^', num(2), num(3))) == 8.0
  assert to_double(op('negate', num(5))) == -5.0


def test_operand_order_matters():
  assert to_double(op('-', num(10), op('-', num(4), num(1)))) == 7.0
  assert to_double(op('/', op('/', num(8), num(2)), num(2))) == 2.0
  assert to_double(op('^', num(3), num(2))) == 9.0


def test_trigonometry_uses_radians():
  assert to_double(op('sin', num(0))) == 0.0
  assert to_double(op('cos', num(0))) == 1.0
  assert to_double(op('sin', num(math.pi / 2))) == pytest.approx(1.0)


def test_undefined_variable():
  with pytest.raises(UndefinedVariable) as excinfo:
    to_double(var('x'))
  assert excinfo.value.name == 'x'


def test_unknown_operation():
  with pytest.raises(UnknownOperation) as excinfo:
    to_double(op('tan', num(1)))
  assert excinfo.value.name == 'tan'


def test_variable_bound_to_number():
  variables = VariableStore()
  variables.bind('x', num(2.5))
  assert to_double(op('*', var('x'), num(2)), variables) == 5.0


def test_variable_indirection_resolves_transitively():
  variables = VariableStore()
  variables.bind('a', var('b'))
  variables.bind('b', op('+', var('c'), num(1)))
  variables.bind('c', num(4))
  assert to_double(var('a'), variables) == 5.0


def test_variable_bound_to_guarded_expression():
  # simplify leaves 'x / 2' untouched, evaluation still resolves x
  variables = VariableStore()
  variables.bind('x', num(6))
  variables.bind('half', op('/', var('x'), num(2)))
  assert to_double(var('half'), variables) == 3.0


def test_self_referencing_binding_is_cyclic():
  variables = VariableStore()
  variables.bind('a', op('+', var('a'), num(1)))
  with pytest.raises(CyclicBinding) as excinfo:
    to_double(var('a'), variables)
  assert excinfo.value.name == 'a'


def test_mutual_binding_through_division_is_cyclic():
  variables = VariableStore()
  variables.bind('a', op('/', var('b'), num(2)))
  variables.bind('b', op('/', var('a'), num(2)))
  with pytest.raises(CyclicBinding) as excinfo:
    to_double(var('a'), variables)
  assert excinfo.value.chain == ('a', 'b', 'a')


def test_reusing_a_variable_is_not_a_cycle():
  variables = VariableStore()
  variables.bind('y', op('+', num(1), num(1)))
  variables.bind('z', op('*', var('y'), var('y')))
  assert to_double(op('+', var('z'), var('y')), variables) == 6.0


def test_non_finite_results_fail():
  with pytest.raises(NonFiniteResult):
    to_double(op('/', num(1), num(0)))
  with pytest.raises(NonFiniteResult):
    to_double(op('^', num(-8), num(0.5)))


def test_evaluation_does_not_touch_environment():
  variables = VariableStore()
  variables.bind('a', op('+', num(1), num(2)))
  to_double(var('a'), variables)
  assert variables.lookup('a') == op('+', num(1), num(2))
  assert variables.names() == ['a']
