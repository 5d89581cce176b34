import pytest

from symbolic_calculator import (
  NumberNode, VariableNode, OperationNode, VariableStore, Environment, EngineConfig,
  MatplotlibImageDrawer, MalformedCommand
)


def test_bind_lookup_unbind():
  variables = VariableStore()
  assert variables.lookup('x') is None
  variables.bind('x', NumberNode(2))
  assert variables.contains('x')
  assert 'x' in variables
  assert variables.lookup('x') == NumberNode(2)
  variables.unbind('x')
  assert not variables.contains('x')
  variables.unbind('x')
  assert len(variables) == 0


def test_bind_rejects_bad_input():
  variables = VariableStore()
  with pytest.raises(ValueError):
    variables.bind('', NumberNode(1))
  with pytest.raises(TypeError):
    variables.bind('x', 1.0)
  with pytest.raises(MalformedCommand):
    variables.bind('x', OperationNode('negate', [NumberNode(1), NumberNode(2)]))


def test_scoped_binding_released_on_error():
  variables = VariableStore()
  with pytest.raises(RuntimeError):
    with variables.scoped('i'):
      variables.bind('i', NumberNode(1))
      raise RuntimeError("boom")
  assert not variables.contains('i')


def test_scoped_binding_leaves_other_names():
  variables = VariableStore()
  variables.bind('keep', VariableNode('z'))
  with variables.scoped('i'):
    variables.bind('i', NumberNode(1))
  assert variables.names() == ['keep']


def test_environment_defaults_to_matplotlib_drawer():
  config = EngineConfig()
  env = Environment(config=config)
  assert isinstance(env.get_image_drawer(), MatplotlibImageDrawer)
  assert env.get_image_drawer().output_dir == config.plot.output_dir
  assert isinstance(env.get_variables(), VariableStore)


def test_environments_do_not_share_bindings(drawer):
  first = Environment(image_drawer=drawer)
  second = Environment(image_drawer=drawer)
  first.variables.bind('x', NumberNode(1))
  assert not second.variables.contains('x')
