import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from symbolic_calculator import (
  Environment, EngineConfig, PlotConfig, LogLevel,
  NumberNode, VariableNode, OperationNode, Expression, execute_command
)


def op(name, *children):
  return OperationNode(name, children)


def main():
  config = EngineConfig(plot=PlotConfig(title="a^2 + c*a + a", x_label="a", y_label="value"),
                        log_level=LogLevel.MODERATE)
  env = Environment(config=config)

  # c := 4, step := 0.01
  env.variables.bind('c', NumberNode(4))
  env.variables.bind('step', NumberNode(0.01))

  a = VariableNode('a')
  expr = op('+', op('+', op('^', a, NumberNode(2)), op('*', VariableNode('c'), a)), a)
  print(f"Expression: {Expression(expr)}")
  print(f"LaTeX: {Expression(expr).latex()}")

  simplified = execute_command(env, op('simplify', expr))
  print(f"Simplified: {simplified}")

  value = execute_command(env, op('toDouble', op('*', op('+', NumberNode(1), NumberNode(2)), VariableNode('c'))))
  print(f"toDouble((1 + 2) * c) = {value}")

  execute_command(env, op('plot', expr, a, op('negate', NumberNode(10)), NumberNode(10), VariableNode('step')))
  print(f"Plot saved to {env.image_drawer.last_figure_path}")


if __name__ == "__main__":
  main()
