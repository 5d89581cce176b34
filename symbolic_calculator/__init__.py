"""Symbolic Calculator Package

Expression trees with numeric evaluation, constant folding and plotting.
"""

from .errors import (
  EvaluationError, MalformedCommand, UndefinedVariable, UnknownOperation,
  InvalidPlotRange, VariableAlreadyBound, CyclicBinding, NonFiniteResult
)
from .expression_tree import (
  Expression, Node, NumberNode, VariableNode, OperationNode,
  ExpressionEvaluator, ExpressionSimplifier, ExpressionValidator, SymPyRenderer
)
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level
from .config import EngineConfig, PlotConfig
from .plotting import ImageDrawer, MatplotlibImageDrawer
from .environment import Environment, VariableStore
from .commands import (
  assert_node_matches, handle_to_double, handle_simplify, handle_plot,
  sample_range, execute_command, COMMAND_HANDLERS
)

__version__ = "0.1.0"
__all__ = [
  "EvaluationError", "MalformedCommand", "UndefinedVariable", "UnknownOperation",
  "InvalidPlotRange", "VariableAlreadyBound", "CyclicBinding", "NonFiniteResult",
  "Expression", "Node", "NumberNode", "VariableNode", "OperationNode",
  "ExpressionEvaluator", "ExpressionSimplifier", "ExpressionValidator", "SymPyRenderer",
  "LogLevel", "configure_logging", "get_logger", "set_log_level",
  "EngineConfig", "PlotConfig",
  "ImageDrawer", "MatplotlibImageDrawer",
  "Environment", "VariableStore",
  "assert_node_matches", "handle_to_double", "handle_simplify", "handle_plot",
  "sample_range", "execute_command", "COMMAND_HANDLERS"
]
