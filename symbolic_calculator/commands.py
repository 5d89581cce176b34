"""
Command handlers: toDouble, simplify and plot.

Each handler receives the session environment and the whole command node
(e.g. ``toDouble(3 + 4)``) and returns an expression node, so a dispatcher can
treat every command uniformly.
"""

from typing import Callable, Dict, List

from .environment import Environment
from .errors import EvaluationError, InvalidPlotRange, MalformedCommand, VariableAlreadyBound
from .expression_tree.core.node import Node, NumberNode, VariableNode, OperationNode
from .expression_tree.core.operators import COMMAND_ARITY, is_command
from .expression_tree.utils.evaluator import ExpressionEvaluator
from .expression_tree.utils.simplifier import ExpressionSimplifier
from .expression_tree.utils.validator import ExpressionValidator
from .logging_system import log_command, log_debug, log_milestone, log_warning


def assert_node_matches(node: Node, expected_name: str, expected_num_children: int):
    """
    Raise MalformedCommand unless ``node`` is an operation named
    ``expected_name`` with exactly ``expected_num_children`` children.
    """
    if (not isinstance(node, OperationNode)
            or node.name != expected_name
            or len(node.children) != expected_num_children):
        raise MalformedCommand(f"Node is not valid {expected_name} node.")


def handle_to_double(env: Environment, node: Node) -> NumberNode:
    """
    Accepts a 'toDouble(inner)' node and returns a number node holding the
    value of 'inner'. For example 'toDouble(3 + 4)' returns '7'.
    """
    assert_node_matches(node, 'toDouble', COMMAND_ARITY['toDouble'])
    expr = node.children[0]
    ExpressionValidator.validate(expr)
    return NumberNode(ExpressionEvaluator.to_double(expr, env.variables))


def handle_simplify(env: Environment, node: Node) -> Node:
    """
    Accepts a 'simplify(inner)' node and returns the constant-folded 'inner'.
    For example 'simplify(3 + 4)' returns '7'.
    """
    assert_node_matches(node, 'simplify', COMMAND_ARITY['simplify'])
    expr = node.children[0]
    ExpressionValidator.validate(expr)
    return ExpressionSimplifier.simplify(expr, env.variables)


def _is_plot_bound(node: Node) -> bool:
    return isinstance(node, NumberNode) or (isinstance(node, OperationNode) and node.name == 'negate')


def sample_range(num_min: float, num_max: float, num_step: float,
                 clamp_final_sample: bool = True, tolerance: float = 1e-9) -> List[float]:
    """
    Inclusive samples ``num_min + k * num_step`` up to ``num_max``.

    Samples are computed from the index rather than accumulated, so drift
    never builds up. A last sample overshooting ``num_max`` by less than
    ``tolerance * num_step`` is snapped onto ``num_max`` when clamping is on.
    """
    samples = []
    slack = tolerance * num_step if clamp_final_sample else 0.0
    k = 0
    while True:
        x = num_min + k * num_step
        if x > num_max + slack:
            break
        samples.append(min(x, num_max) if clamp_final_sample else x)
        k += 1
    return samples


def handle_plot(env: Environment, node: Node) -> NumberNode:
    """
    Accepts a 'plot(exprToPlot, var, varMin, varMax, step)' node, samples
    'exprToPlot' while 'var' walks from 'varMin' to 'varMax' in 'step'
    increments and hands the samples to the environment's image drawer.

    >>> plot(3 * x, x, 2, 5, 0.5)

    plots [(2, 6), (2.5, 7.5), (3, 9), (3.5, 10.5), (4, 12), (4.5, 13.5), (5, 15)].

    Returns the placeholder number 1.
    """
    assert_node_matches(node, 'plot', COMMAND_ARITY['plot'])
    expr_to_plot, var, var_min, var_max, step = node.children
    if not isinstance(var, VariableNode):
        raise MalformedCommand(f"Plot variable must be a variable, got {var.to_string()}")
    for child in (expr_to_plot, var_min, var_max, step):
        ExpressionValidator.validate(child)

    variables = env.variables
    plot_config = env.config.plot

    expr_to_plot = ExpressionSimplifier.simplify(expr_to_plot, variables)
    var_min = ExpressionSimplifier.simplify(var_min, variables)
    var_max = ExpressionSimplifier.simplify(var_max, variables)
    step = ExpressionSimplifier.simplify(step, variables)

    num_min = ExpressionEvaluator.to_double(var_min, variables)
    num_max = ExpressionEvaluator.to_double(var_max, variables)
    num_step = ExpressionEvaluator.to_double(step, variables)

    if not (_is_plot_bound(var_min) and _is_plot_bound(var_max) and _is_plot_bound(step)):
        raise InvalidPlotRange("Undefined variables within expressions.")

    if num_min > num_max:
        raise InvalidPlotRange("Minimum value of variable is larger than Maximum.")

    if num_step <= 0:
        raise InvalidPlotRange("Increment of variable is either zero or negative.")

    if variables.contains(var.name):
        raise VariableAlreadyBound(var.name)

    x_values: List[float] = []
    y_values: List[float] = []
    with variables.scoped(var.name):
        for x in sample_range(num_min, num_max, num_step,
                              plot_config.clamp_final_sample, plot_config.tolerance):
            variables.bind(var.name, NumberNode(x))
            y_values.append(ExpressionEvaluator.to_double(expr_to_plot, variables))
            x_values.append(x)

    env.image_drawer.draw_scatter_plot(
        plot_config.title, plot_config.x_label, plot_config.y_label, x_values, y_values)
    log_milestone(f"Plotted {expr_to_plot.to_string()} over {var.name} "
                  f"in [{num_min}, {num_max}] ({len(x_values)} samples)")

    # Every command must return a node; plot has no natural result
    return NumberNode(1)


COMMAND_HANDLERS: Dict[str, Callable[[Environment, Node], Node]] = {
    'toDouble': handle_to_double,
    'simplify': handle_simplify,
    'plot': handle_plot,
}


def execute_command(env: Environment, node: Node) -> Node:
    """Route a top-level command node to its handler"""
    if not isinstance(node, OperationNode) or not is_command(node.name):
        raise MalformedCommand(f"Not a command: {node.to_string()}")
    log_command(node.name, node.to_string())
    try:
        result = COMMAND_HANDLERS[node.name](env, node)
    except EvaluationError as e:
        log_warning(f"{node.name} failed: {e}")
        raise
    log_debug(f"{node.name} -> {result.to_string()}")
    return result
