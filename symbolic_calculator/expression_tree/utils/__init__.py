"""Utilities for expression trees."""

from .evaluator import ExpressionEvaluator
from .simplifier import ExpressionSimplifier
from .validator import ExpressionValidator
from .sympy_utils import SymPyRenderer
from .tree_utils import (
    get_all_nodes, calculate_tree_depth, get_variables,
    get_operations, is_fully_folded
)

__all__ = [
    'ExpressionEvaluator', 'ExpressionSimplifier', 'ExpressionValidator',
    'SymPyRenderer',
    'get_all_nodes', 'calculate_tree_depth', 'get_variables',
    'get_operations', 'is_fully_folded'
]
