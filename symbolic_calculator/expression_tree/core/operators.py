import numpy as np
import numba
from enum import IntEnum

class NodeType(IntEnum):
  NUMBER = 0
  VARIABLE = 1
  OPERATION = 2

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops
  NEG = 5
  SIN = 6
  COS = 7

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
UNARY_OP_MAP = {'negate': OpType.NEG, 'sin': OpType.SIN, 'cos': OpType.COS}

# Fold policy classes used by the simplifier
FOLDING_OPS = frozenset({'+', '-', '*'})
GUARDED_OPS = frozenset({'/', '^'})
UNARY_OPS = frozenset(UNARY_OP_MAP)

ARITHMETIC_ARITY = {name: 2 for name in BINARY_OP_MAP}
ARITHMETIC_ARITY.update({name: 1 for name in UNARY_OP_MAP})

# Commands are dispatched by the command layer, never evaluated
COMMAND_ARITY = {'toDouble': 1, 'simplify': 1, 'plot': 5}


def is_command(name: str) -> bool:
  return name in COMMAND_ARITY


@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op_fast(left_val, right_val, op_type):
  if op_type == OpType.ADD:
    return left_val + right_val
  elif op_type == OpType.SUB:
    return left_val - right_val
  elif op_type == OpType.MUL:
    return left_val * right_val
  elif op_type == OpType.DIV:
    return left_val / right_val
  elif op_type == OpType.POW:
    return left_val ** right_val
  return 0.0

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op_fast(operand_val, op_type):
  if op_type == OpType.NEG:
    return -operand_val
  elif op_type == OpType.SIN:
    return np.sin(operand_val)
  elif op_type == OpType.COS:
    return np.cos(operand_val)
  return 0.0
