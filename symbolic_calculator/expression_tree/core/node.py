import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple
from .operators import NodeType, BINARY_OP_MAP


def _format_number(value: float) -> str:
  if value.is_integer() and abs(value) < 1e16:
    return str(int(value))
  return repr(value)


class Node(ABC):
  """Base node class. Nodes are immutable values with structural equality."""

  __slots__ = ('_hash_cache', '_size_cache')

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)
    object.__setattr__(self, '_size_cache', None)

  def __setattr__(self, key, value):
    raise AttributeError(f"{type(self).__name__} is immutable")

  def __delattr__(self, key):
    raise AttributeError(f"{type(self).__name__} is immutable")

  @property
  def children(self) -> Tuple['Node', ...]:
    return ()

  def is_number(self) -> bool:
    return False

  def is_variable(self) -> bool:
    return False

  def is_operation(self) -> bool:
    return False

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      object.__setattr__(self, '_size_cache', self._compute_size())
    return self._size_cache

  @abstractmethod
  def _compute_size(self) -> int:
    pass

  @abstractmethod
  def _key(self) -> tuple:
    pass

  def __hash__(self) -> int:
    if self._hash_cache is None:
      object.__setattr__(self, '_hash_cache', hash(self._key()))
    return self._hash_cache

  def __eq__(self, other) -> bool:
    if not isinstance(other, Node):
      return NotImplemented
    if self is other:
      return True
    return self._key() == other._key()

  def __ne__(self, other) -> bool:
    result = self.__eq__(other)
    if result is NotImplemented:
      return result
    return not result

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self.to_string()})"


class NumberNode(Node):
  __slots__ = ('_value',)

  def __init__(self, value: float):
    super().__init__()
    object.__setattr__(self, '_value', float(value))

  @property
  def value(self) -> float:
    return self._value

  def is_number(self) -> bool:
    return True

  def to_string(self) -> str:
    return _format_number(self._value)

  def to_sympy(self) -> sp.Expr:
    if self._value.is_integer():
      return sp.Integer(int(self._value))
    return sp.Float(self._value)

  def _compute_size(self) -> int:
    return 1

  def _key(self) -> tuple:
    return (NodeType.NUMBER, self._value)


class VariableNode(Node):
  __slots__ = ('_name',)

  def __init__(self, name: str):
    super().__init__()
    if not isinstance(name, str) or not name:
      raise ValueError("variable name must be a non-empty string")
    object.__setattr__(self, '_name', name)

  @property
  def name(self) -> str:
    return self._name

  def is_variable(self) -> bool:
    return True

  def to_string(self) -> str:
    return self._name

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self._name)

  def _compute_size(self) -> int:
    return 1

  def _key(self) -> tuple:
    return (NodeType.VARIABLE, self._name)


class OperationNode(Node):
  __slots__ = ('_name', '_children')

  def __init__(self, name: str, children: Optional[Sequence[Node]] = None):
    super().__init__()
    if not isinstance(name, str) or not name:
      raise ValueError("operation name must be a non-empty string")
    # Copy into a tuple so callers can never alias our child sequence
    children = tuple(children) if children is not None else ()
    for child in children:
      if not isinstance(child, Node):
        raise TypeError(f"operation children must be nodes, got {type(child).__name__}")
    object.__setattr__(self, '_name', name)
    object.__setattr__(self, '_children', children)

  @property
  def name(self) -> str:
    return self._name

  @property
  def children(self) -> Tuple[Node, ...]:
    return self._children

  def is_operation(self) -> bool:
    return True

  def with_children(self, children: Sequence[Node]) -> 'OperationNode':
    """Fresh node with the same operator and new children"""
    return OperationNode(self._name, children)

  def to_string(self) -> str:
    if self._name in BINARY_OP_MAP and len(self._children) == 2:
      left, right = self._children
      return f"({left.to_string()} {self._name} {right.to_string()})"
    args = ", ".join(child.to_string() for child in self._children)
    return f"{self._name}({args})"

  def to_sympy(self) -> sp.Expr:
    args = [child.to_sympy() for child in self._children]
    name = self._name
    if name == '+' and len(args) == 2:
      return sp.Add(args[0], args[1], evaluate=False)
    elif name == '-' and len(args) == 2:
      return sp.Add(args[0], sp.Mul(-1, args[1], evaluate=False), evaluate=False)
    elif name == '*' and len(args) == 2:
      return sp.Mul(args[0], args[1], evaluate=False)
    elif name == '/' and len(args) == 2:
      return sp.Mul(args[0], sp.Pow(args[1], -1, evaluate=False), evaluate=False)
    elif name == '^' and len(args) == 2:
      return sp.Pow(args[0], args[1], evaluate=False)
    elif name == 'negate' and len(args) == 1:
      return sp.Mul(-1, args[0], evaluate=False)
    elif name == 'sin' and len(args) == 1:
      return sp.sin(args[0], evaluate=False)
    elif name == 'cos' and len(args) == 1:
      return sp.cos(args[0], evaluate=False)
    return sp.Function(name)(*args)

  def _compute_size(self) -> int:
    return 1 + sum(child.size() for child in self._children)

  def _key(self) -> tuple:
    return (NodeType.OPERATION, self._name, self._children)
