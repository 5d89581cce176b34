"""
Error taxonomy for the calculator engine.

Every error is deterministic (bad input or a bad environment), so nothing
here is retried: each one aborts the command that raised it.
"""

from typing import Sequence


class EvaluationError(Exception):
    """Base class for every error raised while running a command"""


class MalformedCommand(EvaluationError):
    """A node does not have the expected operation name or arity"""


class UndefinedVariable(EvaluationError):

    def __init__(self, name: str):
        super().__init__(f"Undefined variable: {name}")
        self.name = name


class UnknownOperation(EvaluationError):

    def __init__(self, name: str):
        super().__init__(f"Unknown operation: {name}")
        self.name = name


class InvalidPlotRange(EvaluationError):
    """Plot bounds are symbolic, inverted, or the step is not positive"""


class VariableAlreadyBound(EvaluationError):

    def __init__(self, name: str):
        super().__init__(f"Variable {name} is already defined in the environment")
        self.name = name


class CyclicBinding(EvaluationError):
    """A variable binding refers back to itself, directly or transitively"""

    def __init__(self, name: str, chain: Sequence[str]):
        self.name = name
        self.chain = tuple(chain) + (name,)
        super().__init__(f"Cyclic variable binding: {' -> '.join(self.chain)}")


class NonFiniteResult(EvaluationError):
    """Evaluation produced NaN or an infinity"""
