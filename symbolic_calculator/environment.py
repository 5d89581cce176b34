"""
Session state shared by commands: variable bindings and the renderer.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from .config import EngineConfig
from .expression_tree.core.node import Node
from .expression_tree.utils.validator import ExpressionValidator
from .logging_system import configure_logging, log_debug
from .plotting import ImageDrawer, MatplotlibImageDrawer


class VariableStore:
    """Name to expression bindings, looked up by exact name"""

    def __init__(self):
        self._bindings: Dict[str, Node] = {}

    def lookup(self, name: str) -> Optional[Node]:
        return self._bindings.get(name)

    def bind(self, name: str, node: Node):
        if not isinstance(name, str) or not name:
            raise ValueError("variable name must be a non-empty string")
        if not isinstance(node, Node):
            raise TypeError(f"can only bind expression nodes, got {type(node).__name__}")
        ExpressionValidator.validate(node)
        self._bindings[name] = node

    def unbind(self, name: str):
        self._bindings.pop(name, None)

    def contains(self, name: str) -> bool:
        return name in self._bindings

    def names(self) -> List[str]:
        return list(self._bindings)

    @contextmanager
    def scoped(self, name: str) -> Iterator['VariableStore']:
        """Release any binding of ``name`` made inside the block, even on error"""
        try:
            yield self
        finally:
            if name in self._bindings:
                log_debug(f"Releasing scoped binding {name}")
            self.unbind(name)

    def __contains__(self, name) -> bool:
        return self.contains(name)

    def __len__(self) -> int:
        return len(self._bindings)


class Environment:
    """
    One calculator session. Created once, passed explicitly to every command
    and mutated only through its VariableStore.
    """

    def __init__(self, image_drawer: Optional[ImageDrawer] = None,
                 config: Optional[EngineConfig] = None):
        self.config = config if config is not None else EngineConfig()
        self.variables = VariableStore()
        if image_drawer is None:
            plot_config = self.config.plot
            image_drawer = MatplotlibImageDrawer(
                output_dir=plot_config.output_dir,
                dpi=plot_config.dpi,
                figsize=plot_config.figsize,
                show=plot_config.show
            )
        self.image_drawer = image_drawer
        if self.config.log_level is not None:
            configure_logging(self.config.log_level)

    def get_variables(self) -> VariableStore:
        return self.variables

    def get_image_drawer(self) -> ImageDrawer:
        return self.image_drawer
