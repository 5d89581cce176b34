"""Session configuration for the calculator engine."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .logging_system import LogLevel


@dataclass
class PlotConfig:
    """Labels and rendering options used by the plot command"""
    title: str = "Scatter Plot"
    x_label: str = "X AXIS"
    y_label: str = "Y AXIS"
    clamp_final_sample: bool = True  # snap a last sample within tolerance onto varMax
    tolerance: float = 1e-9          # relative to the step size
    output_dir: str = "plots"
    dpi: int = 300
    figsize: Tuple[float, float] = (10, 6)
    show: bool = False

    def __post_init__(self):
        """Validate fields after initialization"""
        for label in ('title', 'x_label', 'y_label'):
            if not isinstance(getattr(self, label), str):
                raise TypeError(f"{label} must be a string")
        if not isinstance(self.tolerance, (int, float)) or not 0 <= self.tolerance < 1:
            raise ValueError("tolerance must be a number in [0, 1)")
        if not isinstance(self.dpi, int) or self.dpi <= 0:
            raise ValueError("dpi must be a positive integer")
        if len(self.figsize) != 2 or min(self.figsize) <= 0:
            raise ValueError("figsize must be a pair of positive numbers")


@dataclass
class EngineConfig:
    plot: PlotConfig = field(default_factory=PlotConfig)
    log_level: Optional[LogLevel] = None  # None leaves the global logger as configured

    def __post_init__(self):
        if not isinstance(self.plot, PlotConfig):
            raise TypeError("plot must be a PlotConfig instance")
        if self.log_level is not None and not isinstance(self.log_level, LogLevel):
            raise TypeError("log_level must be a LogLevel or None")
