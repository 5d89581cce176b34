"""
Rendering collaborators for the plot command.

The plot command only depends on the ImageDrawer contract; the matplotlib
drawer is the default used by interactive sessions.
"""

import os
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .logging_system import log_debug


class ImageDrawer(ABC):

    @abstractmethod
    def draw_scatter_plot(self, title: str, x_label: str, y_label: str,
                          xs: Sequence[float], ys: Sequence[float]):
        """Draw one scatter plot of index-aligned samples"""
        pass


class MatplotlibImageDrawer(ImageDrawer):
    """Draws scatter plots with matplotlib and saves each one as a PNG"""

    def __init__(self, output_dir: str = "plots", dpi: int = 300,
                 figsize: Tuple[float, float] = (10, 6), show: bool = False):
        self.output_dir = output_dir
        self.dpi = dpi
        self.figsize = figsize
        self.show = show
        self.last_figure_path: Optional[str] = None

    def draw_scatter_plot(self, title: str, x_label: str, y_label: str,
                          xs: Sequence[float], ys: Sequence[float]) -> str:
        x_arr = np.asarray(xs, dtype=np.float64)
        y_arr = np.asarray(ys, dtype=np.float64)
        if x_arr.shape != y_arr.shape:
            raise ValueError(f"xs and ys must have the same length, got {len(x_arr)} and {len(y_arr)}")

        fig, ax = plt.subplots(figsize=self.figsize)
        ax.scatter(x_arr, y_arr, s=12)
        ax.set_title(title)
        ax.set_xlabel(x_label)
        ax.set_ylabel(y_label)
        ax.grid(True, alpha=0.3)
        plt.tight_layout()

        os.makedirs(self.output_dir, exist_ok=True)
        filename = f"plot_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.png"
        filepath = os.path.join(self.output_dir, filename)
        plt.savefig(filepath, dpi=self.dpi, bbox_inches='tight')
        if self.show:
            plt.show()
        plt.close(fig)

        self.last_figure_path = filepath
        log_debug(f"Saved scatter plot with {len(x_arr)} samples to {filepath}")
        return filepath
