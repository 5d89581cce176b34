import os
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from symbolic_calculator import Environment, ImageDrawer, LogLevel, configure_logging


class RecordingImageDrawer(ImageDrawer):
  """Keeps every scatter plot it is asked to draw"""

  def __init__(self):
    self.calls = []

  def draw_scatter_plot(self, title, x_label, y_label, xs, ys):
    self.calls.append({
      'title': title, 'x_label': x_label, 'y_label': y_label,
      'xs': list(xs), 'ys': list(ys)
    })


@pytest.fixture(autouse=True)
def quiet_logging():
  configure_logging(LogLevel.SILENT)
  yield


@pytest.fixture
def drawer():
  return RecordingImageDrawer()


@pytest.fixture
def env(drawer):
  return Environment(image_drawer=drawer)
