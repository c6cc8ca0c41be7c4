"""Visualization utilities for sclattice layouts."""

from .matplotlib_2d import visualize_layout_matplotlib
from .plotly_2d import visualize_layout_plotly

__all__ = [
    "visualize_layout_matplotlib",
    "visualize_layout_plotly",
]
