"""
Visualization utilities.
"""

from .canvas import Canvas, MatplotlibCanvas, RecordingCanvas, DrawCommand
from .legend import LegendEntry, LEGEND_LAYOUTS, legend_entries
from .plotting import UHCStyle, PlotConfig, uhc_density_plot, render, plot_uhc

__all__ = [
    'Canvas',
    'MatplotlibCanvas',
    'RecordingCanvas',
    'DrawCommand',
    'LegendEntry',
    'LEGEND_LAYOUTS',
    'legend_entries',
    'UHCStyle',
    'PlotConfig',
    'uhc_density_plot',
    'render',
    'plot_uhc',
]
