"""
uhcplot - Used-habitat calibration (UHC) density plots.

Compares the kernel density of a covariate at used locations with a
pointwise simulation envelope of the densities predicted by a fitted
habitat-selection model, optionally alongside the density at available
locations.

Main Functions
--------------
uhc_density_plot : Draw a UHC density plot
plot_uhc : Draw a UHC density plot from a density calculation result
simulation_envelope : Pointwise mean and percentile band of simulated densities

Example
-------
>>> import numpy as np
>>> from uhcplot import uhc_density_plot

>>> x = np.linspace(-4, 4, 128)
>>> densdat = {'x': x, 'y': np.exp(-x**2 / 2) / np.sqrt(2 * np.pi)}
>>> densrand = densdat['y'] * np.random.uniform(0.8, 1.2, size=(500, 1))
>>> canvas = uhc_density_plot(densdat, densrand)
"""

from .core.density import (
    RECOMMENDED_MIN_SIMULATIONS,
    InvalidArgument,
    SmallEnsembleWarning,
    DensityCurve,
)
from .core.geometry import band_polygon
from .envelopes.simulation import Envelope, simulation_envelope, density_limits, grid_limits
from .visualization.canvas import Canvas, MatplotlibCanvas, RecordingCanvas
from .visualization.legend import LegendEntry, legend_entries
from .visualization.plotting import UHCStyle, PlotConfig, uhc_density_plot, render, plot_uhc

__all__ = [
    # Inputs
    'RECOMMENDED_MIN_SIMULATIONS',
    'InvalidArgument',
    'SmallEnsembleWarning',
    'DensityCurve',
    # Geometry
    'band_polygon',
    # Envelope
    'Envelope',
    'simulation_envelope',
    'density_limits',
    'grid_limits',
    # Drawing
    'Canvas',
    'MatplotlibCanvas',
    'RecordingCanvas',
    'LegendEntry',
    'legend_entries',
    'UHCStyle',
    'PlotConfig',
    'uhc_density_plot',
    'render',
    'plot_uhc',
]
