"""
UHC density plot.

Draws the density of a covariate at the used locations over the 95%
simulation envelope of the densities predicted by a habitat-selection
model, optionally with the density at the available locations.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

import matplotlib.pyplot as plt

from ..core.density import validate_inputs
from ..core.geometry import band_polygon
from ..envelopes.simulation import (
    DEFAULT_PROBS,
    simulation_envelope,
    density_limits,
    grid_limits,
)
from .canvas import Canvas, MatplotlibCanvas
from .legend import legend_entries


@dataclass(frozen=True)
class UHCStyle:
    """
    Colors, line widths and legend placement of a UHC density plot.

    Attributes
    ----------
    band_color : str
        Fill and border of the simulation envelope.
    used_color, used_linestyle : str
        Line of the used density.
    avail_color, avail_linestyle : str
        Line of the available density.
    line_width : float
        Width of the density lines.
    predicted_legend_width : float
        Width of the legend sample standing for the envelope.
    legend_anchor_x : float
        x position (data coordinates) of the legend's upper-left corner.
    probs : tuple
        Lower and upper probabilities of the envelope.
    """
    band_color: str = 'gray'
    used_color: str = 'black'
    used_linestyle: str = '-'
    avail_color: str = 'red'
    avail_linestyle: str = '--'
    line_width: float = 2.0
    predicted_legend_width: float = 5.0
    legend_anchor_x: float = -5.2
    probs: Tuple[float, float] = DEFAULT_PROBS


@dataclass(frozen=True)
class PlotConfig:
    """Which elements are drawn and the axis extents (None = computed)."""
    include_avail: bool = False
    include_legend: bool = True
    xlim: Optional[Tuple[float, float]] = None
    ylim: Optional[Tuple[float, float]] = None


def uhc_density_plot(
    densdat,
    densrand,
    include_avail: bool = False,
    densavail=None,
    xlim: Optional[Tuple[float, float]] = None,
    ylim: Optional[Tuple[float, float]] = None,
    include_legend: bool = True,
    canvas: Optional[Canvas] = None,
    ax: Optional[plt.Axes] = None,
    style: Optional[UHCStyle] = None
) -> Canvas:
    """
    Plot a used-habitat calibration density plot.

    The band is the pointwise 2.5-97.5% envelope of the simulated densities,
    the solid line is the density at the used locations and the dashed line
    the density at the available locations.

    Parameters
    ----------
    densdat : DensityCurve or mapping or (x, y)
        Kernel density estimate at the used locations of the test data.
    densrand : array-like
        Kernel density estimates at the predicted locations, shape (M, G),
        evaluated on the grid of densdat. NaN or None marks a missing value.
        Use M >= 200 for stable tail percentiles.
    include_avail : bool
        Whether to draw the density at the available locations.
    densavail : DensityCurve or mapping or (x, y), optional
        Kernel density estimate at the available locations.
    xlim : tuple, optional
        x-axis limits. Defaults to the range of the densdat grid.
    ylim : tuple, optional
        y-axis limits. Defaults to the range of all density values.
    include_legend : bool
        Whether to draw the legend.
    canvas : Canvas, optional
        Surface to draw on. Takes precedence over ax.
    ax : plt.Axes, optional
        Matplotlib axes to draw on. Uses the current axes if neither canvas
        nor ax is given.
    style : UHCStyle, optional
        Colors, widths and legend position.

    Returns
    -------
    Canvas
        The canvas that was drawn on.
    """
    return _draw_uhc(
        densdat, densrand, include_avail, densavail, xlim, ylim,
        include_legend, canvas, ax, style,
    )


def _draw_uhc(densdat, densrand, include_avail, densavail, xlim, ylim,
              include_legend, canvas, ax, style) -> Canvas:
    # Only call from a public entry point: stacklevel=4 names its caller
    if style is None:
        style = UHCStyle()

    densdat, densrand, densavail = validate_inputs(
        densdat, densrand, include_avail=include_avail, densavail=densavail,
        stacklevel=4,
    )

    # A supplied available density sets the y range even when not drawn
    y_min, y_max = density_limits(densrand, densdat, densavail)
    ylim_used = (y_min, y_max) if ylim is None else tuple(ylim)
    xlim_used = grid_limits(densdat) if xlim is None else tuple(xlim)

    envelope = simulation_envelope(densrand, probs=style.probs)
    band = band_polygon(densdat.x, envelope.upper, envelope.lower)
    entries = legend_entries(include_avail, include_legend, style)

    if canvas is None:
        canvas = MatplotlibCanvas(ax)

    # Axis title only when the caller lays out the x extent
    canvas.setup_axes(
        xlim_used, ylim_used, xlabel='',
        ylabel='Density' if xlim is not None else '',
    )
    canvas.fill_polygon(
        band[:, 0], band[:, 1],
        facecolor=style.band_color, edgecolor=style.band_color,
    )
    canvas.line(
        densdat.x, densdat.y, color=style.used_color,
        linestyle=style.used_linestyle, linewidth=style.line_width,
    )
    if include_avail:
        canvas.line(
            densavail.x, densavail.y, color=style.avail_color,
            linestyle=style.avail_linestyle, linewidth=style.line_width,
        )
    if entries:
        canvas.legend(style.legend_anchor_x, y_max, entries)

    return canvas


def render(
    densdat,
    densrand,
    config: PlotConfig = PlotConfig(),
    densavail=None,
    canvas: Optional[Canvas] = None,
    ax: Optional[plt.Axes] = None,
    style: Optional[UHCStyle] = None
) -> Canvas:
    """Draw a UHC density plot as described by a PlotConfig."""
    return _draw_uhc(
        densdat, densrand, config.include_avail, densavail, config.xlim,
        config.ylim, config.include_legend, canvas, ax, style,
    )


def plot_uhc(
    denshats: Mapping,
    include_avail: Optional[bool] = None,
    xlim: Optional[Tuple[float, float]] = None,
    ylim: Optional[Tuple[float, float]] = None,
    include_legend: bool = True,
    canvas: Optional[Canvas] = None,
    ax: Optional[plt.Axes] = None,
    style: Optional[UHCStyle] = None
) -> Canvas:
    """
    Draw a UHC density plot from the output of a density calculation step.

    Parameters
    ----------
    denshats : mapping
        Holds 'densdat', 'densrand' and optionally 'densavail'.
    include_avail : bool, optional
        Defaults to whether denshats has a non-null 'densavail'.
    xlim, ylim, include_legend, canvas, ax, style
        As for uhc_density_plot.
    """
    densavail = denshats.get('densavail')
    if include_avail is None:
        include_avail = densavail is not None
    return _draw_uhc(
        denshats['densdat'], denshats['densrand'], include_avail, densavail,
        xlim, ylim, include_legend, canvas, ax, style,
    )
