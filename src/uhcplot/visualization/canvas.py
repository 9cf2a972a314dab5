"""
Drawing surfaces for UHC plots.

Contains:
- Canvas, the small set of drawing commands a plot is made of
- MatplotlibCanvas, which draws them on a matplotlib Axes
- RecordingCanvas, which only records them
"""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D

from .legend import LegendEntry


class Canvas(Protocol):
    """Drawing commands issued by a UHC density plot."""

    def setup_axes(
        self,
        xlim: Tuple[float, float],
        ylim: Tuple[float, float],
        xlabel: str,
        ylabel: str
    ) -> None: ...

    def fill_polygon(
        self,
        x: np.ndarray,
        y: np.ndarray,
        facecolor: str,
        edgecolor: str
    ) -> None: ...

    def line(
        self,
        x: np.ndarray,
        y: np.ndarray,
        color: str,
        linestyle: str,
        linewidth: float
    ) -> None: ...

    def legend(self, x: float, y: float, entries: Sequence[LegendEntry]) -> None: ...


class MatplotlibCanvas:
    """
    Canvas backed by a matplotlib Axes.

    Parameters
    ----------
    ax : plt.Axes, optional
        Axes to draw on. Uses the current axes of the active figure if None.
    """

    def __init__(self, ax: Optional[plt.Axes] = None):
        if ax is None:
            ax = plt.gca()
        self.ax = ax

    @property
    def figure(self) -> plt.Figure:
        return self.ax.figure

    def setup_axes(self, xlim, ylim, xlabel, ylabel):
        self.ax.set_xlim(*xlim)
        self.ax.set_ylim(*ylim)
        self.ax.set_xlabel(xlabel)
        self.ax.set_ylabel(ylabel)

    def fill_polygon(self, x, y, facecolor, edgecolor):
        self.ax.fill(x, y, facecolor=facecolor, edgecolor=edgecolor, zorder=1)

    def line(self, x, y, color, linestyle, linewidth):
        self.ax.plot(x, y, color=color, linestyle=linestyle, linewidth=linewidth, zorder=2)

    def legend(self, x, y, entries):
        handles = [
            Line2D([], [], color=e.color, linestyle=e.linestyle, linewidth=e.linewidth)
            for e in entries
        ]
        # Upper-left corner of the legend box sits at (x, y) in data coordinates
        self.ax.legend(
            handles,
            [e.label for e in entries],
            loc='upper left',
            bbox_to_anchor=(x, y),
            bbox_transform=self.ax.transData,
            frameon=False,
        )


@dataclass
class DrawCommand:
    """A recorded drawing call."""
    name: str
    kwargs: dict


@dataclass
class RecordingCanvas:
    """Canvas that keeps the sequence of drawing calls instead of drawing."""
    commands: List[DrawCommand] = field(default_factory=list)

    def _record(self, name: str, **kwargs) -> None:
        self.commands.append(DrawCommand(name, kwargs))

    @property
    def names(self) -> List[str]:
        return [c.name for c in self.commands]

    def find(self, name: str) -> List[DrawCommand]:
        return [c for c in self.commands if c.name == name]

    def setup_axes(self, xlim, ylim, xlabel, ylabel):
        self._record('setup_axes', xlim=tuple(xlim), ylim=tuple(ylim),
                     xlabel=xlabel, ylabel=ylabel)

    def fill_polygon(self, x, y, facecolor, edgecolor):
        self._record('fill_polygon', x=np.array(x), y=np.array(y),
                     facecolor=facecolor, edgecolor=edgecolor)

    def line(self, x, y, color, linestyle, linewidth):
        self._record('line', x=np.array(x), y=np.array(y), color=color,
                     linestyle=linestyle, linewidth=linewidth)

    def legend(self, x, y, entries):
        self._record('legend', x=x, y=y, entries=tuple(entries))
