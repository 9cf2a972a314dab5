"""
Legend layout for UHC density plots.

The entries depend only on whether the available density is drawn and
whether a legend is wanted, so they are looked up in a fixed table.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .plotting import UHCStyle


@dataclass(frozen=True)
class LegendEntry:
    """One legend row: label and the line sample drawn next to it."""
    label: str
    color: str
    linestyle: str
    linewidth: float


# (include_avail, include_legend) -> labels, in legend order
LEGEND_LAYOUTS: Dict[Tuple[bool, bool], Tuple[str, ...]] = {
    (False, False): (),
    (True, False): (),
    (False, True): ('Used', 'Predicted'),
    (True, True): ('Available', 'Used', 'Predicted'),
}


def legend_entries(
    include_avail: bool,
    include_legend: bool,
    style: "UHCStyle"
) -> Tuple[LegendEntry, ...]:
    """
    Legend rows for a plot, styled like the series they describe.

    Parameters
    ----------
    include_avail : bool
        Whether the available density is drawn.
    include_legend : bool
        Whether a legend is drawn at all.
    style : UHCStyle
        Colors and line widths of the plot.

    Returns
    -------
    tuple of LegendEntry
        Empty when no legend is drawn.
    """
    samples = {
        'Available': LegendEntry(
            'Available', style.avail_color, style.avail_linestyle, style.line_width
        ),
        'Used': LegendEntry(
            'Used', style.used_color, style.used_linestyle, style.line_width
        ),
        'Predicted': LegendEntry(
            'Predicted', style.band_color, '-', style.predicted_legend_width
        ),
    }
    labels = LEGEND_LAYOUTS[(bool(include_avail), bool(include_legend))]
    return tuple(samples[label] for label in labels)
