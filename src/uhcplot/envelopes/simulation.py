"""
Pointwise Simulation Envelope

Summarizes M simulated density curves, evaluated on a shared grid of G
points, into a mean curve and a lower/upper percentile band. Each grid
column is summarized independently over its non-missing values.

Quantiles use linear interpolation between order statistics (Hyndman and
Fan type 7): for n sorted values and probability p, h = (n - 1) * p and
q = x[floor(h)] + (h - floor(h)) * (x[floor(h) + 1] - x[floor(h)]).
"""

from dataclasses import dataclass
from typing import Optional, Tuple
import warnings

import numpy as np

from ..core.density import DensityCurve, InvalidArgument


# 95% pointwise band
DEFAULT_PROBS = (0.025, 0.975)


@dataclass(frozen=True)
class Envelope:
    """
    Pointwise summary of a density ensemble.

    Attributes
    ----------
    mean : np.ndarray
        Mean simulated density per grid point, shape (G,).
    lower : np.ndarray
        Lower percentile per grid point, shape (G,).
    upper : np.ndarray
        Upper percentile per grid point, shape (G,).
    """
    mean: np.ndarray
    lower: np.ndarray
    upper: np.ndarray

    def __len__(self) -> int:
        return len(self.mean)


def simulation_envelope(
    densrand: np.ndarray,
    probs: Tuple[float, float] = DEFAULT_PROBS
) -> Envelope:
    """
    Compute the pointwise mean and percentile band of simulated densities.

    Parameters
    ----------
    densrand : np.ndarray
        Simulated densities of shape (M, G). NaN marks a missing value.
    probs : tuple
        Lower and upper probabilities of the band. Default (0.025, 0.975).

    Returns
    -------
    Envelope
        Mean, lower and upper curves. Columns without any valid value are NaN.
    """
    densrand = np.asarray(densrand, dtype=np.float64)
    if densrand.ndim != 2:
        raise InvalidArgument(
            f"Expected simulated densities of shape (M, G), got {densrand.shape}"
        )

    lo, hi = probs
    if not 0.0 <= lo <= hi <= 1.0:
        raise InvalidArgument(f"probs must satisfy 0 <= lower <= upper <= 1, got {probs}")

    # All-missing columns come back as NaN; numpy warns about them
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", category=RuntimeWarning)
        mean = np.nanmean(densrand, axis=0)
        lower, upper = np.nanpercentile(
            densrand, [100.0 * lo, 100.0 * hi], axis=0, method="linear"
        )

    return Envelope(mean=mean, lower=lower, upper=upper)


def density_limits(
    densrand: np.ndarray,
    densdat: DensityCurve,
    densavail: Optional[DensityCurve] = None
) -> Tuple[float, float]:
    """
    Range of every finite density value that will appear on the y-axis.

    Parameters
    ----------
    densrand : np.ndarray
        Simulated densities of shape (M, G).
    densdat : DensityCurve
        Density at the used locations.
    densavail : DensityCurve, optional
        Density at the available locations.

    Returns
    -------
    tuple
        (min, max) over the finite values.
    """
    parts = [np.ravel(densrand), densdat.y]
    if densavail is not None:
        parts.append(densavail.y)
    values = np.concatenate(parts)
    values = values[np.isfinite(values)]

    if values.size == 0:
        raise InvalidArgument("No finite density values to set the y-axis range")

    return float(values.min()), float(values.max())


def grid_limits(densdat: DensityCurve) -> Tuple[float, float]:
    """Range of the used density grid."""
    x = densdat.x[np.isfinite(densdat.x)]
    if x.size == 0:
        raise InvalidArgument("No finite grid points to set the x-axis range")
    return float(x.min()), float(x.max())
