"""
Density inputs for UHC plots.

Contains:
- DensityCurve, a kernel density estimate sampled on a grid
- Coercion of the simulated density ensemble to an (M, G) array
- Precondition checks shared by every plotting entry point
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Tuple
import warnings

import numpy as np


# Fewer simulations than this give unstable 2.5/97.5 percentile estimates
RECOMMENDED_MIN_SIMULATIONS = 200


class InvalidArgument(ValueError):
    """Raised when plot inputs are missing or have inconsistent shapes."""


class SmallEnsembleWarning(UserWarning):
    """Issued when too few simulated densities are supplied for stable tails."""


@dataclass(frozen=True)
class DensityCurve:
    """
    Kernel density estimate evaluated on a grid.

    Attributes
    ----------
    x : np.ndarray
        Grid points of shape (G,).
    y : np.ndarray
        Density values at the grid points, shape (G,).
    """
    x: np.ndarray
    y: np.ndarray

    def __post_init__(self):
        x = np.asarray(self.x, dtype=np.float64).ravel()
        y = np.asarray(self.y, dtype=np.float64).ravel()
        if len(x) != len(y):
            raise InvalidArgument(
                f"Density curve x and y differ in length: {len(x)} != {len(y)}"
            )
        object.__setattr__(self, 'x', x)
        object.__setattr__(self, 'y', y)

    def __len__(self) -> int:
        return len(self.x)

    @classmethod
    def from_any(cls, obj) -> "DensityCurve":
        """
        Build a curve from a DensityCurve, an {'x', 'y'} mapping or an (x, y) pair.
        """
        if isinstance(obj, cls):
            return obj
        if isinstance(obj, Mapping):
            try:
                return cls(obj['x'], obj['y'])
            except KeyError as e:
                raise InvalidArgument(f"Density mapping is missing key {e}") from e
        try:
            x, y = obj
        except (TypeError, ValueError) as e:
            raise InvalidArgument(
                f"Expected a density curve with x and y, got {type(obj).__name__}"
            ) from e
        return cls(x, y)


def as_density_ensemble(densrand, n_grid: int) -> np.ndarray:
    """
    Coerce simulated densities to a float array of shape (M, G).

    Missing entries (None or NaN) are kept as NaN.

    Parameters
    ----------
    densrand : array-like
        Simulated densities, one row per simulated data set.
    n_grid : int
        Expected number of grid points G.

    Returns
    -------
    np.ndarray
        Array of shape (M, G).
    """
    try:
        ensemble = np.array(densrand, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Simulated densities are not numeric: {e}") from e

    if ensemble.ndim != 2:
        raise InvalidArgument(
            f"Expected simulated densities of shape (M, G), got {ensemble.shape}"
        )
    if ensemble.shape[0] < 1:
        raise InvalidArgument("Need at least one simulated density")
    if ensemble.shape[1] != n_grid:
        raise InvalidArgument(
            f"Simulated densities have {ensemble.shape[1]} grid points, "
            f"observed density has {n_grid}"
        )
    return ensemble


def validate_inputs(
    densdat,
    densrand,
    include_avail: bool = False,
    densavail=None,
    stacklevel: int = 2
) -> Tuple[DensityCurve, np.ndarray, Optional[DensityCurve]]:
    """
    Check and coerce the inputs of a UHC density plot.

    Parameters
    ----------
    densdat : DensityCurve or mapping or (x, y)
        Density at the used locations.
    densrand : array-like
        Simulated densities of shape (M, G).
    include_avail : bool
        Whether the available density will be drawn.
    densavail : DensityCurve or mapping or (x, y), optional
        Density at the available locations. Required if include_avail.
    stacklevel : int
        Stack level of the SmallEnsembleWarning, counted from this function.

    Returns
    -------
    tuple
        (densdat, densrand, densavail) with densavail None only when it was
        not supplied.
    """
    if densdat is None:
        raise InvalidArgument("densdat is required")
    densdat = DensityCurve.from_any(densdat)
    if len(densdat) < 1:
        raise InvalidArgument("densdat must contain at least one grid point")

    ensemble = as_density_ensemble(densrand, len(densdat))

    if include_avail and densavail is None:
        raise InvalidArgument("densavail is required when include_avail is True")
    if densavail is not None:
        densavail = DensityCurve.from_any(densavail)

    n_sims = ensemble.shape[0]
    if n_sims < RECOMMENDED_MIN_SIMULATIONS:
        warnings.warn(
            f"Only {n_sims} simulated densities; at least "
            f"{RECOMMENDED_MIN_SIMULATIONS} are recommended for stable "
            f"2.5/97.5 percentiles",
            SmallEnsembleWarning,
            stacklevel=stacklevel,
        )

    return densdat, ensemble, densavail
