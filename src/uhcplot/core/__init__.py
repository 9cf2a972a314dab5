"""
Core inputs and geometry.
"""

from .density import (
    RECOMMENDED_MIN_SIMULATIONS,
    InvalidArgument,
    SmallEnsembleWarning,
    DensityCurve,
    as_density_ensemble,
    validate_inputs,
)
from .geometry import band_polygon

__all__ = [
    'RECOMMENDED_MIN_SIMULATIONS',
    'InvalidArgument',
    'SmallEnsembleWarning',
    'DensityCurve',
    'as_density_ensemble',
    'validate_inputs',
    'band_polygon',
]
