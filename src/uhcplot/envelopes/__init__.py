"""
Simulation envelope computation.
"""

from .simulation import (
    DEFAULT_PROBS,
    Envelope,
    simulation_envelope,
    density_limits,
    grid_limits,
)

__all__ = [
    'DEFAULT_PROBS',
    'Envelope',
    'simulation_envelope',
    'density_limits',
    'grid_limits',
]
