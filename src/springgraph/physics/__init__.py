"""
Physics: the per-tick layout simulation.

- ForceField: repulsion + springs + walls → fresh velocities
- Integrator: Euler step, anchoring, barycenter heuristic
"""

from springgraph.physics.forces import (
    DEFAULT_EPSILON,
    ForceField,
    pair_geometry,
    repulsion,
    spring,
    walls,
)
from springgraph.physics.integrator import Integrator, IntegratorConfig, anchor_positions

__all__ = [
    "DEFAULT_EPSILON",
    "ForceField",
    "pair_geometry",
    "repulsion",
    "spring",
    "walls",
    "Integrator",
    "IntegratorConfig",
    "anchor_positions",
]
