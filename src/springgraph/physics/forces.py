"""
ForceField: velocities for every node from the current positions.

Three contributions, summed linearly and recomputed from scratch each tick
(nothing is carried over from the previous tick):

1. Repulsion: every pair pushes apart with electric_force / d²
2. Springs: adjacent pairs move along their axis with
       spring_force * (d - spring_length) / spring_scale
   i.e. a LINEAR law in the displacement. Stretched springs pull together,
   compressed ones push apart, and d == spring_length gives exactly zero.
3. Walls: each of the four window edges pushes inward with
       wall_repulsion / (distance to that edge)²
   The push is never clamped, so nodes can still leave the window.

Pairs closer than `epsilon` are skipped and wall distances are floored at
`epsilon`, so coincident nodes never produce NaN or Inf.

All-pairs work is O(N²) per tick. This is fine for tens of nodes; larger
graphs would need spatial partitioning (quad-tree / Barnes-Hut).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from springgraph.core.config import LayoutConfig
    from springgraph.core.graph import Graph


DEFAULT_EPSILON = 1e-6


def pair_geometry(
    positions: np.ndarray,
    epsilon: float = DEFAULT_EPSILON,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Pairwise geometry for all node pairs.

    Returns:
        unit: [N, N, 2] unit vectors from i to j (zero where invalid)
        dist: [N, N] distances
        valid: [N, N] True where dist >= epsilon (False on the diagonal)
    """
    delta = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
    dist = np.linalg.norm(delta, axis=2)
    valid = dist >= epsilon

    safe = np.where(valid, dist, 1.0)
    unit = np.where(valid[..., np.newaxis], delta / safe[..., np.newaxis], 0.0)
    return unit, dist, valid


def repulsion(
    positions: np.ndarray,
    electric_force: float,
    epsilon: float = DEFAULT_EPSILON,
    geometry: tuple[np.ndarray, np.ndarray, np.ndarray] | None = None,
) -> np.ndarray:
    """Inverse-square repulsion between all node pairs. Returns [N, 2]."""
    unit, dist, valid = geometry if geometry is not None else pair_geometry(positions, epsilon)

    safe = np.where(valid, dist, 1.0)
    magnitude = np.where(valid, electric_force / safe**2, 0.0)

    # Force on i points away from j, i.e. along -unit[i, j]
    return -(unit * magnitude[..., np.newaxis]).sum(axis=1)


def spring(
    positions: np.ndarray,
    adjacency: np.ndarray,
    spring_length: float,
    spring_force: float,
    spring_scale: float,
    epsilon: float = DEFAULT_EPSILON,
    geometry: tuple[np.ndarray, np.ndarray, np.ndarray] | None = None,
) -> np.ndarray:
    """Linear spring force along each edge. Returns [N, 2]."""
    unit, dist, valid = geometry if geometry is not None else pair_geometry(positions, epsilon)

    active = adjacency & valid
    magnitude = np.where(
        active,
        spring_force * (dist - spring_length) / spring_scale,
        0.0,
    )

    # Positive magnitude (stretched) moves i toward j
    return (unit * magnitude[..., np.newaxis]).sum(axis=1)


def walls(
    positions: np.ndarray,
    half_width: float,
    half_height: float,
    wall_repulsion: float,
    epsilon: float = DEFAULT_EPSILON,
) -> np.ndarray:
    """Inverse-square push away from the four window edges. Returns [N, 2]."""
    half_extent = np.array([half_width, half_height])

    low = np.maximum(np.abs(positions + half_extent), epsilon)
    high = np.maximum(np.abs(half_extent - positions), epsilon)

    return wall_repulsion / low**2 - wall_repulsion / high**2


@dataclass
class ForceField:
    """Evaluates all three force contributions for a graph."""

    half_width: float
    half_height: float
    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self):
        if self.half_width <= 0 or self.half_height <= 0:
            raise ValueError(
                "Window extents must be positive, got "
                f"half_width={self.half_width}, half_height={self.half_height}"
            )
        if self.epsilon <= 0:
            raise ValueError(f"epsilon must be > 0, got {self.epsilon}")

    def compute(self, graph: "Graph", config: "LayoutConfig") -> np.ndarray:
        """
        Net velocity for every node this tick.

        Args:
            graph: Graph with current positions and adjacency
            config: Layout parameters read for this tick

        Returns:
            [N, 2] velocities (fresh, not accumulated)
        """
        positions = graph.positions
        geometry = pair_geometry(positions, self.epsilon)

        velocities = repulsion(
            positions, config.electric_force, self.epsilon, geometry=geometry
        )
        velocities += spring(
            positions,
            graph.adjacency_matrix(),
            config.spring_length,
            config.spring_force,
            config.spring_scale,
            self.epsilon,
            geometry=geometry,
        )
        velocities += walls(
            positions,
            self.half_width,
            self.half_height,
            config.wall_repulsion,
            self.epsilon,
        )
        return velocities

    def apply(self, graph: "Graph", config: "LayoutConfig") -> np.ndarray:
        """Compute velocities and store them on the graph, replacing the old ones."""
        velocities = self.compute(graph, config)
        graph.velocities[:] = velocities
        return velocities
