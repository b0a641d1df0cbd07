"""
Integrator: advance node positions by one tick.

Each tick, in order:
1. Euler step: positions += velocities * dt (dt is the elapsed time, so the
   step size varies frame to frame; no damping)
2. Anchoring: the first `anchored_count` nodes are placed on a circle,
   overriding whatever step 1 did to them
3. Barycenter: one random non-anchored node jumps to the mean position of
   its neighbors (skipped for isolated nodes)

Steps 2 and 3 are optional layout heuristics layered on top of the forces.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from springgraph.core.graph import Graph


@dataclass
class IntegratorConfig:
    """Configuration for the integrator's optional rules."""

    anchored_count: int = 0  # Nodes 0..anchored_count-1 are pinned to a circle
    anchor_radius: float = 100.0  # Radius of the anchor circle
    barycenter: bool = False  # Move one random node to its neighbors' centroid per tick

    def __post_init__(self):
        if self.anchored_count < 0:
            raise ValueError(f"anchored_count must be >= 0, got {self.anchored_count}")
        if self.anchored_count > 0 and self.anchor_radius <= 0:
            raise ValueError(f"anchor_radius must be > 0, got {self.anchor_radius}")


def anchor_positions(count: int, radius: float) -> np.ndarray:
    """[count, 2] points evenly spaced on a circle, angle = index * 2π / count."""
    theta = np.arange(count) * 2.0 * np.pi / max(count, 1)
    return radius * np.column_stack([np.cos(theta), np.sin(theta)])


class Integrator:
    """
    Applies velocities and the anchoring/barycenter rules to a graph.

    The anchored count is checked against the graph size up front so a bad
    configuration fails before the first tick.
    """

    def __init__(self, config: IntegratorConfig, graph: "Graph"):
        if config.anchored_count > graph.n_nodes:
            raise ValueError(
                f"anchored_count={config.anchored_count} exceeds the number "
                f"of nodes ({graph.n_nodes})"
            )
        self.config = config
        self.graph = graph
        self._anchors = anchor_positions(config.anchored_count, config.anchor_radius)

        graph.anchored[:] = False
        graph.anchored[:config.anchored_count] = True
        self.apply_anchors()

    @property
    def free_nodes(self) -> np.ndarray:
        """Indices of nodes not pinned by anchoring."""
        return np.arange(self.config.anchored_count, self.graph.n_nodes)

    def step(self, dt: float, rng: np.random.Generator | None = None) -> int | None:
        """
        Advance one tick.

        Args:
            dt: Elapsed time since the previous tick (>= 0)
            rng: Session random generator, required when barycenter is enabled

        Returns:
            The node moved by the barycenter rule, or None
        """
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")

        self.graph.positions += self.graph.velocities * dt
        self.apply_anchors()

        if self.config.barycenter:
            if rng is None:
                raise ValueError("barycenter rule needs a random generator")
            return self.apply_barycenter(rng)
        return None

    def apply_anchors(self) -> None:
        """Overwrite anchored nodes with their fixed circle positions."""
        count = self.config.anchored_count
        if count:
            self.graph.positions[:count] = self._anchors

    def apply_barycenter(self, rng: np.random.Generator) -> int | None:
        """
        Move one random free node to the centroid of its neighbors.

        Returns:
            The chosen node, or None if no free node exists. A chosen node
            with no neighbors is returned but left where it is.
        """
        free = self.free_nodes
        if len(free) == 0:
            return None

        node = int(rng.choice(free))
        self.move_to_barycenter(node)
        return node

    def move_to_barycenter(self, node: int) -> bool:
        """Place `node` at its neighbors' mean position. False if it has none."""
        neighbors = self.graph.neighbors(node)
        if not neighbors:
            return False
        idx = np.fromiter(neighbors, dtype=np.int64, count=len(neighbors))
        self.graph.positions[node] = self.graph.positions[idx].mean(axis=0)
        return True
