"""
Base classes for graph generators.

A generator runs once at startup. It:
- Places N nodes uniformly at random inside the window (or takes explicit positions)
- Decides which node pairs are connected
- Returns the fully-populated Graph

IMPORTANT: Generators take the session's random generator explicitly.
Nothing here touches global numpy random state, so a seeded session
always builds the same graph.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging

import numpy as np

from springgraph.core.graph import Graph

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    """Configuration shared by all generators."""

    n_nodes: int = 10  # Number of nodes to place
    half_width: float = 100.0  # Window half-extent along x (window centered at origin)
    half_height: float = 100.0  # Window half-extent along y
    p_edge: float = 0.5  # Keep probability per candidate edge (bernoulli, delaunay)
    proximity_factor: float = 1.5  # Edge iff distance < factor * d_min (proximity)

    def __post_init__(self):
        if self.n_nodes < 1:
            raise ValueError(f"n_nodes must be >= 1, got {self.n_nodes}")
        if self.half_width <= 0 or self.half_height <= 0:
            raise ValueError(
                "Window extents must be positive, got "
                f"half_width={self.half_width}, half_height={self.half_height}"
            )
        if not 0.0 <= self.p_edge <= 1.0:
            raise ValueError(f"p_edge must be in [0, 1], got {self.p_edge}")
        if self.proximity_factor <= 0:
            raise ValueError(
                f"proximity_factor must be > 0, got {self.proximity_factor}"
            )


def uniform_positions(
    rng: np.random.Generator,
    n_nodes: int,
    half_width: float,
    half_height: float,
) -> np.ndarray:
    """Draw [n_nodes, 2] positions uniformly inside the centered window."""
    xs = rng.uniform(-half_width, half_width, size=n_nodes)
    ys = rng.uniform(-half_height, half_height, size=n_nodes)
    return np.column_stack([xs, ys])


class GraphGenerator(ABC):
    """
    Base class for graph construction strategies.

    Subclasses only decide connectivity; placement and validation live here.
    """

    name: str = "base"

    def __init__(self, config: GeneratorConfig):
        self.config = config

    def generate(
        self,
        rng: np.random.Generator,
        positions: np.ndarray | None = None,
    ) -> Graph:
        """
        Build a graph.

        Args:
            rng: Session-owned random generator
            positions: Optional explicit [N, 2] node positions. When given,
                N is taken from the array instead of config.n_nodes.

        Returns:
            Graph with positions set and edges added
        """
        if positions is None:
            cfg = self.config
            positions = uniform_positions(rng, cfg.n_nodes, cfg.half_width, cfg.half_height)
        else:
            positions = np.asarray(positions, dtype=np.float64)
            if positions.ndim != 2 or positions.shape[1] != 2 or len(positions) < 1:
                raise ValueError(
                    f"positions must have shape (N, 2) with N >= 1, got {positions.shape}"
                )

        graph = Graph(positions)
        self.connect(graph, rng)

        logger.info(
            "%s generator: %d nodes, %d edges",
            self.name, graph.n_nodes, graph.n_edges,
        )
        return graph

    @abstractmethod
    def connect(self, graph: Graph, rng: np.random.Generator) -> None:
        """
        Add this strategy's edges to a graph whose nodes are already placed.

        Args:
            graph: Graph with positions and no edges
            rng: Session-owned random generator
        """
        ...
