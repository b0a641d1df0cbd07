"""
ProximityGenerator: connect nodes that are "close" relative to the closest pair.

Two passes over all pairs:
1. d_min = smallest pairwise distance
2. edge (i, j) iff dist(i, j) < proximity_factor * d_min

The bound is strict, so with proximity_factor > 1 the closest pair(s) are
always connected and ties at d_min are all included. If two nodes coincide,
d_min is 0 and nothing passes the strict bound.
"""

from __future__ import annotations

import numpy as np
from scipy.spatial.distance import pdist

from springgraph.core.graph import Graph
from springgraph.generators.base import GraphGenerator


class ProximityGenerator(GraphGenerator):
    """Threshold graph relative to the minimum pairwise distance."""

    name = "proximity"

    def connect(self, graph: Graph, rng: np.random.Generator) -> None:
        n = graph.n_nodes
        if n < 2:
            return

        # Pass 1: minimum over all pairs (pdist order is the row-major upper triangle)
        distances = pdist(graph.positions)
        bound = self.config.proximity_factor * distances.min()

        # Pass 2: strict threshold
        rows, cols = np.triu_indices(n, k=1)
        close = distances < bound
        for i, j in zip(rows[close], cols[close]):
            graph.add_edge(int(i), int(j))
