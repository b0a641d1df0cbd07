"""
BernoulliGenerator: Erdős–Rényi style random graph.

Every unordered pair gets its own independent coin toss with probability
p_edge. O(N²) draws; the result ignores node positions entirely.
"""

from __future__ import annotations

import numpy as np

from springgraph.core.graph import Graph
from springgraph.generators.base import GraphGenerator


class BernoulliGenerator(GraphGenerator):
    """Include each of the N·(N−1)/2 pairs independently with probability p_edge."""

    name = "bernoulli"

    def connect(self, graph: Graph, rng: np.random.Generator) -> None:
        p_edge = self.config.p_edge
        for i, j in graph.iter_pairs():
            # random() is in [0, 1): p_edge=1 keeps every pair, p_edge=0 none
            if rng.random() < p_edge:
                graph.add_edge(i, j)
