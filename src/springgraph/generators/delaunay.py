"""
DelaunayGenerator: sparse planar skeleton from a Delaunay triangulation.

Candidate edges are the undirected edges of the triangulation of the node
positions (at most 3N - 6 of them). Each candidate is then kept with
probability p_edge, the same coin toss the Bernoulli generator uses.

Degenerate inputs never raise:
- fewer than 3 distinct points
- all points collinear
- any other Qhull failure
fall back to a chain that links the points in order along their direction of
largest spread. For collinear points that chain is exactly the Delaunay graph.
"""

from __future__ import annotations
import logging

import numpy as np
from scipy.spatial import Delaunay, QhullError

from springgraph.core.graph import Graph
from springgraph.generators.base import GraphGenerator

logger = logging.getLogger(__name__)


def _is_degenerate(points: np.ndarray) -> bool:
    """True if the points span less than a 2D area."""
    distinct = np.unique(points, axis=0)
    if len(distinct) < 3:
        return True
    centered = distinct - distinct.mean(axis=0)
    return np.linalg.matrix_rank(centered) < 2


def chain_edges(points: np.ndarray) -> np.ndarray:
    """
    Link points in order of their projection on the principal axis.

    Returns:
        [max(N - 1, 0), 2] array of (a, b) index pairs with a < b
    """
    n = len(points)
    if n < 2:
        return np.zeros((0, 2), dtype=np.int64)

    centered = points - points.mean(axis=0)
    if np.allclose(centered, 0.0):
        axis = np.array([1.0, 0.0])
    else:
        # First right singular vector = direction of largest spread
        axis = np.linalg.svd(centered, full_matrices=False)[2][0]

    order = np.argsort(centered @ axis, kind="stable")
    pairs = np.column_stack([order[:-1], order[1:]])
    return np.sort(pairs, axis=1).astype(np.int64)


def triangulation_edges(points: np.ndarray) -> np.ndarray | None:
    """
    Undirected edges of the Delaunay triangulation of `points`.

    Returns:
        [E, 2] array of unique (a, b) pairs with a < b, or None if the point
        set is degenerate and cannot be triangulated
    """
    if _is_degenerate(points):
        return None
    try:
        tri = Delaunay(points)
    except QhullError:
        return None

    simplices = tri.simplices
    pairs = np.concatenate([
        simplices[:, [0, 1]],
        simplices[:, [1, 2]],
        simplices[:, [0, 2]],
    ])
    pairs = np.sort(pairs, axis=1)
    return np.unique(pairs, axis=0).astype(np.int64)


class DelaunayGenerator(GraphGenerator):
    """Keep each Delaunay triangulation edge with probability p_edge."""

    name = "delaunay"

    def candidate_edges(self, graph: Graph) -> np.ndarray:
        """Triangulation edges, or the fallback chain for degenerate layouts."""
        edges = triangulation_edges(graph.positions)
        if edges is None:
            logger.warning(
                "Delaunay triangulation is degenerate for %d nodes; "
                "falling back to a chain along the principal axis",
                graph.n_nodes,
            )
            edges = chain_edges(graph.positions)
        return edges

    def connect(self, graph: Graph, rng: np.random.Generator) -> None:
        edges = self.candidate_edges(graph)
        if len(edges) == 0:
            return

        keep = rng.random(len(edges)) < self.config.p_edge
        for a, b in edges[keep]:
            graph.add_edge(int(a), int(b))
