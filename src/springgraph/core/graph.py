"""
Graph: the node set and edge set that the layout simulation moves around.

Nodes are identified by their index 0..N-1. Per-node state lives in
column arrays so the force field can work on the whole graph at once:
- positions: [N, 2]
- velocities: [N, 2]
- anchored: [N] (True where the position is pinned by the integrator)

Edges are unordered pairs stored as (min, max). Length, midpoint and
orientation are derived from the current positions on demand.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class Node:
    """Snapshot of one node's state."""

    id: int
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    anchored: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    @property
    def velocity(self) -> tuple[float, float]:
        return self.vx, self.vy


class Graph:
    """
    Undirected simple graph with 2D node positions.

    Invariants:
    - every edge endpoint is a valid node index
    - no self-loops
    - no duplicate unordered pairs (re-adding an edge is a no-op)
    """

    def __init__(self, positions: np.ndarray):
        positions = np.asarray(positions, dtype=np.float64)
        if positions.ndim != 2 or positions.shape[1] != 2:
            raise ValueError(
                f"positions must have shape (N, 2), got {positions.shape}"
            )

        n = positions.shape[0]
        self.positions = positions.copy()
        self.velocities = np.zeros((n, 2), dtype=np.float64)
        self.anchored = np.zeros(n, dtype=bool)

        self._adjacency: list[set[int]] = [set() for _ in range(n)]
        self._edges: set[tuple[int, int]] = set()
        self._adjacency_matrix: np.ndarray | None = None

    @property
    def n_nodes(self) -> int:
        return self.positions.shape[0]

    @property
    def n_edges(self) -> int:
        return len(self._edges)

    @property
    def edges(self) -> list[tuple[int, int]]:
        """Edges as sorted (a, b) pairs with a < b."""
        return sorted(self._edges)

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.n_nodes:
            raise ValueError(f"Unknown node {node} (graph has {self.n_nodes} nodes)")

    def add_edge(self, a: int, b: int) -> bool:
        """
        Connect nodes a and b.

        Returns True if the edge was added, False if it already existed.
        Raises ValueError for self-loops or unknown nodes.
        """
        self._check_node(a)
        self._check_node(b)
        if a == b:
            raise ValueError(f"Self-loop on node {a} is not allowed")

        key = (a, b) if a < b else (b, a)
        if key in self._edges:
            return False

        self._edges.add(key)
        self._adjacency[a].add(b)
        self._adjacency[b].add(a)
        self._adjacency_matrix = None
        return True

    def has_edge(self, a: int, b: int) -> bool:
        key = (a, b) if a < b else (b, a)
        return key in self._edges

    def neighbors(self, node: int) -> set[int]:
        """Neighbors of a node. The returned set must not be mutated."""
        self._check_node(node)
        return self._adjacency[node]

    def degree(self, node: int) -> int:
        return len(self.neighbors(node))

    def iter_pairs(self) -> Iterator[tuple[int, int]]:
        """Yield every unordered node pair (i, j) with i < j exactly once."""
        n = self.n_nodes
        for i in range(n):
            for j in range(i + 1, n):
                yield i, j

    def adjacency_matrix(self) -> np.ndarray:
        """Symmetric boolean [N, N] adjacency matrix (cached until the next add_edge)."""
        if self._adjacency_matrix is None:
            matrix = np.zeros((self.n_nodes, self.n_nodes), dtype=bool)
            if self._edges:
                idx = np.array(sorted(self._edges), dtype=np.int64)
                matrix[idx[:, 0], idx[:, 1]] = True
                matrix[idx[:, 1], idx[:, 0]] = True
            self._adjacency_matrix = matrix
        return self._adjacency_matrix

    def position(self, node: int) -> tuple[float, float]:
        self._check_node(node)
        x, y = self.positions[node]
        return float(x), float(y)

    def node(self, node: int) -> Node:
        self._check_node(node)
        x, y = self.positions[node]
        vx, vy = self.velocities[node]
        return Node(
            id=node,
            x=float(x),
            y=float(y),
            vx=float(vx),
            vy=float(vy),
            anchored=bool(self.anchored[node]),
        )

    def iter_nodes(self) -> Iterator[Node]:
        for i in range(self.n_nodes):
            yield self.node(i)

    # ─── Derived edge attributes (recomputed from current positions) ───

    def _edge_endpoints(self) -> tuple[np.ndarray, np.ndarray]:
        if not self._edges:
            empty = np.zeros((0, 2), dtype=np.float64)
            return empty, empty
        idx = np.array(self.edges, dtype=np.int64)
        return self.positions[idx[:, 0]], self.positions[idx[:, 1]]

    def edge_lengths(self) -> np.ndarray:
        """Euclidean length of each edge, in `edges` order."""
        start, end = self._edge_endpoints()
        return np.linalg.norm(end - start, axis=1)

    def edge_midpoints(self) -> np.ndarray:
        start, end = self._edge_endpoints()
        return 0.5 * (start + end)

    def edge_angles(self) -> np.ndarray:
        """Orientation of each edge in radians, measured from a to b."""
        start, end = self._edge_endpoints()
        delta = end - start
        return np.arctan2(delta[:, 1], delta[:, 0])

    def segments(self) -> np.ndarray:
        """Edge segments as [E, 2, 2] for line-collection drawing."""
        start, end = self._edge_endpoints()
        return np.stack([start, end], axis=1)
