"""
Core primitives.

This layer knows nothing about forces or generation strategies.
It only knows:
- Nodes with a position, a velocity and an anchored flag
- Edges as unordered node pairs (no self-loops, no duplicates)
- The live layout parameters read by the simulation each tick
"""

from springgraph.core.graph import Graph, Node
from springgraph.core.config import KEY_BINDINGS, TUNABLE_FIELDS, LayoutConfig

__all__ = [
    "Graph",
    "Node",
    "LayoutConfig",
    "KEY_BINDINGS",
    "TUNABLE_FIELDS",
]
