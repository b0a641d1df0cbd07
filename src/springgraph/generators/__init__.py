"""
Generators: build the fixed graph once at startup.

All strategies place N nodes uniformly inside the window and differ only in
which pairs they connect:
- BernoulliGenerator: every pair with probability p_edge
- ProximityGenerator: pairs closer than proximity_factor * d_min
- DelaunayGenerator: Delaunay triangulation edges with probability p_edge
"""

from __future__ import annotations
from typing import Literal

from springgraph.generators.base import GeneratorConfig, GraphGenerator, uniform_positions
from springgraph.generators.bernoulli import BernoulliGenerator
from springgraph.generators.proximity import ProximityGenerator
from springgraph.generators.delaunay import (
    DelaunayGenerator,
    chain_edges,
    triangulation_edges,
)

GeneratorKind = Literal["bernoulli", "proximity", "delaunay"]

GENERATORS: dict[str, type[GraphGenerator]] = {
    "bernoulli": BernoulliGenerator,
    "proximity": ProximityGenerator,
    "delaunay": DelaunayGenerator,
}


def create_generator(
    kind: GeneratorKind = "delaunay",
    config: GeneratorConfig | None = None,
) -> GraphGenerator:
    """
    Factory for a graph generator.

    Args:
        kind: "bernoulli", "proximity" or "delaunay"
        config: Generator parameters (defaults if None)
    """
    if kind not in GENERATORS:
        raise ValueError(
            f"Unknown generator kind: {kind} (expected one of {sorted(GENERATORS)})"
        )
    return GENERATORS[kind](config if config is not None else GeneratorConfig())


__all__ = [
    "GeneratorConfig",
    "GraphGenerator",
    "uniform_positions",
    "BernoulliGenerator",
    "ProximityGenerator",
    "DelaunayGenerator",
    "chain_edges",
    "triangulation_edges",
    "GeneratorKind",
    "GENERATORS",
    "create_generator",
]
