"""
springgraph: random graphs laid out by a live force simulation.

A graph is generated once (Bernoulli, proximity-threshold or Delaunay edges
over uniformly placed nodes), then laid out continuously:
- every node pair repels with an inverse-square "electric" force
- every edge is a linear spring with a rest length
- the window edges push nodes back inward
- optionally, some nodes are pinned to a circle and one random node per tick
  jumps to the centroid of its neighbors

The layout parameters can be edited while the simulation runs.
"""

__version__ = "0.1.0"
