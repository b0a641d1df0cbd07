"""
Visualization utilities.

- Graph drawing at current positions
- Side-by-side generator comparison
- Edge length histograms
"""

from springgraph.viz.graph import (
    plot_graph,
    update_artists,
    plot_generators,
    plot_edge_length_histogram,
    save_figure,
)

__all__ = [
    "plot_graph",
    "update_artists",
    "plot_generators",
    "plot_edge_length_histogram",
    "save_figure",
]
