"""
Graph drawing with matplotlib.

Read-only views of a Graph: edges as a LineCollection, nodes as a scatter,
anchored nodes highlighted. Nothing here feeds back into the simulation.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.collections import LineCollection, PathCollection
from matplotlib.figure import Figure

if TYPE_CHECKING:
    from springgraph.core.graph import Graph


NODE_COLOR = "#3b6ea8"
ANCHOR_COLOR = "#d1495b"
EDGE_COLOR = "#9a9a9a"


def plot_graph(
    graph: "Graph",
    ax: Axes | None = None,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    node_size: float = 40.0,
    edge_width: float = 1.0,
    window: tuple[float, float] | None = None,
) -> tuple[Figure, Axes, LineCollection, PathCollection]:
    """
    Draw a graph at its current positions.

    Args:
        graph: Graph to draw
        ax: Existing axes (creates new if None)
        title: Plot title
        node_size: Scatter marker size
        edge_width: Edge line width
        window: Optional (half_width, half_height) to fix the view and outline the window

    Returns:
        (fig, ax, edges, nodes) so callers can update the artists in place
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    edges = LineCollection(
        graph.segments(), colors=EDGE_COLOR, linewidths=edge_width, zorder=1
    )
    ax.add_collection(edges)

    nodes = ax.scatter(
        graph.positions[:, 0],
        graph.positions[:, 1],
        s=node_size,
        c=node_colors(graph),
        edgecolors="white",
        linewidths=0.8,
        zorder=2,
    )

    if window is not None:
        hw, hh = window
        ax.plot(
            [-hw, hw, hw, -hw, -hw], [-hh, -hh, hh, hh, -hh],
            color="black", linewidth=0.5, linestyle="--", zorder=0,
        )
        ax.set_xlim(-1.1 * hw, 1.1 * hw)
        ax.set_ylim(-1.1 * hh, 1.1 * hh)
    else:
        ax.autoscale_view()

    ax.set_aspect("equal")
    if title:
        ax.set_title(title)

    return fig, ax, edges, nodes


def node_colors(graph: "Graph") -> list[str]:
    return [ANCHOR_COLOR if anchored else NODE_COLOR for anchored in graph.anchored]


def update_artists(
    graph: "Graph",
    edges: LineCollection,
    nodes: PathCollection,
) -> None:
    """Move existing artists to the graph's current positions."""
    edges.set_segments(graph.segments())
    nodes.set_offsets(graph.positions)


def plot_generators(
    graphs: Sequence["Graph"],
    titles: Sequence[str],
    figsize: tuple[float, float] | None = None,
    window: tuple[float, float] | None = None,
) -> Figure:
    """Side-by-side comparison of graphs, e.g. one per generator."""
    n = len(graphs)
    if figsize is None:
        figsize = (5 * n, 5)

    fig, axes = plt.subplots(1, n, figsize=figsize, squeeze=False)
    for ax, graph, title in zip(axes[0], graphs, titles):
        plot_graph(graph, ax=ax, window=window)
        ax.set_title(f"{title}\n{graph.n_nodes} nodes, {graph.n_edges} edges")

    fig.tight_layout()
    return fig


def plot_edge_length_histogram(
    graph: "Graph",
    spring_length: float | None = None,
    ax: Axes | None = None,
    bins: int = 20,
) -> tuple[Figure, Axes]:
    """Histogram of current edge lengths, with the spring rest length marked."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 4))
    else:
        fig = ax.figure

    lengths = graph.edge_lengths()
    if len(lengths):
        ax.hist(lengths, bins=bins, color=NODE_COLOR, alpha=0.8)
    if spring_length is not None:
        ax.axvline(spring_length, color=ANCHOR_COLOR, linestyle="--", label="rest length")
        ax.legend(loc="upper right")

    ax.set_xlabel("edge length")
    ax.set_ylabel("count")
    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
