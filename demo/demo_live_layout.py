#!/usr/bin/env python3
"""
Demo: Live Force-Directed Layout

Runs the simulation inside a matplotlib animation. Each frame ticks the
simulation with the wall-clock time since the previous frame and redraws.

Keys (lower-case multiplies by the step factor, upper-case divides):
    l / L   spring length
    k / K   spring force
    s / S   spring scale
    e / E   electric force

Usage:
    python demo/demo_live_layout.py [bernoulli|proximity|delaunay]
"""

import sys

import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from springgraph.core import KEY_BINDINGS, LayoutConfig
from springgraph.generators import GeneratorConfig
from springgraph.logging_config import setup_logging
from springgraph.physics import IntegratorConfig
from springgraph.simulation import create_simulation
from springgraph.viz import plot_graph, update_artists


def _status(sim) -> str:
    cfg = sim.layout_config
    return (
        f"length={cfg.spring_length:.2f}  force={cfg.spring_force:.2f}  "
        f"scale={cfg.spring_scale:.2f}  electric={cfg.electric_force:.2f}"
    )


def main():
    setup_logging()
    kind = sys.argv[1] if len(sys.argv) > 1 else "delaunay"

    half_extent = 60.0
    sim = create_simulation(
        kind,
        GeneratorConfig(
            n_nodes=30,
            half_width=half_extent,
            half_height=half_extent,
            p_edge=0.8,
            proximity_factor=3.0,
        ),
        LayoutConfig(
            spring_length=15.0,
            spring_force=0.5,
            electric_force=200.0,
            wall_repulsion=50.0,
        ),
        IntegratorConfig(anchored_count=3, anchor_radius=40.0, barycenter=True),
    )

    # Free our keys from matplotlib's default shortcuts (save, log scale)
    for keymap in ("keymap.save", "keymap.xscale", "keymap.yscale"):
        plt.rcParams[keymap] = [k for k in plt.rcParams[keymap] if k not in KEY_BINDINGS]

    fig, ax, edges, nodes = plot_graph(sim.graph, window=(half_extent, half_extent))
    ax.set_title(_status(sim), fontsize=9)

    def on_key(event):
        if event.key in KEY_BINDINGS and sim.handle_key(event.key):
            ax.set_title(_status(sim), fontsize=9)

    def on_frame(_frame):
        sim.tick_wallclock()
        update_artists(sim.graph, edges, nodes)
        return edges, nodes

    fig.canvas.mpl_connect("key_press_event", on_key)
    # Keep a reference so the animation is not garbage collected
    animation = FuncAnimation(fig, on_frame, interval=16, blit=False, cache_frame_data=False)
    plt.show()
    return animation


if __name__ == "__main__":
    main()
